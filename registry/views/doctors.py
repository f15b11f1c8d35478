"""
Doctor endpoints.

* ``POST /doctors`` / ``GET /doctors`` – create one doctor or list them all.
* ``GET|PUT|DELETE /doctors/<id>`` – fetch, overwrite or remove one doctor.
* ``GET /doctors/paginate/pages`` – a bare list slice selected by
  ``page`` and ``limit``.
"""
from __future__ import annotations

import logging

from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from registry.serializers import validate_payload
from registry.serializers.doctor import DoctorSerializer
from registry.services.doctors import doctors, format_doctor
from .common import envelope, page_params, require

logger = logging.getLogger(__name__)


def _not_found(pk: str) -> str:
    return f'Doctor with id = {pk} not found'


@api_view(['GET', 'POST'])
def doctor_collection(request):
    if request.method == 'POST':
        fields = validate_payload(DoctorSerializer, request.data)
        doctor = doctors.insert(fields)
        logger.info('doctor created id=%s', doctor.id)
        return envelope(status.HTTP_201_CREATED, 'Doctor created successfully', 'doctor', format_doctor(doctor))
    data = [format_doctor(d) for d in doctors.values()]
    return envelope(status.HTTP_200_OK, 'Doctors retrieved successfully', 'doctors', data)


@api_view(['GET', 'PUT', 'DELETE'])
def doctor_detail(request, pk: str):
    if request.method == 'GET':
        doctor = require(doctors.get(pk), _not_found(pk))
        return envelope(status.HTTP_200_OK, 'Doctor retrieved successfully', 'doctor', format_doctor(doctor))
    if request.method == 'PUT':
        fields = validate_payload(DoctorSerializer, request.data)
        doctor = require(doctors.update(pk, fields), _not_found(pk))
        logger.info('doctor updated id=%s', pk)
        return envelope(status.HTTP_200_OK, 'Doctor updated successfully', 'doctor', format_doctor(doctor))
    # DELETE
    doctor = require(doctors.remove(pk), _not_found(pk))
    logger.info('doctor deleted id=%s', pk)
    return envelope(status.HTTP_200_OK, 'Doctor deleted successfully', 'doctor', format_doctor(doctor))


@api_view(['GET'])
def doctor_pages(request):
    page, limit = page_params(request)
    return Response([format_doctor(d) for d in doctors.page(page, limit)])
