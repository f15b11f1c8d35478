"""
Patient endpoints.

Same shape as the doctor endpoints: a collection route for create/list, a
detail route for fetch/overwrite/remove and a paginated bare list.
"""
from __future__ import annotations

import logging

from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from registry.serializers import validate_payload
from registry.serializers.patient import PatientSerializer
from registry.services.patients import patients, format_patient
from .common import envelope, page_params, require

logger = logging.getLogger(__name__)


def _not_found(pk: str) -> str:
    return f'Patient with id = {pk} not found'


@api_view(['GET', 'POST'])
def patient_collection(request):
    if request.method == 'POST':
        fields = validate_payload(PatientSerializer, request.data)
        patient = patients.insert(fields)
        logger.info('patient created id=%s', patient.id)
        return envelope(status.HTTP_201_CREATED, 'Patient created successfully', 'patient', format_patient(patient))
    data = [format_patient(p) for p in patients.values()]
    return envelope(status.HTTP_200_OK, 'Patients retrieved successfully', 'patients', data)


@api_view(['GET', 'PUT', 'DELETE'])
def patient_detail(request, pk: str):
    if request.method == 'GET':
        patient = require(patients.get(pk), _not_found(pk))
        return envelope(status.HTTP_200_OK, 'Patient retrieved successfully', 'patient', format_patient(patient))
    if request.method == 'PUT':
        fields = validate_payload(PatientSerializer, request.data)
        patient = require(patients.update(pk, fields), _not_found(pk))
        logger.info('patient updated id=%s', pk)
        return envelope(status.HTTP_200_OK, 'Patient updated successfully', 'patient', format_patient(patient))
    # DELETE
    patient = require(patients.remove(pk), _not_found(pk))
    logger.info('patient deleted id=%s', pk)
    return envelope(status.HTTP_200_OK, 'Patient deleted successfully', 'patient', format_patient(patient))


@api_view(['GET'])
def patient_pages(request):
    page, limit = page_params(request)
    return Response([format_patient(p) for p in patients.page(page, limit)])
