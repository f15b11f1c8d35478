"""
Appointment endpoints.

Besides the usual collection/detail/paginate routes, appointments can be
listed per doctor or per patient.  Those filters answer 404 when nothing
matches.  ``patientId``/``doctorId`` are not checked against the doctor or
patient collections.
"""
from __future__ import annotations

import logging

from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from registry.serializers import validate_payload
from registry.serializers.appointment import AppointmentSerializer
from registry.services.appointments import (
    appointments,
    appointments_for_doctor,
    appointments_for_patient,
    format_appointment,
)
from .common import envelope, page_params, require

logger = logging.getLogger(__name__)


def _not_found(pk: str) -> str:
    return f'Appointment with id = {pk} not found'


@api_view(['GET', 'POST'])
def appointment_collection(request):
    if request.method == 'POST':
        fields = validate_payload(AppointmentSerializer, request.data)
        appt = appointments.insert(fields)
        logger.info('appointment created id=%s doctor=%s patient=%s', appt.id, appt.doctor_id, appt.patient_id)
        return envelope(status.HTTP_201_CREATED, 'Appointment created successfully', 'appointment', format_appointment(appt))
    data = [format_appointment(a) for a in appointments.values()]
    return envelope(status.HTTP_200_OK, 'Appointments retrieved successfully', 'appointments', data)


@api_view(['GET', 'PUT', 'DELETE'])
def appointment_detail(request, pk: str):
    if request.method == 'GET':
        appt = require(appointments.get(pk), _not_found(pk))
        return envelope(status.HTTP_200_OK, 'Appointment retrieved successfully', 'appointment', format_appointment(appt))
    if request.method == 'PUT':
        fields = validate_payload(AppointmentSerializer, request.data)
        appt = require(appointments.update(pk, fields), _not_found(pk))
        logger.info('appointment updated id=%s', pk)
        return envelope(status.HTTP_200_OK, 'Appointment updated successfully', 'appointment', format_appointment(appt))
    # DELETE
    appt = require(appointments.remove(pk), _not_found(pk))
    logger.info('appointment deleted id=%s', pk)
    return envelope(status.HTTP_200_OK, 'Appointment deleted successfully', 'appointment', format_appointment(appt))


@api_view(['GET'])
def appointment_pages(request):
    page, limit = page_params(request)
    return Response([format_appointment(a) for a in appointments.page(page, limit)])


@api_view(['GET'])
def appointments_by_doctor(request, pk: str):
    rows = require(appointments_for_doctor(pk) or None, f'Appointments for doctor with id = {pk} not found')
    return envelope(status.HTTP_200_OK, 'Appointments retrieved successfully', 'appointments',
                    [format_appointment(a) for a in rows])


@api_view(['GET'])
def appointments_by_patient(request, pk: str):
    rows = require(appointments_for_patient(pk) or None, f'Appointments for patient with id = {pk} not found')
    return envelope(status.HTTP_200_OK, 'Appointments retrieved successfully', 'appointments',
                    [format_appointment(a) for a in rows])
