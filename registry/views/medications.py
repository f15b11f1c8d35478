"""
Medication endpoints.

Full CRUD on ``/medications`` plus the per-patient filter
``/medications/patient/<patientId>`` (404 when the patient has none).
"""
from __future__ import annotations

import logging

from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from registry.serializers import validate_payload
from registry.serializers.medication import MedicationSerializer
from registry.services.medications import format_medication, medications, medications_for_patient
from .common import envelope, page_params, require

logger = logging.getLogger(__name__)


def _not_found(pk: str) -> str:
    return f'Medication with id = {pk} not found'


@api_view(['GET', 'POST'])
def medication_collection(request):
    if request.method == 'POST':
        fields = validate_payload(MedicationSerializer, request.data)
        med = medications.insert(fields)
        logger.info('medication created id=%s patient=%s', med.id, med.patient_id)
        return envelope(status.HTTP_201_CREATED, 'Medication created successfully', 'medication', format_medication(med))
    data = [format_medication(m) for m in medications.values()]
    return envelope(status.HTTP_200_OK, 'Medications retrieved successfully', 'medications', data)


@api_view(['GET', 'PUT', 'DELETE'])
def medication_detail(request, pk: str):
    if request.method == 'GET':
        med = require(medications.get(pk), _not_found(pk))
        return envelope(status.HTTP_200_OK, 'Medication retrieved successfully', 'medication', format_medication(med))
    if request.method == 'PUT':
        fields = validate_payload(MedicationSerializer, request.data)
        med = require(medications.update(pk, fields), _not_found(pk))
        logger.info('medication updated id=%s', pk)
        return envelope(status.HTTP_200_OK, 'Medication updated successfully', 'medication', format_medication(med))
    # DELETE
    med = require(medications.remove(pk), _not_found(pk))
    logger.info('medication deleted id=%s', pk)
    return envelope(status.HTTP_200_OK, 'Medication deleted successfully', 'medication', format_medication(med))


@api_view(['GET'])
def medication_pages(request):
    page, limit = page_params(request)
    return Response([format_medication(m) for m in medications.page(page, limit)])


@api_view(['GET'])
def medications_by_patient(request, pk: str):
    rows = require(medications_for_patient(pk) or None, f'Medications for patient with id = {pk} not found')
    return envelope(status.HTTP_200_OK, 'Medications retrieved successfully', 'medications',
                    [format_medication(m) for m in rows])
