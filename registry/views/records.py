"""
Patient record endpoints.

Records can be fetched one by one, listed, paginated, or filtered by the
doctor or the patient they were written for.  A filter that matches nothing
is a 404, mirroring a missing id.
"""
from __future__ import annotations

import logging

from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from registry.serializers import validate_payload
from registry.serializers.record import PatientRecordSerializer
from registry.services.records import (
    format_patient_record,
    patient_records,
    records_for_doctor,
    records_for_patient,
)
from .common import envelope, page_params, require

logger = logging.getLogger(__name__)


def _not_found(pk: str) -> str:
    return f'Patient record with id = {pk} not found'


@api_view(['GET', 'POST'])
def record_collection(request):
    if request.method == 'POST':
        fields = validate_payload(PatientRecordSerializer, request.data)
        record = patient_records.insert(fields)
        logger.info('patient record created id=%s', record.id)
        return envelope(status.HTTP_201_CREATED, 'Patient record created successfully', 'patientRecord',
                        format_patient_record(record))
    data = [format_patient_record(r) for r in patient_records.values()]
    return envelope(status.HTTP_200_OK, 'Patient records retrieved successfully', 'patientRecords', data)


@api_view(['GET', 'PUT', 'DELETE'])
def record_detail(request, pk: str):
    if request.method == 'GET':
        record = require(patient_records.get(pk), _not_found(pk))
        return envelope(status.HTTP_200_OK, 'Patient record retrieved successfully', 'patientRecord',
                        format_patient_record(record))
    if request.method == 'PUT':
        fields = validate_payload(PatientRecordSerializer, request.data)
        record = require(patient_records.update(pk, fields), _not_found(pk))
        logger.info('patient record updated id=%s', pk)
        return envelope(status.HTTP_200_OK, 'Patient record updated successfully', 'patientRecord',
                        format_patient_record(record))
    # DELETE
    record = require(patient_records.remove(pk), _not_found(pk))
    logger.info('patient record deleted id=%s', pk)
    return envelope(status.HTTP_200_OK, 'Patient record deleted successfully', 'patientRecord',
                    format_patient_record(record))


@api_view(['GET'])
def record_pages(request):
    page, limit = page_params(request)
    return Response([format_patient_record(r) for r in patient_records.page(page, limit)])


@api_view(['GET'])
def records_by_doctor(request, pk: str):
    rows = require(records_for_doctor(pk) or None, f'Patient records for doctor with id = {pk} not found')
    return envelope(status.HTTP_200_OK, 'Patient records retrieved successfully', 'patientRecords',
                    [format_patient_record(r) for r in rows])


@api_view(['GET'])
def records_by_patient(request, pk: str):
    rows = require(records_for_patient(pk) or None, f'Patient records for patient with id = {pk} not found')
    return envelope(status.HTTP_200_OK, 'Patient records retrieved successfully', 'patientRecords',
                    [format_patient_record(r) for r in rows])
