from typing import List
from registry.models import PatientRecord
from registry.services.store import EntityStore

patient_records = EntityStore(PatientRecord, 'patient_record')


def format_patient_record(record: PatientRecord) -> dict:
    return {
        'id': record.id,
        'patientId': record.patient_id,
        'doctorId': record.doctor_id,
        'diagnosis': record.diagnosis,
        'treatment': record.treatment,
        'medications': list(record.medications or []),
        'createdAt': record.created_at.isoformat(),
        'updatedAt': record.updated_at.isoformat() if record.updated_at else None,
    }


def records_for_doctor(doctor_id: str) -> List[PatientRecord]:
    return patient_records.values(doctor_id=doctor_id)


def records_for_patient(patient_id: str) -> List[PatientRecord]:
    return patient_records.values(patient_id=patient_id)
