from registry.models import Patient
from registry.services.store import EntityStore

patients = EntityStore(Patient, 'patient')


def format_patient(patient: Patient) -> dict:
    return {
        'id': patient.id,
        'name': patient.name,
        'age': patient.age,
        'gender': patient.gender,
        'createdAt': patient.created_at.isoformat(),
        'updatedAt': patient.updated_at.isoformat() if patient.updated_at else None,
    }
