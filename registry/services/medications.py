from typing import List
from registry.models import Medication
from registry.services.store import EntityStore

medications = EntityStore(Medication, 'medication')


def format_medication(med: Medication) -> dict:
    return {
        'id': med.id,
        'name': med.name,
        'dosage': med.dosage,
        'frequency': med.frequency,
        'patientId': med.patient_id,
        'createdAt': med.created_at.isoformat(),
        'updatedAt': med.updated_at.isoformat() if med.updated_at else None,
    }


def medications_for_patient(patient_id: str) -> List[Medication]:
    return medications.values(patient_id=patient_id)
