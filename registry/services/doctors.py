from registry.models import Doctor
from registry.services.store import EntityStore

doctors = EntityStore(Doctor, 'doctor')


def format_doctor(doctor: Doctor) -> dict:
    return {
        'id': doctor.id,
        'name': doctor.name,
        'speciality': doctor.speciality,
        'createdAt': doctor.created_at.isoformat(),
        'updatedAt': doctor.updated_at.isoformat() if doctor.updated_at else None,
    }
