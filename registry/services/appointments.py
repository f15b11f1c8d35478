from typing import List
from registry.models import Appointment
from registry.services.store import EntityStore

appointments = EntityStore(Appointment, 'appointment')


def format_appointment(appt: Appointment) -> dict:
    return {
        'id': appt.id,
        'patientId': appt.patient_id,
        'doctorId': appt.doctor_id,
        'dateTime': appt.date_time.isoformat(),
        'duration': appt.duration,
        'description': appt.description,
        'createdAt': appt.created_at.isoformat(),
        'updatedAt': appt.updated_at.isoformat() if appt.updated_at else None,
    }


def appointments_for_doctor(doctor_id: str) -> List[Appointment]:
    return appointments.values(doctor_id=doctor_id)


def appointments_for_patient(patient_id: str) -> List[Appointment]:
    return appointments.values(patient_id=patient_id)
