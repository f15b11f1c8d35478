import pytest
from django.urls import reverse

from registry.models import Appointment

pytestmark = pytest.mark.django_db


def _appointment(doctor_id, patient_id, **overrides):
    body = {
        'patientId': patient_id,
        'doctorId': doctor_id,
        'dateTime': '2030-01-15T09:30:00Z',
        'duration': 30,
        'description': 'Follow-up visit',
    }
    body.update(overrides)
    return body


def test_create_and_fetch_appointment(api_client, doctor, patient):
    r = api_client.post('/appointments', _appointment(doctor['id'], patient['id']), format='json')
    assert r.status_code == 201
    assert r.data['message'] == 'Appointment created successfully'
    appt = r.data['appointment']
    assert appt['doctorId'] == doctor['id']
    assert appt['patientId'] == patient['id']
    assert appt['dateTime'] == '2030-01-15T09:30:00+00:00'
    assert appt['duration'] == 30
    assert appt['updatedAt'] is None

    got = api_client.get(reverse('appointment-detail', args=[appt['id']]))
    assert got.status_code == 200
    assert got.data['appointment'] == appt


def test_offset_datetime_is_stored_in_utc(api_client, doctor, patient):
    body = _appointment(doctor['id'], patient['id'], dateTime='2030-01-15T11:30:00+02:00')
    r = api_client.post('/appointments', body, format='json')
    assert r.status_code == 201
    assert r.data['appointment']['dateTime'] == '2030-01-15T09:30:00+00:00'


def test_references_are_not_checked(api_client):
    r = api_client.post('/appointments', _appointment('ghost-doctor', 'ghost-patient'), format='json')
    assert r.status_code == 201
    assert Appointment.objects.filter(doctor_id='ghost-doctor').count() == 1


@pytest.mark.parametrize('overrides', [
    {'dateTime': 'next tuesday'},
    {'dateTime': 1735689600},
    {'duration': 0},
    {'duration': '30'},
    {'description': ''},
    {'patientId': 7},
    {'doctorId': None},
])
def test_invalid_payloads_are_rejected(api_client, overrides):
    r = api_client.post('/appointments', _appointment('d', 'p', **overrides), format='json')
    assert r.status_code == 400
    assert r.data['status'] == 400
    assert r.data['error'].startswith('Invalid input:')
    assert Appointment.objects.count() == 0


def test_update_and_delete(api_client, doctor, patient):
    appt = api_client.post('/appointments', _appointment(doctor['id'], patient['id']), format='json').data['appointment']
    r = api_client.put(
        f"/appointments/{appt['id']}",
        _appointment(doctor['id'], patient['id'], duration=45, description='Extended visit'),
        format='json',
    )
    assert r.status_code == 200
    assert r.data['message'] == 'Appointment updated successfully'
    assert r.data['appointment']['duration'] == 45
    assert r.data['appointment']['updatedAt'] is not None

    d = api_client.delete(f"/appointments/{appt['id']}")
    assert d.status_code == 200
    assert d.data['appointment']['description'] == 'Extended visit'
    assert not Appointment.objects.exists()


def test_filter_by_doctor_and_patient(api_client, doctor, patient):
    other = api_client.post('/doctors', {'name': 'Dr. Other', 'speciality': 'ENT'}, format='json').data['doctor']
    api_client.post('/appointments', _appointment(doctor['id'], patient['id']), format='json')
    api_client.post('/appointments', _appointment(other['id'], patient['id']), format='json')

    by_doctor = api_client.get(f"/appointments/doctor/{doctor['id']}")
    assert by_doctor.status_code == 200
    assert [a['doctorId'] for a in by_doctor.data['appointments']] == [doctor['id']]

    by_patient = api_client.get(f"/appointments/patient/{patient['id']}")
    assert len(by_patient.data['appointments']) == 2

    none = api_client.get('/appointments/doctor/nobody')
    assert none.status_code == 404
    assert none.data['message'] == 'Appointments for doctor with id = nobody not found'


def test_list_appointments(api_client, doctor, patient):
    empty = api_client.get('/appointments')
    assert empty.status_code == 200
    assert empty.data['appointments'] == []
    api_client.post('/appointments', _appointment(doctor['id'], patient['id']), format='json')
    listed = api_client.get('/appointments')
    assert listed.data['message'] == 'Appointments retrieved successfully'
    assert len(listed.data['appointments']) == 1
