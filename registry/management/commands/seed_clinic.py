"""
Management command to populate the registry with sample data.
"""
from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from registry.models import Doctor, Patient, Appointment, PatientRecord, Medication
from registry.services.appointments import appointments
from registry.services.doctors import doctors
from registry.services.medications import medications
from registry.services.patients import patients
from registry.services.records import patient_records


DOCTORS = [
    {'name': 'Dr. Amina Yusuf', 'speciality': 'Cardiology'},
    {'name': 'Dr. Tomas Berg', 'speciality': 'Dermatology'},
    {'name': 'Dr. Lena Okafor', 'speciality': 'Pediatrics'},
]

PATIENTS = [
    {'name': 'Maria Lopez', 'age': 42, 'gender': 'female'},
    {'name': 'James Carter', 'age': 67, 'gender': 'male'},
    {'name': 'Noor Haddad', 'age': 8, 'gender': 'female'},
]


class Command(BaseCommand):
    help = 'Populate the registry with sample doctors, patients, appointments, records and medications'

    def add_arguments(self, parser):
        parser.add_argument('--reset', action='store_true', help='Delete every stored entity first')

    def handle(self, *args, **options):
        with transaction.atomic():
            if options['reset']:
                self.reset()
            doctor_objs = self.create_doctors()
            patient_objs = self.create_patients()
            self.create_appointments(doctor_objs, patient_objs)
            self.create_records(doctor_objs, patient_objs)
            self.create_medications(patient_objs)
        self.stdout.write(self.style.SUCCESS('Sample data ready.'))

    def reset(self):
        for model in (Medication, PatientRecord, Appointment, Patient, Doctor):
            deleted, _ = model.objects.all().delete()
            self.stdout.write(f'Deleted {deleted} {model._meta.verbose_name_plural}')

    def create_doctors(self):
        result = []
        for data in DOCTORS:
            doctor = Doctor.objects.filter(name=data['name']).first() or doctors.insert(data)
            result.append(doctor)
            self.stdout.write(f'Doctor: {doctor.name} ({doctor.id})')
        return result

    def create_patients(self):
        result = []
        for data in PATIENTS:
            patient = Patient.objects.filter(name=data['name']).first() or patients.insert(data)
            result.append(patient)
            self.stdout.write(f'Patient: {patient.name} ({patient.id})')
        return result

    def create_appointments(self, doctor_objs, patient_objs):
        start = timezone.now().replace(hour=9, minute=0, second=0, microsecond=0) + timedelta(days=1)
        for i, (doctor, patient) in enumerate(zip(doctor_objs, patient_objs)):
            if Appointment.objects.filter(doctor_id=doctor.id, patient_id=patient.id).exists():
                continue
            appointments.insert({
                'doctor_id': doctor.id,
                'patient_id': patient.id,
                'date_time': start + timedelta(hours=i),
                'duration': 30,
                'description': f'Initial consultation with {doctor.speciality.lower()}',
            })
        self.stdout.write('Appointments created')

    def create_records(self, doctor_objs, patient_objs):
        samples = [
            ('Hypertension', 'Lifestyle changes and daily medication', ['Lisinopril']),
            ('Atopic dermatitis', 'Topical corticosteroid twice daily', ['Hydrocortisone cream']),
            ('Otitis media', 'Ten day antibiotic course', ['Amoxicillin']),
        ]
        for doctor, patient, (diagnosis, treatment, meds) in zip(doctor_objs, patient_objs, samples):
            if PatientRecord.objects.filter(doctor_id=doctor.id, patient_id=patient.id).exists():
                continue
            patient_records.insert({
                'doctor_id': doctor.id,
                'patient_id': patient.id,
                'diagnosis': diagnosis,
                'treatment': treatment,
                'medications': meds,
            })
        self.stdout.write('Patient records created')

    def create_medications(self, patient_objs):
        samples = [
            ('Lisinopril', '10 mg', 'once daily'),
            ('Hydrocortisone cream', '1%', 'twice daily'),
            ('Amoxicillin', '250 mg', 'every 8 hours'),
        ]
        for patient, (name, dosage, frequency) in zip(patient_objs, samples):
            if Medication.objects.filter(patient_id=patient.id, name=name).exists():
                continue
            medications.insert({
                'name': name,
                'dosage': dosage,
                'frequency': frequency,
                'patient_id': patient.id,
            })
        self.stdout.write('Medications created')
