"""
URL mappings for the clinic registry API.

Every entity gets a collection route, a detail route keyed by id and a
``paginate/pages`` route; some add filter routes keyed by a doctor or
patient id.  Trailing slashes are deliberately omitted.
"""
from django.urls import path, include
from .views import health
from .views import doctors
from .views import patients
from .views import appointments
from .views import records
from .views import medications


urlpatterns = [
    # Prometheus exposes /metrics
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz, name='healthz'),
    # Doctors
    path('doctors', doctors.doctor_collection, name='doctors'),
    path('doctors/paginate/pages', doctors.doctor_pages, name='doctor-pages'),
    path('doctors/<str:pk>', doctors.doctor_detail, name='doctor-detail'),
    # Patients
    path('patients', patients.patient_collection, name='patients'),
    path('patients/paginate/pages', patients.patient_pages, name='patient-pages'),
    path('patients/<str:pk>', patients.patient_detail, name='patient-detail'),
    # Appointments
    path('appointments', appointments.appointment_collection, name='appointments'),
    path('appointments/paginate/pages', appointments.appointment_pages, name='appointment-pages'),
    path('appointments/doctor/<str:pk>', appointments.appointments_by_doctor, name='appointments-by-doctor'),
    path('appointments/patient/<str:pk>', appointments.appointments_by_patient, name='appointments-by-patient'),
    path('appointments/<str:pk>', appointments.appointment_detail, name='appointment-detail'),
    # Patient records
    path('patient-records', records.record_collection, name='patient-records'),
    path('patient-records/paginate/pages', records.record_pages, name='patient-record-pages'),
    path('patient-records/doctor/<str:pk>', records.records_by_doctor, name='patient-records-by-doctor'),
    path('patient-records/patient/<str:pk>', records.records_by_patient, name='patient-records-by-patient'),
    path('patient-records/<str:pk>', records.record_detail, name='patient-record-detail'),
    # Medications
    path('medications', medications.medication_collection, name='medications'),
    path('medications/paginate/pages', medications.medication_pages, name='medication-pages'),
    path('medications/patient/<str:pk>', medications.medications_by_patient, name='medications-by-patient'),
    path('medications/<str:pk>', medications.medication_detail, name='medication-detail'),
]
