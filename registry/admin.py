"""
Django admin registrations for the registry models.

Registering the models lets staff inspect and correct stored entities
through ``/admin/``.  Audit events are read-only.
"""

from django.contrib import admin

from .models import (
    Doctor,
    Patient,
    Appointment,
    PatientRecord,
    Medication,
    AuditEvent,
)


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'speciality', 'created_at', 'updated_at')
    list_filter = ('speciality',)
    search_fields = ('id', 'name', 'speciality')


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'age', 'gender', 'created_at')
    list_filter = ('gender',)
    search_fields = ('id', 'name')


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ('id', 'doctor_id', 'patient_id', 'date_time', 'duration')
    search_fields = ('id', 'doctor_id', 'patient_id', 'description')
    date_hierarchy = 'date_time'


@admin.register(PatientRecord)
class PatientRecordAdmin(admin.ModelAdmin):
    list_display = ('id', 'doctor_id', 'patient_id', 'diagnosis', 'created_at')
    search_fields = ('id', 'doctor_id', 'patient_id', 'diagnosis')


@admin.register(Medication)
class MedicationAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'dosage', 'frequency', 'patient_id')
    search_fields = ('id', 'name', 'patient_id')


@admin.register(AuditEvent)
class AuditEventAdmin(admin.ModelAdmin):
    list_display = ('action', 'object_type', 'object_id', 'created_at')
    list_filter = ('action', 'object_type')
    search_fields = ('object_id',)

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
