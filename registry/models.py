"""
Database models for the clinic registry.

Each entity lives in its own table and is keyed by a generated UUID string,
so every table behaves like an id -> record map.  Cross-entity references
(``patient_id``, ``doctor_id``) are plain strings rather than foreign keys:
a record may point to a doctor or patient that no longer exists.
"""
from __future__ import annotations

import uuid

from django.db import models


def new_entity_id() -> str:
    return str(uuid.uuid4())


class Entity(models.Model):
    """Common columns for every stored entity."""
    id = models.CharField(max_length=36, primary_key=True, default=new_entity_id, editable=False)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    # Stays null until the first update.
    updated_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        abstract = True
        ordering = ['created_at', 'id']


class Doctor(Entity):
    name = models.CharField(max_length=255)
    speciality = models.CharField(max_length=255)

    def __str__(self) -> str:
        return f"{self.name} ({self.speciality})"


class Patient(Entity):
    name = models.CharField(max_length=255)
    age = models.PositiveIntegerField()
    gender = models.CharField(max_length=64)

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"


class Appointment(Entity):
    patient_id = models.CharField(max_length=64, db_index=True)
    doctor_id = models.CharField(max_length=64, db_index=True)
    date_time = models.DateTimeField()
    # Minutes.
    duration = models.PositiveIntegerField()
    description = models.TextField()

    def __str__(self) -> str:
        return f"appt d={self.doctor_id} p={self.patient_id} @ {self.date_time:%F %T}"


class PatientRecord(Entity):
    patient_id = models.CharField(max_length=64, db_index=True)
    doctor_id = models.CharField(max_length=64, db_index=True)
    diagnosis = models.TextField()
    treatment = models.TextField()
    # Free-text medication names, not Medication ids.
    medications = models.JSONField(default=list, blank=True)

    def __str__(self) -> str:
        return f"record d={self.doctor_id} p={self.patient_id}"


class Medication(Entity):
    name = models.CharField(max_length=255)
    dosage = models.CharField(max_length=128)
    frequency = models.CharField(max_length=128)
    patient_id = models.CharField(max_length=64, db_index=True)

    def __str__(self) -> str:
        return f"{self.name} {self.dosage} ({self.frequency})"


class AuditEvent(models.Model):
    action = models.CharField(max_length=64)
    object_type = models.CharField(max_length=64, blank=True, null=True)
    object_id = models.CharField(max_length=64, blank=True, null=True)
    detail = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=['action', 'created_at'], name='audit_action_created_idx'),
            models.Index(fields=['object_type', 'object_id', 'created_at'], name='audit_object_created_idx'),
        ]

    def __str__(self):
        return f"{self.action}:{self.object_type}/{self.object_id}@{self.created_at:%F %T}"
