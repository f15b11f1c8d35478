from rest_framework import serializers

from .fields import StrictCharField


class MedicationSerializer(serializers.Serializer):
    invalid_message = (
        "Invalid input: Ensure 'name', 'dosage', 'frequency' and 'patientId' are "
        "provided and are of the correct type."
    )

    name = StrictCharField(max_length=255)
    dosage = StrictCharField(max_length=128)
    frequency = StrictCharField(max_length=128)
    patientId = StrictCharField(max_length=64, source='patient_id')
