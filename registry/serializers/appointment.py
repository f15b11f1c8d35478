from rest_framework import serializers

from .fields import IsoDateTimeField, StrictCharField, StrictIntegerField


class AppointmentSerializer(serializers.Serializer):
    invalid_message = (
        "Invalid input: Ensure 'patientId', 'doctorId', 'dateTime', 'duration' and "
        "'description' are provided and are of the correct type."
    )

    patientId = StrictCharField(max_length=64, source='patient_id')
    doctorId = StrictCharField(max_length=64, source='doctor_id')
    dateTime = IsoDateTimeField(source='date_time')
    # minutes
    duration = StrictIntegerField(min_value=1, max_value=2147483647)
    description = StrictCharField()
