from rest_framework import serializers

from .fields import StrictCharField


class PatientRecordSerializer(serializers.Serializer):
    invalid_message = (
        "Invalid input: Ensure 'patientId', 'doctorId', 'diagnosis', 'treatment' and "
        "'medications' are provided and are of the correct type."
    )

    patientId = StrictCharField(max_length=64, source='patient_id')
    doctorId = StrictCharField(max_length=64, source='doctor_id')
    diagnosis = StrictCharField()
    treatment = StrictCharField()
    medications = serializers.ListField(child=StrictCharField(), allow_empty=True)
