from rest_framework import serializers

from .fields import StrictCharField


class DoctorSerializer(serializers.Serializer):
    invalid_message = "Invalid input: Ensure 'name' and 'speciality' are provided and are strings."

    name = StrictCharField(max_length=255)
    speciality = StrictCharField(max_length=255)
