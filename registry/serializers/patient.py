from rest_framework import serializers

from .fields import StrictCharField, StrictIntegerField


class PatientSerializer(serializers.Serializer):
    invalid_message = "Invalid input: Ensure 'name' is a string, 'age' is a number and 'gender' is a string."

    name = StrictCharField(max_length=255)
    age = StrictIntegerField(min_value=0, max_value=2147483647)
    gender = StrictCharField(max_length=64)
