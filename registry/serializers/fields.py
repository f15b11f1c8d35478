"""
Strict JSON field types.

DRF's stock fields coerce ``"42"`` into ``42`` and ``42`` into ``"42"``.  The
registry only accepts values whose JSON type already matches, so these
subclasses reject anything of the wrong type before delegating.
"""
from rest_framework import serializers


class StrictCharField(serializers.CharField):
    default_error_messages = {'invalid': 'Must be a string.'}

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail('invalid')
        return super().to_internal_value(data)


class StrictIntegerField(serializers.IntegerField):
    default_error_messages = {'invalid': 'Must be a number.'}

    def to_internal_value(self, data):
        # bool is an int subclass
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            self.fail('invalid')
        if isinstance(data, float) and not data.is_integer():
            self.fail('invalid')
        return super().to_internal_value(int(data))


class IsoDateTimeField(serializers.DateTimeField):
    default_error_messages = {'invalid': 'Must be an ISO-8601 date-time string.'}

    def to_internal_value(self, value):
        if not isinstance(value, str):
            self.fail('invalid')
        return super().to_internal_value(value)
