from registry.exceptions import InvalidInput


def validate_payload(serializer_class, data) -> dict:
    """Run an input serializer and return model-ready fields.

    Raises :class:`InvalidInput` carrying the serializer's summary message
    and the per-field errors.
    """
    serializer = serializer_class(data=data)
    if not serializer.is_valid():
        raise InvalidInput(serializer_class.invalid_message, serializer.errors)
    return dict(serializer.validated_data)
