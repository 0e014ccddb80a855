class InvalidPayloadError(ValueError):
    """Inbound interaction payload is missing a field or is not valid JSON."""
