class JsonEncodeError(TypeError):
    """Raised when a value cannot be serialized to JSON."""


class JsonDecodeError(ValueError):
    """Raised when a payload cannot be decoded before JSON parsing applies."""


class Base64DecodeError(ValueError):
    """Raised when base64 input contains characters outside ASCII."""
