class RequestBuildError(Exception):
    """Raised when an outgoing request cannot be assembled."""


class InvalidHeaderName(ValueError):
    """Raised when a header name is not a valid RFC 7230 token."""


class InvalidHeaderValue(ValueError):
    """Raised when a header value contains forbidden characters."""


class HeaderToStrError(ValueError):
    """Raised when raw header bytes are not visible ASCII."""
