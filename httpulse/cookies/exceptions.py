class UrlParseError(ValueError):
    """Raised when a URL cannot be parsed into scheme, host and path."""
