"""Header name/value validation following RFC 7230 field rules."""

import re
from collections.abc import Iterable

from httpulse.errors.dispatcher import subsystem_call
from httpulse.http.exceptions import HeaderToStrError, InvalidHeaderName, InvalidHeaderValue

_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
# HTAB, SP and VCHAR; httpx encodes header values as ASCII.
_FIELD_VALUE = re.compile(r"[\t\x20-\x7e]*")
_VISIBLE_ASCII = re.compile(rb"[\t\x20-\x7e]*")


def validate_header_name(name: str) -> str:
    """Return the header name unchanged if it is a valid token.

    Raises:
        InvalidHeaderName: if the name is empty or has non-token characters.
    """
    if not _TOKEN.fullmatch(name):
        raise InvalidHeaderName(f"invalid HTTP header name: {name!r}")
    return name


def validate_header_value(value: str) -> str:
    """Return the header value unchanged if it may be sent on the wire.

    Raises:
        InvalidHeaderValue: if the value contains control characters.
    """
    if not _FIELD_VALUE.fullmatch(value):
        raise InvalidHeaderValue(f"failed to parse header value: {value!r}")
    return value


def header_value_to_str(raw: bytes) -> str:
    """Decode a received header value that must be visible ASCII.

    Raises:
        HeaderToStrError: if the bytes contain anything but visible ASCII.
    """
    if not _VISIBLE_ASCII.fullmatch(raw):
        raise HeaderToStrError("failed to convert header to a str")
    return raw.decode("ascii")


def build_headers(pairs: Iterable[tuple[str, str]]) -> list[tuple[str, str]]:
    """Validate user supplied header pairs, keeping order and duplicates."""
    headers: list[tuple[str, str]] = []
    with subsystem_call():
        for name, value in pairs:
            headers.append((validate_header_name(name), validate_header_value(value)))
    return headers
