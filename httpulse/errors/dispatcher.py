"""Converts native subsystem failures into NormalizedError.

Conversion happens where a failure first leaves its subsystem, so the
message is always the native error's own text rather than a re-wrapped
description.
"""

import binascii
import http.cookiejar
import http.cookies
import json
import zipfile
from collections.abc import Generator
from contextlib import contextmanager

import httpx
import psycopg

from httpulse.archive.exceptions import ArchiveError
from httpulse.codec.exceptions import Base64DecodeError, JsonDecodeError, JsonEncodeError
from httpulse.cookies.exceptions import UrlParseError
from httpulse.database.exceptions import PersistenceError
from httpulse.errors.category import Category
from httpulse.errors.normalized import NormalizedError
from httpulse.http.exceptions import (
    HeaderToStrError,
    InvalidHeaderName,
    InvalidHeaderValue,
    RequestBuildError,
)

_CATEGORIES: dict[type[BaseException], Category] = {
    psycopg.Error: Category.PERSISTENCE,
    PersistenceError: Category.PERSISTENCE,
    RequestBuildError: Category.HTTP_TRANSPORT,
    httpx.HTTPError: Category.HTTP_TRANSPORT,
    httpx.InvalidURL: Category.INVALID_URI,
    InvalidHeaderValue: Category.INVALID_HEADER_VALUE,
    InvalidHeaderName: Category.INVALID_HEADER_NAME,
    HeaderToStrError: Category.HEADER_TO_STRING,
    OSError: Category.IO,
    # LoadError subclasses OSError; the MRO walk picks it before OSError.
    http.cookiejar.LoadError: Category.COOKIE_JAR,
    httpx.CookieConflict: Category.COOKIE_JAR,
    UrlParseError: Category.URL_PARSE,
    json.JSONDecodeError: Category.JSON_CODEC,
    JsonDecodeError: Category.JSON_CODEC,
    JsonEncodeError: Category.JSON_CODEC,
    binascii.Error: Category.BASE64_CODEC,
    Base64DecodeError: Category.BASE64_CODEC,
    zipfile.BadZipFile: Category.ARCHIVE,
    zipfile.LargeZipFile: Category.ARCHIVE,
    ArchiveError: Category.ARCHIVE,
    http.cookies.CookieError: Category.COOKIE_PARSE,
}

RECOGNIZED_TYPES: tuple[type[BaseException], ...] = tuple(_CATEGORIES)


def category_for(exc_type: type[BaseException]) -> Category:
    """Return the category statically assigned to a source failure type.

    Raises:
        TypeError: if neither the type nor any of its bases is recognized.
    """
    for klass in exc_type.__mro__:
        category = _CATEGORIES.get(klass)
        if category is not None:
            return category
    raise TypeError(
        f"Unsupported failure type '{exc_type.__module__}.{exc_type.__qualname__}'"
    )


def normalize(exc: BaseException) -> NormalizedError:
    """Convert a recognized source failure into a NormalizedError.

    An already normalized error is returned unchanged.

    Raises:
        TypeError: if the failure type is not recognized.
    """
    if isinstance(exc, NormalizedError):
        return exc
    category = category_for(type(exc))
    message = str(exc) or type(exc).__name__
    return NormalizedError(message, category)


@contextmanager
def subsystem_call() -> Generator[None, None, None]:
    """Re-raise recognized failures from the wrapped block as NormalizedError.

    NormalizedError and unrecognized exceptions pass through untouched.
    """
    try:
        yield
    except NormalizedError:
        raise
    except RECOGNIZED_TYPES as exc:
        raise normalize(exc) from exc
