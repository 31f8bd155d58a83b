from dataclasses import dataclass, field
from typing import Any

import httpx

from httpulse.codec.json_codec import encode_json
from httpulse.errors.dispatcher import subsystem_call
from httpulse.http.exceptions import RequestBuildError
from httpulse.http.headers import build_headers

SUPPORTED_METHODS = frozenset(
    {"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"}
)


@dataclass(frozen=True)
class RequestSpec:
    """User-edited request as sent from the UI."""

    method: str
    url: str
    headers: list[tuple[str, str]] = field(default_factory=list)
    params: dict[str, str] = field(default_factory=dict)
    body: str | None = None
    json_body: Any = None
    form: dict[str, str] | None = None


def build_request(spec: RequestSpec) -> httpx.Request:
    """Assemble an httpx.Request from a RequestSpec.

    Raises:
        NormalizedError: httpTransport for an unsupported method or more than
            one body option, invalidUri for a malformed URL, and the header
            categories for bad header names or values.
    """
    headers = build_headers(spec.headers)
    with subsystem_call():
        method = spec.method.upper()
        if method not in SUPPORTED_METHODS:
            raise RequestBuildError(f"unsupported HTTP method: {spec.method!r}")

        bodies = [b for b in (spec.body, spec.json_body, spec.form) if b is not None]
        if len(bodies) > 1:
            raise RequestBuildError("only one of body, json_body or form may be set")

        content: str | None = spec.body
        if spec.json_body is not None:
            content = encode_json(spec.json_body)
            if not any(name.lower() == "content-type" for name, _ in headers):
                headers.append(("Content-Type", "application/json"))

        return httpx.Request(
            method,
            spec.url,
            params=spec.params or None,
            headers=headers,
            content=content,
            data=spec.form,
        )
