from dataclasses import dataclass, field

import httpx

from httpulse.codec.base64_codec import decode_base64, encode_base64
from httpulse.config.settings import Settings
from httpulse.errors.dispatcher import subsystem_call
from httpulse.http.headers import header_value_to_str
from httpulse.http.request_builder import RequestSpec, build_request
from httpulse.logging.logger import Log


@dataclass(frozen=True)
class HttpResponse:
    """Response handed back to the UI. The body travels base64 encoded."""

    status: int
    headers: list[tuple[str, str]] = field(default_factory=list)
    body_base64: str = ""
    elapsed_ms: int = 0

    def body(self) -> bytes:
        return decode_base64(self.body_base64)


class HttpClient:
    """Sends RequestSpecs over httpx and converts failures at the transport edge."""

    def __init__(
        self,
        *,
        timeout_seconds: float,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            timeout=timeout_seconds,
            transport=transport,
            follow_redirects=True,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "HttpClient":
        return cls(timeout_seconds=settings.http_timeout_seconds)

    def send(self, spec: RequestSpec) -> HttpResponse:
        request = build_request(spec)
        Log.debug(f"Sending {request.method} {request.url}")
        with subsystem_call():
            response = self._client.send(request)
            headers = [
                (name.decode("latin-1"), header_value_to_str(value))
                for name, value in response.headers.raw
            ]
        Log.info(f"{request.method} {request.url} -> {response.status_code}")
        return HttpResponse(
            status=response.status_code,
            headers=headers,
            body_base64=encode_base64(response.content),
            elapsed_ms=int(response.elapsed.total_seconds() * 1000),
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
