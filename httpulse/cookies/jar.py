from http.cookiejar import MozillaCookieJar
from http.cookies import CookieError, SimpleCookie
from pathlib import Path

import httpx

from httpulse.config.settings import Settings
from httpulse.cookies.urls import parse_url
from httpulse.errors.dispatcher import subsystem_call
from httpulse.logging.logger import Log


class CookieStore:
    """Persistent cookie jar in Netscape cookies.txt format."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._jar = MozillaCookieJar(str(path))

    @classmethod
    def from_settings(cls, settings: Settings) -> "CookieStore":
        return cls(Path(settings.cookie_jar_path))

    def load(self) -> None:
        """Load cookies from disk.

        A missing file surfaces as an io error, a file in the wrong format
        as a cookieJar error.
        """
        with subsystem_call():
            self._jar.load(ignore_discard=True, ignore_expires=True)
        Log.debug(f"Loaded {len(self._jar)} cookies from {self._path}")

    def save(self) -> None:
        with subsystem_call():
            self._jar.save(ignore_discard=True, ignore_expires=True)

    def set(self, name: str, value: str, url: str) -> None:
        """Store a cookie scoped to the host and path of ``url``."""
        parts = parse_url(url)
        self.as_httpx().set(name, value, domain=parts.hostname or "", path=parts.path or "/")

    def get(self, name: str, domain: str | None = None) -> str | None:
        """Return a cookie value; ambiguous names across domains raise cookieJar."""
        with subsystem_call():
            return self.as_httpx().get(name, domain=domain)

    def as_httpx(self) -> httpx.Cookies:
        return httpx.Cookies(self._jar)

    def __len__(self) -> int:
        return len(self._jar)


def parse_cookie_header(header: str) -> dict[str, str]:
    """Parse a ``Cookie`` request header into name/value pairs.

    Raises:
        NormalizedError: cookieParse for a pair without ``=`` or an illegal
            cookie name.
    """
    cookie: SimpleCookie = SimpleCookie()
    with subsystem_call():
        for pair in header.split(";"):
            pair = pair.strip()
            if not pair:
                continue
            name, sep, value = pair.partition("=")
            if not sep:
                raise CookieError(f"Illegal cookie pair {pair!r}")
            cookie[name.strip()] = value.strip()
    return {name: morsel.value for name, morsel in cookie.items()}
