from urllib.parse import SplitResult, urlsplit

from httpulse.cookies.exceptions import UrlParseError
from httpulse.errors.dispatcher import subsystem_call


def parse_url(raw: str) -> SplitResult:
    """Parse an absolute URL used to scope cookies.

    Raises:
        NormalizedError: urlParse when the URL is relative, has no host or
            has a malformed netloc or port.
    """
    with subsystem_call():
        try:
            parts = urlsplit(raw.strip())
            parts.port  # noqa: B018
        except ValueError as exc:
            raise UrlParseError(str(exc)) from exc
        if not parts.scheme:
            raise UrlParseError("relative URL without a base")
        if not parts.hostname:
            raise UrlParseError("empty host")
    return parts
