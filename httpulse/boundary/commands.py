from collections.abc import Callable
from dataclasses import asdict, is_dataclass
from typing import Any

from httpulse.codec.json_codec import encode_json
from httpulse.config.settings import Settings
from httpulse.errors.normalized import NormalizedError
from httpulse.errors.serialization import to_wire
from httpulse.logging.logger import Log


class CommandBoundary:
    """Runs backend commands on behalf of the UI and renders their outcome.

    A NormalizedError becomes ``{"status": "error", "error": {...}}``.
    Any other exception is logged at error level and propagates unchanged.
    """

    @classmethod
    def from_settings(cls, settings: Settings) -> "CommandBoundary":
        Log.configure(settings.log_level)
        return cls()

    def invoke(self, handler: Callable[..., Any], *args: Any, **kwargs: Any) -> dict[str, Any]:
        name = getattr(handler, "__name__", repr(handler))
        try:
            data = handler(*args, **kwargs)
        except NormalizedError as err:
            return self._reject(name, err)
        except Exception as exc:
            Log.error(f"Command {name} raised {type(exc).__name__}: {exc}", command=name)
            raise
        Log.debug(f"Command {name} succeeded", command=name)
        return {"status": "ok", "data": data}

    def invoke_json(self, handler: Callable[..., Any], *args: Any, **kwargs: Any) -> str:
        """Like invoke, but returns the envelope as a JSON string.

        Dataclass results are converted with asdict. A result that still
        cannot be encoded is reported as a jsonCodec failure.
        """
        envelope = self.invoke(handler, *args, **kwargs)
        data = envelope.get("data")
        if is_dataclass(data) and not isinstance(data, type):
            envelope["data"] = asdict(data)
        try:
            return encode_json(envelope)
        except NormalizedError as err:
            name = getattr(handler, "__name__", repr(handler))
            return encode_json(self._reject(name, err))

    @staticmethod
    def _reject(name: str, err: NormalizedError) -> dict[str, Any]:
        Log.warning(
            f"Command {name} failed: {err.message}",
            command=name,
            category=err.category.value,
        )
        return {"status": "error", "error": to_wire(err)}
