import json
from typing import Any

from httpulse.codec.exceptions import JsonDecodeError, JsonEncodeError
from httpulse.errors.dispatcher import subsystem_call


def decode_json(raw: str | bytes) -> Any:
    """Parse a JSON document. Malformed input surfaces as a jsonCodec error.

    Byte payloads that are not valid UTF-8 and documents nested beyond the
    interpreter's recursion limit are reported the same way.
    """
    with subsystem_call():
        try:
            return json.loads(raw)
        except (UnicodeDecodeError, RecursionError) as exc:
            raise JsonDecodeError(str(exc)) from exc


def encode_json(value: Any, *, indent: int | None = None) -> str:
    """Serialize a value to JSON.

    Values json cannot represent (sets, NaN, arbitrary objects) surface as a
    jsonCodec error carrying json's own message.
    """
    with subsystem_call():
        try:
            return json.dumps(value, indent=indent, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise JsonEncodeError(str(exc)) from exc
