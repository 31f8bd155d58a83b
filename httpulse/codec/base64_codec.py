import base64
import binascii

from httpulse.codec.exceptions import Base64DecodeError
from httpulse.errors.dispatcher import subsystem_call


def decode_base64(data: str | bytes) -> bytes:
    """Decode standard base64, rejecting characters outside the alphabet."""
    with subsystem_call():
        try:
            return base64.b64decode(data, validate=True)
        except binascii.Error:
            raise
        except ValueError as exc:
            # b64decode rejects non-ASCII str input with a plain ValueError.
            raise Base64DecodeError(str(exc)) from exc


def encode_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")
