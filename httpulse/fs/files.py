import errno
from pathlib import Path

from httpulse.errors.dispatcher import subsystem_call


def read_text(path: Path) -> str:
    """Read a UTF-8 text file. Undecodable content is reported as an io failure."""
    with subsystem_call():
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise OSError(errno.EILSEQ, str(exc), str(path)) from exc


def read_bytes(path: Path) -> bytes:
    with subsystem_call():
        return path.read_bytes()


def write_text(path: Path, text: str) -> None:
    """Write text, creating parent directories as needed."""
    with subsystem_call():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
