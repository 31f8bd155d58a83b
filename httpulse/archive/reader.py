"""Reads request collection bundles exported as zip archives."""

import zipfile
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from httpulse.archive.exceptions import ArchiveError
from httpulse.errors.dispatcher import subsystem_call
from httpulse.logging.logger import Log


@contextmanager
def _open_archive(path: Path) -> Generator[zipfile.ZipFile, None, None]:
    # zipfile reports encrypted members with RuntimeError and unknown
    # compression methods or versions with NotImplementedError.
    with subsystem_call():
        try:
            with zipfile.ZipFile(path) as archive:
                yield archive
        except (RuntimeError, NotImplementedError) as exc:
            raise ArchiveError(str(exc)) from exc


def list_entries(path: Path) -> list[str]:
    """Return member names of the archive, directories excluded."""
    with _open_archive(path) as archive:
        return [info.filename for info in archive.infolist() if not info.is_dir()]


def read_bundle(path: Path) -> dict[str, bytes]:
    """Read every file member of the archive into memory.

    Raises:
        NormalizedError: archive when the file is not a valid zip, a member
            fails its CRC check, is encrypted or uses an unsupported
            compression method; io when the file cannot be opened.
    """
    with _open_archive(path) as archive:
        members = {
            info.filename: archive.read(info)
            for info in archive.infolist()
            if not info.is_dir()
        }
    Log.info(f"Read {len(members)} entries from bundle {path.name}")
    return members
