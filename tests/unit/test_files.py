from pathlib import Path

import pytest

from httpulse.errors.category import Category
from httpulse.errors.normalized import NormalizedError
from httpulse.fs.files import read_bytes, read_text, write_text


class TestFiles:
    def test_write_creates_parents(self, tmp_path: Path) -> None:
        target = tmp_path / "nested" / "dir" / "note.txt"
        write_text(target, "hello")
        assert read_text(target) == "hello"

    def test_read_bytes(self, tmp_path: Path) -> None:
        target = tmp_path / "data.bin"
        target.write_bytes(b"\x00\x01")
        assert read_bytes(target) == b"\x00\x01"


class TestFileFailures:
    def test_file_not_found(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing.txt"

        with pytest.raises(NormalizedError) as exc_info:
            read_text(missing)

        assert exc_info.value.category is Category.IO
        assert exc_info.value.message == str(exc_info.value.__cause__)
        assert str(missing) in exc_info.value.message

    def test_directory_is_io(self, tmp_path: Path) -> None:
        with pytest.raises(NormalizedError) as exc_info:
            read_bytes(tmp_path)

        assert exc_info.value.category is Category.IO

    def test_undecodable_text_is_io(self, tmp_path: Path) -> None:
        target = tmp_path / "binary.txt"
        target.write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(NormalizedError) as exc_info:
            read_text(target)

        assert exc_info.value.category is Category.IO
        assert "can't decode byte 0xff in position 0" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__.__cause__, UnicodeDecodeError)
