from pathlib import Path

import pytest

from jobsim.artifacts import read_artifact, write_artifact
from jobsim.errors import ReadFailure, StepFailure, WriteFailure


def test_write_overwrites_existing_content(tmp_path):
    p = tmp_path / "output.txt"
    p.write_text("contenido viejo y mas largo", encoding="utf-8")

    write_artifact(p, "datos de prueba")

    assert p.read_bytes() == "datos de prueba".encode("utf-8")


def test_line_endings_are_kept(tmp_path):
    p = write_artifact(tmp_path / "output.txt", "a\r\nb\rc\n")
    assert read_artifact(p) == "a\r\nb\rc\n"


def test_write_into_missing_directory_fails(tmp_path):
    with pytest.raises(WriteFailure) as exc:
        write_artifact(tmp_path / "missing" / "output.txt", "x")
    assert exc.value.step == "test"
    assert isinstance(exc.value.cause, FileNotFoundError)


def test_read_missing_file_fails(tmp_path):
    with pytest.raises(ReadFailure) as exc:
        read_artifact(tmp_path / "output.txt")
    assert isinstance(exc.value, StepFailure)
    assert exc.value.step == "build"
    assert "could not read" in str(exc.value)


def test_read_invalid_utf8_fails(tmp_path):
    p = tmp_path / "output.txt"
    p.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(ReadFailure):
        read_artifact(p)


def test_write_permission_denied_fails(tmp_path, monkeypatch):
    def deny(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "open", deny)

    with pytest.raises(WriteFailure) as exc:
        write_artifact(tmp_path / "output.txt", "x")
    assert isinstance(exc.value.cause, PermissionError)
