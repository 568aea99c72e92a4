# artifacts.py
# Filesystem side of the run. Every OSError is turned into a StepFailure
# subtype so the runner only has one kind of error to deal with.

from __future__ import annotations

from pathlib import Path

from .errors import ReadFailure, WriteFailure
from .settings import ARTIFACT_ENCODING


def write_artifact(path: str | Path, content: str, *, step: str = "test") -> Path:
    """
    Write `content` to `path`, replacing whatever was there.

    Raises:
        WriteFailure: the file could not be created or written.
    """
    p = Path(path)
    try:
        with p.open("w", encoding=ARTIFACT_ENCODING, newline="") as f:
            f.write(content)
    except OSError as e:
        raise WriteFailure(step=step, message=f"could not write {p}", cause=e) from e
    return p


def read_artifact(path: str | Path, *, step: str = "build") -> str:
    """
    Read `path` back as text.

    Raises:
        ReadFailure: the file is missing, unreadable, or not valid text.
    """
    p = Path(path)
    try:
        with p.open("r", encoding=ARTIFACT_ENCODING, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ReadFailure(step=step, message=f"could not read {p}", cause=e) from e
