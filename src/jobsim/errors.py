# errors.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class StepFailure(Exception):
    """
    A step could not complete. Terminal for the run: the runner records it,
    reports it and stops scheduling further steps.
    """
    step: str
    message: str
    cause: Optional[BaseException] = None

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class WriteFailure(StepFailure):
    """The artifact could not be created (permissions, missing dir, disk full)."""


class ReadFailure(StepFailure):
    """The artifact is missing or unreadable."""
