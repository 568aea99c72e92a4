# model.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .settings import Settings
    from .ui.console import Console


@dataclass(frozen=True)
class Step:
    """A single unit of work in a run: an action plus the steps it needs."""
    name: str
    action: Callable[["RunContext"], Any]
    title: str | None = None           # banner label, e.g. "JOB 1: TEST"
    needs: tuple[str, ...] = ()


@dataclass
class StepResult:
    name: str
    status: str  # ok|failed
    output: Any = None
    error: Optional[str] = None


@dataclass
class RunResult:
    """
    Outcome of a run.

    `steps` keeps execution order. Steps that never started (after a
    fail-fast stop) are absent.
    """
    steps: Dict[str, StepResult] = field(default_factory=dict)
    exit_code: int = 0
    failed_step: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    def statuses(self) -> Dict[str, str]:
        return {name: r.status for name, r in self.steps.items()}


@dataclass
class RunContext:
    """State shared between steps. `artifacts` maps step name -> produced value."""
    workdir: Path
    settings: "Settings"
    console: "Console"
    artifacts: Dict[str, Any] = field(default_factory=dict)
