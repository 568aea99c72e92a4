# src/jobsim/dsl.py
from __future__ import annotations

from typing import Any, Callable, List, Optional, Sequence

from .model import RunContext, Step


# ---------------------------------------------------------------------
# Step helper
# ---------------------------------------------------------------------

def step(
    name: str,
    action: Callable[[RunContext], Any],
    *,
    title: str | None = None,
    needs: Optional[Sequence[str]] = None,
) -> Step:
    """Create a step. `needs` lists steps that must finish before this one."""
    if not callable(action):
        raise TypeError(f"step({name!r}) action must be callable, got {type(action).__name__}")
    return Step(name=name, action=action, title=title, needs=tuple(needs or ()))


# ---------------------------------------------------------------------
# Workflow helper
# ---------------------------------------------------------------------

def wf(*steps: Step) -> List[Step]:
    """
    Workflow definition helper. Order matters: steps run in the order given.

        def workflow():
            return wf(
                step("test", write_output),
                step("build", read_output, needs=["test"]),
            )
    """
    return list(steps)


workflow = wf  # alias
