# runner.py
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from .errors import StepFailure
from .model import RunContext, RunResult, Step, StepResult
from .plan import build_plan
from .settings import Settings
from .steps import DEFAULT_PAYLOAD, default_workflow
from .ui.console import Console, get_console


# ----------------------------------------------------------------------
# Execution primitives
# ----------------------------------------------------------------------

def _run_step(step: Step, ctx: RunContext) -> StepResult:
    """
    Run one step and store what it produced in ctx.artifacts.
    StepFailure propagates to the caller; anything else is a bug and does too.
    """
    if step.title:
        ctx.console.print_banner(step.title)
    ctx.console.print_debug(f"running step {step.name}")

    output = step.action(ctx)
    if output is not None:
        ctx.artifacts[step.name] = output
    return StepResult(name=step.name, status="ok", output=output)


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def run_steps(steps: List[Step], ctx: RunContext) -> RunResult:
    """
    Run `steps` strictly in order, stopping at the first StepFailure.

    Exit code is 0 only if every step finished. Steps after a failure are
    never started and are absent from the result.
    """
    ordered = build_plan(steps)
    result = RunResult()

    # needs always point backwards (build_plan), so fail-fast alone
    # guarantees a step only starts after everything it needs succeeded
    for s in ordered:
        try:
            result.steps[s.name] = _run_step(s, ctx)
        except StepFailure as e:
            result.steps[s.name] = StepResult(name=s.name, status="failed", error=str(e))
            result.exit_code = 1
            result.failed_step = s.name
            ctx.console.print_failure(s.name.upper(), str(e))
            break

    return result


def run(
    workdir: str | Path = ".",
    *,
    settings: Optional[Settings] = None,
    console: Optional[Console] = None,
    payload: str = DEFAULT_PAYLOAD,
) -> RunResult:
    """
    Run the report-env -> test -> build chain in `workdir`.

    Does not exit the process; callers translate RunResult.exit_code.
    """
    ctx = RunContext(
        workdir=Path(workdir),
        settings=settings if settings is not None else Settings.from_env(),
        console=console if console is not None else get_console(),
    )
    return run_steps(default_workflow(payload), ctx)
