# steps.py
# The fixed report-env -> test -> build chain.
from __future__ import annotations

from pathlib import Path
from typing import Callable, List

from .artifacts import read_artifact, write_artifact
from .dsl import step, wf
from .model import RunContext, Step
from .settings import ARTIFACT_NAME

DEFAULT_PAYLOAD = "datos de prueba"


def report_env(ctx: RunContext) -> None:
    """Print the environment snapshot. Cannot fail."""
    ctx.console.print_env(ctx.settings.as_dict())


def write_output(payload: str = DEFAULT_PAYLOAD) -> Callable[[RunContext], Path]:
    """Build the `test` action: write `payload` to the artifact, overwriting it."""

    def _test(ctx: RunContext) -> Path:
        path = write_artifact(ctx.workdir / ARTIFACT_NAME, payload, step="test")
        ctx.console.print_step_done(f"Job TEST completado: archivo {ARTIFACT_NAME} creado")
        return path

    return _test


def read_output(ctx: RunContext) -> str:
    """The `build` action: read back what `test` wrote."""
    path = ctx.artifacts.get("test", ctx.workdir / ARTIFACT_NAME)
    data = read_artifact(path, step="build")
    ctx.console.print_step_done(f"Contenido de {ARTIFACT_NAME}: {data}")
    ctx.console.print_step_done("Job BUILD completado con éxito")
    return data


def default_workflow(payload: str = DEFAULT_PAYLOAD) -> List[Step]:
    return wf(
        step("report-env", report_env),
        step("test", write_output(payload), title="JOB 1: TEST"),
        step("build", read_output, title="JOB 2: BUILD", needs=["test"]),
    )
