from .dsl import step, wf, workflow
from .runner import run, run_steps
from .model import Step, RunResult, StepResult, RunContext
from .errors import StepFailure, WriteFailure, ReadFailure
from .settings import Settings

__all__ = [
    "step", "wf", "workflow", "run", "run_steps",
    "Step", "RunResult", "StepResult", "RunContext",
    "StepFailure", "WriteFailure", "ReadFailure", "Settings",
]
