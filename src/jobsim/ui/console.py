"""Console output formatting utilities for jobsim."""

from __future__ import annotations

import sys
from typing import Mapping, Optional, Sequence


class Console:
    """Centralized console output formatting."""

    def __init__(self, debug: bool = False):
        """
        Initialize console formatter.

        Args:
            debug: If True, show detailed output including stack traces
        """
        self.debug = debug

    def print_env(self, values: Mapping[str, str]) -> None:
        """Print environment values, one `NAME = value` per line."""
        for name, value in values.items():
            print(f"{name} = {value}")

    def print_banner(self, title: str) -> None:
        """Print a step banner."""
        print(f"\n=== {title} ===")

    def print_step_done(self, message: str) -> None:
        """Print a step's success line."""
        print(message)

    def print_failure(self, title: str, reason: str) -> None:
        """
        Print a step failure to stderr.

        Args:
            title: Short label for the failed job, e.g. "TEST"
            reason: Failure reason/error message
        """
        print(f"Error en Job {title}: {reason}", file=sys.stderr)

    def print_plan_step(self, index: int, name: str, needs: Sequence[str]) -> None:
        """Print one entry of the execution plan."""
        if needs:
            print(f"  {index}. {name} (needs: {', '.join(needs)})")
        else:
            print(f"  {index}. {name}")

    def print_results(self, results: dict[str, str]) -> None:
        """Print final results summary."""
        print("\n" + "=" * 40)
        print("RESULTS")
        print("=" * 40)
        for step, status in results.items():
            status_display = status.upper() if status != "ok" else "SUCCESS"
            print(f"  {step}: {status_display}")

    def print_exception(self, exc: Exception) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exception(type(exc), exc, exc.__traceback__)
        else:
            print(f"Error: {exc}", file=sys.stderr)

    def print_info(self, message: str) -> None:
        """Print informational message."""
        print(message)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            print(f"[DEBUG] {message}", file=sys.stderr)


# Global console instance (will be initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
