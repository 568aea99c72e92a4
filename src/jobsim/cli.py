# cli.py
from __future__ import annotations

import sys

import click

from jobsim.plan import build_plan
from jobsim.runner import run as run_workflow
from jobsim.steps import default_workflow
from jobsim.ui.console import Console, set_console, get_console


@click.group(invoke_without_command=True)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show stack traces and detailed output)",
)
@click.pass_context
def cli(ctx, debug):
    """jobsim: two dependent CI jobs (test -> build), fail-fast."""
    console = Console(debug=debug)
    set_console(console)
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug

    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@cli.command()
@click.option(
    "--workdir",
    default=".",
    type=click.Path(file_okay=False),
    help="Directory the artifact is written to and read from",
)
@click.pass_context
def run(ctx, workdir):
    """Run the workflow and exit with its status."""
    console = get_console()

    try:
        result = run_workflow(workdir, console=console)
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)

    if ctx.obj.get("debug", False):
        console.print_results(result.statuses())
    sys.exit(result.exit_code)


@cli.command()
def plan():
    """Print the steps in execution order."""
    console = get_console()
    steps = build_plan(default_workflow())
    console.print_info("PLAN")
    for i, s in enumerate(steps, start=1):
        console.print_plan_step(i, s.name, s.needs)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
