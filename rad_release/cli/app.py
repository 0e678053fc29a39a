from __future__ import annotations

import typer

from rad_release import __version__
from rad_release.cli.context import build_service
from rad_release.core.result import Err, Ok
from rad_release.output.console import RichConsole
from rad_release.output.errors import outcome_exit_code, print_outcome
from rad_release.services.release import parse_arguments


app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
)


# Variadic: a wrong argument count must reach parse_arguments (usage on stderr, exit 1).
@app.command(
    context_settings={"ignore_unknown_options": True},
    help="Point the [bold]latest[/bold] release symlink on files.radicle.xyz at VERSION.",
)
def release(
    args: list[str] | None = typer.Argument(
        None,
        metavar="VERSION",
        help="Version to publish, e.g. 1.2.0 (HEAD must carry a v* tag).",
        show_default=False,
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Run all checks but only print the ssh command.",
    ),
    show_version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    if show_version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    console = RichConsole()

    match parse_arguments(list(args or [])):
        case Err(usage):
            print_outcome(usage, console)
            raise typer.Exit(code=outcome_exit_code(usage))
        case Ok(version):
            pass

    outcome = build_service(console, dry_run=dry_run).run(version)
    print_outcome(outcome, console)

    code = outcome_exit_code(outcome)
    if code:
        raise typer.Exit(code=code)


def main() -> None:
    app()
