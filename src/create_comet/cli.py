"""Command-line entry point for ``create-comet``."""

from typing import Annotated, Optional

import typer

from . import __version__
from . import log as comet_log
from .models import ProjectOptions, ProjectResult
from .services.project import create_project
from .services.result import ServiceCancelled, ServiceFailure

EXIT_FAILURE = 1
EXIT_CANCELLED = 130

BANNER = "comet"
BANNER_RULE = "==========="

app = typer.Typer(
    name="create-comet",
    help="Create a modern Next.js application.",
    add_completion=False,
    no_args_is_help=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _validate_log_level(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized not in comet_log.LOG_LEVEL_NAMES:
        choices = ", ".join(comet_log.LOG_LEVEL_NAMES)
        raise typer.BadParameter(f"expected one of: {choices}")
    return normalized


def display_banner() -> None:
    comet_log.info(f"\n{BANNER}", style="bold bright_yellow")
    comet_log.info(BANNER_RULE, style="yellow")


def print_next_steps(result: ProjectResult, options: ProjectOptions) -> None:
    """Print the success message and what to do next."""
    comet_log.success("\n✓ Project created successfully!")
    comet_log.info("\nNext steps:")
    comet_log.info(f"  cd {result.project_name}", style="cyan")
    if not result.dependencies_installed:
        comet_log.info(f"  {options.package_manager} install", style="cyan")
    comet_log.info(f"  {options.package_manager} dev", style="cyan")

    comet_log.info("\nMake sure to:")
    comet_log.info("  1. Update your database connection string in .env.local", style="yellow")
    comet_log.info("  2. Start building your API in src/app/api", style="yellow")
    comet_log.info("  3. Create your database models in src/models", style="yellow")


@app.command()
def create(
    project_directory: Annotated[
        Optional[str],
        typer.Argument(
            metavar="[PROJECT-DIRECTORY]",
            help="Directory to create the project in.",
            show_default=False,
        ),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option("-y", "--yes", help="Skip all confirmation prompts."),
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            callback=_validate_log_level,
            help="Output verbosity: trace, debug, info, success, warning, error.",
        ),
    ] = None,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable colored output."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Create a new project from the bundled template.

    Exits 0 on success, 1 when the project could not be created, and 130 when
    a prompt was cancelled.
    """
    if log_level is not None:
        comet_log.set_level(log_level)
    if no_color:
        comet_log.set_no_color(True)

    display_banner()
    options = ProjectOptions(yes=yes)
    result = create_project(project_directory, options)

    if isinstance(result, ServiceCancelled):
        comet_log.debug(f"Cancelled: {result.reason}")
        raise typer.Exit(code=EXIT_CANCELLED)
    if isinstance(result, ServiceFailure):
        raise typer.Exit(code=EXIT_FAILURE)
    print_next_steps(result.outcome, options)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
