"""
goskeleton.cli - Command Line Interface
=======================================

Typer application for goskeleton.

    app (main entry point)
    ├── new      - Create a new Go REST API project
    └── version  - Show version information

Usage Examples
--------------
    $ goskeleton new --name shop
    $ goskeleton new -n shop --output ~/code
    $ goskeleton new -n shop --template-dir ./my-templates
    $ goskeleton --version

Exit Status
-----------
0 on success, 1 when the name is invalid or generation fails, 2 on usage
errors such as a missing ``--name``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from goskeleton import __version__
from goskeleton.errors import GoSkeletonError
from goskeleton.generator import create_project
from goskeleton.models import ProjectConfig, validate_project_name


# =============================================================================
# CLI Application Setup
# =============================================================================

app = typer.Typer(
    name="goskeleton",
    help="Generate Go REST API project structure.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True, soft_wrap=True)

FEATURES = (
    "Clean Architecture structure",
    "UberFX dependency injection",
    "Structured logging with Zap",
    "JWT authentication",
    "GORM with PostgreSQL",
    "Docker configuration",
    "Comprehensive middleware",
    "API documentation with Swagger",
)


def print_version() -> None:
    features = "\n".join(f"  • {feature}" for feature in FEATURES)
    console.print(Panel(
        f"[bold green]goskeleton[/] version [cyan]{__version__}[/]\n\n"
        f"[dim]Modern Go REST API generator[/]\n\n"
        f"[bold]Features:[/]\n{features}",
        border_style="green",
    ))


def version_callback(value: bool) -> None:
    """Display version information and exit when --version is passed."""
    if value:
        print_version()
        raise typer.Exit()


def fail(message: object) -> NoReturn:
    """Print an error to stderr and exit with status 1."""
    err_console.print(f"[red]Error:[/] {escape(str(message))}")
    raise typer.Exit(1)


# =============================================================================
# Main Application Callback
# =============================================================================

@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    [bold]goskeleton[/] - Go REST API project generator.

    Creates a ready-to-run Go service with clean architecture,
    [cyan]UberFX[/], [cyan]Zap[/], [cyan]GORM[/] and JWT authentication.

    [bold]Quick Start:[/]

        goskeleton new --name myservice
    """


# =============================================================================
# New Command
# =============================================================================

@app.command()
def new(
    name: Annotated[
        str,
        typer.Option(
            "--name",
            "-n",
            help="Project name (no spaces or path separators)",
        ),
    ],
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Directory to create the project in (default: current directory)",
        ),
    ] = None,
    template_dir: Annotated[
        Path | None,
        typer.Option(
            "--template-dir",
            "-t",
            help="Directory containing a template/ tree to use instead of the bundled one",
            exists=True,
            file_okay=False,
        ),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print errors",
        ),
    ] = False,
) -> None:
    """
    Create a new REST API project.

    [bold]Examples:[/]

        goskeleton new --name shop

        goskeleton new -n shop -o ~/code
    """
    try:
        validate_project_name(name)
        config = ProjectConfig(
            name=name,
            output_dir=output_dir or Path.cwd(),
            template_dir=template_dir,
        )
    except ValueError as e:
        fail(e)

    try:
        create_project(config, verbose=not quiet)
    except GoSkeletonError as e:
        fail(f"failed to generate project: {e}")


# =============================================================================
# Version Command
# =============================================================================

@app.command()
def version() -> None:
    """Show version information."""
    print_version()


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    app()
