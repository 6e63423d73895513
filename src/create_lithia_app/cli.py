"""
create-lithia-app CLI.

Scaffolds a new Lithia app:

    create-lithia-app                                   # Fully interactive
    create-lithia-app --name my-app --template default  # Prompts for the rest
    create-lithia-app -y --name my-app --no-git         # No prompts
    create-lithia-app --list                            # Show templates
"""

from __future__ import annotations

import logging
import platform
import sys

import typer

from create_lithia_app._version import get_version
from create_lithia_app.cli_ui import ConsolePrompter, confirm, console, print_error, print_info
from create_lithia_app.core.config import ScaffoldFlags, resolve_config, validate_flags
from create_lithia_app.core.dependencies import check_all
from create_lithia_app.core.errors import LithiaError, OperationCancelled
from create_lithia_app.core.init_impl import create_project
from create_lithia_app.core.settings import ScaffoldSettings, load_settings
from create_lithia_app.reporter import print_next_steps, print_progress, print_templates

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"create-lithia-app version {get_version()}")
        typer.echo(
            f"Python {platform.python_implementation()} {platform.python_version()} "
            f"on {platform.system()} {platform.release()}"
        )
        raise typer.Exit()


def _configure_logging(settings: ScaffoldSettings, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _confirm_overwrite(project_name: str) -> bool | None:
    return confirm(
        f"The directory {project_name} already exists. Do you want to overwrite it?",
        default=False,
    )


app = typer.Typer(
    help="Create a new Lithia app",
    add_completion=False,
)


@app.command()
def create(
    name: str | None = typer.Option(None, "--name", help="Project name (lowercase letters, numbers, hyphens)"),
    template: str | None = typer.Option(None, "--template", help="Template to clone (see --list)"),
    package_manager: str | None = typer.Option(
        None, "--package-manager", help="Package manager: npm, yarn, pnpm or bun"
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip prompts and use defaults (requires --name)"),
    install: bool = typer.Option(False, "--install", help="Install dependencies"),
    no_install: bool = typer.Option(False, "--no-install", help="Skip dependency installation"),
    overwrite: bool = typer.Option(False, "--overwrite", help="Replace an existing project directory without asking"),
    git: bool = typer.Option(False, "--git", help="Initialize a git repository"),
    no_git: bool = typer.Option(False, "--no-git", help="Skip git repository initialization"),
    list_templates_flag: bool = typer.Option(False, "--list", "-l", help="List available templates"),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging"),
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """
    Create a new Lithia app from a template.

    Clones the template into ./<name>, rewrites package.json, and optionally
    initializes git and installs dependencies.
    """
    settings = load_settings()
    _configure_logging(settings, verbose)

    if list_templates_flag:
        print_templates()
        return

    flags = ScaffoldFlags(
        name=name,
        template=template,
        package_manager=package_manager,
        yes=yes,
        install=install,
        no_install=no_install,
        git=git,
        no_git=no_git,
        overwrite=overwrite,
    )

    try:
        validate_flags(flags)
        dependencies = check_all()
        logger.debug("Detected tools: %s", dependencies.tools)

        config = resolve_config(flags, dependencies, ConsolePrompter())
        console.print()

        project_dir = create_project(
            config,
            settings=settings,
            confirm_overwrite=_confirm_overwrite,
            progress_callback=print_progress,
        )
        logger.debug("Project created at %s", project_dir)
    except OperationCancelled as e:
        print_info(e.message)
        raise typer.Exit(code=0)
    except LithiaError as e:
        print_error(e.message)
        raise typer.Exit(code=1)

    print_next_steps(config)


def main(argv: list[str] | None = None) -> None:
    app(args=argv if argv is not None else sys.argv[1:], prog_name="create-lithia-app")


if __name__ == "__main__":
    main()
