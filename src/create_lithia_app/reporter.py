"""
Progress and result output for the create-lithia-app CLI.
"""

from __future__ import annotations

from rich import box
from rich.table import Table
from rich.text import Text

from create_lithia_app.cli_ui import STYLES, console, print_info
from create_lithia_app.core.config import ProjectConfig
from create_lithia_app.core.templates import list_templates

FALLBACK_RUN_COMMAND = "npm install && npm run dev"


def print_progress(message: str) -> None:
    """Print a step notice; completion notices are dimmed."""
    if message.startswith("Done in"):
        console.print(Text(f"  {message}", style=STYLES["muted"]))
        console.print()
    else:
        console.print(Text(f"… {message}", style=STYLES["info"]))


def next_steps(config: ProjectConfig) -> list[str]:
    """Shell commands the user runs to start developing."""
    if config.install_dependencies and config.package_manager is not None:
        run_command = f"{config.package_manager.value} run dev"
    else:
        run_command = FALLBACK_RUN_COMMAND
    return [f"cd {config.project_name}", run_command]


def print_next_steps(config: ProjectConfig) -> None:
    """Print the readiness banner followed by the next-step commands."""
    print_info("Hold on, we're almost there!")
    print_info("Your project is ready to go, now you just need to run the following commands:")

    commands = next_steps(config)
    for i, command in enumerate(commands):
        branch = "└───> " if i == len(commands) - 1 else "├───> "
        line = Text(branch, style=STYLES["muted"])
        line.append(command, style=STYLES["command"])
        console.print(line, soft_wrap=True)


def print_templates() -> None:
    """Print the template catalog as a table."""
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("Name", style="white bold")
    table.add_column("Branch", style="bright_black")
    table.add_column("Description")

    for template in list_templates():
        table.add_row(template.name, template.branch, template.description)

    console.print(table)
