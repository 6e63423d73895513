"""
Rich interactive UI components for the create-lithia-app CLI.

Provides cursor-navigable selection menus, text input and confirmations.
Every prompt returns None when the user cancels.
"""

import sys
from collections.abc import Sequence
from typing import TypeVar

from rich import box
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from create_lithia_app.core.prompts import Choice, Validator

# Check if we're in a TTY for interactive features
IS_TTY = sys.stdin.isatty() and sys.stdout.isatty()

console = Console()
err_console = Console(stderr=True)

T = TypeVar("T")

_CANCEL_WORDS = ("q", "quit", "cancel")


# Style definitions
STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "subtitle": Style(color="bright_black"),
    "selected": Style(color="bright_white", bgcolor="blue", bold=True),
    "unselected": Style(color="white"),
    "disabled": Style(color="bright_black", strike=True),
    "description": Style(color="bright_black"),
    "error": Style(color="red", bold=True),
    "info": Style(color="cyan"),
    "muted": Style(color="bright_black"),
    "highlight": Style(color="bright_cyan"),
    "command": Style(color="cyan"),
}


def print_header(title: str, subtitle: str = "") -> None:
    """Print a styled header."""
    console.print()
    console.print(Text(title, style=STYLES["title"]))
    if subtitle:
        console.print(Text(subtitle, style=STYLES["subtitle"]))
    console.print()


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(Text(f"✗ {message}", style=STYLES["error"]))


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(Text(f"ℹ {message}", style=STYLES["info"]))


def select_interactive(
    options: Sequence[Choice[T]],
    title: str = "Select an option",
    subtitle: str = "",
) -> T | None:
    """
    Interactive selection with keyboard navigation.

    Uses arrow keys for navigation and Enter to select. Disabled options are
    listed but cannot be chosen. Falls back to numbered input if not in a TTY.

    Args:
        options: Choices to offer
        title: Title shown above the menu
        subtitle: Optional subtitle

    Returns:
        Selected value or None if cancelled
    """
    if not any(not opt.disabled for opt in options):
        return None

    if not IS_TTY:
        # Fallback to simple numbered selection
        return _select_simple(options, title, subtitle)

    try:
        import termios
    except ImportError:
        # No raw keyboard input (e.g. Windows)
        return _select_simple(options, title, subtitle)

    try:
        return _select_with_keyboard(options, title, subtitle)
    except (OSError, termios.error):
        return _select_simple(options, title, subtitle)


def _next_enabled(options: Sequence[Choice[T]], start: int, step: int) -> int:
    idx = start
    for _ in range(len(options)):
        idx = (idx + step) % len(options)
        if not options[idx].disabled:
            return idx
    return start


def _select_with_keyboard(
    options: Sequence[Choice[T]],
    title: str,
    subtitle: str,
) -> T | None:
    """Keyboard-navigable selection menu."""
    import termios
    import tty

    selected_idx = _next_enabled(options, -1, 1)

    def render_menu() -> None:
        """Render the selection menu."""
        # Clear screen and move cursor to top
        console.print("\033[2J\033[H", end="")

        print_header(title, subtitle)

        for i, opt in enumerate(options):
            is_selected = i == selected_idx

            prefix = "› " if is_selected else "  "
            if opt.disabled:
                label_style = STYLES["disabled"]
            elif is_selected:
                label_style = STYLES["selected"]
            else:
                label_style = STYLES["unselected"]

            line = Text()
            line.append(prefix, style=STYLES["highlight"] if is_selected else STYLES["muted"])
            line.append(opt.label, style=label_style)
            if opt.disabled:
                line.append(" (not installed)", style=STYLES["muted"])

            console.print(line)

            # Description on next line if selected
            if is_selected and opt.description:
                console.print(Text(f"    {opt.description}", style=STYLES["description"]))

        console.print()
        console.print(Text("↑/↓ Navigate  Enter Select  q Cancel", style=STYLES["muted"]))

    def get_key() -> str:
        """Get a single keypress."""
        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            ch = sys.stdin.read(1)
            # Handle escape sequences (arrow keys)
            if ch == "\x1b":
                ch += sys.stdin.read(2)
            return ch
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    try:
        while True:
            render_menu()
            key = get_key()

            if key == "\x1b[A":  # Up arrow
                selected_idx = _next_enabled(options, selected_idx, -1)
            elif key == "\x1b[B":  # Down arrow
                selected_idx = _next_enabled(options, selected_idx, 1)
            elif key in ("\r", "\n"):  # Enter
                console.print("\033[2J\033[H", end="")
                return options[selected_idx].value
            elif key in ("q", "Q", "\x03"):  # q or Ctrl+C
                console.print("\033[2J\033[H", end="")
                return None
            elif key.isdigit():
                # Direct number selection
                idx = int(key) - 1
                if 0 <= idx < len(options) and not options[idx].disabled:
                    console.print("\033[2J\033[H", end="")
                    return options[idx].value

    except KeyboardInterrupt:
        console.print("\033[2J\033[H", end="")
        return None


def _select_simple(
    options: Sequence[Choice[T]],
    title: str,
    subtitle: str,
) -> T | None:
    """
    Simple numbered selection (fallback for non-TTY).

    An empty answer picks the first enabled option.
    """
    print_header(title, subtitle)

    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Num", style="cyan", width=4)
    table.add_column("Name", style="white")
    table.add_column("Description", style="bright_black")

    for i, opt in enumerate(options, 1):
        label = Text(opt.label, style=STYLES["disabled"]) if opt.disabled else opt.label
        description = "not installed" if opt.disabled else opt.description
        table.add_row(f"{i}.", label, description)

    console.print(table)
    console.print()

    while True:
        try:
            choice = console.input(Text("Enter number or name: ", style=STYLES["info"])).strip()
        except (KeyboardInterrupt, EOFError):
            console.print()
            return None

        if choice.lower() in _CANCEL_WORDS:
            return None

        if not choice:
            return options[_next_enabled(options, -1, 1)].value

        picked: Choice[T] | None = None
        if choice.isdigit():
            idx = int(choice) - 1
            if 0 <= idx < len(options):
                picked = options[idx]
        else:
            choice_lower = choice.lower()
            for opt in options:
                if opt.label.lower() == choice_lower:
                    picked = opt
                    break

        if picked is not None and not picked.disabled:
            return picked.value

        if picked is not None:
            print_error(f"{picked.label} is not available.")
        else:
            print_error(f"Invalid choice. Enter 1-{len(options)} or option name.")


def text_input(message: str, default: str = "", validate: Validator | None = None) -> str | None:
    """
    Ask for a line of text, repeating until it passes ``validate``.

    An empty answer takes ``default``.
    """
    suffix = f" ({default})" if default else ""
    prompt = Text(message + suffix + " ", style=STYLES["info"])

    while True:
        try:
            response = console.input(prompt).strip()
        except (KeyboardInterrupt, EOFError):
            console.print()
            return None

        value = response or default
        if validate is None:
            return value

        is_valid, error_msg = validate(value)
        if is_valid:
            return value
        print_error(error_msg or "Invalid value")


def confirm(message: str, default: bool = True) -> bool | None:
    """Ask for confirmation with Y/n prompt; None if cancelled."""
    suffix = " [Y/n]" if default else " [y/N]"
    prompt = Text(message + suffix + " ", style=STYLES["info"])

    try:
        response = console.input(prompt).strip().lower()
    except (KeyboardInterrupt, EOFError):
        console.print()
        return None

    if not response:
        return default

    return response in ("y", "yes")


class ConsolePrompter:
    """Prompter backed by the rich console."""

    def text(
        self, message: str, *, default: str = "", validate: Validator | None = None
    ) -> str | None:
        return text_input(message, default=default, validate=validate)

    def select(self, message: str, choices: Sequence[Choice[T]]) -> T | None:
        return select_interactive(choices, title=message)

    def confirm(self, message: str, *, default: bool = True) -> bool | None:
        return confirm(message, default=default)
