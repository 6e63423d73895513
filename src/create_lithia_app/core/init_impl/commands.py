"""
External command execution for scaffolding steps.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from ..errors import ScaffoldError

logger = logging.getLogger(__name__)

# Lines of stderr kept in error messages
_STDERR_TAIL = 20


def run_command(args: Sequence[str], cwd: Path) -> subprocess.CompletedProcess[str]:
    """
    Run an external command to completion.

    There is no timeout and no retry: a command that hangs blocks the caller.

    Args:
        args: Command and arguments (not passed through a shell). The command
            is resolved on PATH first.
        cwd: Working directory

    Returns:
        The completed process

    Raises:
        ScaffoldError: If the command cannot be launched or exits non-zero
    """
    command = " ".join(args)
    executable = shutil.which(args[0])
    if executable is None:
        raise ScaffoldError(f"Command not found: {args[0]}")

    logger.debug("Running '%s' in %s", command, cwd)
    try:
        return subprocess.run(
            [executable, *args[1:]],
            cwd=cwd,
            check=True,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as e:
        raise ScaffoldError(f"Command not found: {args[0]}") from e
    except OSError as e:
        raise ScaffoldError(f"Failed to run '{command}': {e}") from e
    except subprocess.CalledProcessError as e:
        detail = "\n".join((e.stderr or "").strip().splitlines()[-_STDERR_TAIL:])
        message = f"'{command}' failed with exit code {e.returncode}"
        if detail:
            message = f"{message}\n{detail}"
        raise ScaffoldError(message) from e
