"""
Host tool detection.

Probes the package managers and git by running ``<tool> --version``. All
probes for a run are dispatched together and joined before returning.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class PackageManager(StrEnum):
    """Supported package managers."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"


GIT = "git"
KNOWN_TOOLS: tuple[str, ...] = (*(pm.value for pm in PackageManager), GIT)


class SystemDependencies(BaseModel):
    """Availability snapshot of host tools, keyed by tool name."""

    tools: dict[str, bool]

    model_config = ConfigDict(frozen=True)

    def is_available(self, tool: str) -> bool:
        return self.tools.get(tool, False)

    @property
    def git(self) -> bool:
        return self.is_available(GIT)

    def available_package_managers(self) -> list[PackageManager]:
        return [pm for pm in PackageManager if self.is_available(pm.value)]


def check_available(tool: str) -> bool:
    """
    Check whether a tool can be launched.

    Args:
        tool: Executable name (e.g. "pnpm")

    Returns:
        True if ``<tool> --version`` exits with status 0
    """
    executable = shutil.which(tool)
    if executable is None:
        logger.debug("%s not found on PATH", tool)
        return False

    try:
        subprocess.run(
            [executable, "--version"],
            check=True,
            capture_output=True,
            text=True,
        )
    except (OSError, subprocess.CalledProcessError) as e:
        logger.debug("Probe for %s failed: %s", tool, e)
        return False
    logger.debug("Probe for %s succeeded", tool)
    return True


def check_all(tools: Iterable[str] = KNOWN_TOOLS) -> SystemDependencies:
    """
    Probe every tool concurrently.

    Args:
        tools: Tool names to probe (defaults to all package managers and git)

    Returns:
        SystemDependencies with one entry per tool
    """
    names = list(dict.fromkeys(tools))
    if not names:
        return SystemDependencies(tools={})

    with ThreadPoolExecutor(max_workers=len(names)) as executor:
        # Submit all probes before waiting on any of them
        futures = {name: executor.submit(check_available, name) for name in names}
        results = {name: future.result() for name, future in futures.items()}

    return SystemDependencies(tools=results)
