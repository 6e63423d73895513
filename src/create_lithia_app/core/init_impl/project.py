"""
Main project creation logic.

Turns a resolved ProjectConfig into a project directory. Steps run strictly
in order and stop at the first failure; nothing is rolled back.
"""

from __future__ import annotations

import logging
import shutil
import time
from pathlib import Path
from typing import TYPE_CHECKING

from ..errors import OperationCancelled, ScaffoldError
from ..settings import ScaffoldSettings
from .commands import run_command
from .manifest import rewrite_manifest

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..config import ProjectConfig

logger = logging.getLogger(__name__)


def create_project(
    config: ProjectConfig,
    parent_dir: Path | None = None,
    *,
    settings: ScaffoldSettings | None = None,
    confirm_overwrite: Callable[[str], bool | None] | None = None,
    progress_callback: Callable[[str], None] | None = None,
) -> Path:
    """
    Create a new Lithia project from its template.

    Args:
        config: Resolved configuration
        parent_dir: Directory the project is created in (defaults to cwd)
        settings: Runtime settings (defaults to ScaffoldSettings())
        confirm_overwrite: Asked with the project name when the target exists
            and overwrite was not pre-approved
        progress_callback: Optional callback for progress messages

    Returns:
        Path of the created project

    Raises:
        OperationCancelled: If the existing directory may not be replaced
        ScaffoldError: If any step fails
    """

    def log(msg: str) -> None:
        """Log progress message if callback provided."""
        if progress_callback:
            progress_callback(msg)

    settings = settings or ScaffoldSettings()
    target_dir = (parent_dir or Path.cwd()).resolve() / config.project_name

    _prepare_directory(target_dir, config, confirm_overwrite)

    _timed(
        "Cloning template repository...",
        log,
        lambda: _clone_template(target_dir, config, settings.clone_depth),
    )

    _remove_path(target_dir / ".git")
    for lockfile in config.template.lockfiles:
        _remove_path(target_dir / lockfile)
    rewrite_manifest(target_dir, config.project_name)

    if config.initialize_git:
        _timed(
            "Initializing git repository...",
            log,
            lambda: run_command(["git", "init"], cwd=target_dir),
        )

    if config.install_dependencies and config.package_manager is not None:
        package_manager = config.package_manager.value
        _timed(
            "Installing dependencies...",
            log,
            lambda: run_command([package_manager, "install"], cwd=target_dir),
        )

    return target_dir


def _prepare_directory(
    target_dir: Path,
    config: ProjectConfig,
    confirm_overwrite: Callable[[str], bool | None] | None,
) -> None:
    if target_dir.exists():
        approved = bool(config.overwrite)
        if not approved and confirm_overwrite is not None:
            approved = bool(confirm_overwrite(config.project_name))
        if not approved:
            raise OperationCancelled()
        logger.debug("Removing existing directory %s", target_dir)
        _remove_path(target_dir)

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ScaffoldError(f"Failed to create {target_dir}: {e}") from e


def _clone_template(target_dir: Path, config: ProjectConfig, depth: int) -> None:
    template = config.template
    args = ["git", "clone"]
    if depth > 0:
        args += ["--depth", str(depth)]
    args += ["--branch", template.branch, template.url, "."]
    run_command(args, cwd=target_dir)


def _remove_path(path: Path) -> None:
    """Remove a file or directory tree; missing paths are ignored."""
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink(missing_ok=True)
    except OSError as e:
        raise ScaffoldError(f"Failed to remove {path}: {e}") from e


def _timed(message: str, log: Callable[[str], None], step: Callable[[], object]) -> None:
    """Run a step between a start notice and a "Done in N ms" notice."""
    start = time.perf_counter()
    log(message)
    step()
    elapsed_ms = round((time.perf_counter() - start) * 1000)
    logger.debug("%s took %d ms", message, elapsed_ms)
    log(f"Done in {elapsed_ms}ms")
