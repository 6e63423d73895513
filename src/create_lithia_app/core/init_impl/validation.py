"""
Project name validation.

Project names become the target directory and the package.json ``name``,
so they are restricted to lowercase letters, digits and hyphens.
"""

from __future__ import annotations

import re

from ..errors import ConfigError

PROJECT_NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")

EMPTY_NAME_MESSAGE = "Project name cannot be empty"
INVALID_NAME_MESSAGE = "Project name can only contain lowercase letters, numbers, and hyphens"


def validate_project_name(name: str) -> tuple[bool, str | None]:
    """
    Validate a project name.

    Args:
        name: Project name to validate

    Returns:
        (is_valid, error_message)

    Examples:
        validate_project_name("my-app")  # -> (True, None)
        validate_project_name("My_App")  # -> (False, "...")
    """
    if not name:
        return (False, EMPTY_NAME_MESSAGE)

    if not PROJECT_NAME_PATTERN.fullmatch(name):
        return (False, INVALID_NAME_MESSAGE)

    return (True, None)


def ensure_valid_project_name(name: str) -> str:
    """
    Return ``name`` unchanged, or raise if it is not a valid project name.

    Raises:
        ConfigError: If the name fails validation
    """
    is_valid, error_msg = validate_project_name(name)
    if not is_valid:
        raise ConfigError(error_msg or "Invalid project name")
    return name
