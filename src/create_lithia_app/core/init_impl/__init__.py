"""
Project creation utilities for create-lithia-app.

This package contains modular implementations for project creation:
- validation.py - Project name validation
- commands.py - External command execution
- manifest.py - package.json rewriting
- project.py - Main create_project logic
"""

from __future__ import annotations

from .validation import (
    EMPTY_NAME_MESSAGE,
    INVALID_NAME_MESSAGE,
    ensure_valid_project_name,
    validate_project_name,
)
from .commands import run_command
from .manifest import INITIAL_VERSION, rewrite_manifest
from .project import create_project

__all__ = [
    # Validation
    "EMPTY_NAME_MESSAGE",
    "INVALID_NAME_MESSAGE",
    "validate_project_name",
    "ensure_valid_project_name",
    # Commands
    "run_command",
    # Manifest
    "INITIAL_VERSION",
    "rewrite_manifest",
    # Project creation
    "create_project",
]
