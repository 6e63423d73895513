"""
create-lithia-app - scaffold a new Lithia application from a template.

Clones a template repository, rewrites its package.json, and optionally
initializes git and installs dependencies.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import ConfigError, LithiaError, OperationCancelled, ScaffoldError

__version__ = get_version()

__all__ = [
    "__version__",
    "LithiaError",
    "ConfigError",
    "ScaffoldError",
    "OperationCancelled",
]
