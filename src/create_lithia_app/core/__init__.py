"""Core create-lithia-app functionality: template catalog, tool probing, configuration, project creation."""

from .config import ProjectConfig, ScaffoldFlags, resolve_config, validate_flags
from .dependencies import KNOWN_TOOLS, PackageManager, SystemDependencies, check_all, check_available
from .errors import ConfigError, LithiaError, OperationCancelled, ScaffoldError
from .init_impl import create_project, validate_project_name
from .prompts import Choice, Prompter
from .settings import ScaffoldSettings, load_settings
from .templates import BUILTIN_TEMPLATES, DEFAULT_TEMPLATE, ProjectTemplate, get_template, list_templates

__all__ = [
    # Errors
    "LithiaError",
    "ConfigError",
    "ScaffoldError",
    "OperationCancelled",
    # Templates
    "ProjectTemplate",
    "BUILTIN_TEMPLATES",
    "DEFAULT_TEMPLATE",
    "get_template",
    "list_templates",
    # Dependencies
    "KNOWN_TOOLS",
    "PackageManager",
    "SystemDependencies",
    "check_available",
    "check_all",
    # Configuration
    "ScaffoldFlags",
    "ProjectConfig",
    "validate_flags",
    "resolve_config",
    # Prompts
    "Choice",
    "Prompter",
    # Settings
    "ScaffoldSettings",
    "load_settings",
    # Project creation
    "validate_project_name",
    "create_project",
]
