"""
Configuration resolution for a scaffolding run.

Raw CLI flags are layered with defaults (``--yes``) or interactive answers
into a frozen ProjectConfig. Each stage produces a new snapshot; nothing is
mutated in place.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from .dependencies import PackageManager, SystemDependencies
from .errors import ConfigError, OperationCancelled
from .init_impl.validation import ensure_valid_project_name, validate_project_name
from .prompts import Choice, Prompter
from .templates import BUILTIN_TEMPLATES, DEFAULT_TEMPLATE, ProjectTemplate, get_template

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_NAME = "my-lithia-app"
DEFAULT_PACKAGE_MANAGER = PackageManager.NPM

T = TypeVar("T")


class ScaffoldFlags(BaseModel):
    """Options exactly as given on the command line."""

    name: str | None = None
    template: str | None = None
    package_manager: str | None = None
    yes: bool = False
    install: bool = False
    no_install: bool = False
    git: bool = False
    no_git: bool = False
    overwrite: bool = False

    model_config = ConfigDict(frozen=True)


class PartialConfig(BaseModel):
    """A resolution stage; None means "not decided yet"."""

    project_name: str | None = None
    template: ProjectTemplate | None = None
    package_manager: PackageManager | None = None
    install_dependencies: bool | None = None
    initialize_git: bool | None = None
    overwrite: bool | None = None

    model_config = ConfigDict(frozen=True)


class ProjectConfig(BaseModel):
    """
    Fully resolved execution plan for one scaffolding run.

    Attributes:
        project_name: Directory and package.json name
        template: Template to clone
        package_manager: Package manager used for install (None only when not installing)
        install_dependencies: Run ``<package_manager> install`` after cloning
        initialize_git: Run ``git init`` in the new project
        overwrite: Replace an existing directory without asking
    """

    project_name: str
    template: ProjectTemplate = DEFAULT_TEMPLATE
    package_manager: PackageManager | None = None
    install_dependencies: bool
    initialize_git: bool
    overwrite: bool | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _package_manager_required_for_install(self) -> ProjectConfig:
        if self.install_dependencies and self.package_manager is None:
            raise ValueError("package_manager is required when install_dependencies is set")
        return self


def validate_flags(flags: ScaffoldFlags) -> None:
    """
    Reject contradictory or unknown flag values.

    Raises:
        ConfigError: On the first violated rule
    """
    if flags.install and flags.no_install:
        raise ConfigError("Cannot use --install and --no-install at the same time")

    if flags.git and flags.no_git:
        raise ConfigError("Cannot use --git and --no-git at the same time")

    if flags.template is not None and get_template(flags.template) is None:
        available = ", ".join(BUILTIN_TEMPLATES)
        raise ConfigError(
            f"Invalid template '{flags.template}'. Available templates: {available}"
        )

    if flags.package_manager is not None and flags.package_manager not in {
        pm.value for pm in PackageManager
    }:
        supported = ", ".join(pm.value for pm in PackageManager)
        raise ConfigError(
            f"Unsupported package manager '{flags.package_manager}'. Supported: {supported}"
        )

    if flags.yes and flags.name is None:
        raise ConfigError("--name is required when using --yes")


def _from_flags(flags: ScaffoldFlags) -> PartialConfig:
    def tristate(on: bool, off: bool) -> bool | None:
        if on:
            return True
        if off:
            return False
        return None

    return PartialConfig(
        project_name=flags.name,
        template=get_template(flags.template) if flags.template else None,
        package_manager=PackageManager(flags.package_manager) if flags.package_manager else None,
        install_dependencies=tristate(flags.install, flags.no_install),
        initialize_git=tristate(flags.git, flags.no_git),
        overwrite=True if flags.overwrite else None,
    )


def _finalize(partial: PartialConfig) -> ProjectConfig:
    unresolved = [
        field
        for field in ("project_name", "install_dependencies", "initialize_git")
        if getattr(partial, field) is None
    ]
    if unresolved:
        raise ConfigError(f"Configuration is incomplete: {', '.join(unresolved)} not set")

    try:
        return ProjectConfig(
            project_name=partial.project_name,
            template=partial.template or DEFAULT_TEMPLATE,
            package_manager=partial.package_manager,
            install_dependencies=partial.install_dependencies,
            initialize_git=partial.initialize_git,
            overwrite=partial.overwrite,
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e.errors()[0]['msg']}") from e


def _apply_defaults(partial: PartialConfig) -> PartialConfig:
    return partial.model_copy(
        update={
            "template": partial.template or DEFAULT_TEMPLATE,
            "package_manager": partial.package_manager or DEFAULT_PACKAGE_MANAGER,
            "install_dependencies": (
                True if partial.install_dependencies is None else partial.install_dependencies
            ),
            "initialize_git": True if partial.initialize_git is None else partial.initialize_git,
        }
    )


def _answered(answer: T | None) -> T:
    if answer is None:
        raise OperationCancelled()
    return answer


def _ask_missing(
    partial: PartialConfig, dependencies: SystemDependencies, prompter: Prompter
) -> PartialConfig:
    if partial.project_name is None:
        name = _answered(
            prompter.text(
                "What is the name of your project?",
                default=DEFAULT_PROJECT_NAME,
                validate=validate_project_name,
            )
        ).strip()
        partial = partial.model_copy(update={"project_name": ensure_valid_project_name(name)})

    if partial.template is None:
        template = _answered(
            prompter.select(
                "Choose a template for your project",
                [
                    Choice(value=t, label=t.name, description=t.description)
                    for t in BUILTIN_TEMPLATES.values()
                ],
            )
        )
        partial = partial.model_copy(update={"template": template})

    if partial.install_dependencies is None:
        install = _answered(
            prompter.confirm(
                "Do you want to install dependencies after creating the project?", default=True
            )
        )
        partial = partial.model_copy(update={"install_dependencies": install})

    if partial.install_dependencies and partial.package_manager is None:
        if not dependencies.available_package_managers():
            supported = ", ".join(pm.value for pm in PackageManager)
            raise ConfigError(f"No supported package manager found on this system ({supported})")
        package_manager = _answered(
            prompter.select(
                "Choose a package manager to install dependencies",
                [
                    Choice(
                        value=pm,
                        label=pm.value,
                        disabled=not dependencies.is_available(pm.value),
                    )
                    for pm in PackageManager
                ],
            )
        )
        partial = partial.model_copy(update={"package_manager": package_manager})

    if partial.initialize_git is None:
        if dependencies.git:
            initialize_git = _answered(
                prompter.confirm("Do you want to initialize a git repository?", default=True)
            )
        else:
            logger.debug("git not available, skipping git initialization prompt")
            initialize_git = False
        partial = partial.model_copy(update={"initialize_git": initialize_git})

    return partial


def resolve_config(
    flags: ScaffoldFlags,
    dependencies: SystemDependencies,
    prompter: Prompter | None = None,
) -> ProjectConfig:
    """
    Resolve flags, defaults and answers into a ProjectConfig.

    Args:
        flags: Parsed command-line options
        dependencies: Host tool availability
        prompter: Interactive prompt surface (required unless ``flags.yes``)

    Returns:
        Frozen ProjectConfig

    Raises:
        ConfigError: On invalid or conflicting input
        OperationCancelled: If the user cancels a prompt
    """
    validate_flags(flags)

    partial = _from_flags(flags)
    logger.debug("Configuration from flags: %s", partial)

    if partial.project_name is not None:
        ensure_valid_project_name(partial.project_name)

    if partial.package_manager is not None and not dependencies.is_available(
        partial.package_manager.value
    ):
        raise ConfigError(
            f"Package manager '{partial.package_manager.value}' is not installed on this system"
        )

    if flags.yes:
        partial = _apply_defaults(partial)
    else:
        if prompter is None:
            raise ConfigError("Interactive prompts are not available; use --yes with --name")
        partial = _ask_missing(partial, dependencies, prompter)

    config = _finalize(partial)
    logger.debug("Resolved configuration: %s", config)
    return config
