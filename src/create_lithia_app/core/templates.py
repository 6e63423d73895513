"""
Template catalog for create-lithia-app.

Templates are git repositories holding a starter Lithia project. The catalog
is fixed at build time; the first entry is the default.
"""

from __future__ import annotations

from types import MappingProxyType

from pydantic import BaseModel, ConfigDict


class ProjectTemplate(BaseModel):
    """
    A starter project that can be cloned.

    Attributes:
        name: Catalog key used by --template
        branch: Branch to clone
        url: Git URL of the template repository
        description: One-line summary shown in prompts
        lockfiles: Lockfiles removed after cloning
    """

    name: str
    branch: str
    url: str
    description: str
    lockfiles: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)


BUILTIN_TEMPLATES = MappingProxyType(
    {
        "default": ProjectTemplate(
            name="default",
            branch="main",
            url="https://github.com/lithiajs/lithia-default-app-template.git",
            description="Default Lithia app template",
            lockfiles=("package-lock.json",),
        ),
        "with-drizzle": ProjectTemplate(
            name="with-drizzle",
            branch="main",
            url="https://github.com/lithiajs/lithia-with-drizzle-template.git",
            description="Lithia app template with Drizzle",
            lockfiles=("package-lock.json",),
        ),
    }
)

DEFAULT_TEMPLATE = next(iter(BUILTIN_TEMPLATES.values()))


def get_template(name: str) -> ProjectTemplate | None:
    """
    Get a built-in template by name.

    Args:
        name: Template name

    Returns:
        ProjectTemplate if found, None otherwise
    """
    return BUILTIN_TEMPLATES.get(name)


def list_templates() -> list[ProjectTemplate]:
    """List built-in templates in catalog order."""
    return list(BUILTIN_TEMPLATES.values())
