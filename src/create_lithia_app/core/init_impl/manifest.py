"""
package.json rewriting for freshly cloned templates.
"""

from __future__ import annotations

import json
from pathlib import Path

from ..errors import ScaffoldError

MANIFEST_FILE = "package.json"
INITIAL_VERSION = "0.1.0"


def rewrite_manifest(project_dir: Path, project_name: str) -> dict:
    """
    Rename the template's package.json to the new project.

    Sets ``name``, resets ``version`` to 0.1.0 and drops ``description``.
    Other keys keep their order.

    Args:
        project_dir: Project directory containing package.json
        project_name: New package name

    Returns:
        The rewritten manifest

    Raises:
        ScaffoldError: If package.json is missing, unreadable or not a JSON object
    """
    manifest_path = project_dir / MANIFEST_FILE

    try:
        with open(manifest_path, encoding="utf-8") as f:
            manifest = json.load(f)
    except FileNotFoundError as e:
        raise ScaffoldError(f"Template does not contain a {MANIFEST_FILE}") from e
    except json.JSONDecodeError as e:
        raise ScaffoldError(f"Invalid JSON in {manifest_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ScaffoldError(f"{manifest_path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise ScaffoldError(f"Failed to read {manifest_path}: {e}") from e

    if not isinstance(manifest, dict):
        raise ScaffoldError(f"{manifest_path} must contain a JSON object")

    manifest["name"] = project_name
    manifest["version"] = INITIAL_VERSION
    manifest.pop("description", None)

    try:
        with open(manifest_path, "w", encoding="utf-8") as f:
            json.dump(manifest, f, indent=2, ensure_ascii=False)
            f.write("\n")
    except OSError as e:
        raise ScaffoldError(f"Failed to write {manifest_path}: {e}") from e

    return manifest
