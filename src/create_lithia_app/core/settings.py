"""
Runtime settings for create-lithia-app.

Settings come from environment variables:

    LITHIA_LOG_LEVEL    - Logging level name (default: WARNING)
    LITHIA_CLONE_DEPTH  - Depth passed to ``git clone`` (default: 1, 0 = full history)

Usage:
    from create_lithia_app.core.settings import load_settings

    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

LOG_LEVEL_VAR = "LITHIA_LOG_LEVEL"
CLONE_DEPTH_VAR = "LITHIA_CLONE_DEPTH"

_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_CLONE_DEPTH = 1
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ScaffoldSettings(BaseModel):
    """Process-wide settings, read once at startup."""

    log_level: str = _DEFAULT_LOG_LEVEL
    clone_depth: int = Field(default=_DEFAULT_CLONE_DEPTH, ge=0)

    model_config = ConfigDict(frozen=True)


def load_settings(environ: Mapping[str, str] | None = None) -> ScaffoldSettings:
    """
    Build settings from the environment.

    Unknown or malformed values fall back to the defaults with a warning.

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        ScaffoldSettings
    """
    env = os.environ if environ is None else environ

    log_level = env.get(LOG_LEVEL_VAR, "").strip().upper() or _DEFAULT_LOG_LEVEL
    if log_level not in _LOG_LEVELS:
        logger.warning(
            "Unknown %s value '%s'. Using '%s'.", LOG_LEVEL_VAR, log_level, _DEFAULT_LOG_LEVEL
        )
        log_level = _DEFAULT_LOG_LEVEL

    clone_depth = _DEFAULT_CLONE_DEPTH
    raw_depth = env.get(CLONE_DEPTH_VAR, "").strip()
    if raw_depth:
        try:
            clone_depth = int(raw_depth)
        except ValueError:
            clone_depth = -1
        if clone_depth < 0:
            logger.warning(
                "Invalid %s value '%s'. Using %d.", CLONE_DEPTH_VAR, raw_depth, _DEFAULT_CLONE_DEPTH
            )
            clone_depth = _DEFAULT_CLONE_DEPTH

    return ScaffoldSettings(log_level=log_level, clone_depth=clone_depth)
