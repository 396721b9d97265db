"""
Build mode selection.
"""

import os
from enum import Enum

MODE_ENV_VAR = "ASSETPIPE_ENV"


class BuildMode(str, Enum):
    """Output flavor of a build."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"

    @property
    def is_production(self) -> bool:
        return self is BuildMode.PRODUCTION


def resolve_mode(value: str | None = None) -> BuildMode:
    """
    Resolve the build mode from an explicit value or the environment.

    Args:
        value: Mode name; falls back to $ASSETPIPE_ENV, then development

    Returns:
        Selected BuildMode

    Raises:
        ValueError: If the name is not a known mode
    """
    name = value or os.environ.get(MODE_ENV_VAR) or BuildMode.DEVELOPMENT.value
    return BuildMode(name.strip().lower())
