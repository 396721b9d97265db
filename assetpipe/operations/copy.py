"""
Static asset copy operations.

Mirrors fonts and data files from src/assets into dist/assets.
"""

import shutil
from collections.abc import Collection
from pathlib import Path

from assetpipe.config.fonts import FONT_EXTENSIONS
from assetpipe.config.paths import ProjectPaths
from assetpipe.utils.logging import logger


def copy_tree(
    source_dir: Path,
    dest_dir: Path,
    suffixes: Collection[str] | None = None,
) -> list[Path]:
    """
    Copy files below source_dir into dest_dir, keeping relative paths.

    Args:
        source_dir: Directory to copy from
        dest_dir: Directory to copy into (created as needed)
        suffixes: Lowercase suffixes to keep; all files when None

    Returns:
        Destination paths written
    """
    if not source_dir.exists():
        logger.warning(f"{source_dir}/ does not exist (skipped)")
        return []

    copied: list[Path] = []
    for path in sorted(source_dir.rglob("*")):
        if not path.is_file():
            continue
        if suffixes is not None and path.suffix.lower() not in suffixes:
            continue

        target = dest_dir / path.relative_to(source_dir)
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(path, target)
        copied.append(target)

    logger.info(f"Copied {len(copied)} files to {dest_dir}/")
    return copied


def copy_fonts(paths: ProjectPaths) -> list[Path]:
    """Copy web font files to dist/assets/fonts."""
    return copy_tree(paths.fonts_src, paths.fonts_dist, FONT_EXTENSIONS)


def copy_data(paths: ProjectPaths) -> list[Path]:
    """Copy data files to dist/assets/data."""
    return copy_tree(paths.data_src, paths.data_dist)
