"""
Clean operation.

Removes dist/ and stylesheets generated inside the font source tree.
"""

import shutil
from pathlib import Path

from assetpipe.config.paths import ProjectPaths
from assetpipe.utils.logging import logger


def clean_directory(path: Path) -> None:
    """
    Delete a directory.

    Args:
        path: Path of the directory to delete
    """
    if path.exists():
        logger.info(f"Removing {path}/")
        try:
            shutil.rmtree(path)
            logger.info(f"Removed {path}/")
        except OSError as e:
            logger.error(f"Failed to remove {path}/: {e}")
            raise
    else:
        logger.info(f"{path}/ does not exist (skipped)")


def remove_generated_css(font_dir: Path) -> int:
    """Delete *.css files left in the font source tree by font converters."""
    if not font_dir.exists():
        return 0

    removed = 0
    for css_path in sorted(font_dir.glob("**/*.css")):
        css_path.unlink()
        logger.info(f"Removed {css_path}")
        removed += 1
    return removed


def clean(paths: ProjectPaths) -> None:
    """Remove build output."""
    logger.info("Cleaning build artifacts")

    clean_directory(paths.dist)
    remove_generated_css(paths.fonts_src)

    logger.info("Clean complete")
