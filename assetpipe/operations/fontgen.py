"""
Webfont generation.

Converts every .ttf in the font source tree to sibling .woff and .woff2 files.
"""

from pathlib import Path

from fontTools.ttLib import TTLibError

from assetpipe.config.fonts import WEBFONT_FLAVORS
from assetpipe.config.paths import ProjectPaths
from assetpipe.core.font_io import get_font_size_kb, is_up_to_date, iter_fonts, save_as_flavor
from assetpipe.errors import FontConversionError
from assetpipe.utils.logging import logger


def convert_font(
    source: Path,
    flavors: tuple[str, ...] = WEBFONT_FLAVORS,
    *,
    force: bool = False,
) -> list[Path]:
    """
    Generate webfont flavors next to a TTF source.

    Args:
        source: Path to the .ttf file
        flavors: Flavors to generate
        force: Regenerate even if outputs are newer than the source

    Returns:
        Paths written (skipped outputs are not included)

    Raises:
        FontConversionError: If fontTools cannot read or write the font
    """
    written: list[Path] = []

    for flavor in flavors:
        target = source.with_suffix(f".{flavor}")
        if not force and is_up_to_date(source, target):
            logger.debug(f"{target.name} is up to date")
            continue

        try:
            save_as_flavor(source, target, flavor)
        except (TTLibError, OSError, ImportError) as e:
            raise FontConversionError(f"Cannot convert {source.name} to {flavor}: {e}") from e

        logger.info(f"Generated {target.name} ({get_font_size_kb(target):.1f} KB)")
        written.append(target)

    return written


def generate_webfonts(paths: ProjectPaths, *, force: bool = False) -> list[Path]:
    """Convert all TTF sources under the font source tree."""
    if not paths.fonts_src.exists():
        logger.warning(f"{paths.fonts_src}/ does not exist (skipped)")
        return []

    sources = list(iter_fonts(paths.fonts_src))
    if not sources:
        logger.warning(f"No .ttf files found in {paths.fonts_src}/")
        return []

    logger.info(f"Generating webfonts for {len(sources)} fonts")
    written: list[Path] = []
    for source in sources:
        written.extend(convert_font(source, force=force))

    logger.info(f"Webfont generation complete ({len(written)} files written)")
    return written
