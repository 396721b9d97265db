"""
Font manifest operation.

Regenerates src/assets/styles/_fonts.scss from src/assets/fonts.
"""

from assetpipe.config.fonts import DEFAULT_URL_PREFIX
from assetpipe.config.paths import ProjectPaths
from assetpipe.core.manifest import Dedupe, ListingOrder, ManifestResult, sync_font_manifest
from assetpipe.utils.logging import logger


def update_font_manifest(
    paths: ProjectPaths,
    *,
    order: ListingOrder = ListingOrder.NATIVE,
    dedupe: Dedupe = Dedupe.ADJACENT,
    url_prefix: str = DEFAULT_URL_PREFIX,
) -> ManifestResult:
    """Rebuild the project's font manifest."""
    logger.info(f"Scanning {paths.fonts_src}/ for font families")
    return sync_font_manifest(
        paths.fonts_src,
        paths.font_manifest,
        order=order,
        dedupe=dedupe,
        url_prefix=url_prefix,
    )
