"""
Image optimization.

Writes a WebP rendition of every raster image plus a re-encoded original
into dist/assets/images.
"""

import shutil
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from assetpipe.config.paths import ProjectPaths
from assetpipe.errors import ImageProcessingError
from assetpipe.utils.logging import logger

WEBP_SOURCE_EXTS = {".png", ".jpg", ".jpeg"}
WEBP_QUALITY = 90
JPEG_QUALITY = 90


def convert_to_webp(source: Path, target: Path, quality: int = WEBP_QUALITY) -> None:
    """Save a WebP copy of a raster image."""
    with Image.open(source) as im:
        mode = "RGBA" if im.mode in ("RGBA", "LA", "P") else "RGB"
        im.convert(mode).save(target, "WEBP", quality=quality)


def optimize_original(source: Path, target: Path) -> None:
    """
    Re-encode an image in its own format.

    JPEGs are saved progressive at JPEG_QUALITY, PNGs with the optimizer
    enabled. Anything else (gif, svg, webp) is copied as is.
    """
    suffix = source.suffix.lower()
    if suffix in (".jpg", ".jpeg"):
        with Image.open(source) as im:
            im.convert("RGB").save(
                target, "JPEG", quality=JPEG_QUALITY, optimize=True, progressive=True
            )
    elif suffix == ".png":
        with Image.open(source) as im:
            im.save(target, "PNG", optimize=True)
    else:
        shutil.copy2(source, target)


def process_image(source: Path, source_dir: Path, dest_dir: Path) -> list[Path]:
    """
    Write the optimized original and, for rasters, a .webp beside it.

    Raises:
        ImageProcessingError: If Pillow cannot read or write the image
    """
    target = dest_dir / source.relative_to(source_dir)
    target.parent.mkdir(parents=True, exist_ok=True)
    written = []

    try:
        if source.suffix.lower() in WEBP_SOURCE_EXTS:
            webp = target.with_suffix(".webp")
            convert_to_webp(source, webp)
            written.append(webp)
        optimize_original(source, target)
    except (UnidentifiedImageError, OSError) as e:
        raise ImageProcessingError(f"Cannot process {source.name}: {e}") from e

    written.append(target)
    return written


def process_images(paths: ProjectPaths) -> list[Path]:
    """Optimize every image under src/assets/images."""
    if not paths.images_src.exists():
        logger.warning(f"{paths.images_src}/ does not exist (skipped)")
        return []

    sources = sorted(p for p in paths.images_src.rglob("*") if p.is_file())
    if not sources:
        logger.warning(f"No images found in {paths.images_src}/")
        return []

    written: list[Path] = []
    for source in sources:
        written.extend(process_image(source, paths.images_src, paths.images_dist))

    logger.info(f"Wrote {len(written)} image files to {paths.images_dist}/")
    return written
