"""
HTML page assembly.

Expands include directives in top-level pages and wraps raster <img> tags in
<picture> elements offering the WebP rendition.

Directives, resolved against the including file's directory and then the
include paths (src/ and src/assets/images/):

    <!--=include partials/_header.html -->
    //=include icons/logo.svg
"""

import re
from collections.abc import Sequence
from pathlib import Path

from assetpipe.config.paths import ProjectPaths
from assetpipe.errors import HtmlIncludeError
from assetpipe.utils.logging import logger

INCLUDE_RE = re.compile(
    r"<!--=\s*include\s+(?P<html>\S+?)\s*-->|//=\s*include\s+(?P<line>[^\s<>\"']+)"
)
IMG_TAG_RE = re.compile(
    r"<img\b[^>]*\bsrc\s*=\s*(['\"])(?P<src>[^'\"]+)\1[^>]*>", re.IGNORECASE
)
WEBP_IMAGE_EXTS = (".png", ".jpg", ".jpeg")


def resolve_include(name: str, current_dir: Path, include_paths: Sequence[Path]) -> Path:
    """Find an included file, trying the including file's directory first."""
    for base in (current_dir, *include_paths):
        candidate = base / name
        if candidate.is_file():
            return candidate
    raise HtmlIncludeError(f"Cannot resolve include {name!r} from {current_dir}")


def expand_includes(
    source: Path,
    include_paths: Sequence[Path],
    _stack: tuple[Path, ...] = (),
) -> str:
    """
    Return the text of source with every include directive expanded.

    Raises:
        HtmlIncludeError: If an include is missing or includes itself
    """
    resolved = source.resolve()
    if resolved in _stack:
        chain = " -> ".join(p.name for p in (*_stack, resolved))
        raise HtmlIncludeError(f"Circular include: {chain}")

    def replace(match: re.Match) -> str:
        name = match.group("html") or match.group("line")
        included = resolve_include(name, source.parent, include_paths)
        return expand_includes(included, include_paths, (*_stack, resolved)).rstrip("\n")

    return INCLUDE_RE.sub(replace, source.read_text(encoding="utf-8"))


def add_webp_sources(html: str) -> str:
    """
    Wrap png/jpg <img> tags in <picture> with a WebP <source>.

    Lines that already mention <picture> are left alone.
    """

    def wrap(match: re.Match) -> str:
        src = match.group("src")
        stem, dot, ext = src.rpartition(".")
        if not dot or f".{ext.lower()}" not in WEBP_IMAGE_EXTS:
            return match.group(0)
        return (
            f'<picture><source srcset="{stem}.webp" type="image/webp">'
            f"{match.group(0)}</picture>"
        )

    return "".join(
        line if "<picture" in line else IMG_TAG_RE.sub(wrap, line)
        for line in html.splitlines(keepends=True)
    )


def iter_pages(src_dir: Path) -> list[Path]:
    """Top-level .html pages, excluding partials (names starting with _)."""
    return sorted(p for p in src_dir.glob("*.html") if not p.name.startswith("_"))


def build_pages(paths: ProjectPaths) -> list[Path]:
    """Assemble every top-level page into dist/."""
    if not paths.src.exists():
        logger.warning(f"{paths.src}/ does not exist (skipped)")
        return []

    pages = iter_pages(paths.src)
    if not pages:
        logger.warning(f"No pages found in {paths.src}/")
        return []

    include_paths = [paths.src, paths.images_src]
    paths.dist.mkdir(parents=True, exist_ok=True)

    written = []
    for page in pages:
        html = add_webp_sources(expand_includes(page, include_paths))
        target = paths.dist / page.name
        target.write_text(html, encoding="utf-8")
        logger.info(f"Built {page.name}")
        written.append(target)
    return written
