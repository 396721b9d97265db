"""
Font I/O utilities for locating, opening, and converting font files.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from fontTools.ttLib import TTFont


def iter_fonts(directory: Path, pattern: str = "**/*.ttf") -> Iterator[Path]:
    """
    Iterate over font files matching pattern, sorted by path.

    Args:
        directory: Directory to search
        pattern: Glob pattern to match

    Yields:
        Paths to matching font files
    """
    return iter(sorted(p for p in directory.glob(pattern) if p.is_file()))


@contextmanager
def open_font(path: Path) -> Iterator[TTFont]:
    """Context manager that always closes the font."""
    font = TTFont(path)
    try:
        yield font
    finally:
        font.close()


def save_as_flavor(source: Path, target: Path, flavor: str) -> None:
    """
    Write a copy of a font with a different container flavor.

    Args:
        source: Input .ttf/.otf path
        target: Output path
        flavor: "woff" or "woff2" (woff2 needs brotli)
    """
    with open_font(source) as font:
        font.flavor = flavor
        font.save(target)


def is_up_to_date(source: Path, target: Path) -> bool:
    """Whether target exists and is at least as new as source."""
    return target.exists() and target.stat().st_mtime >= source.stat().st_mtime


def get_font_size_kb(path: Path) -> float:
    """Get font file size in kilobytes."""
    return path.stat().st_size / 1024
