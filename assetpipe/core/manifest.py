"""
Font manifest synchronization.

Regenerates a Sass fragment with one ``font-face`` include per font family
found in a directory of generated web fonts.
"""

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from assetpipe.config.fonts import DEFAULT_URL_PREFIX, DEFAULT_WEIGHT, DIRECTIVE_TEMPLATE
from assetpipe.errors import DirectoryNotFound, WriteFailure
from assetpipe.utils.logging import logger


class ListingOrder(str, Enum):
    """Order in which directory entries are folded into the manifest."""

    NATIVE = "native"  # whatever the filesystem returns; not deterministic
    SORTED = "sorted"


class Dedupe(str, Enum):
    """How repeated family names are collapsed."""

    ADJACENT = "adjacent"  # only consecutive entries are compared
    ALL = "all"


@dataclass
class ManifestResult:
    """Outcome of one manifest run."""

    fragment: Path
    entries: list[str] = field(default_factory=list)
    families: list[str] = field(default_factory=list)


def family_name(filename: str) -> str:
    """Return the part of a file name before its first dot."""
    return filename.split(".", 1)[0]


def collect_families(names: Iterable[str], dedupe: Dedupe = Dedupe.ADJACENT) -> list[str]:
    """
    Fold file names into the ordered list of families to emit.

    With ``Dedupe.ADJACENT`` a family is emitted whenever it differs from the
    previous entry's family, so a family split by another one is emitted
    twice. ``Dedupe.ALL`` emits each family once, at its first occurrence.

    Args:
        names: File names in listing order
        dedupe: Duplicate handling

    Returns:
        Family names in emission order
    """
    families: list[str] = []
    previous: str | None = None
    seen: set[str] = set()

    for name in names:
        family = family_name(name)
        if not family:
            # Dotfiles such as .DS_Store
            continue
        if dedupe is Dedupe.ALL:
            if family in seen:
                continue
            seen.add(family)
        elif family == previous:
            continue
        families.append(family)
        previous = family

    return families


def format_directive(
    family: str,
    url_prefix: str = DEFAULT_URL_PREFIX,
    weight: int = DEFAULT_WEIGHT,
) -> str:
    """Render one manifest line for a family."""
    return DIRECTIVE_TEMPLATE.format(
        path=f"{url_prefix}{family}",
        family=family,
        weight=int(weight),
    )


def list_font_files(font_dir: Path) -> list[str]:
    """
    List regular file names in a font directory, in filesystem order.

    Raises:
        DirectoryNotFound: If the directory is missing or cannot be listed
    """
    try:
        with os.scandir(font_dir) as it:
            return [entry.name for entry in it if entry.is_file()]
    except FileNotFoundError:
        raise DirectoryNotFound(font_dir) from None
    except NotADirectoryError:
        raise DirectoryNotFound(font_dir, "is not a directory") from None
    except OSError as e:
        raise DirectoryNotFound(font_dir, f"cannot be listed: {e}") from e


def sync_font_manifest(
    font_dir: Path,
    fragment: Path,
    *,
    order: ListingOrder = ListingOrder.NATIVE,
    dedupe: Dedupe = Dedupe.ADJACENT,
    url_prefix: str = DEFAULT_URL_PREFIX,
    weight: int = DEFAULT_WEIGHT,
) -> ManifestResult:
    """
    Rebuild the manifest fragment from the contents of a font directory.

    The fragment is truncated before the directory is listed, so a missing
    directory leaves it empty rather than holding stale directives. Lines are
    appended one by one to a single open file; the function returns only
    after the file has been closed.

    Args:
        font_dir: Directory holding generated font files
        fragment: Sass fragment to overwrite
        order: Listing order to fold over
        dedupe: Duplicate family handling
        url_prefix: Prefix joined to each family to form its font path
        weight: Weight passed to every directive

    Returns:
        ManifestResult with the scanned entries and emitted families

    Raises:
        DirectoryNotFound: If font_dir is missing or not listable
        WriteFailure: If the fragment cannot be truncated or written
    """
    result = ManifestResult(fragment=fragment)

    # close() retries a failed flush and can raise again
    try:
        with open(fragment, "w", encoding="utf-8", newline="\n") as handle:
            entries = list_font_files(font_dir)
            if order is ListingOrder.SORTED:
                entries.sort()
            result.entries = entries

            for family in collect_families(entries, dedupe):
                handle.write(format_directive(family, url_prefix, weight))
                handle.flush()
                result.families.append(family)
    except (OSError, UnicodeError) as e:
        raise WriteFailure(fragment, e) from e

    logger.info(
        f"Wrote {len(result.families)} font families to {fragment.name} "
        f"({len(entries)} files in {font_dir})"
    )
    return result
