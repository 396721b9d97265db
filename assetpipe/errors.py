"""
Exception hierarchy for build operations.
"""

from pathlib import Path


class AssetPipeError(Exception):
    """Base class for all build errors."""


class ManifestError(AssetPipeError):
    """Font manifest could not be regenerated."""


class DirectoryNotFound(ManifestError):
    """Font directory is missing or cannot be listed."""

    def __init__(self, path: Path, reason: str = "does not exist"):
        self.path = path
        super().__init__(f"Font directory {path} {reason}")


class WriteFailure(ManifestError):
    """Manifest fragment could not be truncated or appended to."""

    def __init__(self, path: Path, cause: OSError | UnicodeError):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot write {path}: {cause}")


class FontConversionError(AssetPipeError):
    """A TTF source could not be converted to a webfont flavor."""


class StyleCompileError(AssetPipeError):
    """Sass compilation failed."""


class ImageProcessingError(AssetPipeError):
    """An image could not be decoded or re-encoded."""


class HtmlIncludeError(AssetPipeError):
    """An HTML include could not be resolved."""
