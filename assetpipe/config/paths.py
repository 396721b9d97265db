"""
Filesystem path constants for build steps.

Centralizes the project layout so operations never hardcode directory names.
"""

from dataclasses import dataclass
from pathlib import Path

SRC_DIR = Path("src")
DIST_DIR = Path("dist")
ASSETS_DIR = Path("assets")

FONTS_DIR = "fonts"
STYLES_DIR = "styles"
DATA_DIR = "data"
IMAGES_DIR = "images"
CSS_DIR = "css"

# Generated fragment imported by the style sources
FONT_MANIFEST = "_fonts.scss"


@dataclass(frozen=True)
class ProjectPaths:
    """Source and output locations resolved against a project root."""

    root: Path

    @property
    def src(self) -> Path:
        return self.root / SRC_DIR

    @property
    def dist(self) -> Path:
        return self.root / DIST_DIR

    @property
    def fonts_src(self) -> Path:
        return self.src / ASSETS_DIR / FONTS_DIR

    @property
    def styles_src(self) -> Path:
        return self.src / ASSETS_DIR / STYLES_DIR

    @property
    def data_src(self) -> Path:
        return self.src / ASSETS_DIR / DATA_DIR

    @property
    def images_src(self) -> Path:
        return self.src / ASSETS_DIR / IMAGES_DIR

    @property
    def font_manifest(self) -> Path:
        return self.styles_src / FONT_MANIFEST

    @property
    def fonts_dist(self) -> Path:
        return self.dist / ASSETS_DIR / FONTS_DIR

    @property
    def css_dist(self) -> Path:
        return self.dist / ASSETS_DIR / CSS_DIR

    @property
    def data_dist(self) -> Path:
        return self.dist / ASSETS_DIR / DATA_DIR

    @property
    def images_dist(self) -> Path:
        return self.dist / ASSETS_DIR / IMAGES_DIR

    @classmethod
    def from_root(cls, root: Path | str = ".") -> "ProjectPaths":
        return cls(Path(root))
