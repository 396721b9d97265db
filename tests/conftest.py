"""Shared pytest fixtures."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from PIL import Image

from assetpipe.config.paths import ProjectPaths

FONT_FACE_MIXIN = """\
@mixin font-face($path, $family, $weight) {
  @font-face {
    font-family: $family;
    src: url("#{$path}.woff2") format("woff2"), url("#{$path}.woff") format("woff");
    font-weight: $weight;
    font-style: normal;
  }
}
"""


def build_test_font(path: Path, family: str = "Test") -> Path:
    """Write a minimal TrueType font with a single box glyph."""
    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((500, 700))
    pen.lineTo((500, 0))
    pen.closePath()
    glyph = pen.glyph()

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder([".notdef", "A"])
    fb.setupCharacterMap({ord("A"): "A"})
    fb.setupGlyf({".notdef": glyph, "A": glyph})
    glyf = fb.font["glyf"]
    fb.setupHorizontalMetrics({name: (600, glyf[name].xMin) for name in (".notdef", "A")})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": family, "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()

    path.parent.mkdir(parents=True, exist_ok=True)
    fb.save(str(path))
    return path


@pytest.fixture
def make_font():
    """Factory writing minimal TTF files."""
    return build_test_font


@pytest.fixture
def font_face_mixin():
    """Sass mixin consuming manifest directives."""
    return FONT_FACE_MIXIN


@pytest.fixture
def temp_font_dir(tmp_path):
    """Create a temporary directory for font testing."""
    font_dir = tmp_path / "fonts"
    font_dir.mkdir()
    return font_dir


@pytest.fixture
def project(tmp_path):
    """Empty project layout with source directories in place."""
    paths = ProjectPaths.from_root(tmp_path)
    for directory in (paths.fonts_src, paths.styles_src, paths.data_src):
        directory.mkdir(parents=True)
    return paths


@pytest.fixture
def site_project(project):
    """Project with one TTF, Sass sources using the manifest, a page, an image and data."""
    build_test_font(project.fonts_src / "Test-Regular.ttf")
    (project.styles_src / "_mixins.scss").write_text(FONT_FACE_MIXIN)
    (project.styles_src / "main.scss").write_text(
        '@import "mixins";\n@import "fonts";\n\nbody {\n  color: red;\n}\n'
    )
    (project.data_src / "info.json").write_text('{"name": "site"}\n')
    project.images_src.mkdir(parents=True)
    Image.new("RGB", (4, 4), "white").save(project.images_src / "hero.jpg")
    (project.src / "_head.html").write_text("<title>site</title>\n")
    (project.src / "index.html").write_text(
        '<!--=include _head.html -->\n<img src="assets/images/hero.jpg">\n'
    )
    return project
