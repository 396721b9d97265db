"""
Stylesheet compilation.

Compiles top-level Sass sources into dist/assets/css/<name>.min.css.
"""

from pathlib import Path

import sass

from assetpipe.config.paths import ProjectPaths
from assetpipe.config.settings import BuildMode
from assetpipe.errors import StyleCompileError
from assetpipe.utils.logging import logger

STYLE_PATTERNS = ("*.scss", "*.sass")
OUTPUT_SUFFIX = ".min.css"


def iter_style_sources(styles_dir: Path) -> list[Path]:
    """Top-level Sass files, excluding partials (names starting with _)."""
    sources = [p for pattern in STYLE_PATTERNS for p in styles_dir.glob(pattern)]
    return sorted(p for p in sources if not p.name.startswith("_"))


def compile_stylesheet(source: Path, output_dir: Path, mode: BuildMode) -> Path:
    """
    Compile one Sass source.

    Development builds are expanded and get a source map beside the CSS;
    production builds are compressed.

    Args:
        source: .scss or .sass file
        output_dir: Directory for the compiled CSS
        mode: Build mode

    Returns:
        Path of the written CSS file

    Raises:
        StyleCompileError: If libsass rejects the source
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    target = output_dir / f"{source.stem}{OUTPUT_SUFFIX}"
    include_paths = [str(source.parent)]

    try:
        if mode.is_production:
            css = sass.compile(
                filename=str(source),
                output_style="compressed",
                include_paths=include_paths,
            )
        else:
            map_path = target.with_name(f"{target.name}.map")
            css, source_map = sass.compile(
                filename=str(source),
                output_style="expanded",
                include_paths=include_paths,
                source_map_filename=str(map_path),
                output_filename_hint=str(target),
            )
            map_path.write_text(source_map, encoding="utf-8")
    except sass.CompileError as e:
        raise StyleCompileError(f"Cannot compile {source.name}: {e}") from e

    target.write_text(css, encoding="utf-8")
    logger.info(f"Compiled {source.name} -> {target.name}")
    return target


def compile_styles(paths: ProjectPaths, mode: BuildMode = BuildMode.DEVELOPMENT) -> list[Path]:
    """Compile all top-level style sources."""
    if not paths.styles_src.exists():
        logger.warning(f"{paths.styles_src}/ does not exist (skipped)")
        return []

    sources = iter_style_sources(paths.styles_src)
    if not sources:
        logger.warning(f"No style sources found in {paths.styles_src}/")
        return []

    return [compile_stylesheet(source, paths.css_dist, mode) for source in sources]
