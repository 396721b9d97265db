"""
Build pipeline orchestration.

Runs build steps in series or in parallel, in the correct order.
"""

import sys
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor

from assetpipe.config.paths import ProjectPaths
from assetpipe.config.settings import BuildMode
from assetpipe.operations.clean import clean
from assetpipe.operations.copy import copy_data, copy_fonts
from assetpipe.operations.fontgen import generate_webfonts
from assetpipe.operations.fonts_manifest import update_font_manifest
from assetpipe.operations.html import build_pages
from assetpipe.operations.images import process_images
from assetpipe.operations.styles import compile_styles
from assetpipe.utils.logging import logger

Step = tuple[str, Callable[[], object]]


def series(*steps: Step) -> Callable[[], None]:
    """Compose steps that run one after another; the first failure stops the chain."""

    def run() -> None:
        for name, func in steps:
            logger.debug(f"Starting {name}")
            func()

    return run


def parallel(*steps: Step) -> Callable[[], None]:
    """
    Compose steps that run concurrently.

    The returned callable blocks until every step has finished, then
    re-raises the first failure (in step order), if any.
    """

    def run() -> None:
        if not steps:
            return
        with ThreadPoolExecutor(max_workers=len(steps)) as executor:
            futures = [(name, executor.submit(func)) for name, func in steps]

        errors = []
        for name, future in futures:
            error = future.exception()
            if error is not None:
                logger.error(f"{name} failed: {error}")
                errors.append(error)
        if errors:
            raise errors[0]

    return run


def build_steps(paths: ProjectPaths, mode: BuildMode) -> list[Step]:
    """
    Steps of a full build.

    Build pipeline:
      1. clean          - Remove dist/ and generated font CSS
      2. fontgen        - Generate .woff/.woff2 from .ttf sources
      3. fonts-manifest - Regenerate the _fonts.scss include list
      4. assets         - html, styles, images, fonts and data, in parallel
    """
    return [
        ("clean", lambda: clean(paths)),
        ("fontgen", lambda: generate_webfonts(paths)),
        ("fonts-manifest", lambda: update_font_manifest(paths)),
        (
            "assets",
            parallel(
                ("html", lambda: build_pages(paths)),
                ("styles", lambda: compile_styles(paths, mode)),
                ("images", lambda: process_images(paths)),
                ("fonts", lambda: copy_fonts(paths)),
                ("data", lambda: copy_data(paths)),
            ),
        ),
    ]


def run_steps(steps: list[Step], label: str = "build") -> None:
    """
    Run steps in order, logging progress.

    Exits the process with status 1 on the first failure.
    """
    logger.info(f"Running {label} steps")

    for i, (name, func) in enumerate(steps, 1):
        logger.info(f"[{i}/{len(steps)}] Running {name}")
        try:
            func()
            logger.info(f"{name} completed")
        except SystemExit as e:
            if e.code != 0:
                logger.error(f"{name} failed")
                sys.exit(e.code)
        except Exception as e:
            logger.error(f"{name} failed: {e}")
            sys.exit(1)

    logger.info(f"All {label} steps completed successfully")


def run_build(paths: ProjectPaths, mode: BuildMode = BuildMode.DEVELOPMENT) -> None:
    """Run the complete build pipeline."""
    logger.info(f"Building {paths.root.resolve()} ({mode.value})")
    run_steps(build_steps(paths, mode))
