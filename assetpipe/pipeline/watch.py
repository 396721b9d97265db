"""
Development server with coalesced rebuilds.

Watches source directories and serves dist/ with live reload.
"""

import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from livereload import Server

from assetpipe.config.paths import ProjectPaths
from assetpipe.config.settings import BuildMode
from assetpipe.operations.copy import copy_data, copy_fonts
from assetpipe.operations.fontgen import generate_webfonts
from assetpipe.operations.fonts_manifest import update_font_manifest
from assetpipe.operations.html import build_pages
from assetpipe.operations.images import process_images
from assetpipe.operations.styles import compile_styles
from assetpipe.pipeline.runner import series
from assetpipe.utils.logging import logger

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000


class CoalescingRunner:
    """
    Runs a job with at most one execution in flight and one queued.

    Triggers that arrive while the job is running collapse into a single
    follow-up run. Every trigger returns a Future that resolves with the
    result of the first run that starts after it.
    """

    def __init__(self, name: str, func: Callable[[], object]):
        self.name = name
        self._func = func
        self._lock = threading.Lock()
        self._running = False
        self._pending: Future | None = None
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix=name)

    def trigger(self) -> Future:
        with self._lock:
            if self._running:
                if self._pending is None:
                    self._pending = Future()
                return self._pending
            self._running = True
            future: Future = Future()

        self._executor.submit(self._drain, future)
        return future

    def _drain(self, future: Future | None) -> None:
        while future is not None:
            notify = future.set_running_or_notify_cancel()
            try:
                result = self._func()
            except Exception as e:
                logger.error(f"{self.name} failed: {e}")
                if notify:
                    future.set_exception(e)
            else:
                if notify:
                    future.set_result(result)

            with self._lock:
                future, self._pending = self._pending, None
                if future is None:
                    self._running = False

    def shutdown(self) -> None:
        self._executor.shutdown(wait=True)


@dataclass
class WatchTarget:
    """A directory and the runner it triggers."""

    path: Path
    runner: CoalescingRunner


def watch_targets(paths: ProjectPaths, mode: BuildMode) -> list[WatchTarget]:
    """
    Source directories and their rebuild jobs.

    A font change generates webfonts, then the manifest, then copies fonts,
    so neither the manifest nor the copy sees a half-finished font set. Pages
    are rebuilt on any change under src/ because they inline images.
    """
    return [
        WatchTarget(
            paths.fonts_src,
            CoalescingRunner(
                "fonts",
                series(
                    ("fontgen", lambda: generate_webfonts(paths)),
                    ("fonts-manifest", lambda: update_font_manifest(paths)),
                    ("fonts", lambda: copy_fonts(paths)),
                ),
            ),
        ),
        WatchTarget(
            paths.styles_src,
            CoalescingRunner("styles", lambda: compile_styles(paths, mode)),
        ),
        WatchTarget(
            paths.data_src,
            CoalescingRunner("data", lambda: copy_data(paths)),
        ),
        WatchTarget(
            paths.images_src,
            CoalescingRunner("images", lambda: process_images(paths)),
        ),
        WatchTarget(
            paths.src,
            CoalescingRunner("html", lambda: build_pages(paths)),
        ),
    ]


def _blocking(runner: CoalescingRunner) -> Callable[[], None]:
    """Wrap a runner so the server waits for the rebuild before reloading."""

    def run() -> None:
        # Failures are already logged by the runner
        runner.trigger().exception()

    run.__name__ = runner.name
    return run


def register_watches(server, targets: list[WatchTarget]) -> None:
    """Attach each target to a livereload-compatible server."""
    for target in targets:
        if not target.path.exists():
            logger.warning(f"{target.path}/ does not exist (not watched)")
            continue
        logger.info(f"Watching {target.path}/ ({target.runner.name})")
        server.watch(str(target.path), _blocking(target.runner))


def serve(
    paths: ProjectPaths,
    mode: BuildMode = BuildMode.DEVELOPMENT,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> None:
    """Serve dist/ with live reload until interrupted."""
    server = Server()
    targets = watch_targets(paths, mode)
    register_watches(server, targets)

    logger.info(f"Serving {paths.dist}/ at http://{host}:{port}")
    try:
        server.serve(root=str(paths.dist), host=host, port=port)
    finally:
        for target in targets:
            target.runner.shutdown()
