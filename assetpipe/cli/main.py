"""
Main CLI entry point for assetpipe.
"""

import logging

import click

from assetpipe import __version__
from assetpipe.config.paths import ProjectPaths
from assetpipe.config.settings import MODE_ENV_VAR, BuildMode, resolve_mode
from assetpipe.utils.logging import logger


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=str),
    default=".",
    show_default=True,
    help="Project root containing src/ and dist/.",
)
@click.option(
    "--mode",
    type=click.Choice([m.value for m in BuildMode]),
    envvar=MODE_ENV_VAR,
    default=None,
    help=f"Build mode (also read from ${MODE_ENV_VAR}). Defaults to development.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx, root, mode, verbose):
    """Front-end asset build system."""
    if verbose:
        logger.setLevel(logging.DEBUG)
    ctx.obj = {"paths": ProjectPaths.from_root(root), "mode": resolve_mode(mode)}


def _run(name, func):
    """Run one step with the pipeline's logging and exit codes."""
    from assetpipe.pipeline.runner import run_steps

    run_steps([(name, func)], label=name)


@cli.group()
def build():
    """Asset build commands."""
    pass


@build.command("all")
@click.pass_obj
def build_all(obj):
    """Run complete build pipeline."""
    from assetpipe.pipeline.runner import run_build

    run_build(obj["paths"], obj["mode"])


@build.command()
@click.pass_obj
def clean(obj):
    """Remove dist/ and generated font stylesheets."""
    from assetpipe.operations.clean import clean as do_clean

    _run("clean", lambda: do_clean(obj["paths"]))


@build.command()
@click.option("--force", is_flag=True, help="Regenerate up-to-date webfonts too.")
@click.pass_obj
def fontgen(obj, force):
    """Generate .woff and .woff2 files from .ttf sources."""
    from assetpipe.operations.fontgen import generate_webfonts

    _run("fontgen", lambda: generate_webfonts(obj["paths"], force=force))


@build.command("fonts-manifest")
@click.option(
    "--order",
    type=click.Choice(["native", "sorted"]),
    default="native",
    show_default=True,
    help="Directory listing order to fold over.",
)
@click.option(
    "--dedupe",
    type=click.Choice(["adjacent", "all"]),
    default="adjacent",
    show_default=True,
    help="Collapse only consecutive duplicates, or every duplicate family.",
)
@click.option(
    "--url-prefix",
    type=str,
    default=None,
    help="Prefix for font paths in directives. Defaults to ../fonts/.",
)
@click.pass_obj
def fonts_manifest(obj, order, dedupe, url_prefix):
    """Regenerate the font-face include list from the font directory."""
    from assetpipe.config.fonts import DEFAULT_URL_PREFIX
    from assetpipe.core.manifest import Dedupe, ListingOrder
    from assetpipe.operations.fonts_manifest import update_font_manifest

    _run(
        "fonts-manifest",
        lambda: update_font_manifest(
            obj["paths"],
            order=ListingOrder(order),
            dedupe=Dedupe(dedupe),
            url_prefix=DEFAULT_URL_PREFIX if url_prefix is None else url_prefix,
        ),
    )


@build.command()
@click.pass_obj
def fonts(obj):
    """Copy font files to dist/assets/fonts."""
    from assetpipe.operations.copy import copy_fonts

    _run("fonts", lambda: copy_fonts(obj["paths"]))


@build.command()
@click.pass_obj
def data(obj):
    """Copy data files to dist/assets/data."""
    from assetpipe.operations.copy import copy_data

    _run("data", lambda: copy_data(obj["paths"]))


@build.command()
@click.pass_obj
def html(obj):
    """Assemble pages with includes into dist/."""
    from assetpipe.operations.html import build_pages

    _run("html", lambda: build_pages(obj["paths"]))


@build.command()
@click.pass_obj
def images(obj):
    """Optimize images and write WebP renditions to dist/assets/images."""
    from assetpipe.operations.images import process_images

    _run("images", lambda: process_images(obj["paths"]))


@build.command()
@click.pass_obj
def styles(obj):
    """Compile Sass sources to dist/assets/css."""
    from assetpipe.operations.styles import compile_styles

    _run("styles", lambda: compile_styles(obj["paths"], obj["mode"]))


@cli.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Address to bind.")
@click.option("--port", type=int, default=3000, show_default=True, help="Port to serve on.")
@click.option("--no-build", is_flag=True, help="Serve without running a full build first.")
@click.pass_obj
def dev(obj, host, port, no_build):
    """Build, then serve dist/ and rebuild on changes."""
    from assetpipe.pipeline.runner import run_build
    from assetpipe.pipeline.watch import serve

    if not no_build:
        run_build(obj["paths"], obj["mode"])
    serve(obj["paths"], obj["mode"], host=host, port=port)


if __name__ == "__main__":
    cli()
