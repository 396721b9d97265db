"""Integration tests for the assetpipe command line."""

import pytest
from click.testing import CliRunner

from assetpipe import __version__
from assetpipe.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, paths, *args):
    return runner.invoke(cli, ["--root", str(paths.root), *args])


def test_version(runner):
    """Test --version reports the package version."""
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_fonts_manifest_sorted(runner, project):
    """Test fonts-manifest writes one directive per family."""
    for name in ("b.woff", "a.woff2", "a.woff"):
        (project.fonts_src / name).write_bytes(b"")

    result = invoke(runner, project, "build", "fonts-manifest", "--order", "sorted")

    assert result.exit_code == 0, result.output
    assert project.font_manifest.read_text() == (
        '@include font-face("../fonts/a", "a", 400);\n'
        '@include font-face("../fonts/b", "b", 400);\n'
    )


def test_fonts_manifest_url_prefix(runner, project):
    """Test the font path prefix can be overridden."""
    (project.fonts_src / "a.woff").write_bytes(b"")

    result = invoke(runner, project, "build", "fonts-manifest", "--url-prefix", "/fonts/")

    assert result.exit_code == 0, result.output
    assert project.font_manifest.read_text() == '@include font-face("/fonts/a", "a", 400);\n'


def test_fonts_manifest_missing_directory(runner, project):
    """Test a missing font directory exits with status 1 and empties the manifest."""
    project.font_manifest.write_text('@include font-face("../fonts/old", "old", 400);\n')
    project.fonts_src.rmdir()

    result = invoke(runner, project, "build", "fonts-manifest")

    assert result.exit_code == 1
    assert project.font_manifest.read_text() == ""


def test_build_all_production(runner, site_project):
    """Test build all honours the mode from the environment."""
    result = runner.invoke(
        cli,
        ["--root", str(site_project.root), "build", "all"],
        env={"ASSETPIPE_ENV": "production"},
    )

    assert result.exit_code == 0, result.output
    assert (site_project.css_dist / "main.min.css").exists()
    assert not (site_project.css_dist / "main.min.css.map").exists()


def test_individual_steps(runner, site_project):
    """Test each build step can run on its own."""
    for step in ("fontgen", "fonts-manifest", "fonts", "data", "styles", "images", "html"):
        result = invoke(runner, site_project, "build", step)
        assert result.exit_code == 0, f"{step}: {result.output}"

    assert (site_project.fonts_dist / "Test-Regular.woff2").exists()
    assert (site_project.data_dist / "info.json").exists()
    assert (site_project.images_dist / "hero.webp").exists()
    assert (site_project.dist / "index.html").exists()
    assert (site_project.css_dist / "main.min.css").exists()

    result = invoke(runner, site_project, "build", "clean")
    assert result.exit_code == 0
    assert not site_project.dist.exists()
