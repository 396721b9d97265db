"""Tests for copy and clean operations."""

from assetpipe.operations.clean import clean, remove_generated_css
from assetpipe.operations.copy import copy_data, copy_fonts, copy_tree


def test_copy_fonts_filters_extensions(project):
    """Test only font formats are copied, keeping relative paths."""
    for name in ("a.woff", "a.woff2", "b.TTF", "notes.txt", "a.css"):
        (project.fonts_src / name).write_bytes(b"x")
    (project.fonts_src / "icons").mkdir()
    (project.fonts_src / "icons" / "icons.svg").write_bytes(b"<svg/>")

    copied = copy_fonts(project)

    names = sorted(p.relative_to(project.fonts_dist).as_posix() for p in copied)
    assert names == ["a.woff", "a.woff2", "b.TTF", "icons/icons.svg"]
    assert (project.fonts_dist / "icons" / "icons.svg").read_bytes() == b"<svg/>"


def test_copy_data_copies_everything(project):
    """Test every data file is mirrored."""
    (project.data_src / "nested").mkdir()
    (project.data_src / "nested" / "items.json").write_text("[]")
    (project.data_src / "readme.txt").write_text("hi")

    copied = copy_data(project)

    assert len(copied) == 2
    assert (project.data_dist / "nested" / "items.json").read_text() == "[]"


def test_copy_tree_missing_source(tmp_path):
    """Test a missing source directory copies nothing."""
    assert copy_tree(tmp_path / "missing", tmp_path / "out") == []
    assert not (tmp_path / "out").exists()


def test_clean_removes_dist_and_font_css(project):
    """Test clean removes dist/ and CSS generated beside fonts."""
    project.css_dist.mkdir(parents=True)
    (project.css_dist / "main.min.css").write_text("body{}")
    (project.fonts_src / "a.css").write_text("")
    (project.fonts_src / "a.woff").write_bytes(b"x")

    clean(project)

    assert not project.dist.exists()
    assert not (project.fonts_src / "a.css").exists()
    assert (project.fonts_src / "a.woff").exists()


def test_clean_without_output(project):
    """Test clean succeeds when nothing was built."""
    clean(project)
    assert not project.dist.exists()


def test_remove_generated_css_missing_dir(tmp_path):
    """Test missing font directories are ignored."""
    assert remove_generated_css(tmp_path / "missing") == 0
