"""Tests for the build directory lifecycle and the build writer."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from unreact.builder import BuildDirectory, BuildState, write_build
from unreact.config import Config
from unreact.errors import (
    AssetCopyError,
    BuildStateError,
    DirectoryCreateError,
    DirectoryMissingError,
    StyleCompileError,
)
from unreact.pages import Page, PageRegistry


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Create source directories with one public asset."""
    for name in ("templates", "styles", "public"):
        (tmp_path / name).mkdir()
    (tmp_path / "public" / "img").mkdir()
    (tmp_path / "public" / "img" / "logo.svg").write_text("<svg/>", encoding="utf-8")
    return tmp_path


def _config(root: Path, *, minify: bool = False) -> Config:
    return Config(
        build=str(root / "build"),
        templates=str(root / "templates"),
        public=str(root / "public"),
        styles=str(root / "styles"),
        minify=minify,
    )


def test_validate_reports_missing_directory(site_root: Path) -> None:
    (site_root / "styles").rmdir()
    build = BuildDirectory(_config(site_root))

    with pytest.raises(DirectoryMissingError) as excinfo:
        build.validate()

    assert excinfo.value.path == str(site_root / "styles")
    assert build.state is BuildState.UNVALIDATED


def test_clear_removes_previous_build(site_root: Path) -> None:
    stale = site_root / "build" / "old" / "page.html"
    stale.parent.mkdir(parents=True)
    stale.write_text("stale", encoding="utf-8")

    build = BuildDirectory(_config(site_root)).validate().clear()

    assert build.state is BuildState.CLEARED
    assert not (site_root / "build").exists()


def test_steps_out_of_order_raise(site_root: Path) -> None:
    build = BuildDirectory(_config(site_root))

    with pytest.raises(BuildStateError):
        build.clear()
    with pytest.raises(BuildStateError):
        build.populate([], {})


def test_populate_writes_pages_styles_and_assets(site_root: Path) -> None:
    config = _config(site_root)
    styles_dir = config.styles_subdir
    pages = PageRegistry()
    pages.index("<p>home</p>")
    pages.add("blog/2024/first", "<p>first</p>")
    styles = {"main": "$c: red;\na { color: $c; }", "themes/dark": "b { color: black; }"}

    build = BuildDirectory(config).validate().clear()
    written = build.populate(pages, styles)

    out = site_root / "build"
    assert build.state is BuildState.POPULATED
    assert (out / "index.html").read_text(encoding="utf-8") == "<p>home</p>"
    assert (out / "blog" / "2024" / "first.html").read_text(encoding="utf-8") == (
        "<p>first</p>"
    )
    assert "color: red" in (out / styles_dir / "main.css").read_text(encoding="utf-8")
    assert (out / styles_dir / "themes" / "dark.css").is_file()
    assert (out / "public" / "img" / "logo.svg").read_text(encoding="utf-8") == "<svg/>"
    assert written[0] == out / "index.html"
    assert written[-1] == out / "public"


def test_later_duplicate_page_wins(site_root: Path) -> None:
    config = _config(site_root)
    pages = [Page("about", "first"), Page("about", "second")]

    BuildDirectory(config).validate().clear().populate(pages, {})

    assert (site_root / "build" / "about.html").read_text(encoding="utf-8") == "second"


def test_minify_keeps_doctype_and_comments(site_root: Path) -> None:
    config = _config(site_root, minify=True)
    html = (
        "<!DOCTYPE html>\n<html>\n  <head><title>Home</title></head>\n"
        "  <body>\n    <!-- keep me -->\n    <p>  Hello   world  </p>\n"
        "  </body>\n</html>\n"
    )
    styles = {"main": "a {\n  color: red;\n}\n"}

    BuildDirectory(config).validate().clear().populate([Page("index", html)], styles)

    output = (site_root / "build" / "index.html").read_text(encoding="utf-8")
    assert output.lower().startswith("<!doctype html")
    assert "<!-- keep me -->" in output
    assert len(output) < len(html)
    soup = BeautifulSoup(output, "html.parser")
    assert soup.title is not None
    assert soup.title.string == "Home"
    css = (site_root / "build" / "styles" / "main.css").read_text(encoding="utf-8")
    assert css == "a{color:red}"


def test_scss_failure_names_the_style(site_root: Path) -> None:
    config = _config(site_root)

    with pytest.raises(StyleCompileError) as excinfo:
        BuildDirectory(config).validate().clear().populate(
            [], {"broken": "a { color: $undefined; }"}
        )

    assert excinfo.value.name == "broken"


def test_directory_creation_failure_names_path(site_root: Path) -> None:
    config = _config(site_root)
    build = BuildDirectory(config).validate().clear()
    (site_root / "build").mkdir()
    (site_root / "build" / "blog").write_text("not a dir", encoding="utf-8")

    with pytest.raises(DirectoryCreateError) as excinfo:
        build.populate([Page("blog/post", "x")], {})

    assert excinfo.value.path == str(site_root / "build" / "blog")


def test_missing_public_directory_raises_asset_copy_error(site_root: Path) -> None:
    (site_root / "build").mkdir()
    missing = site_root / "gone"
    config = dc.replace(_config(site_root), public=str(missing))

    with pytest.raises(AssetCopyError) as excinfo:
        write_build([], {}, config)

    assert excinfo.value.path == str(missing)
