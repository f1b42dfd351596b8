"""Thin wrappers over the third-party tools the build writer relies on.

Each wrapper turns a library failure into the matching
:class:`~unreact.errors.UnreactError` so callers only deal with one taxonomy.
"""

from __future__ import annotations

import shutil
from pathlib import Path

import csscompressor
import minify_html
import sass

from .errors import AssetCopyError, StyleCompileError, StyleMinifyError


def compile_scss(name: str, source: str) -> str:
    """Compile SCSS ``source`` (logical name ``name``) to CSS."""
    try:
        return sass.compile(string=source)
    except sass.CompileError as exc:
        raise StyleCompileError(name, exc) from exc


def minify_css_text(name: str, css: str) -> str:
    """Minify compiled CSS for the style sheet ``name``."""
    try:
        return csscompressor.compress(css)
    except Exception as exc:
        raise StyleMinifyError(name, exc) from exc


def minify_html_text(html: str) -> str:
    """Minify an HTML document, keeping doctype declarations and comments."""
    return minify_html.minify(html, minify_doctype=False, keep_comments=True)


def copy_public(source: Path, destination: Path) -> None:
    """Copy the public asset tree into ``destination``, merging if it exists."""
    try:
        shutil.copytree(source, destination, dirs_exist_ok=True)
    except (OSError, shutil.Error) as exc:
        raise AssetCopyError(source, exc) from exc


__all__ = ["compile_scss", "copy_public", "minify_css_text", "minify_html_text"]
