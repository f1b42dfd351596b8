"""Top-level session object tying loading, rendering, and writing together.

:class:`Unreact` is what a site script talks to. Construction derives the
mode-specific config, validates the source directories, clears the previous
build, and loads templates and styles. Pages are then registered through
:meth:`Unreact.page` and friends and written in one batch by
:meth:`Unreact.finish`.

Example
-------
>>> from unreact import Config, Unreact
>>> app = Unreact(Config(), is_dev=False, url="https://mysite.com")  # doctest: +SKIP
>>> app.set_globals({"site": "My site"})  # doctest: +SKIP
>>> app.index("index", {"msg": "Hello!"}).finish()  # doctest: +SKIP
"""

from __future__ import annotations

import logging
from pathlib import Path

from .builder import BuildDirectory
from .config import Config
from .filemap import FileMap, load_filemap
from .merge import JsonValue
from .pages import PageRegistry
from .renderer import TemplateRenderer
from .server import listen as serve_directory

logger = logging.getLogger(__name__)


class Unreact:
    """Build session holding templates, styles, pages, and globals."""

    def __init__(self, config: Config, is_dev: bool, url: str) -> None:
        """Prepare a build session.

        Parameters
        ----------
        config : Config
            Directories and options. In development mode the build directory
            is replaced with ``.devbuild``.
        is_dev : bool
            Whether to build for the local dev server instead of production.
        url : str
            Production base URL used by the ``URL`` partial.

        Raises
        ------
        DirectoryMissingError
            If the templates, public, or styles directory is missing.
        DirectoryRemoveError
            If the previous build directory cannot be removed.
        DirectoryReadError, FileReadError, DuplicateNameError
            If templates or styles cannot be loaded.
        """
        self.config = config.for_mode(is_dev)
        self.is_dev = is_dev
        self.url = url
        self.globals: JsonValue = None
        self.build_dir = BuildDirectory(self.config).validate().clear()
        self.templates: FileMap = load_filemap(Path(self.config.templates))
        self.styles: FileMap = load_filemap(Path(self.config.styles))
        self.pages = PageRegistry()
        self.renderer = TemplateRenderer(
            self.templates,
            url=url,
            is_dev=is_dev,
            dev_warning=self.config.dev_warning,
            styles_dir=self.config.styles_subdir,
        )

    def set_globals(self, data: JsonValue) -> Unreact:
        """Replace the globals merged into every render."""
        self.globals = data
        return self

    def render(self, template: str, data: JsonValue = None) -> str:
        """Render ``template`` with ``data`` and the session globals."""
        return self.renderer.render(template, data, self.globals)

    def page_plain(self, path: str, content: str) -> Unreact:
        """Register a page with raw ``content`` at ``<build>/<path>.html``."""
        self.pages.add(path, content)
        return self

    def page(self, path: str, template: str, data: JsonValue = None) -> Unreact:
        """Render ``template`` with ``data`` and register it at ``path``."""
        return self.page_plain(path, self.render(template, data))

    def index(self, template: str, data: JsonValue = None) -> Unreact:
        """Alias of ``page("index", template, data)``."""
        self.pages.index(self.render(template, data))
        return self

    def not_found(self, template: str, data: JsonValue = None) -> Unreact:
        """Alias of ``page("404", template, data)``."""
        self.pages.not_found(self.render(template, data))
        return self

    def write(self) -> list[Path]:
        """Write registered pages, styles, and public assets to the build."""
        written = self.build_dir.populate(self.pages, self.styles)
        logger.debug("wrote %d path(s) to %s", len(written), self.config.build)
        return written

    def finish(self) -> list[Path]:
        """Write the build and, in development mode, serve it.

        Returns
        -------
        list[Path]
            Paths written by the build. In development mode this only
            returns once the server is stopped.
        """
        written = self.write()
        if self.is_dev:
            self.listen()
        return written

    def listen(self) -> None:
        """Serve the build directory on the local dev address."""
        serve_directory(
            Path(self.config.build), styles_dir=self.config.styles_subdir
        )

    def __repr__(self) -> str:
        mode = "dev" if self.is_dev else "production"
        return (
            f"Unreact(mode={mode}, build={self.config.build!r}, "
            f"templates={len(self.templates)}, styles={len(self.styles)}, "
            f"pages={len(self.pages)})"
        )


__all__ = ["Unreact"]
