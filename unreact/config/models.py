"""Typed dataclasses describing unreact configuration structures."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from unreact._constants import DEV_BUILD_DIR


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class Config:
    """Directories and options for one build.

    Attributes
    ----------
    build : str
        Output directory for production builds. Development builds always
        use ``.devbuild`` instead.
    templates : str
        Directory of templates; may be nested.
    public : str
        Directory of static assets copied verbatim into ``<build>/public``.
    styles : str
        Directory of SCSS sources; also the name of the CSS sub-directory
        inside the build.
    dev_warning : bool
        Whether the ``DEV_SCRIPT`` partial emits a console warning in dev mode.
    minify : bool
        Whether HTML and CSS output is minified.
    """

    build: str = "build"
    templates: str = "templates"
    public: str = "public"
    styles: str = "styles"
    dev_warning: bool = True
    minify: bool = True

    @property
    def styles_subdir(self) -> str:
        """Name of the CSS directory inside the build output.

        >>> Config(styles="assets/scss").styles_subdir
        'scss'
        """
        return Path(self.styles).name

    def for_mode(self, is_dev: bool) -> Config:
        """Return the config to use for the given mode.

        >>> Config(build="dist").for_mode(True).build
        '.devbuild'
        >>> Config(build="dist").for_mode(False).build
        'dist'
        """
        if is_dev:
            return dc.replace(self, build=DEV_BUILD_DIR)
        return self


@dc.dataclass(slots=True)
class PageEntry:
    """Page declared in the site config file.

    Exactly one of ``template`` and ``content`` is set: templated pages are
    rendered with ``data``, plain pages are written as-is.
    """

    path: str
    template: str | None = None
    data: typ.Any = None
    content: str | None = None


@dc.dataclass(slots=True)
class SiteConfig:
    """Aggregated site configuration loaded from ``unreact.yaml``."""

    url: str
    config: Config = dc.field(default_factory=Config)
    globals: typ.Any = None
    pages: list[PageEntry] = dc.field(default_factory=list)


__all__ = ["Config", "PageEntry", "SiteConfig", "SiteConfigError"]
