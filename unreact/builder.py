"""Write registered pages, compiled styles, and public assets to disk.

The build directory moves through a fixed lifecycle, tracked by
:class:`BuildDirectory`::

    UNVALIDATED -> VALIDATED -> CLEARED -> POPULATED

Validation checks that the source directories exist, clearing wipes any
previous build, and population recreates the output skeleton and runs
:func:`write_build`. A failure part-way through leaves the build directory
as it is.

Example
-------
>>> from unreact.config import Config
>>> build = BuildDirectory(Config())  # doctest: +SKIP
>>> build.validate().clear()  # doctest: +SKIP
>>> build.populate(pages, styles)  # doctest: +SKIP
[PosixPath('build/index.html'), ...]
"""

from __future__ import annotations

import enum
import logging
import shutil
import typing as typ
from pathlib import Path

from unreact._constants import PUBLIC_SUBDIR
from unreact.collaborators import (
    compile_scss,
    copy_public,
    minify_css_text,
    minify_html_text,
)
from unreact.errors import (
    BuildStateError,
    DirectoryCreateError,
    DirectoryMissingError,
    DirectoryRemoveError,
    FileWriteError,
)

if typ.TYPE_CHECKING:
    from unreact.config import Config
    from unreact.pages import Page

logger = logging.getLogger(__name__)


class BuildState(enum.Enum):
    """Lifecycle stages of the build output directory."""

    UNVALIDATED = "unvalidated"
    VALIDATED = "validated"
    CLEARED = "cleared"
    POPULATED = "populated"


class BuildDirectory:
    """Drive the build directory through validation, clearing, and writing."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self.root = Path(config.build)
        self.state = BuildState.UNVALIDATED

    def validate(self) -> BuildDirectory:
        """Check that the template, public, and style directories exist.

        Raises
        ------
        DirectoryMissingError
            For the first source directory that is not a directory.
        """
        self._expect(BuildState.UNVALIDATED)
        for directory in (
            self.config.templates,
            self.config.public,
            self.config.styles,
        ):
            if not Path(directory).is_dir():
                raise DirectoryMissingError(directory)
        self.state = BuildState.VALIDATED
        return self

    def clear(self) -> BuildDirectory:
        """Remove a previous build directory, if any.

        The removal is recursive and keeps no backup.
        """
        self._expect(BuildState.VALIDATED)
        if self.root.exists():
            try:
                shutil.rmtree(self.root)
            except OSError as exc:
                raise DirectoryRemoveError(self.root, exc) from exc
            logger.debug("removed previous build at %s", self.root)
        self.state = BuildState.CLEARED
        return self

    def populate(
        self, pages: typ.Iterable[Page], styles: typ.Mapping[str, str]
    ) -> list[Path]:
        """Recreate the build skeleton, then write pages, styles, and assets.

        Returns the written paths from :func:`write_build`.
        """
        self._expect(BuildState.CLEARED)
        for directory in (
            self.root,
            self.root / self.config.styles_subdir,
            self.root / PUBLIC_SUBDIR,
        ):
            _make_dir(directory)
        written = write_build(pages, styles, self.config)
        self.state = BuildState.POPULATED
        return written

    def _expect(self, state: BuildState) -> None:
        if self.state is not state:
            msg = (
                f"Build directory '{self.root}' is {self.state.value}; "
                f"expected {state.value}"
            )
            raise BuildStateError(msg)


def write_build(
    pages: typ.Iterable[Page], styles: typ.Mapping[str, str], config: Config
) -> list[Path]:
    """Write every page and style sheet, then copy the public assets.

    Parameters
    ----------
    pages : Iterable[Page]
        Pages to write as ``<build>/<path>.html``.
    styles : Mapping[str, str]
        Logical name to SCSS source; written as ``<build>/<styles>/<name>.css``.
    config : Config
        Directories and the ``minify`` flag.

    Returns
    -------
    list[Path]
        Written HTML and CSS files in write order, followed by the public
        asset directory.

    Raises
    ------
    DirectoryCreateError, FileWriteError
        On filesystem failures, naming the offending path.
    StyleCompileError, StyleMinifyError
        When a style sheet cannot be compiled or minified.
    AssetCopyError
        When the public directory cannot be copied.
    """
    build_root = Path(config.build)
    written: list[Path] = []

    for page in pages:
        target = _prepare_target(build_root, page.path, ".html")
        html = minify_html_text(page.content) if config.minify else page.content
        _write_text(target, html)
        written.append(target)

    styles_root = build_root / config.styles_subdir
    for name, source in styles.items():
        css = compile_scss(name, source)
        if config.minify:
            css = minify_css_text(name, css)
        target = _prepare_target(styles_root, name, ".css")
        _write_text(target, css)
        written.append(target)

    public_target = build_root / PUBLIC_SUBDIR
    copy_public(Path(config.public), public_target)
    written.append(public_target)
    return written


def _prepare_target(root: Path, logical_path: str, suffix: str) -> Path:
    """Create the directories implied by ``logical_path`` and return the file."""
    *parents, leaf = logical_path.split("/")
    directory = root
    for segment in parents:
        directory = directory / segment
        _make_dir(directory)
    return directory / f"{leaf}{suffix}"


def _make_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreateError(path, exc) from exc


def _write_text(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise FileWriteError(path, exc) from exc
    logger.debug("wrote %s", path)


__all__ = ["BuildDirectory", "BuildState", "write_build"]
