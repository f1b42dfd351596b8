"""Cyclopts CLI entrypoint for building an unreact site.

The ``unreact`` console script reads ``unreact.yaml``, registers the pages it
declares, and either writes a production build or, with ``--dev``/``-d``,
builds into ``.devbuild`` and serves it on ``http://127.0.0.1:8080``.
Directories in the config are resolved against the current working directory.

Examples
--------
Build for production:

>>> from unreact.cli import main
>>> main()  # doctest: +SKIP

Build and serve a development preview with a custom config file:

>>> from unreact.cli import app
>>> app(["--dev", "--config", "site/unreact.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

from cyclopts import App, Parameter
from ruamel.yaml import YAMLError

from ._constants import DEFAULT_SITE_CONFIG
from .config import SiteConfig, SiteConfigError, load_site_config
from .errors import UnreactError
from .session import Unreact

DEFAULT_CONFIG = Path(DEFAULT_SITE_CONFIG)

app = App(name="unreact", help="Assemble a static site from templates and styles.")


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.default
def build(
    *,
    dev: typ.Annotated[
        bool,
        Parameter(
            name=["--dev", "-d"],
            negative=(),
            help="Build into .devbuild and serve it locally",
        ),
    ] = False,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="UNREACT_CONFIG")
    ] = DEFAULT_CONFIG,
    verbose: typ.Annotated[
        bool, Parameter(help="Log loaded, rendered, and served files")
    ] = False,
) -> None:
    """Build the site described by ``config``.

    Parameters
    ----------
    dev : bool, optional
        Development mode: output goes to ``.devbuild`` and is served until
        interrupted.
    config : Path, optional
        Path to the ``unreact.yaml`` site configuration (overridable via
        ``UNREACT_CONFIG``).
    verbose : bool, optional
        Enable debug logging.

    Returns
    -------
    None
        Prints each written path; exits with status 1 on any build error.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        site = load_site_config(config)
    except (SiteConfigError, FileNotFoundError, TypeError, YAMLError) as exc:
        _fail(exc)
    try:
        session = _prepare_session(site, is_dev=dev)
        written = session.write()
    except UnreactError as exc:
        _fail(exc)

    for path in written:
        print(f"wrote {_format_path(path)}")
    if dev:
        session.listen()
    else:
        print("Build complete")


def _fail(exc: Exception) -> typ.NoReturn:
    print(f"error: {exc}", file=sys.stderr)
    raise SystemExit(1) from exc


def _prepare_session(site: SiteConfig, *, is_dev: bool) -> Unreact:
    """Start a session for ``site`` and register every page it declares."""
    session = Unreact(site.config, is_dev=is_dev, url=site.url)
    session.set_globals(site.globals)
    for entry in site.pages:
        if entry.template is not None:
            session.page(entry.path, entry.template, entry.data)
        else:
            session.page_plain(entry.path, entry.content or "")
    return session


def main() -> None:
    """Invoke the Cyclopts application that powers the ``unreact`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
