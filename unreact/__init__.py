"""Static site assembly from templates, SCSS styles, and public assets.

This package exposes the :class:`Unreact` build session used by site scripts
and the ``unreact`` console command, which reads ``unreact.yaml`` and either
writes a production build or serves a development preview.

Exports
-------
- ``Unreact``: Build session (render, register pages, write, serve).
- ``Config``: Directory and option settings for a build.
- ``app``: Cyclopts application entry.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from unreact import Config
>>> Config().templates
'templates'
>>> from unreact import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .session import Unreact
from .cli import app, main
from .config import Config
from .errors import UnreactError

__all__ = ["Config", "Unreact", "UnreactError", "app", "main"]
