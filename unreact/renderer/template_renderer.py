"""Render named templates with every other template available as a partial.

Each call to :meth:`TemplateRenderer.render` builds a fresh Jinja environment
over a ``DictLoader``: all templates from the template map are registered by
logical name, so ``{% include "layout/header" %}`` works from anywhere, then
the inbuilt partials are added on top. Globals are merged into the page data
before rendering.

A template that includes itself recurses until Python's recursion limit is
hit; that surfaces as a :class:`~unreact.errors.RenderError`.
"""

from __future__ import annotations

import logging
import typing as typ

from jinja2 import DictLoader, Environment, TemplateError

from unreact.errors import PartialRegistrationError, RenderError, TemplateNotFoundError
from unreact.merge import JsonValue, merge_json

from .partials import inbuilt_partials

logger = logging.getLogger(__name__)


class TemplateRenderer:
    """Turn a template name and a data value into HTML."""

    def __init__(
        self,
        templates: typ.Mapping[str, str],
        *,
        url: str,
        is_dev: bool = False,
        dev_warning: bool = True,
        styles_dir: str = "styles",
    ) -> None:
        """Initialize a renderer over a loaded template map.

        Parameters
        ----------
        templates : Mapping[str, str]
            Logical name to template source, as produced by
            :func:`~unreact.filemap.load_filemap`.
        url : str
            Production base URL used by the ``URL`` partial.
        is_dev : bool, optional
            Development mode switch for the inbuilt partials.
        dev_warning : bool, optional
            Enables the ``DEV_SCRIPT`` warning in development mode.
        styles_dir : str, optional
            Styles sub-directory name used by the ``STYLE`` partial.
        """
        self.templates = templates
        self.url = url
        self.is_dev = is_dev
        self.dev_warning = dev_warning
        self.styles_dir = styles_dir

    def render(
        self, name: str, data: JsonValue = None, globals_: JsonValue = None
    ) -> str:
        """Render template ``name`` against ``data`` merged with ``globals_``.

        Parameters
        ----------
        name : str
            Logical name of the template to render.
        data : JsonValue, optional
            Page-specific data. Mappings are exposed as template variables;
            any other value is available as ``this``.
        globals_ : JsonValue, optional
            Process-wide data merged over ``data``; skipped when ``None``.

        Returns
        -------
        str
            Rendered output.

        Raises
        ------
        TemplateNotFoundError
            If ``name`` is not in the template map.
        PartialRegistrationError
            If a user or inbuilt partial fails to compile.
        RenderError
            If the engine fails while rendering ``name``.
        """
        if name not in self.templates:
            raise TemplateNotFoundError(name)

        env = self._build_environment()
        if globals_ is not None:
            data = merge_json(data, globals_)
        context = data if isinstance(data, dict) else {"this": data}

        try:
            output = env.get_template(name).render(context)
        except Exception as exc:
            raise RenderError(name, exc) from exc
        logger.debug("rendered template %s", name)
        return output

    def _build_environment(self) -> Environment:
        """Create an environment with all user and inbuilt partials compiled."""
        sources: dict[str, str] = {}
        env = Environment(
            loader=DictLoader(sources),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        for partial_name, source in self.templates.items():
            _register(env, sources, partial_name, source, inbuilt=False)
        inbuilt = inbuilt_partials(
            is_dev=self.is_dev,
            url=self.url,
            dev_warning=self.dev_warning,
            styles_dir=self.styles_dir,
        )
        for partial_name, source in inbuilt.items():
            _register(env, sources, partial_name, source, inbuilt=True)
        return env


def _register(
    env: Environment,
    sources: dict[str, str],
    name: str,
    source: str,
    *,
    inbuilt: bool,
) -> None:
    sources[name] = source
    try:
        env.get_template(name)
    except TemplateError as exc:
        raise PartialRegistrationError(name, exc, inbuilt=inbuilt) from exc


__all__ = ["TemplateRenderer"]
