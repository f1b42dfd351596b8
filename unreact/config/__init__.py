"""Load and validate unreact site configuration.

This subpackage holds the :class:`Config` dataclass consumed by the build
pipeline and parses the project's ``unreact.yaml`` file into a
:class:`SiteConfig` (production URL, directory options, globals, and the list
of pages to register). The primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from unreact.config import load_site_config
>>> site = load_site_config(Path("unreact.yaml"))  # doctest: +SKIP
>>> site.url  # doctest: +SKIP
'https://mysite.com'
"""

from .loader import load_site_config
from .models import Config, PageEntry, SiteConfig, SiteConfigError

__all__ = [
    "Config",
    "PageEntry",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
