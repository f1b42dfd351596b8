"""Inbuilt partials registered alongside user templates on every render."""

from __future__ import annotations

from unreact._constants import DEV_SCRIPT, DEV_URL

URL = "URL"
DEV_SCRIPT_NAME = "DEV_SCRIPT"
LINK = "LINK"
STYLE = "STYLE"

_URL_INCLUDE = '{% include "URL" %}'


def inbuilt_partials(
    *, is_dev: bool, url: str, dev_warning: bool, styles_dir: str
) -> dict[str, str]:
    """Return the inbuilt partial sources keyed by name.

    Parameters
    ----------
    is_dev : bool
        Development mode; ``URL`` then points at the local dev server.
    url : str
        Production base URL, without a trailing slash.
    dev_warning : bool
        Whether ``DEV_SCRIPT`` emits its console warning in dev mode.
    styles_dir : str
        Name of the styles sub-directory in the build output.

    Returns
    -------
    dict[str, str]
        ``URL``, ``DEV_SCRIPT``, ``LINK`` (uses ``to`` and ``text`` from the
        including context) and ``STYLE`` (uses ``name``).
    """
    return {
        URL: DEV_URL if is_dev else url,
        DEV_SCRIPT_NAME: DEV_SCRIPT if is_dev and dev_warning else "",
        LINK: '<a href="' + _URL_INCLUDE + '/{{ to }}">{{ text }}</a>',
        STYLE: (
            '<link rel="stylesheet" href="'
            + _URL_INCLUDE
            + "/"
            + styles_dir
            + '/{{ name }}.css" />'
        ),
    }


__all__ = ["DEV_SCRIPT_NAME", "LINK", "STYLE", "URL", "inbuilt_partials"]
