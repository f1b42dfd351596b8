"""Flatten a directory tree into a name-addressable content map.

Templates and style sheets are both loaded through :func:`load_filemap`. Each
file lands under its *logical name*: the slash-joined path relative to the
root with everything from the first ``.`` of the file name removed.

Examples
--------
>>> from pathlib import Path
>>> load_filemap(Path("templates"))  # doctest: +SKIP
{'index': '<h1>Hi</h1>', 'error/not_found': '...'}
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import DirectoryReadError, DuplicateNameError, FileReadError

FileMap = dict[str, str]

logger = logging.getLogger(__name__)


def logical_name(prefix: str, filename: str) -> str:
    """Join ``prefix`` and the extension-stripped ``filename``.

    >>> logical_name("", "index.hbs")
    'index'
    >>> logical_name("blog/posts", "first.min.html")
    'blog/posts/first'
    """
    leaf = filename.split(".", 1)[0]
    return f"{prefix}/{leaf}" if prefix else leaf


def load_filemap(root: Path) -> FileMap:
    """Read every file under ``root`` into a flat mapping.

    Parameters
    ----------
    root : Path
        Directory to descend. Nested directories contribute ``/``-separated
        prefixes to the logical names.

    Returns
    -------
    FileMap
        Mapping of logical name to file text.

    Raises
    ------
    DirectoryReadError
        If ``root`` or a nested directory cannot be listed.
    FileReadError
        If a file cannot be read or is not valid UTF-8.
    DuplicateNameError
        If two files flatten to the same logical name.
    """
    filemap: FileMap = {}
    _load_into(filemap, Path(root), "")
    logger.debug("loaded %d file(s) from %s", len(filemap), root)
    return filemap


def _load_into(filemap: FileMap, directory: Path, prefix: str) -> None:
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        raise DirectoryReadError(directory, exc) from exc

    for entry in entries:
        if entry.is_dir():
            child = f"{prefix}/{entry.name}" if prefix else entry.name
            _load_into(filemap, entry, child)
            continue
        try:
            content = entry.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadError(entry, exc) from exc
        name = logical_name(prefix, entry.name)
        if name in filemap:
            raise DuplicateNameError(name, entry)
        filemap[name] = content


__all__ = ["FileMap", "load_filemap", "logical_name"]
