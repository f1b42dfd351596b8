"""Ordered collection of pages waiting to be written."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


@dc.dataclass(frozen=True, slots=True)
class Page:
    """One output document.

    Attributes
    ----------
    path : str
        Output path inside the build directory, without the ``.html``
        extension (``"blog/first"`` becomes ``blog/first.html``).
    content : str
        Final rendered or plain text.
    """

    path: str
    content: str


class PageRegistry:
    """Accumulate pages in registration order before the write phase.

    Duplicate paths are kept; the later page wins when both are written.
    """

    def __init__(self) -> None:
        self._pages: list[Page] = []

    def add(self, path: str, content: str) -> Page:
        """Register ``content`` for ``path`` and return the new page."""
        page = Page(path=path, content=content)
        self._pages.append(page)
        return page

    def index(self, content: str) -> Page:
        """Alias for ``add("index", content)``."""
        return self.add("index", content)

    def not_found(self, content: str) -> Page:
        """Alias for ``add("404", content)``."""
        return self.add("404", content)

    def __iter__(self) -> typ.Iterator[Page]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    def __repr__(self) -> str:
        paths = ", ".join(page.path for page in self._pages)
        return f"PageRegistry([{paths}])"


__all__ = ["Page", "PageRegistry"]
