"""Development server that mimics static-host routing over the build output.

Requests are mapped to build files the way GitHub Pages does it: ``/about``
serves ``about.html`` or ``about/index.html``, and anything unmatched falls
back to ``404.html`` and then to a fixed message. Files are read on every
request and must be UTF-8; binary assets such as images are not served.
"""

from __future__ import annotations

import dataclasses as dc
import functools
import http
import logging
import mimetypes
import typing as typ
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from urllib.parse import unquote, urlsplit

from unreact._constants import HOST, NOT_FOUND_FALLBACK, PORT, PUBLIC_SUBDIR

logger = logging.getLogger(__name__)

HTML_SUFFIX = ".html"
NOT_FOUND_PATH = "404"


@dc.dataclass(frozen=True, slots=True)
class Response:
    """Status, body, and content type returned for one request."""

    status: http.HTTPStatus
    body: str
    content_type: str = "text/html; charset=utf-8"


class DevPathResolver:
    """Resolve request paths to files under a build directory."""

    def __init__(self, root: Path, *, styles_dir: str = "styles") -> None:
        self.root = Path(root)
        self.passthrough_prefixes = (f"/{styles_dir}/", f"/{PUBLIC_SUBDIR}/")

    def candidates(self, path: str) -> list[str]:
        """Return the files that may satisfy ``path``, best match first.

        >>> resolver = DevPathResolver(Path(".devbuild"))
        >>> resolver.candidates("/about")
        ['/about.html', '/about/index.html']
        >>> resolver.candidates("/styles/main.css")
        ['/styles/main.css']
        """
        if path.endswith(HTML_SUFFIX) or path.startswith(self.passthrough_prefixes):
            return [path]
        return [f"{path}{HTML_SUFFIX}", f"{path}/index.html"]

    def find(self, path: str) -> tuple[Path, str] | None:
        """Return the first existing candidate file and its text.

        A candidate that exists but is not valid UTF-8 ends the search with
        ``None``. Candidates outside the build directory, or that are not valid
        file paths, are ignored.
        """
        root = self.root.resolve()
        for candidate in self.candidates(path):
            try:
                file_path = (root / candidate.lstrip("/")).resolve()
            except ValueError:
                continue
            if not file_path.is_relative_to(root) or not file_path.is_file():
                continue
            try:
                return file_path, file_path.read_bytes().decode("utf-8")
            except UnicodeDecodeError:
                logger.warning("not serving non-UTF-8 file %s", file_path)
                return None
        return None

    def resolve(self, path: str) -> Response:
        """Build the response for a GET request to ``path``."""
        found = self.find(path)
        if found is not None:
            return _response(http.HTTPStatus.OK, *found)
        return self.fallback()

    def fallback(self) -> Response:
        """Serve the custom 404 page, or the fixed message when it is missing."""
        not_found = self.find(NOT_FOUND_PATH)
        if not_found is not None:
            return _response(http.HTTPStatus.NOT_FOUND, *not_found)
        return Response(
            http.HTTPStatus.NOT_FOUND,
            NOT_FOUND_FALLBACK,
            "text/plain; charset=utf-8",
        )


def _response(status: http.HTTPStatus, file_path: Path, body: str) -> Response:
    mime, _encoding = mimetypes.guess_type(file_path.name)
    return Response(status, body, f"{mime or 'text/plain'}; charset=utf-8")


class DevRequestHandler(BaseHTTPRequestHandler):
    """Answer requests from a :class:`DevPathResolver`."""

    def __init__(
        self, *args: typ.Any, resolver: DevPathResolver, **kwargs: typ.Any
    ) -> None:
        self.resolver = resolver
        super().__init__(*args, **kwargs)

    def do_GET(self) -> None:  # noqa: N802 - http.server naming
        path = unquote(urlsplit(self.path).path)
        self._send(self.resolver.resolve(path))

    def do_POST(self) -> None:  # noqa: N802 - http.server naming
        self._send(self.resolver.fallback())

    do_PUT = do_DELETE = do_PATCH = do_OPTIONS = do_POST

    def do_HEAD(self) -> None:  # noqa: N802 - http.server naming
        self._send(self.resolver.fallback(), include_body=False)

    def _send(self, response: Response, *, include_body: bool = True) -> None:
        body = response.body.encode("utf-8")
        self.send_response(response.status)
        self.send_header("Content-Type", response.content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if include_body:
            self.wfile.write(body)

    def log_message(self, format: str, *args: typ.Any) -> None:  # noqa: A002
        logger.info("%s - %s", self.address_string(), format % args)


def create_server(
    root: Path, *, styles_dir: str = "styles", host: str = HOST, port: int = PORT
) -> ThreadingHTTPServer:
    """Bind a threaded dev server for ``root`` without starting it."""
    resolver = DevPathResolver(root, styles_dir=styles_dir)
    handler = functools.partial(DevRequestHandler, resolver=resolver)
    return ThreadingHTTPServer((host, port), handler)


def listen(root: Path, *, styles_dir: str = "styles") -> None:
    """Serve ``root`` on the fixed local address until interrupted."""
    with create_server(root, styles_dir=styles_dir) as server:
        host, port = server.server_address[:2]
        print(f"Listening on http://{host}:{port}")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nStopping...")


__all__ = [
    "DevPathResolver",
    "DevRequestHandler",
    "Response",
    "create_server",
    "listen",
]
