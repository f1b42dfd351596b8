"""Exception hierarchy raised by the site-assembly pipeline.

Every failure carries the path or template name that caused it so a failed
build can be diagnosed without re-running. Underlying library errors are
chained as ``__cause__`` and also kept on the ``cause`` attribute.
"""

from __future__ import annotations

from pathlib import Path


class UnreactError(Exception):
    """Base class for all site-assembly failures."""


class DirectoryMissingError(UnreactError):
    """Raised when a configured source directory does not exist."""

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        super().__init__(f"Directory does not exist at '{self.path}'")


class _PathIOError(UnreactError):
    """Shared shape for I/O failures tied to a filesystem path."""

    action = "access"

    def __init__(self, path: str | Path, cause: BaseException | None = None) -> None:
        self.path = str(path)
        self.cause = cause
        msg = f"Failed to {self.action} '{self.path}'"
        if cause is not None:
            msg = f"{msg} - {cause}"
        super().__init__(msg)


class DirectoryReadError(_PathIOError):
    """Raised when a directory cannot be listed during flattening."""

    action = "read directory"


class FileReadError(_PathIOError):
    """Raised when a source file cannot be read as UTF-8 text."""

    action = "read file"


class DirectoryCreateError(_PathIOError):
    """Raised when an output directory cannot be created."""

    action = "create directory"


class DirectoryRemoveError(_PathIOError):
    """Raised when a stale build directory cannot be removed."""

    action = "remove directory"


class FileWriteError(_PathIOError):
    """Raised when an output file cannot be written."""

    action = "write file"


class DuplicateNameError(UnreactError):
    """Raised when two files flatten to the same logical name."""

    def __init__(self, name: str, path: str | Path) -> None:
        self.name = name
        self.path = str(path)
        super().__init__(
            f"Logical name '{name}' is already taken (duplicate from '{self.path}')"
        )


class TemplateNotFoundError(UnreactError):
    """Raised when rendering a template name absent from the template map."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template does not exist with name '{name}'")


class PartialRegistrationError(UnreactError):
    """Raised when a user or inbuilt partial fails to compile."""

    def __init__(self, name: str, cause: BaseException, *, inbuilt: bool) -> None:
        self.name = name
        self.cause = cause
        self.inbuilt = inbuilt
        kind = "*inbuilt* partial" if inbuilt else "custom partial"
        super().__init__(f"Failed to register {kind} with name '{name}' - {cause}")


class RenderError(UnreactError):
    """Raised when the template engine fails while rendering."""

    def __init__(self, name: str, cause: BaseException) -> None:
        self.name = name
        self.cause = cause
        super().__init__(f"Failed to render template with name '{name}' - {cause}")


class StyleCompileError(UnreactError):
    """Raised when SCSS source cannot be compiled to CSS."""

    def __init__(self, name: str, cause: BaseException) -> None:
        self.name = name
        self.cause = cause
        super().__init__(f"Failed to convert SCSS to CSS for '{name}' - {cause}")


class StyleMinifyError(UnreactError):
    """Raised when compiled CSS cannot be minified."""

    def __init__(self, name: str, cause: BaseException) -> None:
        self.name = name
        self.cause = cause
        super().__init__(f"Failed to minify CSS file for '{name}' - {cause}")


class AssetCopyError(UnreactError):
    """Raised when the public asset tree cannot be copied."""

    def __init__(self, source: str | Path, cause: BaseException) -> None:
        self.path = str(source)
        self.cause = cause
        super().__init__(f"Failed to copy public assets from '{self.path}' - {cause}")


class BuildStateError(UnreactError):
    """Raised when build-directory steps run out of order."""


__all__ = [
    "AssetCopyError",
    "BuildStateError",
    "DirectoryCreateError",
    "DirectoryMissingError",
    "DirectoryReadError",
    "DirectoryRemoveError",
    "DuplicateNameError",
    "FileReadError",
    "FileWriteError",
    "PartialRegistrationError",
    "RenderError",
    "StyleCompileError",
    "StyleMinifyError",
    "TemplateNotFoundError",
    "UnreactError",
]
