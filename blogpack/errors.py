"""Exception types raised while building a site."""

from __future__ import annotations

from pathlib import Path


class BlogpackError(Exception):
    """Base class for all blogpack errors."""


class ConfigError(BlogpackError):
    """Raised when site.json cannot be read or validated."""


class ContentError(BlogpackError):
    """An error tied to a single content file.

    Content errors are fatal for that file only: the build records them and
    skips the file.
    """

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class MalformedFrontMatterError(ContentError):
    """Front matter block is unterminated or has an unparseable line."""


class InvalidIdentifierError(ContentError):
    """File name is not of the form YYYY-MM-DD-slug with a valid date."""


class UnreadableFileError(ContentError):
    """A content file cannot be read or is not valid UTF-8."""


class LayoutError(BlogpackError):
    """A layout template is invalid."""


class UnknownLayoutError(ContentError, LayoutError):
    """A post names a layout that is not registered."""


class DuplicateIdentifierError(BlogpackError):
    """Two or more posts share an identifier.

    Fatal for the whole run: ordering, pagination and neighbor lookup all need
    unique identifiers.
    """

    def __init__(self, identifiers: list[str]):
        self.identifiers = sorted(identifiers)
        super().__init__("Duplicate post identifiers: " + ", ".join(self.identifiers))
