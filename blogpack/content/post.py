"""Post model and loading from `YYYY-MM-DD-slug.md` files."""

from __future__ import annotations

import re
from datetime import date
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from ..errors import ContentError, InvalidIdentifierError, UnreadableFileError
from .frontmatter import FrontMatter, parse_front_matter

IDENTIFIER_PATTERN = re.compile(r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})-(?P<slug>.+)$")

_TAG_SPLIT = re.compile(r"[,\s]+")


class Post(BaseModel):
    """A parsed blog post."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    publication_date: date
    slug: str
    front_matter: FrontMatter
    body: str
    source_path: Path | None = None

    @property
    def title(self) -> str:
        return self.field("title") or self.slug.replace("-", " ")

    @property
    def description(self) -> str:
        return self.field("description")

    @property
    def url(self) -> str:
        """Site-relative path of the rendered page (Jekyll `date` permalink style)."""
        d = self.publication_date
        return f"{d.year:04d}/{d.month:02d}/{d.day:02d}/{self.slug}.html"

    def field(self, key: str) -> str:
        """Front matter value as display text; lists are joined with ", "."""
        value = self.front_matter.get(key)
        if value is None:
            return ""
        if isinstance(value, list):
            return ", ".join(value)
        return value

    def tokens(self) -> frozenset[str]:
        """Lowercased keyword and tag tokens used to find related posts."""
        found: set[str] = set()
        keywords = self.front_matter.get("keywords")
        if isinstance(keywords, str):
            keywords = [keywords]
        for keyword in keywords or []:
            if keyword.strip():
                found.add(keyword.strip().lower())

        tags = self.front_matter.get("tags")
        if isinstance(tags, list):
            tags = " ".join(tags)
        for tag in _TAG_SPLIT.split(tags or ""):
            if tag:
                found.add(tag.lower())
        return frozenset(found)


def slugify(text: str, max_len: int = 60) -> str:
    """Convert a title to a file-name slug.

    Args:
        text: Title to convert
        max_len: Maximum length of slug

    Returns:
        Lowercase slug with hyphens
    """
    text = text.lower().replace("&", " and ")

    # Keep only alphanumeric, spaces and hyphens
    text = re.sub(r"[^a-z0-9\s-]", "", text)
    text = re.sub(r"[\s-]+", "-", text).strip("-")

    if len(text) > max_len:
        # Try to break at a word boundary
        if "-" in text[:max_len]:
            text = text[:max_len].rsplit("-", 1)[0]
        else:
            text = text[:max_len]

    return text


def parse_identifier(identifier: str) -> tuple[date, str]:
    """Split `YYYY-MM-DD-slug` into (publication date, slug).

    Raises:
        InvalidIdentifierError: wrong shape or not a calendar date
    """
    match = IDENTIFIER_PATTERN.match(identifier)
    if not match:
        raise InvalidIdentifierError(f"expected YYYY-MM-DD-slug, got {identifier!r}")
    try:
        published = date(int(match["year"]), int(match["month"]), int(match["day"]))
    except ValueError as e:
        raise InvalidIdentifierError(f"invalid date in {identifier!r}: {e}") from e
    return published, match["slug"]


def parse_post(identifier: str, text: str, source_path: Path | None = None) -> Post:
    """Build a Post from its identifier and raw file text."""
    published, slug = parse_identifier(identifier)
    front_matter, body = parse_front_matter(text)
    return Post(
        identifier=identifier,
        publication_date=published,
        slug=slug,
        front_matter=front_matter,
        body=body,
        source_path=source_path,
    )


def load_post(path: Path) -> Post:
    """Read and parse a post file; the identifier is the file stem.

    Content errors are re-raised with the file path attached.
    """
    try:
        return parse_post(path.stem, read_text(path), source_path=path)
    except ContentError as e:
        e.path = path
        raise


def read_text(path: Path) -> str:
    """Read a UTF-8 content file.

    Raises:
        UnreadableFileError: the file cannot be read or does not decode
    """
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise UnreadableFileError(f"not valid UTF-8 (byte {e.start})", path) from e
    except OSError as e:
        raise UnreadableFileError(f"cannot read file: {e.strerror or e}", path) from e
