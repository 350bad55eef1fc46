"""Parse and serialize the `key: value` front matter block of a content file."""

from __future__ import annotations

from collections.abc import Mapping

from ..config import FRONT_MATTER_DELIMITER
from ..errors import MalformedFrontMatterError

FrontMatterValue = str | list[str]
FrontMatter = dict[str, FrontMatterValue]

_QUOTES = ('"', "'")


def parse_front_matter(text: str) -> tuple[FrontMatter, str]:
    """Split raw file text into (front matter, body).

    Args:
        text: Full content of a post file

    Returns:
        Tuple of the parsed mapping and the body text after the closing
        delimiter, verbatim. Text that does not start with a delimiter line is
        returned whole as the body with empty front matter.

    Raises:
        MalformedFrontMatterError: opening delimiter without a closing one, or
            a block line that is not `key: value`
    """
    if text.startswith("\ufeff"):
        text = text[1:]

    lines = text.splitlines(keepends=True)
    if not lines or not _is_delimiter(lines[0]):
        return {}, text

    for end, line in enumerate(lines[1:], start=1):
        if _is_delimiter(line):
            block = lines[1:end]
            body = "".join(lines[end + 1 :])
            return _parse_block(block), body

    raise MalformedFrontMatterError("front matter block is not terminated")


def has_front_matter(text: str) -> bool:
    """True when text opens with a front matter delimiter line."""
    first = text.removeprefix("\ufeff").split("\n", 1)[0]
    return _is_delimiter(first)


def dump_front_matter(front_matter: Mapping[str, FrontMatterValue]) -> str:
    """Serialize a mapping back into `key: value` lines.

    The output parses back to an equal mapping: strings that would otherwise be
    split or trimmed are double-quoted, and lists shorter than two items get a
    trailing comma so they stay lists.
    """
    out: list[str] = []
    for key, value in front_matter.items():
        if isinstance(value, list):
            rendered = ", ".join(value)
            if len(value) < 2:
                rendered += ","
        else:
            rendered = _quote_if_needed(value)
        out.append(f"{key}: {rendered}".rstrip() + "\n")
    return "".join(out)


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == FRONT_MATTER_DELIMITER


def _parse_block(block: list[str]) -> FrontMatter:
    result: FrontMatter = {}
    for lineno, raw in enumerate(block, start=2):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition(":")
        key = key.strip()
        if not sep or not key:
            raise MalformedFrontMatterError(f"line {lineno}: expected 'key: value', got {line!r}")
        result[key] = _parse_value(value.strip())
    return result


def _parse_value(value: str) -> FrontMatterValue:
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        return value[1:-1]
    if "," in value:
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


def _quote_if_needed(value: str) -> str:
    if (
        "," in value
        or value != value.strip()
        or (value and (value[0] in _QUOTES or value[-1] in _QUOTES))
    ):
        return f'"{value}"'
    return value
