"""Render a post body to HTML.

Standard Markdown goes through Python-Markdown. The only custom construct is
the Liquid-style image include:

    {% include image.html url="/images/x.jpg" description="Caption" by="Name" %}

which becomes a captioned `<figure class="image">` block. Any other `{% ... %}`
tag is left in the output as literal text and reported as a warning.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from html import escape

import markdown
from pydantic import BaseModel, Field

from ..config import MARKDOWN_EXTENSIONS
from .frontmatter import FrontMatterValue

logger = logging.getLogger(__name__)

IMAGE_INCLUDES = ("image.html", "image")
IMAGE_REQUIRED = ("url", "description")
IMAGE_OPTIONAL = ("by", "by-url", "licence", "licence-url")

DEFAULT_EXCERPT_SEPARATOR = "\n\n"

_DIRECTIVE = re.compile(r"\{%\s*(?P<inner>.*?)\s*%\}")
_ATTRIBUTE = re.compile(r"""\s*(?P<key>[A-Za-z_][\w-]*)\s*=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)')""")
_FENCE = re.compile(r"^ {0,3}(```|~~~)")
_TOKEN = re.compile(r"(@@include\d+@@)")


class RenderResult(BaseModel):
    """Rendered HTML for one post plus any non-fatal problems found."""

    html: str
    excerpt_html: str = ""
    warnings: list[str] = Field(default_factory=list)


def render_content(
    body: str,
    front_matter: Mapping[str, FrontMatterValue] | None = None,
    *,
    extensions: Iterable[str] | None = None,
) -> RenderResult:
    """Convert a post body to HTML.

    Args:
        body: Markdown text (front matter already removed)
        front_matter: Post metadata; `excerpt_separator` is honoured
        extensions: Python-Markdown extensions (defaults to config)

    Returns:
        RenderResult with the page HTML, the excerpt HTML and warnings
    """
    front_matter = front_matter or {}
    exts = list(extensions) if extensions is not None else list(MARKDOWN_EXTENSIONS)
    warnings: list[str] = []

    html = _render(body, exts, warnings)

    separator = front_matter.get("excerpt_separator")
    if not isinstance(separator, str) or not separator:
        separator = DEFAULT_EXCERPT_SEPARATOR
    excerpt_src = body.strip().split(separator, 1)[0]
    # Excerpt warnings would duplicate the full render's.
    excerpt_html = _render(excerpt_src, exts, []) if excerpt_src else ""

    return RenderResult(html=html, excerpt_html=excerpt_html, warnings=warnings)


def render_image(attrs: Mapping[str, str]) -> str:
    """Expand image include attributes into a captioned figure block."""
    url = escape(attrs["url"], quote=True)
    description = attrs["description"]
    lines = [
        '<figure class="image">',
        f'<img src="{url}" alt="{escape(description, quote=True)}">',
        f"<figcaption>{escape(description)}</figcaption>",
    ]

    credit: list[str] = []
    if attrs.get("by"):
        credit.append("Image by " + _maybe_link(attrs["by"], attrs.get("by-url")))
    if attrs.get("licence"):
        licence = _maybe_link(attrs["licence"], attrs.get("licence-url"))
        credit.append(f"({licence})" if credit else f"Licence: {licence}")
    if credit:
        lines.append(f'<p class="image-attribution">{" ".join(credit)}</p>')

    lines.append("</figure>")
    return "\n".join(lines)


def parse_directive(inner: str) -> tuple[str, str, dict[str, str]] | None:
    """Parse the inside of `{% ... %}` into (tag, name, attributes).

    Returns None when the attribute list is not well formed.
    """
    parts = inner.split(None, 2)
    if len(parts) < 2:
        return None
    tag, name = parts[0], parts[1]
    rest = parts[2] if len(parts) == 3 else ""

    attrs: dict[str, str] = {}
    pos = 0
    while pos < len(rest):
        m = _ATTRIBUTE.match(rest, pos)
        if not m:
            if rest[pos:].strip():
                return None
            break
        attrs[m["key"]] = m["dq"] if m["dq"] is not None else m["sq"]
        pos = m.end()
    return tag, name, attrs


def _render(body: str, extensions: list[str], warnings: list[str]) -> str:
    stash: list[str] = []
    source = _expand_directives(body, stash, warnings)
    html = markdown.Markdown(extensions=extensions, output_format="html").convert(source)

    for idx, block in enumerate(stash):
        token = _token(idx)
        html = html.replace(f"<p>{token}</p>", block).replace(token, block)
    return html


def _expand_directives(body: str, stash: list[str], warnings: list[str]) -> str:
    out: list[str] = []
    in_code = False
    for line in body.splitlines(keepends=True):
        if _FENCE.match(line):
            in_code = not in_code
            out.append(line)
            continue
        if in_code:
            out.append(line)
            continue
        expanded = _DIRECTIVE.sub(lambda m: _expand_one(m, stash, warnings), line)
        out.append(_isolate_figures(expanded) if _TOKEN.search(expanded) else expanded)
    return "".join(out)


def _isolate_figures(line: str) -> str:
    """Split a line so each figure token is a paragraph of its own.

    A figure is block-level HTML and cannot sit inside `<p>`; the text around
    it becomes separate paragraphs.
    """
    blocks = [part.strip() for part in _TOKEN.split(line)]
    return "\n" + "\n\n".join(b for b in blocks if b) + "\n\n"


def _expand_one(match: re.Match, stash: list[str], warnings: list[str]) -> str:
    literal = match.group(0)
    parsed = parse_directive(match["inner"])
    if parsed is None:
        return _passthrough(literal, "malformed directive", warnings)

    tag, name, attrs = parsed
    if tag != "include" or name not in IMAGE_INCLUDES:
        return _passthrough(literal, "unknown directive", warnings)

    missing = [k for k in IMAGE_REQUIRED if not attrs.get(k)]
    if missing:
        return _passthrough(literal, f"image include missing {', '.join(missing)}", warnings)

    unknown = sorted(set(attrs) - set(IMAGE_REQUIRED) - set(IMAGE_OPTIONAL))
    if unknown:
        warnings.append(f"image include: ignoring attributes {', '.join(unknown)}")

    stash.append(render_image(attrs))
    return _token(len(stash) - 1)


def _passthrough(literal: str, reason: str, warnings: list[str]) -> str:
    message = f"{reason}, kept as text: {literal}"
    logger.debug(message)
    warnings.append(message)
    return literal


def _maybe_link(text: str, href: str | None) -> str:
    if href:
        return f'<a href="{escape(href, quote=True)}">{escape(text)}</a>'
    return escape(text)


def _token(idx: int) -> str:
    return f"@@include{idx}@@"
