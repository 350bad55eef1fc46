"""Layouts: named HTML skeletons with `{{ slot }}` placeholders.

A layout may name a parent layout (Jekyll's `layout:` key in the layout file's
own front matter); its output then becomes the parent's `body`.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date
from html import escape
from pathlib import Path

from ..config import STYLESHEET_NAME
from ..content.frontmatter import FrontMatterValue, parse_front_matter
from ..content.post import Post
from ..errors import LayoutError, UnknownLayoutError
from .collection import Neighbors, Page
from .context import SiteConfig, SiteContext

logger = logging.getLogger(__name__)

SLOT_PATTERN = re.compile(r"\{\{\s*(?P<name>[A-Za-z_][\w.-]*)\s*\}\}")

MAX_LAYOUT_DEPTH = 10


def slot_name(raw: str) -> str:
    """Normalize Jekyll spellings: `content` -> `body`, `page.x` -> `x`, `site.x` -> `site_x`."""
    if raw == "content":
        return "body"
    if raw.startswith("page."):
        return raw[len("page.") :]
    if raw.startswith("site."):
        return "site_" + raw[len("site.") :]
    return raw


@dataclass(frozen=True)
class Layout:
    name: str
    template: str
    parent: str | None = None
    slots: frozenset[str] = field(init=False, default=frozenset())

    def __post_init__(self) -> None:
        names = frozenset(slot_name(m["name"]) for m in SLOT_PATTERN.finditer(self.template))
        if "body" not in names:
            raise LayoutError(f"layout {self.name!r} has no body slot")
        object.__setattr__(self, "slots", names)

    def fill(self, values: Mapping[str, str]) -> str:
        """Substitute slot values in one pass; missing slots render empty."""
        return SLOT_PATTERN.sub(lambda m: values.get(slot_name(m["name"]), ""), self.template)


class LayoutRegistry:
    """Layouts by name. Starts with the built-in `default`, `page` and `post`."""

    def __init__(self, layouts: Iterable[Layout] | None = None, builtins: bool = True):
        self._layouts: dict[str, Layout] = {}
        if builtins:
            for layout in BUILTIN_LAYOUTS:
                self.register(layout)
        for layout in layouts or ():
            self.register(layout)

    def register(self, layout: Layout) -> None:
        self._layouts[layout.name] = layout

    def get(self, name: str) -> Layout:
        try:
            return self._layouts[name]
        except KeyError:
            raise UnknownLayoutError(f"unknown layout {name!r}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._layouts

    def names(self) -> list[str]:
        return sorted(self._layouts)

    def chain(self, name: str) -> list[Layout]:
        """The layout followed by its parents, innermost first.

        Raises:
            UnknownLayoutError: a layout in the chain is not registered
            LayoutError: the chain is circular or too deep
        """
        seen: list[str] = []
        layouts: list[Layout] = []
        current: str | None = name
        while current is not None:
            if current in seen or len(seen) >= MAX_LAYOUT_DEPTH:
                raise LayoutError("layout chain is circular or too deep: " + " -> ".join(seen + [current]))
            seen.append(current)
            layout = self.get(current)
            layouts.append(layout)
            current = layout.parent
        return layouts

    def load_dir(self, layouts_dir: Path) -> int:
        """Register every `*.html` file in a directory; returns how many.

        A layout file may carry front matter with a `layout` key naming its
        parent.
        """
        if not layouts_dir.is_dir():
            return 0
        count = 0
        for path in sorted(layouts_dir.glob("*.html")):
            front_matter, template = parse_front_matter(path.read_text(encoding="utf-8"))
            parent = front_matter.get("layout")
            if isinstance(parent, list):
                raise LayoutError(f"{path}: layout must be a single name")
            self.register(Layout(name=path.stem, template=template, parent=parent or None))
            logger.debug("Loaded layout %s from %s", path.stem, path)
            count += 1
        return count


def compose(
    context: SiteContext,
    layout_name: str,
    body: str,
    front_matter: Mapping[str, FrontMatterValue] | None = None,
    slots: Mapping[str, str] | None = None,
) -> str:
    """Wrap a rendered body in the named layout (and its parents).

    Front matter values are HTML-escaped into same-named slots. Site slots
    (`menu`, `stylesheet`, `site_*`, ...) cannot be replaced from front matter.
    `slots` holds extra, already-rendered HTML and takes precedence over both.

    Raises:
        UnknownLayoutError: the layout, or one of its parents, is not registered
        LayoutError: the parent chain is circular or too deep
    """
    values: dict[str, str] = {}
    for key, value in (front_matter or {}).items():
        text = ", ".join(value) if isinstance(value, list) else value
        values[key] = escape(text, quote=True)
    values.update(site_slots(context.config))
    values.update(slots or {})

    for layout in context.layouts.chain(layout_name):
        values["body"] = body
        body = layout.fill(values)
    return body


def site_slots(config: SiteConfig) -> dict[str, str]:
    """Slots every page gets from the site configuration."""
    return {
        "site_title": escape(config.title),
        "site_description": escape(config.description),
        "site_author": escape(config.author),
        "base_url": escape(config.url(), quote=True),
        "stylesheet": escape(config.url(STYLESHEET_NAME), quote=True),
        "menu": side_menu(config),
    }


# Fragments


def link(href: str, text: str, cls: str | None = None) -> str:
    attr = f' class="{escape(cls, quote=True)}"' if cls else ""
    return f'<a{attr} href="{escape(href, quote=True)}">{escape(text)}</a>'


def format_date(d: date) -> str:
    return f"{d.day} {d.strftime('%b %Y')}"


def post_date(d: date) -> str:
    return f'<time class="post-date" datetime="{d.isoformat()}">{format_date(d)}</time>'


def side_menu(config: SiteConfig) -> str:
    lines = [
        '<input type="checkbox" class="menu-checkbox" id="menu-checkbox">',
        '<label for="menu-checkbox" class="menu-button" title="Menu">&#9776;</label>',
        '<nav id="menu">',
    ]
    if config.portrait:
        lines.append(f'<img class="portrait" src="{escape(config.portrait, quote=True)}" alt="{escape(config.author)}">')
    lines.append(f'<p class="menu-title">{link(config.url(), config.title)}</p>')
    if config.description:
        lines.append(f'<p class="menu-description">{escape(config.description)}</p>')
    lines.append('<ul class="menu-links">')
    lines.append(f"<li>{link(config.url(), 'Home')}</li>")
    for label, href in config.menu.items():
        lines.append(f"<li>{link(href, label)}</li>")
    lines.append("</ul>")
    lines.append("</nav>")
    return "\n".join(lines)


def post_pagination(config: SiteConfig, neighbors: Neighbors) -> str:
    """Older/newer links under a post."""
    items = []
    if neighbors.older is not None:
        items.append(link(config.url(neighbors.older.url), "← Older", "pagination-item older"))
    else:
        items.append('<span class="pagination-item older">Older</span>')
    if neighbors.newer is not None:
        items.append(link(config.url(neighbors.newer.url), "Newer →", "pagination-item newer"))
    else:
        items.append('<span class="pagination-item newer">Newer</span>')
    return '<div class="pagination">\n' + "\n".join(items) + "\n</div>"


def related_posts(config: SiteConfig, posts: list[Post]) -> str:
    if not posts:
        return ""
    lines = ['<aside class="related-posts">', "<h2>Related posts</h2>", "<ul>"]
    for p in posts:
        lines.append(f"<li>{link(config.url(p.url), p.title)} <small>{format_date(p.publication_date)}</small></li>")
    lines.extend(["</ul>", "</aside>"])
    return "\n".join(lines)


def page_url(number: int) -> str:
    return "index.html" if number == 1 else f"page/{number}/index.html"


def index_pagination(config: SiteConfig, page: Page) -> str:
    """Older/newer links between index pages.

    Index page 1 holds the newest posts, so "older" is the next page number.
    """
    if page.total_pages <= 1:
        return ""
    items = []
    if page.next is not None:
        items.append(link(config.url(page_url(page.next)), "← Older", "pagination-item older"))
    else:
        items.append('<span class="pagination-item older">Older</span>')
    if page.previous is not None:
        items.append(link(config.url(page_url(page.previous)), "Newer →", "pagination-item newer"))
    else:
        items.append('<span class="pagination-item newer">Newer</span>')
    return '<div class="pagination">\n' + "\n".join(items) + "\n</div>"


def post_summary(config: SiteConfig, post: Post, excerpt_html: str) -> str:
    lines = [
        '<article class="post">',
        f'<h1 class="post-title">{link(config.url(post.url), post.title)}</h1>',
        post_date(post.publication_date),
    ]
    if post.description:
        lines.append(f'<p class="post-description">{escape(post.description)}</p>')
    elif excerpt_html:
        lines.append(excerpt_html)
    lines.append("</article>")
    return "\n".join(lines)


DEFAULT_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{ title }} · {{ site_title }}</title>
<meta name="description" content="{{ description }}">
<meta name="keywords" content="{{ keywords }}">
<link rel="stylesheet" href="{{ stylesheet }}">
</head>
<body id="top">
{{ menu }}
<div class="container">
<header class="masthead">
<h3 class="masthead-title"><a href="{{ base_url }}">{{ site_title }}</a> <small>{{ site_description }}</small></h3>
</header>
<main id="articleContent">
{{ body }}
</main>
<footer>
<a id="backtotop" href="#top">Back to top</a>
</footer>
</div>
<a id="scrollUp" href="#top" title="Scroll to top">&#8679;</a>
</body>
</html>
"""

PAGE_TEMPLATE = """<article class="page">
<h1 class="page-title">{{ title }}</h1>
{{ body }}
</article>
"""

POST_TEMPLATE = """<article class="post">
<h1 class="post-title">{{ title }}</h1>
{{ date }}
{{ body }}
</article>
{{ pagination }}
{{ related }}
"""

BUILTIN_LAYOUTS = (
    Layout(name="default", template=DEFAULT_TEMPLATE),
    Layout(name="page", template=PAGE_TEMPLATE, parent="default"),
    Layout(name="post", template=POST_TEMPLATE, parent="default"),
)
