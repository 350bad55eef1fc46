"""Static site generator for a directory of Markdown posts."""

from __future__ import annotations

import logging
import shutil
from collections import Counter
from html import escape
from pathlib import Path

from pydantic import BaseModel, Field

from ..config import MANIFEST_NAME, POST_EXTENSIONS, SITE_CONFIG_FILE, STYLESHEET_NAME
from ..content.frontmatter import FrontMatter, has_front_matter, parse_front_matter
from ..content.post import Post, load_post, read_text
from ..content.render import render_content
from ..errors import ConfigError, ContentError, DuplicateIdentifierError, LayoutError
from .collection import Page, PostCollection
from .context import SiteConfig, SiteContext, load_site_config
from .layouts import (
    LayoutRegistry,
    compose,
    index_pagination,
    page_url,
    post_date,
    post_pagination,
    post_summary,
    related_posts,
)
from .manifest import create_manifest, write_manifest
from .styles import CSS

logger = logging.getLogger(__name__)

PAGE_LAYOUT = "page"
INDEX_LAYOUT = "default"


class FileIssue(BaseModel):
    """An error or warning tied to one source file."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class BuildReport(BaseModel):
    """Result of building (or checking) a site."""

    model_config = {"arbitrary_types_allowed": True}

    out_dir: Path | None = None
    posts: int = 0
    pages: int = 0
    static_files: int = 0
    total_bytes: int = 0
    errors: list[FileIssue] = Field(default_factory=list)
    warnings: list[FileIssue] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def check_site(src_dir: Path, config: SiteConfig | None = None) -> BuildReport:
    """Parse and render every file without writing anything.

    Raises:
        DuplicateIdentifierError: two posts share an identifier
        ConfigError: site.json is invalid
    """
    src_dir = src_dir.resolve()
    report = BuildReport()
    context, files = _render_site(src_dir, config, report)
    report.posts = len(context.collection)
    report.pages = len(files) - 1  # stylesheet
    return report


def build_site(src_dir: Path, out_dir: Path, config: SiteConfig | None = None) -> BuildReport:
    """Build the HTML site for a source tree.

    Everything is rendered in memory first; a run-level failure (duplicate
    identifiers, invalid config) therefore leaves `out_dir` untouched.

    Raises:
        DuplicateIdentifierError: two posts share an identifier
        ConfigError: site.json is invalid, or out_dir is src_dir or contains it
    """
    src_dir = src_dir.resolve()
    out_dir = out_dir.resolve()
    if out_dir == src_dir or src_dir.is_relative_to(out_dir):
        raise ConfigError(f"output directory {out_dir} must not be or contain the source directory")
    report = BuildReport(out_dir=out_dir)
    context, files = _render_site(src_dir, config, report)

    out_dir.mkdir(parents=True, exist_ok=True)
    report.static_files = _copy_static(src_dir, out_dir)

    for rel, content in files.items():
        target = out_dir / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")

    manifest = create_manifest(
        posts=list(context.collection.all()),
        files=files,
        warnings=[str(w) for w in report.warnings],
        errors=[str(e) for e in report.errors],
    )
    write_manifest(manifest, out_dir)

    report.posts = len(context.collection)
    report.pages = len(files) - 1
    report.total_bytes = _dir_size_bytes(out_dir)
    logger.info("Wrote %d pages (%d posts) to %s", report.pages, report.posts, out_dir)
    return report


def load_posts(
    posts_dir: Path,
    layouts: LayoutRegistry,
    default_layout: str,
    report: BuildReport,
    root: Path,
) -> list[Post]:
    """Load every post file under posts_dir, recording per-file errors.

    Posts whose layout cannot be resolved are dropped here so that no page
    links to a post that will not be written. Identifiers come from file
    names, so duplicates are detected before any file is parsed.

    Raises:
        DuplicateIdentifierError: two post files share an identifier
    """
    posts: list[Post] = []
    if not posts_dir.is_dir():
        logger.warning("Posts directory not found: %s", posts_dir)
        return posts

    paths = [
        p for p in sorted(posts_dir.rglob("*")) if p.is_file() and p.suffix.lower() in POST_EXTENSIONS
    ]
    counts = Counter(p.stem for p in paths)
    duplicates = [stem for stem, n in counts.items() if n > 1]
    if duplicates:
        raise DuplicateIdentifierError(duplicates)

    for path in paths:
        try:
            post = load_post(path)
            layouts.chain(post.field("layout") or default_layout)
        except (ContentError, LayoutError) as e:
            _record(report.errors, root, path, getattr(e, "message", str(e)))
            continue
        posts.append(post)

    logger.info("Loaded %d posts from %s", len(posts), posts_dir)
    return posts


def _render_site(
    src_dir: Path, config: SiteConfig | None, report: BuildReport
) -> tuple[SiteContext, dict[str, str]]:
    config = config or load_site_config(src_dir)
    layouts = LayoutRegistry()
    layouts.load_dir(src_dir / config.layouts_dir)

    posts = load_posts(src_dir / config.posts_dir, layouts, config.default_layout, report, src_dir)
    context = SiteContext(config=config, collection=PostCollection(posts), layouts=layouts)

    files: dict[str, str] = {}
    excerpts: dict[str, str] = {}
    for post in context.collection:
        files[post.url], excerpts[post.identifier] = _render_post(context, post, report, src_dir)

    for page in _index_pages(context):
        files[page_url(page.number)] = _render_index(context, page, excerpts)

    for rel, html in _render_pages(context, src_dir, report).items():
        if rel in files:
            _record(report.warnings, src_dir, src_dir / rel, "page collides with a generated file, skipped")
            continue
        files[rel] = html

    files[STYLESHEET_NAME] = CSS.lstrip()

    for issue in report.errors:
        logger.error("%s", issue)
    for issue in report.warnings:
        logger.warning("%s", issue)
    return context, files


def _render_post(context: SiteContext, post: Post, report: BuildReport, root: Path) -> tuple[str, str]:
    config = context.config
    result = render_content(post.body, post.front_matter, extensions=config.markdown_extensions)
    for w in result.warnings:
        _record(report.warnings, root, post.source_path, w)

    slots = {
        "title": escape(post.title),
        "date": post_date(post.publication_date),
        "url": escape(config.url(post.url), quote=True),
        "pagination": post_pagination(config, context.collection.neighbors(post)),
        "related": related_posts(config, context.collection.related(post, config.related_count)),
    }
    layout = post.field("layout") or config.default_layout
    html = compose(context, layout, result.html, post.front_matter, slots)
    return html, result.excerpt_html


def _index_pages(context: SiteContext) -> list[Page]:
    pages = list(context.collection.paginate(context.config.page_size))
    # An empty site still gets a home page.
    return pages or [Page(number=1, posts=(), total_pages=1)]


def _render_index(context: SiteContext, page: Page, excerpts: dict[str, str]) -> str:
    config = context.config
    parts = [post_summary(config, p, excerpts.get(p.identifier, "")) for p in page.posts]
    if not parts:
        parts.append('<p class="muted">No posts yet.</p>')
    parts.append(index_pagination(config, page))
    title = "Home" if page.number == 1 else f"Page {page.number}"
    return compose(context, INDEX_LAYOUT, "\n".join(parts), slots={"title": escape(title)})


def _render_pages(context: SiteContext, src_dir: Path, report: BuildReport) -> dict[str, str]:
    """Render top-level Markdown files (about.md, ...) with the page layout.

    Only files that start with a front matter block are treated as pages;
    other top-level Markdown files (README.md, ...) are ignored.
    """
    out: dict[str, str] = {}
    config = context.config
    for path in sorted(src_dir.iterdir()):
        if not path.is_file() or path.suffix.lower() not in POST_EXTENSIONS:
            continue
        try:
            front_matter, body = _read_page(path)
            if front_matter is None:
                continue
            layout = _single(front_matter.get("layout")) or PAGE_LAYOUT
            result = render_content(body, front_matter, extensions=config.markdown_extensions)
            title = _single(front_matter.get("title")) or path.stem.replace("-", " ")
            html = compose(context, layout, result.html, front_matter, {"title": escape(title)})
        except (ContentError, LayoutError) as e:
            _record(report.errors, src_dir, path, getattr(e, "message", str(e)))
            continue
        for w in result.warnings:
            _record(report.warnings, src_dir, path, w)
        out[f"{path.stem}.html"] = html
    return out


def _read_page(path: Path) -> tuple[FrontMatter | None, str]:
    text = read_text(path)
    if not has_front_matter(text):
        return None, text
    return parse_front_matter(text)


def _single(value: str | list[str] | None) -> str:
    if isinstance(value, list):
        return ", ".join(value)
    return value or ""


def _copy_static(src_dir: Path, out_dir: Path) -> int:
    """Copy assets (images, ...) the way Jekyll does.

    Entries starting with `_` or `.`, site.json and Markdown files are skipped;
    so is the output directory if it lives inside the source tree.
    """
    def _ignore(path: str, names: list[str]) -> set[str]:
        ignored = {".DS_Store", "__pycache__"}
        return {n for n in names if n in ignored or n.startswith(".")}

    count = 0
    for entry in sorted(src_dir.iterdir()):
        name = entry.name
        if name.startswith(("_", ".")) or name == SITE_CONFIG_FILE:
            continue
        if entry.resolve() == out_dir or out_dir.is_relative_to(entry.resolve()):
            continue
        target = out_dir / name
        if entry.is_dir():
            if target.exists():
                shutil.rmtree(target)
            shutil.copytree(entry, target, ignore=_ignore)
            count += sum(1 for p in target.rglob("*") if p.is_file())
        elif entry.suffix.lower() not in POST_EXTENSIONS and name != MANIFEST_NAME:
            shutil.copy2(entry, target)
            count += 1
    return count


def _record(issues: list[FileIssue], root: Path, path: Path | None, message: str) -> None:
    if path is None:
        rel = "<unknown>"
    else:
        try:
            rel = str(path.resolve().relative_to(root))
        except ValueError:
            rel = str(path)
    issues.append(FileIssue(path=rel, message=message))


def _dir_size_bytes(path: Path) -> int:
    total = 0
    for p in path.rglob("*"):
        if p.is_file():
            total += p.stat().st_size
    return total
