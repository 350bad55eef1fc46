"""Command line for building, checking and authoring a blog source tree.

Subcommands import their work lazily so `blogpack --help` stays fast.
"""

from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path
from typing import Any

from . import __version__
from .config import LOG_LEVEL


def app(argv: list[str] | None = None) -> None:
    """Entry point for the `blogpack` console script."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="blogpack",
        description="Build a static blog from Markdown posts with front matter.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"blogpack {__version__}",
    )
    parser.add_argument("--verbose", "-V", action="store_true", help="Log debug output")

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_build = sub.add_parser("build", help="Render the site")
    p_build.add_argument("--src", "-s", type=Path, default=Path("."), help="Source directory")
    p_build.add_argument("--out", "-o", type=Path, default=Path("./_site"), help="Output directory")
    p_build.add_argument("--page-size", type=int, default=None, help="Posts per index page")
    p_build.add_argument("--base-url", default=None, help="URL prefix for generated links")

    p_check = sub.add_parser("check", help="Parse and render every file without writing")
    p_check.add_argument("--src", "-s", type=Path, default=Path("."), help="Source directory")

    p_list = sub.add_parser("list", help="List posts, newest first")
    p_list.add_argument("--src", "-s", type=Path, default=Path("."), help="Source directory")
    p_list.add_argument("--limit", "-n", type=int, default=10, help="Number of posts to show")

    p_new = sub.add_parser("new", help="Create a new post file")
    p_new.add_argument("--src", "-s", type=Path, default=Path("."), help="Source directory")
    p_new.add_argument("--title", "-t", required=True, help="Post title")
    p_new.add_argument("--date", "-d", default=None, help="Publication date (YYYY-MM-DD, default today)")
    p_new.add_argument("--description", default="", help="Short description")
    p_new.add_argument("--keywords", "-k", nargs="*", default=[], help="Keywords")
    p_new.add_argument("--layout", default=None, help="Layout name (default from site config)")

    args = parser.parse_args(argv)

    from .logs import setup_logging

    setup_logging("DEBUG" if args.verbose else LOG_LEVEL)

    if args.cmd == "build":
        return _cmd_build(args)
    if args.cmd == "check":
        return _cmd_check(args)
    if args.cmd == "list":
        return _cmd_list(args)
    if args.cmd == "new":
        return _cmd_new(args)

    parser.print_help()
    return 2


def _load_config(args: Any) -> Any:
    from .site.context import load_site_config

    config = load_site_config(args.src)
    overrides: dict[str, Any] = {}
    if getattr(args, "page_size", None) is not None:
        overrides["page_size"] = args.page_size
    if getattr(args, "base_url", None) is not None:
        overrides["base_url"] = args.base_url
    if overrides:
        config = config.model_validate({**config.model_dump(), **overrides})
    return config


def _cmd_build(args: Any) -> int:
    from .errors import BlogpackError
    from .site.build import build_site

    try:
        report = build_site(args.src, args.out, config=_load_config(args))
    except (BlogpackError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print("✓ Site generated" if report.ok else "✗ Site generated with errors")
    print(f"  Output: {report.out_dir}")
    print(f"  Posts: {report.posts}")
    print(f"  Pages: {report.pages}")
    print(f"  Static files: {report.static_files}")
    print(f"  Size: {report.total_bytes / 1024:.1f} KB")
    _print_issues(report)
    return 0 if report.ok else 1


def _cmd_check(args: Any) -> int:
    from .errors import BlogpackError
    from .site.build import check_site

    try:
        report = check_site(args.src, config=_load_config(args))
    except BlogpackError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(f"Checked {report.posts} posts, {report.pages} pages")
    _print_issues(report)
    return 0 if report.ok else 1


def _cmd_list(args: Any) -> int:
    from .errors import BlogpackError
    from .site.build import BuildReport, load_posts
    from .site.collection import PostCollection
    from .site.layouts import LayoutRegistry

    try:
        config = _load_config(args)
        src = args.src.resolve()
        layouts = LayoutRegistry()
        layouts.load_dir(src / config.layouts_dir)
        report = BuildReport()
        collection = PostCollection(
            load_posts(src / config.posts_dir, layouts, config.default_layout, report, src)
        )
    except BlogpackError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if not len(collection):
        print("No posts found")
        return 0

    for post in collection.all()[: max(0, int(args.limit))]:
        print(f"  {post.publication_date}  {post.identifier:40}  {post.title}")
    _print_issues(report)
    return 0


def _cmd_new(args: Any) -> int:
    from .content.frontmatter import dump_front_matter
    from .content.post import parse_identifier, slugify
    from .errors import BlogpackError

    try:
        config = _load_config(args)
        published = date.fromisoformat(args.date) if args.date else date.today()
        slug = slugify(args.title)
        if not slug:
            print("Error: title has no usable characters for a file name", file=sys.stderr)
            return 2
        identifier = f"{published.isoformat()}-{slug}"
        parse_identifier(identifier)
    except (BlogpackError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    front_matter: dict[str, Any] = {
        "layout": args.layout or config.default_layout,
        "title": args.title,
    }
    if args.description:
        front_matter["description"] = args.description
    if args.keywords:
        front_matter["keywords"] = list(args.keywords)

    posts_dir = args.src / config.posts_dir
    path = posts_dir / f"{identifier}.md"
    if path.exists():
        print(f"Error: {path} already exists", file=sys.stderr)
        return 1

    posts_dir.mkdir(parents=True, exist_ok=True)
    path.write_text(f"---\n{dump_front_matter(front_matter)}---\n\n", encoding="utf-8")
    print(f"✓ Post created: {path}")
    return 0


def _print_issues(report: Any) -> None:
    if report.errors:
        print(f"\nErrors ({len(report.errors)}):")
        for e in report.errors:
            print(f"  - {e}")
    if report.warnings:
        print(f"\nWarnings ({len(report.warnings)}):")
        for w in report.warnings[:20]:
            print(f"  - {w}")
        if len(report.warnings) > 20:
            print(f"  ... and {len(report.warnings) - 20} more")


if __name__ == "__main__":
    app()
