"""Tests for layouts and the layout compositor."""

import tempfile
import unittest
from pathlib import Path

from blogpack.errors import LayoutError, UnknownLayoutError
from blogpack.site.collection import PostCollection
from blogpack.site.context import SiteConfig, SiteContext
from blogpack.site.layouts import Layout, LayoutRegistry, compose, slot_name


def make_context(*layouts: Layout, builtins: bool = False, **config) -> SiteContext:
    return SiteContext(
        config=SiteConfig(**config),
        collection=PostCollection([]),
        layouts=LayoutRegistry(layouts, builtins=builtins),
    )


class TestLayout(unittest.TestCase):
    def test_requires_body_slot(self) -> None:
        with self.assertRaises(LayoutError):
            Layout(name="broken", template="<h1>{{ title }}</h1>")

    def test_jekyll_slot_spellings(self) -> None:
        self.assertEqual(slot_name("content"), "body")
        self.assertEqual(slot_name("page.title"), "title")
        self.assertEqual(slot_name("site.title"), "site_title")
        layout = Layout(name="j", template="{{ page.title }}|{{content}}")
        self.assertEqual(layout.slots, {"title", "body"})
        self.assertEqual(layout.fill({"title": "T", "body": "B"}), "T|B")


class TestCompose(unittest.TestCase):
    def test_substitutes_and_escapes_front_matter(self) -> None:
        ctx = make_context(Layout(name="post", template="<h1>{{ title }}</h1><p>{{ description }}</p>{{ body }}"))
        html = compose(ctx, "post", "<p>Hi</p>", {"title": "Fish & <Chips>", "description": "d"})
        self.assertEqual(html, "<h1>Fish &amp; &lt;Chips&gt;</h1><p>d</p><p>Hi</p>")

    def test_missing_slots_render_empty(self) -> None:
        ctx = make_context(Layout(name="post", template="[{{ title }}][{{ date }}]{{ body }}"))
        self.assertEqual(compose(ctx, "post", "B", {}), "[][]B")

    def test_list_values_are_joined(self) -> None:
        ctx = make_context(Layout(name="post", template="{{ keywords }}{{ body }}"))
        self.assertEqual(compose(ctx, "post", "", {"keywords": ["a", "b"]}), "a, b")

    def test_front_matter_cannot_replace_site_slots(self) -> None:
        ctx = make_context(
            Layout(name="post", template="<title>{{ site.title }}</title><link href=\"{{ stylesheet }}\">{{ menu }}|{{ body }}"),
            title="Blog",
        )
        html = compose(ctx, "post", "B", {"site_title": "Other", "stylesheet": "evil.css", "menu": "plain"})
        self.assertTrue(html.startswith('<title>Blog</title><link href="/style.css"><input'))
        self.assertNotIn("evil.css", html)
        self.assertNotIn("Other", html)
        self.assertTrue(html.endswith("|B"))

    def test_slots_override_front_matter_and_body_is_raw(self) -> None:
        ctx = make_context(Layout(name="post", template="{{ date }}{{ body }}"))
        html = compose(ctx, "post", "<b>{{ date }}</b>", {"date": "fm"}, {"date": "<time>x</time>"})
        self.assertEqual(html, "<time>x</time><b>{{ date }}</b>")

    def test_unknown_layout(self) -> None:
        ctx = make_context()
        with self.assertRaises(UnknownLayoutError):
            compose(ctx, "nope", "B", {})

    def test_parent_chain(self) -> None:
        ctx = make_context(
            Layout(name="base", template="<html>{{ site_title }}{{ body }}</html>"),
            Layout(name="post", template="<article>{{ title }}{{ body }}</article>", parent="base"),
            title="My Blog",
        )
        html = compose(ctx, "post", "x", {"title": "T"})
        self.assertEqual(html, "<html>My Blog<article>Tx</article></html>")

    def test_circular_chain(self) -> None:
        ctx = make_context(
            Layout(name="a", template="{{ body }}", parent="b"),
            Layout(name="b", template="{{ body }}", parent="a"),
        )
        with self.assertRaises(LayoutError):
            compose(ctx, "a", "x")

    def test_builtin_post_layout_uses_stylesheet_classes(self) -> None:
        ctx = make_context(builtins=True, title="Blog")
        html = compose(ctx, "post", "<p>Body</p>", {"title": "Hello"}, {"title": "Hello"})
        for marker in (
            'class="container"',
            'class="masthead"',
            'class="post"',
            'class="post-title"',
            'id="menu"',
            'id="articleContent"',
            'id="backtotop"',
            'id="scrollUp"',
            'href="/style.css"',
        ):
            self.assertIn(marker, html)
        self.assertIn("<title>Hello · Blog</title>", html)


class TestLayoutRegistry(unittest.TestCase):
    def test_builtins(self) -> None:
        self.assertEqual(LayoutRegistry().names(), ["default", "page", "post"])

    def test_load_dir_with_parent(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            d = Path(td)
            (d / "wide.html").write_text("---\nlayout: default\n---\n<div class=\"wide\">{{ content }}</div>\n")
            (d / "notes.txt").write_text("ignored")
            registry = LayoutRegistry()
            self.assertEqual(registry.load_dir(d), 1)
            self.assertIn("wide", registry)
            self.assertEqual(registry.get("wide").parent, "default")
            self.assertEqual([layout.name for layout in registry.chain("wide")], ["wide", "default"])

    def test_load_missing_dir(self) -> None:
        self.assertEqual(LayoutRegistry().load_dir(Path("/nonexistent/layouts")), 0)


if __name__ == "__main__":
    unittest.main()
