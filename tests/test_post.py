"""Tests for the post model and identifier parsing."""

import tempfile
import unittest
from datetime import date
from pathlib import Path

from blogpack.content.post import load_post, parse_identifier, parse_post, slugify
from blogpack.errors import InvalidIdentifierError, MalformedFrontMatterError, UnreadableFileError


class TestParseIdentifier(unittest.TestCase):
    def test_splits_date_and_slug(self) -> None:
        published, slug = parse_identifier("2016-03-21-spring-in-vienna")
        self.assertEqual(published, date(2016, 3, 21))
        self.assertEqual(slug, "spring-in-vienna")

    def test_rejects_missing_slug(self) -> None:
        with self.assertRaises(InvalidIdentifierError):
            parse_identifier("2016-03-21")

    def test_rejects_invalid_calendar_date(self) -> None:
        with self.assertRaises(InvalidIdentifierError):
            parse_identifier("2016-02-30-leap")

    def test_rejects_other_names(self) -> None:
        with self.assertRaises(InvalidIdentifierError):
            parse_identifier("about")


class TestPost(unittest.TestCase):
    def test_fields_and_url(self) -> None:
        post = parse_post(
            "2016-11-11-autumn",
            "---\nlayout: post\ntitle: Autumn\nkeywords: Leaves, trees\ntags: Nature, walks outside\n---\nText\n",
        )
        self.assertEqual(post.title, "Autumn")
        self.assertEqual(post.url, "2016/11/11/autumn.html")
        self.assertEqual(post.field("keywords"), "Leaves, trees")
        self.assertEqual(post.field("missing"), "")
        self.assertEqual(post.tokens(), {"leaves", "trees", "nature", "walks", "outside"})

    def test_title_falls_back_to_slug(self) -> None:
        post = parse_post("2016-01-01-new-year", "Body only")
        self.assertEqual(post.title, "new year")
        self.assertEqual(post.front_matter, {})
        self.assertEqual(post.body, "Body only")

    def test_single_keyword_is_a_token(self) -> None:
        post = parse_post("2016-01-01-x", "---\nkeywords: python\n---\n")
        self.assertEqual(post.tokens(), {"python"})


class TestLoadPost(unittest.TestCase):
    def test_loads_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "2016-01-01-hello.md"
            path.write_text("---\ntitle: Hello\n---\nHi\n", encoding="utf-8")
            post = load_post(path)
            self.assertEqual(post.identifier, "2016-01-01-hello")
            self.assertEqual(post.source_path, path)

    def test_error_carries_path(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "2016-01-01-broken.md"
            path.write_text("---\ntitle: Broken\n", encoding="utf-8")
            with self.assertRaises(MalformedFrontMatterError) as ctx:
                load_post(path)
            self.assertEqual(ctx.exception.path, path)
            self.assertIn(str(path), str(ctx.exception))

    def test_invalid_utf8_is_a_content_error(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "2016-01-01-bytes.md"
            path.write_bytes(b"---\ntitle: Bytes\n---\n\xff\xfe\n")
            with self.assertRaises(UnreadableFileError) as ctx:
                load_post(path)
            self.assertEqual(ctx.exception.path, path)
            self.assertIn("UTF-8", ctx.exception.message)


class TestSlugify(unittest.TestCase):
    def test_basic(self) -> None:
        self.assertEqual(slugify("Hello, World!"), "hello-world")
        self.assertEqual(slugify("Tea & Cake"), "tea-and-cake")
        self.assertEqual(slugify("  --  "), "")


if __name__ == "__main__":
    unittest.main()
