"""Tests for front matter parsing."""

import unittest

from blogpack.content.frontmatter import dump_front_matter, has_front_matter, parse_front_matter
from blogpack.errors import MalformedFrontMatterError

POST = """---
layout: post
title: Hiking the Vienna Woods
description: A day trip
keywords: hiking, austria, vienna
tags: travel outdoors
---
# Heading

Body text.
"""


class TestParseFrontMatter(unittest.TestCase):
    def test_parses_keys_and_splits_comma_lists(self) -> None:
        fm, body = parse_front_matter(POST)
        self.assertEqual(fm["layout"], "post")
        self.assertEqual(fm["title"], "Hiking the Vienna Woods")
        self.assertEqual(fm["keywords"], ["hiking", "austria", "vienna"])
        self.assertEqual(fm["tags"], "travel outdoors")
        self.assertEqual(body, "# Heading\n\nBody text.\n")

    def test_no_delimiter_means_whole_file_is_body(self) -> None:
        text = "Just text\n---\nmore"
        fm, body = parse_front_matter(text)
        self.assertEqual(fm, {})
        self.assertEqual(body, text)
        self.assertFalse(has_front_matter(text))

    def test_unterminated_block_raises(self) -> None:
        with self.assertRaises(MalformedFrontMatterError):
            parse_front_matter("---\ntitle: Oops\n\nNo closing line\n")

    def test_line_without_colon_raises(self) -> None:
        with self.assertRaises(MalformedFrontMatterError) as ctx:
            parse_front_matter("---\ntitle: ok\nnot a pair\n---\n")
        self.assertIn("line 3", str(ctx.exception))

    def test_quoted_value_is_not_split(self) -> None:
        fm, _ = parse_front_matter('---\ntitle: "Hello, world"\n---\n')
        self.assertEqual(fm["title"], "Hello, world")

    def test_body_is_verbatim(self) -> None:
        fm, body = parse_front_matter("---\ntitle: x\n---\r\n  indented\r\n\n")
        self.assertEqual(fm, {"title": "x"})
        self.assertEqual(body, "  indented\r\n\n")

    def test_tolerates_bom_and_trailing_spaces(self) -> None:
        fm, body = parse_front_matter("\ufeff---  \ntitle: x\n---\nBody")
        self.assertEqual(fm, {"title": "x"})
        self.assertEqual(body, "Body")

    def test_skips_blank_and_comment_lines(self) -> None:
        fm, _ = parse_front_matter("---\n\n# note\ntitle: x\n---\n")
        self.assertEqual(fm, {"title": "x"})

    def test_empty_block(self) -> None:
        fm, body = parse_front_matter("---\n---\nBody")
        self.assertEqual(fm, {})
        self.assertEqual(body, "Body")


class TestDumpFrontMatter(unittest.TestCase):
    def test_round_trip(self) -> None:
        mappings = [
            {"layout": "post", "title": "Plain"},
            {"keywords": ["a", "b", "c"], "title": "Comma, inside"},
            {"keywords": ["single"], "empty": "", "none": []},
            {"quoted": '"already quoted"', "padded": "  spaces  ", "tail": "it's'"},
        ]
        for mapping in mappings:
            with self.subTest(mapping=mapping):
                text = "---\n" + dump_front_matter(mapping) + "---\n"
                parsed, body = parse_front_matter(text)
                self.assertEqual(parsed, mapping)
                self.assertEqual(body, "")

    def test_round_trip_of_parsed_post(self) -> None:
        fm, _ = parse_front_matter(POST)
        again, _ = parse_front_matter("---\n" + dump_front_matter(fm) + "---\n")
        self.assertEqual(again, fm)


if __name__ == "__main__":
    unittest.main()
