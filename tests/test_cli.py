"""Smoke tests for the command line interface."""

from __future__ import annotations

import contextlib
import io
import tempfile
import unittest
from pathlib import Path

from blogpack.cli import main
from blogpack.content.frontmatter import parse_front_matter


def run(*argv: str) -> tuple[int, str, str]:
    out, err = io.StringIO(), io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        code = main(list(argv))
    return code, out.getvalue(), err.getvalue()


class TestCli(unittest.TestCase):
    def test_new_then_build_and_list(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            src = Path(td) / "src"
            out = Path(td) / "site"

            code, stdout, _ = run(
                "new", "--src", str(src), "--title", "Hello, World", "--date", "2016-03-21",
                "--keywords", "python",
            )
            self.assertEqual(code, 0)
            path = src / "_posts" / "2016-03-21-hello-world.md"
            self.assertTrue(path.exists())
            fm, _ = parse_front_matter(path.read_text(encoding="utf-8"))
            self.assertEqual(fm, {"layout": "post", "title": "Hello, World", "keywords": ["python"]})

            code, stdout, _ = run("build", "--src", str(src), "--out", str(out), "--page-size", "1")
            self.assertEqual(code, 0)
            self.assertIn("Posts: 1", stdout)
            self.assertTrue((out / "2016/03/21/hello-world.html").exists())

            code, stdout, _ = run("list", "--src", str(src))
            self.assertEqual(code, 0)
            self.assertIn("2016-03-21-hello-world", stdout)
            self.assertIn("Hello, World", stdout)

    def test_new_refuses_to_overwrite(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            args = ("new", "--src", td, "--title", "Same", "--date", "2016-01-01")
            self.assertEqual(run(*args)[0], 0)
            self.assertEqual(run(*args)[0], 1)

    def test_check_reports_errors(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            posts = Path(td) / "_posts"
            posts.mkdir()
            (posts / "2016-01-01-bad.md").write_text("---\ntitle: x\n", encoding="utf-8")
            code, stdout, _ = run("check", "--src", td)
            self.assertEqual(code, 1)
            self.assertIn("Errors (1)", stdout)
            self.assertIn("2016-01-01-bad.md", stdout)

    def test_duplicate_identifiers_exit_2(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            posts = Path(td) / "_posts"
            (posts / "a").mkdir(parents=True)
            (posts / "2016-01-01-x.md").write_text("x", encoding="utf-8")
            (posts / "a" / "2016-01-01-x.md").write_text("x", encoding="utf-8")
            code, _, stderr = run("build", "--src", td, "--out", str(Path(td) / "out"))
            self.assertEqual(code, 2)
            self.assertIn("2016-01-01-x", stderr)
            self.assertFalse((Path(td) / "out").exists())

    def test_build_into_source_dir_exit_2(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            (Path(td) / "images").mkdir()
            (Path(td) / "images" / "a.jpg").write_bytes(b"jpg")
            code, _, stderr = run("build", "--src", td, "--out", td)
            self.assertEqual(code, 2)
            self.assertIn("source directory", stderr)
            self.assertTrue((Path(td) / "images" / "a.jpg").exists())

    def test_list_empty(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            code, stdout, _ = run("list", "--src", td)
            self.assertEqual(code, 0)
            self.assertIn("No posts found", stdout)


if __name__ == "__main__":
    unittest.main()
