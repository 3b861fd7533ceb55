"""
Tests for the minilang command line front end.

Author: minilang developers
"""

import io
import os
import sys
import tempfile
import unittest
from unittest import mock

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from rich.console import Console

from minilang.cli import main


class TestCLI(unittest.TestCase):
    """Test cases for the minilang command."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.output = io.StringIO()
        self.console = Console(file=self.output, width=200, color_system=None)

    def _write(self, name: str, source: str) -> str:
        path = os.path.join(self.tmp.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(source)
        return path

    def _run(self, *argv: str) -> int:
        return main(list(argv), console=self.console)

    def test_valid_file(self):
        path = self._write("ok.ml", "let x = 5;")

        self.assertEqual(self._run(path), 0)
        text = self.output.getvalue()
        self.assertIn("Token order is valid", text)
        self.assertIn("All variable types are correct", text)
        self.assertIn("keyword", text)

    def test_lexical_error(self):
        path = self._write("bad.ml", "let x = 5 @ 3;")

        self.assertEqual(self._run(path), 1)
        text = self.output.getvalue()
        self.assertIn("unrecognized character '@' at position 10", text)
        self.assertIn("Syntax: skipped", text)

    def test_plain_output(self):
        path = self._write("ok.ml", "let x = [")

        self.assertEqual(self._run("--plain", "--tokens-only", path), 1)
        text = self.output.getvalue()
        self.assertIn("keyword: let", text)
        self.assertIn("bracket: [", text)
        self.assertNotIn("Syntax", text)

    def test_json_output(self):
        good = self._write("good.ml", "let x = 5;")
        bad = self._write("bad.ml", "x = 5;")

        self.assertEqual(self._run("--json", good, bad), 1)
        text = self.output.getvalue()
        self.assertIn('"syntax": "Token order is valid"', text)
        self.assertIn("is not declared", text)

    def test_missing_file(self):
        self.assertEqual(self._run(os.path.join(self.tmp.name, "nope.ml")), 2)
        self.assertIn("cannot read", self.output.getvalue())

    def test_stdin(self):
        with mock.patch("sys.stdin", io.StringIO("let x = 5;")):
            self.assertEqual(self._run("--plain"), 0)
        self.assertIn("Token order is valid", self.output.getvalue())

    def test_fail_fast_from_env(self):
        path = self._write("bad.ml", "a @ b # c")

        with mock.patch.dict(os.environ, {"MINILANG_LEX_FAIL_FAST": "1"}):
            self.assertEqual(self._run("--plain", path), 1)
        text = self.output.getvalue()
        self.assertIn("'@'", text)
        self.assertNotIn("'#'", text)

    def test_fail_fast_flag(self):
        path = self._write("bad.ml", "a @ b # c")

        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop("MINILANG_LEX_FAIL_FAST", None)
            self.assertEqual(self._run("--plain", "--fail-fast", path), 1)
        self.assertNotIn("'#'", self.output.getvalue())


if __name__ == "__main__":
    unittest.main(verbosity=2)
