"""
End-to-end tests for the minilang pipeline.

Tests the three stages together, short-circuiting, configuration and
the absence of state shared between runs.

Author: minilang developers
"""

import unittest
import sys
import os
import tempfile
from concurrent.futures import ThreadPoolExecutor

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from minilang import (
    analyze, analyze_file, is_error, tokenize, check_syntax, check_semantics,
    PipelineConfig, SYNTAX_OK, SEMANTICS_OK
)


class TestPipeline(unittest.TestCase):
    """Test the full analysis pipeline."""

    def test_valid_program(self):
        result = analyze("let x = 5;")

        self.assertTrue(result.lexical.ok)
        self.assertEqual(len(result.lexical.tokens), 5)
        self.assertEqual(result.syntax, SYNTAX_OK)
        self.assertEqual(result.semantic, SEMANTICS_OK)
        self.assertTrue(result.ok)
        self.assertIsNone(result.stage_failed)

    def test_stages_agree_with_standalone_functions(self):
        source = "let a = 1; if (a < 2) { a = a + 1; }"
        tokens = tokenize(source).tokens
        result = analyze(source)

        self.assertEqual(result.lexical.tokens, tokens)
        self.assertEqual(result.syntax, check_syntax(tokens))
        self.assertEqual(result.semantic, check_semantics(tokens))

    def test_lexical_failure_short_circuits(self):
        """Syntax and semantic stages do not run after a lexical error."""
        result = analyze("let x = 5 @ 3;")

        self.assertFalse(result.ok)
        self.assertEqual(result.stage_failed, "lexical")
        self.assertIsNone(result.syntax)
        self.assertIsNone(result.semantic)
        self.assertEqual([(e.character, e.offset) for e in result.lexical.errors], [("@", 10)])

    def test_syntax_failure_short_circuits(self):
        result = analyze("if (x == 5 { }")

        self.assertEqual(result.stage_failed, "syntax")
        self.assertTrue(is_error(result.syntax))
        self.assertIn("expected ')'", result.syntax)
        self.assertIsNone(result.semantic)

    def test_semantic_failure(self):
        result = analyze("x = 5;")

        self.assertEqual(result.syntax, SYNTAX_OK)
        self.assertEqual(result.stage_failed, "semantic")
        self.assertIn("not declared", result.semantic)

    def test_idempotent(self):
        """Analyzing the same source twice gives identical results."""
        for source in ["let x = 5; let y = x + 1;", "let x = 5; let x = 6;", "a @ b", "if ("]:
            with self.subTest(source=source):
                first = analyze(source)
                second = analyze(source)
                self.assertEqual(first, second)
                self.assertEqual(first.to_dict(), second.to_dict())

    def test_concurrent_runs_do_not_share_state(self):
        sources = ["let x = 5;", "let x = 5; let x = 6;", "x = 1;", "let a; let b = a + 1;"] * 25
        expected = [analyze(source).to_dict() for source in sources]

        with ThreadPoolExecutor(max_workers=8) as pool:
            actual = list(pool.map(lambda s: analyze(s).to_dict(), sources))

        self.assertEqual(actual, expected)

    def test_to_dict_omits_skipped_stages(self):
        data = analyze("a # b").to_dict()

        self.assertNotIn("syntax", data)
        self.assertNotIn("semantic", data)
        self.assertEqual(data["lexical"]["tokens"], [])
        self.assertEqual(data["lexical"]["errors"][0]["character"], "#")

        data = analyze("let x = 5;").to_dict()
        self.assertEqual(data["lexical"]["tokens"][0], {"text": "let", "kind": "keyword", "offset": 0})
        self.assertEqual(data["syntax"], SYNTAX_OK)
        self.assertEqual(data["semantic"], SEMANTICS_OK)

    def test_is_error(self):
        self.assertFalse(is_error(None))
        self.assertFalse(is_error(SYNTAX_OK))
        self.assertFalse(is_error(SEMANTICS_OK))
        self.assertTrue(is_error("Syntax error: unexpected token ';' at position 0"))
        self.assertTrue(is_error("Semantic error: variable 'x' is not declared (position 0)"))


class TestPipelineConfig(unittest.TestCase):
    """Test configuration handling."""

    def test_fail_fast(self):
        result = analyze("a @ b # c", PipelineConfig(lexer_fail_fast=True))
        self.assertEqual(len(result.lexical.errors), 1)

        result = analyze("a @ b # c")
        self.assertEqual(len(result.lexical.errors), 2)

    def test_from_env(self):
        self.assertFalse(PipelineConfig.from_env({}).lexer_fail_fast)
        self.assertTrue(PipelineConfig.from_env({"MINILANG_LEX_FAIL_FAST": "yes"}).lexer_fail_fast)
        self.assertTrue(PipelineConfig.from_env({"MINILANG_LEX_FAIL_FAST": " 1 "}).lexer_fail_fast)
        self.assertFalse(PipelineConfig.from_env({"MINILANG_LEX_FAIL_FAST": "0"}).lexer_fail_fast)

    def test_filename_in_locations(self):
        result = analyze("let x;", PipelineConfig(filename="prog.ml"))
        self.assertEqual(result.lexical.tokens[0].location.filename, "prog.ml")


class TestAnalyzeFile(unittest.TestCase):
    """Test reading sources from disk."""

    def test_analyze_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "prog.ml")
            with open(path, "w", encoding="utf-8") as f:
                f.write("let x = 5;\nlet y = 6;\ny = x + 1;\n")

            result = analyze_file(path)

        self.assertTrue(result.ok)
        self.assertEqual(result.lexical.tokens[-1].location.filename, path)
        self.assertEqual(result.lexical.tokens[-1].location.line, 3)

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OSError):
                analyze_file(os.path.join(tmp, "missing.ml"))


if __name__ == "__main__":
    unittest.main(verbosity=2)
