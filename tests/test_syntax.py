from __future__ import annotations

import unittest
from unittest.mock import patch

from text.syntax import plain_lines, tokenize_lines


class TestTokenizeLines(unittest.TestCase):
    def test_empty_text(self) -> None:
        self.assertEqual(tokenize_lines(""), [])

    def test_one_markup_line_per_text_line(self) -> None:
        lines = tokenize_lines("x = 1\ny = 2")
        self.assertEqual(len(lines), 2)
        self.assertIn("<span", lines[0])
        self.assertIn("x", lines[0])
        self.assertIn("y", lines[1])

    def test_trailing_newline_keeps_line_count(self) -> None:
        self.assertEqual(len(tokenize_lines("x = 1\n")), 2)

    def test_lone_carriage_returns_keep_every_line(self) -> None:
        lines = tokenize_lines("a = 1\rb = 2\r\nc = 3")
        self.assertEqual(len(lines), 3)
        self.assertIn("b", lines[1])
        self.assertIn("c", lines[2])

    def test_fallback_splits_carriage_returns(self) -> None:
        with patch("text.syntax.highlight", side_effect=RuntimeError("boom")):
            with self.assertLogs("text.syntax", level="WARNING"):
                lines = tokenize_lines("a\rb")
        self.assertEqual(lines, ["a", "b"])

    def test_markup_escapes_source(self) -> None:
        joined = "".join(tokenize_lines("if a < b:\n    pass"))
        self.assertNotIn("a < b", joined)
        self.assertIn("&lt;", joined)

    def test_unknown_language_falls_back_with_info_log(self) -> None:
        with self.assertLogs("text.syntax", level="INFO") as logs:
            lines = tokenize_lines("a < b\nc", language="no-such-language")
        self.assertEqual(lines, ["a &lt; b", "c"])
        self.assertTrue(any("No tokenizer" in m for m in logs.output))

    def test_tokenizer_failure_falls_back_with_warning(self) -> None:
        with patch("text.syntax.highlight", side_effect=RuntimeError("boom")):
            with self.assertLogs("text.syntax", level="WARNING") as logs:
                lines = tokenize_lines("x = 1\ny = 2")
        self.assertEqual(lines, ["x = 1", "y = 2"])
        self.assertTrue(any("Tokenizer failed" in m for m in logs.output))

    def test_plain_lines(self) -> None:
        self.assertEqual(plain_lines("<a>\n&"), ["&lt;a&gt;", "&amp;"])


if __name__ == "__main__":
    unittest.main()
