from __future__ import annotations

import unittest

from interfaces.llm.tasks import BeautifyResult, Change
from text.compose import compose_lines, highlight_style
from text.highlight import assign_colors

PALETTE = ["#F98080", "#F0B05D", "#F6E05E"]


class TestHighlightStyle(unittest.TestCase):
    def test_tint_and_edge_use_same_color(self) -> None:
        style = highlight_style("#76A9FA")
        self.assertEqual(style["background-color"], "#76A9FA20")
        self.assertEqual(style["border-left"], "2px solid #76A9FA")


class TestComposeLines(unittest.TestCase):
    def _compose(self, formatted: str, lines: list[int]):
        result = BeautifyResult(
            formatted_text=formatted,
            changes=tuple(Change(line_number=n, explanation="e") for n in lines),
        )
        colors = assign_colors(result.changes, PALETTE)
        return compose_lines(formatted.split("\n"), colors), colors

    def test_boundaries_first_last_and_out_of_range(self) -> None:
        composed, colors = self._compose("a = 1\nb = 2\nc = 3", [1, 3, 99])
        self.assertEqual(len(composed), 3)
        self.assertEqual([c.line_number for c in composed], [1, 2, 3])
        self.assertTrue(composed[0].highlighted)
        self.assertFalse(composed[1].highlighted)
        self.assertTrue(composed[2].highlighted)
        self.assertEqual(composed[0].color, colors[1])
        self.assertEqual(composed[2].color, colors[3])
        self.assertEqual(composed[1].style, {})

    def test_every_key_present_gets_highlight_and_absent_none(self) -> None:
        composed, colors = self._compose("\n".join(f"x{i}" for i in range(1, 9)), [4, 2, 4, 7])
        for line in composed:
            if line.line_number in colors:
                self.assertEqual(line.color, colors[line.line_number])
                self.assertIn(colors[line.line_number], line.style["border-left"])
            else:
                self.assertIsNone(line.color)

    def test_empty_line_keeps_height(self) -> None:
        composed = compose_lines(["a", "", "b"], {})
        self.assertEqual(composed[1].markup, " ")

    def test_no_lines(self) -> None:
        self.assertEqual(compose_lines([], {1: "#000000"}), [])

    def test_style_attr(self) -> None:
        composed = compose_lines(["a"], {1: "#123456"}, alpha="33", border_width_px=3)
        self.assertEqual(composed[0].style_attr(), "background-color: #12345633; border-left: 3px solid #123456")


if __name__ == "__main__":
    unittest.main()
