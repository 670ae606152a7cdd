from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Sequence

from interfaces.llm.tasks import ColorAssignment


@dataclass(frozen=True)
class ComposedLine:
    line_number: int
    markup: str
    color: Optional[str] = None
    style: dict[str, str] = field(default_factory=dict)

    @property
    def highlighted(self) -> bool:
        return self.color is not None

    def style_attr(self) -> str:
        return "; ".join(f"{k}: {v}" for k, v in self.style.items())


def highlight_style(color: str, *, alpha: str = "20", border_width_px: int = 2) -> dict[str, str]:
    return {
        "background-color": f"{color}{alpha}",
        "border-left": f"{border_width_px}px solid {color}",
    }


def compose_lines(
    display_lines: Sequence[str],
    colors: ColorAssignment,
    *,
    alpha: str = "20",
    border_width_px: int = 2,
) -> list[ComposedLine]:
    """
    Pair each 1-indexed display line with its highlight, if any.

    Keys in `colors` beyond the last line are ignored.
    """
    out: list[ComposedLine] = []
    for i, markup in enumerate(display_lines):
        line_number = i + 1
        color = colors.get(line_number)
        style = highlight_style(color, alpha=alpha, border_width_px=border_width_px) if color else {}
        # An empty line still needs a character to keep its height.
        out.append(ComposedLine(line_number=line_number, markup=markup or " ", color=color, style=style))
    return out
