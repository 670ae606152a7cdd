from __future__ import annotations
from typing import Iterable, Sequence

from interfaces.errors import ConfigurationError
from interfaces.llm.tasks import Change, ColorAssignment


def distinct_line_numbers(changes: Iterable[Change]) -> list[int]:
    """
    Line numbers in order of first appearance, duplicates dropped.
    """
    seen: set[int] = set()
    out: list[int] = []
    for change in changes:
        if change.line_number in seen:
            continue
        seen.add(change.line_number)
        out.append(change.line_number)
    return out


def assign_colors(changes: Iterable[Change], palette: Sequence[str]) -> ColorAssignment:
    """
    Map each changed line to a palette color.

    Colors follow first-occurrence order in `changes`, not numeric line order,
    and wrap around the palette: the k-th distinct line gets palette[k % len(palette)].
    Lines without a change get no entry.
    """
    if not palette:
        raise ConfigurationError("Highlight palette is empty.")
    return {
        line: palette[i % len(palette)]
        for i, line in enumerate(distinct_line_numbers(changes))
    }
