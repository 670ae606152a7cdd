from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class Change:
    line_number: int
    explanation: str


@dataclass(frozen=True)
class BeautifyResult:
    formatted_text: str
    changes: tuple[Change, ...]


@dataclass(frozen=True)
class BeautifyRequest:
    system: str
    user: str
    schema: dict
    temperature: float
    max_tokens: int


# line number -> palette color
ColorAssignment = Mapping[int, str]
