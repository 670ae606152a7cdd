from __future__ import annotations

from typing import Protocol


class Tokenizer(Protocol):
    def __call__(self, text: str, language: str = "python") -> list[str]:
        ...
