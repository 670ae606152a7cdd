from __future__ import annotations

from typing import Protocol, TYPE_CHECKING
from pathlib import Path

if TYPE_CHECKING:
    from app.session import ViewState
    from text.compose import ComposedLine


class PageOutput(Protocol):
    def write_page(
        self,
        *,
        output_path: Path,
        title: str,
        state: "ViewState",
        lines: list["ComposedLine"],
    ) -> None:
        ...
