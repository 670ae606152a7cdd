from __future__ import annotations

from typing import Protocol, TYPE_CHECKING
from pathlib import Path
from interfaces.config.app_config import AppConfigShape

if TYPE_CHECKING:
    from app.session import ViewState


class Pipeline(Protocol):
    def run_on_file(self, source_path: Path, cfg: AppConfigShape) -> "ViewState":
        ...
