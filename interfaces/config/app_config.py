from __future__ import annotations

from dataclasses import dataclass
from config.paths_config import PathsConfig
from config.gemini_config import GeminiConfig
from config.render_config import RenderConfig


@dataclass(frozen=True)
class AppConfigShape:
    paths: PathsConfig
    gemini: GeminiConfig
    render: RenderConfig
