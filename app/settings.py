from __future__ import annotations

from dataclasses import dataclass
import os

from config.gemini_config import GeminiConfig
from config.paths_config import PathsConfig
from config.render_config import RenderConfig

@dataclass(frozen=True, slots=True)
class AppConfig:
    paths: PathsConfig
    gemini: GeminiConfig
    render: RenderConfig


def build_settings() -> AppConfig:
    """
    Raises ConfigurationError when the environment cannot support a request
    (for example, no API key for the gemini backend).
    """
    paths = PathsConfig.from_strings(
        input_source_folder=os.getenv("PYCLEAN_INPUT_DIR", "Sources/in"),
        output_page_folder=os.getenv("PYCLEAN_OUTPUT_DIR", "Sources/clean"),
    )
    paths.validate()

    gemini = GeminiConfig.from_strings(
        backend=os.getenv("PYCLEAN_BACKEND", "gemini"),
        api_key=os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY"),
        model_name=os.getenv("PYCLEAN_MODEL", "gemini-2.5-flash"),
        api_base_url=os.getenv("PYCLEAN_API_BASE_URL"),
        timeout_s=os.getenv("PYCLEAN_TIMEOUT_S", "120"),
        default_max_tokens=os.getenv("PYCLEAN_MAX_TOKENS", "8192"),
        default_temperature=0.2,
    )

    render = RenderConfig.from_strings(
        palette=os.getenv("PYCLEAN_PALETTE"),
        language="python",
    )

    return AppConfig(paths=paths, gemini=gemini, render=render)
