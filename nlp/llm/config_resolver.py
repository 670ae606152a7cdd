from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, TYPE_CHECKING
import logging

from nlp.llm.task_config import TASK_DEFAULTS

if TYPE_CHECKING:
    from app.settings import AppConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LlmRequestConfig:
    max_tokens: int
    temperature: float
    seed: Optional[int]
    stop: Optional[list[str]]


def _apply_overrides(values: dict[str, Any], overrides: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    if not overrides:
        return values
    unknown = sorted(set(overrides.keys()) - set(values.keys()))
    if unknown:
        raise ValueError(f"Unknown override keys: {', '.join(unknown)}")
    for key, val in overrides.items():
        values[key] = val
    return values


def resolve_request_config(
    task_name: str,
    app_cfg: "AppConfig",
    *,
    request_overrides: Optional[Mapping[str, Any]] = None,
) -> LlmRequestConfig:
    gemini = app_cfg.gemini
    values: dict[str, Any] = {
        "max_tokens": gemini.default_max_tokens,
        "temperature": gemini.default_temperature,
        "seed": gemini.default_seed,
        "stop": gemini.default_stop,
    }

    task_defaults = TASK_DEFAULTS.get(task_name)
    if task_defaults:
        values = _apply_overrides(values, task_defaults)
    values = _apply_overrides(values, request_overrides)

    cfg = LlmRequestConfig(**values)
    logger.debug("Resolved LlmRequestConfig for %s: %s", task_name, cfg)
    return cfg
