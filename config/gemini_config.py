from __future__ import annotations
from dataclasses import dataclass

from interfaces.errors import ConfigurationError

GEMINI_API_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
OPENAI_COMPAT_CHAT_URL = "http://127.0.0.1:8080/v1/chat/completions"

@dataclass(frozen=True, slots=True)
class GeminiConfig:
    backend: str                # "gemini" | "openai_compat"
    api_key: str
    model_name: str
    api_base_url: str
    timeout_s: int

    default_max_tokens: int
    default_temperature: float
    default_seed: int | None = None
    default_stop: list[str] | None = None

    def validate(self) -> None:
        if not isinstance(self.backend, str) or self.backend not in {"gemini", "openai_compat"}:
            raise ConfigurationError("GeminiConfig.backend must be 'gemini' or 'openai_compat'.")
        if self.backend == "gemini" and (not isinstance(self.api_key, str) or not self.api_key.strip()):
            raise ConfigurationError("API_KEY environment variable not set")
        if not isinstance(self.model_name, str) or not self.model_name.strip():
            raise ConfigurationError("GeminiConfig.model_name must be a non-empty string.")
        if not isinstance(self.api_base_url, str) or not self.api_base_url.startswith(("http://", "https://")):
            raise ConfigurationError("GeminiConfig.api_base_url must be an http(s) URL.")
        if not isinstance(self.timeout_s, int) or self.timeout_s <= 0:
            raise ConfigurationError("GeminiConfig.timeout_s must be a positive integer.")
        if not isinstance(self.default_max_tokens, int) or self.default_max_tokens <= 0:
            raise ConfigurationError("GeminiConfig.default_max_tokens must be a positive integer.")
        if not isinstance(self.default_temperature, (int, float)):
            raise ConfigurationError("GeminiConfig.default_temperature must be a float.")
        if not 0.0 <= float(self.default_temperature) <= 2.0:
            raise ConfigurationError("GeminiConfig.default_temperature must be between 0.0 and 2.0.")
        if self.default_seed is not None and not isinstance(self.default_seed, int):
            raise ConfigurationError("GeminiConfig.default_seed must be an integer or None.")
        if self.default_stop is not None and not isinstance(self.default_stop, list):
            raise ConfigurationError("GeminiConfig.default_stop must be a list[str] or None.")

    @staticmethod
    def from_strings(
            backend: str,
            api_key: str | None,
            model_name: str,
            api_base_url: str | None = None,
            timeout_s: int | str = 120,
            default_max_tokens: int | str = 8192,
            default_temperature: float | str = 0.2,
    ) -> "GeminiConfig":
        backend = (backend or "").strip().lower()
        if not api_base_url:
            api_base_url = GEMINI_API_BASE_URL if backend == "gemini" else OPENAI_COMPAT_CHAT_URL
        try:
            timeout = int(timeout_s)
            max_tokens = int(default_max_tokens)
            temperature = float(default_temperature)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid numeric setting: {e}") from e
        cfg = GeminiConfig(
            backend=backend,
            api_key=(api_key or "").strip(),
            model_name=(model_name or "").strip(),
            api_base_url=api_base_url.strip().rstrip("/"),
            timeout_s=timeout,
            default_max_tokens=max_tokens,
            default_temperature=temperature,
            )
        cfg.validate()
        return cfg
