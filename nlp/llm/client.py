from __future__ import annotations
from dataclasses import dataclass
import logging
import requests
from urllib.parse import quote
from typing import Any, Dict, Optional

from interfaces.errors import TransportError

logger = logging.getLogger(__name__)

JSONDict = Dict[str, Any]


def _post_json(url: str, payload: JSONDict, *, headers: JSONDict, timeout_s: int) -> JSONDict:
    try:
        r = requests.post(url, json=payload, headers=headers, timeout=timeout_s)
    except requests.RequestException as e:
        raise TransportError(f"Request to {url} failed: {e}") from e
    if r.status_code != 200:
        raise TransportError(f"HTTP {r.status_code}: {r.text[:1000]}")
    try:
        return r.json()
    except ValueError as e:
        raise TransportError(f"Response body from {url} is not JSON") from e


def to_gemini_schema(schema: Any) -> Any:
    """
    The Generative Language API spells schema types in upper case (OBJECT, STRING, ...).
    """
    if isinstance(schema, dict):
        out: JSONDict = {}
        for key, val in schema.items():
            if key == "type" and isinstance(val, str):
                out[key] = val.upper()
            elif key == "additionalProperties":
                continue
            else:
                out[key] = to_gemini_schema(val)
        return out
    if isinstance(schema, list):
        return [to_gemini_schema(v) for v in schema]
    return schema


@dataclass
class GeminiChatClient:
    api_key: str
    model_name: str = "gemini-2.5-flash"
    api_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    timeout_s: int = 120
    temperature: float = 0.2

    def _url(self) -> str:
        return f"{self.api_base_url}/models/{quote(self.model_name, safe='-._')}:generateContent"

    def json_schema_chat(
        self,
        system: str,
        user: str,
        max_tokens: int,
        schema: dict,
        temperature: Optional[float] = None,
    ) -> str:
        payload = {
            "systemInstruction": {"parts": [{"text": system}]},
            "contents": [{"role": "user", "parts": [{"text": user}]}],
            "generationConfig": {
                "temperature": self.temperature if temperature is None else temperature,
                "maxOutputTokens": max_tokens,
                "responseMimeType": "application/json",
                "responseSchema": to_gemini_schema(schema),
            },
        }
        logger.debug("Gemini request: model=%s user_chars=%d", self.model_name, len(user))
        data = _post_json(
            self._url(),
            payload,
            headers={"x-goog-api-key": self.api_key},
            timeout_s=self.timeout_s,
        )

        candidates = data.get("candidates") or []
        if not candidates:
            # Blocked prompts come back without candidates; the parser reports it.
            logger.warning("Gemini returned no candidates: %s", data.get("promptFeedback"))
            return ""
        parts = (candidates[0].get("content") or {}).get("parts") or []
        return "".join(p.get("text") or "" for p in parts).strip()


@dataclass
class OpenAICompatChatClient:
    chat_url: str
    model_name: str = "llama"
    api_key: str = ""
    timeout_s: int = 120
    temperature: float = 0.2

    def json_schema_chat(
        self,
        system: str,
        user: str,
        max_tokens: int,
        schema: dict,
        temperature: Optional[float] = None,
    ) -> str:
        payload = {
            "model": self.model_name,
            "temperature": self.temperature if temperature is None else temperature,
            "max_tokens": max_tokens,
            "response_format": {
                "type": "json_schema",
                "json_schema": {"name": "beautify_result", "schema": schema, "strict": True},
            },
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
        }
        headers = {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}
        logger.debug("OpenAI-compatible request: model=%s user_chars=%d", self.model_name, len(user))
        data = _post_json(self.chat_url, payload, headers=headers, timeout_s=self.timeout_s)
        choices = data.get("choices") or []
        message = choices[0].get("message") if choices else None
        if not message:
            return ""
        return (message.get("content") or "").strip()
