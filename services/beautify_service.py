from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import logging

from interfaces.errors import ConfigurationError
from interfaces.llm.client import LlmClient
from interfaces.llm.tasks import BeautifyResult
from nlp.llm.config_resolver import resolve_request_config
from nlp.llm.tasks.beautify import beautify_source

if TYPE_CHECKING:
    from app.settings import AppConfig

logger = logging.getLogger(__name__)

@dataclass
class BeautifyService:
    client: LlmClient
    app_cfg: "AppConfig | None" = None

    def _require_cfg(self) -> "AppConfig":
        if self.app_cfg is None:
            raise ConfigurationError("BeautifyService requires app_cfg for request configuration.")
        return self.app_cfg

    def beautify(self, source_text: str) -> BeautifyResult:
        """
        One round trip to the generation service.

        Raises TransportError when the service cannot be reached and
        ResponseFormatError when its reply does not parse.
        """
        req = resolve_request_config("beautify", self._require_cfg())
        logger.debug("LLM beautify request: %s (source length %d)", req, len(source_text or ""))
        result = beautify_source(
            self.client,
            source_text,
            max_tokens=req.max_tokens,
            temperature=req.temperature,
        )
        logger.info(
            "Beautify reply: %d formatted lines, %d changes",
            result.formatted_text.count("\n") + 1 if result.formatted_text else 0,
            len(result.changes),
        )
        return result
