from __future__ import annotations

from typing import Protocol, Optional


class LlmClient(Protocol):
    def json_schema_chat(
        self,
        system: str,
        user: str,
        max_tokens: int,
        schema: dict,
        temperature: Optional[float] = None,
    ) -> str:
        """Return the raw reply text. Raises TransportError on communication failure."""
        ...
