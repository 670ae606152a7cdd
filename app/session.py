from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING
import logging

from config.render_config import RenderConfig
from interfaces.errors import ResponseFormatError, TransportError
from interfaces.llm.tasks import BeautifyResult, ColorAssignment
from interfaces.text.tokenizer import Tokenizer
from text.compose import ComposedLine, compose_lines
from text.highlight import assign_colors
from text.syntax import tokenize_lines

if TYPE_CHECKING:
    from services.beautify_service import BeautifyService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewState:
    """
    Everything the page shows for one request.

    Exactly one of `result` and `error` is set once a request has finished;
    both are None before the first request.
    """
    source_text: str = ""
    result: Optional[BeautifyResult] = None
    colors: ColorAssignment = field(default_factory=dict)
    error: Optional[str] = None


EMPTY_STATE = ViewState()


@dataclass
class BeautifySession:
    """
    Holds the most recent ViewState and replaces it wholesale per request.

    A reader sees either the previous state or the next one, never a mix.
    """
    service: "BeautifyService"
    render: RenderConfig = field(default_factory=RenderConfig)
    tokenizer: Tokenizer = tokenize_lines
    state: ViewState = EMPTY_STATE

    def submit(self, source_text: str) -> ViewState:
        if not (source_text or "").strip():
            raise ValueError("Nothing to beautify: source text is blank.")

        try:
            result = self.service.beautify(source_text)
        except (TransportError, ResponseFormatError) as exc:
            logger.error("Beautify request failed: %s: %s", type(exc).__name__, exc)
            self.state = ViewState(source_text=source_text, error=exc.user_message)
            return self.state

        colors = assign_colors(result.changes, self.render.palette)
        self.state = ViewState(source_text=source_text, result=result, colors=colors)
        return self.state

    def compose(self) -> list[ComposedLine]:
        state = self.state
        if state.result is None:
            return []
        display_lines = self.tokenizer(state.result.formatted_text, self.render.language)
        return compose_lines(
            display_lines,
            state.colors,
            alpha=self.render.background_alpha,
            border_width_px=self.render.border_width_px,
        )
