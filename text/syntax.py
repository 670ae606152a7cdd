from __future__ import annotations
import html
import logging

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

# nowrap: no <div>/<pre> wrapper, so the markup splits cleanly on newlines.
_FORMATTER = HtmlFormatter(nowrap=True)


def plain_lines(text: str) -> list[str]:
    return [html.escape(line) for line in text.split("\n")]


def tokenize_lines(text: str, language: str = "python") -> list[str]:
    """
    Syntax-highlighted markup for each line of `text`.

    Falls back to escaped, unstyled lines when no lexer exists for `language`
    or when highlighting fails. The two cases are logged separately; neither
    is raised to the caller.
    """
    if not text:
        return []
    # Pygments reads a lone \r as a line break; count lines the same way.
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    try:
        lexer = get_lexer_by_name(language, stripnl=False, ensurenl=False)
    except ClassNotFound:
        logger.info("No tokenizer for language %r; rendering plain text", language)
        return plain_lines(text)

    try:
        markup = highlight(text, lexer, _FORMATTER)
    except Exception:
        logger.warning("Tokenizer failed for %d chars of %s; rendering plain text", len(text), language, exc_info=True)
        return plain_lines(text)

    lines = markup.split("\n")
    expected = text.count("\n") + 1
    # Pygments may add or drop a trailing newline; keep line numbering aligned with the text.
    if len(lines) > expected:
        lines = lines[:expected]
    elif len(lines) < expected:
        lines.extend([""] * (expected - len(lines)))
    return lines
