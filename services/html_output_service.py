from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING
import html
import logging

from pygments.formatters import HtmlFormatter

if TYPE_CHECKING:
    from app.session import ViewState
    from text.compose import ComposedLine

logger = logging.getLogger(__name__)

NEUTRAL_BADGE_COLOR = "#1A202C"
PLACEHOLDER = "Formatted code and analysis will appear here..."
PEP8_URL = "https://peps.python.org/pep-0008/"
CODE_FONT = '"Fira Code", "Menlo", "Monaco", "Courier New", monospace'

PAGE_CSS = """
body { margin: 0; background: #000; color: #e2e8f0; font-family: system-ui, sans-serif; }
header { text-align: center; padding: 1.5rem 1rem 0.5rem; }
header h1 { font-size: 2.75rem; margin: 0; color: #5eead4; }
header p { margin: 0.4rem 0 0; color: #a0aec0; }
header p.sub { font-size: 0.85rem; color: #718096; }
header a { color: #22d3ee; }
main { display: grid; grid-template-columns: 1fr 1fr; gap: 2rem; padding: 1.5rem 2rem; }
section { border: 1px solid rgba(6, 182, 212, 0.2); border-radius: 8px; overflow: auto; }
section h2 { margin: 0; padding: 0.75rem; font-size: 1.1rem; color: #67e8f9; border-bottom: 1px solid rgba(6, 182, 212, 0.2); }
pre { margin: 0; padding: 1rem; font-size: 14px; }
pre code > span { display: block; }
.placeholder { padding: 1rem; color: #718096; }
.error { padding: 1rem; color: #f87171; text-align: center; }
.analysis { padding: 1rem; border-top: 1px solid rgba(20, 184, 166, 0.2); }
.analysis h3 { margin: 0 0 0.75rem; color: #5eead4; }
.analysis ul { list-style: none; margin: 0; padding: 0; font-size: 0.9rem; }
.analysis li { display: flex; align-items: flex-start; margin-bottom: 0.75rem; }
.badge { flex-shrink: 0; width: 1.5rem; height: 1.5rem; margin-right: 0.75rem; border-radius: 9999px;
         display: flex; align-items: center; justify-content: center; color: #fff; font-size: 0.75rem; font-weight: bold; }
"""


@dataclass(frozen=True, slots=True)
class HtmlOutputService:
    """
    Writes the two-pane page for one beautify run.

    Left pane: the submitted source. Right pane: the formatted code with
    highlighted lines, followed by the corrections list, or the error message.
    """
    pygments_style: str = "monokai"

    def _pre(self, body: str) -> str:
        return f'<pre style=\'font-family: {CODE_FONT};\'><code class="language-python highlight">{body}</code></pre>'

    def _source_pane(self, state: "ViewState") -> str:
        return self._pre(html.escape(state.source_text))

    def _code_lines(self, lines: list["ComposedLine"]) -> str:
        parts = []
        for line in lines:
            if line.highlighted:
                parts.append(f'<span class="code-line-highlight" style="{html.escape(line.style_attr())}">{line.markup}</span>')
            else:
                parts.append(f"<span>{line.markup}</span>")
        return self._pre("".join(parts))

    def _analysis(self, state: "ViewState") -> str:
        if state.result is None or not state.result.changes:
            return ""
        items = []
        for change in state.result.changes:
            color = state.colors.get(change.line_number) or NEUTRAL_BADGE_COLOR
            items.append(
                "<li>"
                f'<span class="badge" style="background-color: {color}">{change.line_number}</span>'
                f"<span>{html.escape(change.explanation)}</span>"
                "</li>"
            )
        return (
            '<div class="analysis"><h3>Corrections Analysis</h3>'
            f"<ul>{''.join(items)}</ul></div>"
        )

    def _output_pane(self, state: "ViewState", lines: list["ComposedLine"]) -> str:
        if state.error is not None:
            return f'<p class="error">{html.escape(state.error)}</p>'
        if state.result is None:
            return f'<div class="placeholder">{PLACEHOLDER}</div>'
        if not state.result.formatted_text:
            return f'<div class="placeholder">{PLACEHOLDER}</div>' + self._analysis(state)
        return self._code_lines(lines) + self._analysis(state)

    def render_page(self, *, title: str, state: "ViewState", lines: list["ComposedLine"]) -> str:
        token_css = HtmlFormatter(style=self.pygments_style).get_style_defs(".highlight")
        return (
            "<!DOCTYPE html>\n"
            '<html lang="en">\n<head>\n<meta charset="utf-8">\n'
            f"<title>PyClean - {html.escape(title)}</title>\n"
            f"<style>{PAGE_CSS}\n{token_css}</style>\n"
            "</head>\n<body>\n"
            "<header><h1>PyClean</h1>"
            "<p>AI-Powered Python Code Beautifier</p>"
            f'<p class="sub">Formatting according to <a href="{PEP8_URL}">PEP 8 standards</a></p>'
            "</header>\n<main>\n"
            f"<section><h2>Messy Code</h2>{self._source_pane(state)}</section>\n"
            f"<section><h2>Clean Code &amp; Analysis</h2>{self._output_pane(state, lines)}</section>\n"
            "</main>\n</body>\n</html>\n"
        )

    def write_page(
        self,
        *,
        output_path: Path,
        title: str,
        state: "ViewState",
        lines: list["ComposedLine"],
    ) -> None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_page(title=title, state=state, lines=lines), encoding="utf-8")
        logger.info("Wrote page %s", output_path)
