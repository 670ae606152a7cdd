from __future__ import annotations

# Standard library imports
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING
import logging
import time

# Interfaces and protocols
from interfaces.config.app_config import AppConfigShape
from interfaces.html.output import PageOutput
from interfaces.pipeline.pipeline import Pipeline

from app.session import ViewState

if TYPE_CHECKING:
    from app.session import BeautifySession

logger = logging.getLogger(__name__)

@dataclass
class BeautifyPipeline(Pipeline):
    """
    End to end beautify pipeline for a single source file
    Responsibilities:
    - Read the source text
    - Run one beautify request through the session
    - Compose highlighted lines from the current result
    - Write the HTML page
    """

    # Injected dependencies
    session: "BeautifySession"
    page_out: PageOutput

    def run_on_text(self, name: str, source_text: str, cfg: AppConfigShape) -> "ViewState":
        start_time = time.perf_counter()
        try:
            if not source_text.strip():
                logger.info("Skipping %s: source is blank", name)
                return ViewState(source_text=source_text)

            state = self.session.submit(source_text)
            lines = self.session.compose()

            output_path = cfg.paths.output_page_folder / f"{Path(name).stem}.html"
            self.page_out.write_page(output_path=output_path, title=name, state=state, lines=lines)
            return state
        finally:
            elapsed_s = time.perf_counter() - start_time
            logger.info("Pipeline elapsed for %s: %.3fs", name, elapsed_s)

    def run_on_file(self, source_path: Path, cfg: AppConfigShape) -> "ViewState":
        """
        Run the full beautify pipeline on a single source file.
        """
        logger.info("Loading source from %s", source_path)
        try:
            source_text = source_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            logger.error("Cannot read %s as UTF-8: %s", source_path, exc)
            return ViewState(error=f"Could not read {source_path.name} as UTF-8 text.")
        return self.run_on_text(source_path.name, source_text, cfg)
