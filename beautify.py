import logging
import os
import sys

from app.settings import build_settings
from app.container import build_container
from app.pipeline import BeautifyPipeline
from interfaces.errors import ConfigurationError
from text.samples import MESSY_CODE_SAMPLES

logger = logging.getLogger("pyclean")


def seed_samples(paths) -> int:
    """
    Write the built-in messy samples into an empty input folder.
    """
    paths.ensure_input_dir()
    input_folder = paths.input_source_folder
    for sample in MESSY_CODE_SAMPLES:
        (input_folder / sample.filename).write_text(sample.code + "\n", encoding="utf-8")
    return len(MESSY_CODE_SAMPLES)


def main() -> int:
    logging.basicConfig(
        level=os.getenv("PYCLEAN_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Build config (paths/gemini/render); missing credentials stop us here
    logger.info("Building the app settings")
    try:
        app_cfg = build_settings()
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        return 2

    logger.info("Backend: %s, model: %s", app_cfg.gemini.backend, app_cfg.gemini.model_name)
    logger.info("Input folder: %s", app_cfg.paths.input_source_folder)
    logger.info("Output folder: %s", app_cfg.paths.output_page_folder)

    app_cfg.paths.ensure_output_dirs()
    deps = build_container(app_cfg)

    # Inject the dependencies (Dependency injection)
    pipeline = BeautifyPipeline(
        session=deps["session"],
        page_out=deps["page_out"],
    )

    sources = app_cfg.paths.list_input_sources()
    if not sources:
        count = seed_samples(app_cfg.paths)
        logger.info("No sources found; wrote %d example files", count)
        sources = app_cfg.paths.list_input_sources()

    failures = 0
    for source_path in sources:
        state = pipeline.run_on_file(source_path, app_cfg)
        if state.error is not None:
            failures += 1
            logger.warning("%s: %s", source_path.name, state.error)

    logger.info("Done: %d files, %d failed", len(sources), failures)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
