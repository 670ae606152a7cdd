from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

from interfaces.errors import ConfigurationError

@dataclass(frozen=True, slots=True)
class PathsConfig:
    """
    File system locations used by the app

    All paths are stored as Path objects and normalized (expanded + resolved).
    Output directories can be created with `ensure_output_dirs()`
    """
    input_source_folder: Path
    output_page_folder: Path

    def list_input_sources(self) -> list[Path]:
        return sorted(self.input_source_folder.glob("*.py"))

    @staticmethod
    def from_strings(
        input_source_folder: str | Path,
        output_page_folder: str | Path,
    ) -> "PathsConfig":
        """
        Convenience constructor for CLI/env usage.
        """
        return PathsConfig(
            input_source_folder=PathsConfig._norm(input_source_folder),
            output_page_folder=PathsConfig._norm(output_page_folder),
        )

    def ensure_input_dir(self) -> None:
        self.input_source_folder.mkdir(parents=True, exist_ok=True)

    def ensure_output_dirs(self) -> None:
        """
        Create output directories if they don't exist.
        """
        self.output_page_folder.mkdir(parents=True, exist_ok=True)

    def validate(self) -> None:
        """
        Validate that the input folder, if present, is a directory.
        Raises ConfigurationError with a helpful message if something is wrong
        """
        if self.input_source_folder.exists() and not self.input_source_folder.is_dir():
            raise ConfigurationError(f"Input path is not a directory: {self.input_source_folder}")

        # Outputs can be created; but if they exist and aren't dirs, that's an error
        if self.output_page_folder.exists() and not self.output_page_folder.is_dir():
            raise ConfigurationError(f"output_page_folder exists but is not a directory: {self.output_page_folder}")

    @staticmethod
    def _norm(p: str | Path) -> Path:
        """
        Normalize a path: expand ~ and resolve to an absolute path.
        """
        return Path(p).expanduser().resolve()
