from __future__ import annotations
from dataclasses import dataclass

from interfaces.errors import ConfigurationError

CORRECTION_COLORS: tuple[str, ...] = (
    "#F98080",  # red
    "#F0B05D",  # orange
    "#F6E05E",  # yellow
    "#81E6D9",  # teal
    "#76A9FA",  # blue
    "#B794F4",  # purple
    "#FBB6CE",  # pink
)

@dataclass(frozen=True, slots=True)
class RenderConfig:
    """
    Display settings for the composed output.

    `background_alpha` is a two-digit hex alpha appended to each palette color
    for the translucent line tint ("20" is roughly 12%).
    """
    palette: tuple[str, ...] = CORRECTION_COLORS
    language: str = "python"
    background_alpha: str = "20"
    border_width_px: int = 2

    def validate(self) -> None:
        if not self.palette:
            raise ConfigurationError("RenderConfig.palette must contain at least one color.")
        for color in self.palette:
            if not isinstance(color, str) or not color.startswith("#") or len(color) != 7:
                raise ConfigurationError(f"RenderConfig.palette entries must be #RRGGBB strings, got {color!r}.")
        if len(self.background_alpha) != 2:
            raise ConfigurationError("RenderConfig.background_alpha must be two hex digits.")
        try:
            int(self.background_alpha, 16)
        except ValueError as e:
            raise ConfigurationError("RenderConfig.background_alpha must be two hex digits.") from e
        if not isinstance(self.border_width_px, int) or self.border_width_px <= 0:
            raise ConfigurationError("RenderConfig.border_width_px must be a positive integer.")
        if not self.language.strip():
            raise ConfigurationError("RenderConfig.language must be a non-empty string.")

    @staticmethod
    def from_strings(
        palette: str | None = None,
        language: str = "python",
        background_alpha: str = "20",
    ) -> "RenderConfig":
        """
        `palette` is a comma separated list of #RRGGBB colors; None keeps the default.
        """
        colors = CORRECTION_COLORS
        if palette is not None:
            colors = tuple(c.strip() for c in palette.split(",") if c.strip())
        cfg = RenderConfig(palette=colors, language=language.strip(), background_alpha=background_alpha.strip())
        cfg.validate()
        return cfg
