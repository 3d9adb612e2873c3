"""ViewConfig - Immutable visual and timing constants for the ball-line view."""

from dataclasses import dataclass
from typing import Tuple


def parse_color(value: str) -> Tuple[int, int, int]:
    """
    Parse '#RRGGBB' or '#AARRGGBB' into an (r, g, b) tuple.

    The alpha byte of the 8-digit form is accepted and dropped.
    """
    if not isinstance(value, str) or not value.startswith("#"):
        raise ValueError(f"Unknown color: {value!r}")

    digits = value[1:]
    if len(digits) == 8:
        digits = digits[2:]
    if len(digits) != 6:
        raise ValueError(f"Unknown color: {value!r}")

    try:
        rgb = int(digits, 16)
    except ValueError:
        raise ValueError(f"Unknown color: {value!r}") from None

    return ((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF)


@dataclass(frozen=True)
class ViewConfig:
    """
    Configuration for BallLineUpDownView.

    Args:
        nodes: Number of nodes in the vertical chain
        lines: Balls drawn per node
        scale_gap: Base per-tick progress step
        scale_div: Threshold where the step switches from 1/lines to 1
        size_factor: Node size is (height / (nodes + 1)) / size_factor
        stroke_factor: Stroke width is min(width, height) / stroke_factor
        r_factor: Ball radius is node size / r_factor
        fore_color: Foreground color as '#RRGGBB'
        back_color: Background color as '#RRGGBB'
        frame_delay: Seconds between animation ticks
    """

    nodes: int = 5
    lines: int = 3
    scale_gap: float = 0.05
    scale_div: float = 0.51
    size_factor: float = 2.9
    stroke_factor: float = 90
    r_factor: float = 4.0
    fore_color: str = "#0D47A1"
    back_color: str = "#BDBDBD"
    frame_delay: float = 0.05

    def __post_init__(self):
        if self.nodes < 1:
            raise ValueError(f"nodes must be >= 1, got {self.nodes}")
        if self.lines < 1:
            raise ValueError(f"lines must be >= 1, got {self.lines}")
        for name in ("scale_gap", "scale_div", "size_factor", "stroke_factor", "r_factor", "frame_delay"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        parse_color(self.fore_color)
        parse_color(self.back_color)

    @property
    def fore_rgb(self) -> Tuple[int, int, int]:
        return parse_color(self.fore_color)

    @property
    def back_rgb(self) -> Tuple[int, int, int]:
        return parse_color(self.back_color)
