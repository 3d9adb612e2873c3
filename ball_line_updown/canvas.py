"""Canvas - Transformable drawing surface over a RenderBuffer."""

import math
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .render_buffer import RenderBuffer


@dataclass
class Paint:
    """Stroke and fill settings shared by the draw calls of one frame."""

    color: Tuple[int, int, int] = (0, 0, 0)
    stroke_width: float = 1.0
    round_cap: bool = False


class Canvas:
    """
    Drawing surface with a save/restore transform stack.

    Coordinates are y-down; rotate() turns clockwise on screen. Only
    translation and rotation are supported, so radii and stroke widths
    pass through the transform unchanged.
    """

    def __init__(self, buffer: RenderBuffer):
        self.buffer = buffer
        self._matrix = np.identity(3)
        self._stack: List[np.ndarray] = []

    @property
    def width(self) -> int:
        return self.buffer.width

    @property
    def height(self) -> int:
        return self.buffer.height

    def clear(self, color: Tuple[int, int, int]):
        self.buffer.clear(color)

    def save(self):
        self._stack.append(self._matrix.copy())

    def restore(self):
        if not self._stack:
            raise RuntimeError("Canvas.restore() called without matching save()")
        self._matrix = self._stack.pop()

    def translate(self, dx: float, dy: float):
        self._matrix = self._matrix @ np.array([
            [1.0, 0.0, dx],
            [0.0, 1.0, dy],
            [0.0, 0.0, 1.0],
        ])

    def rotate(self, degrees: float):
        rad = math.radians(degrees)
        c = math.cos(rad)
        s = math.sin(rad)
        self._matrix = self._matrix @ np.array([
            [c, -s, 0.0],
            [s, c, 0.0],
            [0.0, 0.0, 1.0],
        ])

    def map_point(self, x: float, y: float) -> Tuple[float, float]:
        """Map a point from current local coordinates to buffer pixels."""
        px, py, _ = self._matrix @ np.array([x, y, 1.0])
        return float(px), float(py)

    def draw_circle(self, x: float, y: float, radius: float, paint: Paint):
        cx, cy = self.map_point(x, y)
        self.buffer.fill_circle(cx, cy, radius, paint.color)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, paint: Paint):
        ax, ay = self.map_point(x1, y1)
        bx, by = self.map_point(x2, y2)
        self.buffer.stroke_line(ax, ay, bx, by, paint.stroke_width, paint.color, paint.round_cap)
