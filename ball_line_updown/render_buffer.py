"""RenderBuffer - Fixed-size RGBA pixel buffer with shape rasterisation."""

import numpy as np
from typing import Tuple


class RenderBuffer:
    """Fixed-size RGBA pixel buffer using numpy."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        # Shape: (height, width, 4), RGBA, uint8
        self.data = np.zeros((height, width, 4), dtype=np.uint8)
        self.data[:, :, 3] = 255

        # Pixel-centre coordinate grids, reused by every shape mask
        self._ys, self._xs = np.mgrid[0:height, 0:width].astype(float) + 0.5

    def set_pixel(self, x: int, y: int, color: Tuple[int, int, int] | Tuple[int, int, int, int]):
        """Set pixel at (x, y) to color (r, g, b) or (r, g, b, a)."""
        if 0 <= x < self.width and 0 <= y < self.height:
            if len(color) == 3:
                self.data[y, x, :3] = color
            else:
                self.data[y, x] = color

    def get_pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """Get pixel color at (x, y) as (r, g, b, a)."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return tuple(int(c) for c in self.data[y, x])
        return (0, 0, 0, 0)

    def clear(self, color: Tuple[int, int, int] | Tuple[int, int, int, int] = (0, 0, 0, 0)):
        """Clear buffer to color (r, g, b) or (r, g, b, a). Default is transparent black."""
        if len(color) == 3:
            self.data[:, :, :3] = color
            self.data[:, :, 3] = 255
        else:
            self.data[:, :] = color

    def fill_circle(self, cx: float, cy: float, radius: float, color: Tuple[int, int, int]):
        """Fill every pixel whose centre lies within radius of (cx, cy)."""
        mask = (self._xs - cx) ** 2 + (self._ys - cy) ** 2 <= radius * radius
        self._paint(mask, color)

    def stroke_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        width: float,
        color: Tuple[int, int, int],
        round_cap: bool = True,
    ):
        """
        Stroke the segment (x1, y1)-(x2, y2) with the given width.

        With round caps the stroke is the set of pixels within width/2 of the
        segment; with butt caps the projection is not extended past the ends.
        A zero-length segment only draws when round_cap is set (a dot).
        """
        half = max(width, 1.0) / 2
        dx = x2 - x1
        dy = y2 - y1
        length_sq = dx * dx + dy * dy

        px = self._xs - x1
        py = self._ys - y1
        if length_sq == 0:
            if not round_cap:
                return
            mask = px * px + py * py <= half * half
            self._paint(mask, color)
            return

        t = (px * dx + py * dy) / length_sq
        if round_cap:
            t = np.clip(t, 0.0, 1.0)
            inside = np.ones_like(t, dtype=bool)
        else:
            inside = (t >= 0.0) & (t <= 1.0)
        dist_x = px - t * dx
        dist_y = py - t * dy
        mask = inside & (dist_x * dist_x + dist_y * dist_y <= half * half)
        self._paint(mask, color)

    def _paint(self, mask: np.ndarray, color: Tuple[int, int, int]):
        self.data[mask, :3] = color[:3]
        self.data[mask, 3] = 255

    def count_color(self, color: Tuple[int, int, int]) -> int:
        """Number of pixels whose RGB equals color."""
        return int(np.all(self.data[:, :, :3] == color[:3], axis=-1).sum())

    def copy(self) -> 'RenderBuffer':
        """Create a copy of this buffer."""
        new_buffer = RenderBuffer(self.width, self.height)
        new_buffer.data = self.data.copy()
        return new_buffer
