"""Node geometry: a run of balls on lines that fold open and rotate."""

import math

from .config import ViewConfig
from .scale_math import divide_scale


def draw_ball_line_up(canvas, x: float, y: float, x1: float, y1: float, size: float, paint, r_factor: float = 4.0):
    """Ball at (x, y) with a line back to (x1, y1)."""
    r = size / r_factor
    canvas.draw_circle(x, y, r, paint)
    canvas.draw_line(x1, y1, x, y, paint)


def draw_balls_line_up(canvas, sc: float, size: float, paint, lines: int = 3, r_factor: float = 4.0):
    """
    Draw lines balls in a zig-zag, ball j moving as progress sub-interval j runs.

    Each ball starts where the previous one ended: (x1, y1) only advances
    once a ball's sub-interval is complete (floor(scj) == 1).
    """
    gap = (2 * size) / lines
    x1 = -size
    y1 = -size
    for j in range(lines):
        scj = divide_scale(sc, j, lines)
        dy = 2 * size * (1 - 2 * j)
        x = x1 + gap * scj
        y = y1 + dy * scj
        done = math.floor(scj)
        x1 += gap * done
        y1 += dy * done
        draw_ball_line_up(canvas, x, y, x1, y1, size, paint, r_factor)


def draw_node(canvas, i: int, scale: float, paint, config: ViewConfig):
    """Draw node i of the chain at the given progress."""
    w = canvas.width
    h = canvas.height
    gap = h / (config.nodes + 1)
    size = gap / config.size_factor
    sc1 = divide_scale(scale, 0, 2)
    sc2 = divide_scale(scale, 1, 2)

    paint.color = config.fore_rgb
    paint.round_cap = True
    paint.stroke_width = min(w, h) / config.stroke_factor

    canvas.save()
    canvas.translate(w / 2, gap * (i + 1))
    canvas.rotate(90 * sc2)
    draw_balls_line_up(canvas, sc1, size, paint, config.lines, config.r_factor)
    canvas.restore()
