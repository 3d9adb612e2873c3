"""Progress arithmetic shared by node drawing and animation stepping."""

import math

SCALE_GAP = 0.05
SCALE_DIV = 0.51


def inverse(n: int) -> float:
    return 1.0 / n


def max_scale(scale: float, i: int, n: int) -> float:
    """Progress past the start of the i-th of n sub-intervals, floored at 0."""
    return max(0.0, scale - i * inverse(n))


def divide_scale(scale: float, i: int, n: int) -> float:
    """
    Split one progress value into n equal sub-intervals.

    Returns the progress inside sub-interval i, re-normalised to [0, 1]:
    0 before the interval starts, 1 once it is passed.
    """
    return min(inverse(n), max_scale(scale, i, n)) * n


def scale_factor(scale: float, div: float = SCALE_DIV) -> float:
    """0 below the threshold, 1 from the threshold up (for scale in [0, 1])."""
    return float(math.floor(scale / div))


def mirror_value(scale: float, a: int, b: int, div: float = SCALE_DIV) -> float:
    """Blend 1/a and 1/b, picking the endpoint by scale_factor."""
    k = scale_factor(scale, div)
    return (1 - k) * inverse(a) + k * inverse(b)


def update_value(
    scale: float,
    direction: float,
    a: int,
    b: int,
    gap: float = SCALE_GAP,
    div: float = SCALE_DIV,
) -> float:
    """Signed progress increment for one tick."""
    return mirror_value(scale, a, b, div) * direction * gap
