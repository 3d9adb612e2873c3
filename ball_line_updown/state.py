"""AnimationState - Progress, direction and committed value of one node."""

import logging
from typing import Callable, Optional

from .scale_math import SCALE_DIV, SCALE_GAP, update_value

logger = logging.getLogger(__name__)


class AnimationState:
    """
    Mutable progress tracker for a single node.

    direction is 0 while idle, +1 while opening and -1 while closing.
    committed_scale is the value the last completed animation settled on
    (0 or 1); a running animation ends once scale has moved a full unit
    away from it.
    """

    def __init__(self, lines: int = 3, gap: float = SCALE_GAP, div: float = SCALE_DIV):
        self.lines = lines
        self.gap = gap
        self.div = div

        self.scale = 0.0
        self.direction = 0.0
        self.committed_scale = 0.0

    @property
    def animating(self) -> bool:
        return self.direction != 0

    def update(self, on_boundary: Optional[Callable[[float], None]] = None) -> Optional[float]:
        """
        Advance progress by one tick.

        Returns the new committed scale when this tick crossed a full unit,
        None otherwise. Ticking an idle state adds zero.
        """
        self.scale += update_value(self.scale, self.direction, self.lines, 1, self.gap, self.div)
        if abs(self.scale - self.committed_scale) <= 1:
            return None

        self.scale = self.committed_scale + self.direction
        self.direction = 0.0
        self.committed_scale = self.scale
        logger.debug(f"State settled at {self.committed_scale}")

        if on_boundary is not None:
            on_boundary(self.committed_scale)
        return self.committed_scale

    def start_updating(self, on_armed: Optional[Callable[[], None]] = None) -> bool:
        """
        Arm the state towards the opposite end. No-op while already animating.

        Returns True if the state was armed.
        """
        if self.direction != 0:
            return False

        self.direction = 1 - 2 * self.committed_scale
        if on_armed is not None:
            on_armed()
        return True

    def __repr__(self):
        return (
            f"AnimationState(scale={self.scale:.3f}, direction={self.direction}, "
            f"committed_scale={self.committed_scale})"
        )
