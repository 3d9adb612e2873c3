"""AnimationDriver - Idle/running switch that turns frames into ticks."""

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class AnimationDriver:
    """
    Advances animation once per drawn frame while running.

    The driver never waits itself: after every tick it asks the host to
    redraw again after frame_delay seconds, and the host's frame timer
    calls back into render, which calls animate().
    """

    def __init__(self, request_redraw: Optional[Callable[[float], None]] = None, frame_delay: float = 0.05):
        """
        Initialize driver.

        Args:
            request_redraw: Host hook taking a delay in seconds
            frame_delay: Delay between ticks in seconds
        """
        self.request_redraw = request_redraw
        self.frame_delay = frame_delay
        self.running = False

    def start(self):
        """Switch to running and request an immediate redraw."""
        if self.running:
            return

        self.running = True
        logger.debug("Driver started")
        self._request(0.0)

    def stop(self):
        """Switch back to idle."""
        if not self.running:
            return

        self.running = False
        logger.debug("Driver stopped")

    def animate(self, on_tick: Callable[[], None]) -> bool:
        """
        Run one tick if running, then schedule the next frame.

        A tick that raises is logged and the next frame is still scheduled,
        so one bad frame cannot stall the loop.

        Returns:
            True if a tick was attempted
        """
        if not self.running:
            return False

        try:
            on_tick()
        except Exception:
            logger.exception("Animation tick failed")
        finally:
            self._request(self.frame_delay)
        return True

    def _request(self, delay: float):
        if self.request_redraw is not None:
            self.request_redraw(delay)
