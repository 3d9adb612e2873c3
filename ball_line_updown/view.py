"""BallLineUpDownView - Renders the chain and turns taps into animations."""

import logging
from typing import Callable, List, Optional

from .canvas import Canvas, Paint
from .config import ViewConfig
from .driver import AnimationDriver
from .sequencer import Sequencer, TickResult

logger = logging.getLogger(__name__)


class BallLineUpDownView:
    """
    Controller for the ball-line chain.

    The host calls render() once per frame and handle_tap() on any pointer
    down. Each tap animates exactly one node; the driver stops when that
    node settles and the next tap continues the sweep.
    """

    def __init__(self, config: Optional[ViewConfig] = None, request_redraw: Optional[Callable[[float], None]] = None):
        """
        Initialize view.

        Args:
            config: Visual and timing constants (defaults to ViewConfig())
            request_redraw: Host hook taking a delay in seconds
        """
        self.config = config or ViewConfig()
        self.sequencer = Sequencer(self.config)
        self.driver = AnimationDriver(request_redraw, self.config.frame_delay)
        self.paint = Paint()

        self._on_node_settled_callbacks: List[Callable[[int, float], None]] = []

    def attach(self, request_redraw: Callable[[float], None]):
        """Connect the view to the host's redraw request primitive."""
        self.driver.request_redraw = request_redraw

    def on_node_settled(self, callback: Callable[[int, float], None]):
        """Register callback(index, committed_scale) for finished node animations."""
        self._on_node_settled_callbacks.append(callback)

    @property
    def animating(self) -> bool:
        return self.driver.running

    def render(self, canvas: Canvas):
        """Draw the whole chain, then advance the active node by one tick."""
        canvas.clear(self.config.back_rgb)
        self.sequencer.draw(canvas, self.paint)
        self.driver.animate(self._tick)

    def handle_tap(self):
        """Arm the active node and start the driver. Ignored mid-animation."""
        if not self.sequencer.start_updating(self.driver.start):
            logger.debug("Tap ignored, node already animating")

    def _tick(self):
        result: TickResult = self.sequencer.update()
        if not result.settled:
            return

        self.driver.stop()
        logger.info(f"Node {result.index} settled at {result.committed_scale}")
        for callback in self._on_node_settled_callbacks:
            callback(result.index, result.committed_scale)
