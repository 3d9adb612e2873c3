"""Orchestrator - Host frame loop: redraw scheduling, taps and display."""

import asyncio
import logging
import queue
import time
from typing import Callable, Optional

from .canvas import Canvas
from .render_buffer import RenderBuffer
from .view import BallLineUpDownView

logger = logging.getLogger(__name__)


class Orchestrator:
    """
    Drives a BallLineUpDownView the way a UI toolkit drives a view.

    Frames are only drawn when one has been requested through invalidate();
    the loop polls at fps and otherwise sleeps. tap() may be called from any
    thread; taps are handed to the view on the loop thread.
    """

    def __init__(
        self,
        view: BallLineUpDownView,
        width: int,
        height: int,
        fps: int = 30,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize orchestrator.

        Args:
            view: View to drive
            width: Canvas width in pixels
            height: Canvas height in pixels
            fps: Polling rate of the loop
            clock: Monotonic time source in seconds
        """
        self.view = view
        self.width = width
        self.height = height
        self.fps = fps
        self.frame_duration = 1.0 / fps
        self.clock = clock

        self.buffer = RenderBuffer(width, height)
        self.canvas = Canvas(self.buffer)
        self.frames_drawn = 0
        self.running = False

        self._taps: "queue.SimpleQueue[None]" = queue.SimpleQueue()
        self._display_callback: Optional[Callable[[RenderBuffer], None]] = None

        # The first frame is drawn as soon as the view is attached
        self._next_frame_at: Optional[float] = clock()
        view.attach(self.invalidate)

    def set_display_callback(self, callback: Callable[[RenderBuffer], None]):
        """Set function that receives each rendered buffer."""
        self._display_callback = callback

    def invalidate(self, delay: float = 0.0):
        """Request a frame delay seconds from now. Earlier requests win."""
        due = self.clock() + delay
        if self._next_frame_at is None or due < self._next_frame_at:
            self._next_frame_at = due

    @property
    def frame_pending(self) -> bool:
        return self._next_frame_at is not None

    def tap(self):
        """Queue a tap for the next pump()."""
        self._taps.put(None)

    def pump(self, now: Optional[float] = None) -> bool:
        """
        Deliver queued taps, then draw a frame if one is due.

        Returns:
            True if a frame was drawn
        """
        while True:
            try:
                self._taps.get_nowait()
            except queue.Empty:
                break
            self.view.handle_tap()

        if now is None:
            now = self.clock()
        if self._next_frame_at is None or now < self._next_frame_at:
            return False

        self._next_frame_at = None
        self.render_single_frame()
        return True

    def render_single_frame(self) -> RenderBuffer:
        """Render the view once and push it to the display callback."""
        self.view.render(self.canvas)
        self.frames_drawn += 1
        if self._display_callback:
            self._display_callback(self.buffer)
        return self.buffer

    async def start_async(self, duration: Optional[float] = None):
        """
        Run the loop until stop() is called or duration seconds pass.

        Usage:
            asyncio.run(orchestrator.start_async())
        """
        self.running = True
        start_time = self.clock()
        logger.info(f"Frame loop started at {self.fps} fps")

        try:
            while self.running:
                self.pump()

                if duration and self.clock() - start_time >= duration:
                    break

                await asyncio.sleep(self.frame_duration)

        except asyncio.CancelledError:
            pass
        finally:
            self.running = False
            logger.info(f"Frame loop stopped after {self.frames_drawn} frames")

    def start(self, duration: Optional[float] = None):
        """Blocking wrapper around start_async()."""
        asyncio.run(self.start_async(duration))

    def stop(self):
        self.running = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.stop()
        return False
