"""Terminal display target: draws frames with ANSI true-color blocks."""

import sys
import logging
from collections import deque
from typing import List, TextIO

from .display_target import DisplayTarget
from .render_buffer import RenderBuffer


class LogCapture(logging.Handler):
    """Logging handler that keeps the last N formatted records."""

    def __init__(self, maxlen=6):
        super().__init__()
        self.log_lines = deque(maxlen=maxlen)
        self.formatter = logging.Formatter('%(asctime)s.%(msecs)03d - %(name)s - %(message)s', datefmt='%H:%M:%S')

    def emit(self, record):
        try:
            self.log_lines.append(self.format(record))
        except Exception:
            self.handleError(record)


class TerminalDisplayTarget(DisplayTarget):
    """
    Shows frames in the terminal using the alternate screen buffer.

    Each frame is assembled into one string and written in a single call.
    """

    def __init__(
        self,
        width: int,
        height: int,
        use_half_blocks: bool = True,
        square_pixels: bool = True,
        show_logs: bool = False,
        log_lines: int = 6,
        stream: TextIO = None,
    ):
        """
        Initialize terminal display target.

        Args:
            width: Display width in pixels
            height: Display height in pixels
            use_half_blocks: Pack two pixel rows per text row using '▀'
            square_pixels: Use two characters per pixel column (full-block mode only)
            show_logs: Print recent log records under the image
            log_lines: Number of log records to keep
            stream: Output stream (defaults to sys.stdout)
        """
        self.width = width
        self.height = height
        self.use_half_blocks = use_half_blocks
        self.square_pixels = square_pixels
        self.show_logs = show_logs
        self.stream = stream or sys.stdout
        self._initialized = False

        self.log_capture = None
        if self.show_logs:
            self.log_capture = LogCapture(maxlen=log_lines)
            logging.getLogger().addHandler(self.log_capture)

    @property
    def size(self):
        return (self.width, self.height)

    def initialize(self):
        """Enter alternate screen, hide cursor, clear."""
        if self._initialized:
            return

        self.stream.write('\x1b[?1049h\x1b[?25l\x1b[2J')
        self.stream.flush()
        self._initialized = True

    def display(self, buffer: RenderBuffer):
        if not self._initialized:
            self.initialize()

        frame = ['\x1b[H']
        if self.use_half_blocks:
            self._render_half_blocks(buffer, frame)
        else:
            self._render_full_blocks(buffer, frame)

        if self.log_capture is not None:
            self._render_log_section(frame)

        self.stream.write(''.join(frame))
        self.stream.flush()

    def _render_full_blocks(self, buffer: RenderBuffer, frame: List[str]):
        cell = '  ' if self.square_pixels else ' '
        for y in range(min(self.height, buffer.height)):
            for x in range(min(self.width, buffer.width)):
                r, g, b, _ = buffer.get_pixel(x, y)
                frame.append(f'\x1b[48;2;{r};{g};{b}m{cell}')
            frame.append('\x1b[0m\n')

    def _render_half_blocks(self, buffer: RenderBuffer, frame: List[str]):
        height = min(self.height, buffer.height)
        for y in range(0, height, 2):
            for x in range(min(self.width, buffer.width)):
                r1, g1, b1, _ = buffer.get_pixel(x, y)
                if y + 1 < height:
                    r2, g2, b2, _ = buffer.get_pixel(x, y + 1)
                    frame.append(f'\x1b[38;2;{r1};{g1};{b1}m\x1b[48;2;{r2};{g2};{b2}m▀')
                else:
                    frame.append(f'\x1b[38;2;{r1};{g1};{b1}m▀')
            frame.append('\x1b[0m\n')

    def _render_log_section(self, frame: List[str]):
        columns = self.width if self.use_half_blocks or not self.square_pixels else self.width * 2
        frame.append('\x1b[0m\n')
        for line in self.log_capture.log_lines:
            frame.append(line[:columns].ljust(columns))
            frame.append('\n')

    def shutdown(self):
        """Show cursor and leave the alternate screen."""
        if not self._initialized:
            return

        if self.log_capture is not None:
            logging.getLogger().removeHandler(self.log_capture)

        self.stream.write('\x1b[?25h\x1b[?1049l')
        self.stream.flush()
        self._initialized = False
