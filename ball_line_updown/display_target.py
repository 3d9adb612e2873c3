"""DisplayTarget - Where rendered frames end up."""

from abc import ABC, abstractmethod
from typing import Tuple

from .render_buffer import RenderBuffer


class DisplayTarget(ABC):
    """Base class for frame sinks driven by the Orchestrator."""

    @property
    @abstractmethod
    def size(self) -> Tuple[int, int]:
        """Return (width, height) tuple."""
        pass

    def initialize(self):
        """Prepare the output device. Called before the first frame."""

    @abstractmethod
    def display(self, buffer: RenderBuffer):
        """Show one rendered frame."""
        pass

    def shutdown(self):
        """Release the output device."""

    def __enter__(self):
        self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()

    async def __aenter__(self):
        self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()
        return False
