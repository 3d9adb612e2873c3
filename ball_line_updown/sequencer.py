"""Sequencer - Walks the chain one node at a time in a ping-pong sweep."""

import logging
from dataclasses import dataclass
from typing import Callable, ClassVar, Optional

from .config import ViewConfig
from .node_chain import ChainNode, NodeChain

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickResult:
    """Outcome of one Sequencer tick: still running, or a node settled."""

    settled: bool
    index: Optional[int] = None
    committed_scale: Optional[float] = None

    CONTINUE: ClassVar["TickResult"]

    @classmethod
    def settle(cls, index: int, committed_scale: float) -> "TickResult":
        return cls(True, index, committed_scale)


TickResult.CONTINUE = TickResult(False)


class Sequencer:
    """
    Tracks the active node and the sweep direction.

    When the active node settles the sequencer moves to its neighbor in the
    current direction. At either end of the chain there is no neighbor: the
    direction flips and the same node stays active, so the next tap plays
    it back the other way.
    """

    def __init__(self, config: Optional[ViewConfig] = None):
        self.chain = NodeChain(config)
        self.active: ChainNode = self.chain.head
        self.direction = 1

    def update(self, on_node_settled: Optional[Callable[[int, float], None]] = None) -> TickResult:
        """Tick the active node; move along the chain if it settled."""
        node = self.active
        committed = node.state.update()
        if committed is None:
            return TickResult.CONTINUE

        self.active, hit_boundary = node.get_neighbor(self.direction)
        if hit_boundary:
            self.direction *= -1
            logger.debug(f"Reached end of chain at node {node.index}, direction now {self.direction}")

        logger.debug(f"Node {node.index} settled at {committed}, active node now {self.active.index}")
        if on_node_settled is not None:
            on_node_settled(node.index, committed)
        return TickResult.settle(node.index, committed)

    def start_updating(self, on_armed: Optional[Callable[[], None]] = None) -> bool:
        return self.active.state.start_updating(on_armed)

    def draw(self, canvas, paint):
        self.chain.draw(canvas, paint)
