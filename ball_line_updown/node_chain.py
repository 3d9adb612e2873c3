"""NodeChain - Fixed-length sequence of animatable nodes."""

import logging
from typing import Callable, List, Optional, Tuple

from .config import ViewConfig
from .geometry import draw_node
from .state import AnimationState

logger = logging.getLogger(__name__)


class ChainNode:
    """
    One node of the chain: its index and its AnimationState.

    Neighbors are looked up through the owning chain by index, so nodes
    hold no references to each other.
    """

    def __init__(self, index: int, chain: "NodeChain"):
        self.index = index
        self._chain = chain
        config = chain.config
        self.state = AnimationState(lines=config.lines, gap=config.scale_gap, div=config.scale_div)

    @property
    def next(self) -> Optional["ChainNode"]:
        return self._chain.node_at(self.index + 1)

    @property
    def prev(self) -> Optional["ChainNode"]:
        return self._chain.node_at(self.index - 1)

    def draw(self, canvas, paint):
        """Draw this node, then every node after it."""
        draw_node(canvas, self.index, self.state.scale, paint, self._chain.config)
        if self.next is not None:
            self.next.draw(canvas, paint)

    def get_neighbor(
        self, direction: int, on_missing: Optional[Callable[[], None]] = None
    ) -> Tuple["ChainNode", bool]:
        """
        Neighbor in direction (-1 = prev, anything else = next).

        Returns (node, hit_boundary). At either end of the chain the node
        itself comes back with hit_boundary=True and on_missing is called.
        """
        neighbor = self.prev if direction == -1 else self.next
        if neighbor is not None:
            return neighbor, False

        if on_missing is not None:
            on_missing()
        return self, True

    def __repr__(self):
        return f"ChainNode(index={self.index}, state={self.state!r})"


class NodeChain:
    """Owns exactly config.nodes ChainNodes with contiguous indices from 0."""

    def __init__(self, config: Optional[ViewConfig] = None):
        self.config = config or ViewConfig()
        self._nodes: List[ChainNode] = []
        for i in range(self.config.nodes):
            self._nodes.append(ChainNode(i, self))
        logger.debug(f"Built chain of {len(self._nodes)} nodes")

    @property
    def head(self) -> ChainNode:
        return self._nodes[0]

    def node_at(self, index: int) -> Optional[ChainNode]:
        if 0 <= index < len(self._nodes):
            return self._nodes[index]
        return None

    def draw(self, canvas, paint):
        self.head.draw(canvas, paint)

    def __len__(self):
        return len(self._nodes)

    def __iter__(self):
        return iter(self._nodes)
