#!/usr/bin/env python3
"""
Tests for NodeChain / ChainNode.

What matters:
1. Exactly N nodes with contiguous indices and consistent next/prev links
2. get_neighbor returns self and signals the boundary at both ends
3. draw() visits every node from the head
"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from ball_line_updown import Canvas, NodeChain, Paint, RenderBuffer, ViewConfig


class CountingCanvas(Canvas):
    def __init__(self, buffer):
        super().__init__(buffer)
        self.saves = 0

    def save(self):
        self.saves += 1
        super().save()


def test_chain_structure():
    chain = NodeChain()

    assert len(chain) == 5
    assert [node.index for node in chain] == [0, 1, 2, 3, 4]
    assert chain.head.index == 0
    assert chain.head.prev is None
    assert chain.node_at(4).next is None

    for node in list(chain)[:-1]:
        assert node.next.prev is node, f"Broken links at node {node.index}"


def test_chain_length_follows_config():
    chain = NodeChain(ViewConfig(nodes=2))
    assert len(chain) == 2
    assert chain.node_at(2) is None
    assert chain.node_at(-1) is None


def test_nodes_own_independent_state():
    chain = NodeChain()
    chain.head.state.start_updating()
    assert chain.head.state.direction == 1
    assert all(node.state.direction == 0 for node in list(chain)[1:])


def test_get_neighbor_inside_chain():
    chain = NodeChain()
    node = chain.node_at(2)

    forward, hit = node.get_neighbor(1)
    assert forward.index == 3 and not hit

    backward, hit = node.get_neighbor(-1)
    assert backward.index == 1 and not hit


def test_get_neighbor_at_boundaries():
    print("\n=== Test: get_neighbor Boundaries ===")

    chain = NodeChain()
    missing = []

    node, hit = chain.head.get_neighbor(-1, lambda: missing.append("head"))
    assert node is chain.head and hit

    tail = chain.node_at(4)
    node, hit = tail.get_neighbor(1, lambda: missing.append("tail"))
    assert node is tail and hit

    assert missing == ["head", "tail"]

    print("✓ Both ends fall back to self")


def test_draw_visits_every_node():
    chain = NodeChain()
    canvas = CountingCanvas(RenderBuffer(40, 60))
    chain.draw(canvas, Paint())
    assert canvas.saves == 5


if __name__ == "__main__":
    test_chain_structure()
    test_chain_length_follows_config()
    test_nodes_own_independent_state()
    test_get_neighbor_inside_chain()
    test_get_neighbor_at_boundaries()
    test_draw_visits_every_node()
    print("\nAll NodeChain tests passed!")
