"""Binary search tree lookup and Huffman tree construction."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass
class BSTNode:
    """A node of a binary search tree."""

    key: int
    left: Optional[BSTNode] = None
    right: Optional[BSTNode] = None


@dataclass(eq=False)
class HuffmanNode:
    """A node of a Huffman tree; internal nodes have ``symbol`` set to None."""

    symbol: Optional[str]
    freq: int
    left: Optional[HuffmanNode] = None
    right: Optional[HuffmanNode] = None


def bst_search(root: Optional[BSTNode], key: int) -> Optional[BSTNode]:
    """Return the node holding ``key`` in a binary search tree, or None."""
    current = root
    while current is not None and current.key != key:
        current = current.left if key < current.key else current.right
    return current


def _first_minimum(nodes: list[HuffmanNode]) -> int:
    return min(range(len(nodes)), key=lambda i: nodes[i].freq)


def build_huffman(nodes: Iterable[HuffmanNode]) -> HuffmanNode:
    """Combine nodes into a Huffman tree and return its root.

    The two lowest-frequency nodes are merged repeatedly, the first found
    becoming the left child. The given collection is not modified.
    Raises ValueError if no nodes are given or a frequency is not positive.
    """
    pool = list(nodes)
    if not pool:
        raise ValueError("build_huffman needs at least one node")
    for node in pool:
        if node.freq <= 0:
            raise ValueError(f"frequencies must be positive, got {node.freq}")
    while len(pool) > 1:
        first_index = _first_minimum(pool)
        first = pool[first_index]
        pool[first_index] = pool[-1]
        pool.pop()
        second_index = _first_minimum(pool)
        second = pool[second_index]
        pool[second_index] = HuffmanNode(None, first.freq + second.freq, first, second)
    return pool[0]