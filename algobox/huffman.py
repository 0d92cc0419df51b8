"""Huffman coding: build the optimal prefix-code tree and read off the codes."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = ["HuffmanNode", "build_huffman_tree", "huffman_codes"]


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; internal nodes have no symbol."""

    freq: int
    symbol: str | None = None
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_huffman_tree(
    symbols: Iterable[str], frequencies: Iterable[int]
) -> HuffmanNode:
    """Build a Huffman tree by repeatedly joining the two rarest nodes.

    The first node taken off the heap becomes the left child. Ties are broken
    by insertion order.
    """
    symbol_list = list(symbols)
    freq_list = list(frequencies)
    if len(symbol_list) != len(freq_list):
        raise ValueError("symbols and frequencies differ in length")
    if not symbol_list:
        raise ValueError("at least one symbol is needed")
    counter = itertools.count()
    heap = [
        (freq, next(counter), HuffmanNode(freq, symbol))
        for symbol, freq in zip(symbol_list, freq_list)
    ]
    heapq.heapify(heap)
    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        parent = HuffmanNode(left.freq + right.freq, None, left, right)
        heapq.heappush(heap, (parent.freq, next(counter), parent))
    return heap[0][2]


def _walk(node: HuffmanNode | None, prefix: str) -> Iterator[tuple[str, str]]:
    if node is None:
        return
    if node.is_leaf and node.symbol is not None:
        yield node.symbol, prefix
    yield from _walk(node.left, prefix + "0")
    yield from _walk(node.right, prefix + "1")


def huffman_codes(
    symbols: Iterable[str], frequencies: Iterable[int]
) -> dict[str, str]:
    """Return the Huffman code of each symbol, in left-to-right tree order."""
    return dict(_walk(build_huffman_tree(symbols, frequencies), ""))