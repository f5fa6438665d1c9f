"""Huffman trees over the most frequent symbols, and their code tables."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import count
from typing import Dict, Optional, Sequence, Tuple

# Size in bytes of one tree node: value, frequency and two child links.
NODE_BYTES = 24


@dataclass(eq=False)
class HuffmanNode:
    """A node of a Huffman tree; internal nodes carry the value -1."""

    value: int
    freq: int
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None


def build_tree(freq: Sequence[int], pct: float) -> Tuple[Optional[HuffmanNode], int]:
    """Build a Huffman tree over the top ``pct`` fraction of symbols.

    Symbols are the indices of ``freq``. The ``round(n * pct)`` most
    frequent ones become leaves; the rest are left to a fixed-width
    encoding. Returns the tree root (None if no symbol was chosen) and the
    number of bits needed to write the largest symbol left out (at least 1).
    """
    n = len(freq)
    ranked = sorted(range(n), key=lambda i: (-freq[i], i))
    k = int(n * pct + 0.5)
    chosen, rest = ranked[:k], ranked[k:]

    max_symbol = max(rest, default=0)
    fallback_bits = max(1, max_symbol.bit_length())

    tie = count()
    heap = [(freq[i], next(tie), HuffmanNode(i, freq[i])) for i in chosen]
    heapq.heapify(heap)
    while len(heap) > 1:
        fa, _, a = heapq.heappop(heap)
        fb, _, b = heapq.heappop(heap)
        merged = HuffmanNode(-1, fa + fb, left=a, right=b)
        heapq.heappush(heap, (merged.freq, next(tie), merged))

    root = heap[0][2] if heap else None
    return root, fallback_bits


def gen_codes(root: Optional[HuffmanNode]) -> Dict[int, str]:
    """Map every leaf value of the tree to its code: '0' for left, '1' for right."""
    codes: Dict[int, str] = {}
    if root is None:
        return codes
    stack = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.value >= 0:
            codes[node.value] = path
            continue
        if node.right is not None:
            stack.append((node.right, path + "1"))
        if node.left is not None:
            stack.append((node.left, path + "0"))
    return codes


def tree_memory(root: Optional[HuffmanNode]) -> int:
    """Estimated memory in bytes held by the nodes of the tree."""
    nodes = 0
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        nodes += 1
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return nodes * NODE_BYTES