"""Hybrid Huffman / fixed-width encoding of one side of a hypergraph."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from typing import Iterable, Iterator, List, Mapping, Optional, Sequence

from .huffman import HuffmanNode


@dataclass(frozen=True)
class EncodedSide:
    """The two packed bitstreams produced for one side of a hypergraph.

    ``bit_count[i]`` is the number of Huffman bits written for entry ``i``.
    ``hi`` holds the Huffman bits and ``lo`` the fixed-width fallback bits,
    each packed least-significant bit first within a byte.
    """

    bit_count: List[int]
    hi: bytes
    lo: bytes
    bits_hi: int
    bits_lo: int


@dataclass(frozen=True)
class DecodedSide:
    """Adjacency lists recovered from an :class:`EncodedSide`.

    Within each list the Huffman-coded values come first, followed by the
    fallback-coded ones. ``total_error`` is the summed difference between
    decoded and original values, or None when no original was given.
    """

    adj: List[List[int]] = field(default_factory=list)
    total_error: Optional[int] = None

    @property
    def verified(self) -> bool:
        """True when a sum-check was run and found no difference."""
        return self.total_error == 0


def _pack(bits: Sequence[bool]) -> bytes:
    out = bytearray((len(bits) + 7) // 8)
    for position, bit in enumerate(bits):
        if bit:
            out[position >> 3] |= 1 << (position & 7)
    return bytes(out)


class _BitReader:
    """Sequential reader over a bitstream packed by :func:`_pack`."""

    def __init__(self, data: bytes, name: str) -> None:
        self._data = data
        self._name = name
        self._pos = 0

    def bit(self) -> int:
        index, offset = divmod(self._pos, 8)
        if index >= len(self._data):
            raise ValueError(f"{self._name} bitstream exhausted at bit {self._pos}")
        self._pos += 1
        return (self._data[index] >> offset) & 1

    def read(self, width: int) -> int:
        value = 0
        for _ in range(width):
            value = (value << 1) | self.bit()
        return value


def _rows(degrees: Sequence[int], edges: Iterable[int], what: str) -> Iterator[List[int]]:
    flat = iter(edges)
    for degree in degrees:
        row = list(islice(flat, degree))
        if len(row) != degree:
            raise ValueError(f"{what} hold fewer entries than the degrees require")
        yield row


def encode_side(
    degrees: Sequence[int],
    edges: Sequence[int],
    codes: Mapping[int, str],
    fallback_bits: int,
) -> EncodedSide:
    """Encode adjacency entries with Huffman codes where available.

    Values present in ``codes`` are written to the Huffman stream; all
    others are written most-significant bit first in ``fallback_bits`` bits
    to the fallback stream.
    """
    hi_bits: List[bool] = []
    lo_bits: List[bool] = []
    bit_count: List[int] = []

    for row in _rows(degrees, edges, "edges"):
        used = 0
        for value in row:
            code = codes.get(value)
            if code is not None:
                hi_bits.extend(ch == "1" for ch in code)
                used += len(code)
            else:
                lo_bits.extend(
                    bool((value >> shift) & 1) for shift in range(fallback_bits - 1, -1, -1)
                )
        bit_count.append(used)

    return EncodedSide(
        bit_count=bit_count,
        hi=_pack(hi_bits),
        lo=_pack(lo_bits),
        bits_hi=len(hi_bits),
        bits_lo=len(lo_bits),
    )


def _walk(tree: HuffmanNode, reader: _BitReader) -> tuple[int, int]:
    node = tree
    consumed = 0
    while not node.is_leaf():
        child = node.right if reader.bit() else node.left
        consumed += 1
        if child is None:
            raise ValueError("Huffman stream leads to a missing tree branch")
        node = child
    return node.value, consumed


def decode_side(
    degrees: Sequence[int],
    encoded: EncodedSide,
    tree: Optional[HuffmanNode],
    fallback_bits: int,
    original: Optional[Sequence[int]] = None,
) -> DecodedSide:
    """Decode adjacency lists written by :func:`encode_side`.

    When ``original`` (the flat edge list that was encoded) is given, each
    decoded list is sum-checked against it and the summed difference is
    reported as ``total_error``.
    """
    if len(encoded.bit_count) < len(degrees):
        raise ValueError("bit counts do not cover every entry")

    hi = _BitReader(encoded.hi, "Huffman")
    lo = _BitReader(encoded.lo, "fallback")
    adj: List[List[int]] = []

    for degree, bits in zip(degrees, encoded.bit_count):
        values: List[int] = []
        consumed = 0
        while consumed < bits:
            if tree is None:
                raise ValueError("Huffman bits present but no tree was given")
            value, used = _walk(tree, hi)
            values.append(value)
            consumed += used
        while len(values) < degree:
            values.append(lo.read(fallback_bits))
        adj.append(values)

    total_error: Optional[int] = None
    if original is not None:
        total_error = sum(
            sum(decoded[:degree]) - sum(row)
            for decoded, degree, row in zip(adj, degrees, _rows(degrees, original, "original edges"))
        )

    return DecodedSide(adj=adj, total_error=total_error)