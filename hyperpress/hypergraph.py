"""Hypergraph storage and the AdjacencyHypergraph text format."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from os import PathLike
from typing import Iterator, List, Sequence, Union

FORMAT_TAG = "AdjacencyHypergraph"


class HypergraphFormatError(ValueError):
    """Raised when hypergraph text does not follow the expected format."""


def _split(degrees: Sequence[int], edges: Sequence[int]) -> List[List[int]]:
    flat = iter(edges)
    return [list(islice(flat, degree)) for degree in degrees]


@dataclass
class Hypergraph:
    """A bipartite hypergraph in flat degree/edge-list form.

    ``edges_v`` holds, vertex after vertex, the hyperedges each vertex
    belongs to; ``degree_v`` gives how many entries each vertex owns.
    ``edges_h`` and ``degree_h`` do the same for hyperedges.
    """

    degree_v: List[int] = field(default_factory=list)
    edges_v: List[int] = field(default_factory=list)
    degree_h: List[int] = field(default_factory=list)
    edges_h: List[int] = field(default_factory=list)

    @property
    def nv(self) -> int:
        """Number of vertices."""
        return len(self.degree_v)

    @property
    def mv(self) -> int:
        """Total number of vertex-side incidence entries."""
        return len(self.edges_v)

    @property
    def nh(self) -> int:
        """Number of hyperedges."""
        return len(self.degree_h)

    @property
    def mh(self) -> int:
        """Total number of hyperedge-side incidence entries."""
        return len(self.edges_h)

    def vertex_lists(self) -> List[List[int]]:
        """Hyperedges incident to each vertex, one list per vertex."""
        return _split(self.degree_v, self.edges_v)

    def hyperedge_lists(self) -> List[List[int]]:
        """Vertices of each hyperedge, one list per hyperedge."""
        return _split(self.degree_h, self.edges_h)


def _take(tokens: Iterator[str], count: int, what: str) -> List[int]:
    values = []
    for _ in range(count):
        try:
            token = next(tokens)
        except StopIteration:
            raise HypergraphFormatError(f"unexpected end of input while reading {what}") from None
        try:
            values.append(int(token))
        except ValueError:
            raise HypergraphFormatError(f"invalid integer {token!r} in {what}") from None
    return values


def _degrees(offsets: List[int], total: int) -> List[int]:
    ends = offsets[1:] + [total]
    return [end - start for start, end in zip(offsets, ends)]


def parse_hypergraph(text: str) -> Hypergraph:
    """Parse a hypergraph written in the AdjacencyHypergraph format."""
    tokens = iter(text.split())
    tag = next(tokens, None)
    if tag != FORMAT_TAG:
        raise HypergraphFormatError(f"expected {FORMAT_TAG!r} header, found {tag!r}")

    nv, mv, nh, mh = _take(tokens, 4, "header sizes")
    for name, value in (("nv", nv), ("mv", mv), ("nh", nh), ("mh", mh)):
        if value < 0:
            raise HypergraphFormatError(f"negative size {name}={value}")

    offsets_v = _take(tokens, nv, "vertex offsets")
    edges_v = _take(tokens, mv, "vertex edges")
    offsets_h = _take(tokens, nh, "hyperedge offsets")
    edges_h = _take(tokens, mh, "hyperedge edges")

    return Hypergraph(
        degree_v=_degrees(offsets_v, mv),
        edges_v=edges_v,
        degree_h=_degrees(offsets_h, mh),
        edges_h=edges_h,
    )


def read_hypergraph(path: Union[str, PathLike]) -> Hypergraph:
    """Read a hypergraph file in the AdjacencyHypergraph format."""
    with open(path, encoding="utf-8") as handle:
        return parse_hypergraph(handle.read())