"""Breadth-first traversals and connected components of bipartite hypergraphs."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import accumulate
from typing import Deque, List, Optional, Sequence, Tuple

from .hypergraph import Hypergraph


def csr_offsets(degrees: Sequence[int]) -> List[int]:
    """Prefix sums of ``degrees``: entry ``i`` is where row ``i`` starts."""
    return [0, *accumulate(degrees)]


def _checked_offsets(graph: Hypergraph) -> Tuple[List[int], List[int]]:
    offset_v = csr_offsets(graph.degree_v)
    if offset_v[-1] != graph.mv:
        raise ValueError(
            f"vertex degrees sum to {offset_v[-1]} but there are {graph.mv} vertex entries"
        )
    offset_h = csr_offsets(graph.degree_h)
    if offset_h[-1] != graph.mh:
        raise ValueError(
            f"hyperedge degrees sum to {offset_h[-1]} but there are {graph.mh} hyperedge entries"
        )
    return offset_v, offset_h


@dataclass(frozen=True)
class Components:
    """Connected-component labels of a hypergraph.

    ``vertex[v]`` and ``hyperedge[e]`` are component ids numbered from 0 in
    the order components are discovered; a hyperedge that no vertex reaches
    keeps -1. ``offset_v`` and ``offset_h`` are the CSR offsets of both sides.
    """

    vertex: List[int]
    hyperedge: List[int]
    count: int
    offset_v: List[int]
    offset_h: List[int]


def connected_components(graph: Hypergraph) -> Components:
    """Label components by alternating vertex and hyperedge BFS.

    Neighbour ids outside the valid range are ignored.
    """
    offset_v, offset_h = _checked_offsets(graph)
    nv, nh = graph.nv, graph.nh
    v_lists = graph.vertex_lists()
    h_lists = graph.hyperedge_lists()

    comp_v = [-1] * nv
    comp_h = [-1] * nh
    label = 0
    queue: Deque[Tuple[bool, int]] = deque()

    for root in range(nv):
        if comp_v[root] != -1:
            continue
        comp_v[root] = label
        queue.append((False, root))
        while queue:
            is_hyperedge, node = queue.popleft()
            if is_hyperedge:
                for u in h_lists[node]:
                    if 0 <= u < nv and comp_v[u] == -1:
                        comp_v[u] = label
                        queue.append((False, u))
            else:
                for e in v_lists[node]:
                    if 0 <= e < nh and comp_h[e] == -1:
                        comp_h[e] = label
                        queue.append((True, e))
        label += 1

    return Components(
        vertex=comp_v,
        hyperedge=comp_h,
        count=label,
        offset_v=offset_v,
        offset_h=offset_h,
    )


def bfs(graph: Hypergraph, start: int) -> List[Optional[int]]:
    """Hop distances from vertex ``start`` to every vertex.

    One hop goes from a vertex through a hyperedge to another vertex.
    Unreachable vertices get None; if ``start`` is not a vertex, every
    entry is None.
    """
    _checked_offsets(graph)
    nv, nh = graph.nv, graph.nh
    dist: List[Optional[int]] = [None] * nv
    if not 0 <= start < nv:
        return dist

    v_lists = graph.vertex_lists()
    h_lists = graph.hyperedge_lists()
    dist[start] = 0
    queue: Deque[int] = deque([start])
    while queue:
        v = queue.popleft()
        step = dist[v] + 1
        for e in v_lists[v]:
            if not 0 <= e < nh:
                continue
            for u in h_lists[e]:
                if 0 <= u < nv and dist[u] is None:
                    dist[u] = step
                    queue.append(u)
    return dist


def full_bfs_reach(adj: Sequence[Sequence[int]]) -> int:
    """Sum over all sources of the number of nodes each BFS reaches.

    Every source counts itself; neighbour ids outside ``range(len(adj))``
    are ignored.
    """
    n = len(adj)
    total = 0
    for source in range(n):
        seen = [False] * n
        seen[source] = True
        queue: Deque[int] = deque([source])
        reached = 1
        while queue:
            node = queue.popleft()
            for nxt in adj[node]:
                if 0 <= nxt < n and not seen[nxt]:
                    seen[nxt] = True
                    queue.append(nxt)
                    reached += 1
        total += reached
    return total