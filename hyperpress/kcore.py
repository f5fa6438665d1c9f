"""k-core pruning of a bipartite hypergraph."""

from __future__ import annotations

from collections import deque
from typing import List, Sequence, Set


def compute_kcore(
    v2he: Sequence[Sequence[int]],
    he2v: Sequence[Sequence[int]],
    k: int,
) -> List[bool]:
    """Return, per vertex, whether it belongs to the k-core.

    Vertices with fewer than ``k`` incident hyperedges are removed; removing
    a vertex removes every hyperedge it belongs to, which lowers the degree
    of that hyperedge's other members, and so on until nothing changes.
    """
    degree = [len(row) for row in v2he]
    removed = [d < k for d in degree]
    queue = deque(v for v, gone in enumerate(removed) if gone)
    removed_edges: Set[int] = set()

    while queue:
        v = queue.popleft()
        for e in v2he[v]:
            if e in removed_edges:
                continue
            removed_edges.add(e)
            for u in he2v[e]:
                if removed[u]:
                    continue
                degree[u] -= 1
                if degree[u] < k:
                    removed[u] = True
                    queue.append(u)

    return [not gone for gone in removed]