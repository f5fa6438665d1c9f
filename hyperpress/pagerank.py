"""PageRank over the two sides of a bipartite hypergraph."""

from __future__ import annotations

from typing import List, Sequence, Tuple

DAMPING = 0.85


def _spread(scores: Sequence[float], rows: Sequence[Sequence[int]], size: int) -> List[float]:
    """Split each node's score evenly over its neighbours."""
    out = [0.0] * size
    for score, row in zip(scores, rows):
        if row:
            share = score / len(row)
            for target in row:
                out[target] += share
    return out


def _uniform(size: int) -> List[float]:
    return [1.0 / size] * size if size else []


def pagerank(
    v2he: Sequence[Sequence[int]],
    he2v: Sequence[Sequence[int]],
    iters: int,
) -> Tuple[List[float], List[float]]:
    """Run ``iters`` rounds of PageRank and return (vertex, hyperedge) scores.

    Both sides start uniform. Each round every vertex spreads its score over
    its hyperedges and every hyperedge over its vertices, both from the
    previous round's scores, and then the damping factor 0.85 is applied.
    """
    nv, nh = len(v2he), len(he2v)
    pr_v = _uniform(nv)
    pr_e = _uniform(nh)

    for _ in range(iters):
        next_e = _spread(pr_v, v2he, nh)
        next_v = _spread(pr_e, he2v, nv)
        pr_v = [(1.0 - DAMPING) / nv + DAMPING * x for x in next_v]
        pr_e = [(1.0 - DAMPING) / nh + DAMPING * x for x in next_e]

    return pr_v, pr_e