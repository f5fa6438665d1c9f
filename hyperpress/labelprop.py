"""Label propagation for community detection on the k-core."""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List, Sequence


def label_propagation(
    v2he: Sequence[Sequence[int]],
    he2v: Sequence[Sequence[int]],
    in_core: Sequence[bool],
    max_iter: int,
) -> List[int]:
    """Propagate labels over the vertices marked in ``in_core``.

    In-core vertices are renumbered 0, 1, ... in their original order and
    each starts with its new number as label. Hyperedges keep only their
    in-core members. In each round every vertex, in order, takes the label
    most frequent among the members of its hyperedges (itself included),
    the smaller label winning ties. Returns one label per in-core vertex.
    """
    if len(in_core) != len(v2he):
        raise ValueError(
            f"in_core has {len(in_core)} entries but there are {len(v2he)} vertices"
        )

    renumber: Dict[int, int] = {}
    for v, keep in enumerate(in_core):
        if keep:
            renumber[v] = len(renumber)

    members: List[List[int]] = []
    incident: List[List[int]] = [[] for _ in renumber]
    for hedge in he2v:
        kept = [renumber[v] for v in hedge if v in renumber]
        if kept:
            for v in kept:
                incident[v].append(len(members))
            members.append(kept)

    labels = list(range(len(renumber)))
    for _ in range(max_iter):
        changed = False
        for v, edges in enumerate(incident):
            votes = Counter(labels[u] for e in edges for u in members[e])
            if not votes:
                continue
            best = min(votes.items(), key=lambda item: (-item[1], item[0]))[0]
            if best != labels[v]:
                labels[v] = best
                changed = True
        if not changed:
            break
    return labels


def count_communities(labels: Iterable[int]) -> int:
    """Number of distinct labels."""
    return len(set(labels))