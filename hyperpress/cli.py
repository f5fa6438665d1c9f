"""Command line driver: compress a hypergraph and run analytics on it."""

from __future__ import annotations

import sys
import time
from typing import List, Optional, Sequence

from .codec import decode_side, encode_side
from .huffman import build_tree, gen_codes, tree_memory
from .hypergraph import HypergraphFormatError, read_hypergraph
from .kcore import compute_kcore
from .labelprop import count_communities, label_propagation
from .pagerank import pagerank
from .traversal import bfs, connected_components

POINTER_BYTES = 8
BFS_START = 5050
SHOWN_DISTANCES = 10
USAGE = "Usage: hyperpress <pct> <input.hyper> <k_thresh> <lp_iters> <pr_iters>"


def footprint(n: int, bits_hi: int, bits_lo: int, degree_bytes: int, bitcount_bytes: int) -> int:
    """Estimated bytes to hold one encoded side.

    Counts two array pointers, two stream pointers, ``n`` degrees and ``n``
    bit counts at the given widths, and both bitstreams rounded up to bytes.
    """
    return (
        4 * POINTER_BYTES
        + degree_bytes * n
        + bitcount_bytes * n
        + (bits_hi + 7) // 8
        + (bits_lo + 7) // 8
    )


def invert_adjacency(adj: Sequence[Sequence[int]], size: int) -> List[List[int]]:
    """Turn row -> targets lists into ``size`` target -> rows lists."""
    inverse: List[List[int]] = [[] for _ in range(size)]
    for row, targets in enumerate(adj):
        for target in targets:
            if not 0 <= target < size:
                raise ValueError(f"entry {target} of row {row} is outside 0..{size - 1}")
            inverse[target].append(row)
    return inverse


def _parse(argv: Sequence[str]):
    if len(argv) != 5:
        raise ValueError("wrong number of arguments")
    pct = float(argv[0]) * 0.01
    return pct, argv[1], int(argv[2]), int(argv[3]), int(argv[4])


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the compression and analytics pipeline; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        pct, fname, k_thresh, lp_iters, pr_iters = _parse(args)
    except ValueError:
        print(USAGE, file=sys.stderr)
        return 1

    try:
        graph = read_hypergraph(fname)
    except (HypergraphFormatError, OSError) as exc:
        print(f"Bad file: {exc}", file=sys.stderr)
        return 1

    nv, nh = graph.nv, graph.nh
    encode_h = nv <= nh
    print(
        f"Compressing {'hyperedges' if encode_h else 'vertices'} "
        f"(tree on {'vertices' if encode_h else 'hyperedges'})"
    )

    if encode_h:
        freq, degrees, edges = graph.degree_v, graph.degree_h, graph.edges_h
    else:
        freq, degrees, edges = graph.degree_h, graph.degree_v, graph.edges_v

    try:
        t_encode0 = time.perf_counter()
        tree, fallback_bits = build_tree(freq, pct)
        codes = gen_codes(tree)
        encoded = encode_side(degrees, edges, codes, fallback_bits)
        t_encode1 = time.perf_counter()

        t_decode0 = time.perf_counter()
        decoded = decode_side(degrees, encoded, tree, fallback_bits, edges)
        t_decode1 = time.perf_counter()

        if decoded.verified:
            print(f"decodeSide: all {len(degrees)} entries verified by sum-check")
        else:
            print(f"decodeSide: totalError={decoded.total_error}")

        adj = decoded.adj
        if encode_h:
            he2v = adj
            v2he = invert_adjacency(he2v, nv)
        else:
            v2he = adj
            he2v = invert_adjacency(v2he, nh)

        tree_size = tree_memory(tree)
        n = len(degrees)
        max_deg = max(degrees, default=0)
        max_bc = max(encoded.bit_count, default=0)
        limit = 1 << 16
        if max_deg < limit and max_bc < limit:
            content_size = footprint(n, encoded.bits_hi, encoded.bits_lo, 2, 2)
            print("[Footprint] Using uint16_t for both degree and bitCount")
        elif max_deg < limit or max_bc < limit:
            content_size = footprint(n, encoded.bits_hi, encoded.bits_lo, 2, 4)
            print("[Footprint] Using uint16_t for one of degree or bitCount")
        else:
            content_size = footprint(n, encoded.bits_hi, encoded.bits_lo, 4, 4)
            print("[Footprint] Using full int32_t for both degree and bitCount")

        print(f"Content size: {content_size // 1024} KB")
        print(f"Tree    size: {tree_size // 1024} KB")
        print(f"Total   size: {(content_size + tree_size) // 1024} KB")

        t_bfs0 = time.perf_counter()
        t_cc0 = time.perf_counter()
        components = connected_components(graph)
        t_cc1 = time.perf_counter()
        print(f"Connected Components: {components.count}")
        print(f"Connected Components time: {t_cc1 - t_cc0} s")

        t_single0 = time.perf_counter()
        dist = bfs(graph, BFS_START)
        if 0 <= BFS_START < nv:
            reached = sum(d is not None for d in dist)
            print(f"\nBFS from vertex {BFS_START} reached {reached} / {nv} vertices")
            print("Distances (vertex → distance):")
            for v, d in enumerate(dist[:SHOWN_DISTANCES]):
                print(f"  v={v}" + (" unreachable" if d is None else f" → {d}"))
        t_single1 = time.perf_counter()
        print(f"BFS runtime: {t_single1 - t_single0} s")
        t_bfs1 = time.perf_counter()
        t_bfs2 = time.perf_counter()

        t_k0 = time.perf_counter()
        in_core = compute_kcore(v2he, he2v, k_thresh)
        print(f"K-Core: {sum(in_core)} vertices remain in core")
        labels = label_propagation(v2he, he2v, in_core, lp_iters)
        print(f"Label Propagation: {count_communities(labels)} communities found in core")
        t_k1 = time.perf_counter()

        t_p0 = time.perf_counter()
        pagerank(v2he, he2v, pr_iters)
        t_p1 = time.perf_counter()
    except (ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Encoding Time: {t_encode1 - t_encode0} s")
    print(f"Decoding Time: {t_decode1 - t_decode0} s")
    print(f"Total (Enc+Dec): {t_decode1 - t_encode0} s")
    print(f"BFS Time: {t_bfs1 - t_bfs0} s")
    print(f"BFS All Vertices Time: {t_bfs2 - t_bfs0} s")
    print(f"K-Core + Label Propagation Time: {t_k1 - t_k0} s")
    print(f"PageRank Time: {t_p1 - t_p0} s")
    return 0


if __name__ == "__main__":
    sys.exit(main())