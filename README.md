# hyperpress

Compact storage and analysis of hypergraphs.

`hyperpress` compresses one side of a bipartite hypergraph (the member lists
of each hyperedge, or the incidence lists of each vertex) with a hybrid
scheme:

- the most frequent symbols of the other side are given Huffman codes;
- every remaining symbol is written with a fixed number of bits.

The encoded form is decoded again and sum-checked against the original, its
memory footprint is estimated, and the recovered structure is used for a set
of analyses: connected components, breadth-first search, k-core
decomposition, label propagation and PageRank.

## Installation

```
pip install .
```

Python 3.10 or newer is required. The package has no third-party
dependencies.

## Input format

Hypergraphs are read from plain text files in the `AdjacencyHypergraph`
format. All values are whitespace-separated integers after the header word:

```
AdjacencyHypergraph
<nv> <mv> <nh> <mh>
<nv vertex offsets>
<mv hyperedge ids, the incidence lists of all vertices>
<nh hyperedge offsets>
<mh vertex ids, the member lists of all hyperedges>
```

`nv` and `nh` are the numbers of vertices and hyperedges; `mv` and `mh` are
the lengths of the two flattened lists. The degree of each entry is the
difference between its offset and the next one (or the list length for the
last entry). A missing header word, a negative size, a non-integer token or
too few values raises `HypergraphFormatError`.

A small example with three vertices and two hyperedges:

```
AdjacencyHypergraph
3 4 2 4
0 1 3
0 0 1 1
0 2
0 1 1 2
```

## Command line

```
hyperpress <pct> <input.hyper> <k_thresh> <lp_iters> <pr_iters>
```

- `pct` – percentage of the most frequent symbols that receive Huffman codes
  (for example `20` for the top 20 %);
- `input.hyper` – the hypergraph file;
- `k_thresh` – minimum degree for the k-core;
- `lp_iters` – maximum number of label-propagation rounds;
- `pr_iters` – number of PageRank iterations.

If there are no more vertices than hyperedges, the hyperedge member lists are
encoded with a tree built on vertex degrees; otherwise the vertex incidence
lists are encoded with a tree built on hyperedge degrees.

The command prints:

- the result of the sum-check on the decoded data;
- the estimated content, tree and total sizes in KB (degrees and bit counts
  are counted as 16-bit or 32-bit values depending on their maxima);
- the number of connected components;
- for a graph with more than 5050 vertices, how many vertices a BFS from
  vertex 5050 reaches, and the distances of the first ten vertices;
- how many vertices remain in the k-core and how many label-propagation
  communities were found in it;
- the time spent in each stage.

A wrong number of arguments or a non-numeric argument prints the usage line;
an unreadable or malformed file prints `Bad file: ...`. In both cases, and
when the data cannot be processed, the exit status is 1.

## Library use

- `hyperpress.hypergraph` – `Hypergraph` (with `nv`, `mv`, `nh`, `mh`,
  `vertex_lists()` and `hyperedge_lists()`), `parse_hypergraph`,
  `read_hypergraph` and `HypergraphFormatError`.
- `hyperpress.huffman` – `build_tree(freq, pct)` returns the tree root (or
  `None`) and the fallback bit width; `gen_codes` maps leaf values to code
  strings; `tree_memory` estimates the tree's size; `HuffmanNode` is the tree
  type.
- `hyperpress.codec` – `encode_side` produces an `EncodedSide` (two packed
  bitstreams and per-entry Huffman bit counts); `decode_side` produces a
  `DecodedSide` whose `total_error` and `verified` report the sum-check when
  the original edges are given. In each decoded list the Huffman-coded values
  come first, then the fallback-coded ones, so the order within a list may
  differ from the input.
- `hyperpress.traversal` – `csr_offsets`, `connected_components` (returning
  `Components`), `bfs` (hop distances, `None` for unreachable vertices) and
  `full_bfs_reach`.
- `hyperpress.kcore` – `compute_kcore` returns one boolean per vertex.
- `hyperpress.labelprop` – `label_propagation` returns one label per in-core
  vertex and stops early once a round changes nothing; `count_communities`
  counts distinct labels.
- `hyperpress.pagerank` – `pagerank` returns vertex and hyperedge scores.
- `hyperpress.cli` – `footprint`, `invert_adjacency` and the `main` entry
  point.

For example, to find which vertices survive in the 2-core:

```python
from hyperpress.hypergraph import read_hypergraph
from hyperpress.kcore import compute_kcore

graph = read_hypergraph("example.hyper")
in_core = compute_kcore(graph.vertex_lists(), graph.hyperedge_lists(), 2)
```

## What it does not do

- The encoded bitstreams are kept in memory only; there is no file format
  for saving or loading a compressed hypergraph.
- The command computes PageRank scores but does not print them, and it does
  not run `full_bfs_reach`; both are available from the library.
- The BFS start vertex of the command is fixed at 5050.

## Running the tests

```
pip install .[test]
pytest
```