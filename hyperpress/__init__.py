"""Hybrid Huffman compression and analytics for bipartite hypergraphs."""

__version__ = "0.1.0"