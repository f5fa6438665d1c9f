from collections import Counter

import pytest

from hyperpress.codec import DecodedSide, EncodedSide, decode_side, encode_side
from hyperpress.huffman import HuffmanNode, build_tree, gen_codes

DEGREES = [3, 2, 4, 1, 3]
EDGES = [0, 1, 5, 2, 3, 0, 1, 4, 5, 2, 3, 4, 0]
SYMBOLS = 6


def _freq():
    counts = Counter(EDGES)
    return [counts[s] for s in range(SYMBOLS)]


def _rows():
    it = iter(EDGES)
    return [[next(it) for _ in range(d)] for d in DEGREES]


@pytest.mark.parametrize("pct", [0.0, 0.5, 1.0])
def test_round_trip_preserves_multisets(pct):
    tree, fallback = build_tree(_freq(), pct)
    codes = gen_codes(tree)
    encoded = encode_side(DEGREES, EDGES, codes, fallback)
    decoded = decode_side(DEGREES, encoded, tree, fallback, EDGES)
    assert decoded.verified
    assert decoded.total_error == 0
    assert [Counter(r) for r in decoded.adj] == [Counter(r) for r in _rows()]


@pytest.mark.parametrize("pct", [0.0, 0.5, 1.0])
def test_bit_totals_match_streams(pct):
    tree, fallback = build_tree(_freq(), pct)
    codes = gen_codes(tree)
    encoded = encode_side(DEGREES, EDGES, codes, fallback)
    assert sum(encoded.bit_count) == encoded.bits_hi
    assert len(encoded.hi) == (encoded.bits_hi + 7) // 8
    assert len(encoded.lo) == (encoded.bits_lo + 7) // 8
    fallback_values = sum(1 for e in EDGES if e not in codes)
    assert encoded.bits_lo == fallback_values * fallback


def test_all_fallback_when_no_codes():
    encoded = encode_side(DEGREES, EDGES, {}, 3)
    assert encoded.bits_hi == 0
    assert encoded.hi == b""
    assert encoded.bit_count == [0] * len(DEGREES)
    decoded = decode_side(DEGREES, encoded, None, 3, EDGES)
    assert decoded.adj == _rows()


def test_pinned_bit_layout():
    encoded = encode_side([2], [1, 5], {1: "0", 2: "1"}, 3)
    assert encoded.bit_count == [1]
    assert encoded.bits_hi == 1
    assert encoded.bits_lo == 3
    assert encoded.hi == b"\x00"
    assert encoded.lo == bytes([0b101])


def test_full_byte_of_huffman_bits():
    encoded = encode_side([4], [0, 0, 0, 0], {0: "11"}, 1)
    assert encoded.hi == b"\xff"
    assert encoded.bits_hi == 8


def test_huffman_values_come_before_fallback():
    left = HuffmanNode(1, 1)
    right = HuffmanNode(2, 1)
    tree = HuffmanNode(-1, 2, left=left, right=right)
    codes = gen_codes(tree)
    encoded = encode_side([3], [5, 2, 1], codes, 3)
    decoded = decode_side([3], encoded, tree, 3, [5, 2, 1])
    assert decoded.adj == [[2, 1, 5]]
    assert decoded.verified


def test_sum_check_reports_difference():
    encoded = encode_side([2], [3, 4], {}, 3)
    decoded = decode_side([2], encoded, None, 3, [3, 6])
    assert decoded.total_error == -2
    assert not decoded.verified


def test_no_original_skips_check():
    encoded = encode_side([2], [3, 4], {}, 3)
    decoded = decode_side([2], encoded, None, 3)
    assert decoded.total_error is None
    assert decoded.adj == [[3, 4]]
    assert not decoded.verified


def test_exhausted_fallback_stream_raises():
    encoded = EncodedSide(bit_count=[0], hi=b"", lo=b"", bits_hi=0, bits_lo=0)
    with pytest.raises(ValueError):
        decode_side([1], encoded, None, 3)


def test_huffman_bits_without_tree_raise():
    encoded = EncodedSide(bit_count=[1], hi=b"\x00", lo=b"", bits_hi=1, bits_lo=0)
    with pytest.raises(ValueError):
        decode_side([1], encoded, None, 3)


def test_short_edges_raise():
    with pytest.raises(ValueError):
        encode_side([3], [1, 2], {}, 2)


def test_missing_bit_counts_raise():
    encoded = EncodedSide(bit_count=[], hi=b"", lo=b"", bits_hi=0, bits_lo=0)
    with pytest.raises(ValueError):
        decode_side([1], encoded, None, 2)


def test_decoded_side_default_is_empty():
    decoded = DecodedSide()
    assert decoded.adj == []
    assert decoded.total_error is None