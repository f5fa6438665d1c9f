from fractions import Fraction

import pytest

from hyperpress.huffman import (
    NODE_BYTES,
    HuffmanNode,
    build_tree,
    gen_codes,
    tree_memory,
)


def test_full_tree_covers_all_symbols():
    root, _ = build_tree([5, 3, 8, 1, 2], 1.0)
    codes = gen_codes(root)
    assert set(codes) == {0, 1, 2, 3, 4}


def test_codes_are_prefix_free():
    root, _ = build_tree([7, 2, 9, 4, 4, 1, 3], 1.0)
    codes = gen_codes(root)
    assert set(codes) == {0, 1, 2, 3, 4, 5, 6}
    words = sorted(codes.values())
    assert len(set(words)) == 7
    for shorter, longer in zip(words, words[1:]):
        assert not longer.startswith(shorter)


def test_codes_use_only_binary_digits():
    root, _ = build_tree([7, 2, 9, 4], 1.0)
    assert all(set(code) <= {"0", "1"} and code for code in gen_codes(root).values())


def test_kraft_equality_for_full_tree():
    root, _ = build_tree([10, 6, 3, 2, 1, 1], 1.0)
    total = sum(Fraction(1, 2 ** len(c)) for c in gen_codes(root).values())
    assert total == 1


def test_more_frequent_symbols_get_shorter_or_equal_codes():
    freq = [40, 20, 10, 5, 3, 2]
    codes = gen_codes(build_tree(freq, 1.0)[0])
    for a in range(len(freq)):
        for b in range(len(freq)):
            if freq[a] > freq[b]:
                assert len(codes[a]) <= len(codes[b])


def test_partial_tree_keeps_most_frequent():
    freq = [1, 50, 2, 40, 3, 30]
    root, _ = build_tree(freq, 0.5)
    assert set(gen_codes(root)) == {1, 3, 5}


def test_fallback_bits_cover_excluded_symbols():
    freq = [1, 50, 2, 40, 3, 30]
    _, bits = build_tree(freq, 0.5)
    excluded_max = 4
    assert excluded_max < 2 ** bits
    assert 2 ** (bits - 1) <= excluded_max


def test_fallback_bits_minimum_is_one():
    _, bits = build_tree([3, 2, 1], 1.0)
    assert bits == 1


def test_zero_pct_gives_no_tree():
    root, bits = build_tree([4, 4, 4, 4, 4, 4, 4, 4, 4], 0.0)
    assert root is None
    assert gen_codes(root) == {}
    assert 8 < 2 ** bits and 2 ** (bits - 1) <= 8


def test_empty_frequencies():
    root, bits = build_tree([], 1.0)
    assert root is None
    assert bits == 1


def test_single_symbol_has_empty_code():
    root, _ = build_tree([9], 1.0)
    assert root.is_leaf()
    assert gen_codes(root) == {0: ""}


def test_root_frequency_is_sum_of_chosen():
    freq = [5, 3, 8, 1, 2]
    root, _ = build_tree(freq, 1.0)
    assert root.freq == sum(freq)
    assert root.value == -1
    assert not root.is_leaf()


def test_tree_memory_counts_all_nodes():
    root, _ = build_tree([5, 3, 8, 1, 2], 1.0)
    leaves = len(gen_codes(root))
    assert tree_memory(root) == (2 * leaves - 1) * NODE_BYTES


def test_tree_memory_of_nothing_and_leaf():
    assert tree_memory(None) == 0
    assert tree_memory(HuffmanNode(0, 1)) == NODE_BYTES


def test_gen_codes_on_hand_built_tree():
    root = HuffmanNode(-1, 3, left=HuffmanNode(7, 1), right=HuffmanNode(2, 2))
    assert gen_codes(root) == {7: "0", 2: "1"}


@pytest.mark.parametrize("pct", [0.2, 0.4, 0.6, 0.8, 1.0])
def test_leaf_count_matches_rounded_fraction(pct):
    freq = [9, 1, 8, 2, 7]
    root, _ = build_tree(freq, pct)
    assert len(gen_codes(root)) == int(len(freq) * pct + 0.5)