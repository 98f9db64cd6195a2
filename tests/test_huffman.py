import random
from fractions import Fraction
from itertools import product

import pytest

from hufftext.entropy import (
    FrequencyTable,
    HuffmanCoder,
    build_tree,
    count_symbols,
    encode,
    generate_codes,
    is_prefix_free,
    weighted_code_length,
)


def optimal_weighted_length(counts):
    """Smallest SUM{count * length} over all length vectors satisfying Kraft's inequality."""
    k = len(counts)
    best = None
    for lengths in product(range(1, k), repeat=k):
        if sum(Fraction(1, 2 ** l) for l in lengths) > 1:
            continue
        cost = sum(c * l for c, l in zip(counts, lengths))
        if best is None or cost < best:
            best = cost
    return best


def test_aaabbc_tree_and_codes(aaabbc_table):
    tree = build_tree(aaabbc_table)
    assert len(tree.leaves()) == 3
    assert tree.weight == 6

    codes = generate_codes(tree)
    assert codes == {"a": "0", "c": "10", "b": "11"}
    assert is_prefix_free(codes)

    stream = encode("aaabbc", codes)
    assert stream.bit_count == 3 * len(codes["a"]) + 2 * len(codes["b"]) + 1 * len(codes["c"])
    assert stream.bit_count == 9
    assert stream.byte_count == 2
    assert stream.dropped == 0
    assert stream.bits == "000111110"


def test_internal_node_weight_is_sum_of_children(aaabbc_table):
    tree = build_tree(aaabbc_table)
    for node in tree.nodes:
        if not node.is_leaf:
            assert node.weight == tree[node.left].weight + tree[node.right].weight
            assert node.symbol is None


def test_leaves_come_first_and_root_is_last(aaabbc_table):
    tree = build_tree(aaabbc_table)
    assert [node.symbol for node in tree.nodes[:3]] == ["a", "b", "c"]
    assert tree.root == len(tree) - 1
    assert all(not node.is_leaf for node in tree.nodes[3:])


def test_empty_table():
    tree = build_tree(FrequencyTable())
    assert tree is None
    codes = generate_codes(tree)
    assert codes == {}
    stream = encode("anything", codes)
    assert stream.bit_count == 0
    assert stream.byte_count == 0
    assert stream.dropped == len("anything")


def test_single_symbol_gets_empty_code():
    table, text = count_symbols("zzzzzz")
    tree = build_tree(table)
    assert len(tree) == 1
    assert tree[tree.root].is_leaf
    assert tree.depth() == 0

    codes = generate_codes(tree)
    assert codes == {"z": ""}
    stream = encode(text, codes)
    assert stream.bit_count == 0
    assert stream.byte_count == 0
    assert stream.dropped == 0


def test_two_symbols_get_one_bit_each():
    codes = generate_codes(build_tree(FrequencyTable({"x": 10, "y": 1})))
    assert sorted(codes.values()) == ["0", "1"]


def test_missing_symbols_are_dropped_and_counted(aaabbc_table):
    codes = generate_codes(build_tree(aaabbc_table))
    stream = encode("abxcy", codes)
    assert stream.dropped == 2
    assert stream.bits == codes["a"] + codes["b"] + codes["c"]


def test_equal_weights_are_broken_by_code_point():
    table = FrequencyTable({"d": 1, "c": 1, "b": 1, "a": 1})
    first = generate_codes(build_tree(table))
    second = generate_codes(build_tree(FrequencyTable({"a": 1, "b": 1, "c": 1, "d": 1})))
    assert first == second
    assert first == {"a": "00", "b": "01", "c": "10", "d": "11"}


def test_skewed_tree_does_not_hit_recursion_limit():
    # Fibonacci weights force one new level per merge
    fib = [1, 1]
    while len(fib) < 60:
        fib.append(fib[-1] + fib[-2])
    symbols = [chr(0x100 + i) for i in range(len(fib))]
    table = FrequencyTable(dict(zip(symbols, fib)))

    tree = build_tree(table)
    assert tree.depth() == len(fib) - 1
    codes = generate_codes(tree)
    assert len(codes) == len(fib)
    assert max(len(code) for code in codes.values()) == len(fib) - 1
    assert is_prefix_free(codes)


@pytest.mark.parametrize("counts", [
    [3, 2, 1],
    [1, 1, 1, 1],
    [5, 1, 1, 1, 1],
    [10, 7, 3, 2, 1],
    [4, 4, 2, 2, 1],
    [1, 2, 4, 8, 16],
])
def test_weighted_length_is_optimal(counts):
    table = FrequencyTable({chr(ord("a") + i): c for i, c in enumerate(counts)})
    codes = generate_codes(build_tree(table))
    assert weighted_code_length(table, codes) == optimal_weighted_length(counts)


def test_random_texts_keep_invariants():
    rng = random.Random(1234)
    alphabet = "abcdefghijklmnopqrstuvwxyz ÄÖÜß0123456789.,;"
    for _ in range(50):
        text = "".join(rng.choice(alphabet[:rng.randint(1, len(alphabet))]) for _ in range(rng.randint(1, 400)))
        table, kept = count_symbols(text)
        tree = build_tree(table)
        codes = generate_codes(tree)

        assert len(tree.leaves()) == len(table)
        assert len(codes) == len(table)
        assert tree.weight == table.total
        if len(codes) >= 2:
            assert is_prefix_free(codes)
            assert len(set(codes.values())) == len(codes)
        assert encode(kept, codes).bit_count == weighted_code_length(table, codes)


def test_is_prefix_free_detects_prefixes():
    assert is_prefix_free({"a": "0", "b": "10", "c": "11"})
    assert not is_prefix_free({"a": "0", "b": "01", "c": "11"})
    assert not is_prefix_free({"a": "10", "b": "0", "c": "101"})
    assert is_prefix_free({})


def test_huffman_coder(aaabbc_table):
    coder = HuffmanCoder().train(aaabbc_table)
    assert coder.codelengths == {"a": 1, "b": 2, "c": 2}
    assert coder.is_prefix_free()
    assert coder.weighted_length() == 9
    assert coder.encode("cab").bits == "10011"


def test_huffman_coder_from_text():
    coder = HuffmanCoder.from_text("aaabbc\n")
    assert coder.encode("aaabbc").bit_count == 9


def test_huffman_coder_requires_training():
    coder = HuffmanCoder()
    with pytest.raises(RuntimeError):
        coder.encode("abc")
    with pytest.raises(RuntimeError):
        coder.weighted_length()
