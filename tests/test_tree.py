import pytest

from satlink.satellite import tokenize
from satlink.tree import build_tree, common_parent, decode, encode

SAMPLE = "4\n10 K1\n5 K2\n20 K3\n7 K4\n"
NAMES = ["K1", "K2", "K3", "K4"]
FREQS = [10, 5, 20, 7]


def _leaves(node):
    if node.is_leaf():
        return [node]
    return [leaf for child in (node.left, node.right) if child for leaf in _leaves(child)]


def _nodes(node):
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(c for c in (current.left, current.right) if c)


@pytest.fixture
def root():
    return build_tree(tokenize(SAMPLE))


def test_root_sums_frequencies(root):
    assert root.data == sum(FREQS)
    assert root.parent is None


def test_leaves_are_the_input(root):
    assert sorted(leaf.name for leaf in _leaves(root)) == sorted(NAMES)


def test_internal_nodes_join_children(root):
    for node in _nodes(root):
        if not node.is_leaf():
            assert node.data == node.left.data + node.right.data
            assert node.name == node.left.name + node.right.name
            assert not node.left < node.right or node.left.data <= node.right.data


def test_parent_links(root):
    for node in _nodes(root):
        for child in (node.left, node.right):
            if child is not None:
                assert child.parent is node


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        build_tree(tokenize("0"))


def test_truncated_input_rejected():
    with pytest.raises(ValueError):
        build_tree(tokenize("2 5 A"))


@pytest.mark.parametrize("name", NAMES)
def test_encode_decode_round_trip(root, name):
    bits = encode(root, tokenize(f"1 {name}")).strip()
    assert set(bits) <= {"0", "1"}
    assert decode(root, tokenize(f"1 {bits}")) == f"{name}\n"


def test_encode_many_decodes_to_sequence(root):
    bits = encode(root, tokenize("3 K1 K4 K3")).strip()
    assert decode(root, tokenize(f"1 {bits}")) == "K1 K4 K3\n"


def test_decode_multiple_lines(root):
    a = encode(root, tokenize("1 K2")).strip()
    b = encode(root, tokenize("1 K3")).strip()
    assert decode(root, tokenize(f"2 {a} {b}")) == "K2\nK3\n"


def test_decode_stopping_inside_tree_prints_nothing(root):
    internal = next(n for n in _nodes(root) if not n.is_leaf() and n is not root)
    prefix = encode(root, tokenize(f"1 {_leaves(internal)[0].name}")).strip()
    depth = 0
    node = internal
    while node is not root:
        node = node.parent
        depth += 1
    assert decode(root, tokenize(f"1 {prefix[:depth]}")) == "\n"


def test_codes_are_prefix_free(root):
    codes = [encode(root, tokenize(f"1 {n}")).strip() for n in NAMES]
    for a in codes:
        for b in codes:
            if a != b:
                assert not b.startswith(a)


def test_encode_distinguishes_two_char_prefix():
    tree = build_tree(tokenize("3\n1 K11\n2 K1\n10 K2"))
    k1 = encode(tree, tokenize("1 K1")).strip()
    k11 = encode(tree, tokenize("1 K11")).strip()
    assert k1 != k11
    assert decode(tree, tokenize(f"1 {k1}")) == "K1\n"
    assert decode(tree, tokenize(f"1 {k11}")) == "K11\n"


def test_decode_single_satellite_rejected():
    tree = build_tree(tokenize("1 4 A"))
    with pytest.raises(ValueError):
        decode(tree, tokenize("1 0"))


def test_common_parent_of_siblings(root):
    k2 = next(n for n in _nodes(root) if n.name == "K2")
    assert common_parent(root, tokenize("2 K2 K4")) == f"{k2.parent.name}\n"


def test_common_parent_single_name(root):
    assert common_parent(root, tokenize("1 K3")) == "K3\n"


def test_common_parent_spanning_root(root):
    assert common_parent(root, tokenize("2 K3 K4")) == f"{root.name}\n"


def test_common_parent_covers_all(root):
    result = common_parent(root, tokenize("3 K1 K2 K4")).strip()
    for name in ("K1", "K2", "K4"):
        assert name in result
    assert "K3" not in result


def test_common_parent_unknown_name(root):
    with pytest.raises(ValueError):
        common_parent(root, tokenize("1 ZZ"))