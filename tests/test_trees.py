import pytest
from hypothesis import given
from hypothesis import strategies as st

from verialgo.trees import BSTNode, HuffmanNode, bst_search, build_huffman


def _insert(root, key):
    if root is None:
        return BSTNode(key)
    if key < root.key:
        root.left = _insert(root.left, key)
    else:
        root.right = _insert(root.right, key)
    return root


def _build(keys):
    root = None
    for key in keys:
        root = _insert(root, key)
    return root


def _leaves(node):
    if node.left is None and node.right is None:
        return [node]
    return _leaves(node.left) + _leaves(node.right)


def test_bst_search_empty_tree():
    assert bst_search(None, 5) is None


def test_bst_search_finds_node():
    root = _build([8, 3, 10, 1, 6, 14])
    found = bst_search(root, 6)
    assert found is root.left.right
    assert found.key == 6


def test_bst_search_missing_key():
    root = _build([8, 3, 10, 1, 6, 14])
    assert bst_search(root, 7) is None


@given(st.lists(st.integers(min_value=-100, max_value=100), unique=True, min_size=1), st.data())
def test_bst_search_all_present_keys(keys, data):
    root = _build(keys)
    key = data.draw(st.sampled_from(keys))
    assert bst_search(root, key).key == key


@given(st.lists(st.integers(min_value=-100, max_value=100), unique=True), st.integers(min_value=101, max_value=200))
def test_bst_search_absent_keys(keys, key):
    assert bst_search(_build(keys), key) is None


def test_build_huffman_single_node_is_root():
    leaf = HuffmanNode("a", 4)
    assert build_huffman([leaf]) is leaf


def test_build_huffman_tie_breaking_structure():
    a, b, c = HuffmanNode("a", 1), HuffmanNode("b", 2), HuffmanNode("c", 3)
    root = build_huffman([a, b, c])
    assert root.symbol is None
    assert root.freq == a.freq + b.freq + c.freq
    assert root.left is c
    assert root.right.left is a
    assert root.right.right is b


@given(st.lists(st.integers(min_value=1, max_value=1000), min_size=1, max_size=30))
def test_build_huffman_preserves_leaves_and_total(freqs):
    nodes = [HuffmanNode(str(i), f) for i, f in enumerate(freqs)]
    original = list(nodes)
    root = build_huffman(nodes)
    assert nodes == original
    assert root.freq == sum(freqs)
    leaves = _leaves(root)
    assert sorted(id(n) for n in leaves) == sorted(id(n) for n in nodes)


@given(st.lists(st.integers(min_value=1, max_value=1000), min_size=2, max_size=30))
def test_build_huffman_internal_freq_is_sum_of_children(freqs):
    root = build_huffman([HuffmanNode(str(i), f) for i, f in enumerate(freqs)])
    stack = [root]
    while stack:
        node = stack.pop()
        if node.left is not None:
            assert node.freq == node.left.freq + node.right.freq
            stack.extend([node.left, node.right])


def test_build_huffman_rejects_empty():
    with pytest.raises(ValueError):
        build_huffman([])


def test_build_huffman_rejects_non_positive_frequency():
    with pytest.raises(ValueError):
        build_huffman([HuffmanNode("a", 0), HuffmanNode("b", 1)])