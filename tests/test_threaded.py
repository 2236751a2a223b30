import io
import random

import pytest

from dsalab.threaded import ThreadedBinaryTree, main


def _random_tree(seed, count=50):
    rng = random.Random(seed)
    values = [rng.randint(0, 40) for _ in range(count)]
    return values, ThreadedBinaryTree(values)


def _inorder_nodes(node):
    if node is None:
        return []
    left = [] if node.left_thread else _inorder_nodes(node.left)
    right = [] if node.right_thread else _inorder_nodes(node.right)
    return left + [node] + right


@pytest.mark.parametrize("seed", range(6))
def test_random_tree_traversals(seed):
    values, tree = _random_tree(seed)
    assert tree.inorder() == sorted(values)
    assert tree.inorder_iterative() == sorted(values)
    assert tree.preorder_iterative() == tree.preorder()
    assert tree.postorder_iterative() == tree.postorder()


@pytest.mark.parametrize("seed", range(6))
def test_threads_point_to_inorder_neighbours(seed):
    _, tree = _random_tree(seed)
    nodes = _inorder_nodes(tree.root)
    padded = [None, *nodes, None]
    for position, node in enumerate(nodes, start=1):
        if node.left_thread:
            assert node.left is padded[position - 1]
        if node.right_thread:
            assert node.right is padded[position + 1]


def test_preorder_of_small_tree():
    assert ThreadedBinaryTree([5, 3, 8, 1, 4]).preorder() == [5, 3, 1, 4, 8]


def test_preorder_starts_and_postorder_ends_with_root():
    values = [20, 10, 30, 5, 15, 25, 35]
    tree = ThreadedBinaryTree(values)
    assert tree.preorder_iterative()[0] == values[0]
    assert tree.postorder_iterative()[-1] == values[0]


def test_search_found_and_missing():
    tree = ThreadedBinaryTree([7, 2, 9, 2, 11])
    assert tree.search(9).value == 9
    assert tree.search(3) is None
    assert 11 in tree
    assert 12 not in tree


def test_empty_tree():
    tree = ThreadedBinaryTree()
    assert tree.search(1) is None
    traversals = (
        tree.preorder,
        tree.inorder_iterative,
        tree.preorder_iterative,
        tree.postorder_iterative,
    )
    assert [traverse() for traverse in traversals] == [[]] * len(traversals)


def test_duplicates_are_kept():
    assert ThreadedBinaryTree([4, 4, 4]).inorder_iterative() == [4, 4, 4]


@pytest.mark.parametrize(
    "text, code, expected",
    [
        ("2\n5 3\n1\n42\n9\n", 0, ["Node not found 42"]),
        ("0\n9\n", 0, ["Enter a valid number", "Enter a valid choice"]),
        ("1\n5\n2\n3\n7\n9\n", 0, ["3 5 \n"]),
        ("1\nxyz\n", 1, ["Invalid input"]),
    ],
)
def test_main_session(monkeypatch, capsys, text, code, expected):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == code
    out = capsys.readouterr().out
    for snippet in expected:
        assert snippet in out