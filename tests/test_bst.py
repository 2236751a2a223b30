import io
import random

import pytest

from dsalab.bst import BinarySearchTree, main


def _random_values(seed, count=60):
    rng = random.Random(seed)
    return [rng.randint(0, 30) for _ in range(count)]


@pytest.mark.parametrize("seed", range(6))
def test_random_tree_invariants(seed):
    values = _random_values(seed)
    tree = BinarySearchTree(values)
    assert tree.inorder() == sorted(values)
    assert tree.inorder_iterative() == sorted(values)
    assert [c for c in range(-5, 40) if c in tree] == sorted(set(values))


@pytest.mark.parametrize("seed", range(6))
def test_delete_removes_one_occurrence(seed):
    rng = random.Random(seed)
    values = _random_values(seed)
    tree = BinarySearchTree(values)
    remaining = sorted(values)
    for value in rng.sample(values, 20):
        tree.delete(value)
        remaining.remove(value)
        assert tree.inorder() == remaining
        assert tree.postorder_iterative() == tree.postorder()


def test_delete_leaf_one_child_and_two_children():
    values = [50, 30, 70, 20, 40, 60, 80, 65]
    tree = BinarySearchTree(values)
    remaining = sorted(values)
    for value in (20, 60, 50):
        tree.delete(value)
        remaining.remove(value)
        assert tree.inorder() == remaining
        assert value not in tree


def test_delete_until_empty():
    values = [8, 3, 10, 1, 6, 14, 4, 7, 13]
    tree = BinarySearchTree(values)
    for value in values:
        tree.delete(value)
    assert tree.root is None
    assert tree.inorder() == []


@pytest.mark.parametrize("values", [[5, 3, 8], []])
def test_delete_missing_raises_and_keeps_tree(values):
    tree = BinarySearchTree(values)
    before = tree.preorder()
    with pytest.raises(KeyError):
        tree.delete(4)
    assert tree.preorder() == before


@pytest.mark.parametrize("count", [1, 5, 12])
def test_sorted_insertion_degenerates(count):
    assert BinarySearchTree(range(count)).height() == count


def test_level_order_starts_with_first_value():
    values = [9, 4, 15, 2, 7]
    order = BinarySearchTree(values).level_order()
    assert order[0] == values[0]
    assert sorted(order) == sorted(values)


@pytest.mark.parametrize(
    "text, expected",
    [
        (
            "3\n2 1 3\n1\n3\n10\n12\n",
            ["Data is found 3", "The Depth or Height of the binary tree is 2", "Exiting..."],
        ),
        ("1\n5\n11\n7\n12\n", ["No node to delete"]),
        ("1\n5\n11\n5\n9\n12\n", ["Tree is empty"]),
        ("1\n5\n99\n12\n", ["Invalid choice, please try again"]),
        ("-2\n", ["Node inserted is invalid"]),
    ],
)
def test_main_session(monkeypatch, capsys, text, expected):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    out = capsys.readouterr().out
    for snippet in expected:
        assert snippet in out