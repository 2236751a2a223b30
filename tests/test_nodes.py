import random

import pytest

from dsalab.nodes import BinaryTree, Node, height


def _sample_tree():
    tree = BinaryTree()
    tree.root = Node(
        1,
        Node(2, Node(4), Node(5)),
        Node(3, Node(6), Node(7)),
    )
    return tree


def _random_tree(seed, size):
    rng = random.Random(seed)
    tree = BinaryTree()
    for value in range(size):
        node = Node(value)
        if tree.root is None:
            tree.root = node
            continue
        current = tree.root
        while True:
            side = rng.choice(("left", "right"))
            child = getattr(current, side)
            if child is None:
                setattr(current, side, node)
                break
            current = child
    return tree


def _heap_numbered_tree(size):
    nodes = {index: Node(index) for index in range(1, size + 1)}
    for index, node in nodes.items():
        node.left = nodes.get(2 * index)
        node.right = nodes.get(2 * index + 1)
    tree = BinaryTree()
    tree.root = nodes.get(1)
    return tree


def test_sample_preorder():
    assert _sample_tree().preorder() == [1, 2, 4, 5, 3, 6, 7]


def test_sample_inorder():
    assert _sample_tree().inorder() == [4, 2, 5, 1, 6, 3, 7]


def test_sample_postorder():
    assert _sample_tree().postorder() == [4, 5, 2, 6, 7, 3, 1]


@pytest.mark.parametrize("seed", range(8))
def test_iterative_traversals_match_recursive(seed):
    tree = _random_tree(seed, 40)
    assert tree.preorder_iterative() == tree.preorder()
    assert tree.inorder_iterative() == tree.inorder()
    assert tree.postorder_iterative() == tree.postorder()


@pytest.mark.parametrize("seed", range(5))
def test_traversals_visit_every_node_once(seed):
    size = 25
    tree = _random_tree(seed, size)
    expected = list(range(size))
    for order in (tree.preorder(), tree.inorder(), tree.postorder(), tree.level_order()):
        assert sorted(order) == expected


@pytest.mark.parametrize("seed", range(5))
def test_root_position_in_traversals(seed):
    tree = _random_tree(seed, 15)
    root = tree.root.value
    assert tree.preorder()[0] == root
    assert tree.postorder()[-1] == root
    assert tree.level_order()[0] == root


@pytest.mark.parametrize("size", [1, 2, 6, 15, 20])
def test_level_order_of_heap_numbered_tree(size):
    assert _heap_numbered_tree(size).level_order() == list(range(1, size + 1))


def test_iter_yields_inorder():
    tree = _random_tree(3, 30)
    assert list(tree) == tree.inorder()


def test_empty_tree():
    tree = BinaryTree()
    assert tree.preorder() == []
    assert tree.inorder_iterative() == []
    assert tree.postorder_iterative() == []
    assert tree.level_order() == []
    assert tree.height() == 0
    assert 1 not in tree


@pytest.mark.parametrize("length", [1, 4, 9])
def test_height_of_chain(length):
    root = None
    for value in range(length):
        root = Node(value, left=root)
    tree = BinaryTree()
    tree.root = root
    assert tree.height() == length
    assert height(root) == length


def test_height_of_none():
    assert height(None) == 0


def test_contains_follows_search_order():
    tree = BinaryTree()
    tree.root = Node(5, Node(3), Node(8))
    assert 3 in tree
    assert 8 in tree
    assert 5 in tree
    assert 4 not in tree