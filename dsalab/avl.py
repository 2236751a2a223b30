"""Self-balancing AVL search tree."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from itertools import islice
from typing import Optional

from dsalab.nodes import BinaryTree, Node, _format, _int_tokens, _next_int, height


def balance_factor(node: Optional[Node]) -> int:
    """Height of the left subtree minus the height of the right subtree."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def rotate_right(node: Node) -> Node:
    """Rotate the subtree right around ``node`` and return its new root."""
    pivot = node.left
    if pivot is None:
        raise ValueError("cannot rotate right a node without a left child")
    node.left = pivot.right
    pivot.right = node
    return pivot


def rotate_left(node: Node) -> Node:
    """Rotate the subtree left around ``node`` and return its new root."""
    pivot = node.right
    if pivot is None:
        raise ValueError("cannot rotate left a node without a right child")
    node.right = pivot.left
    pivot.left = node
    return pivot


def _insert(node: Optional[Node], value: int) -> Node:
    if node is None:
        return Node(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    elif value > node.value:
        node.right = _insert(node.right, value)
    else:
        return node

    balance = balance_factor(node)
    if balance > 1 and value < node.left.value:
        return rotate_right(node)
    if balance < -1 and value > node.right.value:
        return rotate_left(node)
    if balance > 1 and value > node.left.value:
        node.left = rotate_left(node.left)
        return rotate_right(node)
    if balance < -1 and value < node.right.value:
        node.right = rotate_right(node.right)
        return rotate_left(node)
    return node


class AVLTree(BinaryTree):
    """A binary search tree kept height-balanced; duplicates are ignored."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        super().__init__()
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Insert ``value`` and rebalance along the insertion path."""
        self.root = _insert(self.root, value)


_TRAVERSALS = {
    3: ("PreOrder Traversal (Recursive)", BinaryTree.preorder),
    4: ("InOrder Traversal (Recursive)", BinaryTree.inorder),
    5: ("PostOrder Traversal (Recursive)", BinaryTree.postorder),
    6: ("PreOrder Traversal (Non-Recursive)", BinaryTree.preorder_iterative),
    7: ("InOrder Traversal (Non-Recursive)", BinaryTree.inorder_iterative),
    8: ("PostOrder Traversal (Non-Recursive)", BinaryTree.postorder_iterative),
}

_MENU = "\n".join(
    ["1. Search the data", "2. Insert the data"]
    + [f"{number}. {label}" for number, (label, _) in _TRAVERSALS.items()]
)

_LAST_CHOICE = 8


def _session(tokens: Iterator[int]) -> None:
    print("How many values do you want to insert")
    count = _next_int(tokens)
    if count <= 0:
        print("Please enter a valid value")
        return
    tree = AVLTree(islice(tokens, count))

    while True:
        print(f"\nWhich action do you want to perform \n{_MENU}\n")
        choice = _next_int(tokens)
        if choice == 1:
            print("Enter a number to search: ", end="")
            number = _next_int(tokens)
            print(f"Data is found {number}" if number in tree else "Data not found")
        elif choice == 2:
            print("Enter the value you want to insert")
            tree.insert(_next_int(tokens))
            print("PreOrder Traversal after insertion is ")
            print(_format(tree.preorder()), end="")
        elif choice in _TRAVERSALS:
            _, traverse = _TRAVERSALS[choice]
            print(_format(traverse(tree)))
        if choice == _LAST_CHOICE:
            return


def main(argv: Optional[list[str]] = None) -> int:
    """Build an AVL tree from standard input and explore it through a menu."""
    argparse.ArgumentParser(
        prog="dsalab-avl",
        description="Build an AVL tree from integers on standard input and explore it.",
    ).parse_args(argv)
    try:
        _session(_int_tokens(sys.stdin))
    except EOFError:
        pass
    except ValueError as exc:
        print(f"Invalid input: {exc}")
        return 1
    return 0