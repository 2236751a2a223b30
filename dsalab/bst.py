"""Unbalanced binary search tree with deletion."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from itertools import islice
from typing import Optional

from dsalab.nodes import BinaryTree, Node, _format, _int_tokens, _next_int


def _delete(node: Optional[Node], value: int) -> Optional[Node]:
    if node is None:
        raise KeyError(value)
    if value < node.value:
        node.left = _delete(node.left, value)
    elif value > node.value:
        node.right = _delete(node.right, value)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node.right = _delete(node.right, successor.value)
    return node


class BinarySearchTree(BinaryTree):
    """A binary search tree; equal values are placed in the left subtree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        super().__init__()
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Insert ``value`` as a new leaf."""
        new_node = Node(value)
        if self.root is None:
            self.root = new_node
            return
        node = self.root
        while True:
            side = "left" if value <= node.value else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, new_node)
                return
            node = child

    def delete(self, value: int) -> None:
        """Remove one occurrence of ``value``; raise KeyError if absent."""
        self.root = _delete(self.root, value)


_TRAVERSALS = {
    3: ("PreOrder Traversal (Recursive)", BinaryTree.preorder),
    4: ("InOrder Traversal (Recursive)", BinaryTree.inorder),
    5: ("PostOrder Traversal (Recursive)", BinaryTree.postorder),
    6: ("PreOrder Traversal (Non-recursive)", BinaryTree.preorder_iterative),
    7: ("InOrder Traversal (Non-Recursive)", BinaryTree.inorder_iterative),
    8: ("PostOrder Traversal (Non-Recursive)", BinaryTree.postorder_iterative),
}

_MENU = "\n".join(
    ["1. Search the data", "2. Insert the data"]
    + [f"{number}. {label}" for number, (label, _) in _TRAVERSALS.items()]
    + [
        "9. Breadth First Search/ Level Order Printing",
        "10. Height/Depth of the binary tree",
        "11. Delete the particular node",
        "12. Exit",
    ]
)


def _level_order_report(tree: BinarySearchTree) -> str:
    header = "Breadth First Search/ Level Order Printing of the tree is "
    if tree.root is None:
        return f"{header}\nTree is empty"
    return f"{header}\n{_format(tree.level_order())}"


def _delete_interactively(tree: BinarySearchTree, tokens: Iterator[int]) -> None:
    print("Enter the value you want to delete ")
    try:
        tree.delete(_next_int(tokens))
    except KeyError:
        print("No node to delete")
    print("Data is deleted ")
    print(_format(tree.inorder()))


def _session(tokens: Iterator[int]) -> None:
    print("How many nodes do you want to insert: ", end="")
    count = _next_int(tokens)
    if count <= 0:
        print("Node inserted is invalid")
        return
    print("Enter the nodes")
    tree = BinarySearchTree(islice(tokens, count))

    while True:
        print(f"Enter which action do you want to perform:\n{_MENU}")
        choice = _next_int(tokens)
        if choice == 1:
            print("Enter a number to search: ", end="")
            number = _next_int(tokens)
            print(f"Data is found {number}" if number in tree else "Data not found")
        elif choice == 2:
            print("Enter the data you want to insert ", end="")
            tree.insert(_next_int(tokens))
            print("Data is inserted ")
            print(_format(tree.inorder()))
        elif choice in _TRAVERSALS:
            _, traverse = _TRAVERSALS[choice]
            print(_format(traverse(tree)))
        elif choice == 9:
            print(_level_order_report(tree))
        elif choice == 10:
            print(f"The Depth or Height of the binary tree is {tree.height()}")
        elif choice == 11:
            _delete_interactively(tree, tokens)
        elif choice == 12:
            print("Exiting...")
            return
        else:
            print("Invalid choice, please try again")


def main(argv: Optional[list[str]] = None) -> int:
    """Build a binary search tree from standard input and explore it through a menu."""
    argparse.ArgumentParser(
        prog="dsalab-bst",
        description="Build a binary search tree from integers on standard input and explore it.",
    ).parse_args(argv)
    try:
        _session(_int_tokens(sys.stdin))
    except EOFError:
        pass
    except ValueError as exc:
        print(f"Invalid input: {exc}")
        return 1
    return 0