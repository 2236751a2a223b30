"""Binary search tree whose empty child links are threads to inorder neighbours."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Optional

from dsalab.nodes import _format, _int_tokens, _next_int


@dataclass(eq=False, repr=False)
class ThreadedNode:
    """A node whose links are threads when the matching flag is set."""

    value: int
    left: Optional[ThreadedNode] = None
    right: Optional[ThreadedNode] = None
    left_thread: bool = True
    right_thread: bool = True

    def __repr__(self) -> str:
        return (
            f"ThreadedNode({self.value}, left_thread={self.left_thread}, "
            f"right_thread={self.right_thread})"
        )

    def children(self) -> Iterator[ThreadedNode]:
        """Yield the real (non-thread) children, left first."""
        if not self.left_thread and self.left is not None:
            yield self.left
        if not self.right_thread and self.right is not None:
            yield self.right


def _walk(node: ThreadedNode, order: str) -> Iterator[int]:
    if order == "pre":
        yield node.value
    if not node.left_thread:
        yield from _walk(node.left, order)
    if order == "in":
        yield node.value
    if not node.right_thread:
        yield from _walk(node.right, order)
    if order == "post":
        yield node.value


class ThreadedBinaryTree:
    """Threaded search tree; equal values go to the right subtree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Optional[ThreadedNode] = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Insert ``value`` as a leaf, threading it to its inorder neighbours."""
        if self.root is None:
            self.root = ThreadedNode(value)
            return
        node = self.root
        while True:
            if value < node.value:
                if node.left_thread:
                    node.left = ThreadedNode(value, left=node.left, right=node)
                    node.left_thread = False
                    return
                node = node.left
            else:
                if node.right_thread:
                    node.right = ThreadedNode(value, left=node, right=node.right)
                    node.right_thread = False
                    return
                node = node.right

    def search(self, value: int) -> Optional[ThreadedNode]:
        """Return the first node holding ``value``, or None."""
        node = self.root
        while node is not None and node.value != value:
            if value < node.value:
                node = None if node.left_thread else node.left
            else:
                node = None if node.right_thread else node.right
        return node

    def __contains__(self, value: object) -> bool:
        return self.search(value) is not None

    def _traverse(self, order: str) -> list[int]:
        return [] if self.root is None else list(_walk(self.root, order))

    def preorder(self) -> list[int]:
        """Preorder traversal, computed recursively over real children."""
        return self._traverse("pre")

    def inorder(self) -> list[int]:
        """Inorder traversal, computed recursively over real children."""
        return self._traverse("in")

    def postorder(self) -> list[int]:
        """Postorder traversal, computed recursively over real children."""
        return self._traverse("post")

    def preorder_iterative(self) -> list[int]:
        """Preorder traversal that follows threads instead of using a stack."""
        result: list[int] = []
        node = self.root
        while node is not None:
            result.append(node.value)
            if not node.left_thread:
                node = node.left
            elif not node.right_thread:
                node = node.right
            else:
                while node is not None and node.right_thread:
                    node = node.right
                if node is not None:
                    node = node.right
        return result

    def inorder_iterative(self) -> list[int]:
        """Inorder traversal that follows threads instead of using a stack."""
        result: list[int] = []
        node = self.root
        if node is None:
            return result
        while not node.left_thread:
            node = node.left
        while node is not None:
            result.append(node.value)
            descend = not node.right_thread
            node = node.right
            while descend and node is not None and not node.left_thread:
                node = node.left
        return result

    def postorder_iterative(self) -> list[int]:
        """Postorder traversal driven by two explicit stacks."""
        pending = [self.root] if self.root is not None else []
        visited: list[ThreadedNode] = []
        while pending:
            node = pending.pop()
            visited.append(node)
            pending.extend(node.children())
        return [node.value for node in reversed(visited)]


# Recursive traversals print no trailing newline; the thread-following ones do.
_TRAVERSALS = {
    3: ("PreOrder Traversal (Recursive)", ThreadedBinaryTree.preorder, ""),
    4: ("InOrder Traversal (Recursive)", ThreadedBinaryTree.inorder, ""),
    5: ("PostOrder Traversal (Recursive)", ThreadedBinaryTree.postorder, ""),
    6: ("PreOrder Traversal (Non-Recursive)", ThreadedBinaryTree.preorder_iterative, "\n"),
    7: ("InOrder Traversal (Non-Recursive)", ThreadedBinaryTree.inorder_iterative, "\n"),
    8: ("PostOrder Traversal (Non-Recursive)", ThreadedBinaryTree.postorder_iterative, "\n"),
}

_MENU = "\n".join(
    ["1. Search the data", "2. Insert the data"]
    + [f"{number}. {label}" for number, (label, _, _) in _TRAVERSALS.items()]
)

_QUIT_CHOICE = 9


def _session(tokens: Iterator[int]) -> None:
    print("How Many nodes do you want to insert ")
    count = _next_int(tokens)
    if count <= 0:
        print("Enter a valid number")
    print("Enter the nodes")
    tree = ThreadedBinaryTree(islice(tokens, max(count, 0)))

    while True:
        print(f"\nWhich action do you want to perform \n{_MENU}\n")
        choice = _next_int(tokens)
        if choice == 1:
            print("Enter the value you want to search")
            value = _next_int(tokens)
            if value not in tree:
                print(f"Node not found {value}")
        elif choice == 2:
            print("Enter the value you want to insert")
            tree.insert(_next_int(tokens))
        elif choice in _TRAVERSALS:
            _, traverse, end = _TRAVERSALS[choice]
            print(_format(traverse(tree)), end=end)
        else:
            print("Enter a valid choice")
            if choice == _QUIT_CHOICE:
                return


def main(argv: Optional[list[str]] = None) -> int:
    """Build a threaded binary tree from standard input and explore it through a menu."""
    argparse.ArgumentParser(
        prog="dsalab-threaded",
        description="Build a threaded binary tree from integers on standard input and explore it.",
    ).parse_args(argv)
    try:
        _session(_int_tokens(sys.stdin))
    except EOFError:
        pass
    except ValueError as exc:
        print(f"Invalid input: {exc}")
        return 1
    return 0