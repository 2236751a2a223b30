"""Binary tree nodes and the traversals shared by the binary search trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional, TextIO


@dataclass
class Node:
    """A node of a binary tree holding an integer value."""

    value: int
    left: Optional[Node] = None
    right: Optional[Node] = None


def height(node: Optional[Node]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if node is None:
        return 0
    return 1 + max(height(node.left), height(node.right))


def _preorder(node: Optional[Node]) -> Iterator[int]:
    if node is None:
        return
    yield node.value
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _inorder(node: Optional[Node]) -> Iterator[int]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.value
    yield from _inorder(node.right)


def _postorder(node: Optional[Node]) -> Iterator[int]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node.value


class BinaryTree:
    """A binary tree ordered as a search tree, with the usual traversals."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None

    def __contains__(self, value: object) -> bool:
        node = self.root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __iter__(self) -> Iterator[int]:
        return iter(self.inorder_iterative())

    def preorder(self) -> list[int]:
        """Root, left subtree, right subtree, computed recursively."""
        return list(_preorder(self.root))

    def inorder(self) -> list[int]:
        """Left subtree, root, right subtree, computed recursively."""
        return list(_inorder(self.root))

    def postorder(self) -> list[int]:
        """Left subtree, right subtree, root, computed recursively."""
        return list(_postorder(self.root))

    def preorder_iterative(self) -> list[int]:
        """Preorder traversal driven by an explicit stack."""
        result: list[int] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def inorder_iterative(self) -> list[int]:
        """Inorder traversal driven by an explicit stack."""
        result: list[int] = []
        stack: list[Node] = []
        node = self.root
        while node is not None or stack:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def postorder_iterative(self) -> list[int]:
        """Postorder traversal driven by two explicit stacks."""
        pending = [self.root] if self.root is not None else []
        visited: list[Node] = []
        while pending:
            node = pending.pop()
            visited.append(node)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        return [node.value for node in reversed(visited)]

    def level_order(self) -> list[int]:
        """Breadth-first traversal, level by level from the root."""
        result: list[int] = []
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def height(self) -> int:
        """Number of levels in the tree; zero when it is empty."""
        return height(self.root)


def _int_tokens(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _next_int(tokens: Iterator[int]) -> int:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("input ended") from None


def _format(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values)