"""Minimum spanning trees by Prim's and Kruskal's algorithms."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Optional

from dsalab.nodes import _int_tokens, _next_int

INF = 2**31 - 1
"""Weight that marks a missing edge in an adjacency matrix."""


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge."""

    source: int
    target: int
    weight: int

    def __str__(self) -> str:
        return f"{self.source} - {self.target} Weight = {self.weight}"


class DisjointSet:
    """Union-find over ``0..size-1`` with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, first: int, second: int) -> bool:
        """Merge the sets of both items; return False if they were already one."""
        first_root = self.find(first)
        second_root = self.find(second)
        if first_root == second_root:
            return False
        if self._rank[first_root] < self._rank[second_root]:
            self._parent[first_root] = second_root
        elif self._rank[first_root] > self._rank[second_root]:
            self._parent[second_root] = first_root
        else:
            self._parent[second_root] = first_root
            self._rank[first_root] += 1
        return True


def _is_edge(weight: Optional[int]) -> bool:
    return weight is not None and weight != INF


def _check_square(matrix: Sequence[Sequence[Optional[int]]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return size


def edges_from_matrix(matrix: Sequence[Sequence[Optional[int]]]) -> list[Edge]:
    """Edges above the diagonal; None or INF means no edge."""
    _check_square(matrix)
    return [
        Edge(i, j, weight)
        for i, row in enumerate(matrix)
        for j, weight in enumerate(row)
        if i < j and _is_edge(weight)
    ]


def prim_mst(matrix: Sequence[Sequence[Optional[int]]]) -> list[Edge]:
    """Grow a spanning tree from vertex 0; one edge per other vertex, in vertex order.

    Raises ValueError if the graph is not connected.
    """
    size = _check_square(matrix)
    if size == 0:
        return []
    key = [math.inf] * size
    parent: list[Optional[int]] = [None] * size
    in_tree = [False] * size
    key[0] = 0

    for _ in range(size - 1):
        u = min((v for v, done in enumerate(in_tree) if not done), key=key.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(matrix[u]):
            if not in_tree[v] and _is_edge(weight) and weight < key[v]:
                parent[v] = u
                key[v] = weight

    if any(p is None for p in parent[1:]):
        raise ValueError("graph is not connected")
    return [Edge(p, v, matrix[v][p]) for v, p in enumerate(parent) if p is not None]


def kruskal_mst(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Pick the lightest edges that join separate components, in weight order."""
    components = DisjointSet(vertex_count)
    result: list[Edge] = []
    if vertex_count <= 1:
        return result
    for edge in sorted(edges, key=lambda e: e.weight):
        if components.union(edge.source, edge.target):
            result.append(edge)
            if len(result) == vertex_count - 1:
                break
    return result


def total_weight(edges: Iterable[Edge]) -> int:
    """Sum of the edge weights."""
    return sum(edge.weight for edge in edges)


def _session(tokens: Iterator[int]) -> None:
    print("Enter number of vertices: ", end="")
    size = max(_next_int(tokens), 0)
    print(f"Enter adjacency matrix (enter INF = {INF} for no edge):")
    matrix = [[_next_int(tokens) for _ in range(size)] for _ in range(size)]
    edges = edges_from_matrix(matrix)

    while True:
        print()
        print("Menu:")
        print("1. Prim's Algorithm")
        print("2. Kruskal's Algorithm")
        print("3. Exit")
        print("Enter your choice: ", end="")
        choice = _next_int(tokens)
        if choice == 1:
            print()
            print("--- Prim's Algorithm ---")
            try:
                tree = prim_mst(matrix)
            except ValueError as exc:
                print(exc)
                continue
            print("Edges in MST:")
            for edge in tree:
                print(edge)
            print(f"Cost of Minimum Spanning Tree (Prim's): {total_weight(tree)}")
        elif choice == 2:
            tree = kruskal_mst(size, edges)
            print()
            print("--- Kruskal's Algorithm ---")
            print("Edges in MST:")
            for edge in tree:
                print(edge)
            print(f"Cost of Minimum Spanning Tree (Kruskal's): {total_weight(tree)}")
        elif choice == 3:
            print("Exiting...")
            return
        else:
            print("Invalid choice. Try again.")


def main(argv: Optional[list[str]] = None) -> int:
    """Read an adjacency matrix from standard input and print its spanning trees."""
    parser = argparse.ArgumentParser(
        prog="dsalab-mst",
        description="Compute minimum spanning trees of a graph read from standard input.",
    )
    parser.parse_args(argv)
    try:
        _session(_int_tokens(sys.stdin))
    except EOFError:
        return 0
    except ValueError as exc:
        print(f"Invalid input: {exc}")
        return 1
    return 0