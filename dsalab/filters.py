"""Probabilistic membership and frequency structures: Bloom, Cuckoo, Count-Min."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import Optional, TextIO

from dsalab.nodes import _format

_BLOOM_SEEDS = (0, 1, 2)


def bloom_hashes(item: str, size: int) -> tuple[int, int, int]:
    """Return the three Bloom filter positions of ``item`` in a table of ``size`` bits.

    Each hash adds the byte values of the item to a different starting value
    and reduces the sum modulo ``size``.
    """
    if size <= 0:
        raise ValueError("size must be positive")
    total = sum(item.encode("utf-8"))
    first, second, third = ((seed + total) % size for seed in _BLOOM_SEEDS)
    return first, second, third


class BloomFilter:
    """A Bloom filter with three additive hash functions."""

    def __init__(self, size: int = 10) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self._bits = [0] * size

    def add(self, item: str) -> bool:
        """Set the bits of ``item``; return False if they were all set already."""
        positions = bloom_hashes(item, self.size)
        if item in self:
            return False
        for position in positions:
            self._bits[position] = 1
        return True

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, str):
            return False
        return all(self._bits[position] for position in bloom_hashes(item, self.size))

    def bits(self) -> list[int]:
        """A copy of the bit table."""
        return list(self._bits)


class CuckooFilter:
    """Two tables of integer slots; a colliding value evicts the resident one."""

    def __init__(self, size: int = 10, max_displacements: int = 500) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        if max_displacements < 0:
            raise ValueError("max_displacements must not be negative")
        self.size = size
        self.max_displacements = max_displacements
        self._first: list[Optional[int]] = [None] * size
        self._second: list[Optional[int]] = [None] * size

    def insert(self, value: int) -> None:
        """Place ``value`` in the first table, pushing evicted values onward.

        Raises RuntimeError when a value keeps being evicted for more than
        ``max_displacements`` rounds.
        """
        if value < 0:
            raise ValueError("only non-negative values can be stored")
        pending: Optional[int] = value
        for _ in range(self.max_displacements + 1):
            slot = pending % self.size
            pending, self._first[slot] = self._first[slot], pending
            if pending is None:
                return
            slot = pending // self.size % self.size
            if self._second[slot] is None:
                self._second[slot] = pending
                return
        raise RuntimeError(f"could not place {pending} after {self.max_displacements} displacements")

    def tables(self) -> tuple[list[Optional[int]], list[Optional[int]]]:
        """Copies of both tables; empty slots are None."""
        return list(self._first), list(self._second)


class CountMinSketch:
    """A Count-Min sketch with one polynomial rolling hash per row."""

    def __init__(self, depth: int = 4, width: int = 10000) -> None:
        if depth <= 0 or width <= 0:
            raise ValueError("depth and width must be positive")
        self.depth = depth
        self.width = width
        self._counts = [[0] * width for _ in range(depth)]

    def row_hash(self, item: str, row: int) -> int:
        """Column of ``item`` in the given row."""
        if not 0 <= row < self.depth:
            raise IndexError(f"row {row} out of range")
        multiplier = 33 + 17 * row
        value = 0
        for byte in item.encode("utf-8"):
            value = (multiplier * value + byte) % self.width
        return value

    def add(self, item: str) -> list[int]:
        """Count one occurrence of ``item``; return the column used in each row."""
        columns = [self.row_hash(item, row) for row in range(self.depth)]
        for counts, column in zip(self._counts, columns):
            counts[column] += 1
        return columns

    def estimate(self, item: str) -> int:
        """Upper estimate of how many times ``item`` was added."""
        return min(
            counts[self.row_hash(item, row)] for row, counts in enumerate(self._counts)
        )


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("input ended") from None


def _slots(table: Iterable[Optional[int]]) -> str:
    return _format(-1 if value is None else value for value in table)


def _session(tokens: Iterator[str]) -> None:
    bloom = BloomFilter()
    cuckoo = CuckooFilter()
    sketch = CountMinSketch()

    while True:
        print("1. Bloom Filter")
        print("2. Cuckoo Filter")
        print("3. Count-Min Sketch Filter")
        print("4. Exit")
        print("Enter your choice: ", end="")
        choice = int(_next_token(tokens))
        if choice == 1:
            print("Enter the name to be inserted: ", end="")
            name = _next_token(tokens)
            print("Element inserted" if bloom.add(name) else "Element already exists")
            print("Bloom Filter: " + _format(bloom.bits()))
        elif choice == 2:
            print("Enter the number to be inserted: ", end="")
            number = int(_next_token(tokens))
            try:
                cuckoo.insert(number)
            except (ValueError, RuntimeError) as exc:
                print(exc)
            first, second = cuckoo.tables()
            print(_slots(first))
            print(_slots(second))
        elif choice == 3:
            print("Enter the name to be inserted: ", end="")
            name = _next_token(tokens)
            columns = sketch.add(name)
            print(f"Hash Indices for '{name}': " + _format(columns))
            print("Element Inserted")
            print(f"Estimated frequency of {name}: {sketch.estimate(name)}")
        elif choice == 4:
            print("Exiting...")
            return
        else:
            print("Invalid option! Please try again.")


def main(argv: Optional[list[str]] = None) -> int:
    """Insert items from standard input into the filters through a menu."""
    parser = argparse.ArgumentParser(
        prog="dsalab-filters",
        description="Try out a Bloom filter, a Cuckoo filter and a Count-Min sketch.",
    )
    parser.parse_args(argv)
    try:
        _session(_tokens(sys.stdin))
    except EOFError:
        return 0
    except ValueError as exc:
        print(f"Invalid input: {exc}")
        return 1
    return 0