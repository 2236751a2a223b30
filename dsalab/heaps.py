"""Heap sort in ascending order with a max-heap and descending with a min-heap."""

from __future__ import annotations

import argparse
import operator
import sys
from collections.abc import Callable, Iterable, Iterator, MutableSequence
from typing import Optional

from dsalab.nodes import _format, _int_tokens, _next_int


def _sift_down(
    items: MutableSequence[int],
    size: int,
    index: int,
    before: Callable[[int, int], bool],
) -> None:
    while True:
        best = index
        left = 2 * index + 1
        right = left + 1
        if left < size and before(items[left], items[best]):
            best = left
        if right < size and before(items[right], items[best]):
            best = right
        if best == index:
            return
        items[index], items[best] = items[best], items[index]
        index = best


def max_heapify(items: MutableSequence[int], size: int, index: int) -> None:
    """Sift ``items[index]`` down within the first ``size`` items of a max-heap."""
    _sift_down(items, size, index, operator.gt)


def min_heapify(items: MutableSequence[int], size: int, index: int) -> None:
    """Sift ``items[index]`` down within the first ``size`` items of a min-heap."""
    _sift_down(items, size, index, operator.lt)


def _heap_sort(
    items: Iterable[int], heapify: Callable[[MutableSequence[int], int, int], None]
) -> list[int]:
    data = list(items)
    count = len(data)
    for index in reversed(range(count // 2)):
        heapify(data, count, index)
    for end in reversed(range(1, count)):
        data[0], data[end] = data[end], data[0]
        heapify(data, end, 0)
    return data


def heap_sort_ascending(items: Iterable[int]) -> list[int]:
    """Return the items sorted from smallest to largest."""
    return _heap_sort(items, max_heapify)


def heap_sort_descending(items: Iterable[int]) -> list[int]:
    """Return the items sorted from largest to smallest."""
    return _heap_sort(items, min_heapify)


def _session(tokens: Iterator[int]) -> None:
    print("Enter the number of elements: ")
    count = _next_int(tokens)
    print("Enter the elements: ")
    values = [_next_int(tokens) for _ in range(max(count, 0))]

    print("Original Array is: ")
    print(_format(values))
    print("Sorted Array in ascending order is: " + _format(heap_sort_ascending(values)))
    print("Sorted Array in descending order is: " + _format(heap_sort_descending(values)))


def main(argv: Optional[list[str]] = None) -> int:
    """Read integers from standard input and print them heap-sorted both ways."""
    parser = argparse.ArgumentParser(
        prog="dsalab-heaps",
        description="Heap-sort integers read from standard input.",
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