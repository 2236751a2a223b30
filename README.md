# dsalab

A small collection of classic data structures and algorithms. Each one
can be used as a library, and each has a command-line program that
reads integers or words from standard input and drives it through a
numbered menu.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module            | Contents                                                                              |
|-------------------|---------------------------------------------------------------------------------------|
| `dsalab.nodes`    | `Node`, `height`, and the `BinaryTree` base with its traversals                       |
| `dsalab.bst`      | `BinarySearchTree`: insertion (equal values go left), search, deletion                |
| `dsalab.avl`      | `AVLTree` (ignores duplicates), `balance_factor`, `rotate_left`, `rotate_right`       |
| `dsalab.threaded` | `ThreadedNode`, `ThreadedBinaryTree`: an inorder-threaded search tree                 |
| `dsalab.filters`  | `BloomFilter`, `bloom_hashes`, `CuckooFilter`, `CountMinSketch`                       |
| `dsalab.heaps`    | `heap_sort_ascending`, `heap_sort_descending`, `max_heapify`, `min_heapify`           |
| `dsalab.mst`      | `Edge`, `DisjointSet`, `prim_mst`, `kruskal_mst`, `edges_from_matrix`, `total_weight` |

## Library use

### Trees

```python
from dsalab.bst import BinarySearchTree
from dsalab.avl import AVLTree

bst = BinarySearchTree([50, 30, 70, 20, 40])
bst.insert(60)
bst.delete(30)                     # KeyError if the value is absent
print(40 in bst)                   # True
print(bst.inorder())               # values in sorted order
print(bst.level_order())           # breadth-first order
print(bst.height())                # number of levels, 0 when empty

avl = AVLTree([10, 20, 30])        # rebalances as values are inserted
print(avl.preorder())              # [20, 10, 30]
```

`BinarySearchTree` and `AVLTree` share the `BinaryTree` traversals, which
return lists: recursive ones (`preorder`, `inorder`, `postorder`),
stack-based ones (`preorder_iterative`, `inorder_iterative`,
`postorder_iterative`) and `level_order`. Iterating over a tree yields its
values in inorder.

```python
from dsalab.threaded import ThreadedBinaryTree

tree = ThreadedBinaryTree([8, 3, 10, 1, 6])
print(6 in tree)                   # True
print(tree.search(6))              # the ThreadedNode, or None
print(tree.inorder_iterative())    # [1, 3, 6, 8, 10], following the threads
```

In a `ThreadedBinaryTree` equal values go to the right subtree. Its
`preorder_iterative` and `inorder_iterative` follow threads instead of
using a stack; `postorder_iterative` uses two stacks.

### Filters

```python
from dsalab.filters import BloomFilter, CountMinSketch, CuckooFilter

bloom = BloomFilter(10)
print(bloom.add("alice"))          # True; False if its bits were all set already
print("alice" in bloom)            # True
print(bloom.bits())

sketch = CountMinSketch(4, 10000)
sketch.add("alice")                # returns the column used in each row
sketch.add("alice")
print(sketch.estimate("alice"))    # 2

cuckoo = CuckooFilter(10)
cuckoo.insert(42)
print(cuckoo.tables())             # both tables, empty slots are None
```

A Bloom filter can report false positives but never false negatives. A
Count-Min sketch can overestimate a count but never underestimates it.
`CuckooFilter.insert` accepts only non-negative integers (`ValueError`
otherwise) and raises `RuntimeError` when a value is evicted for more
than `max_displacements` rounds (500 by default).

### Heap sort

```python
from dsalab.heaps import heap_sort_ascending, heap_sort_descending

print(heap_sort_ascending([5, 1, 4, 2]))    # [1, 2, 4, 5]
print(heap_sort_descending([5, 1, 4, 2]))   # [5, 4, 2, 1]
```

Both return a new list. `max_heapify` and `min_heapify` sift one element
down in place within the first `size` items of a list.

### Minimum spanning trees

The graph is a square adjacency matrix. `None` or `dsalab.mst.INF`
(2**31 - 1) marks a missing edge.

```python
from dsalab.mst import edges_from_matrix, kruskal_mst, prim_mst, total_weight

matrix = [
    [0, 2, 3],
    [2, 0, 1],
    [3, 1, 0],
]
print(total_weight(prim_mst(matrix)))                                     # 3
print(total_weight(kruskal_mst(len(matrix), edges_from_matrix(matrix))))  # 3
```

`prim_mst` raises `ValueError` when the graph is not connected;
`kruskal_mst` returns the edges it could join. `DisjointSet` is the
union-find structure Kruskal's algorithm uses, with path compression and
union by rank.

## Command-line programs

Each program reads whitespace-separated input from standard input and
shows a numbered menu; it stops at the exit choice or at the end of the
input.

```
dsalab-bst        # count and values, then: search, insert, traversals, BFS, height, delete, exit (12)
dsalab-avl        # count and values, then: search, insert, traversals; choice 8 also ends the session
dsalab-threaded   # count and values, then: search, insert, traversals; choice 9 ends the session
dsalab-filters    # Bloom filter, cuckoo filter, count-min sketch, exit (4)
dsalab-heaps      # count and values; prints them heap-sorted both ways
dsalab-mst        # vertex count and adjacency matrix, then Prim's, Kruskal's, exit (3)
```

## Limitations

The AVL and threaded trees support insertion and search but not
deletion; only `BinarySearchTree` can delete. Nothing is saved between
runs of the command-line programs.