"""Classic data structures and algorithms: search trees, filters, heap sort and spanning trees."""

__version__ = "0.1.0"
__all__ = ["avl", "bst", "filters", "heaps", "mst", "nodes", "threaded"]