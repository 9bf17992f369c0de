"""Classic algorithm and data-structure solutions in plain Python."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "backtracking",
    "dynamic",
    "grids",
    "heaps",
    "linked_lists",
    "nodes",
    "search",
    "sliding_window",
    "structures",
    "trees",
]