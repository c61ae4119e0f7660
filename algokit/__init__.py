"""Sorting algorithms, bounded stack, queue and deque types, and menus to drive them."""

__version__ = "0.1.0"