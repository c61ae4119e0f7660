"""A fixed-capacity last-in, first-out stack."""

from __future__ import annotations

from typing import Any, Iterator


class StackFullError(Exception):
    """Raised when pushing onto a full stack."""


class StackEmptyError(IndexError):
    """Raised when popping from an empty stack."""


class Stack:
    """Stack of at most ``capacity`` items; iteration runs top to bottom."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def push(self, value: Any) -> None:
        if self.is_full():
            raise StackFullError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._items)