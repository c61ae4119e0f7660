"""Fixed-capacity FIFO queues and a double-ended queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class QueueFullError(Exception):
    """Raised when adding to a queue that has no free slot."""


class QueueEmptyError(IndexError):
    """Raised when removing from a queue that holds nothing."""


class _Bounded:
    """Shared storage and checks for containers of limited capacity."""

    _full_error: type[Exception] = QueueFullError
    _empty_error: type[Exception] = QueueEmptyError
    _noun = "queue"

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def _check_room(self) -> None:
        if self.is_full():
            raise self._full_error(f"{self._noun} is full")

    def _check_items(self) -> None:
        if self.is_empty():
            raise self._empty_error(f"{self._noun} is empty")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"


class LinearQueue(_Bounded):
    """Queue whose slots are only reclaimed once it drains.

    Removing items does not free room at the rear, so the queue keeps
    reporting itself full until every item has been removed.
    """

    def __init__(self, capacity: int = 5) -> None:
        super().__init__(capacity)
        self._spent = 0

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) + self._spent == self.capacity

    def enqueue(self, value: Any) -> None:
        self._check_room()
        self._items.append(value)

    def dequeue(self) -> Any:
        self._check_items()
        value = self._items.popleft()
        self._spent = self._spent + 1 if self._items else 0
        return value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)


class CircularQueue(_Bounded):
    """Ring-buffer queue that reuses a slot as soon as it is freed."""

    def __init__(self, capacity: int = 5) -> None:
        super().__init__(capacity)

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def enqueue(self, value: Any) -> None:
        self._check_room()
        self._items.append(value)

    def dequeue(self) -> Any:
        self._check_items()
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)


class BoundedDeque(_Bounded):
    """Double-ended queue that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = 10) -> None:
        super().__init__(capacity)

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def push_front(self, value: Any) -> None:
        self._check_room()
        self._items.appendleft(value)

    def push_back(self, value: Any) -> None:
        self._check_room()
        self._items.append(value)

    def pop_front(self) -> Any:
        self._check_items()
        return self._items.popleft()

    def pop_back(self) -> Any:
        self._check_items()
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)