# algokit

Small, readable implementations of classic sorting algorithms and bounded
container types: a stack, a linear queue, a circular queue and a deque.
Each container can also be driven from an interactive numbered menu.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Sorting

`algokit.sorting` provides `bubble_sort`, `heap_sort`, `insertion_sort`,
`merge_sort`, `quick_sort` and `selection_sort`. Each takes an iterable of
mutually comparable values and returns a new list in ascending order; the
input is left untouched. `merge_sort` is stable.

```python
from algokit.sorting import merge_sort, quick_sort

merge_sort([5, 2, 9, 1])    # [1, 2, 5, 9]
quick_sort((3, 3, -1, 0))   # [-1, 0, 3, 3]
```

### `algokit-sort`

The command takes the algorithm name (`bubble`, `heap`, `insertion`, `merge`,
`quick` or `selection`) followed by the integers to sort:

```
algokit-sort merge 5 2 9 1
```

When no values are given, it reads from standard input a count followed by
that many integers, writing its prompts as it goes:

```
echo "4 5 2 9 1" | algokit-sort heap
```

Each algorithm prints its result in its own layout; `merge` and `quick` also
print the values as given before the sorted ones, and `bubble` prints a
bracketed, comma-terminated list. `bubble` accepts at most 20 values, the
others at most 100. A missing or non-integer value, or too many values, is
reported on standard error with exit status 1.

## Containers

```python
from algokit.stack import Stack
from algokit.queues import LinearQueue, CircularQueue, BoundedDeque

stack = Stack(5)
stack.push(1)
stack.push(2)
stack.pop()              # 2
list(stack)              # [1]

queue = CircularQueue(5)
queue.enqueue(10)
queue.enqueue(20)
queue.dequeue()          # 10
list(queue)              # [20]

deque = BoundedDeque(10)
deque.push_front(1)
deque.push_back(2)
deque.pop_back()         # 2
```

All containers have a fixed capacity (5 by default; 10 for `BoundedDeque`)
and support `len()`, iteration, `is_empty()` and `is_full()`. A capacity
below 1 raises `ValueError`. Iterating a `Stack` runs from top to bottom;
the queues iterate from front to back.

Adding to a full container raises `StackFullError` or `QueueFullError`;
removing from an empty one raises `StackEmptyError` or `QueueEmptyError`,
both of which are subclasses of `IndexError`.

`LinearQueue` does not reuse freed slots: removed items do not make room at
the rear, so it keeps reporting full until it has been emptied completely,
after which it starts over. `CircularQueue` reuses a slot as soon as it is
freed.

## Interactive menus

`algokit-menu` starts a numbered menu for one container kind: `stack`,
`queue` (a `LinearQueue`), `circular` (a `CircularQueue`) or `deque` (a
`BoundedDeque` of 10):

```
algokit-menu circular
```

Choose 1 to add an element, 2 to remove one, 3 to display the contents and
4 to exit. In the `deque` menu, adding asks for `1.1` (front) or `1.2`
(rear) and removing asks for `2.1` (front) or `2.2` (rear); removing from an
empty deque ends the session with exit status 1.

The session ends quietly when input runs out. A non-numeric answer is
reported on standard error with exit status 1.

The same menus can be driven from code with `algokit.menu.run_menu(kind,
stdin, stdout)`, which returns the exit status; it raises `ValueError` for an
unknown kind or a non-numeric answer. Both streams default to the process's
standard input and output.

## Limitations

The containers live in memory only; nothing entered in a menu session is
kept once the session ends.