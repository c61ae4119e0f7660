"""Classic comparison sorts and a command-line front end for them."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Iterable


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy made by swapping adjacent items."""
    items = list(values)
    for done in range(len(items) - 1):
        for j in range(len(items) - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def _sift_down(items: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        for child in (2 * root + 1, 2 * root + 2):
            if child < size and items[child] > items[largest]:
                largest = child
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy made by repeatedly taking the max of a heap."""
    items = list(values)
    for root in reversed(range(len(items) // 2)):
        _sift_down(items, len(items), root)
    for end in reversed(range(len(items))):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, inserting each item into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        key, j = items[i], i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a stably sorted copy by halving and merging."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    left, right = merge_sort(items[:middle]), merge_sort(items[middle:])
    merged, i, j = [], 0, 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    return merged + left[i:] + right[j:]


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using Lomuto partitioning around the last item."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot, boundary = items[high], low
        for j in range(low, high):
            if items[j] <= pivot:
                items[boundary], items[j] = items[j], items[boundary]
                boundary += 1
        items[boundary], items[high] = items[high], items[boundary]
        pending += [(low, boundary - 1), (boundary + 1, high)]
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, selecting the minimum of the unsorted tail."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items


def _row(values: list[int], sep: str = " ") -> str:
    return "".join(f"{v}{sep}" for v in values) + "\n"


_COUNT = "enter no of elements : "

# name: (sort, capacity, count prompt, elements prompt, per-value prompt, report)
_PROGRAMS = {
    "bubble": (bubble_sort, 20, "number of values u want to input : ", "",
               "enter value no {} : ",
               lambda o, s: "[" + "".join(f"{v}," for v in s) + "]\n"),
    "heap": (heap_sort, 100, _COUNT, "enter the elements :\n", None,
             lambda o, s: "Sorted array is :-\n" + _row(s)),
    "insertion": (insertion_sort, 100, _COUNT, "enter the elements :- \n", None,
                  lambda o, s: _row(s)),
    "merge": (merge_sort, 100, _COUNT, "enter the elements:\n", None,
              lambda o, s: "Given array is :-\n" + _row(o)
              + "\nSorted array is :-\n" + _row(s)),
    "quick": (quick_sort, 100, _COUNT, "enter the elements :\n", None,
              lambda o, s: "Unsorted Array\n" + _row(o, "  ")
              + "Sorted array in ascending order: \n" + _row(s, "  ")),
    "selection": (selection_sort, 100, _COUNT, "enter the elements : \n", None,
                  lambda o, s: "Sorted array: \n" + _row(s)),
}


def _next_int(tokens, what: str) -> int:
    token = next(tokens, None)
    if token is None:
        raise ValueError(f"missing {what}")
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"not an integer: {token!r}") from None


def main(argv: list[str] | None = None) -> int:
    """Sort integers given as arguments, or read them from standard input."""
    parser = argparse.ArgumentParser(
        prog="algokit-sort", description="Sort integers with a chosen algorithm."
    )
    parser.add_argument("algorithm", choices=sorted(_PROGRAMS))
    parser.add_argument("values", nargs="*", type=int,
                        help="values to sort; read from standard input when omitted")
    args = parser.parse_args(argv)
    sort, capacity, count_prompt, elements_prompt, each_prompt, report = (
        _PROGRAMS[args.algorithm]
    )
    try:
        values = list(args.values)
        if not values:
            tokens = iter(sys.stdin.read().split())
            sys.stdout.write(count_prompt)
            count = max(_next_int(tokens, "element count"), 0)
            if count > capacity:
                raise ValueError(f"at most {capacity} values are accepted")
            sys.stdout.write(elements_prompt)
            for position in range(1, count + 1):
                if each_prompt is not None:
                    sys.stdout.write(each_prompt.format(position))
                values.append(_next_int(tokens, f"value no {position}"))
        if len(values) > capacity:
            raise ValueError(f"at most {capacity} values are accepted")
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(report(values, sort(values)))
    return 0


if __name__ == "__main__":
    sys.exit(main())