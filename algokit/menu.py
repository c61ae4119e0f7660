"""Interactive numbered menus driving the stack and queue structures."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Callable, TextIO

from algokit.queues import (
    BoundedDeque,
    CircularQueue,
    LinearQueue,
    QueueEmptyError,
    QueueFullError,
)
from algokit.stack import Stack, StackEmptyError, StackFullError


class _EndOfInput(Exception):
    pass


def _reader(source: TextIO, out: TextIO) -> Callable[..., Any]:
    tokens = (token for line in source for token in line.split())

    def read(convert: Callable[[str], Any] = int) -> Any:
        out.flush()
        token = next(tokens, None)
        if token is None:
            raise _EndOfInput
        try:
            return convert(token)
        except ValueError:
            what = "an integer" if convert is int else "a number"
            raise ValueError(f"not {what}: {token!r}") from None

    return read


_OPTIONS = ("Enter 1 for Enqueue\nEnter 2 for Dequeue\n"
            "Enter 3 for Display\nEnter 4 for exit\n")

# kind: (factory, menu, prompt, add, added, full, remove, removed, empty, show, farewell)
_SPECS = {
    "queue": (
        LinearQueue, _OPTIONS + "Enter ur choice :", "Enter an element :",
        LinearQueue.enqueue, "\n", "Queue is full\n\n",
        LinearQueue.dequeue, "Element is removed\n\n", "Queue is empty\n\n",
        lambda q: ("Queue Contents :" + "".join(f"{v} " for v in q) + "\n"
                   if q else "Queue is empty\n\n") + "\n",
        "",
    ),
    "circular": (
        CircularQueue,
        "Enter 1 for Enqueue \nEnter 2 for Dequeue \nEnter 3 for Display \n"
        "Enter 4 for Exit \nEnter ur choice : ",
        "Enter a no :",
        CircularQueue.enqueue, "Element is added \n\n", "Queue is full\n\n",
        CircularQueue.dequeue, "Element dequeued \n\n", "Queue is empty\n\n",
        lambda q: "Queue contents :-" + "".join(f" {v}" for v in q) + "\n\n"
        if q else "Queue is empty\n\n",
        "Quitting...",
    ),
    "stack": (
        Stack,
        "Enter '1' for push \nEnter '2' for pop\nEnter '3' for display \n"
        "Enter '4' to exit \nEnter ur choice :",
        "Enter an element :",
        Stack.push, "Element is pushed \n", "Stack is full\n",
        Stack.pop, "Element is popped\n", "Stack is empty\n",
        lambda s: "".join(f"{v} " for v in s) + "\n" if s else "Stack is empty.\n",
        "",
    ),
}


def _basic_session(kind: str, read, out: TextIO) -> int:
    (factory, menu, prompt, add, added, full,
     remove, removed, empty, show, farewell) = _SPECS[kind]
    box = factory()
    while True:
        out.write(menu)
        choice = read()
        if choice == 1:
            out.write(prompt)
            value = read()
            try:
                add(box, value)
            except (QueueFullError, StackFullError):
                out.write(full)
            else:
                out.write(added)
        elif choice == 2:
            try:
                remove(box)
            except (QueueEmptyError, StackEmptyError):
                out.write(empty)
            else:
                out.write(removed)
        elif choice == 3:
            out.write(show(box))
        elif choice == 4:
            out.write(farewell)
            return 0


def _deque_session(read, out: TextIO) -> int:
    dq = BoundedDeque(10)
    while True:
        out.write(_OPTIONS + "Enter ur choice : ")
        choice = read()
        if choice == 1:
            out.write("Enter 1.1 for insertion at front\n"
                      "Enter 1.2 for insertion at rear\nEnter ur choice : ")
            push = {1.1: dq.push_front, 1.2: dq.push_back}.get(read(float))
            if push is not None:
                out.write("Enter an element ")
                try:
                    push(read())
                except QueueFullError:
                    out.write("Queue is full\n")
                out.write("\n")
        elif choice == 2:
            out.write("Enter 2.1 for deletion at front\n"
                      "Enter 2.2 for deletion at rear\nEnter ur choice : ")
            pop = {2.1: (dq.pop_front, "Queue is empty\n"),
                   2.2: (dq.pop_back, "Queue empty\n")}.get(read(float))
            if pop is not None:
                try:
                    pop[0]()
                except QueueEmptyError:
                    out.write(pop[1])
                    return 1
                out.write("\n")
        elif choice == 3:
            shown = ("Queue is: \n" + "".join(f"{v}\t" for v in dq) + "\n"
                     if dq else "Queue is empty\n")
            out.write(shown + "\n")
        elif choice == 4:
            out.write("Quiting....")
            return 0


_KINDS = sorted([*_SPECS, "deque"])


def run_menu(kind: str, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Run the menu for ``kind`` until the user exits; return the exit status.

    The session ends quietly when input runs out; a non-numeric answer
    raises ValueError.
    """
    if kind not in _KINDS:
        raise ValueError(f"unknown structure: {kind!r}")
    out = sys.stdout if stdout is None else stdout
    read = _reader(sys.stdin if stdin is None else stdin, out)
    try:
        if kind == "deque":
            return _deque_session(read, out)
        return _basic_session(kind, read, out)
    except _EndOfInput:
        return 0


def main(argv: list[str] | None = None) -> int:
    """Start an interactive menu for the chosen data structure."""
    parser = argparse.ArgumentParser(
        prog="algokit-menu", description="Drive a stack or queue from a numbered menu."
    )
    parser.add_argument("kind", choices=_KINDS)
    args = parser.parse_args(argv)
    try:
        return run_menu(args.kind, sys.stdin, sys.stdout)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())