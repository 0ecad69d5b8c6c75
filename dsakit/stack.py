"""A last-in first-out stack of linked cells and a query runner for it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

_EMPTY_RESULT = "-1"


class LinkedStack:
    """A stack whose elements are chained from the top down."""

    def __init__(self) -> None:
        self._head: tuple[Any, Any] | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        cell = self._head
        while cell is not None:
            value, cell = cell
            yield value

    def push(self, element: Any) -> None:
        """Put ``element`` on top."""
        self._head = (element, self._head)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top element; raise IndexError if empty."""
        if self._head is None:
            raise IndexError("pop from an empty stack")
        value, self._head = self._head
        self._size -= 1
        return value

    def top(self) -> Any:
        """Return the top element; raise IndexError if empty."""
        if self._head is None:
            raise IndexError("top of an empty stack")
        return self._head[0]


def run_queries(lines: Iterable[str] | str) -> list[str]:
    """Run a query script against a fresh stack and return the output lines.

    The script starts with the number of queries. Query 1 pushes the value
    that follows it, 2 pops, 3 reads the top, 4 reports the size, and any
    other code reports whether the stack is empty. Popping or reading an
    empty stack outputs -1.
    """
    text = lines if isinstance(lines, str) else " ".join(lines)
    tokens = iter(text.split())

    def read() -> int:
        try:
            return int(next(tokens))
        except StopIteration:
            raise ValueError("unexpected end of query input") from None

    stack = LinkedStack()
    output: list[str] = []
    for _ in range(read()):
        choice = read()
        if choice == 1:
            stack.push(read())
        elif choice in (2, 3):
            if not stack:
                output.append(_EMPTY_RESULT)
            else:
                output.append(str(stack.pop() if choice == 2 else stack.top()))
        elif choice == 4:
            output.append(str(len(stack)))
        else:
            output.append("false" if stack else "true")
    return output