"""Singly linked lists of integers and the classic operations on them.

Every function works on the head node of a list, with ``None`` standing for
the empty list, and returns the (possibly new) head where the list changes.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

SENTINEL = -1
"""Token that ends a list in the textual input format."""


@dataclass(eq=False, repr=False)
class Node:
    """One node of a singly linked list."""

    data: int
    next: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def from_values(values: Iterable[int]) -> Node | None:
    """Build a list holding ``values`` in order and return its head."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def parse_list(tokens: Iterable[str | int]) -> Node | None:
    """Read integers from ``tokens`` up to the ``-1`` sentinel and build a list.

    When ``tokens`` is an iterator, reading stops right after the sentinel, so
    several lists can be read one after another from the same stream.
    """
    values = []
    for token in iter(tokens):
        value = int(token)
        if value == SENTINEL:
            break
        values.append(value)
    return from_values(values)


def iterate(head: Node | None) -> Iterator[Node]:
    """Yield the nodes of the list starting at ``head``."""
    node = head
    while node is not None:
        yield node
        node = node.next


def to_values(head: Node | None) -> list[int]:
    """Return the data of the list as a Python list."""
    return [node.data for node in iterate(head)]


def length(head: Node | None) -> int:
    """Count the nodes of the list by walking it."""
    return sum(1 for _ in iterate(head))


def length_recursive(head: Node | None) -> int:
    """Count the nodes of the list recursively."""
    if head is None:
        return 0
    return 1 + length_recursive(head.next)


def find_node(head: Node | None, value: int) -> int:
    """Return the 0-based position of the first node holding ``value``, or -1."""
    for position, node in enumerate(iterate(head)):
        if node.data == value:
            return position
    return -1


def _node_before(head: Node, pos: int) -> Node | None:
    """Return the node at index ``pos - 1`` or None if the list is too short."""
    for index, node in enumerate(iterate(head)):
        if index == pos - 1:
            return node
    return None


def delete_node(head: Node | None, pos: int) -> Node | None:
    """Remove the node at index ``pos``; a position past the end changes nothing."""
    if pos < 0:
        raise ValueError(f"position must be non-negative, got {pos}")
    if head is None:
        return None
    if pos == 0:
        return head.next
    previous = _node_before(head, pos)
    if previous is not None and previous.next is not None:
        previous.next = previous.next.next
    return head


def insert_node(head: Node | None, pos: int, value: int) -> Node | None:
    """Insert ``value`` at index ``pos``.

    A position equal to the length appends; a position beyond it leaves the
    list unchanged.
    """
    if pos < 0:
        raise ValueError(f"position must be non-negative, got {pos}")
    if pos == 0:
        return Node(value, head)
    if head is None:
        return head
    previous = _node_before(head, pos)
    if previous is not None:
        previous.next = Node(value, previous.next)
    return head


def reverse(head: Node | None) -> Node | None:
    """Reverse the list in place by relinking its nodes; return the new head."""
    previous: Node | None = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def _reverse_with_tail(head: Node | None) -> tuple[Node | None, Node | None]:
    if head is None or head.next is None:
        return head, head
    new_head, new_tail = _reverse_with_tail(head.next)
    assert new_tail is not None
    new_tail.next = head
    head.next = None
    return new_head, head


def reverse_recursive(head: Node | None) -> Node | None:
    """Reverse the list recursively, tracking head and tail of each sub-result."""
    return _reverse_with_tail(head)[0]


def append_last_n_to_first(head: Node | None, n: int) -> Node | None:
    """Move the last ``n`` nodes to the front of the list; return the new head."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n == 0 or head is None:
        return head
    size = length(head)
    if n > size:
        raise ValueError(f"cannot move {n} nodes of a list of length {size}")
    if n == size:
        return head

    fast = head
    for _ in range(n):
        assert fast.next is not None
        fast = fast.next
    slow = head
    while fast.next is not None:
        assert slow.next is not None
        slow = slow.next
        fast = fast.next

    new_head = slow.next
    slow.next = None
    fast.next = head
    return new_head


def merge_sorted(first: Node | None, second: Node | None) -> Node | None:
    """Merge two ascending lists into one ascending list by relinking nodes.

    On equal values the node from ``first`` comes first.
    """
    if first is None:
        return second
    if second is None:
        return first

    if first.data <= second.data:
        head, first = first, first.next
    else:
        head, second = second, second.next
    tail = head

    while first is not None and second is not None:
        if first.data <= second.data:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next

    tail.next = first if first is not None else second
    return head