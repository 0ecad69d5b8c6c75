"""Trees whose nodes may have any number of children."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False, repr=False)
class TreeNode:
    """A tree node holding an integer and an ordered list of children."""

    data: int
    children: list[TreeNode] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"TreeNode({self.data!r})"


def _token_stream(tokens: Iterable[str | int] | str) -> Iterator[str | int]:
    if isinstance(tokens, str):
        return iter(tokens.split())
    return iter(tokens)


def _next_value(stream: Iterator[str | int]) -> int:
    try:
        return int(next(stream))
    except StopIteration:
        raise ValueError("unexpected end of tree input") from None


def _next_count(stream: Iterator[str | int]) -> int:
    count = _next_value(stream)
    if count < 0:
        raise ValueError(f"child count must be non-negative, got {count}")
    return count


def parse_level_order(tokens: Iterable[str | int] | str) -> TreeNode:
    """Build a tree from level-order data.

    The root's value comes first; then, for each node in breadth-first order,
    its number of children followed by their values. A string is split on
    whitespace.
    """
    stream = _token_stream(tokens)
    root = TreeNode(_next_value(stream))
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for _ in range(_next_count(stream)):
            child = TreeNode(_next_value(stream))
            node.children.append(child)
            pending.append(child)
    return root


def parse_preorder(tokens: Iterable[str | int] | str) -> TreeNode:
    """Build a tree from pre-order data: a value, its child count, then each child.

    A string is split on whitespace.
    """
    stream = _token_stream(tokens)
    root = TreeNode(_next_value(stream))
    stack = [(root, _next_count(stream))]
    while stack:
        node, remaining = stack[-1]
        if remaining == 0:
            stack.pop()
            continue
        stack[-1] = (node, remaining - 1)
        child = TreeNode(_next_value(stream))
        node.children.append(child)
        stack.append((child, _next_count(stream)))
    return root


def describe(root: TreeNode | None) -> list[str]:
    """Describe each node in pre-order as ``D:`` followed by ``child,`` per child."""
    lines: list[str] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        lines.append(f"{node.data}:" + "".join(f"{c.data}," for c in node.children))
        stack.extend(reversed(node.children))
    return lines