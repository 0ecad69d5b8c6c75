"""Binary trees of integers: building them from text and walking them.

Trees are read from whitespace-separated integers in which ``-1`` marks a
missing child. Traversals return lists. They use explicit stacks and queues
rather than recursion, so deep trees do not hit Python's recursion limit.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

SENTINEL = -1
"""Token that marks a missing node in the textual input formats."""


@dataclass(eq=False, repr=False)
class BinaryTreeNode:
    """One node of a binary tree."""

    data: int
    left: BinaryTreeNode | None = None
    right: BinaryTreeNode | None = None

    def __repr__(self) -> str:
        return f"BinaryTreeNode({self.data!r})"


def _token_stream(tokens: Iterable[str | int] | str) -> Iterator[str | int]:
    if isinstance(tokens, str):
        return iter(tokens.split())
    return iter(tokens)


def _next_value(stream: Iterator[str | int]) -> int:
    try:
        token = next(stream)
    except StopIteration:
        raise ValueError("unexpected end of tree input") from None
    return int(token)


def _make_node(value: int) -> BinaryTreeNode | None:
    return None if value == SENTINEL else BinaryTreeNode(value)


def parse_level_order(tokens: Iterable[str | int] | str) -> BinaryTreeNode | None:
    """Build a tree from level-order data, ``-1`` standing for a missing child.

    The first value is the root; then, for each node in breadth-first order,
    the values of its left and right children follow. A string is split on
    whitespace. Tokens after the tree are left unread in an iterator.
    """
    stream = _token_stream(tokens)
    root = _make_node(_next_value(stream))
    if root is None:
        return None
    pending = deque([root])
    while pending:
        node = pending.popleft()
        node.left = _make_node(_next_value(stream))
        if node.left is not None:
            pending.append(node.left)
        node.right = _make_node(_next_value(stream))
        if node.right is not None:
            pending.append(node.right)
    return root


def parse_preorder(tokens: Iterable[str | int] | str) -> BinaryTreeNode | None:
    """Build a tree from pre-order data: a node, then its left and right subtrees.

    ``-1`` stands for an empty subtree. A string is split on whitespace.
    """
    stream = _token_stream(tokens)
    root = _make_node(_next_value(stream))
    if root is None:
        return None
    # Each entry is a node still waiting for its left or right child.
    stack: list[tuple[BinaryTreeNode, str]] = [(root, "right"), (root, "left")]
    while stack:
        parent, side = stack.pop()
        child = _make_node(_next_value(stream))
        setattr(parent, side, child)
        if child is not None:
            stack.append((child, "right"))
            stack.append((child, "left"))
    return root


def preorder(root: BinaryTreeNode | None) -> list[int]:
    """Return the data in pre-order: node, left subtree, right subtree."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder(root: BinaryTreeNode | None) -> list[int]:
    """Return the data in in-order: left subtree, node, right subtree."""
    result: list[int] = []
    stack: list[BinaryTreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def postorder(root: BinaryTreeNode | None) -> list[int]:
    """Return the data in post-order: left subtree, right subtree, node."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def levels(root: BinaryTreeNode | None) -> list[list[int]]:
    """Return the data level by level, each level from left to right."""
    result: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        result.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return result


def height(root: BinaryTreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    return len(levels(root))


def mirror(root: BinaryTreeNode | None) -> BinaryTreeNode | None:
    """Swap the children of every node in place and return the root."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        node.left, node.right = node.right, node.left
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return root


def _child_data(node: BinaryTreeNode | None) -> int:
    return SENTINEL if node is None else node.data


def level_order_description(root: BinaryTreeNode | None) -> list[str]:
    """Describe each node in level order as ``D:L:X,R:Y``, ``-1`` for no child."""
    lines: list[str] = []
    pending = deque([root] if root is not None else [])
    while pending:
        node = pending.popleft()
        lines.append(
            f"{node.data}:L:{_child_data(node.left)},R:{_child_data(node.right)}"
        )
        pending.extend(child for child in (node.left, node.right) if child is not None)
    return lines


def tree_description(root: BinaryTreeNode | None) -> list[str]:
    """Describe each node in pre-order as ``D:`` followed by ``L<x>`` and ``R<y>``.

    A missing child is left out of its node's line.
    """
    lines: list[str] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        line = f"{node.data}:"
        if node.left is not None:
            line += f"L{node.left.data}"
        if node.right is not None:
            line += f"R{node.right.data}"
        lines.append(line)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return lines