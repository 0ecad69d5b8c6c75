"""Binary search trees of integers built from ``BinaryTreeNode``.

In these trees every value in a node's left subtree is smaller than the node.
Every value in its right subtree is greater than or equal to it. The walks use
explicit stacks, so degenerate trees do not hit the recursion limit.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from dsakit.binary_tree import BinaryTreeNode, inorder
from dsakit.linked_list import Node, from_values


def search(root: BinaryTreeNode | None, k: int) -> bool:
    """Return True if a node holding ``k`` is in the search tree."""
    node = root
    while node is not None:
        if node.data == k:
            return True
        node = node.left if node.data > k else node.right
    return False


def is_bst(root: BinaryTreeNode | None) -> bool:
    """Check the search-tree property.

    Every node is greater than all of its left subtree and no greater than
    any value in its right subtree.
    """
    stack: list[tuple[BinaryTreeNode, float, float]] = []
    if root is not None:
        stack.append((root, -math.inf, math.inf))
    while stack:
        node, lower, upper = stack.pop()
        if not lower <= node.data < upper:
            return False
        if node.left is not None:
            stack.append((node.left, lower, node.data))
        if node.right is not None:
            stack.append((node.right, node.data, upper))
    return True


def build_balanced(values: Sequence[int]) -> BinaryTreeNode | None:
    """Build a balanced search tree from sorted ``values``.

    The middle element becomes the root. For an even count, the first of the
    two middle elements is used.
    """

    def build(low: int, high: int) -> BinaryTreeNode | None:
        if low > high:
            return None
        mid = (low + high) // 2
        return BinaryTreeNode(values[mid], build(low, mid - 1), build(mid + 1, high))

    return build(0, len(values) - 1)


def elements_in_range(root: BinaryTreeNode | None, low: int, high: int) -> list[int]:
    """Return the values between ``low`` and ``high`` (inclusive) in increasing order.

    Subtrees that cannot hold such values are not visited.
    """
    result: list[int] = []
    stack: list[BinaryTreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left if low < node.data else None
        node = stack.pop()
        if low <= node.data <= high:
            result.append(node.data)
        node = node.right if high > node.data else None
    return result


def path_to_root(root: BinaryTreeNode | None, k: int) -> list[int]:
    """Return the values from the node holding ``k`` up to the root.

    The search visits the node, then its left subtree, then its right subtree.
    Returns an empty list when ``k`` is absent.
    """
    parents: dict[int, BinaryTreeNode | None] = {}
    stack: list[tuple[BinaryTreeNode, BinaryTreeNode | None]] = []
    if root is not None:
        stack.append((root, None))
    while stack:
        node, parent = stack.pop()
        parents[id(node)] = parent
        if node.data == k:
            path: list[int] = []
            current: BinaryTreeNode | None = node
            while current is not None:
                path.append(current.data)
                current = parents[id(current)]
            return path
        if node.right is not None:
            stack.append((node.right, node))
        if node.left is not None:
            stack.append((node.left, node))
    return []


def to_sorted_linked_list(root: BinaryTreeNode | None) -> Node | None:
    """Return the head of a linked list of the tree's values in in-order."""
    return from_values(inorder(root))