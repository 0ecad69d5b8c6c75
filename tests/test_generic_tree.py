import pytest

from dsakit.generic_tree import TreeNode, describe, parse_level_order, parse_preorder


def _shape(node):
    return (node.data, [_shape(child) for child in node.children])


def test_describe_hand_built_tree():
    root = TreeNode(1, [TreeNode(2), TreeNode(3)])
    assert describe(root) == ["1:2,3,", "2:", "3:"]


def test_describe_none():
    assert describe(None) == []


def test_level_order_and_preorder_agree():
    level = parse_level_order("1 3 2 3 4 2 5 6 0 0 0 0")
    pre = parse_preorder("1 3 2 2 5 0 6 0 3 0 4 0")
    assert _shape(level) == _shape(pre)
    assert [line.split(":")[0] for line in describe(level)] == [
        "1", "2", "5", "6", "3", "4",
    ]


def test_level_order_children_in_order():
    root = parse_level_order([10, 2, 20, 30, 1, 40, 0, 0])
    assert [child.data for child in root.children] == [20, 30]
    assert [child.data for child in root.children[0].children] == [40]


def test_single_node():
    assert _shape(parse_preorder("7 0")) == (7, [])


def test_deep_preorder_chain():
    depth = 5000
    tokens = []
    for value in range(depth):
        tokens += [value, 1 if value < depth - 1 else 0]
    root = parse_preorder(tokens)
    assert len(describe(root)) == depth


def test_truncated_input():
    with pytest.raises(ValueError):
        parse_level_order("1 2 3")


def test_negative_count():
    with pytest.raises(ValueError):
        parse_preorder("1 -2")