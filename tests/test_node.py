from hufzip.node import HuffmanNode


def test_leaf_holds_data_and_frequency():
    node = HuffmanNode.leaf(65, 7)
    assert node.data == 65
    assert node.freq == 7
    assert node.is_leaf() is True


def test_internal_node_joins_children():
    left = HuffmanNode.leaf(1, 2)
    right = HuffmanNode.leaf(2, 3)
    parent = HuffmanNode.internal(5, left, right)
    assert parent.left is left
    assert parent.right is right
    assert parent.data == 0
    assert parent.is_leaf() is False


def test_internal_with_single_child_is_not_leaf():
    child = HuffmanNode.leaf(9, 1)
    assert HuffmanNode.internal(1, child, None).is_leaf() is False
    assert HuffmanNode.internal(1, None, child).is_leaf() is False


def test_nodes_compare_by_identity():
    first = HuffmanNode.leaf(3, 1)
    second = HuffmanNode.leaf(3, 1)
    assert first != second
    assert first == first