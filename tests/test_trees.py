from algobox.trees import TreeNode, flatten, flattened_values


def _source_tree():
    return TreeNode(
        1,
        TreeNode(2, TreeNode(3), TreeNode(4)),
        TreeNode(5, None, TreeNode(6)),
    )


def test_flatten_source_example():
    root = _source_tree()
    flatten(root)
    assert flattened_values(root) == [1, 2, 3, 4, 5, 6]


def test_flatten_clears_left_links():
    root = _source_tree()
    flatten(root)
    node = root
    count = 0
    while node is not None:
        assert node.left is None
        node = node.right
        count += 1
    assert count == 6


def test_flatten_left_only_chain():
    root = TreeNode(7, TreeNode(8, TreeNode(9)))
    flatten(root)
    assert flattened_values(root) == [7, 8, 9]


def test_flatten_empty_tree():
    flatten(None)
    assert flattened_values(None) == []


def test_flatten_single_node():
    root = TreeNode(42)
    flatten(root)
    assert flattened_values(root) == [42]
    assert root.right is None