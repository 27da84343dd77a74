import pytest

from algokit.trees import TreeNode, construct_from_pre_post, rob


def _preorder(node):
    if node is None:
        return []
    return [node.val, *_preorder(node.left), *_preorder(node.right)]


def _postorder(node):
    if node is None:
        return []
    return [*_postorder(node.left), *_postorder(node.right), node.val]


def test_rob_empty_tree():
    assert rob(None) == 0


def test_rob_single_node():
    assert rob(TreeNode(42)) == 42


def test_rob_examples():
    first = TreeNode(3, TreeNode(2, None, TreeNode(3)), TreeNode(3, None, TreeNode(1)))
    assert rob(first) == 7
    second = TreeNode(
        3, TreeNode(4, TreeNode(1), TreeNode(3)), TreeNode(5, None, TreeNode(1))
    )
    assert rob(second) == 9


def test_rob_bounds():
    tree = TreeNode(
        5,
        TreeNode(1, TreeNode(8), TreeNode(2, TreeNode(6))),
        TreeNode(4, None, TreeNode(7)),
    )
    total = rob(tree)
    assert total >= tree.val
    assert total >= rob(tree.left) + rob(tree.right)
    assert total <= sum(_preorder(tree))


def test_construct_full_tree():
    expected = TreeNode(
        1,
        TreeNode(2, TreeNode(4), TreeNode(5)),
        TreeNode(3, TreeNode(6), TreeNode(7)),
    )
    result = construct_from_pre_post([1, 2, 4, 5, 3, 6, 7], [4, 5, 2, 6, 7, 3, 1])
    assert result == expected


def test_construct_round_trip_preserves_traversals():
    tree = TreeNode(
        10,
        TreeNode(20, TreeNode(40, None, TreeNode(80))),
        TreeNode(30, TreeNode(50), TreeNode(60, TreeNode(70))),
    )
    pre, post = _preorder(tree), _postorder(tree)
    rebuilt = construct_from_pre_post(pre, post)
    assert _preorder(rebuilt) == pre
    assert _postorder(rebuilt) == post


def test_construct_single_child_goes_left():
    rebuilt = construct_from_pre_post([1, 2], [2, 1])
    assert rebuilt == TreeNode(1, TreeNode(2))


def test_construct_empty():
    assert construct_from_pre_post([], []) is None


def test_construct_rejects_mismatched_traversals():
    with pytest.raises(ValueError):
        construct_from_pre_post([1, 2, 3], [2, 1, 3])
    with pytest.raises(ValueError):
        construct_from_pre_post([1, 2], [1])
    with pytest.raises(ValueError):
        construct_from_pre_post([1, 2], [3, 1])