"""Binary tree algorithms."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def rob(root: TreeNode | None) -> int:
    """Largest sum of node values with no two picked nodes directly linked."""
    if root is None:
        return 0
    # Keyed by id(): each entry is (best sum taking the node, best sum skipping it).
    best: dict[int, tuple[int, int]] = {}

    def outcome(node: TreeNode | None) -> tuple[int, int]:
        return (0, 0) if node is None else best[id(node)]

    stack: list[tuple[TreeNode, bool]] = [(root, False)]
    while stack:
        node, ready = stack.pop()
        if ready:
            left_take, left_skip = outcome(node.left)
            right_take, right_skip = outcome(node.right)
            best[id(node)] = (
                node.val + left_skip + right_skip,
                max(left_take, left_skip) + max(right_take, right_skip),
            )
            continue
        stack.append((node, True))
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, False))
    return max(best[id(root)])


def construct_from_pre_post(
    preorder: Sequence[int], postorder: Sequence[int]
) -> TreeNode | None:
    """Rebuild a binary tree of distinct values from its preorder and postorder traversals.

    Where a node has one child the traversals cannot tell which side it is on;
    it is placed on the left.
    """
    if len(preorder) != len(postorder):
        raise ValueError("traversals must have the same length")
    if len(set(preorder)) != len(preorder) or set(preorder) != set(postorder):
        raise ValueError("traversals must hold the same distinct values")
    post_index = {value: i for i, value in enumerate(postorder)}

    def build(pre_lo: int, pre_hi: int, post_lo: int) -> TreeNode | None:
        size = pre_hi - pre_lo
        if size <= 0:
            return None
        root_val = preorder[pre_lo]
        if postorder[post_lo + size - 1] != root_val:
            raise ValueError("traversals do not describe the same tree")
        node = TreeNode(root_val)
        if size == 1:
            return node
        left_val = preorder[pre_lo + 1]
        if left_val == postorder[post_lo + size - 2]:
            node.left = build(pre_lo + 1, pre_hi, post_lo)
            return node
        left_size = post_index[left_val] - post_lo + 1
        if not 0 < left_size < size:
            raise ValueError("traversals do not describe the same tree")
        node.left = build(pre_lo + 1, pre_lo + 1 + left_size, post_lo)
        node.right = build(pre_lo + 1 + left_size, pre_hi, post_lo + left_size)
        return node

    return build(0, len(preorder), 0)