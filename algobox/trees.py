"""Binary trees: flatten a tree into a right-leaning list in preorder."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["TreeNode", "flatten", "flattened_values"]


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def _preorder(root: TreeNode | None) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def flatten(root: TreeNode | None) -> None:
    """Relink the tree in place so each node's right child is its preorder successor."""
    nodes = list(_preorder(root))
    for node, successor in zip(nodes, nodes[1:] + [None]):
        node.left = None
        node.right = successor


def flattened_values(root: TreeNode | None) -> list[int]:
    """Return the values met by following right links from root."""
    values: list[int] = []
    while root is not None:
        values.append(root.val)
        root = root.right
    return values