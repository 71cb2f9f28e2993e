"""Binary search tree insertion and traversal."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class TreeNode:
    """A binary tree node."""

    data: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def insert(root: Optional[TreeNode], value: Any) -> TreeNode:
    """Insert ``value`` into the search tree at ``root`` and return the root.

    Values smaller than a node go left; equal or larger values go right.
    """
    if root is None:
        return TreeNode(value)
    if value < root.data:
        root.left = insert(root.left, value)
    else:
        root.right = insert(root.right, value)
    return root


def inorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield the tree's values in ascending order."""
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.data
        node = node.right