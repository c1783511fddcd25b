"""Binary trees: traversals, height, diameter, common ancestors, symmetry."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree."""

    value: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Values in left-node-right (depth-first) order."""
    if root is None:
        return []
    return inorder(root.left) + [root.value] + inorder(root.right)


def level_order(root: Optional[TreeNode]) -> list[Any]:
    """Values level by level, left to right (breadth-first)."""
    if root is None:
        return []
    values: list[Any] = []
    waiting: deque[TreeNode] = deque([root])
    while waiting:
        node = waiting.popleft()
        values.append(node.value)
        if node.left is not None:
            waiting.append(node.left)
        if node.right is not None:
            waiting.append(node.right)
    return values


def height(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def diameter(root: Optional[TreeNode]) -> int:
    """Number of edges on the longest path between any two nodes."""
    best = 0

    def measure(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = measure(node.left)
        right = measure(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    measure(root)
    return best


def lowest_common_ancestor(
    root: Optional[TreeNode], first: Any, second: Any
) -> Optional[TreeNode]:
    """The deepest node having both values beneath it (or being one of them).

    When only one of the values is present its node is returned; when neither
    is, the result is None.
    """
    if root is None:
        return None
    if root.value == first or root.value == second:
        return root
    left = lowest_common_ancestor(root.left, first, second)
    right = lowest_common_ancestor(root.right, first, second)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def _mirrors(left: Optional[TreeNode], right: Optional[TreeNode]) -> bool:
    if left is None and right is None:
        return True
    if left is None or right is None or left.value != right.value:
        return False
    return _mirrors(left.left, right.right) and _mirrors(left.right, right.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """True when the tree is a mirror image of itself around the root."""
    return root is None or _mirrors(root.left, root.right)