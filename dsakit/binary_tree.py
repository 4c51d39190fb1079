"""Binary tree nodes, traversals, reconstruction and per-level queries."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Sequence


@dataclass(eq=False)
class Node:
    """A binary tree node holding ``data`` and two optional children."""

    data: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def _walk_preorder(root: Optional[Node]) -> Iterator[Any]:
    if root is None:
        return
    yield root.data
    yield from _walk_preorder(root.left)
    yield from _walk_preorder(root.right)


def _walk_inorder(root: Optional[Node]) -> Iterator[Any]:
    if root is None:
        return
    yield from _walk_inorder(root.left)
    yield root.data
    yield from _walk_inorder(root.right)


def _walk_postorder(root: Optional[Node]) -> Iterator[Any]:
    if root is None:
        return
    yield from _walk_postorder(root.left)
    yield from _walk_postorder(root.right)
    yield root.data


def preorder(root: Optional[Node]) -> List[Any]:
    """Values in node, left, right order."""
    return list(_walk_preorder(root))


def inorder(root: Optional[Node]) -> List[Any]:
    """Values in left, node, right order."""
    return list(_walk_inorder(root))


def postorder(root: Optional[Node]) -> List[Any]:
    """Values in left, right, node order."""
    return list(_walk_postorder(root))


def _levels(root: Optional[Node]) -> Iterator[List[Node]]:
    """Yield the nodes of each level, left to right, top level first."""
    if root is None:
        return
    queue = deque([root])
    while queue:
        level = list(queue)
        queue.clear()
        for node in level:
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        yield level


def level_order(root: Optional[Node]) -> List[Any]:
    """Values level by level, each level left to right."""
    return [node.data for level in _levels(root) for node in level]


def _locate(inorder_values: Sequence[Any], value: Any, start: int, end: int) -> int:
    for position in range(start, end + 1):
        if inorder_values[position] == value:
            return position
    raise ValueError(f"{value!r} is not in the inorder sequence where expected")


def build_from_preorder_inorder(
    preorder_values: Sequence[Any], inorder_values: Sequence[Any]
) -> Optional[Node]:
    """Rebuild a tree from its preorder and inorder sequences."""
    if len(preorder_values) != len(inorder_values):
        raise ValueError("traversals must have the same length")
    picks = iter(preorder_values)

    def build(start: int, end: int) -> Optional[Node]:
        if start > end:
            return None
        value = next(picks)
        node = Node(value)
        if start == end:
            if inorder_values[start] != value:
                raise ValueError(f"{value!r} is not in the inorder sequence where expected")
            return node
        position = _locate(inorder_values, value, start, end)
        node.left = build(start, position - 1)
        node.right = build(position + 1, end)
        return node

    return build(0, len(inorder_values) - 1)


def build_from_postorder_inorder(
    postorder_values: Sequence[Any], inorder_values: Sequence[Any]
) -> Optional[Node]:
    """Rebuild a tree from its postorder and inorder sequences."""
    if len(postorder_values) != len(inorder_values):
        raise ValueError("traversals must have the same length")
    picks = reversed(list(postorder_values))

    def build(start: int, end: int) -> Optional[Node]:
        if start > end:
            return None
        value = next(picks)
        node = Node(value)
        if start == end:
            if inorder_values[start] != value:
                raise ValueError(f"{value!r} is not in the inorder sequence where expected")
            return node
        position = _locate(inorder_values, value, start, end)
        node.right = build(position + 1, end)
        node.left = build(start, position - 1)
        return node

    return build(0, len(inorder_values) - 1)


def sum_at_level(root: Optional[Node], k: int) -> Any:
    """Sum of the values on level ``k``, the root being level 0.

    Levels below the tree, and the empty tree, sum to 0.
    """
    for depth, level in enumerate(_levels(root)):
        if depth == k:
            return sum(node.data for node in level)
    return 0


def count_nodes(root: Optional[Node]) -> int:
    """Number of nodes in the tree."""
    if root is None:
        return 0
    return count_nodes(root.left) + count_nodes(root.right) + 1


def sum_nodes(root: Optional[Node]) -> Any:
    """Sum of every value in the tree."""
    if root is None:
        return 0
    return sum_nodes(root.left) + sum_nodes(root.right) + root.data


def height(root: Optional[Node]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def diameter(root: Optional[Node]) -> int:
    """Number of nodes on the longest path between any two nodes."""

    def measure(node: Optional[Node]) -> tuple:
        if node is None:
            return 0, 0
        left_diameter, left_height = measure(node.left)
        right_diameter, right_height = measure(node.right)
        through = left_height + right_height + 1
        return (
            max(through, left_diameter, right_diameter),
            max(left_height, right_height) + 1,
        )

    return measure(root)[0]


def sum_replace(root: Optional[Node]) -> None:
    """Replace every value, in place, with the sum of its subtree."""
    if root is None:
        return
    sum_replace(root.left)
    sum_replace(root.right)
    if root.left is not None:
        root.data += root.left.data
    if root.right is not None:
        root.data += root.right.data


def right_view(root: Optional[Node]) -> List[Any]:
    """The rightmost value of every level."""
    return [level[-1].data for level in _levels(root)]


def left_view(root: Optional[Node]) -> List[Any]:
    """The leftmost value of every level."""
    return [level[0].data for level in _levels(root)]