"""Structural queries on binary trees: balance, ancestors, paths and distances."""

from __future__ import annotations

from typing import Any, List, Optional

from dsakit.binary_tree import Node


def is_balanced(root: Optional[Node]) -> bool:
    """Whether every node's subtrees differ in height by at most one."""

    def balanced_height(node: Optional[Node]) -> Optional[int]:
        if node is None:
            return 0
        left = balanced_height(node.left)
        if left is None:
            return None
        right = balanced_height(node.right)
        if right is None or abs(left - right) > 1:
            return None
        return max(left, right) + 1

    return balanced_height(root) is not None


def _node_path(root: Optional[Node], key: Any) -> Optional[List[Node]]:
    """Nodes from ``root`` down to the first node holding ``key`` (preorder search)."""
    path: List[Node] = []

    def walk(node: Optional[Node]) -> bool:
        if node is None:
            return False
        path.append(node)
        if node.data == key or walk(node.left) or walk(node.right):
            return True
        path.pop()
        return False

    return path if walk(root) else None


def find_path(root: Optional[Node], key: Any) -> Optional[List[Any]]:
    """Values from the root down to ``key``, or None when ``key`` is absent."""
    path = _node_path(root, key)
    if path is None:
        return None
    return [node.data for node in path]


def lowest_common_ancestor(
    root: Optional[Node], first: Any, second: Any
) -> Optional[Node]:
    """The deepest node that is an ancestor of both keys, or None if either is absent."""
    first_path = _node_path(root, first)
    second_path = _node_path(root, second)
    if first_path is None or second_path is None:
        return None
    ancestor: Optional[Node] = None
    for a, b in zip(first_path, second_path):
        if a is not b:
            break
        ancestor = a
    return ancestor


def _depth_below(node: Optional[Node], key: Any, depth: int = 0) -> int:
    if node is None:
        return -1
    if node.data == key:
        return depth
    left = _depth_below(node.left, key, depth + 1)
    if left != -1:
        return left
    return _depth_below(node.right, key, depth + 1)


def distance_between(root: Optional[Node], first: Any, second: Any) -> int:
    """Number of edges on the path between the nodes holding two keys."""
    ancestor = lowest_common_ancestor(root, first, second)
    if ancestor is None:
        raise ValueError(f"{first!r} or {second!r} is not in the tree")
    return _depth_below(ancestor, first) + _depth_below(ancestor, second)


def flatten(root: Optional[Node]) -> None:
    """Turn the tree, in place, into a right-linked chain in preorder."""
    if root is None or (root.left is None and root.right is None):
        return
    if root.left is not None:
        flatten(root.left)
        rest = root.right
        root.right = root.left
        root.left = None
        tail = root.right
        while tail.right is not None:
            tail = tail.right
        tail.right = rest
    flatten(root.right)


def nodes_at_distance(root: Optional[Node], target: Node, k: int) -> List[Any]:
    """Values of every node exactly ``k`` edges away from ``target``.

    Nodes below ``target`` come first, then those reached through its ancestors.
    """
    found: List[Any] = []

    def below(node: Optional[Node], distance: int) -> None:
        if node is None or distance < 0:
            return
        if distance == 0:
            found.append(node.data)
            return
        below(node.left, distance - 1)
        below(node.right, distance - 1)

    def search(node: Optional[Node]) -> int:
        if node is None:
            return -1
        if node is target:
            below(node, k)
            return 0
        left = search(node.left)
        if left != -1:
            if left + 1 == k:
                found.append(node.data)
            else:
                below(node.right, k - left - 2)
            return left + 1
        right = search(node.right)
        if right != -1:
            if right + 1 == k:
                found.append(node.data)
            else:
                below(node.left, k - right - 2)
            return right + 1
        return -1

    search(root)
    return found


def max_path_sum(root: Optional[Node]) -> Any:
    """Largest sum of values along any path between two nodes."""
    if root is None:
        raise ValueError("max_path_sum() of an empty tree")
    best = root.data

    def gain(node: Optional[Node]) -> Any:
        nonlocal best
        if node is None:
            return 0
        left = gain(node.left)
        right = gain(node.right)
        through = max(node.data, node.data + left + right, node.data + left, node.data + right)
        best = max(best, through)
        return max(node.data, node.data + left, node.data + right)

    gain(root)
    return best