"""Binary search trees: insertion, lookup, deletion, construction and counting."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Iterable, List, Optional, Sequence

from dsakit.binary_tree import Node


def insert(root: Optional[Node], value: Any) -> Node:
    """Insert ``value`` and return the root; equal values go to the right."""
    if root is None:
        return Node(value)
    if value < root.data:
        root.left = insert(root.left, value)
    else:
        root.right = insert(root.right, value)
    return root


def search(root: Optional[Node], key: Any) -> Optional[Node]:
    """The node holding ``key``, or None."""
    node = root
    while node is not None:
        if node.data == key:
            return node
        node = node.left if node.data > key else node.right
    return None


def inorder_successor(root: Optional[Node]) -> Optional[Node]:
    """The leftmost node of the subtree, i.e. its smallest value."""
    node = root
    while node is not None and node.left is not None:
        node = node.left
    return node


def delete(root: Optional[Node], key: Any) -> Optional[Node]:
    """Remove ``key`` and return the new root."""
    if root is None:
        raise KeyError(key)
    if key < root.data:
        root.left = delete(root.left, key)
    elif key > root.data:
        root.right = delete(root.right, key)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = inorder_successor(root.right)
        root.data = successor.data
        root.right = delete(root.right, successor.data)
    return root


def from_preorder(values: Iterable[Any]) -> Optional[Node]:
    """Rebuild a BST from its preorder sequence of distinct values."""
    data = list(values)
    position = 0

    def build(low: Any, high: Any) -> Optional[Node]:
        nonlocal position
        if position >= len(data):
            return None
        key = data[position]
        if (low is not None and key <= low) or (high is not None and key >= high):
            return None
        node = Node(key)
        position += 1
        node.left = build(low, key)
        node.right = build(key, high)
        return node

    root = build(None, None)
    if position != len(data):
        raise ValueError("values are not the preorder of a binary search tree")
    return root


def is_bst(root: Optional[Node]) -> bool:
    """Whether every value is strictly between the bounds its ancestors set."""

    def check(node: Optional[Node], low: Optional[Node], high: Optional[Node]) -> bool:
        if node is None:
            return True
        if low is not None and node.data <= low.data:
            return False
        if high is not None and node.data >= high.data:
            return False
        return check(node.left, low, node) and check(node.right, node, high)

    return check(root, None, None)


def from_sorted(values: Sequence[Any]) -> Optional[Node]:
    """A height-balanced BST built from an ascending sequence."""

    def build(start: int, end: int) -> Optional[Node]:
        if start > end:
            return None
        mid = (start + end) // 2
        return Node(values[mid], build(start, mid - 1), build(mid + 1, end))

    return build(0, len(values) - 1)


@lru_cache(maxsize=None)
def catalan(n: int) -> int:
    """The ``n``-th Catalan number; 1 for every ``n`` up to 1."""
    if n <= 1:
        return 1
    return sum(catalan(i) * catalan(n - i - 1) for i in range(n))


def all_bsts(start: int, end: int) -> List[Optional[Node]]:
    """Every structurally distinct BST over the keys ``start..end``.

    Subtrees are shared between the returned trees.
    """
    if start > end:
        return [None]
    trees: List[Optional[Node]] = []
    for key in range(start, end + 1):
        lefts = all_bsts(start, key - 1)
        rights = all_bsts(key + 1, end)
        for left in lefts:
            for right in rights:
                trees.append(Node(key, left, right))
    return trees