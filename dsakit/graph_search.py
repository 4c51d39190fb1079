"""Graph traversal, cycle detection, disjoint sets and topological ordering."""

from __future__ import annotations

from collections import defaultdict, deque
from enum import Enum
from typing import Dict, Hashable, Iterable, List, Mapping, Sequence, Tuple

Edge = Tuple[int, int]


def undirected_adjacency(edges: Iterable[Tuple[Hashable, Hashable]]) -> Dict[Hashable, List[Hashable]]:
    """Adjacency lists of an undirected graph, neighbours in edge order."""
    adjacency: Dict[Hashable, List[Hashable]] = defaultdict(list)
    for x, y in edges:
        adjacency[x].append(y)
        adjacency[y].append(x)
    return dict(adjacency)


def bfs(adjacency: Mapping[Hashable, Sequence[Hashable]], start: Hashable) -> List[Hashable]:
    """Nodes reachable from ``start`` in breadth-first order."""
    visited = {start}
    order: List[Hashable] = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency.get(node, ()):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(adjacency: Mapping[Hashable, Sequence[Hashable]], start: Hashable) -> List[Hashable]:
    """Nodes reachable from ``start`` in depth-first preorder."""
    visited = {start}
    order = [start]
    stack = [iter(adjacency.get(start, ()))]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(adjacency.get(neighbour, ())))
                break
        else:
            stack.pop()
    return order


def _adjacency_lists(n: int, edges: Iterable[Edge], directed: bool) -> List[List[int]]:
    adjacency: List[List[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) has a node outside 0..{n - 1}")
        adjacency[u].append(v)
        if not directed:
            adjacency[v].append(u)
    return adjacency


def has_cycle_undirected(n: int, edges: Iterable[Edge]) -> bool:
    """Whether an undirected graph on nodes ``0..n-1`` has a cycle.

    The edge back to a node's parent is never counted, so a repeated edge
    between the same two nodes is not a cycle.
    """
    adjacency = _adjacency_lists(n, edges, directed=False)
    visited = [False] * n
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, -1, iter(adjacency[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour == parent:
                    continue
                if visited[neighbour]:
                    return True
                visited[neighbour] = True
                stack.append((neighbour, node, iter(adjacency[neighbour])))
                break
            else:
                stack.pop()
    return False


class _Mark(Enum):
    UNSEEN = 0
    ON_PATH = 1
    DONE = 2


def has_cycle_directed(n: int, edges: Iterable[Edge]) -> bool:
    """Whether a directed graph on nodes ``0..n-1`` has a cycle."""
    adjacency = _adjacency_lists(n, edges, directed=True)
    marks = [_Mark.UNSEEN] * n
    for root in range(n):
        if marks[root] is not _Mark.UNSEEN:
            continue
        marks[root] = _Mark.ON_PATH
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if marks[neighbour] is _Mark.ON_PATH:
                    return True
                if marks[neighbour] is _Mark.UNSEEN:
                    marks[neighbour] = _Mark.ON_PATH
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                marks[node] = _Mark.DONE
                stack.pop()
    return False


class DisjointSet:
    """Union-find with path compression and union by size.

    Elements are created on first use.
    """

    def __init__(self) -> None:
        self._parent: Dict[Hashable, Hashable] = {}
        self._size: Dict[Hashable, int] = {}

    def make_set(self, v: Hashable) -> None:
        """Put ``v`` in a set of its own."""
        self._parent[v] = v
        self._size[v] = 1

    def find(self, v: Hashable) -> Hashable:
        """Representative of the set holding ``v``."""
        if v not in self._parent:
            self.make_set(v)
            return v
        root = v
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[v] != root:
            self._parent[v], v = root, self._parent[v]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Join the sets of ``a`` and ``b``; False if they were already one."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        return True


def has_cycle_union_find(edges: Iterable[Tuple[Hashable, Hashable]]) -> bool:
    """Whether the undirected edges close a cycle, checked with union-find."""
    sets = DisjointSet()
    cycle = False
    for u, v in edges:
        if not sets.union(u, v):
            cycle = True
    return cycle


def topological_sort(n: int, edges: Iterable[Edge]) -> List[int]:
    """Order nodes ``0..n-1`` so every edge points forward (Kahn's algorithm).

    Raises ValueError when the graph has a cycle.
    """
    adjacency = _adjacency_lists(n, edges, directed=True)
    indegree = [0] * n
    for targets in adjacency:
        for v in targets:
            indegree[v] += 1
    queue = deque(node for node in range(n) if indegree[node] == 0)
    order: List[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for v in adjacency[node]:
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)
    if len(order) != n:
        raise ValueError("graph has a cycle; no topological order exists")
    return order