"""Minimum spanning trees and shortest paths on weighted graphs."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict
from typing import Dict, Iterable, List, Tuple, Union

from dsakit.graph_search import DisjointSet

WeightedEdge = Tuple[int, int, int]
Distance = Union[int, float]


class NegativeCycleError(Exception):
    """Raised when a graph holds a cycle of negative total weight."""


def kruskal(edges: Iterable[WeightedEdge]) -> Tuple[List[Tuple[int, int]], int]:
    """Minimum spanning forest of ``(u, v, weight)`` edges.

    Returns the chosen ``(u, v)`` edges in the order taken and their total weight.
    """
    ordered = sorted((w, u, v) for u, v, w in edges)
    sets = DisjointSet()
    chosen: List[Tuple[int, int]] = []
    cost = 0
    for w, u, v in ordered:
        if sets.union(u, v):
            chosen.append((u, v))
            cost += w
    return chosen, cost


def prim(edges: Iterable[WeightedEdge], n: int) -> List[Tuple[int, int]]:
    """Minimum spanning tree of a connected graph on nodes ``1..n``, grown from 1.

    Returns ``(tree_node, new_node)`` edges in the order added.
    """
    adjacency: Dict[int, List[Tuple[int, int]]] = defaultdict(list)
    for a, b, weight in edges:
        adjacency[a].append((b, weight))
        adjacency[b].append((a, weight))
    heap = [(weight, 1, node) for node, weight in adjacency[1]]
    heapq.heapify(heap)
    tree: List[Tuple[int, int]] = []
    visited = {1}
    while len(visited) < n:
        if not heap:
            raise ValueError("graph is not connected")
        _, a, b = heapq.heappop(heap)
        if b in visited:
            continue
        tree.append((a, b))
        visited.add(b)
        for neighbour, weight in adjacency[b]:
            if neighbour not in visited:
                heapq.heappush(heap, (weight, b, neighbour))
    return tree


def _check_node(n: int, node: int) -> None:
    if not 0 <= node < n:
        raise ValueError(f"node {node} outside 0..{n - 1}")


def dijkstra(n: int, edges: Iterable[WeightedEdge], source: int) -> List[Distance]:
    """Shortest distances from ``source`` in an undirected graph on ``0..n-1``.

    Unreachable nodes get ``math.inf``.
    """
    _check_node(n, source)
    adjacency: List[List[Tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, w in edges:
        _check_node(n, u)
        _check_node(n, v)
        adjacency[u].append((v, w))
        adjacency[v].append((u, w))
    distance: List[Distance] = [math.inf] * n
    distance[source] = 0
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > distance[u]:
            continue
        for v, w in adjacency[u]:
            if distance[u] + w < distance[v]:
                distance[v] = distance[u] + w
                heapq.heappush(heap, (distance[v], v))
    return distance


def bellman_ford(n: int, edges: Iterable[WeightedEdge], source: int) -> List[Distance]:
    """Shortest distances from ``source`` along directed edges on ``0..n-1``.

    Negative weights are allowed; unreachable nodes get ``math.inf``.
    Raises NegativeCycleError when a negative cycle is reachable.
    """
    _check_node(n, source)
    edge_list = list(edges)
    for u, v, _ in edge_list:
        _check_node(n, u)
        _check_node(n, v)
    distance: List[Distance] = [math.inf] * n
    distance[source] = 0
    for _ in range(n - 1):
        for u, v, w in edge_list:
            if distance[u] != math.inf and distance[u] + w < distance[v]:
                distance[v] = distance[u] + w
    for u, v, w in edge_list:
        if distance[u] != math.inf and distance[u] + w < distance[v]:
            raise NegativeCycleError("graph contains a negative weight cycle")
    return distance


def floyd_warshall(n: int, edges: Iterable[WeightedEdge]) -> List[List[Distance]]:
    """All-pairs shortest distances along directed edges on ``0..n-1``.

    A later edge between the same pair replaces an earlier one. The diagonal
    starts at ``math.inf``, so ``result[i][i]`` is the shortest cycle through
    ``i``. Missing paths are ``math.inf``.
    """
    dist: List[List[Distance]] = [[math.inf] * n for _ in range(n)]
    for u, v, w in edges:
        _check_node(n, u)
        _check_node(n, v)
        dist[u][v] = w
    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            via = dist[i][k]
            if via == math.inf:
                continue
            row_i = dist[i]
            for j in range(n):
                if row_k[j] != math.inf and via + row_k[j] < row_i[j]:
                    row_i[j] = via + row_k[j]
    return dist