import pytest

from dsakit.graph_search import (
    DisjointSet,
    bfs,
    dfs,
    has_cycle_directed,
    has_cycle_undirected,
    has_cycle_union_find,
    topological_sort,
    undirected_adjacency,
)

EDGES = [(1, 2), (1, 3), (2, 4), (3, 4), (4, 5), (6, 7)]


def test_undirected_adjacency_is_symmetric():
    adjacency = undirected_adjacency(EDGES)
    for u, v in EDGES:
        assert v in adjacency[u]
        assert u in adjacency[v]
    assert sum(len(n) for n in adjacency.values()) == 2 * len(EDGES)


def test_bfs_visits_component_once():
    adjacency = undirected_adjacency(EDGES)
    order = bfs(adjacency, 1)
    assert order[0] == 1
    assert len(order) == len(set(order))
    assert set(order) == {1, 2, 3, 4, 5}


def test_bfs_order_is_by_level():
    adjacency = undirected_adjacency(EDGES)
    order = bfs(adjacency, 1)
    level = {1: 0}
    for node in order:
        for nb in adjacency[node]:
            level.setdefault(nb, level[node] + 1)
    levels = [level[node] for node in order]
    assert levels == sorted(levels)


def test_dfs_each_node_adjacent_to_earlier():
    adjacency = undirected_adjacency(EDGES)
    order = dfs(adjacency, 1)
    assert order[0] == 1
    assert set(order) == {1, 2, 3, 4, 5}
    for index, node in enumerate(order[1:], start=1):
        assert any(node in adjacency[prev] for prev in order[:index])


def test_dfs_and_bfs_reach_same_nodes():
    adjacency = undirected_adjacency(EDGES)
    assert set(dfs(adjacency, 6)) == set(bfs(adjacency, 6)) == {6, 7}


def test_undirected_cycle_source_example():
    assert has_cycle_undirected(4, [(0, 1), (1, 2), (2, 0)]) is True


def test_undirected_tree_has_no_cycle():
    assert has_cycle_undirected(5, [(0, 1), (0, 2), (2, 3), (2, 4)]) is False


def test_undirected_rejects_out_of_range_node():
    with pytest.raises(ValueError):
        has_cycle_undirected(2, [(0, 5)])


def test_directed_cycle_detection():
    assert has_cycle_directed(3, [(0, 1), (1, 2), (2, 0)]) is True
    assert has_cycle_directed(4, [(0, 1), (0, 2), (1, 3), (2, 3)]) is False


def test_disjoint_set_union_and_find():
    sets = DisjointSet()
    for v in range(4):
        sets.make_set(v)
    assert sets.union(0, 1) is True
    assert sets.union(2, 3) is True
    assert sets.find(0) == sets.find(1)
    assert sets.find(1) != sets.find(2)
    assert sets.union(1, 3) is True
    assert sets.find(0) == sets.find(3)
    assert sets.union(0, 2) is False


def test_disjoint_set_creates_on_find():
    sets = DisjointSet()
    assert sets.find("x") == "x"


def test_union_find_cycle():
    assert has_cycle_union_find([(0, 1), (1, 2), (2, 0)]) is True
    assert has_cycle_union_find([(0, 1), (1, 2), (2, 3)]) is False


def test_topological_sort_respects_edges():
    edges = [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]
    order = topological_sort(6, edges)
    assert sorted(order) == list(range(6))
    position = {node: i for i, node in enumerate(order)}
    for u, v in edges:
        assert position[u] < position[v]


def test_topological_sort_cycle_raises():
    edges = [(0, 1), (1, 2), (2, 0)]
    assert has_cycle_directed(3, edges)
    with pytest.raises(ValueError):
        topological_sort(3, edges)