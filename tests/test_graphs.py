import math

import pytest

from dsakit.graphs import (
    DirectedGraph,
    NegativeCycleError,
    adjacency_from_edges,
    bellman_ford,
    can_color,
    dfs,
    dijkstra,
)

DIJKSTRA_GRAPH = [
    [0, 4, 0, 0, 0, 0, 0, 8, 0],
    [4, 0, 8, 0, 0, 0, 0, 11, 0],
    [0, 8, 0, 7, 0, 4, 0, 0, 2],
    [0, 0, 7, 0, 9, 14, 0, 0, 0],
    [0, 0, 0, 9, 0, 10, 0, 0, 0],
    [0, 0, 4, 14, 10, 0, 2, 0, 0],
    [0, 0, 0, 0, 0, 2, 0, 1, 6],
    [8, 11, 0, 0, 0, 0, 1, 0, 7],
    [0, 0, 2, 0, 0, 0, 6, 7, 0],
]

BELLMAN_EDGES = [
    (0, 1, -1), (0, 2, 4), (1, 2, 3), (1, 3, 2),
    (1, 4, 2), (3, 2, 5), (3, 1, 1), (4, 3, -3),
]


def _matrix_edges(matrix):
    return [
        (u, v, w)
        for u, row in enumerate(matrix)
        for v, w in enumerate(row)
        if w
    ]


def test_neighbours_keep_insertion_order():
    graph = DirectedGraph(5)
    for target in (1, 4, 3):
        graph.add_edge(0, target)
    assert graph.neighbours(0) == [1, 4, 3]
    assert graph.neighbours(2) == []


def test_add_edge_rejects_unknown_vertex():
    graph = DirectedGraph(3)
    with pytest.raises(IndexError):
        graph.add_edge(0, 3)


def test_bfs_on_cycle_visits_each_vertex_once():
    graph = DirectedGraph(4)
    for u, v in [(0, 1), (1, 2), (2, 3), (3, 0)]:
        graph.add_edge(u, v)
    order = graph.bfs(0)
    assert order[0] == 0
    assert sorted(order) == [0, 1, 2, 3]


def test_bfs_only_reaches_connected_vertices():
    graph = DirectedGraph(4)
    graph.add_edge(0, 1)
    graph.add_edge(2, 3)
    assert sorted(graph.bfs(0)) == [0, 1]


def test_bfs_visits_by_level():
    graph = DirectedGraph(5)
    for u, v in [(0, 1), (0, 2), (1, 3), (2, 4)]:
        graph.add_edge(u, v)
    order = graph.bfs(0)
    assert set(order[1:3]) == {1, 2}
    assert set(order[3:]) == {3, 4}


def test_adjacency_from_edges_prepends():
    edges = [(0, 1), (1, 2), (2, 0), (2, 1), (3, 2), (4, 5), (5, 4)]
    adjacency = adjacency_from_edges(6, edges)
    assert adjacency[2] == [1, 0]
    assert sum(len(targets) for targets in adjacency) == len(edges)


def test_adjacency_from_edges_rejects_bad_vertex():
    with pytest.raises(IndexError):
        adjacency_from_edges(2, [(0, 5)])


def test_can_color_triangle():
    triangle = [[0, 1, 1], [1, 0, 1], [1, 1, 0]]
    assert can_color(triangle, 3)
    assert not can_color(triangle, 2)


def test_can_color_graph_without_edges_needs_one_colour():
    empty = [[0] * 4 for _ in range(4)]
    assert can_color(empty, 1)
    assert not can_color(empty, 0)


def test_dfs_source_example():
    matrix = [[0, 1, 1, 0], [0, 0, 1, 0], [1, 0, 0, 1], [0, 0, 0, 1]]
    order = dfs(matrix, 2)
    assert order == [2, 0, 1, 3]


def test_dfs_reaches_only_connected_vertices():
    matrix = [[0, 1, 0], [0, 0, 0], [0, 0, 0]]
    assert sorted(dfs(matrix, 0)) == [0, 1]
    assert dfs(matrix, 2) == [2]


def test_dijkstra_source_example():
    assert dijkstra(DIJKSTRA_GRAPH, 0) == [0, 4, 12, 19, 21, 11, 9, 8, 14]


def test_dijkstra_agrees_with_bellman_ford():
    edges = _matrix_edges(DIJKSTRA_GRAPH)
    for source in range(len(DIJKSTRA_GRAPH)):
        assert dijkstra(DIJKSTRA_GRAPH, source) == bellman_ford(9, edges, source)


def test_dijkstra_unreachable_is_infinite():
    matrix = [[0, 5, 0], [0, 0, 0], [0, 0, 0]]
    distances = dijkstra(matrix, 0)
    assert distances[1] == 5
    assert distances[2] == math.inf


def test_bellman_ford_source_example():
    assert bellman_ford(5, BELLMAN_EDGES, 0) == [0, -1, 2, -2, 1]


def test_bellman_ford_negative_cycle():
    edges = [(0, 1, 1), (1, 2, -2), (2, 1, 1)]
    with pytest.raises(NegativeCycleError):
        bellman_ford(3, edges, 0)


def test_bellman_ford_unreachable_and_bad_source():
    distances = bellman_ford(3, [(0, 1, 7)], 0)
    assert distances[1] == 7
    assert distances[2] == math.inf
    with pytest.raises(IndexError):
        bellman_ford(3, [], 3)