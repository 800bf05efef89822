import pytest

from searchlab.traversal import bfs, dfs

TREE = [[1, 2], [0, 3], [0], [1]]


def test_bfs_on_tree():
    assert bfs(TREE) == [0, 1, 2, 3]


def test_dfs_on_tree_is_preorder():
    assert dfs(TREE) == [0, 1, 3, 2]


def test_dfs_on_triangle_follows_every_simple_path():
    triangle = [[1, 2], [0, 2], [0, 1]]
    assert dfs(triangle) == [0, 1, 2, 2, 1]


def test_bfs_visits_each_reachable_node_once():
    graph = [[1, 2, 3], [0, 2], [0, 1, 3], [0, 2], [5], [4]]
    order = bfs(graph)
    assert order[0] == 0
    assert len(order) == len(set(order))
    assert set(order) == {0, 1, 2, 3}


def test_bfs_distances_never_decrease():
    graph = [[1], [0, 2, 3], [1, 4], [1], [2]]
    order = bfs(graph)
    distance = {0: 0}
    for node in order:
        for neighbour in graph[node]:
            distance.setdefault(neighbour, distance[node] + 1)
    depths = [distance[node] for node in order]
    assert depths == sorted(depths)


def test_traversals_agree_on_path_graph():
    path = [[1], [0, 2], [1, 3], [2]]
    assert bfs(path) == dfs(path) == list(range(len(path)))


def test_single_vertex():
    assert bfs([[]]) == [0]
    assert dfs([[]]) == [0]


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_empty_graph_rejected(traverse):
    with pytest.raises(ValueError):
        traverse([])


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_unknown_neighbour_rejected(traverse):
    with pytest.raises(ValueError):
        traverse([[1], [5]])