import pytest

from aoctools.astar import AStarError, AStarResult, astar

GRAPH = {
    "a": [("b", 10), ("c", 1)],
    "c": [("b", 1), ("d", 7)],
    "b": [("d", 1)],
    "d": [],
    "island": [],
}


def graph_edges(node):
    return [(nxt, cost, 0) for nxt, cost in GRAPH[node]]


def grid_edges(size):
    def edges(point):
        x, y = point
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nx, ny = x + dx, y + dy
            if 0 <= nx < size and 0 <= ny < size:
                yield (nx, ny), 1, 0

    return edges


def guided_grid_edges(size, goal):
    blind = grid_edges(size)

    def edges(point):
        return [
            (nxt, cost, abs(goal[0] - nxt[0]) + abs(goal[1] - nxt[1]))
            for nxt, cost, _ in blind(point)
        ]

    return edges


def test_prefers_cheaper_longer_route():
    result = astar("a", graph_edges, lambda n: n == "b")
    assert result.cost() == 2
    assert result.path() == ["a", "c", "b"]
    assert result.path_len() == len(result.path()) - 1


def test_start_is_goal():
    result = astar("a", graph_edges, lambda n: n == "a")
    assert result.found
    assert result.cost() == 0
    assert result.path() == ["a"]
    assert result.path_len() == 0


def test_no_path_raises():
    result = astar("a", graph_edges, lambda n: n == "island")
    assert not result.found
    with pytest.raises(AStarError):
        result.cost()
    with pytest.raises(AStarError):
        result.path()
    with pytest.raises(AStarError):
        result.path_len()
    assert set(result.examined_nodes) == {"a", "b", "c", "d"}


def test_error_message():
    assert str(AStarError()) == "No path found"


def test_grid_path_is_connected():
    goal = (4, 3)
    result = astar((0, 0), grid_edges(5), lambda p: p == goal)
    path = result.path()
    assert path[0] == (0, 0)
    assert path[-1] == goal
    assert result.cost() == result.path_len() == len(path) - 1
    for (x1, y1), (x2, y2) in zip(path, path[1:]):
        assert abs(x1 - x2) + abs(y1 - y2) == 1


def test_heuristic_keeps_optimal_cost():
    goal = (4, 4)
    guided = astar((0, 0), guided_grid_edges(5, goal), lambda p: p == goal)
    blind = astar((0, 0), grid_edges(5), lambda p: p == goal)
    assert guided.cost() == blind.cost() == 8
    assert len(guided.examined_nodes) <= len(blind.examined_nodes)


def test_examined_nodes_record_parents():
    result = astar("a", graph_edges, lambda n: n == "d")
    nodes = list(result.examined_nodes)
    assert nodes[0] == "a"
    assert result.examined_nodes["a"][0] is None
    for node, (parent, cost) in result.examined_nodes.items():
        if parent is not None:
            parent_cost = result.examined_nodes[nodes[parent]][1]
            assert parent_cost < cost


def test_result_built_directly():
    result = AStarResult({"x": (None, 0), "y": (0, 4)}, goal_index=1, goal_cost=4)
    assert result.path() == ["x", "y"]
    assert result.cost() == 4