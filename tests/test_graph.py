"""Graph container, BFS / DFS and hop-count shortest path."""

from algorithms import bfs, dfs, find_shortest_path
from structures import GraphData


# ---------------------------------------------------------------------------
# GraphData
# ---------------------------------------------------------------------------
def test_adjacency_list_import(branching_graph):
    g = branching_graph
    assert g.node_ids() == ["1", "2", "3", "4"]
    assert g.edge_count() == 3
    assert g.neighbours("1") == ["2", "3"]
    assert g.neighbours("2") == ["1", "4"]
    assert g.node_value("4") == 4


def test_directed_edges_are_one_way():
    g = GraphData.from_adjacency_list("a -> b\nb -> c", is_directed=True)
    assert g.neighbours("a") == ["b"]
    assert g.neighbours("b") == ["c"]
    assert g.neighbours("c") == []
    assert g.node_value("a") == "a"


def test_blank_labels_are_skipped():
    g = GraphData.from_adjacency_list("1: (3)")
    assert g.node_ids() == ["1"]
    assert g.edge_count() == 0

    g = GraphData.from_adjacency_list(": 2\n2: 3(4)")
    assert g.node_ids() == ["2", "3"]
    assert [e["target"] for e in g.to_dict()["edges"]] == ["3"]


def test_dict_round_trip_keeps_adjacency(branching_graph):
    copy = GraphData.from_dict(branching_graph.to_dict())
    assert copy.to_dict() == branching_graph.to_dict()
    assert copy.neighbours("2") == ["1", "4"]


# ---------------------------------------------------------------------------
# BFS
# ---------------------------------------------------------------------------
def test_bfs_chain(chain_graph):
    steps = []
    order = bfs(chain_graph, "1", steps)

    assert order == ["1", "2", "3"]
    assert [s.explanation for s in steps] == [
        "Starting BFS from node 1",
        "Visiting node 1",
        "Found unvisited neighbor 2",
        "Visiting node 2",
        "Found unvisited neighbor 3",
        "Visiting node 3",
        "BFS Traversal Complete",
    ]
    assert steps[0].visited == ["1"]
    assert steps[-1].visited == ["1", "2", "3"]


def test_bfs_is_level_order(branching_graph):
    assert bfs(branching_graph, "1", []) == ["1", "2", "3", "4"]


def test_bfs_respects_direction():
    g = GraphData.from_adjacency_list("1 -> 2\n2 -> 3", is_directed=True)
    assert bfs(g, "3", []) == ["3"]
    assert bfs(g, "1", []) == ["1", "2", "3"]


def test_traversal_leaves_graph_untouched(branching_graph):
    before = branching_graph.to_dict()
    steps = []
    bfs(branching_graph, "1", steps)
    dfs(branching_graph, "1", steps)
    assert branching_graph.to_dict() == before
    assert all(s.graph is branching_graph for s in steps)


# ---------------------------------------------------------------------------
# DFS
# ---------------------------------------------------------------------------
def test_dfs_goes_deep_first(branching_graph):
    steps = []
    order = dfs(branching_graph, "1", steps)

    assert order == ["1", "2", "4", "3"]
    assert steps[0].explanation == "Starting DFS from node 1"
    assert steps[0].visited == []
    assert steps[-1].explanation == "DFS Traversal Complete"
    assert len(steps) == 2 + 4


def test_dfs_visits_each_node_once():
    g = GraphData.from_adjacency_list("1: 2 3\n2: 3\n3: 1")
    order = dfs(g, "1", [])
    assert sorted(order) == ["1", "2", "3"]
    assert len(order) == len(set(order))


# ---------------------------------------------------------------------------
# Shortest path
# ---------------------------------------------------------------------------
def test_shortest_path_chain(chain_graph):
    steps = []
    path = find_shortest_path(chain_graph, "1", "3", steps)

    assert path == ["1", "2", "3"]
    assert steps[0].explanation == "Finding shortest path from 1 to 3"
    assert steps[-1].explanation == "Shortest path found! Length = 2: 1 → 2 → 3"
    assert steps[-1].visited == path


def test_shortest_path_prefers_fewest_hops():
    g = GraphData.from_adjacency_list("1: 2 5\n2: 3\n3: 4\n5: 4")
    assert find_shortest_path(g, "1", "4", []) == ["1", "5", "4"]


def test_shortest_path_to_self():
    g = GraphData.from_adjacency_list("1: 2")
    steps = []
    assert find_shortest_path(g, "1", "1", steps) == ["1"]
    assert steps[-1].explanation == "Shortest path found! Length = 0: 1"


def test_no_path():
    g = GraphData.from_adjacency_list("1: 2\n3")
    steps = []

    assert find_shortest_path(g, "1", "3", steps) is None
    assert steps[-1].explanation == "No path found from 1 to 3"
    assert steps[-1].visited == ["1", "2"]
