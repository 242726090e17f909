"""Tests for reachability and shortest routes."""

import math

import pytest

from labsched.graphs import NoRouteError, bfs, get_route, has_route, reconstruct_path


@pytest.fixture
def chain(make_graph):
    """Nodes 1..4 with directed edges 1->2, 2->3; node 4 is isolated."""
    G = make_graph("chain")
    for label in ["1", "2", "3", "4"]:
        G.add_node(label)
    G.add_directed_edge("1", "2")
    G.add_directed_edge("2", "3")
    return G


@pytest.fixture
def complex_graph(make_graph):
    """Seven nodes with several competing routes."""
    G = make_graph("complex")
    G.add_directed_edge("node 1", "node 2")
    G.add_directed_edge("node 1", "node 3")
    G.add_directed_edge("node 2", "node 5")
    G.add_directed_edge("node 3", "node 4")
    G.add_directed_edge("node 5", "node 6")
    G.add_directed_edge("node 6", "node 4")
    G.add_directed_edge("node 6", "node 7")
    G.add_directed_edge("node 7", "node 5")
    G.add_directed_edge("node 5", "node 4")
    return G


class TestHasRoute:
    """Tests for has_route."""

    def test_chain(self, chain):
        """Test forward and backward reachability on a chain."""
        assert has_route(chain, "1", "3")
        assert has_route(chain, "1", "2")
        assert not has_route(chain, "3", "1")
        assert not has_route(chain, "1", "4")

    def test_self(self, chain):
        """Test that every label reaches itself."""
        assert has_route(chain, "4", "4")

    def test_cycle_terminates(self, make_graph):
        """Test that cycles do not cause endless search."""
        G = make_graph()
        G.add_directed_edge("a", "b")
        G.add_directed_edge("b", "a")
        G.add_node("c")
        assert not has_route(G, "a", "c")
        assert has_route(G, "b", "a")

    def test_does_not_sort_neighbors(self, complex_graph, monkeypatch):
        """Test that reachability expands neighbors without sorting them."""
        import labsched.graphs.paths as paths

        def fail(*args):
            raise AssertionError("has_route should not sort neighbors")

        monkeypatch.setattr(paths, "_sorted_neighbors", fail)

        assert has_route(complex_graph, "node 1", "node 7")
        assert not has_route(complex_graph, "node 4", "node 1")


class TestGetRoute:
    """Tests for get_route."""

    def test_chain(self, chain):
        """Test the route along a chain."""
        assert get_route(chain, "1", "3") == ["1", "2", "3"]

    def test_single_node_route(self, chain):
        """Test that a label's route to itself is just the label."""
        assert get_route(chain, "2", "2") == ["2"]

    def test_no_route_backwards(self, chain):
        """Test that direction matters."""
        with pytest.raises(NoRouteError) as excinfo:
            get_route(chain, "3", "1")
        assert excinfo.value.source == "3"
        assert excinfo.value.target == "1"

    def test_no_route_isolated(self, chain):
        """Test an isolated target."""
        with pytest.raises(NoRouteError):
            get_route(chain, "1", "4")

    def test_shortest_routes(self, complex_graph):
        """Test that the fewest-edge route is returned."""
        assert get_route(complex_graph, "node 1", "node 4") == ["node 1", "node 3", "node 4"]
        assert get_route(complex_graph, "node 1", "node 2") == ["node 1", "node 2"]
        assert get_route(complex_graph, "node 6", "node 4") == ["node 6", "node 4"]
        assert get_route(complex_graph, "node 7", "node 4") == ["node 7", "node 5", "node 4"]
        assert get_route(complex_graph, "node 1", "node 7") == [
            "node 1",
            "node 2",
            "node 5",
            "node 6",
            "node 7",
        ]

    def test_unreachable_in_complex(self, complex_graph):
        """Test several unreachable pairs."""
        for src, dst in [("node 4", "node 1"), ("node 5", "node 3"), ("node 7", "node 1")]:
            with pytest.raises(NoRouteError):
                get_route(complex_graph, src, dst)

    def test_undirected_route(self, make_graph):
        """Test routes over undirected edges run both ways."""
        G = make_graph()
        G.add_undirected_edge("a", "b")
        G.add_undirected_edge("b", "c")
        assert get_route(G, "c", "a") == ["c", "b", "a"]

    def test_tie_broken_by_label(self, make_graph):
        """Test that equal-length routes resolve deterministically."""
        G = make_graph()
        G.add_directed_edge("s", "z")
        G.add_directed_edge("s", "b")
        G.add_directed_edge("z", "t")
        G.add_directed_edge("b", "t")
        assert get_route(G, "s", "t") == ["s", "b", "t"]

    def test_route_agrees_with_has_route(self, complex_graph):
        """Test that get_route fails exactly when has_route is False."""
        labels = complex_graph.get_all_nodes()
        for src in labels:
            for dst in labels:
                if has_route(complex_graph, src, dst):
                    route = get_route(complex_graph, src, dst)
                    assert route[0] == src
                    assert route[-1] == dst
                    for a, b in zip(route, route[1:]):
                        assert b in complex_graph.get_neighbors(a)
                else:
                    with pytest.raises(NoRouteError):
                        get_route(complex_graph, src, dst)


class TestBFS:
    """Tests for breadth-first search."""

    def test_bfs_simple(self, make_graph):
        """Test BFS order, distances and parents."""
        G = make_graph()
        G.add_directed_edge("A", "B")
        G.add_directed_edge("A", "C")
        G.add_directed_edge("B", "D")

        order, dist, parent = bfs(G, "A")

        assert order == ["A", "B", "C", "D"]
        assert dist == {"A": 0, "B": 1, "C": 1, "D": 2}
        assert parent == {"A": None, "B": "A", "C": "A", "D": "B"}

    def test_bfs_disconnected(self, chain):
        """Test that unreachable labels keep infinite distance."""
        order, dist, parent = bfs(chain, "2")
        assert order == ["2", "3"]
        assert math.isinf(dist["1"])
        assert math.isinf(dist["4"])
        assert parent["4"] is None

    def test_bfs_nonexistent_source(self, make_graph):
        """Test BFS with an unregistered source."""
        order, dist, parent = bfs(make_graph(), "A")
        assert order == []
        assert dist == {}
        assert parent == {}

    def test_bfs_parent_feeds_reconstruct(self, complex_graph):
        """Test that BFS parents rebuild the same route as get_route."""
        _, _, parent = bfs(complex_graph, "node 1")
        assert reconstruct_path(parent, "node 7") == get_route(complex_graph, "node 1", "node 7")


class TestReconstructPath:
    """Tests for reconstruct_path."""

    def test_reconstruct_path_simple(self):
        """Test path reconstruction from parent map."""
        parent = {"A": None, "B": "A", "C": "B"}
        assert reconstruct_path(parent, "C") == ["A", "B", "C"]

    def test_reconstruct_path_root(self):
        """Test that the root reconstructs to itself."""
        assert reconstruct_path({"A": None}, "A") == ["A"]

    def test_reconstruct_path_missing(self):
        """Test a target absent from the map."""
        assert reconstruct_path({"A": None}, "D") is None

    def test_reconstruct_path_cycle(self):
        """Test that looping parent links are rejected."""
        assert reconstruct_path({"A": "B", "B": "A"}, "A") is None
