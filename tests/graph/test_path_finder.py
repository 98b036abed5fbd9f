"""
Tests for breadth-first path finding.

Tests cover:
1. Shortest path selection and tie-breaking
2. Self-conversion (CycleError)
3. Depth limit (MaxDepthError)
4. Unreachable targets
"""

import pytest

from unacy.core.graph import UnitGraph, find_shortest_path
from unacy.utils.exceptions import CycleError, MaxDepthError


def noop(x):
    return x


@pytest.mark.unit
class TestFindShortestPath:
    """Tests for shortest path discovery."""

    def test_direct_edge(self):
        """Test a single edge yields a 2-unit path."""
        graph = UnitGraph().add_edge("A", "B", noop)

        assert find_shortest_path("A", "B", graph) == ["A", "B"]

    def test_multi_hop(self):
        """Test a chain yields every unit in order."""
        graph = UnitGraph().add_edge("A", "B", noop).add_edge("B", "C", noop).add_edge("C", "D", noop)

        assert find_shortest_path("A", "D", graph) == ["A", "B", "C", "D"]

    def test_prefers_fewest_edges(self):
        """Test a 1-hop path beats a 2-hop path registered first."""
        graph = (
            UnitGraph()
            .add_edge("A", "B", noop)
            .add_edge("B", "D", noop)
            .add_edge("A", "D", noop)
        )

        assert find_shortest_path("A", "D", graph) == ["A", "D"]

    def test_tie_break_by_registration_order(self):
        """Test the first equal-length path in adjacency order wins."""
        graph = (
            UnitGraph()
            .add_edge("A", "C", noop)
            .add_edge("A", "B", noop)
            .add_edge("B", "D", noop)
            .add_edge("C", "D", noop)
        )

        assert find_shortest_path("A", "D", graph) == ["A", "C", "D"]

    def test_cycles_in_graph_are_skipped(self):
        """Test cycles elsewhere in the graph don't raise or loop."""
        graph = (
            UnitGraph()
            .add_edge("A", "B", noop)
            .add_edge("B", "C", noop)
            .add_edge("C", "A", noop)
            .add_edge("C", "D", noop)
        )

        assert find_shortest_path("A", "D", graph) == ["A", "B", "C", "D"]

    def test_unreachable_returns_none(self):
        """Test an unreachable target returns None."""
        graph = UnitGraph().add_edge("A", "B", noop)

        assert find_shortest_path("A", "Z", graph) is None

    def test_unknown_source_returns_none(self):
        """Test a source with no edges returns None."""
        graph = UnitGraph().add_edge("A", "B", noop)

        assert find_shortest_path("X", "B", graph) is None

    def test_wrong_direction_returns_none(self):
        """Test edges are not followed backwards."""
        graph = UnitGraph().add_edge("A", "B", noop)

        assert find_shortest_path("B", "A", graph) is None


@pytest.mark.unit
class TestPathFinderGuards:
    """Tests for cycle and depth guards."""

    def test_self_conversion_raises_cycle_error(self):
        """Test from == to raises CycleError without searching."""
        graph = UnitGraph().add_edge("A", "B", noop).add_edge("B", "A", noop)

        with pytest.raises(CycleError) as exc_info:
            find_shortest_path("A", "A", graph)

        assert exc_info.value.path == ["A", "A"]

    def test_self_conversion_on_empty_graph(self):
        """Test CycleError is raised even for units with no edges."""
        with pytest.raises(CycleError):
            find_shortest_path("X", "X", UnitGraph())

    def test_five_edges_within_limit(self, chain_graph):
        """Test a 5-edge chain resolves at the default depth."""
        path = find_shortest_path("U1", "U6", chain_graph(5))

        assert path == ["U1", "U2", "U3", "U4", "U5", "U6"]

    def test_six_edges_exceed_limit(self, chain_graph):
        """Test a 6-edge chain raises MaxDepthError."""
        with pytest.raises(MaxDepthError) as exc_info:
            find_shortest_path("U1", "U7", chain_graph(6))

        assert exc_info.value.source == "U1"
        assert exc_info.value.target == "U7"
        assert exc_info.value.max_depth == 5

    def test_custom_max_depth(self, chain_graph):
        """Test the depth limit is configurable."""
        graph = chain_graph(3)

        with pytest.raises(MaxDepthError) as exc_info:
            find_shortest_path("U1", "U4", graph, max_depth=2)

        assert exc_info.value.max_depth == 2
        assert find_shortest_path("U1", "U4", graph, max_depth=3) == ["U1", "U2", "U3", "U4"]

    def test_shortcut_avoids_depth_error(self, chain_graph):
        """Test a short path is found before long branches hit the limit."""
        graph = chain_graph(6).add_edge("U1", "U7", noop)

        assert find_shortest_path("U1", "U7", graph) == ["U1", "U7"]
