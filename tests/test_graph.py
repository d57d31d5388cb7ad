"""
Unit tests for the Graph adjacency store.
"""

import math

import pytest

from pathsearch.core.errors import NegativeWeightError, UnknownNodeError
from pathsearch.core.graph import Graph


class TestConstruction:
    """Node and edge registration."""

    def test_add_node_is_idempotent(self):
        g = Graph()
        g.add_node("A")
        g.add_edge("A", "B", 2)
        g.add_node("A")
        assert len(g) == 2
        assert g.neighbors("A") == ["B"]

    def test_add_edge_registers_endpoints_symmetrically(self):
        g = Graph()
        g.add_edge("A", "B", 3)
        assert "A" in g and "B" in g
        assert g.cost("A", "B") == 3.0
        assert g.cost("B", "A") == 3.0

    def test_add_edge_last_write_wins(self):
        g = Graph()
        g.add_edge("A", "B", 3)
        g.add_edge("A", "B", 7)
        assert g.cost("A", "B") == 7.0
        assert g.neighbors("A") == ["B"]

    def test_add_edge_twice_same_weight_is_idempotent(self):
        g = Graph()
        g.add_edge("A", "B", 4)
        before = (g.neighbors("A"), g.neighbors("B"), list(g.edges()))
        g.add_edge("A", "B", 4)
        assert (g.neighbors("A"), g.neighbors("B"), list(g.edges())) == before

    def test_directed_edge_is_one_way(self):
        g = Graph()
        g.add_directed_edge("A", "B", 2)
        assert g.cost("A", "B") == 2.0
        assert g.cost("B", "A") is None
        assert g.neighbors("B") == []

    def test_self_loop_and_zero_weight_allowed(self):
        g = Graph()
        g.add_edge("A", "A", 0)
        assert g.cost("A", "A") == 0.0

    @pytest.mark.parametrize("weight", [-1, -0.5, math.nan, "heavy", None])
    def test_invalid_weight_rejected(self, weight):
        g = Graph()
        with pytest.raises(NegativeWeightError):
            g.add_edge("A", "B", weight)
        assert len(g) == 0

    def test_negative_weight_error_is_value_error(self):
        with pytest.raises(ValueError):
            Graph().add_directed_edge("A", "B", -3)

    def test_from_mapping(self):
        g = Graph.from_mapping({"A": {"B": 1}, "B": {"C": 2}})
        assert g.cost("C", "B") == 2.0
        assert set(g.nodes) == {"A", "B", "C"}

    def test_remove_node_drops_incident_edges(self, chain):
        chain.remove_node("B")
        assert "B" not in chain
        assert chain.neighbors("A") == []
        assert chain.neighbors("C") == []

    def test_clear(self, chain):
        chain.clear()
        assert len(chain) == 0
        assert "A" not in chain


class TestQueries:
    """Adjacency and cost lookups."""

    def test_cost_absent_edge_is_none_not_zero(self, chain):
        assert chain.cost("A", "C") is None

    def test_unknown_node_raises(self, chain):
        with pytest.raises(UnknownNodeError):
            chain.neighbors("Z")
        with pytest.raises(UnknownNodeError):
            chain.cost("A", "Z")
        with pytest.raises(UnknownNodeError):
            chain.cost("Z", "A")
        with pytest.raises(UnknownNodeError):
            chain.remove_node("Z")

    def test_unknown_node_error_is_lookup_error(self, chain):
        with pytest.raises(LookupError):
            chain.neighbors("Z")

    def test_neighbors_order_is_stable(self):
        g = Graph()
        for n in ["D", "B", "C"]:
            g.add_edge("A", n, 1)
        assert g.neighbors("A") == ["D", "B", "C"]
        assert g.neighbors("A") == g.neighbors("A")

    def test_edges_lists_both_directions(self, chain):
        assert sorted(chain.edges()) == [
            ("A", "B", 1.0), ("B", "A", 1.0), ("B", "C", 1.0), ("C", "B", 1.0),
        ]
