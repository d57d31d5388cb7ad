"""
Pytest configuration and shared fixtures.
"""

import pytest

from pathsearch.core.graph import Graph


@pytest.fixture
def chain() -> Graph:
    """A - B - C with unit weights."""
    g = Graph()
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 1)
    return g


@pytest.fixture
def chain_with_shortcut(chain: Graph) -> Graph:
    """The chain plus a direct A - C edge that is more expensive than going via B."""
    chain.add_edge("A", "C", 5)
    return chain


@pytest.fixture
def disconnected() -> Graph:
    g = Graph()
    g.add_node("A")
    g.add_node("B")
    return g


@pytest.fixture
def grid3() -> list[list[int]]:
    """3x3 map of plain tiles."""
    return [[0, 0, 0], [0, 0, 0], [0, 0, 0]]
