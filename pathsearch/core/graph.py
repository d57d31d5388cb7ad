# pathsearch/core/graph.py
# Weighted adjacency store. Per-search state never lives here, so a graph can be
# reused (or edited) between searches and read by several searches at once.
from __future__ import annotations
import math
from typing import Dict, Hashable, Iterator, List, Mapping, Optional, Tuple

from .errors import NegativeWeightError, UnknownNodeError

NodeId = Hashable


def _check_weight(a, b, weight) -> float:
    try:
        w = float(weight)
    except (TypeError, ValueError):
        raise NegativeWeightError(a, b, weight) from None
    if math.isnan(w) or w < 0:
        raise NegativeWeightError(a, b, weight)
    return w


class Graph:
    """
    Nodes plus non-negative edge weights.

    - edges[a][b] = weight; undirected edges are stored in both directions
    - neighbors() follows insertion order, so it is stable for a fixed graph
    - multigraphs are not supported: re-adding an edge overwrites its weight
    """

    def __init__(self) -> None:
        self._adj: Dict[NodeId, Dict[NodeId, float]] = {}

    @classmethod
    def from_mapping(cls, mapping: Mapping[NodeId, Mapping[NodeId, float]], directed: bool = False) -> "Graph":
        """Build a graph from {a: {b: weight}} (the classic textbook layout)."""
        g = cls()
        for a, nbrs in mapping.items():
            g.add_node(a)
            for b, w in nbrs.items():
                if directed:
                    g.add_directed_edge(a, b, w)
                else:
                    g.add_edge(a, b, w)
        return g

    # --- construction --------------------------------------------------------

    def add_node(self, node: NodeId) -> None:
        if node not in self._adj:
            self._adj[node] = {}

    def add_edge(self, a: NodeId, b: NodeId, weight: float = 1.0) -> None:
        w = _check_weight(a, b, weight)
        self.add_node(a)
        self.add_node(b)
        self._adj[a][b] = w
        self._adj[b][a] = w

    def add_directed_edge(self, a: NodeId, b: NodeId, weight: float = 1.0) -> None:
        w = _check_weight(a, b, weight)
        self.add_node(a)
        self.add_node(b)
        self._adj[a][b] = w

    def remove_node(self, node: NodeId) -> None:
        self._require(node)
        del self._adj[node]
        for nbrs in self._adj.values():
            nbrs.pop(node, None)

    def clear(self) -> None:
        self._adj.clear()

    # --- queries -------------------------------------------------------------

    def _require(self, node: NodeId) -> Dict[NodeId, float]:
        try:
            return self._adj[node]
        except KeyError:
            raise UnknownNodeError(node) from None

    def has_node(self, node: NodeId) -> bool:
        return node in self._adj

    __contains__ = has_node

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        n_edges = sum(len(nbrs) for nbrs in self._adj.values())
        return f"Graph(nodes={len(self._adj)}, directed_edges={n_edges})"

    @property
    def nodes(self) -> Tuple[NodeId, ...]:
        return tuple(self._adj)

    def neighbors(self, node: NodeId) -> List[NodeId]:
        return list(self._require(node))

    def cost(self, a: NodeId, b: NodeId) -> Optional[float]:
        """Weight of the a -> b edge, or None when there is no such edge."""
        nbrs = self._require(a)
        self._require(b)
        return nbrs.get(b)

    def edges(self) -> Iterator[Tuple[NodeId, NodeId, float]]:
        """Every stored (a, b, weight) entry; undirected edges appear twice."""
        for a, nbrs in self._adj.items():
            for b, w in nbrs.items():
                yield a, b, w
