# This code implements Dijkstra (uniform cost search) by reusing the generic best-first search function.
# pathsearch/algorithms/dijkstra.py
from __future__ import annotations
from typing import Hashable, Optional
from ..core.graph import Graph
from ..core.metrics import SearchResult
from .best_first import best_first_search
from .strategies import DIJKSTRA

def dijkstra_search(graph: Graph, start: Hashable, goal: Hashable,
                    max_expansions: Optional[int] = None, **options) -> SearchResult:
    return best_first_search(graph, start, goal, DIJKSTRA, max_expansions=max_expansions, **options)

uniform_cost_search = dijkstra_search
