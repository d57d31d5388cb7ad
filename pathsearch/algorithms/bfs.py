# pathsearch/algorithms/bfs.py
# Breadth-first search: FIFO frontier, fewest hops, edge weights ignored for ordering.
from __future__ import annotations
from typing import Hashable, Optional
from ..core.graph import Graph
from ..core.metrics import SearchResult
from .best_first import best_first_search
from .strategies import BFS

def breadth_first_search(graph: Graph, start: Hashable, goal: Hashable,
                         max_expansions: Optional[int] = None, **options) -> SearchResult:
    return best_first_search(graph, start, goal, BFS, max_expansions=max_expansions, **options)
