# pathsearch/algorithms/astar.py
from __future__ import annotations
from typing import Hashable, Optional
from ..core.graph import Graph
from ..core.metrics import SearchResult
from .best_first import Heuristic, best_first_search
from .strategies import ASTAR

def a_star_search(graph: Graph, start: Hashable, goal: Hashable, heuristic: Heuristic,
                  max_expansions: Optional[int] = None, **options) -> SearchResult:
    return best_first_search(graph, start, goal, ASTAR, heuristic=heuristic,
                             max_expansions=max_expansions, **options)
