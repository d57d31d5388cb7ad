# pathsearch/algorithms/greedy.py
from __future__ import annotations
from typing import Hashable, Optional
from ..core.graph import Graph
from ..core.metrics import SearchResult
from .best_first import Heuristic, best_first_search
from .strategies import GREEDY

def greedy_best_first_search(graph: Graph, start: Hashable, goal: Hashable, heuristic: Heuristic,
                             max_expansions: Optional[int] = None, **options) -> SearchResult:
    # greedy: f = h only; first route to a node is kept, so not cost-optimal
    return best_first_search(graph, start, goal, GREEDY, heuristic=heuristic,
                             max_expansions=max_expansions, **options)
