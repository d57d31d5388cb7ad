# This code implements the Weighted A* search algorithm, which is a variant of A* that uses a weight factor to balance between path cost and heuristic.
# pathsearch/algorithms/weighted_astar.py
from __future__ import annotations
from typing import Hashable, Optional
from ..config import ASTAR_WEIGHT
from ..core.graph import Graph
from ..core.metrics import SearchResult
from .best_first import Heuristic, best_first_search
from .strategies import weighted_astar

def weighted_a_star_search(graph: Graph, start: Hashable, goal: Hashable, heuristic: Heuristic,
                           w: float = ASTAR_WEIGHT, max_expansions: Optional[int] = None,
                           **options) -> SearchResult:
    """
    Weighted A*: f = g + w*h (w>1 focuses search; not optimal in general).
    With w == 1 this is plain A*; with w == 0 it degenerates to Dijkstra.
    """
    return best_first_search(graph, start, goal, weighted_astar(w), heuristic=heuristic,
                             max_expansions=max_expansions, **options)
