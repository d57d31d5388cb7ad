# pathsearch/algorithms/search.py
# Single entry point: pick a strategy by name and run the shared search loop.
from __future__ import annotations
from typing import Hashable, Optional

from ..core.graph import Graph
from ..core.metrics import SearchResult
from .best_first import Heuristic, best_first_search
from .strategies import available, resolve

__all__ = ["search", "available"]


def search(
    strategy,
    graph: Graph,
    start: Hashable,
    goal: Hashable,
    heuristic: Optional[Heuristic] = None,
    **options,
) -> SearchResult:
    """
    Run one of "bfs", "greedy", "dijkstra", "astar" (or a Strategy instance).

    heuristic(node, goal) is required for greedy and astar and ignored otherwise.
    options are forwarded to best_first_search (max_expansions, should_stop,
    trace_memory).

    Raises InvalidStrategyError for unknown names and MissingHeuristicError when
    a heuristic-driven strategy gets none.
    """
    return best_first_search(graph, start, goal, resolve(strategy), heuristic=heuristic, **options)
