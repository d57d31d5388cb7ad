# pathsearch/algorithms/strategies.py
# The four classic searches differ only in how they order the frontier and
# whether a cheaper route to a queued node is allowed to replace the old one.
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict

from ..core.errors import InvalidStrategyError
from ..core.frontiers import FIFOQueue, PriorityQueue


@dataclass(frozen=True)
class Strategy:
    """
    name:            label carried into SearchResult.algo
    priority(g, h):  frontier score from accumulated cost g and heuristic h
    relaxes:         re-route queued nodes when a cheaper path turns up
    needs_heuristic: refuse to run without h(node, goal)
    fifo:            plain discovery-order queue instead of a heap
    """
    name: str
    priority: Callable[[float, float], float]
    relaxes: bool
    needs_heuristic: bool = False
    fifo: bool = False

    def new_frontier(self):
        return FIFOQueue() if self.fifo else PriorityQueue()


BFS = Strategy("bfs", priority=lambda g, h: 0.0, relaxes=False, fifo=True)
GREEDY = Strategy("greedy", priority=lambda g, h: h, relaxes=False, needs_heuristic=True)
DIJKSTRA = Strategy("dijkstra", priority=lambda g, h: g, relaxes=True)
ASTAR = Strategy("astar", priority=lambda g, h: g + h, relaxes=True, needs_heuristic=True)


def weighted_astar(w: float) -> Strategy:
    """f = g + w*h. w > 1 expands fewer nodes but is not optimal in general."""
    if not w >= 0:
        raise ValueError(f"A* weight must be >= 0, got {w}")
    return Strategy(f"astar(w={w})", priority=lambda g, h: g + w * h, relaxes=True, needs_heuristic=True)


STRATEGIES: Dict[str, Strategy] = {s.name: s for s in (BFS, GREEDY, DIJKSTRA, ASTAR)}


def available():
    return sorted(STRATEGIES)


def resolve(strategy) -> Strategy:
    if isinstance(strategy, Strategy):
        return strategy
    if isinstance(strategy, str):
        found = STRATEGIES.get(strategy.strip().lower())
        if found is not None:
            return found
    raise InvalidStrategyError(strategy, available())
