# pathsearch/algorithms/best_first.py
from __future__ import annotations
import logging
from typing import Callable, Hashable, Optional

from ..core.errors import MissingHeuristicError, SearchCancelledError
from ..core.frontiers import EMPTY
from ..core.graph import Graph
from ..core.ledger import SearchLedger
from ..core.metrics import SearchResult, MeasuredRun
from .strategies import Strategy

logger = logging.getLogger(__name__)

Heuristic = Callable[[Hashable, Hashable], float]


def _no_heuristic(node, goal) -> float:
    return 0.0


def best_first_search(
    graph: Graph,
    start: Hashable,
    goal: Hashable,
    strategy: Strategy,
    heuristic: Optional[Heuristic] = None,
    max_expansions: Optional[int] = None,
    should_stop: Optional[Callable[[], bool]] = None,
    trace_memory: bool = False,
) -> SearchResult:
    """
    Generalized best-first search; BFS, greedy, Dijkstra and A* are all this loop
    with a different Strategy.

    The goal test happens when a node is popped, not when it is discovered, so
    a cheaper route found later can still win. Frontier and ledger are created
    per call; nothing is shared between searches.

    Returns an empty path when start/goal are not in the graph, when the goal is
    unreachable, or when max_expansions is hit. should_stop is polled once per
    expansion and aborts with SearchCancelledError.
    """
    name = strategy.name
    if strategy.needs_heuristic:
        if heuristic is None:
            raise MissingHeuristicError(name)
        h = heuristic
    else:
        h = _no_heuristic
    priority = strategy.priority

    expanded = 0
    with MeasuredRun(trace_memory) as meter:
        if start not in graph or goal not in graph:
            logger.debug(f"{name}: endpoint missing from graph (start={start!r}, goal={goal!r})")
            return SearchResult(name, [], 0.0, 0, meter.elapsed, meter.peak_kb)

        ledger = SearchLedger(start)
        frontier = strategy.new_frontier()
        frontier.push(start, priority(0.0, float(h(start, goal))))
        logger.debug(f"{name}: searching {start!r} -> {goal!r}")

        while True:
            if should_stop is not None and should_stop():
                raise SearchCancelledError(name, expanded)

            current = frontier.pop_min()
            if current is EMPTY:
                break

            if current == goal:
                path = ledger.reconstruct(goal)
                cost = ledger.cost_of(goal) if len(path) > 1 else 0.0
                logger.debug(f"{name}: reached goal, {len(path) - 1} hops, cost={cost}, expanded={expanded}")
                return SearchResult(name, path, cost, expanded, meter.elapsed, meter.peak_kb)

            # expansion cap; the goal test above is free
            if max_expansions is not None and expanded >= max_expansions:
                logger.info(f"{name}: gave up after {expanded} expansions")
                return SearchResult(name, [], 0.0, expanded, meter.elapsed, meter.peak_kb)

            ledger.close(current)
            expanded += 1
            g = ledger.cost_of(current)

            for nxt in graph.neighbors(current):
                new_cost = g + graph.cost(current, nxt)
                if not ledger.discovered(nxt):
                    ledger.open(nxt, current, new_cost)
                    frontier.push(nxt, priority(new_cost, float(h(nxt, goal))))
                elif (strategy.relaxes and not ledger.is_closed(nxt)
                      and new_cost < ledger.cost_of(nxt)):
                    ledger.relax(nxt, current, new_cost)
                    frontier.rescore(nxt, priority(new_cost, float(h(nxt, goal))))

    logger.info(f"{name}: {goal!r} is unreachable from {start!r} ({expanded} nodes expanded)")
    return SearchResult(name, [], 0.0, expanded, meter.elapsed, meter.peak_kb)
