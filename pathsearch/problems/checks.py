from __future__ import annotations
import math
from collections import deque
from typing import Hashable, Optional, Sequence

from ..core.graph import Graph


def sanity_check_graph(graph: Graph) -> str:
    """Checks every edge endpoint is registered and every weight is a finite number >= 0."""
    n_edges = 0
    for a, b, w in graph.edges():
        if b not in graph:
            raise AssertionError(f"edge {a!r} -> {b!r} points at an unregistered node")
        if not (isinstance(w, float) and math.isfinite(w) and w >= 0):
            raise AssertionError(f"edge {a!r} -> {b!r} has bad weight {w!r}")
        n_edges += 1
    return f"OK: {len(graph)} nodes; {n_edges} directed edge entries."


def path_cost(graph: Graph, path: Sequence[Hashable]) -> Optional[float]:
    """Summed weight along path, or None if two consecutive nodes are not adjacent."""
    total = 0.0
    for a, b in zip(path, path[1:]):
        w = graph.cost(a, b)
        if w is None:
            return None
        total += w
    return total


def is_valid_path(graph: Graph, path: Sequence[Hashable], start: Hashable, goal: Hashable) -> bool:
    return bool(path) and path[0] == start and path[-1] == goal and path_cost(graph, path) is not None


def hop_distance(graph: Graph, start: Hashable, goal: Hashable) -> Optional[int]:
    """Fewest edges from start to goal by plain breadth-first walk; None if unreachable."""
    depth = {start: 0}
    q = deque([start])
    while q:
        s = q.popleft()
        if s == goal:
            return depth[s]
        for s2 in graph.neighbors(s):
            if s2 not in depth:
                depth[s2] = depth[s] + 1
                q.append(s2)
    return None
