# pathsearch/algorithms/heuristics.py
# Heuristics take (node, goal) and estimate the remaining cost.
# Admissibility is the caller's job: A* is only optimal when h never
# overestimates and is consistent with the graph's edge weights.
from __future__ import annotations
import math
from typing import Callable, Hashable, Mapping, Tuple

Coord = Tuple[float, float]
Heuristic = Callable[[Hashable, Hashable], float]


def zero(node, goal) -> float:
    return 0.0


def manhattan(a: Coord, b: Coord) -> float:
    """Admissible on a 4-neighbor grid whose cheapest move costs 1."""
    return float(abs(a[0] - b[0]) + abs(a[1] - b[1]))


def chebyshev(a: Coord, b: Coord) -> float:
    """Admissible on an 8-neighbor grid (diagonal moves cost the same as straight)."""
    return float(max(abs(a[0] - b[0]), abs(a[1] - b[1])))


def euclidean(a: Coord, b: Coord) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def scaled(h: Heuristic, factor: float) -> Heuristic:
    """Multiply h by factor, e.g. the cheapest tile cost on a weighted grid."""
    def hs(node, goal) -> float:
        return factor * h(node, goal)
    return hs


def from_coords(coords: Mapping[Hashable, Coord], metric: Heuristic = euclidean) -> Heuristic:
    """Heuristic for graphs whose node ids map to coordinates (dense ids, city names...)."""
    def h(node, goal) -> float:
        return metric(coords[node], coords[goal])
    return h


def from_table(table: Mapping[Hashable, float], default: float = 0.0) -> Heuristic:
    """Precomputed distance-to-goal table, valid for the one goal it was built for."""
    def h(node, goal) -> float:
        return float(table.get(node, default))
    return h
