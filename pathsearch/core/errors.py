# pathsearch/core/errors.py
# Exception taxonomy: usage errors, data errors and cooperative cancellation.
# Unreachable goals are expected outcomes and never raise.
from __future__ import annotations


class PathSearchError(Exception):
    """Base class for every error raised by pathsearch."""


class UnknownNodeError(PathSearchError, LookupError):
    """A graph query referenced a node id that was never registered."""

    def __init__(self, node):
        super().__init__(f"Unknown node {node!r}; register it with add_node() first.")
        self.node = node


class InvalidStrategyError(PathSearchError, ValueError):
    def __init__(self, name, known):
        super().__init__(f"Unknown search strategy {name!r}; expected one of {', '.join(known)}.")
        self.name = name


class MissingHeuristicError(PathSearchError, ValueError):
    def __init__(self, strategy: str):
        super().__init__(f"Strategy {strategy!r} needs a heuristic h(node, goal).")
        self.strategy = strategy


class NegativeWeightError(PathSearchError, ValueError):
    """Edge weights must be non-negative numbers (NaN included as invalid)."""

    def __init__(self, a, b, weight):
        super().__init__(f"Edge {a!r} -> {b!r} has invalid weight {weight!r}; weights must be >= 0.")
        self.weight = weight


class LedgerError(PathSearchError, RuntimeError):
    """A search ledger operation broke its call contract."""


class SearchCancelledError(PathSearchError):
    def __init__(self, algo: str, expanded: int):
        super().__init__(f"{algo} cancelled after {expanded} expansions.")
        self.algo = algo
        self.nodes_expanded = expanded
