# pathsearch/core/ledger.py
# Per-search record of how every discovered node was reached.
# Replaces the parent pointers a tree-search Node would carry.
from __future__ import annotations
from typing import Dict, Hashable, List, Optional, Set

from .errors import LedgerError


class SearchLedger:
    """
    predecessor[node], best_cost[node] and the closed set for one search call.

    Once a node is closed its best cost is final; with non-negative weights no
    later relaxation can improve it, so relax() refuses closed nodes.
    """

    def __init__(self, start: Hashable):
        self.start = start
        self.predecessor: Dict[Hashable, Optional[Hashable]] = {}
        self.best_cost: Dict[Hashable, float] = {}
        self.closed: Set[Hashable] = set()
        self.open(start, None, 0.0)

    def discovered(self, node: Hashable) -> bool:
        return node in self.best_cost

    def is_closed(self, node: Hashable) -> bool:
        return node in self.closed

    def cost_of(self, node: Hashable) -> float:
        return self.best_cost[node]

    def open(self, node: Hashable, predecessor: Optional[Hashable], cost: float) -> None:
        if node in self.best_cost:
            raise LedgerError(f"{node!r} was already discovered")
        self.predecessor[node] = predecessor
        self.best_cost[node] = float(cost)

    def relax(self, node: Hashable, predecessor: Hashable, cost: float) -> None:
        if node in self.closed:
            raise LedgerError(f"{node!r} is closed; its cost is final")
        if not cost < self.best_cost[node]:
            raise LedgerError(f"relax({node!r}) needs a cheaper cost than {self.best_cost[node]}, got {cost}")
        self.predecessor[node] = predecessor
        self.best_cost[node] = float(cost)

    def close(self, node: Hashable) -> None:
        if node in self.closed:
            raise LedgerError(f"{node!r} was already closed")
        self.closed.add(node)

    def reconstruct(self, goal: Hashable) -> List[Hashable]:
        """Walk predecessor links back from goal; [] if goal was never reached."""
        if goal not in self.predecessor:
            return []
        path = [goal]
        cur = goal
        while cur != self.start:
            cur = self.predecessor[cur]
            path.append(cur)
        path.reverse()
        return path
