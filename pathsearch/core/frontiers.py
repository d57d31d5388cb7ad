# pathsearch/core/frontiers.py
from __future__ import annotations
import heapq
import itertools
from collections import deque
from typing import Dict, Hashable, List


class _Empty:
    """Returned by pop_min() on an empty frontier; the search's stop signal."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EMPTY"

    def __bool__(self) -> bool:
        return False


EMPTY = _Empty()


class FIFOQueue:
    """Discovery-order frontier (BFS). Scores are accepted and ignored."""
    def __init__(self):
        self.q = deque()
        self._members = set()

    def push(self, node: Hashable, score: float = 0.0) -> None:
        self.q.append(node)
        self._members.add(node)

    def pop_min(self):
        if not self.q:
            return EMPTY
        node = self.q.popleft()
        self._members.discard(node)
        return node

    def rescore(self, node: Hashable, new_score: float) -> None:
        raise TypeError("FIFOQueue has no scores to update; BFS never relaxes.")

    def peek(self):
        return self.q[0] if self.q else EMPTY

    def __len__(self): return len(self.q)
    def __contains__(self, node): return node in self._members


class PriorityQueue:
    """
    Binary min-heap keyed by a mutable score.

    Entries are [score, seq, node]; seq is a push counter, so equal scores pop
    oldest-pushed-first. rescore() invalidates the live entry in place and pushes
    a fresh one; stale entries are skipped on pop.
    """
    _REMOVED = object()

    def __init__(self):
        self.h: List[list] = []
        self.entries: Dict[Hashable, list] = {}
        self.counter = itertools.count()  # tie-breaker for stability

    def push(self, node: Hashable, score: float) -> None:
        if node in self.entries:
            raise KeyError(f"{node!r} is already queued; use rescore()")
        entry = [float(score), next(self.counter), node]
        self.entries[node] = entry
        heapq.heappush(self.h, entry)

    def rescore(self, node: Hashable, new_score: float) -> None:
        entry = self.entries.pop(node)  # KeyError if not queued
        entry[2] = self._REMOVED
        self.push(node, new_score)

    def pop_min(self):
        while self.h:
            score, _, node = heapq.heappop(self.h)
            if node is not self._REMOVED:
                del self.entries[node]
                return node
        return EMPTY

    def peek(self):
        while self.h and self.h[0][2] is self._REMOVED:
            heapq.heappop(self.h)
        return self.h[0][2] if self.h else EMPTY

    def score_of(self, node: Hashable) -> float:
        return self.entries[node][0]

    def __len__(self): return len(self.entries)
    def __contains__(self, node): return node in self.entries
