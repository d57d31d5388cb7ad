# pathsearch/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Hashable, List, Optional
import time, tracemalloc

@dataclass
class SearchResult:
    """
    Outcome of one search. An empty path means "no route found"; cost is the
    summed edge weight along path (0 when the path has fewer than two nodes).
    """
    algo: str
    path: List[Hashable] = field(default_factory=list)
    cost: float = 0.0
    nodes_expanded: int = 0
    time_s: float = 0.0
    peak_kb: int = 0

    @property
    def success(self) -> bool:
        return bool(self.path)

    @property
    def hops(self) -> int:
        return max(len(self.path) - 1, 0)

    def to_row(self) -> Dict[str, Any]:
        """Flat dict for the benchmark JSON (path kept as plain lists)."""
        row = asdict(self)
        row["path"] = [list(n) if isinstance(n, tuple) else n for n in self.path]
        row["success"] = self.success
        row["hops"] = self.hops
        return row

class MeasuredRun:
    """
    Context manager for timing and (optionally) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.

    tracemalloc is process-wide, so memory tracing is opt-in: leave it off when
    several searches run on worker threads at the same time.
    """
    def __init__(self, trace_memory: bool = False) -> None:
        self.trace_memory = trace_memory
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False

    def __enter__(self) -> "MeasuredRun":
        if self.trace_memory and not tracemalloc.is_tracing():
            self._tracing = True
            tracemalloc.start()
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self._tracing = False
            self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        """Approx peak KB. Works before and after __exit__; 0 when not tracing."""
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
