"""
Run searches off the caller's thread.

Each submitted search owns its ledger, frontier and cancel flag; the graph is
only read, so several searches may share one graph as long as nothing writes
to it meanwhile. Cancellation is cooperative and takes effect at the next node
expansion.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from concurrent.futures import CancelledError, Executor, Future, ThreadPoolExecutor
from typing import Hashable, Optional

from ..core.errors import SearchCancelledError
from ..core.graph import Graph
from ..core.metrics import SearchResult
from .best_first import Heuristic
from .search import search

logger = logging.getLogger(__name__)


class SearchTask:
    """
    Handle for a search running on an executor.

    Attributes:
        future: concurrent.futures.Future resolving to a SearchResult
        cancel_event: flag polled by the search loop once per expansion
        algo: strategy label used when reporting a cancelled task
    """

    def __init__(self, future: Future, cancel_event: threading.Event, algo: str = "search") -> None:
        self.future = future
        self.cancel_event = cancel_event
        self.algo = algo

    def cancel(self) -> None:
        """Ask the search to stop; also drops it if it has not started yet."""
        self.cancel_event.set()
        self.future.cancel()

    def result(self, timeout: Optional[float] = None) -> SearchResult:
        """
        SearchResult of the finished search. A cancelled task raises
        SearchCancelledError whether it was stopped mid-run or dropped from
        the executor queue before it started.
        """
        try:
            return self.future.result(timeout)
        except CancelledError:
            raise SearchCancelledError(self.algo, 0) from None

    def done(self) -> bool:
        return self.future.done()


def submit_search(
    strategy,
    graph: Graph,
    start: Hashable,
    goal: Hashable,
    heuristic: Optional[Heuristic] = None,
    executor: Optional[Executor] = None,
    **options,
) -> SearchTask:
    """
    Queue a search on executor (a one-off single-thread pool when None).

    Strategy and heuristic are validated when the task runs, so usage errors
    surface through SearchTask.result().
    """
    cancel_event = threading.Event()
    owns_executor = executor is None
    if owns_executor:
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="pathsearch")

    future = executor.submit(
        search, strategy, graph, start, goal, heuristic,
        should_stop=cancel_event.is_set, **options,
    )
    if owns_executor:
        executor.shutdown(wait=False)
    logger.debug(f"Submitted {strategy!r} search {start!r} -> {goal!r}")
    return SearchTask(future, cancel_event, getattr(strategy, "name", str(strategy)))


async def search_async(
    strategy,
    graph: Graph,
    start: Hashable,
    goal: Hashable,
    heuristic: Optional[Heuristic] = None,
    cancel_event: Optional[threading.Event] = None,
    **options,
) -> SearchResult:
    """
    Await a search running in the default thread pool.

    Cancelling the awaiting coroutine sets the cancel flag so the worker thread
    stops at its next expansion instead of running to completion unobserved.
    """
    event = cancel_event or threading.Event()
    try:
        return await asyncio.to_thread(
            search, strategy, graph, start, goal, heuristic,
            should_stop=event.is_set, **options,
        )
    except asyncio.CancelledError:
        event.set()
        raise
