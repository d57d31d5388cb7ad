# pathsearch/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import time
from pathlib import Path
from typing import Any, Callable, List, Tuple

from ..algorithms.heuristics import manhattan
from ..algorithms.search import available, search
from ..algorithms.strategies import weighted_astar
from ..config import ASTAR_WEIGHT, DEFAULT_MAX_EXPANSIONS, RESULTS_DIR, configure_logging
from ..core.graph import Graph
from ..problems.grid import grid_to_graph, make_grid_graph, random_tiles

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    return f"{float(x):.4f}" if x is not None else "n/a"

def _load_problem(name: str) -> Tuple[Graph, Any, Any, Callable]:
    if name == "romania":
        from ..problems.romania import romania_problem
        return romania_problem()
    if name == "grid":
        graph, start, goal = make_grid_graph()
        return graph, start, goal, manhattan
    if name == "random-grid":
        tiles = random_tiles()
        tiles[0, 0] = tiles[-1, -1] = 0
        return grid_to_graph(tiles), (0, 0), (tiles.shape[0] - 1, tiles.shape[1] - 1), manhattan
    raise SystemExit(f"Unknown problem {name!r}; choose romania, grid or random-grid.")

def _strategies() -> List[Any]:
    return available() + [weighted_astar(ASTAR_WEIGHT)]

def run(problem: str = "romania", max_expansions=DEFAULT_MAX_EXPANSIONS) -> List[dict]:
    graph, start, goal, h = _load_problem(problem)
    rows = []
    for strategy in _strategies():
        label = getattr(strategy, "name", strategy)
        print(f"→ Running {label} ...")
        r = search(strategy, graph, start, goal, heuristic=h,
                   max_expansions=max_expansions, trace_memory=True)
        print(
            f"  {r.algo}: "
            f"{'OK' if r.success else 'FAIL'} "
            f"cost={r.cost} "
            f"hops={r.hops} "
            f"expanded={r.nodes_expanded}, "
            f"time={_fmt_time(r.time_s)}s"
        )
        rows.append(r.to_row())
    return rows

def main(argv=None):
    parser = argparse.ArgumentParser(description="Run every search strategy on one problem.")
    parser.add_argument("--problem", default="romania", choices=["romania", "grid", "random-grid"])
    parser.add_argument("--out", type=Path, default=RESULTS_DIR / "results.json")
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    rows = run(args.problem)
    out = {"problem": args.problem, "results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))

    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_text(json.dumps(out, indent=2))
    print(f"Wrote {args.out}")

if __name__ == "__main__":
    main()
