"""
Configuration constants for the pathsearch engine.

Tunables are module-level constants; the ones worth changing per run can be
overridden through environment variables.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Benchmark output (results.json, charts, markdown table), relative to the
# directory the benchmarks are run from
RESULTS_DIR = Path(os.getenv("PATHSEARCH_RESULTS_DIR", str(Path.cwd() / "results")))

# =============================================================================
# Search Configuration
# =============================================================================

# Expansion cap applied by the benchmarks; None = unbounded
_max_exp = os.getenv("PATHSEARCH_MAX_EXPANSIONS")
DEFAULT_MAX_EXPANSIONS: int | None = int(_max_exp) if _max_exp else None

# Weighted A*: f(n) = g(n) + ASTAR_WEIGHT * h(n)
# w > 1 focuses the search but gives up optimality
ASTAR_WEIGHT = float(os.getenv("WASTAR_W", "1.5"))

# =============================================================================
# Grid Configuration
# =============================================================================

# Tile value -> cost of entering the tile (0 = plain, 1 = rough terrain)
DEFAULT_TILE_COSTS: dict[int, float] = {0: 1.0, 1: 3.0}

# Tile value that cannot be entered at all
OBSTACLE_TILE = 2

# =============================================================================
# Benchmark Configuration
# =============================================================================

BENCH_GRID_ROWS = int(os.getenv("BENCH_GRID_ROWS", "10"))
BENCH_GRID_COLS = int(os.getenv("BENCH_GRID_COLS", "12"))
BENCH_SEED = int(os.getenv("BENCH_SEED", "7"))

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


def configure_logging(level: str | None = None) -> None:
    """Set up root logging for command-line entry points."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
