# pathsearch/problems/grid.py
from __future__ import annotations
from typing import Callable, Hashable, Optional, Tuple

import numpy as np

from ..config import BENCH_GRID_COLS, BENCH_GRID_ROWS, BENCH_SEED, DEFAULT_TILE_COSTS, OBSTACLE_TILE
from ..core.graph import Graph

Coord = Tuple[int, int]

_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}

_DIAGONALS = {
    "UpLeft": (-1, -1),
    "UpRight": (-1, 1),
    "DownLeft": (1, -1),
    "DownRight": (1, 1),
}


def default_node_id(row: int, col: int, tile) -> Hashable:
    return (row, col)


def default_traversal_cost(tile) -> Optional[float]:
    """Cost of entering a tile, or None for an obstacle. Unknown tile values raise ValueError."""
    if tile == OBSTACLE_TILE:
        return None
    try:
        return DEFAULT_TILE_COSTS[tile]
    except KeyError:
        raise ValueError(
            f"Unknown tile value {tile!r}; expected one of {sorted(DEFAULT_TILE_COSTS)} or {OBSTACLE_TILE}"
        ) from None


def grid_to_graph(
    tiles,
    node_id: Callable[[int, int, object], Hashable] = default_node_id,
    traversal_cost: Callable[[object], Optional[float]] = default_traversal_cost,
    diagonal: bool = False,
) -> Graph:
    """
    Turn a 2D tile map into a Graph.

    - tiles: any rows x cols sequence or numpy array
    - node_id(row, col, tile): id for the cell's node, (row, col) by default
    - traversal_cost(tile): cost of entering the cell; None marks an obstacle,
      which gets no node at all
    - moving from u to v stores a directed edge weighted with v's entry cost,
      so a map of unit tiles gives path cost == hop count
    - 4-neighbor moves, or 8-neighbor with diagonal=True
    """
    arr = np.asarray(tiles)
    if arr.ndim != 2:
        raise ValueError(f"tiles must be 2D, got shape {arr.shape}")
    rows, cols = arr.shape
    moves = list(_MOVES.values()) + (list(_DIAGONALS.values()) if diagonal else [])

    ids = {}
    costs = {}
    g = Graph()
    for r in range(rows):
        for c in range(cols):
            tile = arr[r, c].item()
            cost = traversal_cost(tile)
            if cost is None:
                continue
            ids[r, c] = node_id(r, c, tile)
            costs[r, c] = cost
            g.add_node(ids[r, c])

    for (r, c), u in ids.items():
        for dr, dc in moves:
            v = ids.get((r + dr, c + dc))
            if v is not None:
                g.add_directed_edge(u, v, costs[r + dr, c + dc])
    return g


def random_tiles(rows: int = BENCH_GRID_ROWS, cols: int = BENCH_GRID_COLS,
                 seed: int = BENCH_SEED, p_rough: float = 0.2, p_wall: float = 0.2) -> np.ndarray:
    """Random terrain: 0 plain, 1 rough, OBSTACLE_TILE wall."""
    rng = np.random.default_rng(seed)
    return rng.choice([0, 1, OBSTACLE_TILE], size=(rows, cols),
                      p=[1.0 - p_rough - p_wall, p_rough, p_wall])


def make_grid_graph() -> Tuple[Graph, Coord, Coord]:
    # Example: 5x7 grid, a few walls and a rough patch
    tiles = np.zeros((5, 7), dtype=int)
    for wall in [(1, 3), (2, 3), (3, 3), (3, 4)]:
        tiles[wall] = OBSTACLE_TILE
    tiles[0, 4:6] = 1
    return grid_to_graph(tiles), (0, 0), (4, 6)
