"""
Tests for the grid and Romania collaborators, heuristics and sanity checks.
"""

import numpy as np
import pytest

from pathsearch.algorithms.heuristics import (
    chebyshev, euclidean, from_coords, from_table, manhattan, scaled, zero,
)
from pathsearch.algorithms.search import search
from pathsearch.config import OBSTACLE_TILE
from pathsearch.core.graph import Graph
from pathsearch.problems.checks import hop_distance, is_valid_path, path_cost, sanity_check_graph
from pathsearch.problems.grid import grid_to_graph, make_grid_graph, random_tiles
from pathsearch.problems.romania import ROMANIA, romania_graph, romania_problem, sld_heuristic


class TestHeuristics:
    """Distance helpers on (row, col) coordinates."""

    def test_metrics(self):
        assert manhattan((0, 0), (2, 3)) == 5
        assert chebyshev((0, 0), (2, 3)) == 3
        assert euclidean((0, 0), (3, 4)) == 5
        assert zero("anything", "else") == 0

    def test_scaled(self):
        assert scaled(manhattan, 2.5)((0, 0), (1, 1)) == 5

    def test_from_coords_and_table(self):
        h = from_coords({"a": (0, 0), "b": (0, 2)}, metric=manhattan)
        assert h("a", "b") == 2
        t = from_table({"a": 7})
        assert t("a", "goal") == 7
        assert t("missing", "goal") == 0


class TestGrid:
    """2D tile map -> Graph."""

    def test_unit_grid_adjacency(self, grid3):
        g = grid_to_graph(grid3)
        assert len(g) == 9
        assert sorted(g.neighbors((1, 1))) == [(0, 1), (1, 0), (1, 2), (2, 1)]
        assert sorted(g.neighbors((0, 0))) == [(0, 1), (1, 0)]

    def test_diagonal_moves(self, grid3):
        g = grid_to_graph(grid3, diagonal=True)
        assert len(g.neighbors((1, 1))) == 8
        r = search("astar", g, (0, 0), (2, 2), heuristic=chebyshev)
        assert r.path == [(0, 0), (1, 1), (2, 2)]
        assert r.cost == 2

    def test_obstacles_have_no_node(self):
        g = grid_to_graph([[0, OBSTACLE_TILE], [0, 0]])
        assert (0, 1) not in g
        assert len(g) == 3

    def test_edge_weight_is_destination_cost(self):
        g = grid_to_graph([[0, 1]])
        assert g.cost((0, 0), (0, 1)) == 3.0
        assert g.cost((0, 1), (0, 0)) == 1.0

    def test_custom_node_id_and_costs(self):
        tiles = np.array([[5, 9], [5, 5]])
        g = grid_to_graph(
            tiles,
            node_id=lambda r, c, tile: r * 2 + c,
            traversal_cost=lambda tile: None if tile == 9 else float(tile),
        )
        assert set(g.nodes) == {0, 2, 3}
        assert g.cost(0, 2) == 5.0
        r = search("dijkstra", g, 0, 3)
        assert r.path == [0, 2, 3]
        assert r.cost == 10.0

    def test_rough_terrain_is_avoided(self):
        tiles = [
            [0, 1, 1, 0],
            [0, 0, 0, 0],
        ]
        g = grid_to_graph(tiles)
        r = search("dijkstra", g, (0, 0), (0, 3))
        assert r.path == [(0, 0), (1, 0), (1, 1), (1, 2), (1, 3), (0, 3)]
        assert r.cost == 5.0
        bfs = search("bfs", g, (0, 0), (0, 3))
        assert bfs.path == [(0, 0), (0, 1), (0, 2), (0, 3)]
        assert bfs.cost == 7.0

    @pytest.mark.parametrize("tile", [5, 0.5, -1])
    def test_unknown_tile_value_rejected(self, tile):
        with pytest.raises(ValueError, match="Unknown tile"):
            grid_to_graph([[0, tile]])

    def test_float_tiles_with_known_values(self):
        g = grid_to_graph(np.array([[0.0, 1.0, 2.0]]))
        assert len(g) == 2
        assert g.cost((0, 0), (0, 1)) == 3.0

    def test_rejects_non_2d(self):
        with pytest.raises(ValueError):
            grid_to_graph([0, 0, 0])

    def test_walled_off_goal_unreachable(self):
        tiles = [[0, OBSTACLE_TILE, 0]]
        for strategy in ["bfs", "greedy", "dijkstra", "astar"]:
            r = search(strategy, grid_to_graph(tiles), (0, 0), (0, 2), heuristic=manhattan)
            assert (r.path, r.cost) == ([], 0)

    def test_sample_map(self):
        g, start, goal = make_grid_graph()
        r = search("astar", g, start, goal, heuristic=manhattan)
        assert is_valid_path(g, r.path, start, goal)
        assert r.cost == search("dijkstra", g, start, goal).cost

    def test_random_tiles_reproducible(self):
        a = random_tiles(6, 6, seed=3)
        b = random_tiles(6, 6, seed=3)
        assert a.shape == (6, 6)
        assert (a == b).all()
        assert set(np.unique(a)) <= {0, 1, OBSTACLE_TILE}


class TestRomania:
    """AIMA route-finding example, Arad -> Bucharest."""

    def test_astar_optimal_route(self):
        graph, start, goal, h = romania_problem()
        r = search("astar", graph, start, goal, heuristic=h)
        assert r.path == ["Arad", "Sibiu", "Rimnicu Vilcea", "Pitesti", "Bucharest"]
        assert r.cost == 418

    def test_dijkstra_matches_astar(self):
        graph, start, goal, h = romania_problem()
        assert search("dijkstra", graph, start, goal).cost == 418

    def test_greedy_takes_fagaras(self):
        graph, start, goal, h = romania_problem()
        r = search("greedy", graph, start, goal, heuristic=h)
        assert r.path == ["Arad", "Sibiu", "Fagaras", "Bucharest"]
        assert r.cost == 450

    def test_bfs_fewest_hops(self):
        graph, start, goal, h = romania_problem()
        r = search("bfs", graph, start, goal)
        assert r.hops == hop_distance(graph, start, goal) == 3
        assert path_cost(graph, r.path) == r.cost

    def test_astar_expands_fewer_than_dijkstra(self):
        graph, start, goal, h = romania_problem()
        a = search("astar", graph, start, goal, heuristic=h)
        d = search("dijkstra", graph, start, goal)
        assert a.nodes_expanded < d.nodes_expanded

    def test_sld_only_for_bucharest(self):
        h = sld_heuristic()
        assert h("Arad", "Bucharest") == 366
        with pytest.raises(ValueError):
            h("Arad", "Iasi")

    def test_graph_is_symmetric(self):
        g = romania_graph()
        assert len(g) == len(ROMANIA.graph)
        for a, b, w in g.edges():
            assert g.cost(b, a) == w


class TestChecks:
    """Graph and path sanity helpers."""

    def test_sanity_check_ok(self, chain):
        assert sanity_check_graph(chain).startswith("OK: 3 nodes")

    def test_path_cost_non_adjacent(self, chain):
        assert path_cost(chain, ["A", "C"]) is None
        assert path_cost(chain, ["A"]) == 0

    def test_is_valid_path(self, chain):
        assert is_valid_path(chain, ["A", "B", "C"], "A", "C")
        assert not is_valid_path(chain, [], "A", "C")
        assert not is_valid_path(chain, ["A", "B"], "A", "C")

    def test_hop_distance_unreachable(self, disconnected):
        assert hop_distance(disconnected, "A", "B") is None
