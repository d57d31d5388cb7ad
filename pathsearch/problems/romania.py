# pathsearch/problems/romania.py
# AIMA Romania road map (Fig. 3.1) as a Graph, with straight-line distances for A*.
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Mapping, Tuple

from ..algorithms.heuristics import Heuristic, from_table
from ..core.graph import Graph


# --- Data --------------------------------------------------------------------

# Road distances (bidirectional) from AIMA Fig. 3.1
_GRAPH: Dict[str, Dict[str, int]] = {
    "Arad": {"Zerind": 75, "Sibiu": 140, "Timisoara": 118},
    "Zerind": {"Arad": 75, "Oradea": 71},
    "Oradea": {"Zerind": 71, "Sibiu": 151},
    "Sibiu": {"Arad": 140, "Oradea": 151, "Fagaras": 99, "Rimnicu Vilcea": 80},
    "Timisoara": {"Arad": 118, "Lugoj": 111},
    "Lugoj": {"Timisoara": 111, "Mehadia": 70},
    "Mehadia": {"Lugoj": 70, "Drobeta": 75},
    "Drobeta": {"Mehadia": 75, "Craiova": 120},
    "Craiova": {"Drobeta": 120, "Rimnicu Vilcea": 146, "Pitesti": 138},
    "Rimnicu Vilcea": {"Sibiu": 80, "Craiova": 146, "Pitesti": 97},
    "Fagaras": {"Sibiu": 99, "Bucharest": 211},
    "Pitesti": {"Rimnicu Vilcea": 97, "Craiova": 138, "Bucharest": 101},
    "Bucharest": {"Fagaras": 211, "Pitesti": 101, "Giurgiu": 90, "Urziceni": 85},
    "Giurgiu": {"Bucharest": 90},
    "Urziceni": {"Bucharest": 85, "Vaslui": 142, "Hirsova": 98},
    "Hirsova": {"Urziceni": 98, "Eforie": 86},
    "Eforie": {"Hirsova": 86},
    "Vaslui": {"Urziceni": 142, "Iasi": 92},
    "Iasi": {"Vaslui": 92, "Neamt": 87},
    "Neamt": {"Iasi": 87},
}

# Straight-line distance to Bucharest (AIMA Fig. 3.16)
_SLD: Dict[str, int] = {
    "Arad": 366, "Zerind": 374, "Oradea": 380, "Sibiu": 253, "Timisoara": 329,
    "Lugoj": 244, "Mehadia": 241, "Drobeta": 242, "Craiova": 160, "Rimnicu Vilcea": 193,
    "Fagaras": 176, "Pitesti": 100, "Bucharest": 0, "Giurgiu": 77, "Urziceni": 80,
    "Hirsova": 151, "Eforie": 161, "Vaslui": 199, "Iasi": 226, "Neamt": 234,
}


# --- Public container ---------------------------------------------------------

@dataclass(frozen=True)
class RomaniaMap:
    graph: Mapping[str, Mapping[str, int]]
    sld_to_bucharest: Mapping[str, int]


ROMANIA = RomaniaMap(graph=_GRAPH, sld_to_bucharest=_SLD)


# --- Graph + heuristic ----------------------------------------------------------

def romania_graph(data: RomaniaMap = ROMANIA) -> Graph:
    """Undirected road map; node ids are city names, weights are road distances."""
    return Graph.from_mapping(data.graph)


def sld_heuristic(data: RomaniaMap = ROMANIA) -> Heuristic:
    """
    Straight-line distance to Bucharest. Only meaningful with goal="Bucharest";
    admissible because no road is shorter than the straight line.
    """
    table = from_table(data.sld_to_bucharest)

    def h(city: str, goal: str) -> float:
        if goal != "Bucharest":
            raise ValueError(f"SLD table only covers Bucharest, not {goal!r}")
        return table(city, goal)
    return h


def romania_problem(start: str = "Arad", goal: str = "Bucharest") -> Tuple[Graph, str, str, Heuristic]:
    """
    Factory for a ready-to-use (graph, start, goal, heuristic) tuple.
    """
    return romania_graph(), start, goal, sld_heuristic()
