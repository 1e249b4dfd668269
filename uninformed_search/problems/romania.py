# uninformed_search/problems/romania.py
# Route finding on the AIMA Romania road map; road distances give non-uniform step costs.
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Mapping

from ..core.node import Node


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


@dataclass(frozen=True)
class City:
    """Immutable state: the city the traveller is in."""
    name: str

    def clone(self) -> "City":
        return self

    def __str__(self) -> str:
        return self.name


# --- Problem definition -------------------------------------------------------

class RomaniaProblem:
    """
    Standard AIMA Romania route-finding problem.
    States are City values; LEGAL_ACTIONS(n) are neighbouring city names;
    RESULT(s,a) = City(a); step_cost is road distance.
    """

    def __init__(self, start: str = "Arad", goal: str = "Bucharest",
                 graph: Mapping[str, Mapping[str, int]] = _GRAPH):
        for city in (start, goal):
            if city not in graph:
                raise ValueError(f"Unknown city: {city}")
        self.start = start
        self.goal = goal
        self.graph = graph

    def initial_node(self) -> Node:
        return Node(City(self.start))

    def goal_test(self, node: Node) -> bool:
        return node.state.name == self.goal

    def legal_actions(self, node: Node) -> List[str]:
        return list(self.graph[node.state.name])

    def result(self, state: City, action: str) -> City:
        # Action is the next city name
        return City(action)

    def step_cost(self, state: City, action: str) -> int:
        return self.graph[state.name][action]

    def describe(self) -> str:
        return f"Romania: {self.start} -> {self.goal} ({len(self.graph)} cities)"

    __str__ = describe


def romania_problem(start: str = "Arad", goal: str = "Bucharest") -> RomaniaProblem:
    """
    Factory for a ready-to-use RomaniaProblem.
    """
    return RomaniaProblem(start=start, goal=goal)
