"""
uninformed_search - generic uninformed search over an abstract Problem.

Public API:
    - Problem / State / Action: the contract a concrete problem implements
    - Node: search-tree node (state, parent, action, path_cost, depth)
    - SearchType: BFS, DFS, UCS, DLS, IDS
    - UninformedSearch: engine bound to one SearchType
    - search(): one-shot convenience wrapper
    - SearchResult / Outcome (GOAL, FAILURE, CUTOFF)

Usage:
    from uninformed_search import SearchType, UninformedSearch
    from uninformed_search.problems.grid import GridProblem

    problem = GridProblem(start=(0, 0), goal=(0, 2), width=1, height=3)
    result = UninformedSearch(SearchType.BFS).search(problem)
    print(result.outcome, result.cost)
"""

from .core.problem import Action, Problem, State
from .core.node import Node
from .core.metrics import CUTOFF, FAILURE, MeasuredRun, Outcome, SearchResult
from .core.utils import reconstruct_path, replay
from .engine import SearchType, UninformedSearch, search

__all__ = [
    "Action",
    "Problem",
    "State",
    "Node",
    "Outcome",
    "FAILURE",
    "CUTOFF",
    "SearchResult",
    "MeasuredRun",
    "reconstruct_path",
    "replay",
    "SearchType",
    "UninformedSearch",
    "search",
]
