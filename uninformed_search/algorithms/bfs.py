# uninformed_search/algorithms/bfs.py
# Breadth-First Search: graph search over a FIFO frontier.
# Shortest path in number of steps when every step costs the same.
from __future__ import annotations
from ..core.frontiers import FIFOQueue
from ..core.metrics import SearchResult
from ..core.problem import Problem
from .graph_search import graph_search

def breadth_first_search(problem: Problem) -> SearchResult:
    return graph_search(problem, FIFOQueue(), name="BFS")
