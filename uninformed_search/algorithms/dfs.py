# uninformed_search/algorithms/dfs.py
# This code implements Depth-First Search (DFS) using a LIFO stack to explore nodes in a search tree.
# The visited set is what guarantees termination on graphs with cycles; no optimality is promised.
from __future__ import annotations
from ..core.frontiers import LIFOStack
from ..core.metrics import SearchResult
from ..core.problem import Problem
from .graph_search import graph_search

def depth_first_search(problem: Problem) -> SearchResult:
    return graph_search(problem, LIFOStack(), name="DFS")
