# uninformed_search/engine.py
"""
Search engine: one object bound to one uninformed strategy.

Usage:
    from uninformed_search import SearchType, UninformedSearch

    engine = UninformedSearch(SearchType.UCS)
    result = engine.search(problem)
    if result.outcome is Outcome.GOAL:
        print(result.actions, result.cost)
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Optional, Union

from .algorithms.bfs import breadth_first_search
from .algorithms.depth_limited import depth_limited_search
from .algorithms.dfs import depth_first_search
from .algorithms.ids import iterative_deepening_search
from .algorithms.ucs import uniform_cost_search
from .core.metrics import SearchResult
from .core.problem import Problem

logger = logging.getLogger(__name__)


class SearchType(Enum):
    BFS = "breadth-first"
    DFS = "depth-first"
    UCS = "uniform-cost"
    DLS = "depth-limited"
    IDS = "iterative-deepening"

    @classmethod
    def parse(cls, selector: Union["SearchType", str]) -> "SearchType":
        """
        Accept a SearchType, an enum name ("bfs") or a value ("breadth-first").

        Raises:
            ValueError: If the selector names no known search type
        """
        if isinstance(selector, cls):
            return selector
        if isinstance(selector, str):
            key = selector.strip()
            for member in cls:
                if key.upper() == member.name or key.lower() == member.value:
                    return member
        available = ", ".join(m.name.lower() for m in cls)
        raise ValueError(f"Unknown search type: {selector!r}. Available: {available}")


class UninformedSearch:
    """
    Dispatches search() to the strategy chosen at construction.

    Attributes:
        search_type: The strategy this engine runs
        max_depth: Largest bound iterative deepening will try (None = settings.IDS_MAX_DEPTH)
    """

    def __init__(self, search_type: Union[SearchType, str] = SearchType.BFS, max_depth: Optional[int] = None):
        self.search_type = SearchType.parse(search_type)
        self.max_depth = max_depth
        self._strategies: Dict[SearchType, Callable[[Problem, int], SearchResult]] = {
            SearchType.BFS: lambda p, d: breadth_first_search(p),
            SearchType.DFS: lambda p, d: depth_first_search(p),
            SearchType.UCS: lambda p, d: uniform_cost_search(p),
            SearchType.DLS: lambda p, d: depth_limited_search(p, d),
            SearchType.IDS: lambda p, d: iterative_deepening_search(p, self.max_depth),
        }

    def __repr__(self) -> str:
        return f"UninformedSearch({self.search_type.name})"

    def search(self, problem: Problem, depth_limit: Optional[int] = 0) -> SearchResult:
        """
        Run the bound strategy on `problem`.

        Args:
            problem: Problem to solve
            depth_limit: Bound for depth-limited search (None means 0); ignored by the other strategies

        Returns:
            SearchResult whose outcome is GOAL, FAILURE or CUTOFF
        """
        if depth_limit is None:
            depth_limit = 0
        strategy = self._strategies[self.search_type]

        logger.debug("Running %s (depth_limit=%d)", self.search_type.name, depth_limit)
        result = strategy(problem, depth_limit)
        logger.info(
            "%s finished: %s cost=%s expanded=%d",
            result.algo, result.outcome.value, result.cost, result.nodes_expanded,
        )
        return result


def search(problem: Problem, search_type: Union[SearchType, str] = SearchType.BFS,
           depth_limit: Optional[int] = 0) -> SearchResult:
    """Convenience wrapper: UninformedSearch(search_type).search(problem, depth_limit)."""
    return UninformedSearch(search_type).search(problem, depth_limit)
