# uninformed_search/algorithms/ids.py
from __future__ import annotations
import logging
from typing import Optional

from ..core.metrics import CUTOFF, FAILURE, MeasuredRun, SearchResult, finish
from ..core.problem import Problem
from .. import settings
from .depth_limited import limited_descent

logger = logging.getLogger(__name__)


def iterative_deepening_search(problem: Problem, max_depth: Optional[int] = None) -> SearchResult:
    """
    Iterative Deepening Search (tree-like). Repeats depth-limited search with limits 1..max_depth
    and returns the first answer that is not CUTOFF. Reaching max_depth without one is FAILURE.
    Expansion count = nodes expanded summed over every iteration.
    """
    if max_depth is None:
        max_depth = settings.IDS_MAX_DEPTH
    name = "IDS"
    expanded_total = 0

    with MeasuredRun() as meter:
        root = problem.initial_node()
        for limit in range(1, max_depth + 1):
            found, expanded = limited_descent(problem, root, limit)
            expanded_total += expanded
            logger.debug("%s: limit=%d expanded=%d cutoff=%s", name, limit, expanded, found is CUTOFF)
            if found is not CUTOFF:
                return finish(name, found, expanded_total, meter)

        logger.info("%s: no answer within max depth %d", name, max_depth)
        return finish(name, FAILURE, expanded_total, meter)
