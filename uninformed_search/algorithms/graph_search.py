# uninformed_search/algorithms/graph_search.py
# Shared loop for BFS and DFS: they differ only in the frontier (FIFO queue vs LIFO stack).
from __future__ import annotations
import logging
from typing import Union

from ..core.frontiers import FIFOQueue, LIFOStack
from ..core.metrics import FAILURE, MeasuredRun, SearchResult, finish
from ..core.problem import Problem

logger = logging.getLogger(__name__)


def graph_search(problem: Problem, frontier: Union[FIFOQueue, LIFOStack], name: str) -> SearchResult:
    """
    Graph search with a visited set and early goal test.

    Children are goal-tested when generated, before they are pushed, so a goal is
    returned as soon as it is discovered. A child is only generated into the
    frontier if its state is neither visited nor already pending.
    """
    root = problem.initial_node()
    frontier.push(root)
    visited = {root.state}
    expanded = 0

    with MeasuredRun() as meter:
        while True:
            if not len(frontier):
                logger.debug("%s: frontier exhausted after %d expansions", name, expanded)
                return finish(name, FAILURE, expanded, meter)

            node = frontier.pop()
            visited.add(node.state)
            if problem.goal_test(node):
                return finish(name, node, expanded, meter)

            expanded += 1
            for child in node.expand(problem):
                if child.state in visited or frontier.contains_state(child.state):
                    continue
                if problem.goal_test(child):
                    logger.debug("%s: goal generated at depth %d", name, child.depth)
                    return finish(name, child, expanded, meter)
                frontier.push(child)
