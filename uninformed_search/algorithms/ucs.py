# This code implements Uniform Cost Search (UCS): Dijkstra-style search ordered by path cost.
# uninformed_search/algorithms/ucs.py
from __future__ import annotations
import logging

from ..core.frontiers import PriorityQueue
from ..core.metrics import FAILURE, MeasuredRun, SearchResult, finish
from ..core.problem import Problem

logger = logging.getLogger(__name__)


def uniform_cost_search(problem: Problem) -> SearchResult:
    """
    Goal test is deferred to dequeue time: a node is only accepted once it is the
    cheapest entry on the frontier, which is when its cost is known to be optimal.
    Requires non-negative step costs.
    """
    name = "UCS"
    root = problem.initial_node()
    frontier = PriorityQueue()
    frontier.push(root, root.path_cost)
    visited = set()
    expanded = 0
    relaxed = 0

    with MeasuredRun() as meter:
        while True:
            if not len(frontier):
                logger.debug("%s: frontier exhausted after %d expansions", name, expanded)
                return finish(name, FAILURE, expanded, meter)

            node = frontier.pop()
            visited.add(node.state)
            if problem.goal_test(node):
                logger.debug("%s: goal at cost %s (%d relaxations)", name, node.path_cost, relaxed)
                return finish(name, node, expanded, meter)

            expanded += 1
            for child in node.expand(problem):
                if child.state in visited:
                    continue
                if not frontier.contains_state(child.state):
                    frontier.push(child, child.path_cost)
                elif frontier.decrease_priority(child, child.path_cost):
                    relaxed += 1
