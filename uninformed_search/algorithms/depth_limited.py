# uninformed_search/algorithms/depth_limited.py
# This code implements Depth-Limited Search (DLS) for AI search problems, allowing a maximum depth limit.
# Tree search (no visited set); the answer is a goal Node, CUTOFF or FAILURE.
from __future__ import annotations
import logging
from typing import Iterator, List, Tuple, Union

from ..core.metrics import CUTOFF, FAILURE, MeasuredRun, Outcome, SearchResult, finish
from ..core.node import Node
from ..core.problem import Problem

logger = logging.getLogger(__name__)

_DONE = object()


class _Frame:
    __slots__ = ("node", "budget", "actions", "cutoff")

    def __init__(self, node: Node, budget: int, actions: Iterator):
        self.node = node
        self.budget = budget
        self.actions = actions
        self.cutoff = False


def limited_descent(problem: Problem, root: Node, limit: int) -> Tuple[Union[Node, Outcome], int]:
    """
    Depth-limited descent from `root` with `limit` steps of budget.

    Equivalent to the textbook recursion
        goal?            -> node
        budget == 0      -> CUTOFF
        any child goal   -> that goal (first in action order)
        any child CUTOFF -> CUTOFF
        otherwise        -> FAILURE
    but driven by an explicit stack so deep bounds do not hit the interpreter's
    recursion limit. Returns (answer, number of nodes expanded).
    """
    if limit < 0:
        raise ValueError(f"depth limit must be >= 0, got {limit}")
    if problem.goal_test(root):
        return root, 0
    if limit == 0:
        return CUTOFF, 0

    expanded = 1
    stack: List[_Frame] = [_Frame(root, limit, iter(problem.legal_actions(root)))]
    while True:
        frame = stack[-1]
        action = next(frame.actions, _DONE)
        if action is _DONE:
            stack.pop()
            answer = CUTOFF if frame.cutoff else FAILURE
            if not stack:
                return answer, expanded
            if answer is CUTOFF:
                stack[-1].cutoff = True
            continue

        child = frame.node.child_node(problem, action)
        if problem.goal_test(child):
            return child, expanded
        if frame.budget - 1 == 0:
            frame.cutoff = True
            continue
        expanded += 1
        stack.append(_Frame(child, frame.budget - 1, iter(problem.legal_actions(child))))


def depth_limited_search(problem: Problem, limit: int) -> SearchResult:
    name = f"DLS(l={limit})"
    with MeasuredRun() as meter:
        found, expanded = limited_descent(problem, problem.initial_node(), limit)
        if found is CUTOFF:
            logger.debug("%s: cutoff after %d expansions", name, expanded)
        return finish(name, found, expanded, meter)
