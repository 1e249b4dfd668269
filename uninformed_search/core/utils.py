# uninformed_search/core/utils.py
# Helpers for turning a goal node back into the action sequence that reached it.
from __future__ import annotations
from typing import List, Tuple

from .node import Node
from .problem import Problem, State


def reconstruct_path(node: Node) -> Tuple[List, int]:
    actions = []
    cost = node.path_cost
    cur = node
    while cur.parent is not None:
        actions.append(cur.action)
        cur = cur.parent
    actions.reverse()
    return actions, cost


def replay(problem: Problem, actions: List) -> Tuple[State, int]:
    """Apply `actions` from the problem's initial state; returns (final state, summed step cost)."""
    state = problem.initial_node().state
    total = 0
    for a in actions:
        total += problem.step_cost(state, a)
        state = problem.result(state, a)
    return state, total
