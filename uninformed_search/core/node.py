# uninformed_search/core/node.py
# A Node wraps a problem state with the bookkeeping the search tree needs: parent, action, cost and depth.
from __future__ import annotations
from typing import Iterator, List, Optional

from .problem import Action, Problem, State


class Node:
    def __init__(self, state: Optional[State], parent: Optional["Node"] = None,
                 action: Optional[Action] = None, path_cost: int = 0, depth: int = 0):
        self.state = state
        self.parent = parent
        self.action = action
        self.path_cost = path_cost
        self.depth = depth

    def __repr__(self) -> str:
        return f"Node(action={self.action!r}, path_cost={self.path_cost}, depth={self.depth})"

    def child_node(self, problem: Problem, action: Action) -> "Node":
        """The only place new Nodes are built: RESULT for the state, step_cost for the cost."""
        cost = problem.step_cost(self.state, action)
        if cost is None:
            raise ValueError(
                f"step_cost returned None for (s={self.state!r}, a={action!r}). "
                "Check your problem's LEGAL_ACTIONS/RESULT/cost mapping."
            )
        return Node(
            state=problem.result(self.state, action),
            parent=self,
            action=action,
            path_cost=self.path_cost + cost,
            depth=self.depth + 1,
        )

    def expand(self, problem: Problem) -> Iterator["Node"]:
        """Generate child Nodes in the order the problem lists its legal actions."""
        for a in problem.legal_actions(self):
            yield self.child_node(problem, a)

    def path(self) -> List["Node"]:
        nodes = []
        cur: Optional[Node] = self
        while cur is not None:
            nodes.append(cur)
            cur = cur.parent
        nodes.reverse()
        return nodes
