# Defines the standard interface for any search problem (initial node, goal test, actions, transitions, costs).
# uninformed_search/core/problem.py
from __future__ import annotations
from typing import TYPE_CHECKING, Any, Hashable, Protocol, Sequence, TypeVar

if TYPE_CHECKING:
    from .node import Node

Action = Hashable

S = TypeVar("S", bound="State")


class State(Protocol):
    """
    Snapshot of the problem's world.

    Equality and hashing must both be derived from the content of the state
    (never from object identity): the visited sets and frontier membership
    checks rely on equal states hashing identically.
    """
    def clone(self: S) -> S: ...
    def __eq__(self, other: Any) -> bool: ...
    def __hash__(self) -> int: ...


class Problem(Protocol):
    """Canonical uninformed search problem interface (node-based view)."""
    def initial_node(self) -> "Node": ...
    def goal_test(self, node: "Node") -> bool: ...
    def legal_actions(self, node: "Node") -> Sequence[Action]: ...
    def result(self, state: State, action: Action) -> State: ...
    def step_cost(self, state: State, action: Action) -> int: ...
