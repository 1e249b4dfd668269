from dataclasses import dataclass

import pytest

from uninformed_search import Node
from uninformed_search.problems.checks import sanity_check_problem
from uninformed_search.problems.romania import romania_problem


@dataclass(frozen=True)
class Count:
    n: int

    def clone(self):
        return self


class Counter:
    def __init__(self, limit=3, cost=1):
        self.limit = limit
        self.cost = cost

    def initial_node(self):
        return Node(Count(0))

    def goal_test(self, node):
        return False

    def legal_actions(self, node):
        return ["inc"] if node.state.n < self.limit else []

    def result(self, state, action):
        return Count(state.n + 1)

    def step_cost(self, state, action):
        return self.cost


class Box:
    """Mutable state that hashes by identity: breaks the contract on purpose."""
    def __init__(self, items):
        self.items = items

    def clone(self):
        return Box(list(self.items))

    def __eq__(self, other):
        return isinstance(other, Box) and self.items == other.items

    __hash__ = object.__hash__


class Appender:
    def initial_node(self):
        return Node(MutBox([]))

    def goal_test(self, node):
        return False

    def legal_actions(self, node):
        return ["x"] if len(node.state.items) < 2 else []

    def result(self, state, action):
        state.items.append(action)
        return state

    def step_cost(self, state, action):
        return 1


class MutBox(Box):
    def clone(self):
        return MutBox(list(self.items))

    def __hash__(self):
        return hash(tuple(self.items))


def test_well_behaved_problems_pass():
    assert sanity_check_problem(Counter()) == "OK: visited 4 states; contract holds."
    assert sanity_check_problem(romania_problem()).startswith("OK: visited 20 states")


def test_missing_cost_is_reported():
    with pytest.raises(AssertionError, match="None"):
        sanity_check_problem(Counter(cost=None))


def test_negative_cost_is_reported():
    with pytest.raises(AssertionError, match="negative"):
        sanity_check_problem(Counter(cost=-1))


def test_identity_hash_is_reported():
    class IdentityHashing(Counter):
        def initial_node(self):
            return Node(Box([0]))

        def legal_actions(self, node):
            return []

    with pytest.raises(AssertionError, match="clone"):
        sanity_check_problem(IdentityHashing())


def test_mutating_result_is_reported():
    with pytest.raises(AssertionError, match="mutated"):
        sanity_check_problem(Appender())
