import numpy as np
import pytest

from uninformed_search.problems.grid import (
    CURRENT,
    OBSTACLE,
    UNVISITED,
    VISITED,
    GridAction,
    GridProblem,
    GridState,
    make_grid_problem,
    random_grid,
)
from uninformed_search.problems.checks import sanity_check_problem


def test_clone_is_equal_and_independent():
    s = GridState.empty(3, 4, (1, 1))
    c = s.clone()
    assert c == s
    assert hash(c) == hash(s)
    c.grid[0, 0] = OBSTACLE
    assert s.grid[0, 0] == UNVISITED
    assert c != s


def test_equality_and_hash_follow_contents():
    a = GridState.empty(2, 2, (0, 0))
    b = GridState(np.array(a.grid), (0, 0))
    assert a == b
    assert len({a, b}) == 1
    b.grid[1, 1] = VISITED
    assert a != b
    assert a != GridState.empty(2, 2, (1, 1))
    assert a != "not a state"


def test_initial_node_marks_start_on_given_grid():
    grid = np.full((3, 3), UNVISITED)
    p = GridProblem(start=(1, 2), goal=(0, 0), width=3, height=3, grid=grid)
    state = p.initial_node().state
    assert state.position == (1, 2)
    assert state.grid[1, 2] == CURRENT
    # the problem keeps its own copy
    assert grid[1, 2] == UNVISITED


def test_legal_actions_skip_obstacles_visited_and_edges():
    grid = np.full((3, 3), UNVISITED)
    grid[0, 1] = OBSTACLE
    grid[1, 0] = VISITED
    p = GridProblem(start=(0, 0), goal=(2, 2), width=3, height=3, grid=grid)
    actions = p.legal_actions(p.initial_node())
    assert actions == [GridAction(1, 1)]


def test_legal_actions_enumerate_neighbourhood_in_order():
    p = GridProblem(start=(1, 1), goal=(0, 0), width=3, height=3)
    actions = p.legal_actions(p.initial_node())
    assert actions == [GridAction(i, j) for i in (-1, 0, 1) for j in (-1, 0, 1) if (i, j) != (0, 0)]


def test_result_does_not_mutate_input():
    p = GridProblem(start=(0, 0), goal=(0, 2), width=1, height=3)
    s = p.initial_node().state
    before = s.clone()
    nxt = p.result(s, GridAction(0, 1))
    assert s == before
    assert nxt.position == (0, 1)
    assert nxt.grid[0, 0] == VISITED
    assert nxt.grid[0, 1] == CURRENT


def test_goal_test_and_step_cost():
    p = GridProblem(start=(0, 0), goal=(0, 1), width=1, height=2)
    root = p.initial_node()
    assert p.goal_test(root) is False
    child = root.child_node(p, GridAction(0, 1))
    assert p.goal_test(child) is True
    assert p.step_cost(root.state, GridAction(0, 1)) == 1


def test_render_and_describe():
    grid = np.full((2, 3), UNVISITED)
    grid[1, 2] = OBSTACLE
    p = GridProblem(start=(0, 0), goal=(1, 0), width=2, height=3, grid=grid)
    assert str(p.initial_node().state) == "|1| | |\n| | |X|\n"
    text = p.describe()
    assert text.startswith("Width: 2\nHeight: 3\n")
    assert "Goal x: 1" in text


@pytest.mark.parametrize("kwargs", [
    dict(start=(5, 0), goal=(0, 0), width=3, height=3),
    dict(start=(0, 0), goal=(0, -1), width=3, height=3),
    dict(start=(0, 0), goal=(0, 0), width=0, height=3),
    dict(start=(0, 0), goal=(1, 1), width=3, height=3, grid=np.full((2, 2), UNVISITED)),
])
def test_invalid_problem_arguments(kwargs):
    with pytest.raises(ValueError):
        GridProblem(**kwargs)


def test_random_grid_keeps_start_and_goal_clear():
    rng = np.random.default_rng(3)
    for _ in range(20):
        grid = random_grid(4, 4, (0, 0), (3, 3), rng)
        assert grid.shape == (4, 4)
        assert grid[0, 0] == UNVISITED
        assert grid[3, 3] == UNVISITED
        assert {int(v) for v in np.unique(grid)} <= {UNVISITED, OBSTACLE}


def test_random_grid_is_reproducible_with_seed():
    a = random_grid(6, 5, (0, 0), (5, 4), np.random.default_rng(11))
    b = random_grid(6, 5, (0, 0), (5, 4), np.random.default_rng(11))
    assert np.array_equal(a, b)


def test_sample_grid_problem_honours_contract():
    assert sanity_check_problem(make_grid_problem(), max_states=300).startswith("OK")
