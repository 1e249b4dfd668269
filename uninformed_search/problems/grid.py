# uninformed_search/problems/grid.py
# Grid path-search problem: walk from a start cell to a goal cell on an occupancy grid,
# 8-neighbour moves, never re-entering a cell already walked through.
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from ..core.node import Node

Coord = Tuple[int, int]

# Cell codes
UNVISITED = -1
VISITED = 0
CURRENT = 1
OBSTACLE = 2

_SYMBOLS = {UNVISITED: " ", OBSTACLE: "X"}


@dataclass(frozen=True)
class GridAction:
    """Displacement of a single step on the grid."""
    dx: int
    dy: int

    def __str__(self) -> str:
        return f"({self.dx:+d},{self.dy:+d})"


class GridState:
    """
    Grid world snapshot: the cell array plus the walker's position.

    Equality and hashing both look at the cell contents, so a clone is
    interchangeable with its source in visited sets.
    """
    def __init__(self, grid: np.ndarray, position: Coord):
        self.grid = np.asarray(grid, dtype=np.int8)
        self.position = position

    @classmethod
    def empty(cls, width: int, height: int, position: Coord = (0, 0)) -> "GridState":
        grid = np.full((width, height), UNVISITED, dtype=np.int8)
        grid[position] = CURRENT
        return cls(grid, position)

    @property
    def width(self) -> int: return self.grid.shape[0]

    @property
    def height(self) -> int: return self.grid.shape[1]

    def clone(self) -> "GridState":
        return GridState(self.grid.copy(), tuple(self.position))

    def __eq__(self, other) -> bool:
        if not isinstance(other, GridState):
            return NotImplemented
        return (self.position == other.position
                and self.grid.shape == other.grid.shape
                and np.array_equal(self.grid, other.grid))

    def __hash__(self) -> int:
        return hash((self.position, self.grid.shape, self.grid.tobytes()))

    def __repr__(self) -> str:
        return f"GridState({self.width}x{self.height}, position={self.position})"

    def __str__(self) -> str:
        lines = []
        for row in self.grid:
            cells = [_SYMBOLS.get(int(v), str(int(v))) for v in row]
            lines.append("|" + "|".join(cells) + "|")
        return "\n".join(lines) + "\n"


class GridProblem:
    """
    - State: GridState (cells + position)
    - LEGAL_ACTIONS(n): displacements in -1..1 x -1..1 onto in-bounds, unvisited, non-obstacle cells
    - RESULT(s,a): copy of s with the old cell VISITED and the new cell CURRENT
    - GOAL_TEST(n): the goal cell is CURRENT
    - c(s,a): 1
    """
    def __init__(self, start: Coord = (0, 0), goal: Coord = (0, 0), width: int = 10, height: int = 10,
                 grid: Optional[np.ndarray] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        for label, (x, y) in (("start", start), ("goal", goal)):
            if not (0 <= x < width and 0 <= y < height):
                raise ValueError(f"{label} {(x, y)} is outside the {width}x{height} grid")
        if grid is not None and np.shape(grid) != (width, height):
            raise ValueError(f"grid shape {np.shape(grid)} does not match {width}x{height}")
        self.start = tuple(start)
        self.goal = tuple(goal)
        self.width = width
        self.height = height
        self._grid = None if grid is None else np.array(grid, dtype=np.int8)

    def initial_node(self) -> Node:
        if self._grid is None:
            state = GridState.empty(self.width, self.height, self.start)
        else:
            g = self._grid.copy()
            g[self.start] = CURRENT
            state = GridState(g, self.start)
        return Node(state)

    def goal_test(self, node: Node) -> bool:
        return bool(node.state.grid[self.goal] == CURRENT)

    def legal_actions(self, node: Node) -> List[GridAction]:
        s: GridState = node.state
        x, y = s.position
        actions = []
        for i in (-1, 0, 1):
            for j in (-1, 0, 1):
                u, v = x + i, y + j
                if u < 0 or u >= self.width or v < 0 or v >= self.height:
                    continue
                if s.grid[u, v] == UNVISITED:
                    actions.append(GridAction(i, j))
        return actions

    def result(self, state: GridState, action: GridAction) -> GridState:
        nxt = state.clone()
        x, y = nxt.position
        u, v = x + action.dx, y + action.dy
        nxt.grid[x, y] = VISITED
        nxt.grid[u, v] = CURRENT
        nxt.position = (u, v)
        return nxt

    def step_cost(self, state: GridState, action: GridAction) -> int:
        return 1

    def describe(self) -> str:
        return (
            f"Width: {self.width}\n"
            f"Height: {self.height}\n"
            f"Start x: {self.start[0]}\n"
            f"Start y: {self.start[1]}\n"
            f"Goal x: {self.goal[0]}\n"
            f"Goal y: {self.goal[1]}\n"
            f"{self.initial_node().state}"
        )

    __str__ = describe


def random_grid(width: int, height: int, start: Coord, goal: Coord,
                rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """Unvisited grid with a handful of random obstacles, never on start or goal."""
    rng = rng if rng is not None else np.random.default_rng()
    grid = np.full((width, height), UNVISITED, dtype=np.int8)
    num_obstacles = 5 + width % height
    for _ in range(num_obstacles):
        x = int(rng.integers(0, width))
        y = int(rng.integers(0, height))
        if (x, y) == tuple(start) or (x, y) == tuple(goal):
            continue
        grid[x, y] = OBSTACLE
    return grid


def make_grid_problem() -> GridProblem:
    # Example: 4x5 grid, a short wall the walker has to go around
    grid = np.full((4, 5), UNVISITED, dtype=np.int8)
    for cell in [(1, 2), (2, 2), (2, 3)]:
        grid[cell] = OBSTACLE
    return GridProblem(start=(0, 0), goal=(3, 4), width=4, height=5, grid=grid)
