# uninformed_search/demo.py
# Run a sample search: random grid with obstacles, random (or chosen) strategy, print the outcome.
#   python -m uninformed_search.demo --seed 7 --algo ucs
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import numpy as np

from . import settings
from .core.metrics import Outcome
from .engine import SearchType, UninformedSearch
from .problems.grid import GridProblem, random_grid

SEARCH_TYPES = [SearchType.BFS, SearchType.DFS, SearchType.DLS, SearchType.IDS, SearchType.UCS]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Uninformed search on a random grid with obstacles.")
    ap.add_argument("--width", type=int, help="grid width (default: random 5..24)")
    ap.add_argument("--height", type=int, help="grid height (default: random 5..24)")
    ap.add_argument("--algo", choices=[t.name.lower() for t in SearchType],
                    help="search strategy (default: random)")
    ap.add_argument("--depth-limit", type=int, help="bound for depth-limited search (default: random 1..14)")
    ap.add_argument("--seed", type=int, help="random seed for a reproducible run")
    ap.add_argument("--log-level", default=settings.LOG_LEVEL,
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def run_random_grid(rng: np.random.Generator, width: Optional[int] = None, height: Optional[int] = None,
                    algo: Optional[str] = None, depth_limit: Optional[int] = None) -> Outcome:
    w = width if width is not None else int(rng.integers(5, 25))
    h = height if height is not None else int(rng.integers(5, 25))

    sx, sy = int(rng.integers(0, max(w // 2, 1))), int(rng.integers(0, max(h // 2, 1)))
    gx, gy = int(rng.integers(0, w)), int(rng.integers(0, h))

    search_type = SearchType.parse(algo) if algo else SEARCH_TYPES[int(rng.integers(0, len(SEARCH_TYPES)))]
    grid = random_grid(w, h, (sx, sy), (gx, gy), rng)
    problem = GridProblem(start=(sx, sy), goal=(gx, gy), width=w, height=h, grid=grid)

    limit = depth_limit if depth_limit is not None else int(rng.integers(1, 15))
    return run_problem(problem, search_type, limit)


def run_problem(problem: GridProblem, search_type: SearchType, depth_limit: int) -> Outcome:
    """Print the problem, run one search on it and report the outcome."""
    print(problem.describe())
    print(f"Search method: {search_type.name}")

    result = UninformedSearch(search_type).search(problem, depth_limit)

    if result.outcome is Outcome.FAILURE:
        print("No path found")
    elif result.outcome is Outcome.CUTOFF:
        print("Cutoff occurred")
    else:
        print(result.node.state)
        print(f"Goal cost: {result.cost}")
    return result.outcome


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    rng = np.random.default_rng(args.seed)
    run_random_grid(rng, args.width, args.height, args.algo, args.depth_limit)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
