# uninformed_search/benchmarks/run_all.py
#   python -m uninformed_search.benchmarks.run_all --problem romania
from __future__ import annotations

import argparse
import json
import logging
import time
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Any

import pandas as pd

from .. import settings
from ..core.metrics import Outcome, SearchResult
from ..engine import SearchType, UninformedSearch

logger = logging.getLogger(__name__)

HERE = Path(__file__).parent

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"

def load_problem(name: str):
    if name == "romania":
        from ..problems.romania import romania_problem
        return romania_problem()
    if name == "grid":
        from ..problems.grid import make_grid_problem
        return make_grid_problem()
    raise ValueError(f"Unknown problem: {name}. Available: grid, romania")

def load_algos(dls_limit: int) -> List[Tuple[str, Callable[[Any], SearchResult]]]:
    """One (label, callable(problem)) pair per strategy, in SearchType order."""
    algos = []
    for t in SearchType:
        engine = UninformedSearch(t)
        if t is SearchType.DLS:
            algos.append((f"DLS(l={dls_limit})", lambda p, e=engine: e.search(p, dls_limit)))
        else:
            algos.append((t.name, lambda p, e=engine: e.search(p)))
    return algos

def run(problem, dls_limit: int = settings.DLS_LIMIT) -> List[dict]:
    rows = []
    for name, fn in load_algos(dls_limit):
        print(f"→ Running {name} ...")
        try:
            r = fn(problem)
            print(
                f"  {r.algo}: "
                f"{r.outcome.value.upper()} "
                f"cost={r.cost} "
                f"expanded={r.nodes_expanded}, "
                f"time={_fmt_time(r.time_s)}s"
            )
            rows.append(r.as_row())
        except Exception as e:
            # one broken strategy should not sink the whole benchmark
            logger.exception("%s raised", name)
            print(f"  {name}: ERROR {repr(e)}")
            rows.append(SearchResult(name, Outcome.FAILURE, error=repr(e)).as_row())
    return rows

def save(rows: List[dict], out_dir: Path) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    out = {"results": rows, "ts": time.time()}
    out_path = out_dir / "results.json"
    out_path.write_text(json.dumps(out, indent=2))
    pd.DataFrame(rows).to_csv(out_dir / "results.csv", index=False)
    return out_path

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Run every uninformed strategy on one problem.")
    ap.add_argument("--problem", choices=["grid", "romania"], default="grid")
    ap.add_argument("--dls-limit", type=int, default=settings.DLS_LIMIT)
    ap.add_argument("--out", default=str(HERE), help="directory for results.json / results.csv")
    ap.add_argument("--log-level", default=settings.LOG_LEVEL,
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    problem = load_problem(args.problem)
    print(problem.describe())
    rows = run(problem, args.dls_limit)

    table = pd.DataFrame(rows).set_index("algo")
    print(table[["outcome", "cost", "path_length", "nodes_expanded", "time_s", "peak_kb"]].to_string())

    out_path = save(rows, Path(args.out))
    print(f"Saved {out_path}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
