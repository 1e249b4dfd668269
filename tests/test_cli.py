import json

import matplotlib
matplotlib.use("Agg")
import numpy as np
import pytest

from uninformed_search import Outcome, SearchType, UninformedSearch
from uninformed_search import demo
from uninformed_search.benchmarks import plot_results, run_all
from uninformed_search.plots.plotting import bar_compare
from uninformed_search.problems.grid import OBSTACLE, UNVISITED, GridProblem
from uninformed_search.problems.romania import romania_problem


def test_demo_prints_problem_and_method(capsys):
    assert demo.main(["--width", "1", "--height", "3", "--algo", "bfs", "--seed", "0"]) == 0
    out = capsys.readouterr().out
    assert "Width: 1" in out
    assert "Search method: BFS" in out
    assert ("Goal cost:" in out) or ("No path found" in out)


def test_demo_start_on_goal_costs_nothing(capsys):
    rng = np.random.default_rng(0)
    outcome = demo.run_random_grid(rng, width=1, height=1, algo="dls", depth_limit=1)
    # a 1x1 grid always starts on its goal
    assert outcome is Outcome.GOAL
    assert "Goal cost: 0" in capsys.readouterr().out


def test_demo_reports_cutoff(capsys):
    problem = GridProblem(start=(0, 0), goal=(0, 2), width=1, height=3)
    assert demo.run_problem(problem, SearchType.DLS, 1) is Outcome.CUTOFF
    out = capsys.readouterr().out
    assert "Search method: DLS" in out
    assert "Cutoff occurred" in out


def test_demo_reports_no_path(capsys):
    grid = np.full((1, 3), UNVISITED)
    grid[0, 2] = OBSTACLE
    problem = GridProblem(start=(0, 0), goal=(0, 2), width=1, height=3, grid=grid)
    assert demo.run_problem(problem, SearchType.BFS, 0) is Outcome.FAILURE
    assert "No path found" in capsys.readouterr().out


def test_demo_rejects_unknown_algorithm():
    with pytest.raises(SystemExit):
        demo.main(["--algo", "astar"])


def test_run_all_writes_results(tmp_path, capsys):
    assert run_all.main(["--problem", "romania", "--dls-limit", "4", "--out", str(tmp_path)]) == 0
    data = json.loads((tmp_path / "results.json").read_text())
    rows = {r["algo"]: r for r in data["results"]}
    assert set(rows) == {"BFS", "DFS", "UCS", "DLS(l=4)", "IDS"}
    assert rows["UCS"]["cost"] == 418
    assert rows["BFS"]["path_length"] == 3
    assert all(r["success"] for r in rows.values())
    assert (tmp_path / "results.csv").exists()
    assert "UCS" in capsys.readouterr().out


def test_run_all_records_errors_and_keeps_going():
    class Broken:
        def initial_node(self):
            raise RuntimeError("boom")

    rows = run_all.run(Broken(), dls_limit=2)
    assert len(rows) == 5
    assert all(r["outcome"] == "error" for r in rows)
    assert "boom" in rows[0]["error"]
    assert rows[0]["cost"] is None
    assert rows[0]["path_length"] is None


def test_unreached_goal_is_saved_as_null_cost(tmp_path):
    row = UninformedSearch(SearchType.DLS).search(romania_problem(), depth_limit=1).as_row()
    assert row["outcome"] == "cutoff"
    assert row["cost"] is None

    out_path = run_all.save([row], tmp_path)
    text = out_path.read_text()
    assert "Infinity" not in text
    assert json.loads(text)["results"][0]["cost"] is None


def test_load_problem_rejects_unknown_name():
    with pytest.raises(ValueError):
        run_all.load_problem("maze")


def test_plot_results_writes_charts(tmp_path):
    results = tmp_path / "results.json"
    run_all.save(run_all.run(romania_problem(), dls_limit=4), tmp_path)
    assert results.exists()

    out = tmp_path / "plots"
    assert plot_results.main(["--results", str(results), "--out", str(out)]) == 0
    for name in ("nodes_expanded.png", "time.png", "cost.png", "peak_kb.png", "results.md"):
        assert (out / name).exists()
    assert "| UCS | 418 |" in (out / "results.md").read_text()


def test_plot_results_without_successes_exits(tmp_path):
    results = tmp_path / "results.json"
    results.write_text(json.dumps({"results": [{"algo": "BFS", "success": False}]}))
    with pytest.raises(SystemExit):
        plot_results.load_rows(results)


def test_bar_compare_handles_failed_runs():
    problem = romania_problem()
    results = [
        UninformedSearch(SearchType.UCS).search(problem),
        UninformedSearch(SearchType.DLS).search(problem, depth_limit=1),
    ]
    fig = bar_compare(results, title="Romania")
    fig.canvas.draw()
    assert len(fig.axes) == 4
    labels = [t.get_text() for t in fig.axes[0].get_xticklabels()]
    assert labels[0] == "UCS"
    assert "cutoff" in labels[1]
