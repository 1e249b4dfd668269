# uninformed_search/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
import math, time, tracemalloc

from .node import Node
from .utils import reconstruct_path


class Outcome(Enum):
    """Three-way search result: a goal node, no goal reachable, or the depth bound was hit."""
    GOAL = "goal"
    FAILURE = "failure"
    CUTOFF = "cutoff"


FAILURE = Outcome.FAILURE
CUTOFF = Outcome.CUTOFF


@dataclass
class SearchResult:
    algo: str
    outcome: Outcome
    node: Optional[Node] = None
    actions: List = field(default_factory=list)
    cost: float = float("inf")
    nodes_expanded: int = 0
    time_s: float = 0.0
    peak_kb: int = 0
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.outcome is Outcome.GOAL

    def as_row(self) -> dict:
        return {
            "algo": self.algo,
            "outcome": "error" if self.error else self.outcome.value,
            "success": self.success,
            # JSON has no Infinity; unreached goals are written as null
            "cost": self.cost if math.isfinite(self.cost) else None,
            "path_length": None if self.error else len(self.actions),
            "nodes_expanded": self.nodes_expanded,
            "time_s": self.time_s,
            "peak_kb": self.peak_kb,
            "error": self.error,
        }


class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    If tracemalloc is already running (an outer MeasuredRun), it is left running on exit.
    """
    def __init__(self) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False
        self._owns_trace: bool = False

    def __enter__(self) -> "MeasuredRun":
        self._tracing = True
        if not tracemalloc.is_tracing():
            tracemalloc.start()
            self._owns_trace = True
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            if self._owns_trace:
                tracemalloc.stop()
            self._tracing = False
            self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        """Approx peak KB. Works before and after __exit__."""
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb


def finish(name: str, found, expanded: int, meter: MeasuredRun) -> SearchResult:
    """Wrap a strategy's raw answer (a goal Node, FAILURE or CUTOFF) into a SearchResult."""
    if isinstance(found, Outcome):
        return SearchResult(name, found, None, [], float("inf"), expanded, meter.elapsed, meter.peak_kb)
    actions, cost = reconstruct_path(found)
    return SearchResult(name, Outcome.GOAL, found, actions, cost, expanded, meter.elapsed, meter.peak_kb)
