"""
recorder.py — Headless Run Recorder & Analytics
=================================================
Runs one algorithm to completion synchronously (no thread, no pacing)
and computes the metrics the Analytics panel and Comparison Mode show.

Usage:
    rec = Recorder()
    rec.start(algo_key="merge", values=[5, 3, 8, 1])
    metrics = rec.run_to_completion()    # exhausts the generator
    rec.values                           # the sorted output

Comparison Mode:
    The UI builds two Recorders on the SAME input values, runs both to
    completion, then calls compare(rec1, rec2) → ComparisonResult.
"""

import time
from dataclasses import dataclass, field
from typing import Optional, List, Iterable, Iterator

from algorithms import get_algorithm, AlgoInfo
from sequence import SequenceStore, StepSnapshot


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:        str   = ""
    algo_label:      str   = ""
    size:            int   = 0          # number of values sorted
    comparisons:     int   = 0
    total_steps:     int   = 0          # number of StepSnapshots yielded
    wall_time_ms:    float = 0.0        # wall-clock time to run to completion
    is_sorted:       bool  = False      # output verified non-decreasing
    complexity_time: str   = ""


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_comparisons: str = ""   # which algo compared less
    winner_steps:       str = ""   # which algo needed fewer animation steps
    winner_time:        str = ""


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps      : Recorded StepSnapshots (only when keep_steps=True).
        metrics    : Computed RunMetrics (available after run_to_completion).
        store      : The private SequenceStore the run sorts.
    """

    def __init__(self, keep_steps: bool = False):
        self.keep_steps: bool                 = keep_steps
        self.steps:      List[StepSnapshot]   = []
        self.metrics:    Optional[RunMetrics] = None
        self.store:      Optional[SequenceStore] = None

        self._algo_info:  Optional[AlgoInfo]  = None
        self._generator:  Optional[Iterator[StepSnapshot]] = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, values: Iterable[int]) -> None:
        """Load a private copy of ``values`` and prime the generator."""
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        self._algo_info = info
        self.store      = SequenceStore(values)
        self.store.set_status(f"Sorting: {info.label}")
        self.steps      = []
        self.metrics    = None
        self._generator = info.fn(self.store)

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, optionally record every step, compute metrics."""
        if self._generator is None:
            raise RuntimeError("Call start() first.")

        start = time.monotonic()
        total = 0
        for step in self._generator:
            total += 1
            if self.keep_steps:
                self.steps.append(step)
        wall_ms = (time.monotonic() - start) * 1000

        self._generator = None
        self.store.clear_highlight()
        self.store.set_status("Done")
        self.metrics = self._compute_metrics(total, wall_ms)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    @property
    def values(self) -> List[int]:
        return self.store.snapshot_values() if self.store else []

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, total_steps: int, wall_ms: float) -> RunMetrics:
        info   = self._algo_info
        values = self.values
        return RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            size=len(values),
            comparisons=self.store.comparisons,
            total_steps=total_steps,
            wall_time_ms=round(wall_ms, 2),
            is_sorted=all(values[i] <= values[i + 1] for i in range(len(values) - 1)),
            complexity_time=info.complexity_time,
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val, l_key, r_key):
        if l_val == r_val:
            return "tie"
        return l_key if l_val < r_val else r_key

    return ComparisonResult(
        left=l,
        right=r,
        winner_comparisons=winner(l.comparisons, r.comparisons, l.algo_label, r.algo_label),
        winner_steps=winner(l.total_steps, r.total_steps, l.algo_label, r.algo_label),
        winner_time=winner(l.wall_time_ms, r.wall_time_ms, l.algo_label, r.algo_label),
    )
