"""
store.py — Shared Sequence Store
=================================
The mutable array of values plus the derived highlight / metric fields.

Ownership:
  - The sort worker thread is the single writer.
  - Observers (the web layer, tests, loggers) only read, via frame().
  - Every mutation and every read happens under one short lock, so an
    observer never sees a torn mix of old and new fields.

Algorithms funnel their visible mutations through swap() / set() /
highlight() and then publish a StepSnapshot with step().
"""

import random
import threading
from typing import Iterable, List, Optional

from sequence.snapshot import StepSnapshot, Frame


DEFAULT_SIZE = 150      # bars on screen
VALUE_RANGE  = 500      # values are drawn from [0, VALUE_RANGE)


class SequenceIndexError(IndexError):
    """An algorithm addressed an index outside the sequence."""


class SequenceStore:
    """
    Attributes:
        status : Status label published with every step.

    The length of the sequence is fixed for the lifetime of a run.
    load() / regenerate() are the only operations that replace contents,
    and the coordinator only calls them while no worker is active.
    """

    def __init__(self, values: Optional[Iterable[int]] = None):
        self._lock = threading.Lock()
        self._values:      List[int]     = []
        self._highlight_a: Optional[int] = None
        self._highlight_b: Optional[int] = None
        self._comparisons: int           = 0
        self._step_number: int           = 0
        self._latest:      StepSnapshot  = StepSnapshot()
        self.status:       str           = "Idle"
        if values is not None:
            self.load(values)

    # ------------------------------------------------------------------
    # Contents
    # ------------------------------------------------------------------
    def load(self, values: Iterable[int]) -> None:
        """Replace the contents and reset metrics.  Values must be ints >= 0."""
        items = list(values)
        for v in items:
            if isinstance(v, bool) or not isinstance(v, int):
                raise ValueError(f"Sequence values must be integers, got {v!r}")
            if v < 0:
                raise ValueError(f"Sequence values must be non-negative, got {v}")
        with self._lock:
            self._values = items
            self._reset_metrics_locked()

    def regenerate(
        self,
        size: Optional[int] = None,
        rng: Optional[random.Random] = None,
        value_range: int = VALUE_RANGE,
    ) -> None:
        """Fill with fresh random values in [0, value_range)."""
        rng = rng or random.Random()
        n = len(self._values) if size is None else size
        self.load(rng.randrange(value_range) for _ in range(n))

    def reset_metrics(self) -> None:
        with self._lock:
            self._reset_metrics_locked()

    def _reset_metrics_locked(self) -> None:
        self._highlight_a = None
        self._highlight_b = None
        self._comparisons = 0
        self._step_number = 0
        self._latest      = StepSnapshot(status=self.status)

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._values)

    def get(self, i: int) -> int:
        self._check(i)
        return self._values[i]

    def set(self, i: int, value: int) -> None:
        """Write one element and highlight it."""
        self._check(i)
        with self._lock:
            self._values[i]   = value
            self._highlight_a = i
            self._highlight_b = None

    def swap(self, i: int, j: int, count: bool = True) -> None:
        """
        Exchange two elements and record them as the highlight pair.

        The swap counts as one comparison unless count=False (partition
        swaps whose comparison was already counted).
        """
        self._check(i)
        self._check(j)
        with self._lock:
            self._values[i], self._values[j] = self._values[j], self._values[i]
            if count:
                self._comparisons += 1
            self._highlight_a = i
            self._highlight_b = j

    def snapshot_values(self) -> List[int]:
        with self._lock:
            return list(self._values)

    # ------------------------------------------------------------------
    # Highlight & metrics
    # ------------------------------------------------------------------
    def highlight(self, a: Optional[int], b: Optional[int] = None) -> None:
        if a is not None:
            self._check(a)
        if b is not None:
            self._check(b)
        with self._lock:
            self._highlight_a = a
            self._highlight_b = b

    def clear_highlight(self) -> None:
        self.highlight(None)

    def count_comparison(self, n: int = 1) -> None:
        with self._lock:
            self._comparisons += n

    @property
    def comparisons(self) -> int:
        with self._lock:
            return self._comparisons

    @property
    def latest(self) -> StepSnapshot:
        """The most recently published StepSnapshot."""
        return self._latest

    def set_status(self, status: str) -> StepSnapshot:
        """Change the status label and republish the current step fields."""
        with self._lock:
            self.status = status
            self._latest = self._build_locked()
            return self._latest

    # ------------------------------------------------------------------
    # Publishing
    # ------------------------------------------------------------------
    def step(self) -> StepSnapshot:
        """Publish the next StepSnapshot.  Algorithms yield the result."""
        with self._lock:
            self._step_number += 1
            self._latest = self._build_locked()
            return self._latest

    def frame(self, state: str = "idle", algorithm: Optional[str] = None) -> Frame:
        with self._lock:
            return Frame(
                values=tuple(self._values),
                highlight_a=self._highlight_a,
                highlight_b=self._highlight_b,
                comparisons=self._comparisons,
                status=self.status,
                state=state,
                step_number=self._step_number,
                algorithm=algorithm,
            )

    def _build_locked(self) -> StepSnapshot:
        return StepSnapshot(
            step_number=self._step_number,
            highlight_a=self._highlight_a,
            highlight_b=self._highlight_b,
            comparisons=self._comparisons,
            status=self.status,
        )

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self._values):
            raise SequenceIndexError(
                f"Index {i} out of range for sequence of length {len(self._values)}"
            )
