"""
snapshot.py — Sort Step Snapshot
=================================
Every sorting algorithm is a generator that yields StepSnapshot objects.
A StepSnapshot is a frozen-in-time picture of the progress fields the
visualizer needs for one frame:

    • The highlight pair (the two indices touched most recently)
    • The running comparison count
    • The status label ("Sorting: Merge Sort", "Done", …)

Design decisions:
  - StepSnapshot is a plain frozen dataclass.  It is a SNAPSHOT.  The
    worker thread is the only writer; observers are pure readers.
  - It deliberately does NOT carry the values array.  Copying the whole
    sequence on every step would dominate the run time; observers that
    need values call SortCoordinator.snapshot(), which returns a Frame.
  - Frame is the observer-facing record: the latest step fields plus a
    copy of the values, taken under one lock so the two always agree.
"""

from dataclasses import dataclass, field, asdict
from typing import Optional, Tuple, Dict, Any


@dataclass(frozen=True)
class StepSnapshot:
    """
    Attributes:
        step_number : 1-based index of this step in the run (0 = no step yet).
        highlight_a : First index touched by this step (or None).
        highlight_b : Second index touched by this step (or None).
        comparisons : Running comparison count for the current run.
        status      : Status label at the moment the step was published.
    """

    step_number:  int            = 0
    highlight_a:  Optional[int]  = None
    highlight_b:  Optional[int]  = None
    comparisons:  int            = 0
    status:       str            = "Idle"


@dataclass(frozen=True)
class Frame:
    """
    Consistent observer view of the whole system.

    Attributes:
        values      : Copy of the sequence values.
        highlight_a : Index of the first highlighted bar (or None).
        highlight_b : Index of the second highlighted bar (or None).
        comparisons : Comparison count for the current run.
        status      : Status label.
        state       : RunState value string ("idle", "running", …).
        step_number : Number of steps published so far in this run.
        algorithm   : Registry key of the current or most recent run (or None).
    """

    values:       Tuple[int, ...] = field(default_factory=tuple)
    highlight_a:  Optional[int]   = None
    highlight_b:  Optional[int]   = None
    comparisons:  int             = 0
    status:       str             = "Idle"
    state:        str             = "idle"
    step_number:  int             = 0
    algorithm:    Optional[str]   = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["values"] = list(self.values)
        return data
