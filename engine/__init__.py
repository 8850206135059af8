"""
engine/
-------
Execution & coordination layer.

    from engine import SortCoordinator, RunState, Recorder, compare
"""

from engine.pacing      import Pacer, ControlSignals, SPEED_PRESETS
from engine.worker      import SortWorker
from engine.coordinator import SortCoordinator, RunState
from engine.recorder    import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "Pacer",
    "ControlSignals",
    "SPEED_PRESETS",
    "SortWorker",
    "SortCoordinator",
    "RunState",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
