"""
sequence/
---------
Shared mutable data model and the snapshots it publishes.

    from sequence import SequenceStore, StepSnapshot, Frame
"""

from sequence.snapshot import StepSnapshot, Frame
from sequence.store import (
    SequenceStore,
    SequenceIndexError,
    DEFAULT_SIZE,
    VALUE_RANGE,
)

__all__ = [
    "StepSnapshot",
    "Frame",
    "SequenceStore",
    "SequenceIndexError",
    "DEFAULT_SIZE",
    "VALUE_RANGE",
]
