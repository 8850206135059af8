"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sorting algorithm the visualizer knows
about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, complexity_time, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The engine and UI both consume it
so adding a new algorithm is literally: write the generator, add one
entry here.
"""

from dataclasses import dataclass
from typing import Callable, List, Dict, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bubble           import bubble_sort           as _bubble
from algorithms.insertion        import insertion_sort        as _insertion
from algorithms.binary_insertion import binary_insertion_sort as _binary_insertion
from algorithms.merge            import merge_sort            as _merge
from algorithms.quick            import quick_sort            as _quick
from algorithms.radix            import radix_sort            as _radix
from algorithms.bucket           import bucket_sort           as _bucket
from algorithms.counting         import counting_sort         as _counting


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "bubble"
    label:             str                    # human label, e.g. "Bubble Sort"
    fn:                Callable               # the generator function
    complexity_time:   str      = ""          # e.g. "O(n²)"
    complexity_space:  str      = ""          # e.g. "O(1)"
    stable:            bool     = False       # keeps equal keys in input order?
    description:       str      = ""          # one-liner for the UI card


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=_bubble,
        complexity_time="O(n²)", complexity_space="O(1)", stable=True,
        description="Swaps adjacent out-of-order pairs. Every pass is a full sweep.",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=_insertion,
        complexity_time="O(n²)", complexity_space="O(1)", stable=True,
        description="Grows a sorted prefix, shifting larger elements right.",
    ),

    "binary-insertion": AlgoInfo(
        key="binary-insertion", label="Binary Insertion Sort", fn=_binary_insertion,
        complexity_time="O(n²)", complexity_space="O(1)", stable=True,
        description="Insertion sort that binary-searches the insertion point.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", fn=_merge,
        complexity_time="O(n log n)", complexity_space="O(n)", stable=True,
        description="Sorts halves recursively, then merges them left-first.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=_quick,
        complexity_time="O(n log n)", complexity_space="O(log n)",
        description="Lomuto partition around the last element, then each side.",
    ),

    "radix": AlgoInfo(
        key="radix", label="Radix Sort", fn=_radix,
        complexity_time="O(nk)", complexity_space="O(n + k)", stable=True,
        description="Stable counting pass per decimal digit, units first.",
    ),

    "bucket": AlgoInfo(
        key="bucket", label="Bucket Sort", fn=_bucket,
        complexity_time="O(n + k)", complexity_space="O(n + k)", stable=True,
        description="Scatters values into 10 range buckets, sorts each, gathers.",
    ),

    "counting": AlgoInfo(
        key="counting", label="Counting Sort", fn=_counting,
        complexity_time="O(n + k)", complexity_space="O(n + k)", stable=True,
        description="Counts each value, prefix-sums, places elements back to front.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    if not isinstance(key, str):
        return None
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def stable_algorithms() -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if a.stable]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "stable_algorithms",
]
