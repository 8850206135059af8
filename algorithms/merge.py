"""
merge.py — Merge Sort
======================
Top-down recursive merge sort.

  1. Split [lo, hi] at mid = (lo + hi) // 2 and sort both halves
  2. Merge the runs into a scratch list, comparing heads with ``<=``
     (ties take the left run, which keeps the sort stable)
  3. Copy the scratch list back into [lo, hi] one index at a time

Each head comparison and each copy-back write is a step.  Closing the
generator (on stop) unwinds the whole recursion at the current yield.
"""

from typing import Iterator

from sequence import SequenceStore, StepSnapshot


def merge_sort(seq: SequenceStore) -> Iterator[StepSnapshot]:
    yield from _sort(seq, 0, len(seq) - 1)


def _sort(seq: SequenceStore, lo: int, hi: int) -> Iterator[StepSnapshot]:
    if lo >= hi:
        return
    mid = (lo + hi) // 2
    yield from _sort(seq, lo, mid)
    yield from _sort(seq, mid + 1, hi)
    yield from _merge(seq, lo, mid, hi)


def _merge(seq: SequenceStore, lo: int, mid: int, hi: int) -> Iterator[StepSnapshot]:
    merged = []
    i, j = lo, mid + 1

    while i <= mid and j <= hi:
        seq.count_comparison()
        seq.highlight(i, j)
        yield seq.step()
        if seq.get(i) <= seq.get(j):
            merged.append(seq.get(i))
            i += 1
        else:
            merged.append(seq.get(j))
            j += 1

    # drain whichever run is left
    merged.extend(seq.get(k) for k in range(i, mid + 1))
    merged.extend(seq.get(k) for k in range(j, hi + 1))

    for k, value in enumerate(merged):
        seq.set(lo + k, value)
        yield seq.step()
