"""
binary_insertion.py — Binary Insertion Sort
============================================
Insertion sort that finds the insertion point with a binary search over
the sorted prefix, then shifts the tail right one slot at a time.

The search is the closed-interval form (``low <= high``,
``mid = low + (high - low) // 2``) and moves right on ties, so equal keys
keep their input order.  Every probe counts as a comparison and is
published as a step highlighting (mid, i); shifts are separate steps.
"""

from typing import Iterator

from sequence import SequenceStore, StepSnapshot


def binary_insertion_sort(seq: SequenceStore) -> Iterator[StepSnapshot]:
    n = len(seq)
    for i in range(1, n):
        key = seq.get(i)

        # -- binary search for the insertion point --
        low, high = 0, i - 1
        while low <= high:
            mid = low + (high - low) // 2
            seq.count_comparison()
            seq.highlight(mid, i)
            yield seq.step()
            if seq.get(mid) > key:
                high = mid - 1
            else:
                low = mid + 1

        # -- shift the tail --
        for j in range(i - 1, low - 1, -1):
            seq.set(j + 1, seq.get(j))
            seq.highlight(j, j + 1)
            yield seq.step()

        seq.set(low, key)
        yield seq.step()
