"""
insertion.py — Insertion Sort
==============================
Classic shift-based insertion sort.

Every evaluation of ``a[j] > key`` counts as one comparison.  Each shift
of an element one slot to the right is a step, and so is the final
placement of the key.  On a strictly descending input of length n this
gives n(n-1)/2 comparisons.
"""

from typing import Iterator

from sequence import SequenceStore, StepSnapshot


def insertion_sort(seq: SequenceStore) -> Iterator[StepSnapshot]:
    n = len(seq)
    for i in range(1, n):
        key = seq.get(i)
        j = i - 1
        while j >= 0:
            seq.count_comparison()
            if seq.get(j) <= key:
                break
            # shift a[j] one slot right
            seq.set(j + 1, seq.get(j))
            seq.highlight(j, j + 1)
            yield seq.step()
            j -= 1

        seq.set(j + 1, key)
        yield seq.step()
