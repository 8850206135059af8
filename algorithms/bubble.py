"""
bubble.py — Bubble Sort
========================
Generator-based bubble sort.  Yields a StepSnapshot after every
adjacent-pair comparison:
  1. Pair out of order  →  swap (the swap carries the comparison)
  2. Pair in order      →  highlight the pair, count the comparison

Always runs the full n-1 passes; there is no early exit when a pass makes
no swaps, so the comparison count is exactly n(n-1)/2.
"""

from typing import Iterator

from sequence import SequenceStore, StepSnapshot


def bubble_sort(seq: SequenceStore) -> Iterator[StepSnapshot]:
    n = len(seq)
    for i in range(n - 1):
        for j in range(n - i - 1):
            if seq.get(j) > seq.get(j + 1):
                seq.swap(j, j + 1)
            else:
                seq.count_comparison()
                seq.highlight(j, j + 1)
            yield seq.step()
