"""
quick.py — Quick Sort
======================
Quicksort with the Lomuto partition scheme.

  • pivot = last element of the subrange
  • every ``a[j] < pivot`` test counts as one comparison and is a step
  • elements smaller than the pivot are swapped to the front; the pivot
    is then swapped into its final slot

Partition swaps move elements without adding to the comparison count:
the comparison that caused them was already counted.  Pending subranges
live on an explicit stack: sorted or all-equal input would otherwise
recurse n levels deep.
"""

from typing import Iterator, Generator, List, Tuple

from sequence import SequenceStore, StepSnapshot


def quick_sort(seq: SequenceStore) -> Iterator[StepSnapshot]:
    # explicit stack of pending ranges; the left range is popped first so the
    # visiting order matches the recursive formulation
    pending: List[Tuple[int, int]] = [(0, len(seq) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        p = yield from _partition(seq, low, high)
        pending.append((p + 1, high))
        pending.append((low, p - 1))


def _partition(seq: SequenceStore, low: int, high: int) -> Generator[StepSnapshot, None, int]:
    """Partition [low, high] and return the pivot's final index."""
    pivot = seq.get(high)
    i = low - 1
    for j in range(low, high):
        seq.count_comparison()
        if seq.get(j) < pivot:
            i += 1
            seq.swap(i, j, count=False)
        else:
            seq.highlight(j, high)
        yield seq.step()

    seq.swap(i + 1, high, count=False)
    yield seq.step()
    return i + 1
