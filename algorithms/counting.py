"""
counting.py — Counting Sort
============================
Stable counting sort over non-negative integers.

  1. Tally every value into a count array of size max + 1 (never smaller
     than 1, so an all-zero input still gets a slot)
  2. Prefix-sum the counts
  3. Walk the input from n-1 down to 0, placing each element at
     ``count[value] - 1`` in a scratch list and decrementing the slot
  4. Write the scratch list back into the sequence

Only the tally counts comparisons, one per element, the same figure radix
and bucket sort report.
"""

from typing import Iterator, List

from sequence import SequenceStore, StepSnapshot


def counting_sort(seq: SequenceStore) -> Iterator[StepSnapshot]:
    n = len(seq)
    if n < 2:
        return
    largest = max(seq.get(i) for i in range(n))
    count: List[int] = [0] * max(largest + 1, 1)

    for i in range(n):
        count[seq.get(i)] += 1
        seq.count_comparison()
        seq.highlight(i)
        yield seq.step()

    for v in range(1, len(count)):
        count[v] += count[v - 1]

    output: List[int] = [0] * n
    for i in range(n - 1, -1, -1):
        value = seq.get(i)
        count[value] -= 1
        output[count[value]] = value
        seq.highlight(i)
        yield seq.step()

    for i, value in enumerate(output):
        seq.set(i, value)
        yield seq.step()
