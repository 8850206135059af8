"""
radix.py — LSD Radix Sort (base 10)
====================================
One stable counting pass per decimal digit, units first, for as long as
``max // exp > 0``.

Each pass:
  1. Tally the digit of every element (one comparison + one step each)
  2. Prefix-sum the ten digit counts
  3. Place elements into a scratch list walking the source high → low,
     which keeps equal digits in input order
  4. Write the scratch list back, one animated step per index
"""

from typing import Iterator, List

from sequence import SequenceStore, StepSnapshot


BASE = 10


def radix_sort(seq: SequenceStore) -> Iterator[StepSnapshot]:
    n = len(seq)
    if n < 2:
        return
    largest = max(seq.get(i) for i in range(n))
    exp = 1
    while largest // exp > 0:
        yield from _count_pass(seq, exp)
        exp *= BASE


def _count_pass(seq: SequenceStore, exp: int) -> Iterator[StepSnapshot]:
    n = len(seq)
    count: List[int] = [0] * BASE

    for i in range(n):
        count[(seq.get(i) // exp) % BASE] += 1
        seq.count_comparison()
        seq.highlight(i)
        yield seq.step()

    for d in range(1, BASE):
        count[d] += count[d - 1]

    output: List[int] = [0] * n
    for i in range(n - 1, -1, -1):
        value = seq.get(i)
        digit = (value // exp) % BASE
        count[digit] -= 1
        output[count[digit]] = value

    for i, value in enumerate(output):
        seq.set(i, value)
        yield seq.step()
