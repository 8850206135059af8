"""
bucket.py — Bucket Sort
========================
Scatter into a fixed number of buckets, sort each bucket, gather.

  • bucket index = value * BUCKET_COUNT // (max + 1), always in range
  • one comparison per bucket assignment; the per-bucket sort is the
    built-in (stable) ``sorted`` and is not counted
  • buckets are concatenated back into the sequence in bucket order,
    one animated step per written index
"""

from typing import Iterator, List

from sequence import SequenceStore, SequenceIndexError, StepSnapshot


BUCKET_COUNT = 10


def bucket_sort(seq: SequenceStore) -> Iterator[StepSnapshot]:
    n = len(seq)
    if n < 2:
        return
    largest = max(seq.get(i) for i in range(n))
    buckets: List[List[int]] = [[] for _ in range(BUCKET_COUNT)]

    for i in range(n):
        value = seq.get(i)
        idx = value * BUCKET_COUNT // (largest + 1)
        if not 0 <= idx < BUCKET_COUNT:
            raise SequenceIndexError(f"Bucket index {idx} out of range for value {value}")
        buckets[idx].append(value)
        seq.count_comparison()
        seq.highlight(i)
        yield seq.step()

    index = 0
    for bucket in buckets:
        for value in sorted(bucket):
            seq.set(index, value)
            index += 1
            yield seq.step()
