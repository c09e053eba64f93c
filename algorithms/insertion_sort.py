"""
insertion_sort.py — Insertion Sort
===================================
Grows a sorted prefix one key at a time.  Each predecessor greater than
the key is shifted right; a shift is a single write but is counted in the
`swaps` tally so every array engine reports writes the same way.
"""

from typing import Iterator, List

from algorithms.step import Counters, Step, StepBuilder


PSEUDOCODE: List[str] = [
    "for i in 1 .. n-1:",
    "    key ← a[i]; j ← i - 1",
    "    while j >= 0 and a[j] > key:",
    "        a[j+1] ← a[j]; j ← j - 1",
    "    a[j+1] ← key",
]


def insertion_sort(array: List[float], counters: Counters) -> Iterator[Step]:
    sb = StepBuilder(array, counters)
    n  = len(array)
    if n < 2:
        return

    sb.set_sorted_prefix(1)
    yield sb.build("First element is considered sorted")

    for i in range(1, n):
        key = array[i]
        j   = i - 1
        sb.set_sorted_prefix(i)
        yield sb.build(f"Selected key {key} at index {i}", comparing=[i])

        while j >= 0:
            counters.comparisons += 1
            yield sb.build(f"Comparing {array[j]} with key {key}", comparing=[j, j + 1])

            if array[j] > key:
                array[j + 1] = array[j]
                counters.swaps += 1
                yield sb.build(f"Moving {array[j]} to the right", swapping=[j, j + 1])
                j -= 1
            else:
                break

        array[j + 1] = key
        sb.set_sorted_prefix(i + 1)
        yield sb.build(f"Inserted key {key} at index {j + 1}", swapping=[j + 1])
