"""
selection_sort.py — Selection Sort
===================================
Each pass scans the unsorted suffix for its minimum (strict `<`, so the
first of several equal minima wins) and swaps it to the sorted boundary.
At most one swap per pass, which is why equal keys can be reordered.
"""

from typing import Iterator, List

from algorithms.step import Counters, Step, StepBuilder


PSEUDOCODE: List[str] = [
    "for i in 0 .. n-2:",
    "    min ← i",
    "    for j in i+1 .. n-1:",
    "        if a[j] < a[min]: min ← j",
    "    if min != i: swap(a[i], a[min])",
]


def selection_sort(array: List[float], counters: Counters) -> Iterator[Step]:
    sb = StepBuilder(array, counters)
    n  = len(array)

    for i in range(n - 1):
        min_idx = i
        sb.set_sorted_prefix(i)
        yield sb.build(
            f"Starting pass {i + 1}. Current minimum is {array[i]} at index {i}",
            comparing=[i],
        )

        for j in range(i + 1, n):
            counters.comparisons += 1
            yield sb.build(
                f"Comparing current min {array[min_idx]} with {array[j]}",
                comparing=[min_idx, j],
            )

            if array[j] < array[min_idx]:
                min_idx = j
                yield sb.build(
                    f"Found new minimum: {array[min_idx]} at index {min_idx}",
                    comparing=[min_idx],
                )

        if min_idx != i:
            array[i], array[min_idx] = array[min_idx], array[i]
            counters.swaps += 1
            yield sb.build(
                f"Swapping minimum {array[i]} with {array[min_idx]}",
                swapping=[i, min_idx],
            )
        else:
            yield sb.build(f"Minimum {array[i]} is already in correct position, no swap needed")
