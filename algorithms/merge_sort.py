"""
merge_sort.py — Merge Sort
===========================
Top-down merge sort over index ranges of the working array.

Yields a Step at:
  1. Every split of a range with more than one element
  2. Every comparison during a merge (`<=`, so the left run wins ties)
  3. Every placement, including draining whichever run is left over

Placements are counted as swaps.  No index is final until the last merge
completes, so `sorted` stays empty until the dispatcher's closing step.
"""

from typing import Iterator, List

from algorithms.step import Counters, Step, StepBuilder


PSEUDOCODE: List[str] = [
    "def merge_sort(a, l, r):",
    "    if l >= r: return",
    "    m ← l + (r - l) // 2",
    "    merge_sort(a, l, m); merge_sort(a, m+1, r)",
    "    merge(a, l, m, r)",
]


def merge_sort(array: List[float], counters: Counters) -> Iterator[Step]:
    sb = StepBuilder(array, counters)
    yield from _sort_range(sb, array, counters, 0, len(array) - 1)


def _sort_range(sb: StepBuilder, arr: List[float], counters: Counters, l: int, r: int) -> Iterator[Step]:
    if l >= r:
        return

    m = l + (r - l) // 2
    yield sb.build(f"Dividing array from index {l} to {r}")

    yield from _sort_range(sb, arr, counters, l, m)
    yield from _sort_range(sb, arr, counters, m + 1, r)
    yield from _merge(sb, arr, counters, l, m, r)


def _merge(sb: StepBuilder, arr: List[float], counters: Counters, l: int, m: int, r: int) -> Iterator[Step]:
    left  = arr[l:m + 1]
    right = arr[m + 1:r + 1]
    i = j = 0
    k = l

    while i < len(left) and j < len(right):
        counters.comparisons += 1
        yield sb.build(
            f"Comparing left subarray value {left[i]} with right subarray value {right[j]}",
            comparing=[l + i, m + 1 + j],
        )

        if left[i] <= right[j]:
            arr[k] = left[i]
            i += 1
        else:
            arr[k] = right[j]
            j += 1
        counters.swaps += 1
        yield sb.build(f"Placing {arr[k]} at index {k}", swapping=[k])
        k += 1

    while i < len(left):
        arr[k] = left[i]
        counters.swaps += 1
        yield sb.build(f"Placing remaining {left[i]} at index {k}", swapping=[k])
        i += 1
        k += 1

    while j < len(right):
        arr[k] = right[j]
        counters.swaps += 1
        yield sb.build(f"Placing remaining {right[j]} at index {k}", swapping=[k])
        j += 1
        k += 1
