"""
quick_sort.py — Quick Sort (Lomuto partition)
=============================================
Pivot is always the last element of the current range.  Every value
strictly smaller than the pivot is swapped into the growing "less-than"
region, even when it is already there (i == j), and the pivot is then
swapped into place right after that region.

Placed pivots accumulate in the `sorted` set, so it only ever grows.
"""

from typing import Iterator, List

from algorithms.step import Counters, Step, StepBuilder


PSEUDOCODE: List[str] = [
    "def quick_sort(a, low, high):",
    "    if low < high:",
    "        p ← partition(a, low, high)",
    "        quick_sort(a, low, p - 1); quick_sort(a, p + 1, high)",
    "def partition(a, low, high):",
    "    pivot ← a[high]; i ← low - 1",
    "    for j in low .. high-1:",
    "        if a[j] < pivot: i ← i + 1; swap(a[i], a[j])",
    "    swap(a[i+1], a[high]); return i + 1",
]


def quick_sort(array: List[float], counters: Counters) -> Iterator[Step]:
    sb = StepBuilder(array, counters)
    yield from _sort_range(sb, array, counters, 0, len(array) - 1)


def _sort_range(sb: StepBuilder, arr: List[float], counters: Counters, low: int, high: int) -> Iterator[Step]:
    if low >= high:
        return

    # partition() is a generator too; its return value is the pivot index
    pi = yield from _partition(sb, arr, counters, low, high)

    sb.mark_sorted(pi)
    yield sb.build(f"Pivot {arr[pi]} is now sorted")

    yield from _sort_range(sb, arr, counters, low, pi - 1)
    yield from _sort_range(sb, arr, counters, pi + 1, high)


def _partition(sb: StepBuilder, arr: List[float], counters: Counters, low: int, high: int):
    pivot = arr[high]
    i = low - 1

    yield sb.build(f"Chosen pivot: {pivot} at index {high}", comparing=[high])

    for j in range(low, high):
        counters.comparisons += 1
        yield sb.build(f"Comparing {arr[j]} with pivot {pivot}", comparing=[j, high])

        if arr[j] < pivot:
            i += 1
            arr[i], arr[j] = arr[j], arr[i]
            counters.swaps += 1
            yield sb.build(
                f"Swapping {arr[i]} and {arr[j]} (smaller than pivot)",
                swapping=[i, j],
            )

    arr[i + 1], arr[high] = arr[high], arr[i + 1]
    counters.swaps += 1
    yield sb.build(
        f"Placing pivot {pivot} at correct position {i + 1}",
        swapping=[i + 1, high],
    )
    return i + 1
