"""
bubble_sort.py — Bubble Sort
=============================
Generator-based bubble sort.  Yields a Step at every meaningful event:
  1. Compare two adjacent values
  2. Swap them (strict `>`, so equal keys never move past each other)
  3. End of a pass  →  the last unsorted index is now final
  4. A pass with zero swaps  →  everything left is final (early exit)
"""

import logging
from typing import Iterator, List

from algorithms.step import Counters, Step, StepBuilder

logger = logging.getLogger(__name__)


PSEUDOCODE: List[str] = [
    "for i in 0 .. n-2:",
    "    swapped ← false",
    "    for j in 0 .. n-i-2:",
    "        if a[j] > a[j+1]:",
    "            swap(a[j], a[j+1]); swapped ← true",
    "    if not swapped: break",
]


def bubble_sort(array: List[float], counters: Counters) -> Iterator[Step]:
    """Sorts `array` in place, yielding one Step per compare / swap / pass end."""
    sb = StepBuilder(array, counters)
    n  = len(array)

    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            counters.comparisons += 1
            yield sb.build(
                f"Comparing {array[j]} and {array[j + 1]}",
                comparing=[j, j + 1],
            )

            if array[j] > array[j + 1]:
                array[j], array[j + 1] = array[j + 1], array[j]
                swapped = True
                counters.swaps += 1
                yield sb.build(
                    f"Swapping {array[j + 1]} and {array[j]}",
                    swapping=[j, j + 1],
                )

        sb.mark_sorted(n - 1 - i)
        yield sb.build(f"Element {array[n - 1 - i]} is now in its sorted position")

        if not swapped:
            sb.mark_sorted(*range(n - 1 - i))
            logger.debug("bubble sort: early exit after pass %d", i + 1)
            yield sb.build("No swaps in this pass, so the remaining elements are already sorted")
            break
