"""
dispatcher.py — Trace Dispatcher
=================================
generate_steps() is the single-shot entry point for array algorithms and
the stack / queue walkthroughs:

    steps = generate_steps("Bubble Sort", [3, 1, 2])

It copies the input, brackets the engine's steps with an "Initial state"
step and a closing step, and returns the full list.  Tree and graph
operations are interactive and are called directly (algorithms.bst,
algorithms.traversal).
"""

import logging
from typing import List, Sequence

from algorithms.registry import get_algorithm
from algorithms.step import Counters, Step, StepBuilder

logger = logging.getLogger(__name__)


def generate_steps(algorithm, initial_array: Sequence[float]) -> List[Step]:
    info     = get_algorithm(algorithm)
    array    = list(initial_array)
    counters = Counters()
    sb       = StepBuilder(array, counters)

    steps: List[Step] = [sb.build("Initial state")]
    steps.extend(info.fn(array, counters))

    if info.kind.is_sorting:
        steps.append(sb.build("Sorting complete!", sorted=range(len(array))))
    else:
        steps.append(sb.build("All operations complete", array=[]))

    logger.debug(
        "%s on %d value(s): %d steps, %d comparisons, %d swaps",
        info.label, len(array), len(steps), counters.comparisons, counters.swaps,
    )
    return steps
