"""
queue_ops.py — Queue Operations
================================
Enqueues every input value at the rear, then drains the queue from the
front (FIFO).  Each removal is a "front" peek step followed by the
dequeue step.
"""

from collections import deque
from typing import Deque, Iterator, List, Sequence

from algorithms.step import Counters, Step, StepBuilder


PSEUDOCODE: List[str] = [
    "for v in values: queue.enqueue(v)",
    "while queue is not empty:",
    "    front ← queue.front()",
    "    queue.dequeue()",
]


def queue_operations(values: Sequence[float], counters: Counters) -> Iterator[Step]:
    queue: Deque[float] = deque()
    sb = StepBuilder(counters=counters)

    yield sb.build("Queue is initially empty", array=queue)

    for val in values:
        queue.append(val)
        yield sb.build(
            f"Enqueue({val}): Added {val} to the rear",
            array=queue,
            comparing=[len(queue) - 1],
        )

    while queue:
        val = queue[0]
        yield sb.build(f"Front: First element is {val}", array=queue, comparing=[0])

        queue.popleft()
        yield sb.build(f"Dequeue(): Removed {val} from the front", array=queue)
