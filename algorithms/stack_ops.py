"""
stack_ops.py — Stack Operations
================================
Pushes every input value (LIFO), then drains the stack from the top.
Each removal is two steps: peek the top, then the pop with the shorter
array.  No comparisons or swaps happen, so both counters stay at zero.
"""

from typing import Iterator, List, Sequence

from algorithms.step import Counters, Step, StepBuilder


PSEUDOCODE: List[str] = [
    "for v in values: stack.push(v)",
    "while stack is not empty:",
    "    top ← stack.peek()",
    "    stack.pop()",
]


def stack_operations(values: Sequence[float], counters: Counters) -> Iterator[Step]:
    stack: List[float] = []
    sb = StepBuilder(stack, counters)

    yield sb.build("Stack is initially empty")

    for val in values:
        stack.append(val)
        yield sb.build(
            f"Push({val}): Added {val} to the top of the stack",
            comparing=[len(stack) - 1],
        )

    while stack:
        val = stack[-1]
        yield sb.build(f"Peek: Top element is {val}", comparing=[len(stack) - 1])

        stack.pop()
        yield sb.build(f"Pop(): Removed {val} from the top")
