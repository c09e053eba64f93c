"""
interactive.py — Live Stack / Queue Manipulation
=================================================
Unlike the full-trace engines, these helpers apply ONE operation at a
time to whatever step the user is looking at.  The new step branches off
`history[current_index]`: any steps after it (left over from a rewind)
are discarded, so the history always reads as one consistent timeline.

Rejected operations raise CapacityError and leave the history untouched.
"""

import logging
from typing import List, Sequence

from algorithms.errors import CapacityError, InputValidationError, UnknownAlgorithmError
from algorithms.kinds import AlgorithmKind
from algorithms.step import Step, StepBuilder

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10
DEMO_VALUES      = (10, 25, 5, 40)
DEMO_EXTRA_VALUE = 99


def _structure_name(kind: AlgorithmKind) -> str:
    if kind is AlgorithmKind.STACK_OPS:
        return "Stack"
    if kind is AlgorithmKind.QUEUE_OPS:
        return "Queue"
    raise UnknownAlgorithmError(f"{kind.label} is not a linear structure")


def initial_history(kind) -> List[Step]:
    kind = AlgorithmKind.parse(kind)
    return [StepBuilder().build(f"{_structure_name(kind)} is empty")]


def _branch(history: Sequence[Step], current_index: int) -> List[float]:
    if not 0 <= current_index < len(history):
        raise InputValidationError(
            f"Step index {current_index} is outside the history (0..{len(history) - 1})"
        )
    return list(history[current_index].array)


def push_value(
    history: Sequence[Step],
    current_index: int,
    kind,
    value: float,
    capacity: int = DEFAULT_CAPACITY,
) -> List[Step]:
    """Push (stack) / enqueue (queue) `value`; returns the truncated history plus one step."""
    kind  = AlgorithmKind.parse(kind)
    name  = _structure_name(kind)
    array = _branch(history, current_index)

    if len(array) >= capacity:
        raise CapacityError(f"Max capacity reached ({capacity} elements)")

    array.append(value)
    explanation = f"Pushed {value} onto the stack" if kind is AlgorithmKind.STACK_OPS else f"Enqueued {value}"
    logger.debug("%s push %s -> %s", name, value, array)
    return list(history[:current_index + 1]) + [StepBuilder(array).build(explanation)]


def pop_value(history: Sequence[Step], current_index: int, kind) -> List[Step]:
    """Pop (stack, from the tail) / dequeue (queue, from the head)."""
    kind  = AlgorithmKind.parse(kind)
    name  = _structure_name(kind)
    array = _branch(history, current_index)

    if not array:
        raise CapacityError(f"{name} is empty!")

    if kind is AlgorithmKind.STACK_OPS:
        value = array.pop()
        explanation = f"Popped {value} from the stack"
    else:
        value = array.pop(0)
        explanation = f"Dequeued {value}"
    logger.debug("%s pop %s -> %s", name, value, array)
    return list(history[:current_index + 1]) + [StepBuilder(array).build(explanation)]


def demo_operations(kind) -> List[Step]:
    """Scripted walkthrough: push four values, remove one, push one, drain."""
    kind     = AlgorithmKind.parse(kind)
    is_stack = kind is AlgorithmKind.STACK_OPS
    _structure_name(kind)  # rejects sorting kinds

    current: List[float] = []
    sb = StepBuilder(current)
    steps = [sb.build("Starting Demo...")]

    for val in DEMO_VALUES:
        current.append(val)
        steps.append(sb.build(f"Push {val}" if is_stack else f"Enqueue {val}"))

    if is_stack:
        val = current.pop()
        steps.append(sb.build(f"Pop {val} (LIFO - Last In First Out)"))
    else:
        val = current.pop(0)
        steps.append(sb.build(f"Dequeue {val} (FIFO - First In First Out)"))

    current.append(DEMO_EXTRA_VALUE)
    steps.append(sb.build(f"Push {DEMO_EXTRA_VALUE}" if is_stack else f"Enqueue {DEMO_EXTRA_VALUE}"))

    while current:
        if is_stack:
            val = current.pop()
            steps.append(sb.build(f"Pop {val}"))
        else:
            val = current.pop(0)
            steps.append(sb.build(f"Dequeue {val}"))

    steps.append(sb.build("Demo Complete"))
    return steps
