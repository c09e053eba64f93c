"""
validation.py — Caller-side Input Checks
=========================================
Engines assume valid input.  Everything a user can type wrong is checked
here, BEFORE an engine runs, and rejected with InputValidationError.
"""

import re
from typing import Any, List, Sequence

from algorithms.errors import InputValidationError
from structures import GraphData

MIN_ARRAY_SIZE = 2
MAX_ARRAY_SIZE = 200

# leading integer, the way a browser's parseInt reads "12px" or " 7 "
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(token: str):
    """Leading integer of `token`, or None when there is none."""
    match = _LEADING_INT.match(token)
    return int(match.group(1)) if match else None


def parse_array_input(
    text: str,
    min_size: int = MIN_ARRAY_SIZE,
    max_size: int = MAX_ARRAY_SIZE,
) -> List[int]:
    """
    Parse comma-separated numbers ("5, 3, 8").  Tokens without a leading
    integer are skipped; the remaining count must be within bounds.
    """
    numbers = [n for n in (parse_int(tok) for tok in text.split(",")) if n is not None]
    return validate_array(numbers, min_size, max_size)


def validate_array(
    values: Sequence[Any],
    min_size: int = MIN_ARRAY_SIZE,
    max_size: int = MAX_ARRAY_SIZE,
) -> List[float]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise InputValidationError("Array input must be a list of numbers")
    for v in values:
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise InputValidationError(f"Not a number: {v!r}")
        if v != v or v in (float("inf"), float("-inf")):
            raise InputValidationError(f"Not a finite number: {v!r}")
    if not min_size <= len(values) <= max_size:
        raise InputValidationError(
            f"Please enter between {min_size} and {max_size} numbers (got {len(values)})"
        )
    return list(values)


def parse_value(raw: Any) -> int:
    """
    Single value for push / insert / search.  Accepts ints, integral floats
    and strings holding one of those ("17", " 8 ", "4.0"); "3.5" is rejected
    the same way 3.5 is.
    """
    if isinstance(raw, str):
        try:
            raw = float(raw)
        except ValueError:
            raise InputValidationError("Please enter a valid number") from None
    if isinstance(raw, bool):
        raise InputValidationError("Please enter a valid number")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    raise InputValidationError("Please enter a valid number")


def require_node(graph: GraphData, node_id: Any) -> str:
    node_id = str(node_id) if node_id is not None else ""
    if not graph.has_node(node_id):
        raise InputValidationError(f"Node {node_id!r} is not in the graph")
    return node_id
