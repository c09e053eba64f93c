from enum import Enum

from algorithms.errors import UnknownAlgorithmError


class AlgorithmKind(Enum):
    """Closed set of algorithms the trace dispatcher knows; value = display label."""

    BUBBLE_SORT    = "Bubble Sort"
    MERGE_SORT     = "Merge Sort"
    QUICK_SORT     = "Quick Sort"
    INSERTION_SORT = "Insertion Sort"
    SELECTION_SORT = "Selection Sort"
    STACK_OPS      = "Stack Operations"
    QUEUE_OPS      = "Queue Operations"

    @property
    def label(self) -> str:
        return self.value

    @property
    def is_sorting(self) -> bool:
        return self not in (AlgorithmKind.STACK_OPS, AlgorithmKind.QUEUE_OPS)

    @classmethod
    def parse(cls, selector) -> "AlgorithmKind":
        """Accept a member, its label ("Bubble Sort") or its name ("BUBBLE_SORT")."""
        if isinstance(selector, cls):
            return selector
        if isinstance(selector, str):
            for kind in cls:
                if selector in (kind.value, kind.name):
                    return kind
        raise UnknownAlgorithmError(f"Unknown algorithm: {selector!r}")
