"""
step.py — Algorithm Step Snapshot
==================================
Every engine produces Step objects.  A Step is a frozen-in-time picture of
everything the visualizer needs to render one frame:

    • The full array (a copy, never the engine's working list)
    • Which indices are being compared / written right now
    • Which indices are already in their final position
    • Cumulative comparison & swap counters
    • A plain-English explanation of the action
    • For trees / graphs: the tree snapshot, the graph, visited ids and
      the node being processed

Design decisions:
  - Step is a frozen dataclass.  The engine is the only writer; the
    stepper / recorder / API are pure readers.
  - StepBuilder.build() copies every mutable field, so mutating the
    working array (or the tree) after a build never leaks into an
    already-emitted Step.
  - `graph` is shared by reference: traversals never mutate it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from structures import GraphData, TreeNode


# ---------------------------------------------------------------------------
# Primitive operation log
# ---------------------------------------------------------------------------
@dataclass
class Counters:
    """Running tally threaded through one trace generation."""

    comparisons: int = 0
    swaps:       int = 0     # writes: swaps, shifts and merge placements


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        array        : Snapshot of the values at this instant.
        comparing    : 0–2 indices being compared (or highlighted for peek).
        swapping     : Indices being written / exchanged.
        sorted       : Indices known to be in their final position.
        explanation  : Human-readable description, never empty.
        comparisons  : Cumulative comparisons so far.
        swaps        : Cumulative writes so far.
        tree         : Deep copy of the BST root (tree operations only).
        graph        : The graph being traversed (graph operations only).
        visited      : Ordered visited node ids (tree / graph operations).
        current      : Id of the node being processed.
    """

    array:        List[float]          = field(default_factory=list)
    comparing:    List[int]            = field(default_factory=list)
    swapping:     List[int]            = field(default_factory=list)
    sorted:       List[int]            = field(default_factory=list)
    explanation:  str                  = ""
    comparisons:  int                  = 0
    swaps:        int                  = 0
    tree:         Optional[TreeNode]   = None
    graph:        Optional[GraphData]  = None
    visited:      Optional[List[str]]  = None
    current:      Optional[str]        = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "array":       list(self.array),
            "comparing":   list(self.comparing),
            "swapping":    list(self.swapping),
            "sorted":      list(self.sorted),
            "explanation": self.explanation,
            "comparisons": self.comparisons,
            "swaps":       self.swaps,
            "tree":        self.tree.to_dict() if self.tree is not None else None,
            "graph":       self.graph.to_dict() if self.graph is not None else None,
            "visited":     list(self.visited) if self.visited is not None else None,
            "current":     self.current,
        }


# ---------------------------------------------------------------------------
# Convenience builder so engines don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Mutable scratch-pad that engines use to construct Steps cleanly.

    Usage inside an engine:
        sb = StepBuilder(array, counters)
        counters.comparisons += 1
        yield sb.build(f"Comparing {array[0]} and {array[1]}", comparing=[0, 1])
        sb.mark_sorted(len(array) - 1)
    """

    def __init__(self, array: Optional[List[float]] = None, counters: Optional[Counters] = None):
        self.array:    List[float] = array if array is not None else []
        self.counters: Counters    = counters if counters is not None else Counters()
        self.reset()

    def reset(self):
        self.sorted:  List[int]           = []
        self.tree:    Optional[TreeNode]  = None
        self.graph:   Optional[GraphData] = None
        self.visited: Optional[List[str]] = None

    # -- helpers --
    def mark_sorted(self, *indices: int):
        for idx in indices:
            if idx not in self.sorted:
                self.sorted.append(idx)

    def set_sorted_prefix(self, length: int):
        """Insertion / selection style: indices [0, length) form the sorted region."""
        self.sorted = list(range(length))

    def build(
        self,
        explanation: str,
        comparing: Sequence[int] = (),
        swapping: Sequence[int] = (),
        sorted: Optional[Sequence[int]] = None,
        array: Optional[Sequence[float]] = None,
        current: Optional[str] = None,
        visited: Optional[Sequence[str]] = None,
    ) -> Step:
        if visited is None:
            visited = self.visited
        return Step(
            array=list(self.array if array is None else array),
            comparing=list(comparing),
            swapping=list(swapping),
            sorted=list(self.sorted if sorted is None else sorted),
            explanation=explanation,
            comparisons=self.counters.comparisons,
            swaps=self.counters.swaps,
            tree=self.tree.clone() if self.tree is not None else None,
            graph=self.graph,
            visited=list(visited) if visited is not None else None,
            current=current,
        )
