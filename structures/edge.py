"""
edge.py — Graph Edge
====================
Connects two nodes by id.

Design decisions:
  - `source` and `target` are node-id strings, NOT GraphNode references.
    Edges only look nodes up; they never own them.
  - `weight` is optional.  BFS / DFS / shortest-path count hops and never
    read it; it is carried so imported graphs round-trip unchanged.
"""

from typing import Optional


class GraphEdge:
    """
    Attributes:
        source : ID of the tail node.
        target : ID of the head node.
        weight : Optional numeric cost.
    """

    __slots__ = ("source", "target", "weight")

    def __init__(self, source: str, target: str, weight: Optional[float] = None):
        self.source: str             = source
        self.target: str             = target
        self.weight: Optional[float] = weight

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        data = {"source": self.source, "target": self.target}
        if self.weight is not None:
            data["weight"] = self.weight
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "GraphEdge":
        return cls(
            source=str(data["source"]),
            target=str(data["target"]),
            weight=data.get("weight"),
        )

    def __repr__(self) -> str:
        return f"GraphEdge({self.source} - {self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, GraphEdge)
            and self.source == other.source
            and self.target == other.target
            and self.weight == other.weight
        )

    def __hash__(self) -> int:
        return hash((self.source, self.target, self.weight))
