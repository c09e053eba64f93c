from typing import Optional
import uuid


# ---------------------------------------------------------------------------
# GraphNode
# ---------------------------------------------------------------------------
class GraphNode:
    """
    Immutable identity (id), display value and canvas position.

    Attributes:
        id     : Unique identifier (uuid string by default, or user-supplied).
        value  : Number shown inside the node on the canvas.
        x, y   : Canvas coordinates (pixels).
    """

    __slots__ = ("id", "value", "x", "y")

    def __init__(
        self,
        value: float = 0,
        x: float = 0.0,
        y: float = 0.0,
        node_id: Optional[str] = None,
    ):
        self.id:    str   = node_id if node_id is not None else str(uuid.uuid4())[:8]
        self.value: float = value
        self.x:     float = x
        self.y:     float = y

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":    self.id,
            "value": self.value,
            "x":     self.x,
            "y":     self.y,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GraphNode":
        return cls(
            value=data.get("value", 0),
            x=data.get("x", 0.0),
            y=data.get("y", 0.0),
            node_id=str(data["id"]),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"GraphNode(id={self.id}, value={self.value}, pos=({self.x:.1f},{self.y:.1f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, GraphNode) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
