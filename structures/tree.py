"""
tree.py — Binary Tree Node & Layout
===================================
`TreeNode` is the unit the BST engine works on.  A node exclusively owns
its `left` / `right` children: nothing is shared between two trees, so a
structural change always happens on a fresh `clone()`.

`layout()` assigns canvas coordinates from scratch:

    root      → (width / 2, ROOT_Y), level 1
    children  → parent.x ∓ width / 2 ** (level + 1),  parent.y + LEVEL_HEIGHT
"""

from typing import Iterator, Optional
import uuid


ROOT_Y       = 50
LEVEL_HEIGHT = 60


class TreeNode:
    """
    Attributes:
        id     : Minted once at creation, preserved by clone(), never reused.
        value  : Key stored in the node.
        left   : Owned left child (values strictly smaller).
        right  : Owned right child (values greater or equal).
        x, y   : Layout coordinates, recomputed after every structural change.
    """

    __slots__ = ("id", "value", "left", "right", "x", "y")

    def __init__(
        self,
        value: float,
        x: float = 0.0,
        y: float = 0.0,
        node_id: Optional[str] = None,
    ):
        self.id:    str                  = node_id or str(uuid.uuid4())[:8]
        self.value: float                = value
        self.left:  Optional["TreeNode"] = None
        self.right: Optional["TreeNode"] = None
        self.x:     float                = x
        self.y:     float                = y

    def clone(self) -> "TreeNode":
        """Deep copy; ids and coordinates are kept."""
        copy = TreeNode(self.value, x=self.x, y=self.y, node_id=self.id)
        copy.left  = self.left.clone() if self.left else None
        copy.right = self.right.clone() if self.right else None
        return copy

    def iter_nodes(self) -> Iterator["TreeNode"]:
        """Pre-order walk over this subtree."""
        yield self
        if self.left:
            yield from self.left.iter_nodes()
        if self.right:
            yield from self.right.iter_nodes()

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":    self.id,
            "value": self.value,
            "left":  self.left.to_dict() if self.left else None,
            "right": self.right.to_dict() if self.right else None,
            "x":     self.x,
            "y":     self.y,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional["TreeNode"]:
        if not data:
            return None
        node = cls(data["value"], x=data.get("x", 0.0), y=data.get("y", 0.0), node_id=data.get("id"))
        node.left  = cls.from_dict(data.get("left"))
        node.right = cls.from_dict(data.get("right"))
        return node

    def __repr__(self) -> str:
        return f"TreeNode(id={self.id}, value={self.value}, pos=({self.x:.1f},{self.y:.1f}))"


def layout(node: Optional[TreeNode], x: float, y: float, level: int, width: float) -> None:
    """Position `node` at (x, y) and its subtree below it."""
    if node is None:
        return
    node.x = x
    node.y = y
    offset = width / (2 ** (level + 1))
    layout(node.left, x - offset, y + LEVEL_HEIGHT, level + 1, width)
    layout(node.right, x + offset, y + LEVEL_HEIGHT, level + 1, width)


def layout_tree(root: Optional[TreeNode], width: float = 800) -> None:
    layout(root, width / 2, ROOT_Y, 1, width)
