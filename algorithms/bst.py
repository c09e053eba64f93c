"""
bst.py — Binary Search Tree Operations
=======================================
Interactive tree engine.  Each call appends Steps to a caller-owned list
and returns its result directly:

    steps: List[Step] = []
    root = insert_node(None, 8, steps)
    root = insert_node(root, 3, steps)
    found = search_tree(root, 3, steps)
    traverse_tree(root, "inorder", steps)

Insert never touches the tree it is given: it works on a clone, so the
previous root (and every Step that captured it) stays valid.  Every Step
also carries its own deep copy of the tree.

Ordering policy: `value < node.value` goes left, anything else (including
duplicates) goes right.
"""

import logging
from enum import Enum
from typing import List, Optional

from algorithms.errors import InputValidationError
from algorithms.step import Counters, Step, StepBuilder
from structures.tree import ROOT_Y, TreeNode, layout_tree

logger = logging.getLogger(__name__)


PSEUDOCODE: List[str] = [
    "def insert(node, v):",
    "    if node is null: return Node(v)",
    "    if v < node.value: node.left ← insert(node.left, v)",
    "    else: node.right ← insert(node.right, v)",
    "def search(node, v):",
    "    while node: if v = node.value: found; node ← v < node.value ? left : right",
]


class TraversalOrder(str, Enum):
    INORDER   = "inorder"     # left, self, right
    PREORDER  = "preorder"    # self, left, right
    POSTORDER = "postorder"   # left, right, self

    @classmethod
    def parse(cls, order) -> "TraversalOrder":
        try:
            return cls(order)
        except ValueError:
            raise InputValidationError(
                f"Unknown traversal order {order!r}; expected inorder, preorder or postorder"
            ) from None


# ---------------------------------------------------------------------------
# Insert
# ---------------------------------------------------------------------------
def insert_node(
    root: Optional[TreeNode],
    value: float,
    steps: List[Step],
    width: float = 800,
    counters: Optional[Counters] = None,
) -> TreeNode:
    """Insert `value` and return the NEW root (a clone when root was not empty)."""
    sb = StepBuilder(counters=counters)

    if root is None:
        new_node = TreeNode(value, x=width / 2, y=ROOT_Y)
        sb.tree = new_node
        steps.append(sb.build(f"Created root node with value {value}", current=new_node.id))
        return new_node

    new_root = root.clone()
    layout_tree(new_root, width)
    sb.tree = new_root

    current = new_root
    steps.append(sb.build(f"Inserting {value}... Starting at root", current=current.id))

    while True:
        sb.counters.comparisons += 1
        if value < current.value:
            child = current.left
            steps.append(sb.build(
                f"{value} < {current.value}, going left",
                current=child.id if child else current.id,
            ))
            if child is None:
                current.left = TreeNode(value)
                break
        else:
            child = current.right
            steps.append(sb.build(
                f"{value} >= {current.value}, going right",
                current=child.id if child else current.id,
            ))
            if child is None:
                current.right = TreeNode(value)
                break
        current = child

    layout_tree(new_root, width)
    steps.append(sb.build(f"Inserted {value}"))
    logger.debug("bst insert %s: %d nodes", value, sum(1 for _ in new_root.iter_nodes()))
    return new_root


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------
def search_tree(
    root: Optional[TreeNode],
    value: float,
    steps: List[Step],
    counters: Optional[Counters] = None,
) -> bool:
    sb = StepBuilder(counters=counters)
    sb.tree = root

    current = root
    steps.append(sb.build(f"Searching for {value}...", current=current.id if current else None))

    while current is not None:
        steps.append(sb.build(f"Checking {current.value}...", current=current.id))
        sb.counters.comparisons += 1

        if value == current.value:
            steps.append(sb.build(f"Found {value}!", current=current.id, visited=[current.id]))
            return True

        if value < current.value:
            nxt = current.left
            steps.append(sb.build(
                f"{value} < {current.value}, going left",
                current=nxt.id if nxt else current.id,
            ))
        else:
            nxt = current.right
            steps.append(sb.build(
                f"{value} > {current.value}, going right",
                current=nxt.id if nxt else current.id,
            ))
        current = nxt

    steps.append(sb.build(f"{value} not found in tree"))
    return False


# ---------------------------------------------------------------------------
# Traverse
# ---------------------------------------------------------------------------
def traverse_tree(root: Optional[TreeNode], order, steps: List[Step]) -> List[str]:
    """Depth-first walk in the given order; returns the visited ids."""
    order = TraversalOrder.parse(order)
    label = order.value.capitalize()

    sb = StepBuilder()
    sb.tree = root
    visited: List[str] = []

    def visit(node: TreeNode):
        visited.append(node.id)
        steps.append(sb.build(f"Visiting {node.value} ({label})", current=node.id, visited=visited))

    def walk(node: Optional[TreeNode]):
        if node is None:
            return
        if order is TraversalOrder.PREORDER:
            visit(node)
        walk(node.left)
        if order is TraversalOrder.INORDER:
            visit(node)
        walk(node.right)
        if order is TraversalOrder.POSTORDER:
            visit(node)

    steps.append(sb.build(f"Starting {order.value} traversal", visited=[]))
    walk(root)
    steps.append(sb.build(f"{order.value} traversal complete", visited=visited))
    return visited
