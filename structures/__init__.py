"""
structures/
-----------
Core data layer.  Public API:

    from structures import GraphData, GraphNode, GraphEdge
    from structures import TreeNode, layout_tree
"""

from structures.node  import GraphNode
from structures.edge  import GraphEdge
from structures.graph import GraphData
from structures.tree  import TreeNode, layout, layout_tree

__all__ = [
    "GraphNode",
    "GraphEdge",
    "GraphData",
    "TreeNode", "layout", "layout_tree",
]
