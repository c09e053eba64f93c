"""
graph.py — Graph Container
==========================
Single source of truth for a traversal's graph.  The traversal engines
read from this object and never write to it; visited state lives in the
engines, not on the nodes.

Responsibilities:
  1. Building nodes & edges                 (add / create / get)
  2. Adjacency queries                      (neighbours, has_node, …)
  3. Import from adjacency-list text        (text → graph)
  4. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Nodes stored in an insertion-ordered dict keyed by id for O(1) lookup.
  - Edges kept as an ordered list; a separate adjacency dict
    `_adj[node_id] → [neighbour_id, …]` is maintained incrementally in
    edge order, so neighbour queries are O(degree) and visit neighbours in
    the same order the edges were declared.
  - `is_directed` is a graph-level flag; undirected edges are indexed from
    both ends.
"""

import math
from typing import Dict, List, Optional, Tuple

from structures.node import GraphNode
from structures.edge import GraphEdge


class GraphData:
    """
    Attributes:
        nodes       : {node_id: GraphNode}
        edges       : [GraphEdge, …] in declaration order
        is_directed : bool – graph-level directedness
        _adj        : {node_id: [neighbour_id, …]}
    """

    def __init__(self, is_directed: bool = False):
        self.nodes:       Dict[str, GraphNode] = {}
        self.edges:       List[GraphEdge]      = []
        self.is_directed: bool                 = is_directed
        self._adj:        Dict[str, List[str]] = {}

    # ==================================================================
    # NODES
    # ==================================================================
    def add_node(self, node: GraphNode) -> GraphNode:
        self.nodes[node.id] = node
        self._adj.setdefault(node.id, [])
        return node

    def create_node(self, value: float, x: float = 0.0, y: float = 0.0, node_id: Optional[str] = None) -> GraphNode:
        """Convenience: create + add in one call."""
        return self.add_node(GraphNode(value=value, x=x, y=y, node_id=node_id))

    def has_node(self, node_id: str) -> bool:
        return node_id in self.nodes

    def node_value(self, node_id: str):
        """Display value of a node, falling back to its id."""
        node = self.nodes.get(node_id)
        return node.value if node is not None else node_id

    # ==================================================================
    # EDGES
    # ==================================================================
    def add_edge(self, edge: GraphEdge) -> GraphEdge:
        self.edges.append(edge)
        self._adj.setdefault(edge.source, []).append(edge.target)
        if not self.is_directed and edge.source != edge.target:
            self._adj.setdefault(edge.target, []).append(edge.source)
        return edge

    def create_edge(self, source: str, target: str, weight: Optional[float] = None) -> GraphEdge:
        return self.add_edge(GraphEdge(source=source, target=target, weight=weight))

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: str) -> List[str]:
        """Neighbour ids reachable from node_id, in edge declaration order."""
        return list(self._adj.get(node_id, []))

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes":      [n.to_dict() for n in self.nodes.values()],
            "edges":      [e.to_dict() for e in self.edges],
            "isDirected": self.is_directed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GraphData":
        g = cls(is_directed=bool(data.get("isDirected", False)))
        for nd in data.get("nodes", []):
            g.add_node(GraphNode.from_dict(nd))
        for ed in data.get("edges", []):
            g.add_edge(GraphEdge.from_dict(ed))
        return g

    # ---------- Import from Adjacency List (text) ----------
    @classmethod
    def from_adjacency_list(
        cls,
        text: str,
        is_directed: bool = False,
        canvas_w: float = 800,
        canvas_h: float = 500,
    ) -> "GraphData":
        """
        Parse a simple text adjacency list.

        Supported formats (one node per line):
            1: 2 3 4            → 1 connects to 2, 3, 4
            1: 2(3) 3(7)        → optional weights
            1 -> 2, 3           → alternate arrow syntax

        Node ids are the tokens; numeric tokens also become the node value.
        Lines with no source label and tokens with no target label (e.g.
        "(3)") are skipped.  Nodes are auto-laid-out in a circle.
        """
        adjacency: Dict[str, List[Tuple[str, Optional[float]]]] = {}

        for line in text.strip().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if ":" in line:
                parts = line.split(":", 1)
            elif "→" in line:
                parts = line.split("→", 1)
            elif "->" in line:
                parts = line.split("->", 1)
            else:
                parts = [line]

            src = parts[0].strip()
            if not src:
                continue
            adjacency.setdefault(src, [])

            if len(parts) < 2 or not parts[1].strip():
                continue

            for token in parts[1].replace(",", " ").split():
                if "(" in token and token.endswith(")"):
                    tgt, w_str = token[:-1].split("(", 1)
                    try:
                        weight: Optional[float] = float(w_str)
                    except ValueError:
                        weight = None
                else:
                    tgt, weight = token, None
                if not tgt:
                    continue
                adjacency.setdefault(tgt, [])
                adjacency[src].append((tgt, weight))

        g = cls(is_directed=is_directed)
        labels = list(adjacency.keys())
        n = len(labels)
        if n == 0:
            return g

        cx, cy = canvas_w / 2, canvas_h / 2
        radius = min(canvas_w, canvas_h) * 0.35
        for i, label in enumerate(labels):
            angle = 2 * math.pi * i / n
            g.create_node(
                value=_as_number(label),
                x=round(cx + radius * math.cos(angle), 2),
                y=round(cy + radius * math.sin(angle), 2),
                node_id=label,
            )

        # deduplicate undirected pairs
        seen: set = set()
        for src, targets in adjacency.items():
            for tgt, weight in targets:
                key = frozenset([src, tgt]) if not is_directed else (src, tgt)
                if key in seen:
                    continue
                seen.add(key)
                g.create_edge(src, tgt, weight=weight)

        return g

    def __repr__(self) -> str:
        return f"GraphData(nodes={self.node_count()}, edges={self.edge_count()}, directed={self.is_directed})"


def _as_number(label: str):
    try:
        return int(label)
    except ValueError:
        try:
            return float(label)
        except ValueError:
            return label

