"""
traversal.py — Graph Traversals
================================
BFS, DFS and hop-count shortest path over a static GraphData.

The graph is never mutated: visited state lives in local sets / lists and
every Step shares the same graph reference.  Neighbours come back in edge
declaration order; undirected graphs see each edge from both ends.

Start / end ids are validated by the caller (engine.validation.require_node)
before any of these run.
"""

import logging
from collections import deque
from typing import Deque, List, Optional, Set, Tuple

from algorithms.step import Step, StepBuilder
from structures import GraphData

logger = logging.getLogger(__name__)


PSEUDOCODE_BFS: List[str] = [
    "queue ← [start]; visited ← {start}",
    "while queue is not empty:",
    "    node ← queue.dequeue()",
    "    for n in adj(node):",
    "        if n not visited: visited.add(n); queue.enqueue(n)",
]

PSEUDOCODE_DFS: List[str] = [
    "def dfs(node):",
    "    visited.add(node)",
    "    for n in adj(node):",
    "        if n not visited: dfs(n)",
]


def _builder(graph: GraphData) -> StepBuilder:
    sb = StepBuilder()
    sb.graph = graph
    return sb


# ---------------------------------------------------------------------------
# BFS
# ---------------------------------------------------------------------------
def bfs(graph: GraphData, start_id: str, steps: List[Step]) -> List[str]:
    """Level-order traversal; returns the visit order."""
    sb      = _builder(graph)
    visited: Set[str]    = {start_id}
    order:   List[str]   = [start_id]
    queue:   Deque[str]  = deque([start_id])

    steps.append(sb.build(
        f"Starting BFS from node {graph.node_value(start_id)}",
        current=start_id,
        visited=order,
    ))

    while queue:
        node_id = queue.popleft()
        steps.append(sb.build(
            f"Visiting node {graph.node_value(node_id)}",
            current=node_id,
            visited=order,
        ))

        for nbr in graph.neighbours(node_id):
            if nbr in visited:
                continue
            visited.add(nbr)
            order.append(nbr)
            queue.append(nbr)
            steps.append(sb.build(
                f"Found unvisited neighbor {graph.node_value(nbr)}",
                current=nbr,
                visited=order,
            ))

    steps.append(sb.build("BFS Traversal Complete", visited=order))
    logger.debug("bfs from %s visited %d node(s)", start_id, len(order))
    return order


# ---------------------------------------------------------------------------
# DFS
# ---------------------------------------------------------------------------
def dfs(graph: GraphData, start_id: str, steps: List[Step]) -> List[str]:
    """Recursive pre-order traversal; returns the visit order."""
    sb      = _builder(graph)
    visited: Set[str]  = set()
    order:   List[str] = []

    def visit(node_id: str):
        visited.add(node_id)
        order.append(node_id)
        steps.append(sb.build(
            f"Visiting node {graph.node_value(node_id)}",
            current=node_id,
            visited=order,
        ))
        for nbr in graph.neighbours(node_id):
            if nbr not in visited:
                visit(nbr)

    steps.append(sb.build(
        f"Starting DFS from node {graph.node_value(start_id)}",
        current=start_id,
        visited=[],
    ))
    visit(start_id)
    steps.append(sb.build("DFS Traversal Complete", visited=order))
    logger.debug("dfs from %s visited %d node(s)", start_id, len(order))
    return order


# ---------------------------------------------------------------------------
# Shortest path (hop count)
# ---------------------------------------------------------------------------
def find_shortest_path(
    graph: GraphData,
    start_id: str,
    end_id: str,
    steps: List[Step],
) -> Optional[List[str]]:
    """
    BFS where every queue entry carries the path that reached it.

    On success the final Step's `visited` is the path itself (so the UI can
    highlight it) and the path is returned; otherwise the final Step lists
    everything visited and None is returned.
    """
    sb      = _builder(graph)
    visited: Set[str]   = {start_id}
    order:   List[str]  = [start_id]
    queue:   Deque[Tuple[str, List[str]]] = deque([(start_id, [start_id])])

    steps.append(sb.build(
        f"Finding shortest path from {graph.node_value(start_id)} to {graph.node_value(end_id)}",
        current=start_id,
        visited=order,
    ))

    while queue:
        node_id, path = queue.popleft()
        steps.append(sb.build(
            f"Visiting node {graph.node_value(node_id)}",
            current=node_id,
            visited=order,
        ))

        if node_id == end_id:
            steps.append(sb.build(
                f"Shortest path found! Length = {len(path) - 1}: "
                + " → ".join(str(graph.node_value(n)) for n in path),
                current=node_id,
                visited=path,
            ))
            return path

        for nbr in graph.neighbours(node_id):
            if nbr in visited:
                continue
            visited.add(nbr)
            order.append(nbr)
            queue.append((nbr, path + [nbr]))
            steps.append(sb.build(
                f"Found unvisited neighbor {graph.node_value(nbr)}",
                current=nbr,
                visited=order,
            ))

    steps.append(sb.build(
        f"No path found from {graph.node_value(start_id)} to {graph.node_value(end_id)}",
        visited=order,
    ))
    return None
