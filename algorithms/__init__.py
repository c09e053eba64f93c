"""
algorithms/ — Step-Trace Engines
=================================
Public API:

    from algorithms import generate_steps, AlgorithmKind
    from algorithms import insert_node, search_tree, traverse_tree
    from algorithms import bfs, dfs, find_shortest_path
    from algorithms import push_value, pop_value, demo_operations

Array engines are generators `fn(array, counters) -> Iterator[Step]`
looked up through REGISTRY; tree and graph engines append to a
caller-supplied step list.
"""

from algorithms.errors import (
    CapacityError,
    InputValidationError,
    TraceError,
    UnknownAlgorithmError,
)
from algorithms.kinds import AlgorithmKind
from algorithms.step import Counters, Step, StepBuilder
from algorithms.registry import (
    REGISTRY,
    STRUCTURE_INFO,
    AlgoInfo,
    InfoCard,
    find_algorithm,
    get_algorithm,
    list_algorithms,
)
from algorithms.dispatcher import generate_steps
from algorithms.interactive import (
    DEFAULT_CAPACITY,
    demo_operations,
    initial_history,
    pop_value,
    push_value,
)
from algorithms.bst import TraversalOrder, insert_node, search_tree, traverse_tree
from algorithms.traversal import bfs, dfs, find_shortest_path

__all__ = [
    "AlgoInfo",
    "AlgorithmKind",
    "CapacityError",
    "Counters",
    "DEFAULT_CAPACITY",
    "InfoCard",
    "InputValidationError",
    "REGISTRY",
    "STRUCTURE_INFO",
    "Step",
    "StepBuilder",
    "TraceError",
    "TraversalOrder",
    "UnknownAlgorithmError",
    "bfs",
    "demo_operations",
    "dfs",
    "find_algorithm",
    "find_shortest_path",
    "generate_steps",
    "get_algorithm",
    "initial_history",
    "insert_node",
    "list_algorithms",
    "pop_value",
    "push_value",
    "search_tree",
    "traverse_tree",
]
