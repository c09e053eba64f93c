"""
registry.py — Algorithm Registry
=================================
Single source of truth for every array / linear-structure algorithm the
dispatcher knows about, plus the info cards for the interactive tree and
graph panels.

REGISTRY maps the closed AlgorithmKind enumeration to an AlgoInfo card:
    {
        AlgorithmKind.BUBBLE_SORT: AlgoInfo(kind, fn, pseudocode, complexities, …),
        …
    }

STRUCTURE_INFO holds InfoCards that are shown but never dispatched
(BST, graph traversals), so AlgorithmKind stays closed.

Reference implementations in C / C++ / Python / Java live next to this
module in code_samples/<sample_dir>/<language>.txt and are read on demand.

Adding an algorithm is: write the generator, add one AlgorithmKind member,
add one entry here.  `test_registry_is_exhaustive` fails if a member is
left without an entry.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Callable, Dict, List, Optional

from algorithms.kinds import AlgorithmKind
from algorithms.bubble_sort    import bubble_sort      as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.insertion_sort import insertion_sort   as _insertion, PSEUDOCODE as _insertion_pc
from algorithms.selection_sort import selection_sort   as _selection, PSEUDOCODE as _selection_pc
from algorithms.merge_sort     import merge_sort       as _merge,     PSEUDOCODE as _merge_pc
from algorithms.quick_sort     import quick_sort       as _quick,     PSEUDOCODE as _quick_pc
from algorithms.stack_ops      import stack_operations as _stack,     PSEUDOCODE as _stack_pc
from algorithms.queue_ops      import queue_operations as _queue,     PSEUDOCODE as _queue_pc
from algorithms.bst            import PSEUDOCODE as _bst_pc
from algorithms.traversal      import PSEUDOCODE_BFS, PSEUDOCODE_DFS

CODE_SAMPLES_DIR = Path(__file__).with_name("code_samples")
LANGUAGES = ("c", "cpp", "python", "java")


@lru_cache(maxsize=None)
def _read_samples(sample_dir: str) -> Dict[str, str]:
    folder = CODE_SAMPLES_DIR / sample_dir
    samples = {}
    for lang in LANGUAGES:
        path = folder / f"{lang}.txt"
        if path.is_file():
            samples[lang] = path.read_text(encoding="utf-8").rstrip("\n")
    return samples


# ---------------------------------------------------------------------------
# InfoCard — what the info panel renders for one topic
# ---------------------------------------------------------------------------
@dataclass
class InfoCard:
    key:              str       = ""
    name:             str       = ""
    pseudocode:       List[str] = field(default_factory=list)
    description:      str       = ""
    complexity_time:  str       = ""
    complexity_space: str       = ""
    best_case:        str       = ""
    average_case:     str       = ""
    worst_case:       str       = ""
    stable:           bool      = False
    in_place:         bool      = False
    how_it_works:     List[str] = field(default_factory=list)
    advantages:       List[str] = field(default_factory=list)
    disadvantages:    List[str] = field(default_factory=list)
    use_cases:        List[str] = field(default_factory=list)
    sample_dir:       str       = ""     # code_samples/<sample_dir>/

    @property
    def label(self) -> str:
        return self.name

    @property
    def code_implementations(self) -> Dict[str, str]:
        """{language: source}; empty when the card ships no samples."""
        return dict(_read_samples(self.sample_dir)) if self.sample_dir else {}

    def to_dict(self) -> dict:
        return {
            "key":                 self.key,
            "label":               self.label,
            "description":         self.description,
            "timeComplexity":      self.complexity_time,
            "spaceComplexity":     self.complexity_space,
            "bestCase":            self.best_case,
            "averageCase":         self.average_case,
            "worstCase":           self.worst_case,
            "stable":              self.stable,
            "inPlace":             self.in_place,
            "howItWorks":          list(self.how_it_works),
            "advantages":          list(self.advantages),
            "disadvantages":       list(self.disadvantages),
            "useCases":            list(self.use_cases),
            "pseudocode":          list(self.pseudocode),
            "codeImplementations": self.code_implementations,
        }


# ---------------------------------------------------------------------------
# AlgoInfo — an InfoCard the dispatcher can run
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo(InfoCard):
    kind: Optional[AlgorithmKind] = None
    fn:   Optional[Callable]      = None     # generator(array, counters) -> Iterator[Step]

    def __post_init__(self):
        if self.kind is None or self.fn is None:
            raise TypeError("AlgoInfo needs both kind and fn")
        self.key  = self.kind.name
        self.name = self.kind.label
        self.sample_dir = self.sample_dir or self.kind.name.lower()

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["sorting"] = self.kind.is_sorting
        return data


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[AlgorithmKind, AlgoInfo] = {

    AlgorithmKind.BUBBLE_SORT: AlgoInfo(
        kind=AlgorithmKind.BUBBLE_SORT, fn=_bubble, pseudocode=_bubble_pc,
        description="Simple but slow. Compares adjacent elements and swaps if needed.",
        complexity_time="O(n²)", complexity_space="O(1)",
        best_case="O(n)", average_case="O(n²)", worst_case="O(n²)",
        stable=True, in_place=True,
        how_it_works=[
            "Start at the beginning of the array",
            "Compare each pair of adjacent elements",
            "Swap them if they are in the wrong order",
            "Repeat until no more swaps are needed",
            "Each pass moves the largest unsorted element to its final position",
        ],
        advantages=[
            "Simple to understand and implement",
            "No extra memory required (in-place)",
            "Stable sorting algorithm",
            "Adaptive - efficient for nearly sorted data",
        ],
        disadvantages=[
            "Very slow for large datasets",
            "Poor time complexity O(n²)",
            "Not suitable for production use with large data",
        ],
        use_cases=[
            "Educational purposes and learning",
            "Small datasets (< 10 elements)",
            "Nearly sorted data",
            "When simplicity is more important than efficiency",
        ],
    ),

    AlgorithmKind.MERGE_SORT: AlgoInfo(
        kind=AlgorithmKind.MERGE_SORT, fn=_merge, pseudocode=_merge_pc,
        description="Divide-and-conquer approach. Recursively divides array into halves.",
        complexity_time="O(n log n)", complexity_space="O(n)",
        best_case="O(n log n)", average_case="O(n log n)", worst_case="O(n log n)",
        stable=True, in_place=False,
        how_it_works=[
            "Divide the array into two halves",
            "Recursively sort each half",
            "Merge the two sorted halves back together",
            "Continue until the entire array is sorted",
            "Uses a temporary array for merging",
        ],
        advantages=[
            "Guaranteed O(n log n) time complexity",
            "Stable sorting algorithm",
            "Predictable performance",
            "Excellent for linked lists",
            "Good for external sorting (large datasets)",
        ],
        disadvantages=[
            "Requires O(n) extra space",
            "Not in-place",
            "Slower than quicksort in practice for arrays",
            "Recursive overhead",
        ],
        use_cases=[
            "When stable sorting is required",
            "Sorting linked lists",
            "External sorting (disk-based data)",
            "When worst-case O(n log n) is needed",
            "Parallel processing scenarios",
        ],
    ),

    AlgorithmKind.QUICK_SORT: AlgoInfo(
        kind=AlgorithmKind.QUICK_SORT, fn=_quick, pseudocode=_quick_pc,
        description="Uses a pivot element to partition the array into smaller and larger elements.",
        complexity_time="O(n log n) avg", complexity_space="O(log n)",
        best_case="O(n log n)", average_case="O(n log n)", worst_case="O(n²)",
        stable=False, in_place=True,
        how_it_works=[
            "Choose a pivot element from the array",
            "Partition: elements < pivot go before it, the rest after",
            "Recursively apply quicksort to the sub-arrays",
            "Continue until sub-arrays have 0 or 1 element",
            "No merge step needed - sorting happens in-place",
        ],
        advantages=[
            "Very fast in practice - O(n log n) average",
            "In-place sorting (low memory usage)",
            "Cache-friendly due to locality of reference",
            "Widely used in production systems",
            "Can be parallelized efficiently",
        ],
        disadvantages=[
            "Worst case O(n²) for already sorted data",
            "Not stable (relative order may change)",
            "Recursive implementation uses stack space",
            "Performance depends on pivot selection",
        ],
        use_cases=[
            "General-purpose sorting in most languages",
            "Large datasets where average case matters",
            "When memory is limited (in-place)",
            "Systems programming and databases",
            "When stability is not required",
        ],
    ),

    AlgorithmKind.INSERTION_SORT: AlgoInfo(
        kind=AlgorithmKind.INSERTION_SORT, fn=_insertion, pseudocode=_insertion_pc,
        description="Builds the sorted array one item at a time by comparing.",
        complexity_time="O(n²)", complexity_space="O(1)",
        best_case="O(n)", average_case="O(n²)", worst_case="O(n²)",
        stable=True, in_place=True,
        how_it_works=[
            "Start with the second element",
            "Compare with elements before it",
            "Shift elements greater than key to the right",
            "Insert key in correct position",
            "Repeat for all elements",
        ],
        advantages=[
            "Simple implementation",
            "Efficient for small data sets",
            "Adaptive (fast for sorted data)",
            "Stable sort",
            "In-place",
        ],
        disadvantages=[
            "Inefficient for large lists",
            "O(n²) time complexity",
        ],
        use_cases=[
            "Small arrays",
            "Nearly sorted data",
            "Online sorting (sorting as data is received)",
        ],
    ),

    AlgorithmKind.SELECTION_SORT: AlgoInfo(
        kind=AlgorithmKind.SELECTION_SORT, fn=_selection, pseudocode=_selection_pc,
        description="Repeatedly finds the minimum element and puts it at the beginning.",
        complexity_time="O(n²)", complexity_space="O(1)",
        best_case="O(n²)", average_case="O(n²)", worst_case="O(n²)",
        stable=False, in_place=True,
        how_it_works=[
            "Find the minimum element in unsorted array",
            "Swap it with the element at the beginning",
            "Move the boundary of sorted subarray one step right",
            "Repeat until array is sorted",
        ],
        advantages=[
            "Simple to understand",
            "Performs well on small lists",
            "No additional memory required",
            "Minimizes number of swaps (O(n))",
        ],
        disadvantages=[
            "O(n²) time complexity",
            "Inefficient for large datasets",
            "Not stable",
        ],
        use_cases=[
            "Small arrays",
            "When memory writes are costly (fewest swaps)",
            "Checking if everything is already sorted",
        ],
    ),

    AlgorithmKind.STACK_OPS: AlgoInfo(
        kind=AlgorithmKind.STACK_OPS, fn=_stack, pseudocode=_stack_pc,
        description="LIFO (Last In First Out) data structure visualization.",
        complexity_time="O(1)", complexity_space="O(n)",
        best_case="O(1)", average_case="O(1)", worst_case="O(1)",
        how_it_works=[
            "Push: Add element to the top",
            "Pop: Remove element from the top",
            "Peek: View top element",
            "LIFO: Last element added is first to be removed",
        ],
        advantages=[
            "Constant time O(1) operations",
            "Simple memory management",
            "Efficient for function calls/recursion",
            "Undo/Redo functionality",
        ],
        disadvantages=[
            "No random access",
            "Fixed size (in static implementation)",
        ],
        use_cases=[
            "Function call stack",
            "Expression evaluation",
            "Backtracking algorithms",
            "Browser history",
        ],
    ),

    AlgorithmKind.QUEUE_OPS: AlgoInfo(
        kind=AlgorithmKind.QUEUE_OPS, fn=_queue, pseudocode=_queue_pc,
        description="FIFO (First In First Out) data structure visualization.",
        complexity_time="O(1)", complexity_space="O(n)",
        best_case="O(1)", average_case="O(1)", worst_case="O(1)",
        how_it_works=[
            "Enqueue: Add element to the rear",
            "Dequeue: Remove element from the front",
            "Front: View first element",
            "FIFO: First element added is first to be removed",
        ],
        advantages=[
            "Constant time O(1) operations",
            "Fair scheduling (FCFS)",
            "Buffer management",
        ],
        disadvantages=[
            "No random access",
            "Fixed size (in static implementation)",
        ],
        use_cases=[
            "Task scheduling",
            "Print spooling",
            "Breadth-First Search",
            "Data buffering",
        ],
    ),
}


# ---------------------------------------------------------------------------
# Interactive panels (shown, never dispatched)
# ---------------------------------------------------------------------------
STRUCTURE_INFO: Dict[str, InfoCard] = {

    "BST": InfoCard(
        key="BST", name="Binary Search Tree", pseudocode=_bst_pc, sample_dir="bst",
        description="Hierarchical data structure with ordered nodes.",
        complexity_time="O(log n) avg", complexity_space="O(n)",
        best_case="O(log n)", average_case="O(log n)", worst_case="O(n)",
        how_it_works=[
            "Root: The top node of the tree",
            "Left Child: Smaller than parent",
            "Right Child: Larger than parent",
            "Leaf: Node with no children",
        ],
        advantages=[
            "Efficient searching and sorting",
            "Dynamic size",
            "Reflects structural relationships",
        ],
        disadvantages=[
            "Can become unbalanced (skewed)",
            "No O(1) access like arrays",
        ],
        use_cases=[
            "Hierarchical data (file systems)",
            "Database indexing",
            "Symbol tables",
        ],
    ),

    "GRAPH": InfoCard(
        key="GRAPH", name="Graph Operations",
        pseudocode=PSEUDOCODE_BFS + PSEUDOCODE_DFS, sample_dir="graph",
        description="Network of nodes (vertices) connected by edges.",
        complexity_time="Varies", complexity_space="O(V + E)",
        best_case="N/A", average_case="N/A", worst_case="N/A",
        how_it_works=[
            "Vertex: A node in the graph",
            "Edge: A connection between two vertices",
            "BFS: Breadth-First Search (Level by level)",
            "DFS: Depth-First Search (Deep as possible)",
        ],
        advantages=[
            "Models real-world networks",
            "Flexible relationships",
            "Pathfinding capabilities",
        ],
        disadvantages=[
            "Complex implementation",
            "High memory usage for dense graphs",
        ],
        use_cases=[
            "Social networks",
            "GPS Navigation",
            "Network routing",
            "Dependency resolution",
        ],
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(selector) -> AlgoInfo:
    """AlgoInfo for a kind, label or name.  Raises UnknownAlgorithmError."""
    return REGISTRY[AlgorithmKind.parse(selector)]


def find_algorithm(selector) -> Optional[AlgoInfo]:
    """Like get_algorithm, but returns None for unknown selectors."""
    try:
        return get_algorithm(selector)
    except ValueError:
        return None


def list_algorithms() -> List[AlgoInfo]:
    """All registered algorithms in enumeration order."""
    return [REGISTRY[kind] for kind in AlgorithmKind]
