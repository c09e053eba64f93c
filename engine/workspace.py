"""
workspace.py — Per-Client State
================================
Each browser session owns one Workspace: the current sorting run, the
interactive stack/queue history, the BST root and the loaded graph, each
with its own Stepper for replay.

Workspaces live in a process-local WorkspaceStore keyed by an opaque id
kept in the Flask session cookie.  Only the id goes into the cookie;
traces (up to a few thousand steps for 200 values) stay server-side.  The
store is bounded: idle and least recently used workspaces are evicted.
"""

import logging
import threading
import time
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from algorithms import AlgorithmKind, Step, initial_history
from engine.recorder import Recorder
from engine.stepper import Stepper
from structures import GraphData, TreeNode

logger = logging.getLogger(__name__)

PANELS = ("array", "ds", "tree", "graph")


@dataclass
class Workspace:
    recorder:   Optional[Recorder]  = None
    array:      List[float]         = field(default_factory=list)

    ds_kind:    AlgorithmKind       = AlgorithmKind.STACK_OPS
    ds:         Stepper             = field(default_factory=Stepper)

    tree_root:  Optional[TreeNode]  = None
    tree:       Stepper             = field(default_factory=Stepper)

    graph_data: Optional[GraphData] = None
    graph:      Stepper             = field(default_factory=Stepper)

    lock:       threading.Lock      = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self):
        self.reset_ds(self.ds_kind)

    def reset_ds(self, kind: AlgorithmKind) -> List[Step]:
        self.ds_kind = kind
        history = initial_history(kind)
        self.ds.load(history)
        return history

    def stepper_for(self, panel: str) -> Stepper:
        if panel == "array":
            return self.recorder.stepper if self.recorder else Stepper()
        if panel in PANELS:
            return getattr(self, panel)
        raise KeyError(panel)


class WorkspaceStore:
    """
    Thread-safe id → Workspace map with least-recently-used eviction.

    Every get() refreshes the entry it returns, then drops entries idle for
    longer than `idle_ttl` seconds and, while more than `max_size` remain,
    the least recently used ones.  The workspace being returned is never
    evicted by its own lookup.
    """

    def __init__(
        self,
        max_size: int = 1000,
        idle_ttl: float = 3600,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self.idle_ttl = idle_ttl
        self._clock   = clock
        # id -> (workspace, last seen); oldest first
        self._items: "OrderedDict[str, Tuple[Workspace, float]]" = OrderedDict()
        self._lock = threading.Lock()

    def new_id(self) -> str:
        return uuid.uuid4().hex

    def get(self, workspace_id: str) -> Workspace:
        now = self._clock()
        with self._lock:
            entry = self._items.pop(workspace_id, None)
            ws = entry[0] if entry is not None else Workspace()
            self._evict(now)
            self._items[workspace_id] = (ws, now)
            return ws

    def _evict(self, now: float) -> None:
        while self._items:
            oldest_id, (_, seen) = next(iter(self._items.items()))
            if now - seen <= self.idle_ttl and len(self._items) < self.max_size:
                break
            del self._items[oldest_id]
            logger.debug("evicted workspace %s (idle %.0fs)", oldest_id, now - seen)

    def __contains__(self, workspace_id: str) -> bool:
        return workspace_id in self._items

    def __len__(self) -> int:
        return len(self._items)
