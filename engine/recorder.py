"""
recorder.py — Trace Recording & Run Statistics
===============================================
Generates the whole trace for one algorithm on one input, keeps it for
replay, and summarises it into the numbers shown next to the bars.

Usage:
    rec = Recorder()
    rec.start("Quick Sort", [5, 3, 8, 1])
    metrics = rec.run_to_completion()
    rec.stepper.next_step()           # replay
    rec.export()                      # JSON-ready snapshot

Comparison Mode:
    Two Recorders run on the SAME input, then compare(rec1, rec2) →
    ComparisonResult.  The algorithm that needs fewer steps wins.
"""

import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from algorithms import AlgoInfo, Step, generate_steps, get_algorithm
from engine.stepper import Stepper

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# RunMetrics — one run, summarised
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:     str   = ""
    algo_label:   str   = ""
    array_size:   int   = 0
    total_steps:  int   = 0
    comparisons:  int   = 0
    swaps:        int   = 0          # writes, see Counters
    wall_time_ms: float = 0.0


# ---------------------------------------------------------------------------
# ComparisonResult — two runs on the same input
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_steps:       str   = ""   # label of the algo with fewer steps, or "tie"
    winner_comparisons: str   = ""
    winner_swaps:       str   = ""
    speed_ratio:        float = 1.0  # left.total_steps / right.total_steps

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of Steps from the run.
        metrics : Computed RunMetrics (available after run_to_completion).
        stepper : Stepper loaded with `steps` for replay.
    """

    def __init__(self):
        self.steps:   List[Step]           = []
        self.metrics: Optional[RunMetrics] = None
        self.stepper: Stepper              = Stepper()

        self._algo_info: Optional[AlgoInfo] = None
        self._input:     List[float]        = []

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algorithm, array: Sequence[float]) -> None:
        """Select the algorithm and input for this run (raises for unknown algorithms)."""
        self._algo_info = get_algorithm(algorithm)
        self._input     = list(array)
        self.steps      = []
        self.metrics    = None
        self.stepper.reset()

    def run_to_completion(self) -> RunMetrics:
        """Generate the whole trace, load it into the stepper, compute metrics."""
        if self._algo_info is None:
            raise RuntimeError("Call start() first.")

        started    = time.monotonic()
        self.steps = generate_steps(self._algo_info.kind, self._input)
        wall_ms    = (time.monotonic() - started) * 1000

        self.stepper.load(self.steps)
        self.metrics = self._compute_metrics(wall_ms)
        logger.debug("recorded %s: %s", self._algo_info.label, self.metrics)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    @property
    def algo_info(self) -> Optional[AlgoInfo]:
        return self._algo_info

    # ------------------------------------------------------------------
    # Export (JSON-ready)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algorithm": self._algo_info.label if self._algo_info else "",
            "input":     list(self._input),
            "metrics":   asdict(self.metrics) if self.metrics else {},
            "steps":     [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        last = self.steps[-1] if self.steps else None
        return RunMetrics(
            algo_key=info.kind.name if info else "",
            algo_label=info.label if info else "",
            array_size=len(self._input),
            total_steps=len(self.steps),
            comparisons=last.comparisons if last else 0,
            swaps=last.swaps if last else 0,
            wall_time_ms=round(wall_ms, 2),
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Side-by-side summary of two finished runs; lower is better on every axis."""
    a = left.metrics or RunMetrics()
    b = right.metrics or RunMetrics()

    def fewer(attr: str) -> str:
        x, y = getattr(a, attr), getattr(b, attr)
        if x == y:
            return "tie"
        return a.algo_label if x < y else b.algo_label

    return ComparisonResult(
        left=a,
        right=b,
        winner_steps=fewer("total_steps"),
        winner_comparisons=fewer("comparisons"),
        winner_swaps=fewer("swaps"),
        speed_ratio=round(a.total_steps / b.total_steps, 2) if b.total_steps else 1.0,
    )
