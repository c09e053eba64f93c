"""
engine/
-------
Playback, recording and caller-side validation.

    from engine import Stepper, Recorder, compare, parse_array_input
"""

from engine.stepper    import Stepper, StepperState, SPEED_PRESETS
from engine.recorder   import Recorder, RunMetrics, ComparisonResult, compare
from engine.validation import (
    parse_array_input,
    parse_value,
    require_node,
    validate_array,
)
from engine.workspace  import Workspace, WorkspaceStore

__all__ = [
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "parse_array_input",
    "parse_value",
    "require_node",
    "validate_array",
    "Workspace",
    "WorkspaceStore",
]
