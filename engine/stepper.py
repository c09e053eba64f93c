"""
stepper.py — Trace Playback
============================
Replays a finished list of Steps.  The trace is random-access, so every
seek (forward, back, jump) is an index assignment; nothing is recomputed.

Lifecycle:
    IDLE      --load(steps)-->        PAUSED
    PAUSED    --play()-->             PLAYING
    PLAYING   --pause()-->            PAUSED
    PLAYING   --tick() hits the end-> FINISHED
    FINISHED  --prev / goto / rewind-> PAUSED
    *         --reset()-->            IDLE

Stopping playback is just pause(): generating a trace holds no resources.

Not thread-safe; the web layer holds the workspace lock around every call.
"""

import time
from enum import Enum
from typing import Callable, List, Optional, Sequence

from algorithms.step import Step


class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# seconds between auto-advanced steps
SPEED_PRESETS = {
    "slow":   1.0,
    "medium": 0.5,    # 1x on the UI slider
    "fast":   0.15,
    "turbo":  0.05,
}

MIN_INTERVAL = 0.02


class Stepper:
    """
    Attributes:
        steps       : Trace being replayed.
        current_idx : Position of the displayed step, -1 before anything is loaded.
        state       : StepperState.
        speed       : Interval between auto-advanced steps, in seconds.
        on_step     : Optional callback(Step), fired whenever the position changes.
    """

    def __init__(self, on_step: Optional[Callable[[Step], None]] = None):
        self.steps:       List[Step]   = []
        self.current_idx: int          = -1
        self.state:       StepperState = StepperState.IDLE
        self.speed:       float        = SPEED_PRESETS["medium"]
        self.on_step = on_step

        self._advanced_at = 0.0

    # -- loading -------------------------------------------------------
    def load(self, steps: Sequence[Step]) -> None:
        """Replace the trace and show its first step."""
        self.steps       = list(steps)
        self.current_idx = -1
        if not self.steps:
            self.state = StepperState.IDLE
            return
        self.state = StepperState.PAUSED
        self._show(0)

    def reset(self) -> None:
        self.load([])

    def branch(self, step: Step) -> None:
        """Cut the trace after the displayed step and continue it with `step`."""
        del self.steps[self.current_idx + 1:]
        self.steps.append(step)
        self.state = StepperState.PAUSED
        self._show(len(self.steps) - 1)

    # -- seeking -------------------------------------------------------
    def next_step(self) -> bool:
        """Move forward one step.  At the last step: mark FINISHED and return False."""
        last = len(self.steps) - 1
        if self.current_idx >= last:
            if self.steps:
                self.state = StepperState.FINISHED
            return False
        self._show(self.current_idx + 1)
        return True

    def prev_step(self) -> bool:
        if self.current_idx < 1:
            return False
        self._unfinish()
        self._show(self.current_idx - 1)
        return True

    def goto_step(self, idx: int) -> bool:
        """Seek to `idx`; False (and no move) when it is outside the trace."""
        if idx < 0 or idx >= len(self.steps):
            return False
        if idx < len(self.steps) - 1:
            self._unfinish()
        self._show(idx)
        return True

    def rewind(self) -> None:
        if self.steps:
            self.state = StepperState.PAUSED
            self._show(0)

    def jump_to_end(self) -> None:
        if self.steps:
            self._show(len(self.steps) - 1)
            self.state = StepperState.FINISHED

    # -- auto-advance --------------------------------------------------
    def play(self, now: Optional[float] = None) -> None:
        """Start auto-advancing; ignored with nothing loaded or at the end."""
        if self.state not in (StepperState.PAUSED, StepperState.PLAYING):
            return
        self.state        = StepperState.PLAYING
        self._advanced_at = time.monotonic() if now is None else now

    def pause(self) -> None:
        if self.is_playing:
            self.state = StepperState.PAUSED

    def toggle_play(self, now: Optional[float] = None) -> None:
        if self.is_playing:
            self.pause()
        else:
            self.play(now)

    def tick(self, now: Optional[float] = None) -> bool:
        """
        Drive playback from a timer.  Advances at most one step, and only
        once `speed` seconds have passed since the previous advance.
        Returns whether the position moved.
        """
        if not self.is_playing:
            return False
        now = time.monotonic() if now is None else now
        if now - self._advanced_at < self.speed:
            return False

        self._advanced_at = now
        moved = self.next_step()
        if moved and self.current_idx == len(self.steps) - 1:
            self.state = StepperState.FINISHED
        return moved

    # -- speed ---------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        """Named preset; unknown names fall back to "medium"."""
        self.speed = SPEED_PRESETS.get(preset, SPEED_PRESETS["medium"])

    def set_speed_value(self, seconds: float) -> None:
        self.speed = max(MIN_INTERVAL, seconds)

    def set_speed_multiplier(self, multiplier: float) -> None:
        """Slider value x → 1 / (2x) seconds per step (1x = 0.5 s, 2x = 0.25 s)."""
        if multiplier <= 0:
            raise ValueError("speed multiplier must be positive")
        self.set_speed_value(1.0 / (2 * multiplier))

    # -- read-only -----------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if self.current_idx < 0 or self.current_idx >= len(self.steps):
            return None
        return self.steps[self.current_idx]

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def is_finished(self) -> bool:
        return self.state is StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state is StepperState.PLAYING

    # -- internal ------------------------------------------------------
    def _unfinish(self) -> None:
        if self.state is StepperState.FINISHED:
            self.state = StepperState.PAUSED

    def _show(self, idx: int) -> None:
        self.current_idx = idx
        if self.on_step is not None:
            self.on_step(self.steps[idx])
