"""Stepper playback state machine."""

import pytest

from algorithms import StepBuilder
from engine import Stepper, StepperState
from engine.stepper import MIN_INTERVAL


def test_load_shows_first_step(make_steps):
    s = Stepper()
    s.load(make_steps(5))
    assert s.state is StepperState.PAUSED
    assert s.current_idx == 0
    assert s.current_step.explanation == "s0"
    assert s.total_steps == 5


def test_load_empty_stays_idle():
    s = Stepper()
    s.load([])
    assert s.state is StepperState.IDLE
    assert s.current_step is None
    assert s.next_step() is False
    assert s.state is StepperState.IDLE


def test_next_until_finished(make_steps):
    s = Stepper()
    s.load(make_steps(3))
    assert s.next_step() and s.next_step()
    assert s.current_idx == 2
    assert s.next_step() is False
    assert s.is_finished


def test_prev_leaves_finished(make_steps):
    s = Stepper()
    s.load(make_steps(3))
    s.jump_to_end()
    assert s.is_finished

    assert s.prev_step() is True
    assert s.state is StepperState.PAUSED
    assert s.current_idx == 1


def test_prev_at_start_is_a_no_op(make_steps):
    s = Stepper()
    s.load(make_steps(3))
    assert s.prev_step() is False
    assert s.current_idx == 0


def test_goto_is_random_access(make_steps):
    s = Stepper()
    s.load(make_steps(10))
    assert s.goto_step(7)
    assert s.current_step.explanation == "s7"
    assert s.goto_step(2)
    assert s.current_step.explanation == "s2"
    assert s.goto_step(10) is False
    assert s.goto_step(-1) is False
    assert s.current_idx == 2


def test_rewind(make_steps):
    s = Stepper()
    s.load(make_steps(4))
    s.goto_step(3)
    s.play(now=0.0)
    s.rewind()
    assert s.current_idx == 0
    assert s.state is StepperState.PAUSED


def test_tick_advances_after_interval(make_steps):
    s = Stepper()
    s.load(make_steps(3))
    s.set_speed("medium")
    s.play(now=0.0)
    assert s.is_playing

    assert s.tick(now=0.2) is False
    assert s.tick(now=0.6) is True
    assert s.current_idx == 1

    assert s.tick(now=1.2) is True
    assert s.current_idx == 2
    assert s.is_finished
    assert s.tick(now=5.0) is False


def test_tick_while_paused_does_nothing(make_steps):
    s = Stepper()
    s.load(make_steps(3))
    assert s.tick(now=100.0) is False
    assert s.current_idx == 0


def test_play_is_ignored_when_finished(make_steps):
    s = Stepper()
    s.load(make_steps(2))
    s.jump_to_end()
    s.play(now=0.0)
    assert s.is_finished


def test_toggle_play(make_steps):
    s = Stepper()
    s.load(make_steps(2))
    s.toggle_play(now=0.0)
    assert s.is_playing
    s.toggle_play(now=0.1)
    assert s.state is StepperState.PAUSED


def test_speed_controls():
    s = Stepper()
    s.set_speed("fast")
    assert s.speed == 0.15
    s.set_speed("no-such-preset")
    assert s.speed == 0.5
    s.set_speed_multiplier(2)
    assert s.speed == 0.25
    s.set_speed_value(0.0001)
    assert s.speed == MIN_INTERVAL
    with pytest.raises(ValueError):
        s.set_speed_multiplier(0)


def test_on_step_callback(make_steps):
    seen = []
    s = Stepper(on_step=lambda step: seen.append(step.explanation))
    s.load(make_steps(3))
    s.next_step()
    s.goto_step(0)
    assert seen == ["s0", "s1", "s0"]


def test_branch_drops_the_tail(make_steps):
    s = Stepper()
    s.load(make_steps(5))
    s.goto_step(1)
    s.branch(StepBuilder().build("new"))

    assert [st.explanation for st in s.steps] == ["s0", "s1", "new"]
    assert s.current_idx == 2


def test_reset(make_steps):
    s = Stepper()
    s.load(make_steps(2))
    s.reset()
    assert s.state is StepperState.IDLE
    assert s.total_steps == 0
