"""Recorder metrics and side-by-side comparison."""

import pytest

from algorithms import AlgorithmKind, UnknownAlgorithmError
from engine import Recorder, compare


def recorded(algorithm, values):
    rec = Recorder()
    rec.start(algorithm, values)
    rec.run_to_completion()
    return rec


def test_metrics_come_from_the_last_step():
    rec = recorded("Bubble Sort", [3, 1, 2])
    m = rec.get_metrics()

    assert m.algo_key == "BUBBLE_SORT"
    assert m.algo_label == "Bubble Sort"
    assert m.array_size == 3
    assert m.total_steps == 10
    assert (m.comparisons, m.swaps) == (3, 2)
    assert m.wall_time_ms >= 0


def test_stepper_is_loaded_for_replay():
    rec = recorded(AlgorithmKind.MERGE_SORT, [4, 3, 2, 1])
    assert rec.stepper.total_steps == len(rec.steps)
    assert rec.stepper.current_idx == 0
    rec.stepper.jump_to_end()
    assert rec.stepper.current_step.array == [1, 2, 3, 4]


def test_export_snapshot():
    data = recorded("Quick Sort", [3, 1, 2]).export()
    assert data["algorithm"] == "Quick Sort"
    assert data["input"] == [3, 1, 2]
    assert data["metrics"]["total_steps"] == len(data["steps"]) == 8
    assert data["steps"][-1]["explanation"] == "Sorting complete!"


def test_run_before_start_raises():
    with pytest.raises(RuntimeError):
        Recorder().run_to_completion()


def test_unknown_algorithm_is_rejected():
    with pytest.raises(UnknownAlgorithmError):
        Recorder().start("Bogo Sort", [1, 2])


def test_compare_picks_fewer_steps():
    left = recorded("Bubble Sort", [3, 1, 2])
    right = recorded("Quick Sort", [3, 1, 2])
    result = compare(left, right)

    assert result.winner_steps == "Quick Sort"
    assert result.winner_comparisons == "Quick Sort"
    assert result.winner_swaps == "tie"
    assert result.speed_ratio == 1.25

    data = result.to_dict()
    assert data["left"]["algo_label"] == "Bubble Sort"
    assert data["right"]["total_steps"] == 8


def test_compare_same_algorithm_ties():
    result = compare(recorded("Merge Sort", [2, 1]), recorded("Merge Sort", [2, 1]))
    assert result.winner_steps == "tie"
    assert result.speed_ratio == 1.0
