"""Per-client workspaces and store eviction."""

import pytest

from algorithms import AlgorithmKind
from engine import WorkspaceStore


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def test_same_id_same_workspace(clock):
    store = WorkspaceStore(clock=clock)
    assert store.get("a") is store.get("a")
    assert store.get("a") is not store.get("b")


def test_new_workspace_starts_with_empty_stack():
    ws = WorkspaceStore().get("x")
    assert ws.ds_kind is AlgorithmKind.STACK_OPS
    assert ws.ds.current_step.explanation == "Stack is empty"


def test_least_recently_used_goes_first(clock):
    store = WorkspaceStore(max_size=2, clock=clock)
    store.get("a")
    store.get("b")
    store.get("a")             # b is now the oldest
    store.get("c")
    assert "b" not in store
    assert "a" in store and "c" in store
    assert len(store) == 2


def test_idle_workspaces_expire(clock):
    store = WorkspaceStore(idle_ttl=60, clock=clock)
    kept = store.get("a")
    store.get("b")

    clock.now = 30
    assert store.get("a") is kept

    clock.now = 100            # b idle for 100s, a for 70s
    store.get("c")
    assert "a" not in store
    assert "b" not in store
    assert len(store) == 1


def test_lookup_never_evicts_the_workspace_returned(clock):
    store = WorkspaceStore(max_size=1, idle_ttl=10, clock=clock)
    ws = store.get("a")
    clock.now = 50
    assert store.get("a") is ws
    assert len(store) == 1


def test_max_size_must_be_positive():
    with pytest.raises(ValueError):
        WorkspaceStore(max_size=0)
