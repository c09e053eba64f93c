"""
Shared pytest fixtures for the trace-visualizer tests.
"""

import pytest

from algorithms import StepBuilder
from config import TestingConfig
from main import create_app
from structures import GraphData


@pytest.fixture
def app():
    """Fresh app per test so workspaces never leak between tests."""
    overrides = {k: getattr(TestingConfig, k) for k in dir(TestingConfig) if k.isupper()}
    return create_app(overrides)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def chain_graph() -> GraphData:
    """Undirected 1 - 2 - 3."""
    return GraphData.from_adjacency_list("1: 2\n2: 3")


@pytest.fixture
def branching_graph() -> GraphData:
    """
    Undirected:
        1 - 2 - 4
        |
        3
    """
    return GraphData.from_adjacency_list("1: 2 3\n2: 4")


@pytest.fixture
def make_steps():
    """Factory for n trivial steps labelled s0 .. s{n-1}."""
    def _make(n):
        sb = StepBuilder()
        return [sb.build(f"s{i}") for i in range(n)]
    return _make
