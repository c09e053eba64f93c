"""
Application settings.

create_app() loads `Config`, then any VISUALIZER_* environment variables
(e.g. VISUALIZER_MAX_ARRAY_SIZE=50), then explicit overrides.

Input limits default to the engines' own constants so there is one place
to change them.
"""

import secrets

from algorithms.interactive import DEFAULT_CAPACITY
from engine.validation import MAX_ARRAY_SIZE, MIN_ARRAY_SIZE


class Config:
    SECRET_KEY         = secrets.token_hex(32)
    JSON_SORT_KEYS     = False

    # input limits
    MIN_ARRAY_SIZE     = MIN_ARRAY_SIZE
    MAX_ARRAY_SIZE     = MAX_ARRAY_SIZE
    STRUCTURE_CAPACITY = DEFAULT_CAPACITY
    RANDOM_ARRAY_SIZE  = 20
    RANDOM_VALUE_MIN   = 5
    RANDOM_VALUE_MAX   = 104

    # layout / playback
    TREE_CANVAS_WIDTH  = 800
    DEFAULT_SPEED      = "medium"

    # per-client workspaces: evicted after this many idle seconds, and the
    # least recently used go first once the store is full
    WORKSPACE_MAX      = 1000
    WORKSPACE_IDLE_TTL = 3600

    LOG_LEVEL          = "INFO"


class TestingConfig(Config):
    TESTING   = True
    LOG_LEVEL = "DEBUG"
