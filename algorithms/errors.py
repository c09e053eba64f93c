"""
Exceptions raised at the engine boundary.

Engines themselves are total over valid input; these are raised by the
caller-facing helpers (validation, interactive stack/queue, dispatch) and
mapped to HTTP 400 responses by the web layer.
"""


class TraceError(Exception):
    """Base class for every rejected request."""


class InputValidationError(TraceError, ValueError):
    """Malformed numeric input, array size out of range, unknown node id."""


class CapacityError(TraceError):
    """Push onto a full structure, or pop / dequeue from an empty one."""


class UnknownAlgorithmError(TraceError, ValueError):
    """Algorithm selector that is not part of the registry."""
