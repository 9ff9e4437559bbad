"""Exception types raised by galaxy generation."""

from typing import Any


class GalaxyError(Exception):
    """Base class for all galaxy-points errors."""


class InvalidParameterError(GalaxyError, ValueError):
    """A generation parameter is missing, malformed or out of range.

    Raised before any buffer is allocated, so a caller never sees a partial
    result for an invalid parameter set.
    """

    def __init__(self, name: str, value: Any, reason: str):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid parameter {name}={value!r}: {reason}")


class AllocationFailureError(GalaxyError, MemoryError):
    """Particle buffers (or scratch space for them) could not be allocated."""

    def __init__(self, count: int, detail: str = ""):
        self.count = count
        message = f"Unable to allocate buffers for {count} particles"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
