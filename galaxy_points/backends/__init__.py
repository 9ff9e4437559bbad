"""Compute backend abstractions for galaxy generation."""

from galaxy_points.backends.base import Backend
from galaxy_points.backends.factory import get_backend, list_available_backends

__all__ = ["Backend", "get_backend", "list_available_backends"]
