"""
Galaxy Points - procedural spiral galaxy point clouds.

Features:
- Closed-form spiral galaxy generator with a radial color gradient
- Seedable random source, fresh buffers on every regeneration
- NumPy and optional PyTorch compute backends
- Matplotlib 3D viewer and turntable GIF export
- CLI and tkinter control panel
"""

__version__ = "0.1.0"

from galaxy_points.errors import GalaxyError, InvalidParameterError, AllocationFailureError
from galaxy_points.generator import (
    GalaxyParameters,
    ParticleBuffer,
    SpiralGalaxyGenerator,
    generate_galaxy,
    GalaxySession,
)
from galaxy_points.backends.factory import get_backend, list_available_backends

__all__ = [
    "GalaxyError",
    "InvalidParameterError",
    "AllocationFailureError",
    "GalaxyParameters",
    "ParticleBuffer",
    "SpiralGalaxyGenerator",
    "generate_galaxy",
    "GalaxySession",
    "get_backend",
    "list_available_backends",
]
