"""Procedural spiral galaxy generation."""

from galaxy_points.generator.parameters import GalaxyParameters, PANEL_RANGES, PANEL_LABELS
from galaxy_points.generator.buffers import ParticleBuffer
from galaxy_points.generator.spiral import SpiralGalaxyGenerator, generate_galaxy
from galaxy_points.generator.session import GalaxySession

__all__ = [
    "GalaxyParameters",
    "PANEL_RANGES",
    "PANEL_LABELS",
    "ParticleBuffer",
    "SpiralGalaxyGenerator",
    "generate_galaxy",
    "GalaxySession",
]
