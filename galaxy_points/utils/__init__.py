"""Utility functions for reproducibility and configuration."""

from galaxy_points.utils.reproducibility import make_rng, fresh_seed, parse_seed
from galaxy_points.utils.config import load_parameters, save_parameters

__all__ = ["make_rng", "fresh_seed", "parse_seed", "load_parameters", "save_parameters"]
