"""Image export of generated galaxies."""

from galaxy_points.io.turntable import TurntableExporter

__all__ = ["TurntableExporter"]
