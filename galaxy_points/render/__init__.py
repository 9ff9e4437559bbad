"""Rendering of generated galaxies."""

from galaxy_points.render.base import Renderer
from galaxy_points.render.renderer_3d import PointCloudRenderer

__all__ = ["Renderer", "PointCloudRenderer"]
