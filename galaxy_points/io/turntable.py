"""Turntable GIF export: orbit the camera once around a galaxy."""

import logging
from pathlib import Path
from typing import List, Optional, Union

import numpy as np

from galaxy_points.generator.buffers import ParticleBuffer
from galaxy_points.render.renderer_3d import PointCloudRenderer

logger = logging.getLogger(__name__)


class TurntableExporter:
    """Export a full camera orbit around a galaxy to animated GIF."""

    def __init__(
        self,
        output_path: Union[str, Path],
        frames: int = 36,
        fps: int = 12,
        elevation: Optional[float] = None
    ):
        """Initialize turntable exporter.

        Args:
            output_path: Output file path (.gif)
            frames: Number of frames in one orbit
            fps: Frames per second
            elevation: Camera elevation (renderer default if None)
        """
        if frames < 1:
            raise ValueError("frames must be >= 1")
        if fps < 1:
            raise ValueError("fps must be >= 1")
        self.output_path = Path(output_path)
        self.frames = frames
        self.fps = fps
        self.elevation = elevation

    def capture(
        self,
        buffer: ParticleBuffer,
        renderer: PointCloudRenderer,
        particle_size: Optional[float] = None
    ) -> List[np.ndarray]:
        """Render the galaxy once and capture a frame per azimuth step."""
        elevation = self.elevation if self.elevation is not None else renderer.elevation
        start_azimuth = renderer.azimuth
        renderer.render(buffer, particle_size)
        frames = []
        for step in range(self.frames):
            renderer.set_view(elevation, start_azimuth + 360.0 * step / self.frames)
            frames.append(renderer.capture_frame())
        return frames

    def export(
        self,
        buffer: ParticleBuffer,
        particle_size: Optional[float] = None,
        renderer: Optional[PointCloudRenderer] = None
    ) -> Path:
        """Render the orbit and write the GIF.

        Args:
            buffer: Galaxy to film
            particle_size: Point size hint
            renderer: Renderer to draw with; an off-screen one is created
                (and closed) if None

        Returns:
            Path of the written file
        """
        try:
            import imageio
        except ImportError:
            raise ImportError(
                "GIF export requires imageio. Install with: pip install imageio"
            )

        owns_renderer = renderer is None
        if owns_renderer:
            renderer = PointCloudRenderer(interactive=False)
        try:
            frames = self.capture(buffer, renderer, particle_size)
        finally:
            if owns_renderer:
                renderer.close()

        imageio.mimsave(
            self.output_path,
            frames,
            duration=1000.0 / self.fps,  # milliseconds per frame
            loop=0  # Infinite loop
        )
        logger.info("Wrote %d-frame turntable to %s", len(frames), self.output_path)
        return self.output_path
