"""Base renderer interface."""

from abc import ABC, abstractmethod
from typing import Optional
import numpy as np
from galaxy_points.generator.buffers import ParticleBuffer


class Renderer(ABC):
    """Abstract base class for renderers."""

    @abstractmethod
    def render(self, buffer: ParticleBuffer, particle_size: Optional[float] = None):
        """Draw a buffer pair, replacing whatever was drawn before.

        Args:
            buffer: Positions and colors to draw
            particle_size: Point size hint from the generation parameters
        """
        pass

    @abstractmethod
    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array.

        Returns:
            Image array (H, W, 3) uint8
        """
        pass

    @abstractmethod
    def set_view(self, elevation: float, azimuth: float):
        """Move the camera."""
        pass

    @abstractmethod
    def clear(self):
        """Remove the drawn particles."""
        pass

    @abstractmethod
    def close(self):
        """Close the renderer."""
        pass
