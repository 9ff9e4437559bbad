"""Base class for point-cloud generators."""

from abc import ABC, abstractmethod
from typing import Optional
from galaxy_points.backends.base import Backend
from galaxy_points.backends.numpy_backend import NumPyBackend
from galaxy_points.generator.buffers import ParticleBuffer
from galaxy_points.generator.parameters import GalaxyParameters
from galaxy_points.utils.reproducibility import SeedLike, make_rng


class PointCloudGenerator(ABC):
    """Abstract base class for procedural point-cloud generators."""

    def __init__(
        self,
        params: GalaxyParameters,
        backend: Optional[Backend] = None,
        rng: SeedLike = None
    ):
        """Initialize generator.

        Args:
            params: Validated generation parameters
            backend: Compute backend (NumPy if None)
            rng: Random source or seed; None draws fresh OS entropy
        """
        self.params = params
        self.backend = backend if backend is not None else NumPyBackend()
        self.rng = make_rng(rng)

    @abstractmethod
    def generate(self) -> ParticleBuffer:
        """Generate a fresh particle buffer.

        Returns:
            ParticleBuffer owned by the caller
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this generator."""
        pass
