"""Particle buffers handed from the generator to renderers."""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from galaxy_points.errors import AllocationFailureError

BUFFER_DTYPE = np.float32


@dataclass(frozen=True, eq=False)
class ParticleBuffer:
    """Parallel position and color streams for one generated galaxy.

    Both arrays are C-contiguous ``float32`` with shape ``(count, 3)``; row
    ``i`` of ``positions`` is ``(x, y, z)`` and row ``i`` of ``colors`` is
    ``(r, g, b)`` for the same particle. ``flat_positions`` and
    ``flat_colors`` view the same memory as ``[x0, y0, z0, x1, ...]``.

    The buffer belongs to whoever received it; the generator keeps no
    reference.
    """
    positions: np.ndarray
    colors: np.ndarray

    def __post_init__(self):
        if self.positions.ndim != 2 or self.positions.shape[1] != 3:
            raise ValueError(f"positions must have shape (n, 3), got {self.positions.shape}")
        if self.colors.shape != self.positions.shape:
            raise ValueError(
                f"colors shape {self.colors.shape} does not match positions shape {self.positions.shape}"
            )

    @classmethod
    def allocate(cls, count: int) -> "ParticleBuffer":
        """Allocate uninitialized buffers for ``count`` particles.

        Raises:
            AllocationFailureError: If the memory cannot be obtained
        """
        try:
            positions = np.empty((count, 3), dtype=BUFFER_DTYPE)
            colors = np.empty((count, 3), dtype=BUFFER_DTYPE)
        except MemoryError as exc:
            raise AllocationFailureError(count, str(exc)) from exc
        return cls(positions, colors)

    @property
    def count(self) -> int:
        return self.positions.shape[0]

    def __len__(self) -> int:
        return self.count

    @property
    def flat_positions(self) -> np.ndarray:
        return self.positions.reshape(-1)

    @property
    def flat_colors(self) -> np.ndarray:
        return self.colors.reshape(-1)

    def bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        """Axis-aligned bounding box as ``(min_xyz, max_xyz)``."""
        return self.positions.min(axis=0), self.positions.max(axis=0)
