"""Spiral galaxy point-cloud generator."""

import logging
import time
import warnings
from typing import Optional

import numpy as np

from galaxy_points.backends.base import Backend
from galaxy_points.errors import AllocationFailureError
from galaxy_points.generator.base import PointCloudGenerator
from galaxy_points.generator.buffers import ParticleBuffer
from galaxy_points.generator.parameters import PANEL_RANGES, GalaxyParameters
from galaxy_points.utils.reproducibility import SeedLike

logger = logging.getLogger(__name__)


class SpiralGalaxyGenerator(PointCloudGenerator):
    """Spiral galaxy with evenly spaced arms and a radial color gradient.

    For particle ``i`` with radius ``r = U * radius``:

        angle = (i mod branches) / branches * 2π + r * spin
        x = cos(angle) * r + jitter_x
        y = jitter_y
        z = sin(angle) * r + jitter_z
        color = inner + (outer - inner) * r / radius

    Each jitter is ``±U ** randomness_power * randomness`` with an
    independent fair sign, so ``|jitter| < randomness`` on every axis.
    Arm assignment depends only on the index, never on a random draw.
    """

    @property
    def name(self) -> str:
        return "spiral"

    def generate(self) -> ParticleBuffer:
        """Generate positions and colors for every particle."""
        params = self.params
        params.validate()
        n = params.count
        max_count = PANEL_RANGES["count"][1]
        if n > max_count:
            warnings.warn(
                f"count={n} exceeds the control panel maximum of {max_count}; "
                f"expect roughly {n * 24 / 2**20:.0f} MiB of buffers plus scratch space.",
                UserWarning
            )

        start = time.perf_counter()
        buffer = ParticleBuffer.allocate(n)
        try:
            self._fill(buffer)
        except MemoryError as exc:
            raise AllocationFailureError(n, str(exc)) from exc

        logger.debug(
            "Generated %d particles (%d branches) on %s/%s in %.1f ms",
            n, params.branches, self.backend.name, self.backend.device,
            (time.perf_counter() - start) * 1000.0
        )
        return buffer

    def _fill(self, buffer: ParticleBuffer):
        params = self.params
        b = self.backend
        n = params.count
        rng = self.rng

        # Host-side draws keep results identical across backends for a seed
        radius_draws = rng.random(n)
        sign_draws = np.where(rng.random((n, 3)) < 0.5, 1.0, -1.0)
        magnitude_draws = rng.random((n, 3))

        radii = b.array(radius_draws) * params.radius
        branch_angles = b.remainder(b.arange(n), params.branches) / params.branches * (2.0 * np.pi)
        angles = branch_angles + radii * params.spin

        jitter = b.array(sign_draws) * b.power(b.array(magnitude_draws), params.randomness_power)
        jitter = jitter * params.randomness

        x = b.cos(angles) * radii + jitter[:, 0]
        y = jitter[:, 1]
        z = b.sin(angles) * radii + jitter[:, 2]
        buffer.positions[...] = b.to_numpy(b.stack([x, y, z], axis=1))

        inner = b.array(params.inner_color)
        outer = b.array(params.outer_color)
        t = b.expand_dims(radii / params.radius, 1)
        buffer.colors[...] = b.to_numpy(inner + (outer - inner) * t)


def generate_galaxy(
    params: GalaxyParameters,
    rng: SeedLike = None,
    backend: Optional[Backend] = None
) -> ParticleBuffer:
    """Generate one spiral galaxy.

    Args:
        params: Generation parameters
        rng: ``numpy.random.Generator`` or seed; None gives a different galaxy every call
        backend: Compute backend (NumPy if None)

    Returns:
        Fresh ParticleBuffer owned by the caller

    Raises:
        InvalidParameterError: If the parameters are invalid
        AllocationFailureError: If the buffers cannot be allocated
    """
    return SpiralGalaxyGenerator(params, backend=backend, rng=rng).generate()
