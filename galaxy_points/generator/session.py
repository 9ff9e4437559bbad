"""Regeneration controller used by interactive front ends."""

import logging
from typing import Callable, Optional

from galaxy_points.backends.base import Backend
from galaxy_points.generator.buffers import ParticleBuffer
from galaxy_points.generator.parameters import GalaxyParameters
from galaxy_points.generator.spiral import generate_galaxy
from galaxy_points.utils.reproducibility import SeedLike, make_rng

logger = logging.getLogger(__name__)

ReplaceCallback = Callable[[Optional[ParticleBuffer], ParticleBuffer], None]


class GalaxySession:
    """Owns the current parameters and buffer pair for a front end.

    Every committed edit regenerates the whole galaxy. The new buffer is
    built completely before it replaces the old one, so readers of
    :attr:`buffer` only ever see a finished pair. ``on_replace(old, new)`` is
    called after each swap so the renderer can drop the old pair.
    """

    def __init__(
        self,
        params: Optional[GalaxyParameters] = None,
        rng: SeedLike = None,
        backend: Optional[Backend] = None,
        on_replace: Optional[ReplaceCallback] = None
    ):
        self.params = params if params is not None else GalaxyParameters()
        self.rng = make_rng(rng)
        self.backend = backend
        self.on_replace = on_replace
        self.generation = 0
        self._buffer: Optional[ParticleBuffer] = None

    @property
    def buffer(self) -> Optional[ParticleBuffer]:
        """Current buffer pair, or None before the first regeneration."""
        return self._buffer

    def regenerate(self) -> ParticleBuffer:
        """Rebuild the galaxy from the current parameters."""
        return self._install(self.params, generate_galaxy(self.params, rng=self.rng, backend=self.backend))

    def _install(self, params: GalaxyParameters, new: ParticleBuffer) -> ParticleBuffer:
        self.params = params
        old, self._buffer = self._buffer, new
        self.generation += 1
        logger.info("Regenerated galaxy #%d with %d particles", self.generation, len(new))
        if self.on_replace is not None:
            self.on_replace(old, new)
        return new

    def update(self, **changes) -> ParticleBuffer:
        """Apply a committed edit and regenerate.

        The edited parameters are validated first; if they are invalid the
        session keeps its previous parameters and buffers, and the same holds
        if generation fails.

        Raises:
            InvalidParameterError: If the edited parameters are invalid
        """
        params = self.params.replace(**changes)
        return self._install(params, generate_galaxy(params, rng=self.rng, backend=self.backend))

    def reseed(self, seed: SeedLike = None) -> ParticleBuffer:
        """Switch to a new random source and regenerate."""
        self.rng = make_rng(seed)
        return self.regenerate()
