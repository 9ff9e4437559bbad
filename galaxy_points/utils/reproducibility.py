"""Random-source helpers for seedable generation."""

from typing import Optional, Union
import numpy as np

SeedLike = Union[None, int, np.random.SeedSequence, np.random.Generator]


def make_rng(seed: SeedLike = None) -> np.random.Generator:
    """Return a NumPy generator for ``seed``.

    Args:
        seed: ``None`` for a fresh OS-entropy generator, an int or
            ``SeedSequence`` for a reproducible one, or an existing
            ``Generator``, which is returned unchanged so its stream is shared

    Returns:
        numpy.random.Generator
    """
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def fresh_seed() -> int:
    """Draw a new entropy-based seed.

    Front ends use this instead of passing ``None`` so the seed of an
    unseeded run can be reported and replayed.
    """
    return int(np.random.SeedSequence().entropy)


def parse_seed(text: Optional[str]) -> Optional[int]:
    """Parse a seed typed by a user; blank means no seed.

    Raises:
        ValueError: If the text is not an integer
    """
    if text is None or not text.strip():
        return None
    seed = int(text.strip())
    if seed < 0:
        raise ValueError("Seed must be a non-negative integer")
    return seed
