"""Tests for the regeneration controller."""

import numpy as np
import pytest
from galaxy_points.errors import InvalidParameterError
from galaxy_points.generator import GalaxyParameters, GalaxySession


def test_regenerate_hands_over_buffers():
    """Each swap reports the outgoing and incoming buffers."""
    swaps = []
    session = GalaxySession(GalaxyParameters(count=200), rng=1,
                            on_replace=lambda old, new: swaps.append((old, new)))
    assert session.buffer is None

    first = session.regenerate()
    second = session.regenerate()

    assert session.generation == 2
    assert session.buffer is second
    assert swaps[0] == (None, first)
    assert swaps[1] == (first, second)


def test_update_regenerates_with_new_parameters():
    """A committed edit produces a galaxy of the new size."""
    session = GalaxySession(GalaxyParameters(count=200), rng=2)
    session.regenerate()

    buffer = session.update(count=350, branches=6)

    assert len(buffer) == 350
    assert session.params.branches == 6
    assert session.buffer is buffer


def test_invalid_update_keeps_previous_state():
    """A rejected edit leaves parameters and buffers untouched."""
    calls = []
    session = GalaxySession(GalaxyParameters(count=200), rng=3,
                            on_replace=lambda old, new: calls.append(new))
    before = session.regenerate()

    with pytest.raises(InvalidParameterError):
        session.update(radius=-1.0)

    assert session.params.radius == 5.0
    assert session.buffer is before
    assert len(calls) == 1


def test_reseed_reproduces_galaxy():
    """Reseeding with the starting seed replays the first galaxy."""
    session = GalaxySession(GalaxyParameters(count=300), rng=99)
    first = session.regenerate()
    session.regenerate()

    replay = session.reseed(99)

    np.testing.assert_array_equal(first.positions, replay.positions)
    np.testing.assert_array_equal(first.colors, replay.colors)
