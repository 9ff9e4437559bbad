"""Tests for the spiral galaxy generator."""

import numpy as np
import pytest
from galaxy_points.backends.numpy_backend import NumPyBackend
from galaxy_points.errors import AllocationFailureError, InvalidParameterError
from galaxy_points.generator import GalaxyParameters, SpiralGalaxyGenerator, generate_galaxy
from galaxy_points.generator.buffers import ParticleBuffer
from galaxy_points.generator.parameters import PANEL_RANGES


def make_params(**overrides):
    values = dict(count=2000, radius=5.0, branches=3, spin=1.0, randomness=0.2, randomness_power=3.0)
    values.update(overrides)
    return GalaxyParameters(**values)


def test_buffer_lengths_match_count():
    """Both streams hold exactly one row per particle."""
    for count in (1, 7, 2000):
        buffer = generate_galaxy(make_params(count=count), rng=1)
        assert buffer.positions.shape == (count, 3)
        assert buffer.colors.shape == (count, 3)
        assert len(buffer) == count


def test_buffer_layout():
    """Buffers are contiguous float32 with flat views over the same memory."""
    buffer = generate_galaxy(make_params(count=10), rng=0)

    assert buffer.positions.dtype == np.float32
    assert buffer.colors.dtype == np.float32
    assert buffer.positions.flags['C_CONTIGUOUS']
    assert buffer.flat_positions.shape == (30,)
    assert np.shares_memory(buffer.flat_positions, buffer.positions)
    np.testing.assert_array_equal(buffer.flat_colors[3:6], buffer.colors[1])


@pytest.mark.parametrize("randomness,power", [(0.0, 1.0), (0.2, 3.0), (2.0, 1.0), (1.5, 10.0)])
def test_positions_within_radius_plus_jitter(randomness, power):
    """Planar distance stays within radius plus the largest X/Z jitter."""
    params = make_params(count=5000, randomness=randomness, randomness_power=power)
    buffer = generate_galaxy(params, rng=7)

    x, y, z = buffer.positions.astype(np.float64).T
    tol = 1e-5
    assert np.all(np.hypot(x, z) <= params.radius + np.sqrt(2.0) * randomness + tol)
    assert np.all(np.abs(y) <= randomness + tol)


def test_colors_stay_between_inner_and_outer():
    """No channel is extrapolated beyond the gradient endpoints."""
    params = make_params(count=5000, inner_color="#ff6030", outer_color="#1b3984")
    buffer = generate_galaxy(params, rng=3)

    inner = np.array(params.inner_color)
    outer = np.array(params.outer_color)
    assert np.all(buffer.colors >= np.minimum(inner, outer) - 1e-6)
    assert np.all(buffer.colors <= np.maximum(inner, outer) + 1e-6)


def test_branch_assignment_repeats_every_branches_particles():
    """Particle i sits on arm i mod branches regardless of its radius."""
    n, branches = 60, 5
    params = make_params(count=n, branches=branches, spin=0.0, randomness=0.0)
    buffer = generate_galaxy(params, rng=11)

    x, _, z = buffer.positions.astype(np.float64).T
    expected = (np.arange(n) % branches) / branches * 2 * np.pi
    wrapped = np.angle(np.exp(1j * (np.arctan2(z, x) - expected)))
    assert np.allclose(wrapped, 0.0, atol=1e-4)

    angles = np.arctan2(z, x)
    shared = np.angle(np.exp(1j * (angles[:-branches] - angles[branches:])))
    assert np.allclose(shared, 0.0, atol=1e-4)


def test_zero_randomness_collapses_to_spiral():
    """Without jitter every particle lies on the noiseless spiral curve."""
    n, spin = 3000, 1.3
    params = make_params(count=n, spin=spin, randomness=0.0, randomness_power=4.0)
    buffer = generate_galaxy(params, rng=5)

    x, y, z = buffer.positions.astype(np.float64).T
    assert np.all(y == 0.0)

    r = np.hypot(x, z)
    theta = (np.arange(n) % 3) / 3 * 2 * np.pi + r * spin
    np.testing.assert_allclose(x, np.cos(theta) * r, atol=1e-5)
    np.testing.assert_allclose(z, np.sin(theta) * r, atol=1e-5)

    inner = np.array(params.inner_color)
    outer = np.array(params.outer_color)
    expected_colors = inner + (outer - inner) * (r / params.radius)[:, np.newaxis]
    np.testing.assert_allclose(buffer.colors, expected_colors, atol=1e-5)


def test_three_particle_scenario():
    """Three arms, no spin or jitter, red-to-blue gradient."""
    params = GalaxyParameters(
        count=3, branches=3, radius=1.0, spin=0.0,
        randomness=0.0, randomness_power=3.0,
        inner_color=(1.0, 0.0, 0.0), outer_color=(0.0, 0.0, 1.0)
    )
    buffer = generate_galaxy(params, rng=2024)

    x, y, z = buffer.positions.astype(np.float64).T
    r = np.hypot(x, z)
    assert np.all((r >= 0.0) & (r <= 1.0 + 1e-6))
    assert np.all(y == 0.0)
    for i, angle in enumerate([0.0, 2 * np.pi / 3, 4 * np.pi / 3]):
        assert x[i] == pytest.approx(np.cos(angle) * r[i], abs=1e-6)
        assert z[i] == pytest.approx(np.sin(angle) * r[i], abs=1e-6)
        np.testing.assert_allclose(buffer.colors[i], [1.0 - r[i], 0.0, r[i]], atol=1e-6)


def test_three_particle_scenario_with_integer_colors():
    """Integer 0/1 channels are unit colors, not 8-bit ones."""
    params = GalaxyParameters(
        count=3, branches=3, radius=1, spin=0,
        randomness=0, randomness_power=3,
        inner_color=(1, 0, 0), outer_color=(0, 0, 1)
    )
    buffer = generate_galaxy(params, rng=2024)

    r = np.hypot(buffer.positions[:, 0], buffer.positions[:, 2]).astype(np.float64)
    expected = np.stack([1.0 - r, np.zeros(3), r], axis=1)
    np.testing.assert_allclose(buffer.colors, expected, atol=1e-6)


def test_unseeded_generations_are_valid_but_differ():
    """Without a seed each call is a different, well-formed galaxy."""
    params = make_params(count=500)
    first = generate_galaxy(params)
    second = generate_galaxy(params)

    for buffer in (first, second):
        assert buffer.positions.shape == (500, 3)
        assert np.all(np.isfinite(buffer.positions))
    assert not np.array_equal(first.positions, second.positions)


def test_same_seed_reproduces_buffers():
    """Equal seeds give bit-identical buffers."""
    params = make_params(count=1000)
    a = generate_galaxy(params, rng=42)
    b = generate_galaxy(params, rng=42)

    np.testing.assert_array_equal(a.positions, b.positions)
    np.testing.assert_array_equal(a.colors, b.colors)


def test_each_generate_call_draws_fresh_buffers():
    """One generator never reuses draws or hands out the same memory twice."""
    generator = SpiralGalaxyGenerator(make_params(count=500), rng=42)
    a = generator.generate()
    b = generator.generate()

    assert generator.name == "spiral"
    assert not np.shares_memory(a.positions, b.positions)
    assert not np.array_equal(a.positions, b.positions)


def test_particle_size_does_not_change_geometry():
    """particle_size is a rendering hint only."""
    a = generate_galaxy(make_params(count=300, particle_size=0.001), rng=9)
    b = generate_galaxy(make_params(count=300, particle_size=0.1), rng=9)

    np.testing.assert_array_equal(a.positions, b.positions)
    np.testing.assert_array_equal(a.colors, b.colors)


def test_invalid_parameters_rejected_before_allocation(monkeypatch):
    """A tampered parameter record fails validation before any buffer exists."""
    params = make_params()
    object.__setattr__(params, "radius", 0.0)

    def unexpected(cls, count):
        raise AssertionError("allocated buffers for invalid parameters")

    monkeypatch.setattr(ParticleBuffer, "allocate", classmethod(unexpected))
    with pytest.raises(InvalidParameterError):
        generate_galaxy(params, rng=0)


def test_allocation_failure_is_reported(monkeypatch):
    """Buffer allocation errors surface as AllocationFailureError."""
    def fail(*args, **kwargs):
        raise MemoryError("out of memory")

    monkeypatch.setattr(np, "empty", fail)
    with pytest.raises(AllocationFailureError) as excinfo:
        generate_galaxy(make_params(count=10), rng=0)

    assert isinstance(excinfo.value, MemoryError)
    assert excinfo.value.count == 10
    assert isinstance(excinfo.value.__cause__, MemoryError)


def test_scratch_allocation_failure_is_reported(monkeypatch):
    """Running out of memory mid-computation is also an AllocationFailureError."""
    backend = NumPyBackend()

    def fail(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(backend, "power", fail)
    with pytest.raises(AllocationFailureError):
        generate_galaxy(make_params(count=10), rng=0, backend=backend)


def test_count_above_panel_maximum_warns(monkeypatch):
    """Very large galaxies are generated but flagged."""
    monkeypatch.setitem(PANEL_RANGES, "count", (100, 1000, 100))

    with pytest.warns(UserWarning, match="exceeds the control panel maximum"):
        buffer = generate_galaxy(make_params(count=1001), rng=0)
    assert len(buffer) == 1001


def test_buffer_rejects_mismatched_streams():
    """Positions and colors must describe the same particles."""
    with pytest.raises(ValueError):
        ParticleBuffer(np.zeros((2, 3), dtype=np.float32), np.zeros((3, 3), dtype=np.float32))
    with pytest.raises(ValueError):
        ParticleBuffer(np.zeros((2, 2), dtype=np.float32), np.zeros((2, 2), dtype=np.float32))
