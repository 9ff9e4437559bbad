"""Basic example of generating a galaxy point cloud."""

import numpy as np
from galaxy_points import GalaxyParameters, generate_galaxy, get_backend


def main():
    """Generate a seeded four-armed galaxy and describe it."""
    backend = get_backend("numpy")

    params = GalaxyParameters(
        count=50000,
        radius=6.0,
        branches=4,
        spin=1.2,
        randomness=0.3,
        randomness_power=3.5,
        inner_color="#ffb347",
        outer_color="#2a4b9b"
    )

    buffer = generate_galaxy(params, rng=42, backend=backend)

    low, high = buffer.bounds()
    print(f"Generated {len(buffer)} particles")
    print(f"Bounds: {np.round(low, 3)} .. {np.round(high, 3)}")
    print(f"Flat position stream: {buffer.flat_positions.shape[0]} floats")
    print(f"Mean color: {np.round(buffer.colors.mean(axis=0), 3)}")


if __name__ == "__main__":
    main()
