"""Example with the 3D viewer and a parameter sweep."""

import matplotlib.pyplot as plt
from galaxy_points import GalaxyParameters, GalaxySession
from galaxy_points.render.renderer_3d import PointCloudRenderer


def main():
    """Regenerate the galaxy while sweeping spin, as a slider would."""
    renderer = PointCloudRenderer()
    session = GalaxySession(
        GalaxyParameters(count=30000),
        rng=123,
        on_replace=lambda old, new: renderer.render(new, particle_size=session.params.particle_size)
    )

    print("Sweeping spin from -3 to 3. Close the window to stop.")
    try:
        session.regenerate()
        for step in range(13):
            session.update(spin=-3.0 + 0.5 * step)
            plt.pause(0.5)
    except KeyboardInterrupt:
        print("\nInterrupted by user")
    finally:
        renderer.close()


if __name__ == "__main__":
    main()
