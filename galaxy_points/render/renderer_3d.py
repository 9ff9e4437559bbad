"""3D point-cloud renderer using matplotlib."""

import logging
import math
from typing import Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from mpl_toolkits.mplot3d import Axes3D

from galaxy_points.generator.buffers import ParticleBuffer
from galaxy_points.render.base import Renderer

logger = logging.getLogger(__name__)

# Camera at (3, 3, 3) looking at the origin
DEFAULT_ELEVATION = math.degrees(math.atan2(3.0, math.hypot(3.0, 3.0)))
DEFAULT_AZIMUTH = 45.0


class PointCloudRenderer(Renderer):
    """Renders a galaxy buffer as colored points on a black background.

    The galaxy's Y axis (the disk normal) is drawn as matplotlib's vertical
    axis. Matplotlib has no additive blending, so overlapping particles are
    approximated with a low alpha and depth shading switched off. The 3D
    axes give mouse orbit and zoom for free.
    """

    def __init__(
        self,
        figsize: Tuple[int, int] = (8, 8),
        dpi: int = 100,
        elevation: float = DEFAULT_ELEVATION,
        azimuth: float = DEFAULT_AZIMUTH,
        fov: float = 75.0,
        alpha: float = 0.6,
        size_scale: float = 200.0,
        interactive: bool = True,
        title: Optional[str] = None
    ):
        """Initialize 3D renderer.

        Args:
            figsize: Figure size
            dpi: Dots per inch
            elevation: Camera elevation angle in degrees
            azimuth: Camera azimuth angle in degrees
            fov: Vertical field of view of the perspective camera in degrees
            alpha: Point opacity
            size_scale: Points per world unit when converting particle_size
            interactive: Show a window and pump its event loop on each render;
                False renders off-screen (for capture and export)
            title: Optional window/figure title
        """
        self.initialized = False
        self.figsize = figsize
        self.dpi = dpi
        self.elevation = elevation
        self.azimuth = azimuth
        self.fov = fov
        self.alpha = alpha
        self.size_scale = size_scale
        self.interactive = interactive
        self.title = title
        self.fig: Optional[Figure] = None
        self.ax: Optional[Axes3D] = None
        self.scatter = None

    def _initialize(self):
        """Create the figure if not already done."""
        if self.initialized:
            return
        self.fig = plt.figure(figsize=self.figsize, dpi=self.dpi)
        self.ax = self.fig.add_subplot(111, projection='3d')
        self.fig.patch.set_facecolor('black')
        self.ax.set_facecolor('black')
        self.ax.set_axis_off()
        self.ax.set_box_aspect((1, 1, 1))
        focal_length = 1.0 / math.tan(math.radians(self.fov) / 2.0)
        self.ax.set_proj_type('persp', focal_length=focal_length)
        if self.title:
            self.fig.suptitle(self.title, color='white')
        self.ax.view_init(elev=self.elevation, azim=self.azimuth)

        if self.interactive:
            plt.show(block=False)
            plt.pause(0.1)  # Give it time to appear

        self.initialized = True

    def _is_figure_open(self) -> bool:
        """Check if the figure window is still open."""
        if self.fig is None or not plt.fignum_exists(self.fig.number):
            self.initialized = False
            self.fig = None
            self.ax = None
            self.scatter = None
            return False
        return True

    def render(self, buffer: ParticleBuffer, particle_size: Optional[float] = None):
        """Render a buffer pair, disposing the previously drawn one."""
        if self.initialized and not self._is_figure_open():
            logger.debug("Viewer window was closed; reopening")
        self._initialize()
        self.clear()

        positions = buffer.positions
        # Buffers built outside the generator may carry out-of-range colors
        colors = np.clip(buffer.colors, 0.0, 1.0)
        if particle_size is None:
            sizes = 4.0
        else:
            sizes = max(particle_size * self.size_scale, 0.5) ** 2

        self.scatter = self.ax.scatter(
            positions[:, 0], positions[:, 2], positions[:, 1],
            c=colors, s=sizes, alpha=self.alpha,
            edgecolors='none', depthshade=False
        )

        extent = float(np.abs(positions).max()) if len(positions) else 1.0
        extent = max(extent, 1e-3)
        self.ax.set_xlim(-extent, extent)
        self.ax.set_ylim(-extent, extent)
        self.ax.set_zlim(-extent, extent)
        self.ax.view_init(elev=self.elevation, azim=self.azimuth)

        if self.interactive:
            plt.draw()
            plt.pause(0.001)

    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")

        self.fig.canvas.draw()
        rgba = np.asarray(self.fig.canvas.buffer_rgba())
        return np.ascontiguousarray(rgba[..., :3])

    def set_view(self, elevation: float, azimuth: float):
        """Set camera view angles.

        Args:
            elevation: Elevation angle
            azimuth: Azimuth angle
        """
        self.elevation = elevation
        self.azimuth = azimuth
        if self.ax is not None:
            self.ax.view_init(elev=elevation, azim=azimuth)

    def clear(self):
        """Remove the drawn particles."""
        if self.scatter is not None:
            self.scatter.remove()
            self.scatter = None

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
        self.fig = None
        self.ax = None
        self.scatter = None
        self.initialized = False
