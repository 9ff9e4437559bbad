"""CLI main entry point."""

import argparse
import logging
import sys
import time
from typing import List, Optional

from galaxy_points.backends.factory import get_backend, list_available_backends
from galaxy_points.errors import GalaxyError
from galaxy_points.generator.buffers import ParticleBuffer
from galaxy_points.generator.parameters import GalaxyParameters
from galaxy_points.generator.spiral import generate_galaxy
from galaxy_points.utils.config import load_parameters, save_parameters
from galaxy_points.utils.reproducibility import fresh_seed

# GalaxyParameters fields settable from the command line
PARAMETER_OPTIONS = (
    'count',
    'particle_size',
    'radius',
    'branches',
    'spin',
    'randomness',
    'randomness_power',
    'inner_color',
    'outer_color',
)


def build_parameters(args) -> GalaxyParameters:
    """Start from --config (or defaults) and apply explicit overrides."""
    if args.config:
        params = load_parameters(args.config)
    else:
        params = GalaxyParameters()
    overrides = {
        name: getattr(args, name)
        for name in PARAMETER_OPTIONS
        if getattr(args, name) is not None
    }
    if overrides:
        params = params.replace(**overrides)
    return params


def print_summary(params: GalaxyParameters, buffer: ParticleBuffer, seed: int, backend_name: str, elapsed: float):
    """Print a short description of a generated galaxy."""
    low, high = buffer.bounds()
    color_low = buffer.colors.min(axis=0)
    color_high = buffer.colors.max(axis=0)
    print(f"Particles: {len(buffer)}  Branches: {params.branches}  Radius: {params.radius}  Spin: {params.spin}")
    print(f"Seed: {seed}  Backend: {backend_name}  Time: {elapsed * 1000.0:.1f} ms")
    print(f"{'Axis':<6} {'Min':>10} {'Max':>10}")
    for axis, lo, hi in zip("xyz", low, high):
        print(f"{axis:<6} {lo:>10.4f} {hi:>10.4f}")
    print(f"{'Color':<6} {'Min':>10} {'Max':>10}")
    for channel, lo, hi in zip("rgb", color_low, color_high):
        print(f"{channel:<6} {lo:>10.4f} {hi:>10.4f}")


def run(args) -> int:
    """Generate a galaxy and act on the output options."""
    params = build_parameters(args)
    backend = get_backend(args.backend, prefer_gpu=args.gpu)
    seed = args.seed if args.seed is not None else fresh_seed()

    start = time.perf_counter()
    buffer = generate_galaxy(params, rng=seed, backend=backend)
    elapsed = time.perf_counter() - start
    print_summary(params, buffer, seed, backend.name, elapsed)
    outside = params.outside_panel_range()
    if outside:
        print(f"Note: outside the control panel range: {', '.join(outside)}")

    if args.save_config:
        save_parameters(params, args.save_config)
        print(f"Parameters saved to {args.save_config}")

    if args.export_gif:
        from galaxy_points.io.turntable import TurntableExporter
        exporter = TurntableExporter(args.export_gif, frames=args.frames, fps=args.fps)
        print(f"Exporting turntable to {exporter.output_path}...")
        exporter.export(buffer, particle_size=params.particle_size)

    if args.render:
        import matplotlib.pyplot as plt
        from galaxy_points.render.renderer_3d import PointCloudRenderer
        renderer = PointCloudRenderer(title=f"{len(buffer)} stars")
        renderer.render(buffer, particle_size=params.particle_size)
        print("Close the window to exit.")
        plt.show()
        renderer.close()

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Galaxy Points - procedural spiral galaxy point clouds")

    # Generation parameters (defaults come from --config or GalaxyParameters)
    parser.add_argument('--count', type=int, default=None,
                       help='Number of particles (default: 100000)')
    parser.add_argument('--particle-size', type=float, default=None,
                       help='Point size hint for rendering (default: 0.01)')
    parser.add_argument('--radius', type=float, default=None,
                       help='Galaxy radius (default: 5)')
    parser.add_argument('--branches', type=int, default=None,
                       help='Number of spiral arms (default: 3)')
    parser.add_argument('--spin', type=float, default=None,
                       help='Radians of twist per unit radius (default: 1)')
    parser.add_argument('--randomness', type=float, default=None,
                       help='Maximum jitter per axis (default: 0.2)')
    parser.add_argument('--randomness-power', type=float, default=None,
                       help='Exponent concentrating jitter near zero (default: 3)')
    parser.add_argument('--inner-color', type=str, default=None,
                       help='Color at the center, e.g. "#ff6030" (default: #ff6030)')
    parser.add_argument('--outer-color', type=str, default=None,
                       help='Color at the rim (default: #1b3984)')
    parser.add_argument('--config', type=str, default=None,
                       help='Load parameters from a .json or .yaml file')
    parser.add_argument('--save-config', type=str, default=None,
                       help='Write the effective parameters to a .json or .yaml file')

    # Backend
    parser.add_argument('--backend', type=str, default=None,
                       choices=['numpy', 'pytorch'],
                       help='Compute backend (auto-select if not specified)')
    parser.add_argument('--gpu', action='store_true',
                       help='Prefer a GPU backend when auto-selecting')

    # Output
    parser.add_argument('--render', action='store_true',
                       help='Show the galaxy in a 3D viewer')
    parser.add_argument('--export-gif', type=str, default=None,
                       help='Export a turntable animation to this .gif path')
    parser.add_argument('--frames', type=int, default=36,
                       help='Frames per turntable orbit')
    parser.add_argument('--fps', type=int, default=12,
                       help='Frames per second for export')

    # Reproducibility
    parser.add_argument('--seed', type=int, default=None,
                       help='Random seed (a fresh one is drawn and printed if omitted)')

    # Info
    parser.add_argument('--list-backends', action='store_true',
                       help='List available backends and exit')
    parser.add_argument('--log-level', type=str, default='WARNING',
                       choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                       help='Logging verbosity')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if args.list_backends:
        backends = list_available_backends()
        print("Available backends:")
        for backend in backends:
            print(f"  - {backend}")
        return 0

    try:
        return run(args)
    except (GalaxyError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
