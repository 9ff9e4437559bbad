"""Galaxy generation parameters."""

import math
import numbers
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, List, Tuple, Union

from galaxy_points.errors import InvalidParameterError
from galaxy_points.generator.colors import RGB, parse_color

# (min, max, step) of each control-panel slider. Values outside these ranges
# are still valid for generation; the panel simply cannot produce them.
PANEL_RANGES: Dict[str, Tuple[float, float, float]] = {
    "count": (100, 1000000, 100),
    "particle_size": (0.001, 0.1, 0.001),
    "radius": (0.01, 20.0, 0.01),
    "branches": (2, 20, 1),
    "spin": (-5.0, 5.0, 0.001),
    "randomness": (0.0, 2.0, 0.001),
    "randomness_power": (1.0, 10.0, 0.001),
}

PANEL_LABELS: Dict[str, str] = {
    "count": "Stars",
    "particle_size": "Star size",
    "radius": "Galaxy radius",
    "branches": "Galaxy branches",
    "spin": "Branch spin angle",
    "randomness": "Randomness",
    "randomness_power": "Randomness power",
    "inner_color": "Inner color",
    "outer_color": "Outer color",
}

INTEGER_FIELDS = ("count", "branches")
COLOR_FIELDS = ("inner_color", "outer_color")


@dataclass(frozen=True)
class GalaxyParameters:
    """Immutable parameter set for one galaxy generation.

    Construction validates every field and raises
    :class:`~galaxy_points.errors.InvalidParameterError` on the first
    violation; colors are normalized to float RGB triples.

    Attributes:
        count: Number of particles (>= 1)
        particle_size: Point size hint for renderers (> 0); unused by the math
        radius: Maximum galactic radius (> 0)
        branches: Number of spiral arms (>= 1)
        spin: Radians of twist per unit radius
        randomness: Maximum jitter per axis (>= 0)
        randomness_power: Exponent applied to jitter draws (>= 1)
        inner_color: Color at the galactic center
        outer_color: Color at ``radius``
    """
    count: int = 100000
    particle_size: float = 0.01
    radius: float = 5.0
    branches: int = 3
    spin: float = 1.0
    randomness: float = 0.2
    randomness_power: float = 3.0
    inner_color: Union[str, RGB] = "#ff6030"
    outer_color: Union[str, RGB] = "#1b3984"

    def __post_init__(self):
        for name in INTEGER_FIELDS:
            object.__setattr__(self, name, _as_int(name, getattr(self, name)))
        for name in ("particle_size", "radius", "spin", "randomness", "randomness_power"):
            object.__setattr__(self, name, _as_float(name, getattr(self, name)))
        for name in COLOR_FIELDS:
            object.__setattr__(self, name, parse_color(getattr(self, name), name))
        self.validate()

    def validate(self):
        """Check the range preconditions.

        Raises:
            InvalidParameterError: If any field is out of range
        """
        if self.count < 1:
            raise InvalidParameterError("count", self.count, "must be >= 1")
        if self.branches < 1:
            raise InvalidParameterError("branches", self.branches, "must be >= 1")
        if self.radius <= 0:
            raise InvalidParameterError("radius", self.radius, "must be > 0")
        if self.particle_size <= 0:
            raise InvalidParameterError("particle_size", self.particle_size, "must be > 0")
        if self.randomness < 0:
            raise InvalidParameterError("randomness", self.randomness, "must be >= 0")
        if self.randomness_power < 1:
            raise InvalidParameterError("randomness_power", self.randomness_power, "must be >= 1")

    def replace(self, **changes) -> "GalaxyParameters":
        """Return a new, validated parameter set with some fields changed."""
        unknown = set(changes) - {f.name for f in fields(self)}
        if unknown:
            name = sorted(unknown)[0]
            raise InvalidParameterError(name, changes[name], "unknown parameter")
        return replace(self, **changes)

    def outside_panel_range(self) -> List[str]:
        """Names of numeric fields the control panel cannot represent."""
        names = []
        for name, (low, high, _) in PANEL_RANGES.items():
            value = getattr(self, name)
            if value < low or value > high:
                names.append(name)
        return names

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view (colors as lists) for JSON/YAML config files."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        for name in COLOR_FIELDS:
            data[name] = list(data[name])
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GalaxyParameters":
        """Build parameters from a mapping; missing keys take defaults."""
        known = {f.name for f in fields(cls)}
        for key, value in data.items():
            if key not in known:
                raise InvalidParameterError(key, value, "unknown parameter")
        return cls(**data)


def _as_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(name, value, "must be an integer")
    return int(value)


def _as_float(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(name, value, "must be a number")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidParameterError(name, value, "must be finite")
    return value


def snap_to_panel(name: str, value: float):
    """Round a raw slider value onto that slider's range and step grid."""
    low, high, step = PANEL_RANGES[name]
    snapped = low + round((value - low) / step) * step
    snapped = min(max(snapped, low), high)
    if name in INTEGER_FIELDS:
        return int(round(snapped))
    return round(snapped, 6)
