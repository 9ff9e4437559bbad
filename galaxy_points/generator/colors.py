"""Color parsing for the radial inner/outer gradient.

Colors are kept as the channel values they were given in (for hex strings,
the gamma-encoded sRGB values) and blended without any color-space
conversion.
"""

import numbers
from typing import Any, Tuple

import numpy as np
from matplotlib.colors import to_hex, to_rgb

from galaxy_points.errors import InvalidParameterError

RGB = Tuple[float, float, float]


def parse_color(value: Any, name: str = "color") -> RGB:
    """Normalize a color specification to an RGB triple in [0, 1].

    Accepts anything matplotlib understands as a color string (``"#ff6030"``,
    ``"#f63"``, ``"orange"``), float triples in [0, 1], and integer triples.
    An integer triple with any channel above 1 is read as 8-bit channels
    (0-255); one made of 0s and 1s is already a unit color.

    Args:
        value: Color specification
        name: Parameter name used in error messages

    Returns:
        ``(r, g, b)`` tuple of floats

    Raises:
        InvalidParameterError: If the value is not a valid color
    """
    if isinstance(value, str):
        try:
            r, g, b = to_rgb(value)
        except ValueError:
            raise InvalidParameterError(name, value, "not a recognised color") from None
        return (float(r), float(g), float(b))

    try:
        channels = tuple(value)
    except TypeError:
        raise InvalidParameterError(name, value, "expected a color string or RGB triple") from None
    if len(channels) != 3:
        raise InvalidParameterError(name, value, "expected exactly 3 channels")

    for channel in channels:
        if isinstance(channel, bool) or not isinstance(channel, numbers.Real):
            raise InvalidParameterError(name, value, "channels must be numbers")

    if (all(isinstance(channel, numbers.Integral) for channel in channels)
            and any(channel > 1 for channel in channels)):
        if any(channel < 0 or channel > 255 for channel in channels):
            raise InvalidParameterError(name, value, "8-bit channels must lie in [0, 255]")
        return tuple(float(channel) / 255.0 for channel in channels)

    rgb = tuple(float(channel) for channel in channels)
    if not all(np.isfinite(channel) and 0.0 <= channel <= 1.0 for channel in rgb):
        raise InvalidParameterError(name, value, "channels must lie in [0, 1]")
    return rgb


def color_to_hex(rgb: RGB) -> str:
    """Format an RGB triple as ``#rrggbb`` (for the color picker)."""
    return to_hex(rgb)
