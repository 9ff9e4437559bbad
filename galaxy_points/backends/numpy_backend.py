"""NumPy backend implementation."""

from typing import Any, Sequence
import numpy as np
from galaxy_points.backends.base import Backend


class NumPyBackend(Backend):
    """NumPy-based backend (baseline, always available)."""

    @property
    def name(self) -> str:
        return "numpy"

    @property
    def device(self) -> str:
        return "cpu"

    def array(self, data: Any) -> np.ndarray:
        return np.asarray(data, dtype=np.float64)

    def arange(self, n: int) -> np.ndarray:
        return np.arange(n, dtype=np.float64)

    def remainder(self, array: Any, divisor: float) -> np.ndarray:
        return np.remainder(array, divisor)

    def sin(self, array: Any) -> np.ndarray:
        return np.sin(array)

    def cos(self, array: Any) -> np.ndarray:
        return np.cos(array)

    def power(self, base: Any, exponent: float) -> np.ndarray:
        return np.power(base, exponent)

    def stack(self, arrays: Sequence[Any], axis: int = 0) -> np.ndarray:
        return np.stack(arrays, axis=axis)

    def expand_dims(self, array: Any, axis: int) -> np.ndarray:
        return np.expand_dims(array, axis=axis)

    def to_numpy(self, array: Any) -> np.ndarray:
        return np.asarray(array)
