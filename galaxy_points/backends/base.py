"""Abstract base class for compute backends."""

from abc import ABC, abstractmethod
from typing import Any, Sequence, Tuple
import numpy as np


class Backend(ABC):
    """Abstract interface for array computation backends.

    The generator expresses its per-particle math through this interface so
    the same code runs on NumPy or on PyTorch (CPU or CUDA). Random draws are
    always made on the host with a NumPy generator and moved in with
    :meth:`array`, which keeps seeding independent of the backend.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this backend."""
        pass

    @property
    @abstractmethod
    def device(self) -> str:
        """Return the device type (e.g., 'cpu', 'cuda:0')."""
        pass

    @abstractmethod
    def array(self, data: Any) -> Any:
        """Create a float64 backend array from host data.

        Args:
            data: Input data (list, numpy array, etc.)

        Returns:
            Backend array object
        """
        pass

    @abstractmethod
    def arange(self, n: int) -> Any:
        """Float64 array ``[0, 1, ..., n - 1]``."""
        pass

    @abstractmethod
    def remainder(self, array: Any, divisor: float) -> Any:
        """Element-wise remainder with the sign of the divisor."""
        pass

    @abstractmethod
    def sin(self, array: Any) -> Any:
        """Element-wise sine."""
        pass

    @abstractmethod
    def cos(self, array: Any) -> Any:
        """Element-wise cosine."""
        pass

    @abstractmethod
    def power(self, base: Any, exponent: float) -> Any:
        """Element-wise power."""
        pass

    @abstractmethod
    def stack(self, arrays: Sequence[Any], axis: int = 0) -> Any:
        """Stack arrays along a new axis. E.g. stack([x, y, z], axis=1) -> (n, 3)."""
        pass

    @abstractmethod
    def expand_dims(self, array: Any, axis: int) -> Any:
        """Expand the shape by inserting a new axis at axis (e.g. (n,) -> (n, 1))."""
        pass

    @abstractmethod
    def to_numpy(self, array: Any) -> np.ndarray:
        """Convert backend array to NumPy array.

        This is needed to fill the host-side particle buffers.
        """
        pass

    def describe(self) -> Tuple[str, str]:
        """Return ``(name, device)`` for logging."""
        return self.name, self.device
