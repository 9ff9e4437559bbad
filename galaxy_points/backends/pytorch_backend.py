"""PyTorch backend implementation (optional, GPU support)."""

from typing import Any, Optional, Sequence
import numpy as np
from galaxy_points.backends.base import Backend

try:
    import torch
    TORCH_AVAILABLE = True
except ImportError:
    TORCH_AVAILABLE = False


class PyTorchBackend(Backend):
    """PyTorch-based backend with GPU support."""

    def __init__(self, device: Optional[str] = None):
        """Initialize PyTorch backend.

        Args:
            device: Device string (e.g., 'cpu', 'cuda:0'). Auto-selects if None.
        """
        if not TORCH_AVAILABLE:
            raise ImportError("PyTorch not available. Install with: pip install torch")

        if device is None:
            self._device = torch.device('cuda' if torch.cuda.is_available() else 'cpu')
        else:
            self._device = torch.device(device)

    @property
    def name(self) -> str:
        return "pytorch"

    @property
    def device(self) -> str:
        return str(self._device)

    def array(self, data: Any) -> Any:
        if isinstance(data, np.ndarray):
            tensor = torch.from_numpy(np.ascontiguousarray(data, dtype=np.float64))
        else:
            tensor = torch.tensor(data, dtype=torch.float64)
        return tensor.to(self._device)

    def arange(self, n: int) -> Any:
        return torch.arange(n, dtype=torch.float64, device=self._device)

    def remainder(self, array: Any, divisor: float) -> Any:
        return torch.remainder(array, divisor)

    def sin(self, array: Any) -> Any:
        return torch.sin(array)

    def cos(self, array: Any) -> Any:
        return torch.cos(array)

    def power(self, base: Any, exponent: float) -> Any:
        return torch.pow(base, exponent)

    def stack(self, arrays: Sequence[Any], axis: int = 0) -> Any:
        return torch.stack(list(arrays), dim=axis)

    def expand_dims(self, array: Any, axis: int) -> Any:
        return torch.unsqueeze(array, axis)

    def to_numpy(self, array: Any) -> np.ndarray:
        return array.detach().cpu().numpy()
