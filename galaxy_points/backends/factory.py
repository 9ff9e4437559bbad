"""Backend factory for creating and managing compute backends."""

import logging
from typing import List, Optional
from galaxy_points.backends.base import Backend
from galaxy_points.backends.numpy_backend import NumPyBackend
from galaxy_points.backends.pytorch_backend import PyTorchBackend, TORCH_AVAILABLE

logger = logging.getLogger(__name__)


def list_available_backends() -> List[str]:
    """List all available backends.

    Returns:
        List of backend names that can be instantiated
    """
    backends = ["numpy"]  # Always available

    if TORCH_AVAILABLE:
        backends.append("pytorch")

    return backends


def _cuda_available() -> bool:
    if not TORCH_AVAILABLE:
        return False
    import torch
    return torch.cuda.is_available()


def get_backend(name: Optional[str] = None, prefer_gpu: bool = False) -> Backend:
    """Get a backend instance.

    Args:
        name: Backend name ('numpy', 'pytorch'). If None, auto-selects.
        prefer_gpu: If True and name is None, use PyTorch on CUDA when present.

    Returns:
        Backend instance

    Raises:
        ValueError: If requested backend is not available
    """
    if name is None:
        if prefer_gpu and _cuda_available():
            backend = PyTorchBackend("cuda")
        else:
            backend = NumPyBackend()
        logger.debug("Auto-selected backend %s on %s", *backend.describe())
        return backend

    name_lower = name.lower()

    if name_lower == "numpy":
        return NumPyBackend()
    elif name_lower in ("pytorch", "torch"):
        if not TORCH_AVAILABLE:
            raise ValueError("PyTorch backend not available. Install with: pip install torch")
        return PyTorchBackend()
    else:
        available = list_available_backends()
        raise ValueError(f"Unknown backend '{name}'. Available: {available}")
