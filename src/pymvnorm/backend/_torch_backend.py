"""PyTorch backend implementation (optional dependency)."""

from __future__ import annotations

from typing import Any

import numpy as np


def _import_torch():
    """Lazy import of torch."""
    try:
        import torch
        return torch
    except ImportError as e:
        raise ImportError(
            "PyTorch is required for the torch backend. "
            "Install it with: pip install pymvnorm[torch]"
        ) from e


class TorchBackend:
    """Backend returning PyTorch tensors.

    The numerics run in NumPy; tensors are detached on the way in and
    rebuilt on the device of this backend on the way out.
    """

    name = "torch"

    def __init__(self, device: str = "cpu", dtype: Any = None):
        self._torch = _import_torch()
        self.device = device
        self._default_dtype = dtype or self._torch.float64

    def asarray(self, data):
        """Convert NumPy output into a tensor on this backend's device."""
        return self._torch.as_tensor(data, dtype=self._default_dtype, device=self.device)

    def to_numpy(self, x):
        if isinstance(x, self._torch.Tensor):
            return x.detach().cpu().numpy()
        return np.asarray(x)
