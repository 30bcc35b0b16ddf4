"""NumPy backend implementation."""

from __future__ import annotations

import numpy as np


class NumpyBackend:
    """Backend returning plain NumPy arrays."""

    name = "numpy"

    @staticmethod
    def asarray(data):
        """Convert backend output back into this backend's container."""
        return np.asarray(data, dtype=np.float64)

    @staticmethod
    def to_numpy(x):
        return np.asarray(x)
