"""Backend abstraction for NumPy/PyTorch array containers."""

from pymvnorm.backend._array_api import (
    array_namespace,
    from_float64,
    get_backend,
    set_backend,
    to_float64,
)

__all__ = ["get_backend", "set_backend", "array_namespace", "to_float64", "from_float64"]
