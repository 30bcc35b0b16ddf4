"""Input validation utilities."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray


class ParameterError(ValueError):
    """Invalid argument passed to a distribution or integration routine.

    Attributes
    ----------
    param_name : str
        Name of the offending argument.
    value : object
        The rejected value, when it is useful for diagnostics.
    """

    def __init__(self, param_name: str, message: str, value: Any = None):
        self.param_name = param_name
        self.value = value
        super().__init__(f"{param_name}: {message}")


def check_symmetric(A: NDArray, tol: float = 1e-10) -> bool:
    """Check if a matrix is symmetric within tolerance."""
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        return False
    return np.allclose(A, A.T, atol=tol)


def check_square(A: NDArray, name: str = "A") -> NDArray:
    """Return ``A`` as a float array, raising if it is not square and finite."""
    A = np.asarray(A, dtype=np.float64)
    if A.ndim != 2:
        raise ParameterError(name, f"must be 2-dimensional, got shape {A.shape}")
    if A.shape[0] != A.shape[1]:
        raise ParameterError(name, f"must be square, got shape {A.shape}")
    if not np.all(np.isfinite(A)):
        raise ParameterError(name, "must contain only finite values")
    return A


def check_vector(
    x: Any,
    size: int | None = None,
    name: str = "x",
    *,
    allow_inf: bool = False,
) -> NDArray:
    """Return ``x`` as a 1-D float array of the expected length.

    NaN is always rejected; infinities only when ``allow_inf`` is False.
    """
    x = np.asarray(x, dtype=np.float64)
    if x.ndim == 0:
        x = x.reshape(1)
    if x.ndim != 1:
        raise ParameterError(name, f"must be 1-dimensional, got shape {x.shape}")
    if size is not None and x.shape[0] != size:
        raise ParameterError(
            name,
            f"must have length {size} to match the distribution dimension, "
            f"got {x.shape[0]}",
        )
    if np.any(np.isnan(x)):
        raise ParameterError(name, "must not contain NaN")
    if not allow_inf and not np.all(np.isfinite(x)):
        raise ParameterError(name, "must contain only finite values")
    return x
