"""Backend abstraction: select NumPy or PyTorch array containers."""

from __future__ import annotations

from typing import Any, Literal

import numpy as np

BackendName = Literal["numpy", "torch"]

_DEFAULT_BACKEND: BackendName = "numpy"

# Cached backend instances
_backends: dict[str, Any] = {}


def get_backend(name: BackendName | None = None) -> Any:
    """Return a backend namespace for converting arrays in and out of NumPy.

    Parameters
    ----------
    name : {"numpy", "torch"} or None
        Backend name. If None, returns the current default backend.

    Returns
    -------
    backend : NumpyBackend or TorchBackend
    """
    if name is None:
        name = _DEFAULT_BACKEND

    if name not in _backends:
        if name == "numpy":
            from pymvnorm.backend._numpy_backend import NumpyBackend
            _backends[name] = NumpyBackend()
        elif name == "torch":
            from pymvnorm.backend._torch_backend import TorchBackend
            _backends[name] = TorchBackend()
        else:
            raise ValueError(f"Unknown backend: {name!r}. Use 'numpy' or 'torch'.")

    return _backends[name]


def set_backend(name: BackendName) -> None:
    """Set the default backend globally.

    Parameters
    ----------
    name : {"numpy", "torch"}
        Backend used when ``xp`` is not provided and cannot be inferred.
    """
    global _DEFAULT_BACKEND
    if name not in ("numpy", "torch"):
        raise ValueError(f"Unknown backend: {name!r}. Use 'numpy' or 'torch'.")
    _DEFAULT_BACKEND = name


def array_namespace(*arrays: Any) -> Any:
    """Infer the backend from the input arrays.

    A PyTorch tensor anywhere in ``arrays`` selects the torch backend, a
    NumPy array selects NumPy; plain Python scalars and lists fall back to
    the default backend.
    """
    for arr in arrays:
        if arr is None:
            continue
        cls_name = type(arr).__module__
        if cls_name.startswith("torch"):
            return get_backend("torch")
        if isinstance(arr, np.ndarray):
            return get_backend("numpy")

    return get_backend()


def to_float64(x: Any, xp: Any = None) -> tuple[np.ndarray, Any]:
    """Return ``x`` as a float64 NumPy array together with its backend.

    Every numeric kernel in the package runs on NumPy; the backend is kept
    so results can be handed back in the caller's container.
    """
    if xp is None:
        xp = array_namespace(x)
    return np.asarray(xp.to_numpy(x), dtype=np.float64), xp


def from_float64(values: Any, xp: Any, scalar: bool) -> Any:
    """Hand a NumPy result back in the caller's container.

    Scalar inputs give Python floats regardless of backend.
    """
    if scalar:
        return float(values)
    return xp.asarray(values)
