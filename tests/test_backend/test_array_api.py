"""Tests for backend abstraction."""

from __future__ import annotations

import numpy as np
import pytest

from pymvnorm.backend import (
    array_namespace,
    from_float64,
    get_backend,
    set_backend,
    to_float64,
)
from pymvnorm.special import standard_normal_cdf


class TestGetBackend:
    def test_numpy_backend(self):
        xp = get_backend("numpy")
        assert xp.name == "numpy"

    def test_default_is_numpy(self):
        xp = get_backend()
        assert xp.name == "numpy"

    def test_invalid_backend(self):
        with pytest.raises(ValueError):
            get_backend("invalid")

    def test_set_invalid_backend(self):
        with pytest.raises(ValueError):
            set_backend("jax")

    def test_cached_instance(self):
        assert get_backend("numpy") is get_backend("numpy")


class TestArrayNamespace:
    def test_infer_numpy(self):
        xp = array_namespace(np.array([1.0]))
        assert xp.name == "numpy"

    def test_infer_none_returns_default(self):
        xp = array_namespace(None)
        assert xp.name == "numpy"

    def test_infer_list_returns_default(self):
        xp = array_namespace([1.0, 2.0])
        assert xp.name == "numpy"


class TestConversion:
    def test_to_float64_from_list(self):
        x, xp = to_float64([1, 2, 3])
        assert x.dtype == np.float64
        assert xp.name == "numpy"
        np.testing.assert_array_equal(x, [1.0, 2.0, 3.0])

    def test_from_float64_scalar(self, xp_numpy):
        out = from_float64(np.float64(0.25), xp_numpy, scalar=True)
        assert isinstance(out, float)

    def test_from_float64_array(self, xp_numpy):
        out = from_float64(np.array([0.5, 1.0]), xp_numpy, scalar=False)
        assert isinstance(out, np.ndarray)
        assert out.dtype == np.float64


class TestTorchBackend:
    def test_torch_tensor_round_trip(self, xp_torch):
        import torch

        z = torch.tensor([-1.0, 0.0, 1.0], dtype=torch.float64)
        p = standard_normal_cdf(z)
        assert isinstance(p, torch.Tensor)
        np.testing.assert_allclose(p.numpy()[1], 0.5, atol=1e-15)

    def test_infer_torch(self, xp_torch):
        import torch

        xp = array_namespace(torch.zeros(2))
        assert xp.name == "torch"
