"""Shared test fixtures for pymvnorm."""

from __future__ import annotations

import numpy as np
import pytest

from pymvnorm.backend import get_backend


@pytest.fixture
def xp_numpy():
    """NumPy backend fixture."""
    return get_backend("numpy")


@pytest.fixture
def xp_torch():
    """PyTorch backend fixture (skips if torch not installed)."""
    pytest.importorskip("torch")
    return get_backend("torch")


@pytest.fixture
def rng():
    """Seeded generator so lattice results are reproducible."""
    return np.random.Generator(np.random.MT19937(12345))


@pytest.fixture
def pd_3x3():
    """3x3 positive-definite symmetric matrix."""
    return np.array([[4.0, 2.0, 1.0],
                     [2.0, 5.0, 3.0],
                     [1.0, 3.0, 6.0]])


@pytest.fixture
def cov_3x3():
    """3x3 covariance matrix with known std devs and correlations."""
    # Sigma = D R D with D = diag(1.0, 1.5, 2.0)
    omega = np.diag([1.0, 1.5, 2.0])
    corr = np.array([[1.0, 0.6, 0.3],
                     [0.6, 1.0, 0.5],
                     [0.3, 0.5, 1.0]])
    return omega @ corr @ omega


@pytest.fixture
def equicorrelated_4x4():
    """4x4 correlation matrix with every off-diagonal entry -0.33."""
    r = np.full((4, 4), -0.33)
    np.fill_diagonal(r, 1.0)
    return r
