"""Covariance factorizations used for densities and sampling.

A positive-definite covariance is handled by its Cholesky factor. Anything
else (singular but positive semi-definite, or slightly indefinite from
rounding) falls back to the singular value decomposition, which gives a
pseudo-inverse solve and a pseudo-determinant.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
import scipy.linalg
from numpy.typing import NDArray

from pymvnorm.utils._validation import ParameterError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CholeskyFactorization:
    """Lower Cholesky factor ``L`` with ``covariance = L L^T``."""

    lower: NDArray

    @property
    def kind(self) -> str:
        return "cholesky"

    def solve(self, z: NDArray) -> NDArray:
        return scipy.linalg.cho_solve((self.lower, True), z)

    def log_determinant(self) -> float:
        return 2.0 * float(np.sum(np.log(np.diag(self.lower))))

    def sampling_factor(self) -> NDArray:
        return self.lower


@dataclass(frozen=True)
class SVDFactorization:
    """Singular value decomposition ``covariance = U diag(s) V^T``.

    Singular values at or below ``tol`` are treated as zero.
    """

    u: NDArray
    s: NDArray
    vt: NDArray
    tol: float

    @property
    def kind(self) -> str:
        return "svd"

    @property
    def rank(self) -> int:
        return int(np.sum(self.s > self.tol))

    def solve(self, z: NDArray) -> NDArray:
        """Minimum-norm least-squares solution (pseudo-inverse solve)."""
        keep = self.s > self.tol
        coef = (self.u[:, keep].T @ z) / self.s[keep]
        return self.vt[keep].T @ coef

    def log_determinant(self) -> float:
        """Log of the product of the non-zero singular values."""
        keep = self.s > self.tol
        return float(np.sum(np.log(self.s[keep])))

    def sampling_factor(self) -> NDArray:
        return self.u * np.sqrt(self.s)


def factorize(covariance: NDArray) -> CholeskyFactorization | SVDFactorization:
    """Factor a symmetric covariance matrix.

    Parameters
    ----------
    covariance : ndarray of shape (D, D)

    Returns
    -------
    factorization : CholeskyFactorization or SVDFactorization
    """
    try:
        lower = scipy.linalg.cholesky(covariance, lower=True)
        return CholeskyFactorization(lower)
    except np.linalg.LinAlgError:
        logger.debug("Covariance is not positive-definite; using the SVD")

    u, s, vt = scipy.linalg.svd(covariance)
    tol = s.max(initial=0.0) * max(covariance.shape) * np.finfo(np.float64).eps
    factorization = SVDFactorization(u, s, vt, tol)
    logdet = factorization.log_determinant()
    if not np.isfinite(logdet):
        raise ParameterError(
            "covariance", "log pseudo-determinant is not finite", logdet
        )
    return factorization
