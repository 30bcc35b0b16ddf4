"""Multivariate normal rectangle probabilities (Genz's MVNDST)."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from pymvnorm.genz._lattice import (
    IntegrationStatus,
    LatticeSession,
    integrate_lattice,
)
from pymvnorm.genz._reduction import (
    BoundType,
    packed_index,
    reduce_and_factor,
    univariate_limits,
)
from pymvnorm.special._bivariate import bivariate_rectangle
from pymvnorm.utils._validation import ParameterError

logger = logging.getLogger(__name__)

MAX_DIMENSION = 500
UNIVARIATE_ERROR = 2e-16


@dataclass(frozen=True)
class MVNDSTResult:
    """Result of :func:`mvndst`.

    Attributes
    ----------
    value : float
        Probability estimate in [0, 1].
    error : float
        Estimated absolute error.
    inform : IntegrationStatus
        ``CONVERGED``, ``BUDGET_EXHAUSTED`` (value still usable, with the
        reported error) or ``INVALID_DIMENSION``.
    n_evaluations : int
        Integrand evaluations used; 0 when a closed form applied.
    """

    value: float
    error: float
    inform: IntegrationStatus
    n_evaluations: int = 0


def _check_arguments(lower, upper, infin, correl):
    infin = np.asarray(infin)
    if infin.ndim != 1:
        raise ParameterError("infin", f"must be 1-dimensional, got shape {infin.shape}")
    n = infin.shape[0]
    if not np.all(np.isin(infin, [b.value for b in BoundType])):
        raise ParameterError("infin", "bound types must be -1, 0, 1 or 2", infin)
    infin = infin.astype(np.int64)

    lower = np.asarray(lower, dtype=np.float64)
    upper = np.asarray(upper, dtype=np.float64)
    for name, arr in (("lower", lower), ("upper", upper)):
        if arr.shape != (n,):
            raise ParameterError(name, f"must have shape ({n},), got {arr.shape}")

    correl = np.asarray(correl, dtype=np.float64).ravel()
    expected = n * (n - 1) // 2
    if correl.shape[0] != expected:
        raise ParameterError(
            "correl",
            f"must hold the {expected} strictly lower correlations, got {correl.shape[0]}",
        )
    if np.any(np.isnan(correl)) or np.any(np.abs(correl) > 1.0):
        raise ParameterError("correl", "correlations must lie in [-1, 1]")

    uses_lower = (infin == BoundType.LOWER) | (infin == BoundType.BOTH)
    uses_upper = (infin == BoundType.UPPER) | (infin == BoundType.BOTH)
    if np.any(np.isnan(lower[uses_lower])) or np.any(np.isnan(upper[uses_upper])):
        raise ParameterError("lower", "limits selected by infin must not be NaN")
    return lower, upper, infin, correl


def _has_empty_limit(lower, upper, infin) -> bool:
    """True when some dimension's interval is empty through an infinite limit."""
    uses_lower = (infin == BoundType.LOWER) | (infin == BoundType.BOTH)
    uses_upper = (infin == BoundType.UPPER) | (infin == BoundType.BOTH)
    return bool(np.any(uses_lower & (lower == np.inf)) or np.any(uses_upper & (upper == -np.inf)))


def mvndst(
    lower,
    upper,
    infin,
    correl,
    *,
    max_evaluations: int | None = None,
    abs_tol: float = 1e-3,
    rel_tol: float = 1e-8,
    rng: np.random.Generator | int | None = None,
    session: LatticeSession | None = None,
    min_evaluations: int = 0,
) -> MVNDSTResult:
    """Probability that a standardized normal vector lies in a rectangle.

    Computes ``P(a_i <= X_i <= b_i for all i)`` for ``X ~ N(0, R)`` with
    unit-diagonal ``R`` by reordering and Cholesky factorization followed by
    randomized lattice integration of the sequential conditioning integrand.
    One and two active dimensions are computed in closed form.

    Parameters
    ----------
    lower, upper : array_like of shape (n,)
        Integration limits. Entries not selected by ``infin`` are ignored.
    infin : array_like of int, shape (n,)
        Bound type per dimension: -1 unbounded, 0 ``(-inf, upper]``,
        1 ``[lower, inf)``, 2 ``[lower, upper]``.
    correl : array_like of shape (n*(n-1)/2,)
        Correlations below the diagonal, row by row: ``R[1,0], R[2,0],
        R[2,1], R[3,0], ...``.
    max_evaluations : int, optional
        Integrand evaluation budget; defaults to ``1000 * n``.
    abs_tol, rel_tol : float
        Requested absolute and relative accuracy.
    rng : Generator, int or None
        Source of the lattice randomization.
    session : LatticeSession, optional
        Lattice state to reuse; with ``min_evaluations < 0`` the previous
        integration is continued.
    min_evaluations : int
        Minimum number of evaluations for the lattice stage.

    Returns
    -------
    result : MVNDSTResult

    Examples
    --------
    >>> res = mvndst([0.0, 0.0], [0.0, 0.0], [0, 0], [0.5])
    >>> round(res.value, 4)
    0.3333
    """
    infin_arr = np.asarray(infin)
    n = infin_arr.shape[0] if infin_arr.ndim == 1 else 0
    if n < 1 or n > MAX_DIMENSION:
        logger.debug("mvndst called with invalid dimension %d", n)
        return MVNDSTResult(0.0, 1.0, IntegrationStatus.INVALID_DIMENSION)

    lower, upper, infin_arr, correl = _check_arguments(lower, upper, infin_arr, correl)
    if max_evaluations is None:
        max_evaluations = 1000 * n
    if _has_empty_limit(lower, upper, infin_arr):
        return MVNDSTResult(0.0, 0.0, IntegrationStatus.CONVERGED)

    problem = reduce_and_factor(lower, upper, infin_arr, correl)
    m = problem.n_active

    if m == 0:
        return MVNDSTResult(1.0, 0.0, IntegrationStatus.CONVERGED)

    a, b, infi, cov = problem.lower, problem.upper, problem.infin, problem.cov
    if m == 1:
        d, e = univariate_limits(a[0], b[0], int(infi[0]))
        return MVNDSTResult(_clamp(e - d), UNIVARIATE_ERROR, IntegrationStatus.CONVERGED)

    if m == 2:
        if abs(cov[packed_index(1, 1)]) > 0:
            c = cov[packed_index(1, 0)]
            scale = np.sqrt(1.0 + c * c)
            if infi[1] != BoundType.UPPER:
                a[1] /= scale
            if infi[1] != BoundType.LOWER:
                b[1] /= scale
            value = bivariate_rectangle(a[:2], b[:2], infi[:2], c / scale)
        else:
            value = _merged_interval(a, b, infi)
        return MVNDSTResult(_clamp(value), UNIVARIATE_ERROR, IntegrationStatus.CONVERGED)

    lattice = integrate_lattice(
        m - 1,
        problem.integrand,
        min_evaluations,
        max_evaluations,
        abs_tol,
        rel_tol,
        rng=rng,
        session=session,
    )
    return MVNDSTResult(
        _clamp(lattice.value), lattice.error, lattice.status, lattice.n_evaluations
    )


def _merged_interval(a, b, infi) -> float:
    """Probability when the second row is a rescaled copy of the first."""
    lo, hi = a[0], b[0]
    if infi[1] != BoundType.UPPER:
        lo = max(lo, a[1]) if infi[0] != BoundType.UPPER else a[1]
    if infi[1] != BoundType.LOWER:
        hi = min(hi, b[1]) if infi[0] != BoundType.LOWER else b[1]
    flag = int(infi[0]) if infi[0] == infi[1] else int(BoundType.BOTH)
    d, e = univariate_limits(lo, hi, flag)
    return e - d


def _clamp(value: float) -> float:
    return float(min(max(value, 0.0), 1.0))
