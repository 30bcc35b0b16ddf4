"""Limit reduction, variable ordering and Cholesky factorization.

Prepares a rectangle probability ``P(a <= X <= b)``, ``X ~ N(0, R)`` with
``R`` a correlation matrix, for sequential conditioning:

1. Dimensions with both limits infinite are moved to the end and dropped.
2. The remaining variables are ordered greedily, each time choosing the
   one with the smallest conditional probability given the expected values
   of the variables already placed (Gibson, Glasbey & Elston, 1994).
3. The lower Cholesky factor is computed in the same pass and each row is
   scaled so that its diagonal is one. Rows with zero conditional variance
   are folded into the row of the variable they depend on.

The factor is kept in packed row-major lower-triangular storage so that
row ``i`` is the contiguous slice ``cov[packed_index(i, 0):packed_index(i, i) + 1]``.

References
----------
Genz, A. (1992). Numerical computation of multivariate normal
probabilities. J. Comput. Graph. Statist. 1, 141-149.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

import numpy as np
from numpy.typing import NDArray

from pymvnorm.special._normal import _phi, _phinv

# Conditional variances and masses below this are treated as zero.
EPS = 1e-10
SQRT_TWO_PI = 2.506628274631001


class BoundType(IntEnum):
    """Kind of integration limits for one dimension."""

    UNBOUNDED = -1  # (-inf, inf)
    UPPER = 0  # (-inf, upper]
    LOWER = 1  # [lower, inf)
    BOTH = 2  # [lower, upper]


def packed_index(i, j):
    """Position of element ``(i, j)``, ``j <= i``, in packed lower storage."""
    return i * (i + 1) // 2 + j


def univariate_limits(a, b, infin: int):
    """Standard normal probabilities of the limits of one dimension.

    Parameters
    ----------
    a, b : float or ndarray
        Lower and upper limits. Only the ones ``infin`` marks as finite are
        read.
    infin : int
        Bound type (see :class:`BoundType`).

    Returns
    -------
    d, e : float or ndarray
        ``Phi(a)`` (0 when the lower limit is infinite) and ``Phi(b)`` (1
        when the upper limit is infinite), with ``e >= d``.
    """
    d = 0.0
    e = 1.0
    if infin >= 0:
        if infin != BoundType.UPPER:
            d = _phi(np.asarray(a, dtype=np.float64))
        if infin != BoundType.LOWER:
            e = _phi(np.asarray(b, dtype=np.float64))
    e = np.maximum(e, d)
    if np.ndim(d) == 0 and np.ndim(e) == 0:
        return float(d), float(e)
    return d, e


def _swap(values: NDArray, i, j) -> None:
    tmp = np.copy(values[i])
    values[i] = values[j]
    values[j] = tmp


def swap_rows_columns(p: int, q: int, a: NDArray, b: NDArray, infin: NDArray, cov: NDArray) -> None:
    """Symmetrically permute variables ``p <= q`` in place.

    Swaps the limits and bound types and the corresponding rows and columns
    of the packed matrix ``cov`` (diagonal, the entries before ``p``, the
    entries between ``p`` and ``q`` and the entries after ``q``).
    """
    n = infin.shape[0]
    _swap(a, p, q)
    _swap(b, p, q)
    _swap(infin, p, q)

    row_p = packed_index(p, 0)
    row_q = packed_index(q, 0)
    _swap(cov, row_p + p, row_q + q)

    cols = np.arange(p)
    _swap(cov, row_p + cols, row_q + cols)

    between = np.arange(p + 1, q)
    _swap(cov, packed_index(between, p), row_q + between)

    after = np.arange(q + 1, n)
    _swap(cov, packed_index(after, p), packed_index(after, q))


@dataclass
class ReducedProblem:
    """Reordered limits and scaled packed Cholesky factor.

    Only the first :attr:`n_active` entries of ``lower``, ``upper``,
    ``infin`` and ``y`` and the leading ``n_active`` rows of ``cov`` take
    part in the integration.

    Attributes
    ----------
    lower, upper : ndarray of shape (n,)
        Limits of each reordered dimension, divided by its Cholesky
        diagonal (or by the factor entry it was folded onto).
    infin : ndarray of int, shape (n,)
        Bound types after reordering; folded rows may have flipped types.
    cov : ndarray of shape (n*(n+1)/2,)
        Packed lower Cholesky factor with unit (or zero) diagonal.
    y : ndarray of shape (n,)
        Expected values of the conditioned variables used for ordering.
    n_inf : int
        Number of dimensions with both limits infinite.
    """

    lower: NDArray
    upper: NDArray
    infin: NDArray
    cov: NDArray
    y: NDArray
    n_inf: int

    @property
    def n_active(self) -> int:
        return int(self.infin.shape[0]) - self.n_inf

    def integrand(self, w: NDArray) -> NDArray:
        """Sequential conditioning integrand on the unit cube.

        Parameters
        ----------
        w : ndarray of shape (n_points, n_active - 1) or (n_active - 1,)
            Uniform coordinates. One coordinate is consumed per group of
            rows that share a variable, except the last group.

        Returns
        -------
        values : ndarray of shape (n_points,) or float
            Product of the conditional interval probabilities, 0 where any
            conditional interval is empty.
        """
        w = np.asarray(w, dtype=np.float64)
        single = w.ndim == 1
        if single:
            w = w[np.newaxis, :]
        m = self.n_active
        n_points = w.shape[0]

        result = np.ones(n_points)
        y = np.zeros((n_points, max(m - 1, 1)))
        ai = bi = 0.0
        has_lower = has_upper = False
        ik = 0
        for i in range(m):
            start = packed_index(i, 0)
            if ik > 0:
                shift = y[:, :ik] @ self.cov[start:start + ik]
            else:
                shift = 0.0
            flag = self.infin[i]
            if flag != BoundType.UPPER:
                lo = self.lower[i] - shift
                ai = np.maximum(ai, lo) if has_lower else lo
                has_lower = True
            if flag != BoundType.LOWER:
                hi = self.upper[i] - shift
                bi = np.minimum(bi, hi) if has_upper else hi
                has_upper = True

            if i == m - 1 or self.cov[packed_index(i + 1, ik + 1)] > 0:
                d, e = univariate_limits(ai, bi, 2 * has_lower + has_upper - 1)
                result = np.where(d >= e, 0.0, result * (e - d))
                if ik < m - 1:
                    y[:, ik] = _phinv(d + w[:, ik] * (e - d))
                ik += 1
                ai = bi = 0.0
                has_lower = has_upper = False

        if single:
            return float(result[0])
        return result


def _expected_value(amin: float, bmin: float, dmin: float, emin: float, infin: int) -> float:
    """Mean of a standard normal truncated to the chosen limits."""
    if emin > dmin + EPS:
        yl = 0.0
        yu = 0.0
        if infin != BoundType.UPPER:
            yl = -math.exp(-amin * amin / 2.0) / SQRT_TWO_PI
        if infin != BoundType.LOWER:
            yu = -math.exp(-bmin * bmin / 2.0) / SQRT_TWO_PI
        return (yu - yl) / (emin - dmin)
    if infin == BoundType.UPPER:
        return bmin
    if infin == BoundType.LOWER:
        return amin
    return (amin + bmin) / 2.0


def _fold_degenerate_row(i: int, a: NDArray, b: NDArray, infin: NDArray, cov: NDArray) -> None:
    """Rewrite row ``i`` with zero conditional variance onto a prior column.

    The limits are divided by the last non-negligible entry of the row,
    which becomes 1, and the row is moved up to sit directly after the
    rows already conditioned on that column.
    """
    row = packed_index(i, 0)
    for j in range(i - 1, -1, -1):
        pivot = cov[row + j]
        if abs(pivot) > EPS:
            a[i] /= pivot
            b[i] /= pivot
            if pivot < 0:
                a[i], b[i] = b[i], a[i]
                if infin[i] != BoundType.BOTH:
                    infin[i] = 1 - infin[i]
            cov[row:row + j + 1] /= pivot
            for l in range(j + 1, i):
                if cov[packed_index(l, j + 1)] > 0:
                    for k in range(i - 1, l - 1, -1):
                        cols = np.arange(k + 1)
                        _swap(cov, packed_index(k, 0) + cols, packed_index(k + 1, 0) + cols)
                        _swap(a, k, k + 1)
                        _swap(b, k, k + 1)
                        _swap(infin, k, k + 1)
                    break
            return
        cov[row + j] = 0.0


def reduce_and_factor(lower, upper, infin, correl) -> ReducedProblem:
    """Sort the integration limits and compute the scaled Cholesky factor.

    Parameters
    ----------
    lower, upper : array_like of shape (n,)
        Integration limits; entries the bound type does not use are
        ignored.
    infin : array_like of int, shape (n,)
        Bound types (see :class:`BoundType`).
    correl : array_like of shape (n*(n-1)/2,)
        Strictly lower triangle of the correlation matrix, row by row.

    Returns
    -------
    problem : ReducedProblem
    """
    lower = np.asarray(lower, dtype=np.float64)
    upper = np.asarray(upper, dtype=np.float64)
    infi = np.array(infin, dtype=np.int64)
    correl = np.asarray(correl, dtype=np.float64)
    n = infi.shape[0]

    a = np.where(infi >= 0, np.where(infi != BoundType.UPPER, lower, 0.0), 0.0)
    b = np.where(infi >= 0, np.where(infi != BoundType.LOWER, upper, 0.0), 0.0)
    n_inf = int(np.sum(infi < 0))

    cov = np.empty(packed_index(n, 0))
    rows = np.arange(n)
    diag = packed_index(rows, rows)
    off_diag = np.ones(cov.shape[0], dtype=bool)
    off_diag[diag] = False
    cov[off_diag] = correl
    cov[diag] = 1.0
    y = np.zeros(n)

    if n_inf == n:
        return ReducedProblem(a, b, infi, cov, y, n_inf)

    # Doubly infinite dimensions go to the innermost positions.
    for i in range(n - 1, n - n_inf - 1, -1):
        if infi[i] >= 0:
            for j in range(i):
                if infi[j] < 0:
                    swap_rows_columns(j, i, a, b, infi, cov)
                    break

    m = n - n_inf
    for i in range(m):
        row_i = packed_index(i, 0)

        # Variable with the smallest conditional probability goes next.
        dmin, emin = 0.0, 1.0
        amin = bmin = 0.0
        jmin = i
        cvdiag = 0.0
        for j in range(i, m):
            row_j = packed_index(j, 0)
            if cov[row_j + j] > EPS:
                sumsq = math.sqrt(cov[row_j + j])
                shift = float(np.dot(cov[row_j:row_j + i], y[:i]))
                aj = (a[j] - shift) / sumsq
                bj = (b[j] - shift) / sumsq
                d, e = univariate_limits(aj, bj, int(infi[j]))
                if emin + d >= e + dmin:
                    jmin = j
                    amin, bmin = aj, bj
                    dmin, emin = d, e
                    cvdiag = sumsq
        if jmin > i:
            swap_rows_columns(i, jmin, a, b, infi, cov)
        cov[row_i + i] = cvdiag

        if cvdiag > 0:
            below = np.arange(i + 1, m)
            column = packed_index(below, i)
            cov[column] /= cvdiag
            factor = cov[column]
            for offset, l in enumerate(below):
                row_l = packed_index(l, 0)
                cov[row_l + i + 1:row_l + l + 1] -= factor[offset] * factor[:offset + 1]

            y[i] = _expected_value(amin, bmin, dmin, emin, int(infi[i]))
            cov[row_i:row_i + i + 1] /= cvdiag
            a[i] /= cvdiag
            b[i] /= cvdiag
        else:
            below = np.arange(i + 1, m)
            cov[packed_index(below, i)] = 0.0
            _fold_degenerate_row(i, a, b, infi, cov)
            y[i] = 0.0

    return ReducedProblem(a, b, infi, cov, y, n_inf)
