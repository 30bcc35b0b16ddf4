"""Randomized Korobov lattice rules for integrals over the unit cube.

Each round averages ``samples`` independent random shifts of a rank-1
lattice rule with ``P`` points (antithetic, so ``2 P`` integrand calls per
shift). The replications give an unbiased variance estimate, which is
pooled with the previous rounds by precision weighting. Rounds continue
with the next larger prime until the error estimate meets the tolerance or
the evaluation budget is spent.

References
----------
Cranley, R. & Patterson, T.N.L. (1976). Randomization of number theoretic
methods for multiple integration. SIAM J. Numer. Anal. 13, 904-914.
Keast, P. (1973). Optimal parameters for multidimensional integration.
SIAM J. Numer. Anal. 10, 831-838.
Niederreiter, H. (1972). On a number-theoretical integration method.
Aequationes Mathematicae 8, 304-311.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable

import numpy as np
from numpy.typing import NDArray

from pymvnorm.genz._tables import GENERATORS, N_GENERATOR_DIMS, N_SIZES, PRIMES
from pymvnorm.utils._seeds import make_rng

logger = logging.getLogger(__name__)

MIN_SAMPLES = 8
MAX_DIMENSION = 499
ERROR_FACTOR = 3.5

# Lattice points are pushed through the integrand in blocks of this many rows.
CHUNK_SIZE = 4096


class IntegrationStatus(IntEnum):
    """Outcome code of a lattice integration or an ``mvndst`` call."""

    CONVERGED = 0
    BUDGET_EXHAUSTED = 1
    INVALID_DIMENSION = 2


class LatticeState(Enum):
    """Lifecycle of a :class:`LatticeSession`."""

    INITIALIZING = "initializing"
    REFINING = "refining"
    CONVERGED = "converged"
    BUDGET_EXHAUSTED = "budget_exhausted"


@dataclass
class LatticeSession:
    """State carried between lattice integration calls.

    A session is owned by the caller. Passing it back with a negative
    ``min_evaluations`` continues the previous integration of the same
    integrand from the stored estimate, variance weight, lattice size and
    replication count; otherwise it is reset.

    Attributes
    ----------
    size_index : int
        Index into the table of lattice primes.
    samples : int
        Number of random shifts per round.
    variance_estimate : float
        Precision weight of the pooled estimate.
    estimate : float
        Current pooled estimate of the integral.
    state : LatticeState
    n_evaluations : int
        Integrand evaluations spent by the last call.
    """

    size_index: int = 0
    samples: int = MIN_SAMPLES
    variance_estimate: float = 0.0
    estimate: float = 0.0
    state: LatticeState = LatticeState.INITIALIZING
    n_evaluations: int = 0

    def reset(self, ndim: int, min_evaluations: int) -> None:
        """Start over, picking the smallest lattice that covers the minimum."""
        self.estimate = 0.0
        self.variance_estimate = 0.0
        self.samples = MIN_SAMPLES
        self.state = LatticeState.INITIALIZING
        for i in range(min(ndim, 10) - 1, N_SIZES):
            self.size_index = i
            if min_evaluations < 2 * self.samples * PRIMES[i]:
                return
        self.samples = max(MIN_SAMPLES, min_evaluations // (2 * int(PRIMES[self.size_index])))


@dataclass(frozen=True)
class LatticeResult:
    """Result of :func:`integrate_lattice`.

    Attributes
    ----------
    value : float
        Estimated integral.
    error : float
        Estimated absolute error (3.5 standard errors).
    status : IntegrationStatus
    n_evaluations : int
        Integrand evaluations used.
    """

    value: float
    error: float
    status: IntegrationStatus
    n_evaluations: int


def korobov_vector(ndim: int, size_index: int) -> NDArray:
    """Generating vector of the rank-1 lattice, scaled to [0, 1).

    The first 100 components follow the Korobov form ``c^k mod P`` with the
    tabulated optimal ``c`` for this dimension; further components use
    Niederreiter's ``2^(k/(ndim-99)) P`` construction.
    """
    prime = int(PRIMES[size_index])
    vk = np.empty(ndim)
    vk[0] = 1.0 / prime
    c = int(GENERATORS[size_index, min(ndim - 1, N_GENERATOR_DIMS - 1) - 1]) if ndim > 1 else 1
    k = 1
    for i in range(1, ndim):
        if i < N_GENERATOR_DIMS:
            k = (c * k) % prime
            vk[i] = k / prime
        else:
            vk[i] = int(prime * 2.0 ** ((i + 1 - N_GENERATOR_DIMS) / (ndim - N_GENERATOR_DIMS + 1)))
            vk[i] = (vk[i] / prime) % 1.0
    return vk


def lattice_rule_sum(
    ndim: int,
    integrand: Callable[[NDArray], NDArray],
    prime: int,
    vk: NDArray,
    rng: np.random.Generator,
) -> float:
    """One randomly shifted, antithetic lattice rule estimate.

    The first ``min(ndim, 100)`` components of ``vk`` are randomly
    permuted in place before the shift is drawn.

    Parameters
    ----------
    ndim : int
        Number of coordinates.
    integrand : callable
        Maps an ``(n_points, ndim)`` array to ``n_points`` values.
    prime : int
        Number of lattice points.
    vk : ndarray of shape (ndim,)
        Generating vector; modified in place.
    rng : numpy.random.Generator

    Returns
    -------
    mean : float
        Average of the integrand over the ``2 * prime`` points.
    """
    nk = min(ndim, N_GENERATOR_DIMS)
    for j in range(nk - 1):
        jp = j + int(rng.random() * (nk - j))
        vk[j], vk[jp] = vk[jp], vk[j]

    shift = rng.random(ndim)

    total = 0.0
    for start in range(1, prime + 1, CHUNK_SIZE):
        k = np.arange(start, min(start + CHUNK_SIZE, prime + 1), dtype=np.float64)
        x = np.abs(2.0 * np.mod(k[:, np.newaxis] * vk + shift, 1.0) - 1.0)
        total += float(np.sum(integrand(x))) + float(np.sum(integrand(1.0 - x)))
    return total / (2.0 * prime)


def integrate_lattice(
    ndim: int,
    integrand: Callable[[NDArray], NDArray],
    min_evaluations: int = 0,
    max_evaluations: int = 1000,
    abs_tol: float = 1e-3,
    rel_tol: float = 1e-8,
    *,
    rng: np.random.Generator | int | None = None,
    session: LatticeSession | None = None,
) -> LatticeResult:
    """Integrate over ``[0, 1]^ndim`` with randomized lattice rules.

    Parameters
    ----------
    ndim : int
        Number of coordinates, 1 to 499.
    integrand : callable
        Vectorized integrand, ``(n_points, ndim) -> (n_points,)``.
    min_evaluations : int
        Minimum number of integrand evaluations; a negative value continues
        ``session`` instead of resetting it.
    max_evaluations : int
        Evaluation budget for this call.
    abs_tol, rel_tol : float
        Stop once ``error <= max(abs_tol, rel_tol * |value|)``.
    rng : Generator, int or None
        Source of the random shifts and permutations.
    session : LatticeSession, optional
        State to reset or continue. A private session is used if omitted.

    Returns
    -------
    result : LatticeResult
    """
    if ndim < 1 or ndim > MAX_DIMENSION:
        return LatticeResult(0.0, 1.0, IntegrationStatus.INVALID_DIMENSION, 0)

    rng = make_rng(rng)
    if session is None:
        session = LatticeSession()
    if min_evaluations >= 0:
        session.reset(ndim, min_evaluations)

    n_evaluations = 0
    status = IntegrationStatus.BUDGET_EXHAUSTED
    error = 1.0
    while True:
        session.state = LatticeState.REFINING
        prime = int(PRIMES[session.size_index])
        vk = korobov_vector(ndim, session.size_index)

        mean = 0.0
        var_sum = 0.0
        for i in range(1, session.samples + 1):
            value = lattice_rule_sum(ndim, integrand, prime, vk, rng)
            diff = (value - mean) / i
            mean += diff
            var_sum = (i - 2) * var_sum / i + diff * diff

        n_evaluations += 2 * session.samples * prime
        var_prod = session.variance_estimate * var_sum
        session.estimate += (mean - session.estimate) / (1.0 + var_prod)
        if var_sum > 0:
            session.variance_estimate = (1.0 + var_prod) / var_sum
        error = ERROR_FACTOR * math.sqrt(var_sum / (1.0 + var_prod))

        logger.debug(
            "Lattice round: prime=%d samples=%d estimate=%.6g error=%.3g",
            prime, session.samples, session.estimate, error,
        )

        if error <= max(abs_tol, rel_tol * abs(session.estimate)):
            status = IntegrationStatus.CONVERGED
            session.state = LatticeState.CONVERGED
            break

        if session.size_index < N_SIZES - 1:
            session.size_index += 1
        else:
            remaining = (max_evaluations - n_evaluations) // (2 * prime)
            session.samples = max(MIN_SAMPLES, min(3 * session.samples // 2, remaining))
        next_cost = 2 * session.samples * int(PRIMES[session.size_index])
        if n_evaluations + next_cost > max_evaluations:
            session.state = LatticeState.BUDGET_EXHAUSTED
            break

    session.n_evaluations = n_evaluations
    if status == IntegrationStatus.BUDGET_EXHAUSTED:
        logger.info(
            "Lattice integration stopped at the evaluation budget (%d): "
            "estimate=%.6g error=%.3g",
            max_evaluations, session.estimate, error,
        )
    else:
        logger.debug("Lattice integration converged after %d evaluations", n_evaluations)
    return LatticeResult(session.estimate, error, status, n_evaluations)
