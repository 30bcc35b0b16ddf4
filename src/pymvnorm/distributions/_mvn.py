"""Multivariate normal distribution.

Density, cumulative probabilities, rectangle probabilities and sampling
for ``X ~ N(mu, Sigma)``. Probabilities in one and two dimensions use
closed forms; three or more dimensions go through Genz's lattice method
(:func:`pymvnorm.genz.mvndst`).

Examples
--------
>>> mvn = MultivariateNormal.bivariate(0.0, 0.0, 1.0, 1.0, 0.5)
>>> round(mvn.cdf([0.0, 0.0]), 6)
0.333333
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray
from scipy import stats

from pymvnorm.backend._array_api import from_float64, to_float64
from pymvnorm.distributions._control import MVNControl
from pymvnorm.distributions._factorization import (
    CholeskyFactorization,
    SVDFactorization,
    factorize,
)
from pymvnorm.genz._lattice import IntegrationStatus, LatticeSession
from pymvnorm.genz._mvndst import UNIVARIATE_ERROR, MVNDSTResult, mvndst
from pymvnorm.genz._reduction import BoundType
from pymvnorm.special._bivariate import bivariate_normal_cdf
from pymvnorm.special._normal import _phi, _phinv
from pymvnorm.utils._qmc import latin_hypercube
from pymvnorm.utils._seeds import make_rng
from pymvnorm.utils._stratify import StratificationBin
from pymvnorm.utils._validation import (
    ParameterError,
    check_square,
    check_symmetric,
    check_vector,
)

logger = logging.getLogger(__name__)

LOG_TWO_PI = math.log(2.0 * math.pi)


def _exact(value: float) -> MVNDSTResult:
    return MVNDSTResult(value, 0.0, IntegrationStatus.CONVERGED)


def _closed_form(value: float) -> MVNDSTResult:
    return MVNDSTResult(min(max(value, 0.0), 1.0), UNIVARIATE_ERROR, IntegrationStatus.CONVERGED)


def _packed_lower(matrix: NDArray) -> NDArray:
    rows, cols = np.tril_indices(matrix.shape[0], k=-1)
    return matrix[rows, cols]


class MultivariateNormal:
    """Multivariate normal distribution N(mean, covariance).

    Parameters
    ----------
    mean_or_dimension : int or array_like
        Either the dimension (zero mean, identity covariance) or the mean
        vector.
    covariance : array_like of shape (D, D), optional
        Covariance matrix; identity if omitted.
    control : MVNControl, optional
        Integration settings for ``cdf`` and ``interval``.
    rng : numpy.random.Generator or int, optional
        Source of the lattice randomization. Mutated by every lattice
        integration, so an instance should not be shared between threads.

    Notes
    -----
    A covariance that is not positive-definite is accepted and handled
    through its singular value decomposition; the density then lives on
    the affine subspace and ``mahalanobis`` uses the pseudo-inverse.
    """

    def __init__(
        self,
        mean_or_dimension: int | Sequence[float] | NDArray | None = None,
        covariance: Sequence[Sequence[float]] | NDArray | None = None,
        *,
        control: MVNControl | None = None,
        rng: np.random.Generator | int | None = None,
    ):
        if mean_or_dimension is None:
            raise ParameterError("mean", "a dimension or a mean vector is required")
        if isinstance(mean_or_dimension, (int, np.integer)):
            dimension = int(mean_or_dimension)
            if dimension < 1:
                raise ParameterError("dimension", "must be at least 1", dimension)
            if covariance is not None:
                raise ParameterError(
                    "covariance", "cannot be given together with a dimension"
                )
            mean = np.zeros(dimension)
        else:
            mean = np.asarray(mean_or_dimension, dtype=np.float64)
        if covariance is None:
            covariance = np.eye(np.size(mean))

        self.control = control if control is not None else MVNControl()
        self._rng = make_rng(rng)
        self._parameters_valid = False
        self.set_parameters(mean, covariance)

    @classmethod
    def univariate(cls, mu: float, sigma: float, **kwargs) -> MultivariateNormal:
        """One-dimensional normal with mean ``mu`` and standard deviation ``sigma``."""
        return cls([mu], [[sigma * sigma]], **kwargs)

    @classmethod
    def bivariate(
        cls,
        mu1: float,
        mu2: float,
        sigma1: float,
        sigma2: float,
        rho: float,
        **kwargs,
    ) -> MultivariateNormal:
        """Two-dimensional normal from means, standard deviations and correlation."""
        cov12 = sigma1 * sigma2 * rho
        covariance = [[sigma1 * sigma1, cov12], [cov12, sigma2 * sigma2]]
        return cls([mu1, mu2], covariance, **kwargs)

    def copy(self) -> MultivariateNormal:
        """Independent copy with the same parameters and settings.

        The copy gets a fresh random generator.
        """
        return MultivariateNormal(
            self._mean.copy(), self._covariance.copy(), control=replace(self.control)
        )

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    def validate_parameters(
        self, mean, covariance, raise_error: bool = True
    ) -> ParameterError | None:
        """Check a candidate mean and covariance.

        Returns the error instead of raising it when ``raise_error`` is
        False; None means the parameters are valid.
        """
        try:
            mean = check_vector(mean, name="mean")
            covariance = check_square(covariance, name="covariance")
            if covariance.shape[0] != mean.shape[0]:
                raise ParameterError(
                    "covariance",
                    f"must be {mean.shape[0]}x{mean.shape[0]} to match the mean, "
                    f"got {covariance.shape}",
                )
            if not check_symmetric(covariance, tol=1e-8 * max(1.0, np.abs(covariance).max())):
                raise ParameterError("covariance", "must be symmetric")
            if np.any(np.diag(covariance) < 0):
                raise ParameterError("covariance", "variances must be non-negative")
        except ParameterError as err:
            if raise_error:
                raise
            return err
        return None

    def set_parameters(self, mean, covariance) -> None:
        """Replace the mean and covariance.

        Raises
        ------
        ParameterError
            If the mean is not a finite vector, the covariance is not a
            finite symmetric matrix of matching size, or its (pseudo)
            determinant is not usable.
        """
        self.validate_parameters(mean, covariance, raise_error=True)
        mean = np.array(mean, dtype=np.float64).reshape(-1)
        covariance = np.array(covariance, dtype=np.float64)
        factorization = factorize(covariance)

        self._mean = mean
        self._covariance = covariance
        self._factorization = factorization
        self._lnconstant = -0.5 * (LOG_TWO_PI * mean.shape[0] + factorization.log_determinant())
        self._correlation = None
        self._correl = None
        self._max_evaluations = self.control.evaluations_for(mean.shape[0])
        self._parameters_valid = True
        logger.debug(
            "Set parameters: dimension=%d factorization=%s",
            mean.shape[0], factorization.kind,
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def display_name(self) -> str:
        return "Multivariate Normal"

    @property
    def short_display_name(self) -> str:
        return "Multi-N"

    @property
    def dimension(self) -> int:
        return int(self._mean.shape[0])

    @property
    def parameters_valid(self) -> bool:
        return self._parameters_valid

    @property
    def mean(self) -> NDArray:
        return self._mean.copy()

    @property
    def median(self) -> NDArray:
        return self._mean.copy()

    @property
    def mode(self) -> NDArray:
        return self._mean.copy()

    @property
    def covariance(self) -> NDArray:
        return self._covariance.copy()

    @property
    def variance(self) -> NDArray:
        return np.diag(self._covariance).copy()

    @property
    def standard_deviation(self) -> NDArray:
        return np.sqrt(self.variance)

    @property
    def factorization(self) -> CholeskyFactorization | SVDFactorization:
        return self._factorization

    @property
    def is_positive_definite(self) -> bool:
        return isinstance(self._factorization, CholeskyFactorization)

    @property
    def correlation(self) -> NDArray:
        """Correlation matrix; rows of zero-variance coordinates are NaN."""
        if self._correlation is None:
            sd = self.standard_deviation
            with np.errstate(divide="ignore", invalid="ignore"):
                corr = self._covariance / np.outer(sd, sd)
            corr = np.clip(corr, -1.0, 1.0)
            positive = sd > 0
            corr[positive, positive] = 1.0
            self._correlation = corr
        return self._correlation.copy()

    @property
    def correl(self) -> NDArray:
        """Strictly lower correlations, row by row, as used by ``mvndst``."""
        if self._correl is None:
            self._correl = _packed_lower(self.correlation)
        return self._correl.copy()

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    @rng.setter
    def rng(self, value: np.random.Generator | int | None) -> None:
        self._rng = make_rng(value)

    @property
    def max_evaluations(self) -> int:
        return self._max_evaluations

    @max_evaluations.setter
    def max_evaluations(self, value: int) -> None:
        if value < 1:
            raise ParameterError("max_evaluations", "must be a positive integer", value)
        self._max_evaluations = int(value)

    @property
    def absolute_error(self) -> float:
        return self.control.abs_tol

    @absolute_error.setter
    def absolute_error(self, value: float) -> None:
        self.control = replace(self.control, abs_tol=value)

    @property
    def relative_error(self) -> float:
        return self.control.rel_tol

    @relative_error.setter
    def relative_error(self, value: float) -> None:
        self.control = replace(self.control, rel_tol=value)

    # ------------------------------------------------------------------
    # Density
    # ------------------------------------------------------------------

    def _points(self, x: Any) -> tuple[NDArray, Any, bool]:
        x, xp = to_float64(x)
        single = x.ndim == 1
        x = np.atleast_2d(x)
        if x.ndim != 2 or x.shape[1] != self.dimension:
            raise ParameterError(
                "x",
                f"points must have {self.dimension} coordinates to match the "
                f"distribution dimension, got shape {x.shape}",
            )
        return x, xp, single

    def mahalanobis(self, x: Any) -> float | NDArray:
        """Squared Mahalanobis distance ``(x - mu)^T Sigma^{-1} (x - mu)``.

        Uses the pseudo-inverse when the covariance is singular, so the
        result is finite and non-negative for any finite ``x``.

        Parameters
        ----------
        x : array_like of shape (D,) or (n, D)

        Returns
        -------
        distance : float or ndarray of shape (n,)
        """
        x, xp, single = self._points(x)
        z = (x - self._mean).T
        distance = np.maximum(np.sum(z * self._factorization.solve(z), axis=0), 0.0)
        if single:
            return float(distance[0])
        return from_float64(distance, xp, scalar=False)

    def logpdf(self, x: Any) -> float | NDArray:
        """Log density; ``-inf`` wherever it is not finite."""
        x, xp, single = self._points(x)
        z = (x - self._mean).T
        distance = np.maximum(np.sum(z * self._factorization.solve(z), axis=0), 0.0)
        f = -0.5 * distance + self._lnconstant
        f = np.where(np.isfinite(f), f, -np.inf)
        if single:
            return float(f[0])
        return from_float64(f, xp, scalar=False)

    def pdf(self, x: Any) -> float | NDArray:
        """Probability density function."""
        f = self.logpdf(x)
        if isinstance(f, float):
            return math.exp(f)
        f, xp = to_float64(f)
        return from_float64(np.exp(f), xp, scalar=False)

    # ------------------------------------------------------------------
    # Probabilities
    # ------------------------------------------------------------------

    def _lattice_options(self, session: LatticeSession | None) -> dict:
        return dict(
            max_evaluations=self._max_evaluations,
            abs_tol=self.control.abs_tol,
            rel_tol=self.control.rel_tol,
            min_evaluations=self.control.min_evaluations,
            rng=self._rng,
            session=session,
        )

    def cdf(self, x: Any, *, session: LatticeSession | None = None) -> float:
        """Cumulative probability ``P(X <= x)``.

        Parameters
        ----------
        x : array_like of shape (D,)
            Upper limits; +-inf allowed.
        session : LatticeSession, optional
            Lattice state for D >= 3, see :func:`pymvnorm.genz.mvndst`.

        Returns
        -------
        prob : float
        """
        return self.cdf_with_error(x, session=session).value

    def cdf_with_error(self, x: Any, *, session: LatticeSession | None = None) -> MVNDSTResult:
        """Cumulative probability with its error estimate and status."""
        x, _ = to_float64(x)
        x = check_vector(x, self.dimension, "x", allow_inf=True)

        keep = self._drop_point_masses(np.full_like(x, -np.inf), x)
        if keep is None:
            return _exact(0.0)
        if not np.any(keep):
            return _exact(1.0)

        sd = self.standard_deviation[keep]
        z = (x[keep] - self._mean[keep]) / sd
        if np.any(z == -np.inf):
            return _exact(0.0)

        n = z.shape[0]
        if n == 1:
            return _closed_form(float(_phi(z[0])))
        corr = self.correlation[np.ix_(keep, keep)]
        if n == 2:
            return _closed_form(bivariate_normal_cdf(z[0], z[1], corr[0, 1]))

        infin = np.where(z == np.inf, BoundType.UNBOUNDED, BoundType.UPPER)
        correl = self.correl if np.all(keep) else _packed_lower(corr)
        lower = np.full(n, -np.inf)
        return mvndst(lower, z, infin, correl, **self._lattice_options(session))

    def interval(self, lower: Any, upper: Any, *, session: LatticeSession | None = None) -> float:
        """Rectangle probability ``P(lower <= X <= upper)``."""
        return self.interval_with_error(lower, upper, session=session).value

    def interval_with_error(
        self, lower: Any, upper: Any, *, session: LatticeSession | None = None
    ) -> MVNDSTResult:
        """Rectangle probability with its error estimate and status.

        Always evaluated through :func:`pymvnorm.genz.mvndst`, which uses
        closed forms when at most two dimensions remain after dropping
        unbounded ones.
        """
        lower, _ = to_float64(lower)
        upper, _ = to_float64(upper)
        lower = check_vector(lower, self.dimension, "lower", allow_inf=True)
        upper = check_vector(upper, self.dimension, "upper", allow_inf=True)

        keep = self._drop_point_masses(lower, upper)
        if keep is None:
            return _exact(0.0)
        if not np.any(keep):
            return _exact(1.0)

        mu = self._mean[keep]
        sd = self.standard_deviation[keep]
        a = (lower[keep] - mu) / sd
        b = (upper[keep] - mu) / sd
        has_lower = np.isfinite(a)
        has_upper = np.isfinite(b)
        if np.any(a == np.inf) or np.any(b == -np.inf):
            return _exact(0.0)
        infin = np.where(
            has_lower,
            np.where(has_upper, BoundType.BOTH, BoundType.LOWER),
            np.where(has_upper, BoundType.UPPER, BoundType.UNBOUNDED),
        )
        correl = self.correl if np.all(keep) else _packed_lower(self.correlation[np.ix_(keep, keep)])
        return mvndst(a, b, infin, correl, **self._lattice_options(session))

    def _drop_point_masses(self, lower: NDArray, upper: NDArray) -> NDArray | None:
        """Mask of coordinates with positive variance.

        A zero-variance coordinate is a point mass at its mean; None means
        the rectangle misses one of them and the probability is 0.
        """
        point = self.variance <= 0
        if np.any(point):
            mu = self._mean[point]
            if np.any(upper[point] < mu) or np.any(lower[point] > mu):
                return None
        return ~point

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------

    def inverse_cdf(self, probabilities: Any) -> NDArray:
        """Map uniform probabilities to a point through ``A z + mu``.

        Each coordinate of ``z`` is the standard normal quantile of the
        corresponding probability and ``A`` is the Cholesky factor (or
        ``U sqrt(S)`` for a singular covariance), so uniformly distributed
        inputs give draws from this distribution.

        Parameters
        ----------
        probabilities : array_like of shape (D,) or (n, D)

        Returns
        -------
        sample : ndarray of the same shape
        """
        p, xp = to_float64(probabilities)
        if p.shape[-1] != self.dimension:
            raise ParameterError(
                "probabilities",
                f"must have {self.dimension} entries per point, got shape {p.shape}",
            )
        z = _phinv(p)
        sample = z @ self._factorization.sampling_factor().T + self._mean
        return from_float64(sample, xp, scalar=False)

    def generate_random_values(self, sample_size: int, seed: int | None = None) -> NDArray:
        """Draw ``sample_size`` pseudo-random points, one per row.

        A fresh generator is used on every call; pass ``seed`` for
        reproducible draws.
        """
        rng = make_rng(seed)
        return self.inverse_cdf(rng.random((sample_size, self.dimension)))

    def latin_hypercube_random_values(self, sample_size: int, seed: int | None = None) -> NDArray:
        """Draw a Latin hypercube sample of ``sample_size`` points."""
        u = latin_hypercube(sample_size, self.dimension, seed=seed)
        return self.inverse_cdf(u)

    def stratified_random_values(
        self, bins: Sequence[StratificationBin], seed: int | None = None
    ) -> NDArray:
        """One point per probability bin.

        The first coordinate uses the bin midpoint, the others are random.
        """
        rng = make_rng(seed)
        u = rng.random((len(bins), self.dimension))
        u[:, 0] = [b.midpoint for b in bins]
        return self.inverse_cdf(u)

    def independent_normal(self, index: int):
        """Marginal distribution of one coordinate as a frozen ``scipy.stats.norm``."""
        if not 0 <= index < self.dimension:
            raise ParameterError("index", f"must be in [0, {self.dimension})", index)
        return stats.norm(loc=self._mean[index], scale=self.standard_deviation[index])

    def __repr__(self) -> str:
        return f"MultivariateNormal(dimension={self.dimension})"
