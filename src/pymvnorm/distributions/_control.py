"""Integration control structure for multivariate normal probabilities."""

from __future__ import annotations

from dataclasses import dataclass

from pymvnorm.utils._validation import ParameterError

EVALUATIONS_PER_DIMENSION = 1000


@dataclass
class MVNControl:
    """Settings for the lattice integration behind ``cdf`` and ``interval``.

    Attributes
    ----------
    max_evaluations : int or None
        Integrand evaluation budget per call. None means
        ``1000 * dimension``, recomputed whenever the distribution's
        parameters change.
    abs_tol : float
        Requested absolute accuracy.
    rel_tol : float
        Requested relative accuracy.
    min_evaluations : int
        Minimum lattice evaluations per call; negative values continue a
        previous integration held in a caller-supplied session.
    """

    max_evaluations: int | None = None
    abs_tol: float = 1e-3
    rel_tol: float = 1e-8
    min_evaluations: int = 0

    def __post_init__(self):
        if self.max_evaluations is not None and self.max_evaluations < 1:
            raise ParameterError(
                "max_evaluations", "must be a positive integer", self.max_evaluations
            )
        if self.abs_tol < 0:
            raise ParameterError("abs_tol", "must be non-negative", self.abs_tol)
        if self.rel_tol < 0:
            raise ParameterError("rel_tol", "must be non-negative", self.rel_tol)

    def evaluations_for(self, dimension: int) -> int:
        """Evaluation budget for a distribution of the given dimension."""
        if self.max_evaluations is None:
            return EVALUATIONS_PER_DIMENSION * dimension
        return self.max_evaluations
