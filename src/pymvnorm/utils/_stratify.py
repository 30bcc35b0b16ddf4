"""Stratification bins for stratified sampling of probabilities."""

from __future__ import annotations

from dataclasses import dataclass

from pymvnorm.utils._validation import ParameterError


@dataclass(frozen=True)
class StratificationBin:
    """A probability (or value) interval with an associated weight.

    Attributes
    ----------
    lower, upper : float
        Bin bounds, ``lower <= upper``.
    weight : float or None
        Bin weight; defaults to the bin width.
    """

    lower: float
    upper: float
    weight: float | None = None

    def __post_init__(self):
        if self.lower > self.upper:
            raise ParameterError(
                "lower", "the upper bound must be greater than or equal to the lower bound"
            )
        if self.weight is None or self.weight < 0:
            object.__setattr__(self, "weight", self.upper - self.lower)

    @property
    def midpoint(self) -> float:
        return (self.upper + self.lower) / 2.0


def stratify_probabilities(
    n_bins: int, lower: float = 0.0, upper: float = 1.0
) -> list[StratificationBin]:
    """Split ``[lower, upper]`` into ``n_bins`` equal-width probability bins."""
    if n_bins < 1:
        raise ParameterError("n_bins", "must be at least 1", n_bins)
    if not 0.0 <= lower < upper <= 1.0:
        raise ParameterError("lower", "bounds must satisfy 0 <= lower < upper <= 1")
    delta = (upper - lower) / n_bins
    bins = []
    for i in range(n_bins):
        lo = lower + i * delta
        hi = upper if i == n_bins - 1 else lo + delta
        bins.append(StratificationBin(lo, hi))
    return bins
