"""Quasi-Monte Carlo sequences for stratified sampling."""

from __future__ import annotations

from numpy.typing import NDArray
from scipy.stats import qmc


def latin_hypercube(n: int, d: int, seed: int | None = None) -> NDArray:
    """Generate a Latin hypercube design.

    Parameters
    ----------
    n : int
        Number of points.
    d : int
        Dimensionality.
    seed : int or None
        Random seed for the within-cell jitter and the column permutations.

    Returns
    -------
    points : (n, d) array
        One point per row and per stratum of every column, in [0, 1)^d.
    """
    sampler = qmc.LatinHypercube(d=d, seed=seed)
    return sampler.random(n)
