"""Random generator construction for reproducible integration."""

from __future__ import annotations

import numpy as np


def make_rng(seed: int | np.random.Generator | None = None) -> np.random.Generator:
    """Return a uniform(0, 1) source for lattice randomization and sampling.

    Parameters
    ----------
    seed : int, numpy.random.Generator or None
        A Generator is returned unchanged so the caller keeps ownership of
        its state. An int seeds a new Mersenne Twister backed generator;
        None draws fresh entropy from the operating system.

    Returns
    -------
    rng : numpy.random.Generator
    """
    if isinstance(seed, np.random.Generator):
        return seed
    if seed is not None and not isinstance(seed, (int, np.integer)):
        raise TypeError(f"seed must be an int, a numpy Generator or None, got {type(seed)!r}")
    return np.random.Generator(np.random.MT19937(seed))
