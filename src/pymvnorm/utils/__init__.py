"""Utility functions."""

from pymvnorm.utils._qmc import latin_hypercube
from pymvnorm.utils._seeds import make_rng
from pymvnorm.utils._stratify import StratificationBin, stratify_probabilities
from pymvnorm.utils._validation import (
    ParameterError,
    check_square,
    check_symmetric,
    check_vector,
)

__all__ = [
    "ParameterError",
    "check_square",
    "check_symmetric",
    "check_vector",
    "latin_hypercube",
    "make_rng",
    "StratificationBin",
    "stratify_probabilities",
]
