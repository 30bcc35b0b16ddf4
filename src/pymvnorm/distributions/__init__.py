"""Multivariate normal distribution and its integration settings."""

from pymvnorm.distributions._control import MVNControl
from pymvnorm.distributions._factorization import (
    CholeskyFactorization,
    SVDFactorization,
    factorize,
)
from pymvnorm.distributions._mvn import MultivariateNormal

__all__ = [
    "MultivariateNormal",
    "MVNControl",
    "CholeskyFactorization",
    "SVDFactorization",
    "factorize",
]
