"""Multivariate normal probabilities by Genz's methods.

Subpackages
-----------
special
    Univariate and bivariate standard normal functions.
genz
    Variable reordering, randomized lattice rules and ``mvndst``.
distributions
    The ``MultivariateNormal`` distribution.
backend
    NumPy / PyTorch array containers.
utils
    Validation, random generators and stratified sampling helpers.
"""

from pymvnorm.distributions import MultivariateNormal, MVNControl
from pymvnorm.genz import IntegrationStatus, LatticeSession, MVNDSTResult, mvndst
from pymvnorm.special import (
    bivariate_normal_cdf,
    inverse_standard_normal_cdf,
    standard_normal_cdf,
)
from pymvnorm.utils import ParameterError

__version__ = "0.1.0"

__all__ = [
    "MultivariateNormal",
    "MVNControl",
    "mvndst",
    "MVNDSTResult",
    "IntegrationStatus",
    "LatticeSession",
    "standard_normal_cdf",
    "inverse_standard_normal_cdf",
    "bivariate_normal_cdf",
    "ParameterError",
]
