"""Univariate and bivariate standard normal special functions."""

from pymvnorm.special._bivariate import (
    bivariate_normal_cdf,
    bivariate_rectangle,
    bivariate_upper_tail,
)
from pymvnorm.special._normal import (
    QUANTILE_LIMIT,
    inverse_standard_normal_cdf,
    standard_normal_cdf,
    standard_normal_pdf,
)

__all__ = [
    "QUANTILE_LIMIT",
    "standard_normal_cdf",
    "inverse_standard_normal_cdf",
    "standard_normal_pdf",
    "bivariate_upper_tail",
    "bivariate_normal_cdf",
    "bivariate_rectangle",
]
