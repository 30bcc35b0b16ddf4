"""Genz algorithms for multivariate normal rectangle probabilities.

Main entry point: :func:`mvndst`.
"""

from pymvnorm.genz._lattice import (
    IntegrationStatus,
    LatticeResult,
    LatticeSession,
    LatticeState,
    integrate_lattice,
    korobov_vector,
    lattice_rule_sum,
)
from pymvnorm.genz._mvndst import MVNDSTResult, mvndst
from pymvnorm.genz._reduction import (
    BoundType,
    ReducedProblem,
    packed_index,
    reduce_and_factor,
    swap_rows_columns,
    univariate_limits,
)

__all__ = [
    "BoundType",
    "ReducedProblem",
    "packed_index",
    "univariate_limits",
    "swap_rows_columns",
    "reduce_and_factor",
    "IntegrationStatus",
    "LatticeState",
    "LatticeSession",
    "LatticeResult",
    "korobov_vector",
    "lattice_rule_sum",
    "integrate_lattice",
    "MVNDSTResult",
    "mvndst",
]
