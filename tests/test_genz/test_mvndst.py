"""Tests for mvndst against published reference values."""

from __future__ import annotations

import math

import numpy as np
import pytest
from scipy.stats import multivariate_normal, norm

from pymvnorm.genz import IntegrationStatus, LatticeSession, MVNDSTResult, mvndst
from pymvnorm.special import bivariate_normal_cdf
from pymvnorm.utils import ParameterError


def strict_lower(mat):
    n = mat.shape[0]
    return np.array([mat[i, j] for i in range(n) for j in range(i)])


def equicorrelated(n, r):
    mat = np.full((n, n), r)
    np.fill_diagonal(mat, 1.0)
    return mat


class TestMVNDSTSpecialCases:
    def test_bivariate_orthant(self):
        res = mvndst([0.0, 0.0], [0.0, 0.0], [0, 0], [0.5])
        assert isinstance(res, MVNDSTResult)
        assert res.value == pytest.approx(1.0 / 3.0, abs=1e-12)
        assert res.inform == IntegrationStatus.CONVERGED
        assert res.n_evaluations == 0

    def test_invalid_dimension(self):
        res = mvndst([], [], np.array([], dtype=int), [])
        assert res.inform == IntegrationStatus.INVALID_DIMENSION
        assert res.value == 0.0
        assert res.error == 1.0

    def test_too_many_dimensions(self):
        n = 501
        res = mvndst(np.zeros(n), np.zeros(n), np.zeros(n, dtype=int), np.zeros(n * (n - 1) // 2))
        assert res.inform == IntegrationStatus.INVALID_DIMENSION

    def test_all_unbounded(self):
        res = mvndst([0.0, 0.0, 0.0], [0.0, 0.0, 0.0], [-1, -1, -1], [0.2, 0.1, 0.3])
        assert res.value == 1.0
        assert res.error == 0.0

    def test_univariate(self):
        res = mvndst([-1.0], [0.5], [2], [])
        assert res.value == pytest.approx(norm.cdf(0.5) - norm.cdf(-1.0), rel=1e-12)
        assert res.error == pytest.approx(2e-16)

    def test_one_active_among_unbounded(self):
        res = mvndst([0.0, 0.7, 0.0], [0.0, 0.0, 0.0], [-1, 1, -1], [0.9, -0.4, 0.2])
        assert res.value == pytest.approx(norm.sf(0.7), rel=1e-12)

    def test_two_active_uses_bivariate(self):
        corr = np.array([[1.0, 0.3, -0.2],
                         [0.3, 1.0, 0.6],
                         [-0.2, 0.6, 1.0]])
        upper = np.array([0.4, 1.1, 0.0])
        res = mvndst(np.zeros(3), upper, [0, 0, -1], strict_lower(corr))
        expected = bivariate_normal_cdf(upper[0], upper[1], corr[0, 1])
        assert res.value == pytest.approx(expected, abs=1e-12)

    def test_empty_infinite_limit(self):
        res = mvndst([np.inf, 0.0, 0.0], [0.0, 1.0, 1.0], [1, 0, 0], [0.1, 0.2, 0.3])
        assert res.value == 0.0
        assert res.inform == IntegrationStatus.CONVERGED

    def test_perfect_copy_is_exact(self, rng):
        # X1 == X0 and X2 independent
        res = mvndst(np.zeros(3), [0.5, 1.0, 0.0], [0, 0, 0], [1.0, 0.0, 0.0], rng=rng)
        assert res.value == pytest.approx(norm.cdf(0.5) * 0.5, abs=1e-12)
        assert res.inform == IntegrationStatus.CONVERGED


class TestMVNDSTReference:
    """Values from Genz's Fortran MVNDST and the R package mvtnorm."""

    def test_five_dimensional(self, rng):
        lower = [0.0, 0.0, 1.7817, 1.4755, 1.5949]
        upper = [0.0, 1.5198, 1.7817, 1.4755, 1.5949]
        infin = [1, 2, 1, 1, 0]
        correl = [-0.707107, 0.0, 0.5, 0.0, 0.5, 0.5, 0.0, 0.5, 0.5, 0.5]
        expected = [0.00286779150981026, 0.00111850297940743, 0.00397918930026649]
        for value in expected:
            res = mvndst(
                lower, upper, infin, correl,
                max_evaluations=2_000_000, abs_tol=1e-6, rel_tol=0.0, rng=rng,
            )
            assert res.value == pytest.approx(value, abs=5e-5)
            infin[0] -= 1

    @pytest.mark.parametrize(
        "probs,expected",
        [
            ((0.25, 0.35, None, None), 0.05011069),
            ((0.25, None, 0.5, None), 0.0827451),
            ((0.25, None, None, 0.5), 0.0827451),
            ((None, 0.35, 0.5, None), 0.1254504),
            ((None, 0.35, None, 0.5), 0.1254504),
            ((None, None, 0.5, 0.5), 0.1964756),
            ((0.25, 0.35, 0.5, None), 0.005960125),
            ((0.25, 0.35, None, 0.5), 0.005964513),
            ((0.25, None, 0.5, 0.5), 0.0128066),
            ((None, 0.35, 0.5, 0.5), 0.02324389),
        ],
    )
    def test_equicorrelated_quadrants(self, equicorrelated_4x4, rng, probs, expected):
        upper = np.array([0.0 if p is None else norm.ppf(p) for p in probs])
        infin = [-1 if p is None else 0 for p in probs]
        res = mvndst(
            np.zeros(4), upper, infin, strict_lower(equicorrelated_4x4),
            max_evaluations=200_000, abs_tol=1e-5, rng=rng,
        )
        assert res.value == pytest.approx(expected, abs=1e-4)

    @pytest.mark.parametrize(
        "r,expected", [(-0.49, 0.002740932), (0.99, 0.4661416), (0.0, 0.125)]
    )
    def test_trivariate_at_median(self, rng, r, expected):
        res = mvndst(
            np.zeros(3), np.zeros(3), [0, 0, 0], strict_lower(equicorrelated(3, r)),
            max_evaluations=200_000, abs_tol=1e-6, rng=rng,
        )
        assert res.value == pytest.approx(expected, abs=1e-4)

    def test_trivariate_orthant_closed_form(self, rng):
        # P(X <= 0) for three variables: 1/8 + (asin r12 + asin r13 + asin r23) / (4 pi)
        corr = np.array([[1.0, 0.2, 0.5],
                         [0.2, 1.0, -0.3],
                         [0.5, -0.3, 1.0]])
        expected = 0.125 + (math.asin(0.2) + math.asin(0.5) + math.asin(-0.3)) / (4.0 * math.pi)
        res = mvndst(
            np.zeros(3), np.zeros(3), [0, 0, 0], strict_lower(corr),
            max_evaluations=500_000, abs_tol=1e-6, rng=rng,
        )
        assert res.value == pytest.approx(expected, abs=1e-5)

    def test_error_estimate_is_honest(self, rng):
        corr = equicorrelated(6, 0.4)
        upper = np.linspace(-0.5, 1.0, 6)
        res = mvndst(np.zeros(6), upper, [0] * 6, strict_lower(corr),
                     max_evaluations=400_000, abs_tol=1e-5, rng=rng)
        expected = multivariate_normal.cdf(
            upper, mean=np.zeros(6), cov=corr, abseps=1e-7, releps=0.0, maxpts=2_000_000
        )
        assert res.value == pytest.approx(expected, abs=max(3 * res.error, 2e-5))


class TestMVNDSTBehaviour:
    def test_budget_exhausted_still_usable(self, rng):
        corr = equicorrelated(5, 0.3)
        res = mvndst(np.zeros(5), np.ones(5), [0] * 5, strict_lower(corr),
                     max_evaluations=10, abs_tol=1e-12, rel_tol=0.0, rng=rng)
        assert res.inform == IntegrationStatus.BUDGET_EXHAUSTED
        assert 0.0 <= res.value <= 1.0

    def test_result_in_unit_interval(self):
        rng = np.random.default_rng(2024)
        for _ in range(20):
            x = rng.standard_normal((4, 4))
            cov = x @ x.T + 0.1 * np.eye(4)
            sd = np.sqrt(np.diag(cov))
            corr = cov / np.outer(sd, sd)
            lower = rng.uniform(-2.0, 0.0, 4)
            upper = lower + rng.uniform(0.0, 3.0, 4)
            infin = rng.integers(-1, 3, 4)
            res = mvndst(lower, upper, infin, strict_lower(corr), rng=rng)
            assert 0.0 <= res.value <= 1.0

    def test_default_budget(self, rng):
        corr = equicorrelated(4, 0.2)
        res = mvndst(np.zeros(4), np.ones(4), [0] * 4, strict_lower(corr),
                     abs_tol=1e-12, rel_tol=0.0, rng=rng)
        assert res.inform == IntegrationStatus.BUDGET_EXHAUSTED
        assert res.n_evaluations <= 4000 + 2 * 8 * 113

    def test_session_continuation(self, rng):
        corr = equicorrelated(4, 0.2)
        args = (np.zeros(4), np.ones(4), [0] * 4, strict_lower(corr))
        session = LatticeSession()
        first = mvndst(*args, max_evaluations=3000, abs_tol=1e-9, rng=rng, session=session)
        second = mvndst(*args, max_evaluations=50_000, abs_tol=1e-9, rng=rng,
                        session=session, min_evaluations=-1)
        assert second.value == pytest.approx(first.value, abs=1e-3)
        assert second.error <= first.error

    def test_wrong_correlation_length(self):
        with pytest.raises(ParameterError, match="correl"):
            mvndst(np.zeros(3), np.zeros(3), [0, 0, 0], [0.1, 0.2])

    def test_correlation_out_of_range(self):
        with pytest.raises(ParameterError):
            mvndst(np.zeros(3), np.zeros(3), [0, 0, 0], [0.1, 1.2, 0.0])

    def test_invalid_bound_type(self):
        with pytest.raises(ParameterError, match="infin"):
            mvndst(np.zeros(2), np.zeros(2), [0, 3], [0.1])

    def test_nan_limit(self):
        with pytest.raises(ParameterError):
            mvndst([np.nan, 0.0], [0.0, 0.0], [1, 0], [0.1])

    def test_nan_in_ignored_limit_is_fine(self):
        res = mvndst([np.nan, np.nan], [0.0, 0.0], [0, 0], [0.0])
        assert res.value == pytest.approx(0.25, abs=1e-12)
