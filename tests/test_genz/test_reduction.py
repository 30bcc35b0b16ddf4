"""Tests for limit reduction, ordering and the packed Cholesky factor."""

from __future__ import annotations

import numpy as np
import pytest
from scipy.stats import norm

from pymvnorm.genz import (
    BoundType,
    packed_index,
    reduce_and_factor,
    swap_rows_columns,
    univariate_limits,
)


def pack_lower(mat):
    n = mat.shape[0]
    return np.array([mat[i, j] for i in range(n) for j in range(i + 1)])


def strict_lower(mat):
    n = mat.shape[0]
    return np.array([mat[i, j] for i in range(n) for j in range(i)])


class TestPackedIndex:
    @pytest.mark.parametrize(
        "i,j,expected",
        [(0, 0, 0), (1, 0, 1), (1, 1, 2), (2, 0, 3), (2, 2, 5), (3, 2, 8), (4, 0, 10)],
    )
    def test_positions(self, i, j, expected):
        assert packed_index(i, j) == expected

    def test_vectorized(self):
        rows = np.arange(4)
        np.testing.assert_array_equal(packed_index(rows, rows), [0, 2, 5, 9])


class TestUnivariateLimits:
    def test_unbounded(self):
        assert univariate_limits(0.3, -0.2, BoundType.UNBOUNDED) == (0.0, 1.0)

    def test_upper(self):
        d, e = univariate_limits(np.nan, 0.5, BoundType.UPPER)
        assert d == 0.0
        assert e == pytest.approx(norm.cdf(0.5), rel=1e-12)

    def test_lower(self):
        d, e = univariate_limits(-1.0, np.nan, BoundType.LOWER)
        assert d == pytest.approx(norm.cdf(-1.0), rel=1e-12)
        assert e == 1.0

    def test_both(self):
        d, e = univariate_limits(-1.0, 2.0, BoundType.BOTH)
        assert e - d == pytest.approx(norm.cdf(2.0) - norm.cdf(-1.0), rel=1e-12)

    def test_reversed_interval_is_empty(self):
        d, e = univariate_limits(1.0, 0.0, BoundType.BOTH)
        assert d == e

    def test_array_limits(self):
        d, e = univariate_limits(np.array([-1.0, 0.0]), np.array([1.0, 2.0]), BoundType.BOTH)
        assert d.shape == (2,)
        np.testing.assert_allclose(e - d, norm.cdf([1.0, 2.0]) - norm.cdf([-1.0, 0.0]), rtol=1e-12)


class TestSwapRowsColumns:
    @pytest.mark.parametrize("p,q", [(0, 3), (1, 3), (1, 2), (0, 1), (2, 4)])
    def test_matches_dense_permutation(self, p, q):
        n = 5
        rng = np.random.default_rng(3)
        x = rng.standard_normal((n, n))
        dense = x @ x.T
        cov = pack_lower(dense)
        a = np.arange(n, dtype=float)
        b = a + 10.0
        infin = np.array([0, 1, 2, 0, 1])

        swap_rows_columns(p, q, a, b, infin, cov)

        perm = np.arange(n)
        perm[[p, q]] = perm[[q, p]]
        np.testing.assert_array_equal(cov, pack_lower(dense[np.ix_(perm, perm)]))
        np.testing.assert_array_equal(a, perm.astype(float))
        np.testing.assert_array_equal(b, perm + 10.0)
        np.testing.assert_array_equal(infin, np.array([0, 1, 2, 0, 1])[perm])


class TestReduceAndFactor:
    def test_unbounded_dimensions_moved_last(self):
        correl = strict_lower(np.eye(4))
        problem = reduce_and_factor(
            [0.0] * 4, [1.0, 0.0, 2.0, 0.0], [-1, 0, 0, -1], correl
        )
        assert problem.n_inf == 2
        assert problem.n_active == 2
        assert np.all(problem.infin[:2] >= 0)
        np.testing.assert_array_equal(problem.infin[2:], [-1, -1])

    def test_all_unbounded(self):
        problem = reduce_and_factor([0.0, 0.0], [0.0, 0.0], [-1, -1], [0.3])
        assert problem.n_active == 0

    def test_smallest_probability_first(self):
        problem = reduce_and_factor(
            np.zeros(3), [2.0, -1.0, 0.0], [0, 0, 0], strict_lower(np.eye(3))
        )
        np.testing.assert_allclose(problem.upper, [-1.0, 0.0, 2.0])

    def test_factor_reproduces_correlation(self):
        corr = np.array([[1.0, 0.4, 0.2],
                         [0.4, 1.0, 0.3],
                         [0.2, 0.3, 1.0]])
        # Upper limits already in increasing order so no reordering happens.
        upper = np.array([-2.0, 0.5, 3.0])
        problem = reduce_and_factor(np.zeros(3), upper, [0, 0, 0], strict_lower(corr))
        assert np.all(problem.cov[packed_index(np.arange(3), np.arange(3))] == 1.0)

        # Undo the row scaling through the rescaled upper limits.
        scale = upper / problem.upper
        lower_factor = np.zeros((3, 3))
        for i in range(3):
            for j in range(i + 1):
                lower_factor[i, j] = problem.cov[packed_index(i, j)] * scale[i]
        np.testing.assert_allclose(lower_factor @ lower_factor.T, corr, atol=1e-12)

    def test_integrand_independent_is_constant(self):
        problem = reduce_and_factor(
            np.zeros(3), [2.0, -1.0, 0.0], [0, 0, 0], strict_lower(np.eye(3))
        )
        w = np.random.default_rng(0).random((6, 2))
        values = problem.integrand(w)
        expected = norm.cdf(2.0) * norm.cdf(-1.0) * norm.cdf(0.0)
        np.testing.assert_allclose(values, expected, rtol=1e-12)

    def test_integrand_single_point(self):
        problem = reduce_and_factor(
            [-1.0, -1.0, -1.0], [1.0, 1.0, 1.0], [2, 2, 2], [0.5, 0.5, 0.5]
        )
        value = problem.integrand(np.array([0.3, 0.7]))
        assert isinstance(value, float)
        assert 0.0 < value < 1.0
        batch = problem.integrand(np.array([[0.3, 0.7]]))
        assert value == pytest.approx(batch[0])

    def test_degenerate_row_is_folded(self):
        # X1 is a copy of X0
        problem = reduce_and_factor(np.zeros(3), [0.5, 1.0, 0.0], [0, 0, 0], [1.0, 0.0, 0.0])
        w = np.random.default_rng(1).random((5, 2))
        expected = norm.cdf(0.5) * 0.5
        np.testing.assert_allclose(problem.integrand(w), expected, rtol=1e-12)

    def test_negative_copy_flips_bound(self):
        # X1 = -X0, so X1 <= 0.2 means X0 >= -0.2
        problem = reduce_and_factor(np.zeros(3), [0.5, 0.2, 0.0], [0, 0, 0], [-1.0, 0.0, 0.0])
        w = np.random.default_rng(2).random((4, 2))
        expected = (norm.cdf(0.5) - norm.cdf(-0.2)) * 0.5
        np.testing.assert_allclose(problem.integrand(w), expected, rtol=1e-12)
