"""Tests for the univariate standard normal functions."""

from __future__ import annotations

import math

import numpy as np
import pytest
from scipy.stats import norm

from pymvnorm.special import (
    QUANTILE_LIMIT,
    inverse_standard_normal_cdf,
    standard_normal_cdf,
    standard_normal_pdf,
)


class TestStandardNormalCDF:
    def test_at_zero(self):
        assert standard_normal_cdf(0.0) == pytest.approx(0.5, abs=1e-15)

    def test_scalar_returns_float(self):
        assert isinstance(standard_normal_cdf(1.0), float)

    def test_against_scipy(self):
        z = np.linspace(-8.0, 8.0, 161)
        np.testing.assert_allclose(standard_normal_cdf(z), norm.cdf(z), rtol=1e-12, atol=1e-16)

    def test_lower_tail_relative_accuracy(self):
        z = np.array([-10.0, -20.0, -30.0])
        np.testing.assert_allclose(standard_normal_cdf(z), norm.cdf(z), rtol=1e-12)

    def test_infinities(self):
        p = standard_normal_cdf(np.array([-np.inf, np.inf]))
        np.testing.assert_array_equal(p, [0.0, 1.0])

    def test_underflow_saturation(self):
        assert standard_normal_cdf(-200.0) == 0.0
        assert standard_normal_cdf(200.0) == 1.0

    def test_symmetry(self):
        z = np.array([0.1, 0.7, 1.9, 3.3])
        np.testing.assert_allclose(
            standard_normal_cdf(z) + standard_normal_cdf(-z), 1.0, atol=1e-15
        )

    def test_preserves_shape(self):
        z = np.zeros((3, 4))
        assert standard_normal_cdf(z).shape == (3, 4)


class TestInverseStandardNormalCDF:
    def test_median_is_exactly_zero(self):
        assert inverse_standard_normal_cdf(0.5) == 0.0

    @pytest.mark.parametrize("z", [-3.0, -1.0, 0.0, 1.0, 3.0])
    def test_round_trip(self, z):
        p = standard_normal_cdf(z)
        assert inverse_standard_normal_cdf(p) == pytest.approx(z, abs=1e-9)

    def test_against_scipy_all_branches(self):
        # central, intermediate tail and far tail regions
        p = np.array([1e-300, 1e-20, 1e-12, 1e-5, 0.01, 0.07, 0.3, 0.5, 0.8, 0.95, 0.999999])
        np.testing.assert_allclose(inverse_standard_normal_cdf(p), norm.ppf(p), rtol=1e-12)

    def test_boundary_sentinels(self):
        z = inverse_standard_normal_cdf(np.array([0.0, 1.0, -0.5, 1.5]))
        np.testing.assert_array_equal(
            z, [-QUANTILE_LIMIT, QUANTILE_LIMIT, -QUANTILE_LIMIT, QUANTILE_LIMIT]
        )

    def test_nan_propagates(self):
        assert math.isnan(inverse_standard_normal_cdf(float("nan")))

    def test_antisymmetry(self):
        p = np.array([0.001, 0.2, 0.45])
        np.testing.assert_allclose(
            inverse_standard_normal_cdf(p), -inverse_standard_normal_cdf(1.0 - p), atol=1e-12
        )


class TestStandardNormalPDF:
    def test_against_scipy(self):
        z = np.linspace(-5.0, 5.0, 41)
        np.testing.assert_allclose(standard_normal_pdf(z), norm.pdf(z), rtol=1e-14)

    def test_peak(self):
        assert standard_normal_pdf(0.0) == pytest.approx(1.0 / math.sqrt(2.0 * math.pi))
