"""Tests for MVNControl."""

from __future__ import annotations

import pytest

from pymvnorm.distributions import MVNControl
from pymvnorm.utils import ParameterError


class TestMVNControl:
    def test_defaults(self):
        control = MVNControl()
        assert control.max_evaluations is None
        assert control.abs_tol == 1e-3
        assert control.rel_tol == 1e-8
        assert control.min_evaluations == 0

    def test_default_budget_scales_with_dimension(self):
        control = MVNControl()
        assert control.evaluations_for(1) == 1000
        assert control.evaluations_for(7) == 7000

    def test_explicit_budget(self):
        control = MVNControl(max_evaluations=50_000)
        assert control.evaluations_for(7) == 50_000

    @pytest.mark.parametrize(
        "kwargs",
        [{"max_evaluations": 0}, {"abs_tol": -1e-3}, {"rel_tol": -0.1}],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ParameterError):
            MVNControl(**kwargs)

    def test_negative_min_evaluations_allowed(self):
        assert MVNControl(min_evaluations=-1).min_evaluations == -1
