"""
Tests for logistic_pseudo_r2().
"""

import math
from dataclasses import dataclass

import numpy as np
import pytest

from pydsur.core.exceptions import ValidationError
from pydsur.regression import LogisticModelSummary, logistic_pseudo_r2


@dataclass
class FakeGLM:
    """Stand-in for a fitted binomial GLM."""
    deviance: float
    null_deviance: float
    fitted_values: np.ndarray


class TestFormulas:

    def test_hand_computed(self):
        result = logistic_pseudo_r2(
            LogisticModelSummary(deviance=100.0, null_deviance=150.0, n_obs=120)
        )
        assert result.hosmer_lemeshow == pytest.approx(1.0 / 3.0, rel=1e-14)
        assert result.cox_snell == pytest.approx(1.0 - math.exp(-50.0 / 120.0), rel=1e-14)
        assert result.nagelkerke == pytest.approx(
            (1.0 - math.exp(-50.0 / 120.0)) / (1.0 - math.exp(-150.0 / 120.0)),
            rel=1e-14,
        )

    def test_deviances_of_113_cases(self):
        """Null deviance 154.08, residual 144.16, N = 113 -> .064, .084, .113."""
        result = logistic_pseudo_r2(
            LogisticModelSummary(deviance=144.16, null_deviance=154.08, n_obs=113)
        )
        assert result.rounded() == {
            "hosmer_lemeshow": 0.064,
            "cox_snell": 0.084,
            "nagelkerke": 0.113,
        }

    def test_no_improvement_gives_zero(self):
        result = logistic_pseudo_r2(
            LogisticModelSummary(deviance=80.0, null_deviance=80.0, n_obs=60)
        )
        assert result.hosmer_lemeshow == 0.0
        assert result.cox_snell == 0.0
        assert result.nagelkerke == 0.0

    def test_nagelkerke_at_least_cox_snell(self):
        result = logistic_pseudo_r2(
            LogisticModelSummary(deviance=40.0, null_deviance=90.0, n_obs=70)
        )
        assert 0.0 < result.cox_snell < result.nagelkerke <= 1.0

    def test_values_stored_unrounded(self):
        result = logistic_pseudo_r2(
            LogisticModelSummary(deviance=144.16, null_deviance=154.08, n_obs=113)
        )
        assert result.hosmer_lemeshow != round(result.hosmer_lemeshow, 3)


class TestModelInput:

    def test_from_fitted_model(self):
        model = FakeGLM(deviance=144.16, null_deviance=154.08, fitted_values=np.full(113, 0.5))
        result = logistic_pseudo_r2(model)
        assert result.n_obs == 113
        assert result.deviance == 144.16
        assert result.null_deviance == 154.08
        assert result.rounded()["nagelkerke"] == 0.113

    def test_summary_from_model(self):
        model = FakeGLM(deviance=10.0, null_deviance=20.0, fitted_values=np.zeros(30))
        summary = LogisticModelSummary.from_model(model)
        assert summary == LogisticModelSummary(deviance=10.0, null_deviance=20.0, n_obs=30)

    def test_unrelated_object_rejected(self):
        with pytest.raises(ValidationError, match="null_deviance"):
            logistic_pseudo_r2(object())


class TestValidation:

    def test_zero_null_deviance_rejected(self):
        with pytest.raises(ValidationError, match="null_deviance"):
            logistic_pseudo_r2(LogisticModelSummary(deviance=0.0, null_deviance=0.0, n_obs=10))

    def test_deviance_above_null_rejected(self):
        with pytest.raises(ValidationError, match="must be <= null_deviance"):
            logistic_pseudo_r2(
                LogisticModelSummary(deviance=2000.0, null_deviance=1.0, n_obs=1)
            )

    def test_large_deviances_stay_finite(self):
        result = logistic_pseudo_r2(
            LogisticModelSummary(deviance=1500.0, null_deviance=2000.0, n_obs=1)
        )
        assert result.cox_snell == 1.0
        assert result.nagelkerke == 1.0
        assert result.hosmer_lemeshow == pytest.approx(0.25)

    def test_no_observations_rejected(self):
        with pytest.raises(ValidationError, match="no fitted values"):
            logistic_pseudo_r2(
                FakeGLM(deviance=1.0, null_deviance=2.0, fitted_values=np.array([]))
            )

    def test_negative_deviance_rejected(self):
        with pytest.raises(ValidationError, match="deviance"):
            logistic_pseudo_r2(LogisticModelSummary(deviance=-1.0, null_deviance=5.0, n_obs=10))

    def test_nan_deviance_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            logistic_pseudo_r2(
                LogisticModelSummary(deviance=float("nan"), null_deviance=5.0, n_obs=10)
            )


class TestFormatting:

    def test_summary(self):
        result = logistic_pseudo_r2(
            LogisticModelSummary(deviance=144.16, null_deviance=154.08, n_obs=113)
        )
        lines = result.summary().splitlines()
        assert lines[0] == "Pseudo R^2 for logistics regression"
        assert lines[1] == "Hosmer and Lemeshow R^2: \t 0.064"
        assert lines[2] == "Cox and Snell R^2\t:  0.084"
        assert lines[3] == "Nagelkerke R^2\t:  0.113"

    def test_repr(self):
        result = logistic_pseudo_r2(
            LogisticModelSummary(deviance=144.16, null_deviance=154.08, n_obs=113)
        )
        assert repr(result) == (
            "PseudoR2Solution(hosmer_lemeshow=0.064, cox_snell=0.084, nagelkerke=0.113)"
        )
