"""
Tests for kmo() and classify_kmo().

Closed-form references: for p equicorrelated variables the anti-image
correlations are minus the partial correlations. With p = 3 and common
correlation rho, the partial correlation is rho / (1 + rho) and

    KMO = (1 + rho)^2 / ((1 + rho)^2 + 1).

With p = 2 the partial correlation equals the correlation, so KMO = 0.5.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pydsur.core.exceptions import DimensionError, SingularMatrixError, ValidationError
from pydsur.factor import KMO_BANDS, classify_kmo, kmo


def equicorrelation(p, rho):
    X = np.full((p, p), rho)
    np.fill_diagonal(X, 1.0)
    return X


class TestKnownValues:

    def test_three_equicorrelated(self):
        rho = 0.5
        result = kmo(equicorrelation(3, rho), is_correlation=True)
        expected = (1 + rho) ** 2 / ((1 + rho) ** 2 + 1)
        assert result.overall == pytest.approx(expected, rel=1e-12)
        assert result.band == "mediocre"
        assert_allclose(result.individual, np.full(3, expected), rtol=1e-12)

    def test_three_equicorrelated_anti_image(self):
        rho = 0.5
        result = kmo(equicorrelation(3, rho), is_correlation=True)
        off = ~np.eye(3, dtype=bool)
        assert_allclose(result.air[off], -rho / (1 + rho), rtol=1e-12)
        assert_allclose(np.diag(result.air), result.individual, rtol=1e-12)
        # diag(AIS) = 1 / diag(solve(X)) = (1 - rho)(1 + 2 rho) / (1 + rho)
        assert_allclose(np.diag(result.ais), (1 - rho) * (1 + 2 * rho) / (1 + rho), rtol=1e-12)

    @pytest.mark.parametrize("rho", [0.3, -0.4, 0.8])
    def test_two_variables_is_one_half(self, rho):
        result = kmo(equicorrelation(2, rho), is_correlation=True)
        assert result.overall == pytest.approx(0.5, rel=1e-12)
        assert_allclose(result.individual, [0.5, 0.5], rtol=1e-12)

    def test_identical_columns(self):
        """kmo(data.frame(c(1,2,3), c(1,2,3), c(1,2,3))): overall 0.5 via ginv."""
        data = np.column_stack([[1.0, 2.0, 3.0]] * 3)
        with pytest.warns(RuntimeWarning, match="singular"):
            result = kmo(data)
        assert result.overall == pytest.approx(0.5, rel=1e-10)
        assert_allclose(result.individual, 0.5, rtol=1e-10)
        assert result.rank == 1

    def test_identity_is_unacceptable(self):
        with pytest.warns(RuntimeWarning, match="no common variance"):
            result = kmo(np.eye(4), is_correlation=True)
        assert result.overall == 0.0
        assert result.band == "unacceptable"
        assert result.report == (
            "The KMO test yields a degree of common variance unacceptable for FA."
        )
        assert_allclose(result.individual, 0.0)


class TestRawData:

    def test_raw_equals_correlation_path(self, two_factor_data):
        from_raw = kmo(two_factor_data)
        X = np.corrcoef(two_factor_data, rowvar=False)
        from_cor = kmo(X, is_correlation=True)
        assert from_raw.overall == pytest.approx(from_cor.overall, rel=1e-10)
        assert_allclose(from_raw.individual, from_cor.individual, rtol=1e-10)
        assert_allclose(from_raw.correlation, X, atol=1e-12)

    def test_factorable_data_in_range(self, two_factor_data):
        result = kmo(two_factor_data)
        assert 0.5 < result.overall < 1.0
        assert np.all((result.individual > 0.0) & (result.individual < 1.0))
        assert result.warnings == ()
        assert result.ais.shape == (6, 6)
        assert result.image_covariance.shape == (6, 6)
        assert result.image_correlation.shape == (6, 6)

    def test_matrices_symmetric(self, two_factor_data):
        result = kmo(two_factor_data)
        assert_allclose(result.ais, result.ais.T, atol=1e-12)
        assert_allclose(result.air, result.air.T, atol=1e-12)

    def test_collinear_uses_generalized_inverse(self, collinear_data):
        with pytest.warns(RuntimeWarning, match="generalized inverse"):
            result = kmo(collinear_data)
        assert result.rank == 2
        assert 0.0 < result.overall <= 1.0

    def test_constant_column_is_singular(self, rng):
        data = np.column_stack([rng.standard_normal(20), np.full(20, 3.0)])
        with pytest.raises(SingularMatrixError) as exc_info:
            kmo(data)
        assert exc_info.value.matrix_name == "correlation matrix"

    def test_column_names(self):
        class Frame:
            values = np.array([[1.0, 2.0], [2.0, 1.0], [3.0, 5.0], [4.0, 3.0]])
            columns = ["anxiety", "stress"]

        result = kmo(Frame())
        assert result.columns == ("anxiety", "stress")
        assert "anxiety" in result.summary()

    def test_default_column_names(self, two_factor_data):
        assert kmo(two_factor_data).columns == ("V1", "V2", "V3", "V4", "V5", "V6")


class TestValidation:

    def test_single_variable_rejected(self):
        with pytest.raises(ValidationError, match="at least 2 variables"):
            kmo(np.arange(10.0).reshape(-1, 1))

    def test_single_observation_rejected(self):
        with pytest.raises(ValidationError, match="at least 2 samples"):
            kmo(np.array([[1.0, 2.0, 3.0]]))

    def test_non_square_correlation_rejected(self):
        with pytest.raises(DimensionError, match="square"):
            kmo(np.ones((3, 2)), is_correlation=True)

    def test_asymmetric_correlation_rejected(self):
        X = np.array([[1.0, 0.5], [0.2, 1.0]])
        with pytest.raises(ValidationError, match="symmetric"):
            kmo(X, is_correlation=True)

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="non-finite"):
            kmo(np.array([[1.0, 2.0], [np.nan, 1.0], [3.0, 4.0]]))

    def test_zero_matrix_has_no_anti_image(self):
        """ginv(0) = 0, so diag(iX) is zero and S2 = diag(1 / diag(iX)) is undefined."""
        with pytest.raises(SingularMatrixError, match="non-positive diagonal") as exc_info:
            kmo(np.zeros((3, 3)), is_correlation=True)
        assert exc_info.value.rank == 0
        assert exc_info.value.expected_rank == 3

    def test_wrong_number_of_names(self, two_factor_data):
        with pytest.raises(DimensionError, match="6 names"):
            kmo(two_factor_data, columns=["a", "b"])


class TestClassification:

    @pytest.mark.parametrize("value,label", [
        (0.0, "unacceptable"),
        (0.4999, "unacceptable"),
        (0.5, "miserable"),
        (0.65, "mediocre"),
        (0.7, "middling"),
        (0.85, "meritorious"),
        (0.9, "marvelous"),
        (1.0, "marvelous"),
    ])
    def test_bands(self, value, label):
        assert classify_kmo(value).label == label

    def test_negative_is_unacceptable(self):
        assert classify_kmo(-0.1).label == "unacceptable"

    def test_nan_rejected(self):
        with pytest.raises(ValidationError):
            classify_kmo(float("nan"))

    def test_table_is_ordered(self):
        bounds = [band.lower for band in KMO_BANDS]
        assert bounds == sorted(bounds, reverse=True)
        assert len(KMO_BANDS) == 6

    def test_report_sentence(self):
        assert classify_kmo(0.75).report == (
            "The KMO test yields a degree of common variance middling."
        )


class TestFormatting:

    def test_summary(self):
        result = kmo(equicorrelation(3, 0.5), is_correlation=True)
        s = result.summary()
        assert "Overall KMO = 0.6923" in s
        assert "mediocre" in s
        assert "V3" in s

    def test_repr(self):
        result = kmo(equicorrelation(3, 0.5), is_correlation=True)
        assert repr(result) == "KMOSolution(overall=0.6923, band='mediocre')"
