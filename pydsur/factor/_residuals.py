"""
Factor analysis residuals (DSUR p. 785).

    residual  = r - L Phi L'       (psych::factor.residuals)
    residuals = upper triangle of the residual matrix
    rmsr      = sqrt(mean(residuals^2))
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydsur.factor._common import ResidualParams


def upper_triangle(matrix: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Strict upper triangle in R's column-major upper.tri() order."""
    rows, cols = np.tril_indices(matrix.shape[0], k=-1)
    return matrix[cols, rows]


def residual_summary(
    matrix: NDArray[np.floating[Any]],
    threshold: float,
) -> tuple[ResidualParams, list[str]]:
    residuals = upper_triangle(matrix)
    large = np.abs(residuals) > threshold
    n_large = int(np.count_nonzero(large))

    return ResidualParams(
        residuals=residuals,
        large=large,
        n_large=n_large,
        prop_large=n_large / residuals.size,
        rmsr=float(np.sqrt(np.mean(residuals ** 2))),
        threshold=threshold,
    ), []


def model_residuals(
    r: NDArray[np.floating[Any]],
    loadings: NDArray[np.floating[Any]],
    phi: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """Observed minus model-implied correlations."""
    return r - loadings @ phi @ loadings.T
