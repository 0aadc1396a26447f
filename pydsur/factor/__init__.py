"""
Factor analysis diagnostics module.

Public API:
    kmo(data)                       - Kaiser-Meyer-Olkin sampling adequacy
    classify_kmo(value)             - KMO classification band
    residual_stats(matrix)          - RMSR and large-residual counts
    factor_residuals(r, loadings)   - Observed minus model-implied correlations
"""

from pydsur.factor.solvers import kmo, residual_stats, factor_residuals
from pydsur.factor._common import (
    DEFAULT_RESIDUAL_THRESHOLD,
    KMO_BANDS,
    KMOBand,
    KMOParams,
    ResidualParams,
    classify_kmo,
)
from pydsur.factor.solution import KMOSolution, ResidualSolution

__all__ = [
    "kmo",
    "classify_kmo",
    "residual_stats",
    "factor_residuals",
    "DEFAULT_RESIDUAL_THRESHOLD",
    "KMO_BANDS",
    "KMOBand",
    "KMOParams",
    "ResidualParams",
    "KMOSolution",
    "ResidualSolution",
]
