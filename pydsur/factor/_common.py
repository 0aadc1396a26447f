"""
Common types for factor analysis diagnostics.

Defines the KMO classification table, KMOParams and ResidualParams.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple
import math

import numpy as np
from numpy.typing import NDArray

from pydsur.core.exceptions import ValidationError


DEFAULT_RESIDUAL_THRESHOLD = 0.05


class KMOBand(NamedTuple):
    """One row of the KMO classification table (Kaiser, 1974)."""
    lower: float
    label: str
    report: str


def _band(lower: float, label: str, report: str | None = None) -> KMOBand:
    if report is None:
        report = f"The KMO test yields a degree of common variance {label}."
    return KMOBand(lower, label, report)


# Highest bound first; a value belongs to the first band whose lower bound it reaches.
KMO_BANDS: tuple[KMOBand, ...] = (
    _band(0.90, "marvelous"),
    _band(0.80, "meritorious"),
    _band(0.70, "middling"),
    _band(0.60, "mediocre"),
    _band(0.50, "miserable"),
    _band(0.00, "unacceptable",
          "The KMO test yields a degree of common variance unacceptable for FA."),
)


def classify_kmo(value: float) -> KMOBand:
    """
    Classify an overall KMO value.

    Parameters
    ----------
    value : float
        KMO statistic, normally in [0, 1].

    Returns
    -------
    KMOBand
        ``label`` is one of unacceptable (< .5), miserable, mediocre,
        middling, meritorious, marvelous (>= .9).

    Raises
    ------
    ValidationError
        If value is NaN.
    """
    value = float(value)
    if math.isnan(value):
        raise ValidationError("KMO value is NaN; cannot classify")
    for band in KMO_BANDS:
        if value >= band.lower:
            return band
    return KMO_BANDS[-1]


@dataclass(frozen=True)
class KMOParams:
    """
    Parameter payload for the Kaiser-Meyer-Olkin test.

    Attributes
    ----------
    overall : float
        Overall KMO statistic.
    band : KMOBand
        Classification of ``overall``.
    individual : ndarray, shape (p,)
        Measure of sampling adequacy (MSA) per variable.
    correlation : ndarray, shape (p, p)
        Correlation matrix X the statistic was computed from.
    ais : ndarray, shape (p, p)
        Anti-image covariance matrix.
    air : ndarray, shape (p, p)
        Anti-image correlation matrix with the diagonal replaced by MSA.
        Off-diagonal entries are the negated partial correlations.
    image_covariance : ndarray, shape (p, p)
    image_correlation : ndarray, shape (p, p)
    rank : int
        Numerical rank of X.
    """
    overall: float
    band: KMOBand
    individual: NDArray[np.floating[Any]]
    correlation: NDArray[np.floating[Any]]
    ais: NDArray[np.floating[Any]]
    air: NDArray[np.floating[Any]]
    image_covariance: NDArray[np.floating[Any]]
    image_correlation: NDArray[np.floating[Any]]
    rank: int


@dataclass(frozen=True)
class ResidualParams:
    """
    Parameter payload for factor analysis residual diagnostics.

    Attributes
    ----------
    residuals : ndarray, shape (p * (p - 1) / 2,)
        Strictly upper-triangular residuals in column-major order.
    large : ndarray of bool
        |residual| > threshold.
    n_large : int
    prop_large : float
    rmsr : float
        Root mean squared residual.
    threshold : float
    """
    residuals: NDArray[np.floating[Any]]
    large: NDArray[np.bool_]
    n_large: int
    prop_large: float
    rmsr: float
    threshold: float
