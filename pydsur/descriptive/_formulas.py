"""
Descriptive formulas.

    mean_of_variable:  sum(x) / length(x)                      (DSUR p. 228)
    rm_mean_adjust:    x_ij + (grand mean - participant mean)  (DSUR p. 365)
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydsur.descriptive.design import PairedDesign
from pydsur.descriptive.solution import MeanParams, RMAdjustParams


ADJUSTED_SUFFIX = "_Adj"


def arithmetic_mean(x: NDArray[np.floating[Any]]) -> tuple[MeanParams, list[str]]:
    n = x.shape[0]
    return MeanParams(mean=float(np.sum(x) / n), n=n), []


def rm_adjust(design: PairedDesign) -> tuple[RMAdjustParams, list[str]]:
    """
    Remove between-participant variation from paired scores.

    Every row is shifted by the same amount in both columns, so the
    difference between conditions is untouched and the grand mean is
    preserved.
    """
    data = design.data
    a = data[:, 0]
    b = data[:, 1]

    participant_mean = (a + b) / 2.0
    grand_mean = float(np.mean(np.concatenate([a, b])))
    adjustment = grand_mean - participant_mean

    adjusted = np.column_stack([a + adjustment, b + adjustment])
    columns = tuple(f"{name}{ADJUSTED_SUFFIX}" for name in design.columns)

    return RMAdjustParams(
        adjusted=adjusted,
        columns=columns,
        participant_mean=participant_mean,
        grand_mean=grand_mean,
        adjustment=adjustment,
    ), []
