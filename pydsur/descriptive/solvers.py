"""
Solver dispatch for descriptive helpers.

Provides R-named functions: mean_of_variable() (meanOfVariable) and
rm_mean_adjust() (rmMeanAdjust).
"""

from __future__ import annotations

from typing import Sequence
from numpy.typing import ArrayLike

from pydsur.core.compute.timing import Timer
from pydsur.core.result import Result
from pydsur.core.validation import check_array, check_1d, check_finite, check_min_samples
from pydsur.descriptive.design import PairedDesign
from pydsur.descriptive.solution import MeanSolution, RMAdjustSolution
from pydsur.descriptive._formulas import arithmetic_mean, rm_adjust


def mean_of_variable(x: ArrayLike) -> MeanSolution:
    """
    Arithmetic mean of a variable. DSUR p. 228.

    Parameters
    ----------
    x : array-like
        Non-empty 1D sequence of finite numbers.

    Returns
    -------
    MeanSolution
        ``mean`` = sum(x) / len(x).

    Raises
    ------
    ValidationError
        If x is empty or contains NaN/Inf.
    DimensionError
        If x is not 1D.
    """
    arr = check_array(x, "x")
    check_1d(arr, "x")
    check_min_samples(arr, 1, "x")
    check_finite(arr, "x")

    timer = Timer()
    timer.start()
    with timer.section('mean'):
        params, warnings_list = arithmetic_mean(arr)
    timer.stop()

    result = Result(
        params=params,
        info={'method': 'mean_of_variable', 'page': 228},
        timing=timer.result(),
        backend_name='cpu_descriptive',
        warnings=tuple(warnings_list),
    )
    return MeanSolution(_result=result)


def rm_mean_adjust(
    data: ArrayLike | PairedDesign,
    *,
    columns: Sequence[str] | None = None,
) -> RMAdjustSolution:
    """
    Adjust paired scores for a repeated-measures design. DSUR p. 365.

    For each participant the mean of their two scores is replaced by the
    grand mean, which removes between-participant variability before
    plotting error bars.

    Parameters
    ----------
    data : array-like or PairedDesign
        (n, 2) table of scores; rows are participants.
    columns : sequence of 2 str, optional
        Names of the two conditions. Defaults to ``data.columns`` when
        present, else ('V1', 'V2').

    Returns
    -------
    RMAdjustSolution
        Adjusted table with columns named ``<name>_Adj``.
    """
    if isinstance(data, PairedDesign):
        design = data
    else:
        design = PairedDesign.from_array(data, columns=columns)

    timer = Timer()
    timer.start()
    with timer.section('adjust'):
        params, warnings_list = rm_adjust(design)
    timer.stop()

    result = Result(
        params=params,
        info={'method': 'rm_mean_adjust', 'page': 365, 'n': design.n},
        timing=timer.result(),
        backend_name='cpu_descriptive',
        warnings=tuple(warnings_list),
    )
    return RMAdjustSolution(_result=result, _design=design)
