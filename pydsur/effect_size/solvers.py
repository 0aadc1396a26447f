"""
Solver dispatch for effect sizes.

Provides R-named functions: r_contrast() (rcontrast) and
r_from_wilcox() (rFromWilcox).
"""

from __future__ import annotations

from pydsur.core.compute.timing import Timer
from pydsur.core.diagnostics import emit
from pydsur.core.exceptions import ValidationError
from pydsur.core.protocols import RankTestModel
from pydsur.core.result import Result
from pydsur.core.validation import check_scalar
from pydsur.effect_size._effect_size import r_from_t, r_from_p
from pydsur.effect_size.solution import EffectSizeSolution


def r_contrast(t: float, df: float) -> EffectSizeSolution:
    """
    Effect size r for an orthogonal contrast. DSUR p. 457.

    Parameters
    ----------
    t : float
        t-value of the contrast.
    df : float
        Degrees of freedom of the t-value, > 0.

    Returns
    -------
    EffectSizeSolution
        ``r`` in [0, 1); 0 when t = 0, increasing in |t|.

    Examples
    --------
    >>> r_contrast(2.474, 12).r
    0.5811...
    """
    t = check_scalar(t, "t")
    df = check_scalar(df, "df", min_value=0.0, min_inclusive=False)

    timer = Timer()
    timer.start()
    with timer.section('effect_size'):
        params, warnings_list = r_from_t(t, df)
    timer.stop()

    result = Result(
        params=params,
        info={'method': 'r_contrast', 'page': 457},
        timing=timer.result(),
        backend_name='cpu_effect_size',
        warnings=tuple(warnings_list),
    )
    return EffectSizeSolution(_result=result)


def r_from_wilcox(model: RankTestModel, n: int) -> EffectSizeSolution:
    """
    Effect size r from a Wilcoxon test. DSUR p. 665.

    Parameters
    ----------
    model : RankTestModel
        Any object exposing ``p_value`` (two-sided) and ``data_name``,
        e.g. a RankTestSummary.
    n : int
        Total number of observations the test was run on, > 0.

    Returns
    -------
    EffectSizeSolution
        ``r = qnorm(p / 2) / sqrt(n)``. p = 1 gives r = 0. p = 0 gives
        r = -inf and records a warning.
    """
    if not isinstance(model, RankTestModel):
        raise ValidationError(
            f"model: expected an object with 'p_value' and 'data_name', "
            f"got {type(model).__name__}"
        )

    p_value = check_scalar(model.p_value, "model.p_value", min_value=0.0)
    if p_value > 1.0:
        raise ValidationError(f"model.p_value: must be <= 1, got {p_value}")

    n_value = check_scalar(n, "n", min_value=0.0, min_inclusive=False)
    if not n_value.is_integer():
        raise ValidationError(f"n: must be a whole number, got {n}")

    timer = Timer()
    timer.start()
    with timer.section('effect_size'):
        params, warnings_list = r_from_p(p_value, int(n_value), str(model.data_name))
    timer.stop()

    emit(warnings_list)

    result = Result(
        params=params,
        info={'method': 'r_from_wilcox', 'page': 665},
        timing=timer.result(),
        backend_name='cpu_effect_size',
        warnings=tuple(warnings_list),
    )
    return EffectSizeSolution(_result=result)
