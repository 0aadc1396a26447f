"""
Solver dispatch for hypothesis tests.

Provides t_test_from_means() (ttestfromMeans): a two-sample t-test when
only group means, standard deviations and sizes are available.
"""

from __future__ import annotations

from typing import Literal

from pydsur.core.compute.timing import Timer
from pydsur.core.diagnostics import emit
from pydsur.core.exceptions import ValidationError
from pydsur.core.result import Result
from pydsur.core.validation import check_scalar
from pydsur.hypothesis._common import VALID_ALTERNATIVES
from pydsur.hypothesis._t_from_means import SummaryStats, t_from_summary
from pydsur.hypothesis.solution import HTestSolution


def _check_group_size(n, name: str) -> int:
    value = check_scalar(n, name)
    if not value.is_integer():
        raise ValidationError(f"{name}: must be a whole number, got {n}")
    if value < 2:
        raise ValidationError(
            f"{name}: need at least 2 observations per group, got {int(value)}"
        )
    return int(value)


def t_test_from_means(
    x1: float,
    x2: float,
    sd1: float,
    sd2: float,
    n1: int,
    n2: int,
    *,
    var_equal: bool = True,
    alternative: Literal["two.sided", "less", "greater"] = "two.sided",
    conf_level: float = 0.95,
) -> HTestSolution:
    """
    Two-sample t-test from means, SDs and sizes. DSUR p. 375.

    Parameters
    ----------
    x1, x2 : float
        Group means.
    sd1, sd2 : float
        Group standard deviations, >= 0.
    n1, n2 : int
        Group sizes, >= 2.
    var_equal : bool
        If True (default, as in the book), pool the variances
        (df = n1 + n2 - 2). If False, use Welch's test.
    alternative : str
        "two.sided" (default), "less", or "greater".
    conf_level : float
        Confidence level for the interval on x1 - x2. Default 0.95.

    Returns
    -------
    HTestSolution
        ``report()`` gives ``t(df = <df>) = <t>, p = <p>``; ``triple``
        gives ``(t, df, p)``.

    Raises
    ------
    ValidationError
        If a group has fewer than 2 observations, an SD is negative, or
        both SDs are 0 with equal means (t = 0/0).
    """
    x1 = check_scalar(x1, "x1")
    x2 = check_scalar(x2, "x2")
    sd1 = check_scalar(sd1, "sd1", min_value=0.0)
    sd2 = check_scalar(sd2, "sd2", min_value=0.0)
    n1 = _check_group_size(n1, "n1")
    n2 = _check_group_size(n2, "n2")

    if alternative not in VALID_ALTERNATIVES:
        raise ValidationError(
            f"alternative must be one of {VALID_ALTERNATIVES}, got {alternative!r}"
        )
    conf_level = check_scalar(conf_level, "conf_level")
    if not 0.0 < conf_level < 1.0:
        raise ValidationError(f"conf_level must be in (0, 1), got {conf_level}")

    if sd1 == 0.0 and sd2 == 0.0 and x1 == x2:
        raise ValidationError(
            "t is indeterminate (0/0): both standard deviations are 0 and the means are equal"
        )

    stats = SummaryStats(
        x1=x1, x2=x2, sd1=sd1, sd2=sd2, n1=n1, n2=n2,
        var_equal=bool(var_equal),
        alternative=alternative,
        conf_level=conf_level,
    )

    timer = Timer()
    timer.start()
    with timer.section('t_test'):
        params, warnings_list = t_from_summary(stats)
    timer.stop()

    emit(warnings_list)

    result = Result(
        params=params,
        info={'method': 't_test_from_means', 'page': 375, 'var_equal': stats.var_equal},
        timing=timer.result(),
        backend_name='cpu_hypothesis',
        warnings=tuple(warnings_list),
    )
    return HTestSolution(_result=result)
