"""
Effect size r from a test statistic.

    r_contrast:     r = sqrt(t^2 / (t^2 + df))          (DSUR p. 457)
    r_from_wilcox:  z = qnorm(p / 2),  r = z / sqrt(N)  (DSUR p. 665)
"""

from __future__ import annotations

import math

from scipy import stats as sp_stats

from pydsur.effect_size._common import EffectSizeParams


def r_from_t(t: float, df: float) -> tuple[EffectSizeParams, list[str]]:
    """Effect size for a planned contrast from its t-value."""
    # |t| / hypot(t, sqrt(df)) == sqrt(t^2 / (t^2 + df)) without squaring t
    r = abs(t) / math.hypot(t, math.sqrt(df))

    return EffectSizeParams(
        r=r,
        statistic=t,
        statistic_name="t",
        parameter={"df": df},
        method="Effect size for contrast",
    ), []


def r_from_p(
    p_value: float,
    n: int,
    data_name: str,
) -> tuple[EffectSizeParams, list[str]]:
    """Effect size from the two-sided p-value of a rank test."""
    warnings_list: list[str] = []

    # Lower-tail quantile: z <= 0, so r <= 0 (the sign carries no direction).
    z = float(sp_stats.norm.ppf(p_value / 2.0))
    if math.isinf(z):
        warnings_list.append("p-value is 0; effect size is -inf")
    r = z / math.sqrt(n)

    return EffectSizeParams(
        r=r,
        statistic=z,
        statistic_name="z",
        parameter={"N": float(n)},
        method="Effect size from Wilcoxon test",
        data_name=data_name,
    ), warnings_list
