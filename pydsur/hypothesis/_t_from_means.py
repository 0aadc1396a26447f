"""
Two-sample t-test from summary statistics (DSUR p. 375).

Pooled (Student's) form, as in the book:

    df      = n1 + n2 - 2
    poolvar = ((n1 - 1) sd1^2 + (n2 - 1) sd2^2) / df
    t       = (x1 - x2) / sqrt(poolvar (1/n1 + 1/n2))
    p       = 2 (1 - pt(|t|, df))

Welch's form replaces the pooled variance with sd1^2/n1 + sd2^2/n2 and uses
Welch-Satterthwaite degrees of freedom.
"""

from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np
from scipy import stats as sp_stats

from pydsur.hypothesis._common import HTestParams


@dataclass(frozen=True)
class SummaryStats:
    """Validated inputs for t_from_summary()."""
    x1: float
    x2: float
    sd1: float
    sd2: float
    n1: int
    n2: int
    var_equal: bool
    alternative: str
    conf_level: float


def t_from_summary(s: SummaryStats) -> tuple[HTestParams, list[str]]:
    warnings_list: list[str] = []
    n1, n2 = s.n1, s.n2
    diff = s.x1 - s.x2

    if s.var_equal:
        df = float(n1 + n2 - 2)
        poolvar = ((n1 - 1) * s.sd1 ** 2 + (n2 - 1) * s.sd2 ** 2) / df
        se = math.sqrt(poolvar * (1.0 / n1 + 1.0 / n2))
        method = " Two Sample t-test"
    else:
        v1 = s.sd1 ** 2 / n1
        v2 = s.sd2 ** 2 / n2
        se = math.sqrt(v1 + v2)
        # Welch-Satterthwaite degrees of freedom (fractional, DO NOT round)
        if se == 0.0:
            df = float(n1 + n2 - 2)
        else:
            df = (v1 + v2) ** 2 / (v1 ** 2 / (n1 - 1) + v2 ** 2 / (n2 - 1))
        method = "Welch Two Sample t-test"

    if se == 0.0:
        # diff != 0 here; the solver rejects the 0/0 case
        warnings_list.append("standard error is zero")
        t_stat = math.copysign(math.inf, diff)
    else:
        t_stat = diff / se

    p_value = _t_pvalue(t_stat, df, s.alternative)
    ci = _t_conf_int(diff, se, df, s.conf_level, s.alternative)

    return HTestParams(
        statistic=float(t_stat),
        statistic_name="t",
        parameter={"df": df},
        p_value=p_value,
        conf_int=ci,
        conf_level=s.conf_level,
        estimate={"mean of x": s.x1, "mean of y": s.x2},
        null_value={"difference in means": 0.0},
        alternative=s.alternative,
        method=method,
        data_name="summary statistics of x and y",
    ), warnings_list


# --- Helpers ---

def _t_pvalue(t_stat: float, df: float, alternative: str) -> float:
    """Compute p-value from t distribution."""
    # sf(|t|) rather than 1 - cdf(|t|): same value, no cancellation for large t
    if alternative == "two.sided":
        return float(2.0 * sp_stats.t.sf(abs(t_stat), df))
    elif alternative == "less":
        return float(sp_stats.t.cdf(t_stat, df))
    else:  # greater
        return float(sp_stats.t.sf(t_stat, df))


def _t_conf_int(
    estimate: float,
    se: float,
    df: float,
    conf_level: float,
    alternative: str,
) -> np.ndarray:
    """Compute confidence interval for the difference in means."""
    alpha = 1.0 - conf_level

    if alternative == "two.sided":
        t_crit = sp_stats.t.ppf(1.0 - alpha / 2.0, df)
        return np.array([estimate - t_crit * se, estimate + t_crit * se])
    elif alternative == "less":
        t_crit = sp_stats.t.ppf(1.0 - alpha, df)
        return np.array([-np.inf, estimate + t_crit * se])
    else:  # greater
        t_crit = sp_stats.t.ppf(1.0 - alpha, df)
        return np.array([estimate - t_crit * se, np.inf])
