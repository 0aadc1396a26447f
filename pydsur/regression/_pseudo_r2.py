"""
Pseudo R-squared for logistic regression (DSUR p. 332).
"""

from __future__ import annotations

import math

from pydsur.regression._common import LogisticModelSummary, PseudoR2Params


def pseudo_r2(model: LogisticModelSummary) -> tuple[PseudoR2Params, list[str]]:
    dev = model.deviance
    null_dev = model.null_deviance
    n = model.n_obs

    r_l = 1.0 - dev / null_dev
    r_cs = 1.0 - math.exp(-(null_dev - dev) / n)
    r_n = r_cs / (1.0 - math.exp(-(null_dev / n)))

    return PseudoR2Params(
        hosmer_lemeshow=r_l,
        cox_snell=r_cs,
        nagelkerke=r_n,
        deviance=dev,
        null_deviance=null_dev,
        n_obs=n,
    ), []
