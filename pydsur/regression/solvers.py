"""
Solver dispatch for logistic regression diagnostics.

Provides logistic_pseudo_r2() (logisticPseudoR2s).
"""

from __future__ import annotations

from pydsur.core.compute.timing import Timer
from pydsur.core.exceptions import ValidationError
from pydsur.core.protocols import LogisticModel
from pydsur.core.result import Result
from pydsur.core.validation import check_scalar
from pydsur.regression._common import LogisticModelSummary
from pydsur.regression._pseudo_r2 import pseudo_r2
from pydsur.regression.solution import PseudoR2Solution


def logistic_pseudo_r2(
    model: LogisticModelSummary | LogisticModel,
) -> PseudoR2Solution:
    """
    Hosmer-Lemeshow, Cox-Snell and Nagelkerke R^2. DSUR p. 332.

    Parameters
    ----------
    model : LogisticModelSummary or LogisticModel
        Either the three numbers directly, or any fitted model exposing
        ``deviance``, ``null_deviance`` and ``fitted_values``.

    Returns
    -------
    PseudoR2Solution

    Raises
    ------
    ValidationError
        If the null deviance is 0, the model has no observations, a
        deviance is negative or not finite, or the residual deviance
        exceeds the null deviance.
    """
    if not isinstance(model, LogisticModelSummary):
        model = LogisticModelSummary.from_model(model)

    dev = check_scalar(model.deviance, "deviance", min_value=0.0)
    null_dev = check_scalar(model.null_deviance, "null_deviance", min_value=0.0)
    if null_dev == 0.0:
        raise ValidationError(
            "null_deviance: must be > 0 (intercept-only model fits perfectly)"
        )
    if dev > null_dev:
        raise ValidationError(
            f"deviance: must be <= null_deviance, got {dev} > {null_dev} "
            f"(a model with an intercept never fits worse than the null model)"
        )
    if model.n_obs <= 0:
        raise ValidationError(f"n_obs: model has no fitted values (N={model.n_obs})")

    timer = Timer()
    timer.start()
    with timer.section('pseudo_r2'):
        params, warnings_list = pseudo_r2(model)
    timer.stop()

    result = Result(
        params=params,
        info={'method': 'logistic_pseudo_r2', 'page': 332},
        timing=timer.result(),
        backend_name='cpu_regression',
        warnings=tuple(warnings_list),
    )
    return PseudoR2Solution(_result=result)
