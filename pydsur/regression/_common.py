"""
Common types for logistic regression diagnostics.

LogisticModelSummary holds the three numbers logistic_pseudo_r2() reads
from a fitted model; PseudoR2Params holds what it computes.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from pydsur.core.exceptions import ValidationError
from pydsur.core.protocols import LogisticModel


@dataclass(frozen=True)
class LogisticModelSummary:
    """
    Deviances and size of a fitted logistic regression.

    Attributes
    ----------
    deviance : float
        Residual deviance of the fitted model.
    null_deviance : float
        Deviance of the intercept-only model.
    n_obs : int
        Number of fitted values (model size N).
    """
    deviance: float
    null_deviance: float
    n_obs: int

    @classmethod
    def from_model(cls, model: LogisticModel) -> LogisticModelSummary:
        """
        Read ``deviance``, ``null_deviance`` and ``fitted_values`` from a
        fitted model, as R's logModel$deviance etc.
        """
        if not isinstance(model, LogisticModel):
            raise ValidationError(
                "model: expected an object with 'deviance', 'null_deviance' "
                f"and 'fitted_values', got {type(model).__name__}"
            )
        n_obs = int(np.size(np.asarray(model.fitted_values)))
        return cls(
            deviance=float(model.deviance),
            null_deviance=float(model.null_deviance),
            n_obs=n_obs,
        )


@dataclass(frozen=True)
class PseudoR2Params:
    """
    Pseudo R-squared values, unrounded.

    Attributes
    ----------
    hosmer_lemeshow : float
        1 - deviance / null_deviance (also known as McFadden's R^2).
    cox_snell : float
        1 - exp(-(null_deviance - deviance) / N).
    nagelkerke : float
        cox_snell / (1 - exp(-null_deviance / N)).
    deviance, null_deviance : float
        Inputs, kept for display.
    n_obs : int
        Model size N.
    """
    hosmer_lemeshow: float
    cox_snell: float
    nagelkerke: float
    deviance: float
    null_deviance: float
    n_obs: int
