"""
Logistic regression diagnostics.

Public API:
    logistic_pseudo_r2(model)  - Hosmer-Lemeshow, Cox-Snell, Nagelkerke R^2
"""

from pydsur.regression.solvers import logistic_pseudo_r2
from pydsur.regression._common import LogisticModelSummary, PseudoR2Params
from pydsur.regression.solution import PseudoR2Solution

__all__ = [
    "logistic_pseudo_r2",
    "LogisticModelSummary",
    "PseudoR2Params",
    "PseudoR2Solution",
]
