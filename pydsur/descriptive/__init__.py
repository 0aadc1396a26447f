"""
Descriptive helpers module.

Public API:
    mean_of_variable(x)   - Arithmetic mean of one variable
    rm_mean_adjust(data)  - Repeated-measures adjustment of paired scores
"""

from pydsur.descriptive.design import PairedDesign
from pydsur.descriptive.solution import (
    MeanParams,
    MeanSolution,
    RMAdjustParams,
    RMAdjustSolution,
)
from pydsur.descriptive.solvers import mean_of_variable, rm_mean_adjust

__all__ = [
    "mean_of_variable",
    "rm_mean_adjust",
    "PairedDesign",
    "MeanParams",
    "MeanSolution",
    "RMAdjustParams",
    "RMAdjustSolution",
]
