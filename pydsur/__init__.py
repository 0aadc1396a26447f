"""
pydsur: statistical helper functions from Discovering Statistics Using R.

Each helper implements one closed-form formula from the book and returns
an immutable solution object; summary() prints it the way the book does.

Submodules:
    effect_size: r from a contrast t-value or a Wilcoxon test
    descriptive: mean of a variable, repeated-measures adjustment
    hypothesis: two-sample t-test from summary statistics
    regression: pseudo R^2 for logistic regression
    factor: KMO sampling adequacy, factor analysis residuals
"""

__version__ = "0.1.0"

from pydsur import effect_size
from pydsur import descriptive
from pydsur import hypothesis
from pydsur import regression
from pydsur import factor

from pydsur.effect_size import r_contrast, r_from_wilcox
from pydsur.descriptive import mean_of_variable, rm_mean_adjust
from pydsur.hypothesis import t_test_from_means
from pydsur.regression import logistic_pseudo_r2
from pydsur.factor import kmo, residual_stats, factor_residuals

__all__ = [
    "__version__",
    # Submodules
    "effect_size",
    "descriptive",
    "hypothesis",
    "regression",
    "factor",
    # Helpers
    "r_contrast",
    "r_from_wilcox",
    "mean_of_variable",
    "rm_mean_adjust",
    "t_test_from_means",
    "logistic_pseudo_r2",
    "kmo",
    "residual_stats",
    "factor_residuals",
]
