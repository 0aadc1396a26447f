"""
Effect size module.

Effect sizes r from test statistics, as computed in DSUR.

Public API:
    r_contrast(t, df)          - r from a contrast t-value
    r_from_wilcox(model, n)    - r from a Wilcoxon test p-value
"""

from pydsur.effect_size.solvers import r_contrast, r_from_wilcox
from pydsur.effect_size._common import EffectSizeParams, RankTestSummary
from pydsur.effect_size.solution import EffectSizeSolution

__all__ = [
    "r_contrast",
    "r_from_wilcox",
    "EffectSizeParams",
    "RankTestSummary",
    "EffectSizeSolution",
]
