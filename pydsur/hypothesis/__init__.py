"""
Hypothesis testing module.

Public API:
    t_test_from_means(x1, x2, sd1, sd2, n1, n2)
        - Two-sample t-test from summary statistics
"""

from pydsur.hypothesis.solvers import t_test_from_means
from pydsur.hypothesis._common import HTestParams, VALID_ALTERNATIVES
from pydsur.hypothesis.solution import HTestSolution

__all__ = [
    "t_test_from_means",
    "HTestParams",
    "HTestSolution",
    "VALID_ALTERNATIVES",
]
