"""
Shared compute infrastructure for pydsur.

This module provides timing utilities and linear algebra kernels shared
across the domain packages. Domain formulas do NOT live here.

Submodules:
    timing: Execution timing utilities
    linalg: Linear algebra kernels (generalized inverse)
"""

from pydsur.core.compute.timing import Timer
from pydsur.core.compute.linalg import GINV_TOL, GinvResult, ginv

__all__ = [
    # Timing
    "Timer",
    # Linear algebra
    "GINV_TOL",
    "GinvResult",
    "ginv",
]
