"""
Linear algebra kernels for pydsur.

All functions follow these conventions:
    - NumPy (LAPACK under the hood)
    - Each operation returns a structured result dataclass
    - Errors are raised immediately with clear messages

Submodules:
    ginv: Moore-Penrose generalized inverse (MASS::ginv semantics)
"""

from pydsur.core.compute.linalg.ginv import GINV_TOL, GinvResult, ginv

__all__ = [
    "GINV_TOL",
    "GinvResult",
    "ginv",
]
