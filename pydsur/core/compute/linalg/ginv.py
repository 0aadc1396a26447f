"""
Moore-Penrose generalized inverse.

Matches R's MASS::ginv(): singular values below ``tol`` times the largest
singular value are treated as zero, with ``tol = sqrt(machine epsilon)``.
The inverse comes from ``numpy.linalg.pinv`` with ``rcond=tol``; its default
cutoff is much smaller, which changes the result for near-singular
correlation matrices.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray


GINV_TOL = float(np.sqrt(np.finfo(np.float64).eps))


@dataclass(frozen=True)
class GinvResult:
    """
    Result of a generalized inverse.

    Attributes:
        inverse: Generalized inverse (p x n for an n x p input)
        rank: Number of singular values kept
        singular_values: All singular values, descending
    """
    inverse: NDArray[np.floating[Any]]
    rank: int
    singular_values: NDArray[np.floating[Any]]

    @property
    def is_full_rank(self) -> bool:
        return self.rank == len(self.singular_values)

    @property
    def condition_number(self) -> float:
        s = self.singular_values
        if len(s) == 0 or s[-1] == 0.0:
            return float('inf')
        return float(s[0] / s[-1])


def ginv(
    X: NDArray[np.floating[Any]],
    tol: float = GINV_TOL,
) -> GinvResult:
    """
    Generalized inverse via SVD, MASS::ginv() semantics.

    Args:
        X: Matrix to invert (n x p)
        tol: Relative tolerance for treating singular values as zero

    Returns:
        GinvResult with the inverse and its numerical rank
    """
    X = np.asarray(X, dtype=np.float64)
    s = np.linalg.svd(X, compute_uv=False)

    if len(s) == 0 or s[0] == 0.0:
        return GinvResult(inverse=np.zeros(X.shape[::-1]), rank=0, singular_values=s)

    # pinv drops singular values <= rcond * max(s), the same cutoff as MASS::ginv
    rank = int(np.sum(s > tol * s[0]))
    inverse = np.linalg.pinv(X, rcond=tol)
    return GinvResult(inverse=inverse, rank=rank, singular_values=s)
