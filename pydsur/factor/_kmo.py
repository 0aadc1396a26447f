"""
Kaiser-Meyer-Olkin measure of sampling adequacy (DSUR p. 776).

Follows G. Jay Kerns' implementation used in the book, with a generalized
inverse throughout so that rank-deficient correlation matrices still
produce a value:

    iX  = ginv(X)
    S2  = diag(1 / diag(iX))
    AIS = S2 iX S2                    anti-image covariance
    IS  = X + AIS - 2 S2              image covariance
    Dai = diag(sqrt(diag(AIS)))
    IR  = ginv(Dai) IS ginv(Dai)      image correlation
    AIR = ginv(Dai) AIS ginv(Dai)     anti-image correlation
    a   = colSums((AIR - diag(diag(AIR)))^2)
    b   = colSums((X - I)^2)
    MSA = b / (b + a)
    KMO = sum(b) / (sum(a) + sum(b))
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydsur.core.compute.linalg import ginv
from pydsur.core.exceptions import SingularMatrixError
from pydsur.factor._common import KMOParams, classify_kmo


def correlation_from_data(data: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Pearson correlation of the columns. Matches R cor(as.matrix(data)).

    Raises
    ------
    SingularMatrixError
        If a column is constant, so its correlations are undefined.
    """
    cov_mat = np.cov(data, rowvar=False, ddof=1)
    sd = np.sqrt(np.diag(cov_mat))
    constant = np.where(sd == 0.0)[0]
    if len(constant) > 0:
        raise SingularMatrixError(
            f"correlation matrix: columns {constant.tolist()} are constant; "
            f"their correlations are undefined",
            matrix_name="correlation matrix",
            expected_rank=data.shape[1],
        )
    cor_mat = cov_mat / np.outer(sd, sd)
    np.fill_diagonal(cor_mat, 1.0)
    return np.clip(cor_mat, -1.0, 1.0)


def kmo_from_correlation(
    X: NDArray[np.floating[Any]],
) -> tuple[KMOParams, list[str]]:
    """KMO statistic and anti-image matrices of a correlation matrix."""
    warnings_list: list[str] = []
    p = X.shape[0]
    eye = np.eye(p)

    inv_x = ginv(X)
    if not inv_x.is_full_rank:
        warnings_list.append(
            "correlation matrix is singular; generalized inverse used"
        )
    iX = inv_x.inverse

    d = np.diag(iX)
    if not np.all(np.isfinite(d)) or np.any(d <= 0.0):
        raise SingularMatrixError(
            "correlation matrix: generalized inverse has a non-positive "
            "diagonal; anti-image matrices are undefined",
            matrix_name="correlation matrix",
            condition_number=inv_x.condition_number,
            rank=inv_x.rank,
            expected_rank=p,
        )

    S2 = np.diag(1.0 / d)
    AIS = S2 @ iX @ S2
    IS = X + AIS - 2.0 * S2
    Dai = np.diag(np.sqrt(np.diag(AIS)))
    iDai = ginv(Dai).inverse
    IR = iDai @ IS @ iDai
    AIR = iDai @ AIS @ iDai

    a = np.sum((AIR - np.diag(np.diag(AIR))) ** 2, axis=0)
    AA = float(np.sum(a))
    b = np.sum((X - eye) ** 2, axis=0)
    BB = float(np.sum(b))

    if AA + BB == 0.0:
        warnings_list.append("no common variance: all correlations are zero")
        msa = np.zeros(p)
        overall = 0.0
    else:
        denom = b + a
        # A variable uncorrelated with every other one has b = a = 0
        msa = np.divide(b, denom, out=np.zeros(p), where=denom > 0.0)
        overall = BB / (AA + BB)

    air = AIR - eye + np.diag(msa)

    if not (np.isfinite(overall) and np.all(np.isfinite(air)) and np.all(np.isfinite(AIS))):
        raise SingularMatrixError(
            "correlation matrix: KMO computation produced non-finite values",
            matrix_name="correlation matrix",
            condition_number=inv_x.condition_number,
            rank=inv_x.rank,
            expected_rank=p,
        )

    return KMOParams(
        overall=overall,
        band=classify_kmo(overall),
        individual=msa,
        correlation=X,
        ais=AIS,
        air=air,
        image_covariance=IS,
        image_correlation=IR,
        rank=inv_x.rank,
    ), warnings_list
