"""
Solver dispatch for factor analysis diagnostics.

Provides R-named functions: kmo(), residual_stats() (residual.stats) and
factor_residuals() (factor.residuals).
"""

from __future__ import annotations

from typing import Any, Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydsur.core.compute.timing import Timer
from pydsur.core.diagnostics import emit
from pydsur.core.exceptions import DimensionError, ValidationError
from pydsur.core.result import Result
from pydsur.core.validation import (
    check_array,
    check_2d,
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_scalar,
    check_square,
)
from pydsur.factor._common import DEFAULT_RESIDUAL_THRESHOLD
from pydsur.factor._kmo import correlation_from_data, kmo_from_correlation
from pydsur.factor._residuals import model_residuals, residual_summary
from pydsur.factor.solution import KMOSolution, ResidualSolution


def kmo(
    data: ArrayLike,
    *,
    is_correlation: bool = False,
    columns: Sequence[str] | None = None,
) -> KMOSolution:
    """
    Kaiser-Meyer-Olkin measure of sampling adequacy. DSUR p. 776.

    Parameters
    ----------
    data : array-like
        Raw scores (observations x variables), or a correlation matrix
        when ``is_correlation=True``. Objects with ``.values`` and
        ``.columns`` (e.g. a DataFrame) are accepted.
    is_correlation : bool
        Treat ``data`` as the correlation matrix itself.
    columns : sequence of str, optional
        Variable names for display. Defaults to ``data.columns`` when
        present, else V1..Vp.

    Returns
    -------
    KMOSolution
        overall, report, individual (MSA), ais, air.

    Raises
    ------
    SingularMatrixError
        If a column is constant or the anti-image matrices are undefined.
    ValidationError
        If data has fewer than 2 variables (or 2 observations), contains
        NaN/Inf, or a correlation matrix is not symmetric.
    """
    if columns is None and hasattr(data, 'columns'):
        columns = [str(c) for c in data.columns]

    arr = check_array(data, "data")
    check_2d(arr, "data")
    check_finite(arr, "data")
    if arr.shape[1] < 2:
        raise ValidationError(f"data: KMO needs at least 2 variables, got {arr.shape[1]}")

    timer = Timer()
    timer.start()

    if is_correlation:
        check_square(arr, "data")
        if not np.allclose(arr, arr.T):
            raise ValidationError("data: correlation matrix is not symmetric")
        X = arr
    else:
        check_min_samples(arr, 2, "data")
        with timer.section('correlation'):
            X = correlation_from_data(arr)

    p = X.shape[0]

    if columns is None:
        names = tuple(f"V{j + 1}" for j in range(p))
    else:
        names = tuple(str(c) for c in columns)
        if len(names) != p:
            raise DimensionError(f"columns: expected {p} names, got {len(names)}")

    with timer.section('kmo'):
        params, warnings_list = kmo_from_correlation(X)
    timer.stop()

    emit(warnings_list)

    result = Result(
        params=params,
        info={'method': 'kmo', 'page': 776, 'p': p, 'is_correlation': is_correlation},
        timing=timer.result(),
        backend_name='cpu_factor',
        warnings=tuple(warnings_list),
    )
    return KMOSolution(_result=result, _columns=names)


def residual_stats(
    matrix: ArrayLike,
    *,
    threshold: float = DEFAULT_RESIDUAL_THRESHOLD,
) -> ResidualSolution:
    """
    Summary of factor analysis residuals. DSUR p. 785.

    Parameters
    ----------
    matrix : array-like
        Square residual matrix, e.g. from factor_residuals().
    threshold : float
        Residuals with absolute value above this count as large.
        Default 0.05.

    Returns
    -------
    ResidualSolution
        rmsr, n_large, prop_large, residuals; histogram() for plotting.
    """
    arr = check_array(matrix, "matrix")
    check_square(arr, "matrix")
    check_finite(arr, "matrix")
    if arr.shape[0] < 2:
        raise ValidationError(
            f"matrix: need at least 2x2 to have residuals, got {arr.shape}"
        )
    threshold = check_scalar(threshold, "threshold", min_value=0.0)

    timer = Timer()
    timer.start()
    with timer.section('residuals'):
        params, warnings_list = residual_summary(arr, threshold)
    timer.stop()

    result = Result(
        params=params,
        info={'method': 'residual_stats', 'page': 785, 'p': arr.shape[0]},
        timing=timer.result(),
        backend_name='cpu_factor',
        warnings=tuple(warnings_list),
    )
    return ResidualSolution(_result=result)


def factor_residuals(
    r: ArrayLike,
    loadings: ArrayLike,
    *,
    phi: ArrayLike | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Observed minus model-implied correlations.

    Parameters
    ----------
    r : array-like
        Observed correlation matrix, (p, p).
    loadings : array-like
        Factor loadings, (p, k). A 1D vector is a single factor.
    phi : array-like, optional
        Factor correlation matrix (k, k) for oblique rotations.
        Identity when omitted.

    Returns
    -------
    ndarray, shape (p, p)
        ``r - loadings @ phi @ loadings.T``; the diagonal holds the
        uniquenesses.
    """
    r_arr = check_array(r, "r")
    check_square(r_arr, "r")
    check_finite(r_arr, "r")

    lam = check_array(loadings, "loadings")
    if lam.ndim == 1:
        lam = lam.reshape(-1, 1)
    check_2d(lam, "loadings")
    check_finite(lam, "loadings")
    check_consistent_length(r_arr, lam, names=("r", "loadings"))

    k = lam.shape[1]
    if phi is None:
        phi_arr = np.eye(k)
    else:
        phi_arr = check_array(phi, "phi")
        check_square(phi_arr, "phi")
        check_finite(phi_arr, "phi")
        if phi_arr.shape[0] != k:
            raise DimensionError(
                f"phi: expected shape ({k}, {k}) to match loadings, got {phi_arr.shape}"
            )

    return model_residuals(r_arr, lam, phi_arr)
