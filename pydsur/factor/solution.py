"""
Factor analysis diagnostic solution types.

KMOSolution wraps Result[KMOParams]; ResidualSolution wraps
Result[ResidualParams].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydsur.core.result import Result
from pydsur.factor._common import KMOParams, ResidualParams


@dataclass
class KMOSolution:
    """
    User-facing Kaiser-Meyer-Olkin results.

    Field names follow the list the R kmo() helper returns:
    overall, report, individual, AIS, AIR.
    """
    _result: Result[KMOParams]
    _columns: tuple[str, ...]

    @property
    def overall(self) -> float:
        """Overall KMO statistic."""
        return self._result.params.overall

    @property
    def report(self) -> str:
        """Sentence describing the classification band."""
        return self._result.params.band.report

    @property
    def band(self) -> str:
        """Short classification label, e.g. 'mediocre'."""
        return self._result.params.band.label

    @property
    def individual(self) -> NDArray[np.floating[Any]]:
        """Per-variable measures of sampling adequacy (MSA), shape (p,)."""
        return self._result.params.individual

    @property
    def ais(self) -> NDArray[np.floating[Any]]:
        """Anti-image covariance matrix."""
        return self._result.params.ais

    @property
    def air(self) -> NDArray[np.floating[Any]]:
        """Anti-image correlation matrix, MSA on the diagonal."""
        return self._result.params.air

    @property
    def image_covariance(self) -> NDArray[np.floating[Any]]:
        return self._result.params.image_covariance

    @property
    def image_correlation(self) -> NDArray[np.floating[Any]]:
        return self._result.params.image_correlation

    @property
    def correlation(self) -> NDArray[np.floating[Any]]:
        return self._result.params.correlation

    @property
    def rank(self) -> int:
        """Numerical rank of the correlation matrix."""
        return self._result.params.rank

    @property
    def columns(self) -> tuple[str, ...]:
        return self._columns

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Formatting ---

    def summary(self) -> str:
        p = self._result.params
        width = max(len(c) for c in self._columns)
        lines = [
            "Kaiser-Meyer-Olkin measure of sampling adequacy",
            "",
            f"Overall KMO = {p.overall:.4f}",
            p.band.report,
            "",
            "Individual MSA:",
        ]
        for name, value in zip(self._columns, p.individual):
            lines.append(f"  {name:<{width}s}  {value:.4f}")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return f"KMOSolution(overall={p.overall:.4f}, band={p.band.label!r})"


@dataclass
class ResidualSolution:
    """User-facing factor analysis residual diagnostics."""
    _result: Result[ResidualParams]

    @property
    def rmsr(self) -> float:
        """Root mean squared residual."""
        return self._result.params.rmsr

    @property
    def n_large(self) -> int:
        """Number of residuals with absolute value above the threshold."""
        return self._result.params.n_large

    @property
    def prop_large(self) -> float:
        """Proportion of residuals with absolute value above the threshold."""
        return self._result.params.prop_large

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def large(self) -> NDArray[np.bool_]:
        return self._result.params.large

    @property
    def threshold(self) -> float:
        return self._result.params.threshold

    def histogram(
        self,
        bins: int | str = "sturges",
    ) -> tuple[NDArray[np.integer[Any]], NDArray[np.floating[Any]]]:
        """
        Histogram of the residuals, ready for any plotting library.

        Returns
        -------
        (counts, edges) as from numpy.histogram().
        """
        return np.histogram(self._result.params.residuals, bins=bins)

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Formatting ---

    def summary(self) -> str:
        p = self._result.params
        lines = [
            f"Root means squared residual =  {p.rmsr:.7g}",
            f"Number of absolute residuals > {p.threshold:g} =  {p.n_large}",
            f"Proportions of absolute residuals > {p.threshold:g} =  {p.prop_large:.7g}",
            "",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"ResidualSolution(rmsr={p.rmsr:.4g}, n_large={p.n_large}, "
            f"prop_large={p.prop_large:.4g})"
        )
