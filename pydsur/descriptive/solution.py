"""
Descriptive statistics solution types.

Contains the parameter payloads and user-facing solution wrappers for
mean_of_variable() and rm_mean_adjust().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pydsur.core.result import Result

if TYPE_CHECKING:
    from pydsur.descriptive.design import PairedDesign


@dataclass(frozen=True)
class MeanParams:
    """Arithmetic mean of one variable."""
    mean: float
    n: int


@dataclass(frozen=True)
class RMAdjustParams:
    """
    Parameter payload for the repeated-measures adjustment.

    Attributes
    ----------
    adjusted : ndarray, shape (n, 2)
        Adjusted scores for conditions A and B.
    columns : tuple of str
        Output names, ``<name>_Adj``.
    participant_mean : ndarray, shape (n,)
        Mean of each participant's two scores.
    grand_mean : float
        Mean of all 2n scores.
    adjustment : ndarray, shape (n,)
        grand_mean - participant_mean, added to both scores of a row.
    """
    adjusted: NDArray[np.floating[Any]]
    columns: tuple[str, str]
    participant_mean: NDArray[np.floating[Any]]
    grand_mean: float
    adjustment: NDArray[np.floating[Any]]


@dataclass
class MeanSolution:
    """User-facing result of mean_of_variable()."""
    _result: Result[MeanParams]

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Format as the R console output, e.g. ``Mean =  2``."""
        return f"Mean =  {self._result.params.mean:.7g}"

    def __repr__(self) -> str:
        p = self._result.params
        return f"MeanSolution(mean={p.mean:.6g}, n={p.n})"


@dataclass
class RMAdjustSolution:
    """
    User-facing result of rm_mean_adjust().

    Behaves like the data frame the R helper returns: ``data`` holds the
    adjusted columns and ``columns`` their names.
    """
    _result: Result[RMAdjustParams]
    _design: 'PairedDesign'

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Adjusted scores, shape (n, 2)."""
        return self._result.params.adjusted

    @property
    def columns(self) -> tuple[str, str]:
        """Adjusted column names, e.g. ('before_Adj', 'after_Adj')."""
        return self._result.params.columns

    @property
    def participant_mean(self) -> NDArray[np.floating[Any]]:
        return self._result.params.participant_mean

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def adjustment(self) -> NDArray[np.floating[Any]]:
        return self._result.params.adjustment

    @property
    def n(self) -> int:
        return self._result.params.adjusted.shape[0]

    def to_dict(self) -> dict[str, NDArray[np.floating[Any]]]:
        """Map each adjusted column name to its values."""
        adjusted = self._result.params.adjusted
        return {name: adjusted[:, j] for j, name in enumerate(self.columns)}

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
        """Format as R prints a data frame."""
        adjusted = self._result.params.adjusted
        cells = [[f"{v:.7g}" for v in row] for row in adjusted]
        row_labels = [str(i + 1) for i in range(len(cells))]
        label_w = max((len(s) for s in row_labels), default=1)
        widths = [
            max([len(name)] + [len(row[j]) for row in cells])
            for j, name in enumerate(self.columns)
        ]

        header = " " * label_w + "".join(
            f" {name:>{w}s}" for name, w in zip(self.columns, widths)
        )
        lines = [header]
        for label, row in zip(row_labels, cells):
            lines.append(
                f"{label:<{label_w}s}" + "".join(f" {c:>{w}s}" for c, w in zip(row, widths))
            )
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"RMAdjustSolution(n={self.n}, columns={self.columns!r})"
