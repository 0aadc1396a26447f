"""
PairedDesign: data wrapper for repeated-measures adjustment.

Wraps an (n x 2) table of paired scores and remembers its column names.
Follows the pydsur Design pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence
import numpy as np
from numpy.typing import NDArray

from pydsur.core.exceptions import DimensionError, ValidationError
from pydsur.core.validation import check_array, check_2d, check_finite


# R's names for the columns of an unnamed matrix turned into a data frame
DEFAULT_COLUMNS = ("V1", "V2")


@dataclass(frozen=True)
class PairedDesign:
    """
    Design for a two-condition repeated-measures table.

    Each row is one participant; column 0 is condition A and column 1
    is condition B. Immutable after construction.

    Construction:
        PairedDesign.from_array(data)
        PairedDesign.from_array(df)                       # names from df.columns
        PairedDesign.from_array(arr, columns=("pre", "post"))
    """
    _data: NDArray[np.floating[Any]]
    _columns: tuple[str, str]

    @classmethod
    def from_array(
        cls,
        data,
        *,
        columns: Sequence[str] | None = None,
    ) -> PairedDesign:
        """
        Build PairedDesign from array-like data.

        Parameters
        ----------
        data : array-like
            (n, 2) table. Can be a numpy array, nested list, or an object
            with ``.values`` and ``.columns`` (e.g. a DataFrame).
        columns : sequence of 2 str, optional
            Column names. Overrides names found on ``data``.
        """
        if columns is None and hasattr(data, 'columns'):
            columns = [str(c) for c in data.columns]

        arr = check_array(data, "data")
        check_2d(arr, "data")

        n, p = arr.shape
        if p != 2:
            raise DimensionError(
                f"data: expected exactly 2 columns (conditions A and B), got {p}"
            )
        if n < 1:
            raise ValidationError(f"data: need at least 1 row, got {n}")
        check_finite(arr, "data")

        if columns is None:
            names = DEFAULT_COLUMNS
        else:
            names = tuple(str(c) for c in columns)
            if len(names) != 2:
                raise DimensionError(
                    f"columns: expected 2 names, got {len(names)}"
                )

        return cls(_data=arr, _columns=names)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Score table (n x 2)."""
        return self._data

    @property
    def n(self) -> int:
        """Number of participants (rows)."""
        return self._data.shape[0]

    @property
    def columns(self) -> tuple[str, str]:
        return self._columns

    def __repr__(self) -> str:
        return f"PairedDesign(n={self.n}, columns={self._columns!r})"
