"""
Effect size solution types.

EffectSizeSolution wraps Result[EffectSizeParams] and reproduces the
console line each R helper prints via summary().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydsur.core.result import Result
from pydsur.effect_size._common import EffectSizeParams


@dataclass
class EffectSizeSolution:
    """
    User-facing effect size result.

    The number itself is ``r``; everything else is context for display.
    """
    _result: Result[EffectSizeParams]

    @property
    def r(self) -> float:
        """Effect size r."""
        return self._result.params.r

    @property
    def statistic(self) -> float:
        """The t or z value r was computed from."""
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        return self._result.params.statistic_name

    @property
    def z(self) -> float | None:
        """z-score for rank-test effect sizes, None otherwise."""
        p = self._result.params
        return p.statistic if p.statistic_name == "z" else None

    @property
    def parameter(self) -> dict[str, float]:
        """Distribution parameters, e.g. {'df': 12} or {'N': 20}."""
        return self._result.params.parameter

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def data_name(self) -> str | None:
        return self._result.params.data_name

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
        """
        Format as the R console output.

        r_contrast():     r =  0.581186
        r_from_wilcox():  wedsBDI by drug Effect Size, r =  -0.5646726
        """
        p = self._result.params
        if p.data_name is not None:
            return f"{p.data_name} Effect Size, r =  {p.r:.7g}"
        return f"r =  {p.r:.15g}"

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"EffectSizeSolution(r={p.r:.4g}, "
            f"{p.statistic_name}={p.statistic:.4g})"
        )
