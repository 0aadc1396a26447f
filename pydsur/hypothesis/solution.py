"""
Hypothesis test solution types.

HTestSolution wraps Result[HTestParams] and provides R's print.htest format,
plus the one-line report the DSUR helper returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydsur.core.result import Result
from pydsur.hypothesis._common import HTestParams


@dataclass
class HTestSolution:
    """
    User-facing hypothesis test results.

    Wraps Result[HTestParams] and provides R's print.htest output format
    via summary(). All standard htest fields are available as properties.
    """
    _result: Result[HTestParams]

    # --- Standard htest fields ---

    @property
    def statistic(self) -> float:
        """Test statistic value."""
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        return self._result.params.statistic_name

    @property
    def parameter(self) -> dict[str, float]:
        """Distribution parameters (e.g. {'df': 18})."""
        return self._result.params.parameter

    @property
    def df(self) -> float:
        return self._result.params.parameter["df"]

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def conf_int(self) -> NDArray[np.floating[Any]] | None:
        """Confidence interval for the difference in means, shape (2,)."""
        return self._result.params.conf_int

    @property
    def conf_level(self) -> float:
        return self._result.params.conf_level

    @property
    def estimate(self) -> dict[str, float] | None:
        return self._result.params.estimate

    @property
    def null_value(self) -> dict[str, float] | None:
        return self._result.params.null_value

    @property
    def alternative(self) -> str:
        return self._result.params.alternative

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def data_name(self) -> str:
        return self._result.params.data_name

    @property
    def triple(self) -> tuple[float, float, float]:
        """(t, df, p) for programmatic use."""
        p = self._result.params
        return (p.statistic, p.parameter["df"], p.p_value)

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

    def report(self) -> str:
        """
        One-line report as returned by ttestfromMeans().

        ``t(df = 18) = 2.23606797749979, p = 0.0382...``
        """
        t, df, sig = self.triple
        return (
            f"t(df = {_r_character(df)}) = {_r_character(t)}, "
            f"p = {_r_character(sig)}"
        )

    def summary(self) -> str:
        """
        Format as R's print.htest output.

        Produces output like:
             Two Sample t-test

        data:  summary statistics of x and y
        t = 2.2361, df = 18, p-value = 0.03823
        alternative hypothesis: true difference in means is not equal to 0
        95 percent confidence interval:
         0.1208  3.8792
        sample estimates:
        mean of x mean of y
               10         8
        """
        p = self._result.params
        lines = []

        lines.append(f"\t{p.method}")
        lines.append("")

        lines.append(f"data:  {p.data_name}")

        parts = [f"{p.statistic_name} = {p.statistic:.5g}"]
        for name, val in p.parameter.items():
            parts.append(f"{name} = {val:.5g}")
        parts.append(f"p-value = {_format_pvalue(p.p_value)}")
        lines.append(", ".join(parts))

        if p.null_value:
            nv_name = next(iter(p.null_value.keys()))
            nv_val = next(iter(p.null_value.values()))
            relation = {
                "two.sided": "is not equal to",
                "less": "is less than",
                "greater": "is greater than",
            }[p.alternative]
            lines.append(
                f"alternative hypothesis: true {nv_name} {relation} {nv_val:g}"
            )

        if p.conf_int is not None:
            pct = int(round(p.conf_level * 100))
            lines.append(f"{pct} percent confidence interval:")
            lo, hi = p.conf_int
            lines.append(f" {_format_number(lo)}  {_format_number(hi)}")

        if p.estimate is not None:
            lines.append("sample estimates:")
            names = list(p.estimate.keys())
            vals = list(p.estimate.values())
            lines.append(" ".join(f"{n:>14s}" for n in names))
            lines.append(" ".join(f"{v:14.7g}" for v in vals))

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"HTestSolution(method={p.method.strip()!r}, "
            f"{p.statistic_name}={p.statistic:.4g}, p_value={p.p_value:.4g})"
        )


def _format_pvalue(p: float) -> str:
    """Format p-value like R does."""
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"


def _format_number(x: float) -> str:
    """Format a number, handling infinity."""
    if np.isinf(x):
        return "-Inf" if x < 0 else "Inf"
    return f"{x:.7g}"


def _r_character(x: float) -> str:
    """as.character() for a double: 15 significant digits, R spelling of Inf."""
    if np.isinf(x):
        return "-Inf" if x < 0 else "Inf"
    return f"{x:.15g}"
