"""
Pseudo R-squared solution type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydsur.core.result import Result
from pydsur.regression._common import PseudoR2Params


@dataclass
class PseudoR2Solution:
    """
    User-facing pseudo R-squared results.

    Properties return full precision; summary() and rounded() round for
    display only.
    """
    _result: Result[PseudoR2Params]

    @property
    def hosmer_lemeshow(self) -> float:
        """1 - deviance / null deviance."""
        return self._result.params.hosmer_lemeshow

    @property
    def cox_snell(self) -> float:
        return self._result.params.cox_snell

    @property
    def nagelkerke(self) -> float:
        return self._result.params.nagelkerke

    @property
    def deviance(self) -> float:
        return self._result.params.deviance

    @property
    def null_deviance(self) -> float:
        return self._result.params.null_deviance

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    def rounded(self, digits: int = 3) -> dict[str, float]:
        """The three coefficients rounded for display."""
        p = self._result.params
        return {
            "hosmer_lemeshow": round(p.hosmer_lemeshow, digits),
            "cox_snell": round(p.cox_snell, digits),
            "nagelkerke": round(p.nagelkerke, digits),
        }

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
        Format as logisticPseudoR2s() printed it:

        Pseudo R^2 for logistics regression
        Hosmer and Lemeshow R^2: 	 0.116
        Cox and Snell R^2	:  0.145
        Nagelkerke R^2	:  0.194
        """
        r = self.rounded(3)
        lines = [
            "Pseudo R^2 for logistics regression",
            f"Hosmer and Lemeshow R^2: \t {r['hosmer_lemeshow']:g}",
            f"Cox and Snell R^2\t:  {r['cox_snell']:g}",
            f"Nagelkerke R^2\t:  {r['nagelkerke']:g}",
            "",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"PseudoR2Solution(hosmer_lemeshow={p.hosmer_lemeshow:.3f}, "
            f"cox_snell={p.cox_snell:.3f}, nagelkerke={p.nagelkerke:.3f})"
        )
