"""
Common types for effect sizes.

Defines EffectSizeParams and RankTestSummary, a concrete RankTestModel
for callers that ran their rank test elsewhere.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydsur.core.exceptions import ValidationError


@dataclass(frozen=True)
class EffectSizeParams:
    """
    Parameter payload for effect size r.

    Attributes
    ----------
    r : float
        Effect size. In [0, 1) for r_contrast(); negative for
        r_from_wilcox() because z is taken from the lower tail.
    statistic : float
        The statistic r was derived from (t or z).
    statistic_name : str
        "t" or "z".
    parameter : dict
        Distribution parameters, e.g. {"df": 12} or {"N": 20}.
    method : str
        Human-readable method name.
    data_name : str or None
        Description of the data, when known.
    """
    r: float
    statistic: float
    statistic_name: str
    parameter: dict[str, float]
    method: str
    data_name: str | None = None


@dataclass(frozen=True)
class RankTestSummary:
    """
    The two fields of a rank test result that r_from_wilcox() reads.

    Examples
    --------
    >>> RankTestSummary(p_value=0.0035, data_name="wedsBDI by drug")
    >>> RankTestSummary.from_scipy(scipy.stats.mannwhitneyu(x, y), "x and y")
    """
    p_value: float
    data_name: str

    @classmethod
    def from_scipy(cls, result: Any, data_name: str) -> RankTestSummary:
        """
        Adapt a SciPy test result (which names the field ``pvalue``).

        Parameters
        ----------
        result : object
            Any SciPy result exposing ``pvalue``, e.g. from
            scipy.stats.mannwhitneyu() or scipy.stats.wilcoxon().
        data_name : str
            Label to report alongside the effect size.
        """
        if not hasattr(result, 'pvalue'):
            raise ValidationError(
                f"result: expected an object with a 'pvalue' attribute, "
                f"got {type(result).__name__}"
            )
        return cls(p_value=float(result.pvalue), data_name=data_name)
