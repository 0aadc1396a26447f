"""
Core protocols for pydsur.

Several helpers read a handful of named fields from a model fitted
elsewhere (a Wilcoxon test, a logistic regression). These protocols
describe exactly those fields, so any object that has them (an R-style
htest result, a GLM solution, a small dataclass built by hand) can be
passed in. Fitting the model is never this package's job.

We use Protocol (structural typing) rather than ABC (nominal typing) to allow
flexibility while maintaining type safety.
"""

from typing import Protocol, Any, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class RankTestModel(Protocol):
    """
    Read-only view of a rank test result (e.g. a Wilcoxon test).

    Matches the htest fields R's wilcox.test() returns and that
    r_from_wilcox() needs.
    """

    @property
    def p_value(self) -> float:
        """Two-sided p-value of the test."""
        ...

    @property
    def data_name(self) -> str:
        """Description of the data, e.g. 'x and y'."""
        ...


@runtime_checkable
class LogisticModel(Protocol):
    """
    Read-only view of a fitted logistic regression.

    Matches the fields of R's glm object used by logistic_pseudo_r2():
    residual deviance, null deviance and the fitted values (whose length
    is the model size N).
    """

    @property
    def deviance(self) -> float:
        ...

    @property
    def null_deviance(self) -> float:
        ...

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        ...
