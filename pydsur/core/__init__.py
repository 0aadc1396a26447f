"""
Core infrastructure for pydsur.

This module provides shared abstractions and utilities used by all
domain-specific submodules (effect_size, factor, hypothesis, etc.).

Key components:
    protocols: RankTestModel, LogisticModel protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, generalized inverse
"""

from pydsur.core.protocols import RankTestModel, LogisticModel
from pydsur.core.result import Result
from pydsur.core.exceptions import (
    PyDSURError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "RankTestModel",
    "LogisticModel",
    # Result
    "Result",
    # Exceptions
    "PyDSURError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
