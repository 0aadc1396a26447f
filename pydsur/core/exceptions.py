"""
Exception hierarchy for pydsur.

All exceptions inherit from PyDSURError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyDSURError(Exception):
    """Base exception for all pydsur errors."""
    pass


class ValidationError(PyDSURError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: empty
    sequences, non-positive sample sizes, p-values outside [0, 1],
    indeterminate formula arguments.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class NumericalError(PyDSURError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix has no usable (generalized) inverse.

    Raised when a computation needs an inverse of a matrix whose
    entries are undefined (e.g. correlations of a constant column) or
    whose generalized inverse is degenerate.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically the matrix dimension)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank
