"""
Surfacing of non-fatal diagnostics.

Computations collect plain-string messages in a ``warnings_list``. Solvers
store them on ``Result.warnings`` and pass them through ``emit()`` so they
also reach the user via the standard ``warnings`` machinery.
"""

import warnings
from typing import Iterable


def emit(messages: Iterable[str], stacklevel: int = 3) -> None:
    """
    Emit each message as a RuntimeWarning.

    The default stacklevel points at the caller of the public solver
    function that calls emit().
    """
    for message in messages:
        warnings.warn(message, RuntimeWarning, stacklevel=stacklevel)
