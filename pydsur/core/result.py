"""
Generic result container for all pydsur computations.

Every helper returns its numbers inside this envelope, so timing,
diagnostics and provenance are handled the same way whether the payload
is a single effect size or a set of KMO matrices.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (formula, input sizes)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific values (effect size, KMO matrices, etc.)
        info: Structured metadata (method, DSUR page, input sizes)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the routine that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=EffectSizeParams(r=0.58, ...),
        ...     info={'method': 'r_contrast', 'page': 457},
        ...     timing={'total_seconds': 1e-5},
        ...     backend_name='cpu_effect_size'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
