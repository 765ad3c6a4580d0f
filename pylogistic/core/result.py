"""
Generic result container for pylogistic computations.

The Result class provides a standardized envelope around a domain-specific
parameter payload. This enables shared tooling for timing, warnings and
reproducibility while letting each estimator define its own parameters.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, termination, diagnostics)
    - timing is optional (don't burden unit tests)
    - provenance records library versions for reproducibility
    - Immutable (frozen=True)
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Versions of the packages that produced a result."""
    import numpy
    import scipy
    from pylogistic import __version__

    return {
        'pylogistic_version': __version__,
        'numpy_version': numpy.__version__,
        'scipy_version': scipy.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (coefficients, iterations, etc.)
        info: Structured metadata (method, convergence, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions, filled in automatically when omitted

    Examples:
        >>> Result(
        ...     params=LogisticParams(...),
        ...     info={'method': 'irls', 'termination': 'converged'},
        ...     timing={'total_seconds': 0.01, 'irls': 0.008},
        ...     backend_name='cpu_irls'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
