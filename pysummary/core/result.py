"""
Generic result container for pysummary computations.

The Result class provides a standardized envelope for whole-dataset
computations such as describe(). This enables shared tooling for timing,
reproducibility, and diagnostics while allowing each computation to define
its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (n, lane counts)
    - timing is optional (don't burden unit tests)
    - warnings carry non-fatal diagnostics (NaN results and why)
    - provenance records library versions for reproducibility
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata attached to every Result unless overridden."""
    from pysummary import __version__

    return {
        'pysummary_version': __version__,
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The parameter payload type

    Attributes:
        params: Computed statistics
        info: Structured metadata (n, method)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions used to produce the result

    Examples:
        >>> Result(
        ...     params=summary_params,
        ...     info={'n': 5},
        ...     timing={'total_seconds': 0.01, 'moments': 0.004},
        ...     backend_name='cpu_descriptive'
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
