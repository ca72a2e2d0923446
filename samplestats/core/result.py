"""
Generic result container for samplestats computations.

The Result class is the envelope every backend returns. It carries the
parameter payload together with timing, the producing backend and any
non-fatal warnings collected along the way.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (n, computed statistics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for sample statistics.

    Attributes:
        params: Domain-specific payload (e.g. SampleParams)
        info: Structured metadata
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=SampleParams(n=8, mean=5.0),
        ...     info={'n': 8, 'computed': ['mean']},
        ...     timing={'total_seconds': 1e-5},
        ...     backend_name='cpu_fold'
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
