"""
Core infrastructure for samplestats.

Shared abstractions used by the sample statistics module.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from samplestats.core.result import Result
from samplestats.core.exceptions import (
    SampleStatsError,
    ValidationError,
    DimensionError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "SampleStatsError",
    "ValidationError",
    "DimensionError",
]
