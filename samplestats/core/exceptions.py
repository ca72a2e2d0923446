"""
Exception hierarchy for samplestats.

All exceptions inherit from SampleStatsError to allow catching any
library-specific error.

Exceptions are reserved for malformed input (wrong type, wrong shape).
Numerical conditions such as an empty sample, a zero element in a
harmonic mean or a negative element in a geometric mean are never
raised: they propagate as IEEE-754 NaN/Inf values.
"""


class SampleStatsError(Exception):
    """Base exception for all samplestats errors."""
    pass


class ValidationError(SampleStatsError):
    """
    Input validation failed.

    Raised when a sample cannot be converted to a numeric array, or when
    a keyword argument (such as backend=) has an unknown value.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when a sample is not one-dimensional.

    Attributes:
        ndim: Number of dimensions actually received, if known
    """

    def __init__(self, message: str, ndim: int | None = None):
        super().__init__(message)
        self.ndim = ndim
