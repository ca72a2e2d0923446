"""
samplestats: numerically stable univariate sample statistics.

Mean, harmonic mean, geometric mean, and variance / standard deviation
computed either by a two-pass compensated algorithm (robust) or by a
single-pass incremental one (fast).

Submodules:
    sample: Statistics of location and dispersion
    core: Result envelope, exceptions, validation, timing
"""

__version__ = "0.1.0"

from samplestats import sample
from samplestats.sample import (
    mean,
    harmonic_mean,
    geometric_mean,
    variance,
    variance_unbiased,
    std_dev,
    fast_variance,
    fast_variance_unbiased,
    fast_std_dev,
    describe,
    Sample,
    Weights,
)

__all__ = [
    "__version__",
    "sample",
    "mean",
    "harmonic_mean",
    "geometric_mean",
    "variance",
    "variance_unbiased",
    "std_dev",
    "fast_variance",
    "fast_variance_unbiased",
    "fast_std_dev",
    "describe",
    "Sample",
    "Weights",
]
