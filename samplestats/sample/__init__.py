"""
Univariate sample statistics.

Numerically stable folds over a 1-D sample of doubles, with two distinct
variance families: two-pass compensated (robust) and single-pass Knuth
(fast).

Public API:
    mean(x), harmonic_mean(x), geometric_mean(x)
    variance(x), variance_unbiased(x), std_dev(x)            - two-pass
    fast_variance(x), fast_variance_unbiased(x), fast_std_dev(x) - one pass
    describe(x)     - all of the above in a SampleSolution
"""

from samplestats.sample.design import Sample, Weights, SampleDesign
from samplestats.sample.solution import SampleParams, SampleSolution
from samplestats.sample.solvers import (
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
)

__all__ = [
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
    "SampleDesign",
    "SampleParams",
    "SampleSolution",
]
