"""
Statistics of dispersion: two families of variance algorithms.

Robust (two-pass)
    The mean is computed first with Welford's update, then a second pass
    sums squared deviations from it together with the signed deviations.
    The signed sum corrects for the mean being a rounded value (the
    compensated algorithm of Chan, Golub & LeVeque). Needs two traversals.

Fast (single-pass)
    Knuth's incremental update (TAOCP vol. 2, p. 232). One traversal and
    no error term. When most values sit close to a mean that is large
    relative to their spread, ``x - m`` cancels catastrophically and the
    result drifts from the two-pass one.

Both families are kept as separate entry points. Nothing here chooses
between them.

The variance, and hence the standard deviation, of a sample with fewer
than two elements is defined to be 0 on both paths.

References
----------
Chan, T. F., Golub, G. H., LeVeque, R. J. (1979). Updating formulae and a
    pairwise algorithm for computing sample variances. Technical Report
    STAN-CS-79-773, Stanford University.
Knuth, D. E. (1998). The Art of Computer Programming, vol. 2:
    Seminumerical Algorithms, 3rd ed., p. 232.
Welford, B. P. (1962). Note on a method for calculating corrected sums of
    squares and products. Technometrics 4(3):419-420.
West, D. H. D. (1979). Updating mean and variance estimates: an improved
    method. Communications of the ACM 22(9):532-535.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from samplestats.sample._accumulators import (
    FastAccumulator,
    RobustAccumulator,
    RobustVariance,
)
from samplestats.sample._location import sample_mean


# --- Robust (two-pass) ---

def fold_deviations(xs: NDArray[np.float64], m: float) -> RobustAccumulator:
    """Second pass: squared and signed deviations from ``m``."""
    n = 0
    s = 0.0
    c = 0.0
    # Python-float copy for loop speed; no division happens here.
    for x in xs.tolist():
        d = x - m
        n += 1
        s += d * d
        c += d
    return RobustAccumulator(count=n, sum_sq_dev=s, compensation=c)


def finalize_robust(acc: RobustAccumulator) -> RobustVariance:
    """Apply the compensation: sum_sq_dev - compensation**2 / n."""
    if acc.count == 0:
        return RobustVariance(sum_sq_dev=acc.sum_sq_dev, count=0)
    c = acc.compensation
    return RobustVariance(sum_sq_dev=acc.sum_sq_dev - c * c / acc.count, count=acc.count)


def robust_variance(xs: NDArray[np.float64]) -> RobustVariance:
    m = sample_mean(xs)
    return finalize_robust(fold_deviations(xs, m))


def variance(xs: NDArray[np.float64]) -> float:
    rv = robust_variance(xs)
    if rv.count > 1:
        return rv.sum_sq_dev / rv.count
    return 0.0


def variance_unbiased(xs: NDArray[np.float64]) -> float:
    rv = robust_variance(xs)
    if rv.count > 1:
        return rv.sum_sq_dev / (rv.count - 1)
    return 0.0


def std_dev(xs: NDArray[np.float64]) -> float:
    return _sqrt(variance_unbiased(xs))


# --- Fast (single-pass) ---

def fold_fast(xs: NDArray[np.float64]) -> FastAccumulator:
    """Knuth's update; see FastAccumulator.push for the evaluation order."""
    n = 0
    m = 0.0
    s = 0.0
    # Python-float copy for loop speed; the only division is by n >= 1.
    for x in xs.tolist():
        d = x - m
        n += 1
        m += d / n
        s += d * (x - m)
    return FastAccumulator(count=n, mean=m, scaled_sum_sq=s)


def fast_variance(xs: NDArray[np.float64]) -> float:
    acc = fold_fast(xs)
    if acc.count > 1:
        return acc.scaled_sum_sq / acc.count
    return 0.0


def fast_variance_unbiased(xs: NDArray[np.float64]) -> float:
    acc = fold_fast(xs)
    if acc.count > 1:
        return acc.scaled_sum_sq / (acc.count - 1)
    return 0.0


def fast_std_dev(xs: NDArray[np.float64]) -> float:
    return _sqrt(fast_variance_unbiased(xs))


def _sqrt(v: float) -> float:
    # math.sqrt raises on negatives; keep IEEE semantics (NaN) instead.
    if v >= 0.0 or math.isnan(v):
        return math.sqrt(v)
    return math.nan
