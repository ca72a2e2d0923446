"""
Statistics of location: arithmetic, harmonic and geometric mean.

All three are single left folds. Inputs are 1-D float64 arrays already
checked by the solvers; nothing here raises on numerical conditions.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from samplestats.sample._accumulators import MeanAccumulator

_ONE = np.float64(1.0)


def fold_mean(xs: NDArray[np.float64]) -> MeanAccumulator:
    """Welford running mean over ``xs``."""
    m = 0.0
    n = 0
    # Copy to Python floats: the loop runs much faster than over numpy
    # scalars, and the only division is by n >= 1.
    for x in xs.tolist():
        n += 1
        m += (x - m) / n
    return MeanAccumulator(mean=m, count=n)


def finalize_mean(acc: MeanAccumulator) -> float:
    """Mean of the folded elements; 0/0 (NaN) for an empty fold."""
    if acc.count == 0:
        return np.nan
    return acc.mean


def sample_mean(xs: NDArray[np.float64]) -> float:
    return finalize_mean(fold_mean(xs))


def harmonic_mean(xs: NDArray[np.float64]) -> float:
    """
    n / sum(1/x).

    A zero element makes its reciprocal infinite, so the result collapses
    to 0 (or NaN when infinities of both signs meet). Empty input is 0/0.
    """
    recip = np.float64(0.0)
    n = 0
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        for x in xs:
            recip = recip + _ONE / x
            n += 1
        return float(np.float64(n) / recip)


def geometric_mean(xs: NDArray[np.float64]) -> float:
    """
    prod(x) ** (1/n) for non-negative samples.

    The product is accumulated directly rather than as a sum of logs, so
    long samples or extreme magnitudes overflow to inf or underflow to 0.
    Negative elements yield NaN or a value of the wrong sign. An empty
    sample gives 1 ** inf = 1.
    """
    p = _ONE
    n = 0
    with np.errstate(divide='ignore', invalid='ignore', over='ignore', under='ignore'):
        for x in xs:
            p = p * x
            n += 1
        return float(np.power(p, _ONE / n))
