"""
Public entry points for sample statistics.

Nine scalar functions, each owning its own fold(s) over the sample, plus
describe() which runs all of them through a backend and wraps the result.

The scalar functions never raise on numerical conditions. An empty
sample gives a NaN mean and zero variances; zero or negative elements in
harmonic_mean / geometric_mean propagate as Inf or NaN. They raise only
when the input is not a numeric 1-D array.
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from samplestats.core.exceptions import ValidationError
from samplestats.core.validation import check_sample
from samplestats.sample import _dispersion, _location
from samplestats.sample.design import SampleDesign
from samplestats.sample.solution import SampleSolution
from samplestats.sample.backends.cpu import CPUSampleBackend, ALL_STATISTICS


BackendChoice = Literal['auto', 'cpu']


def _get_backend(backend: BackendChoice):
    """Select backend based on preference."""
    if backend in ('auto', 'cpu'):
        return CPUSampleBackend()

    raise ValidationError(f"Unknown backend: {backend!r}")


# --- Statistics of location ---

def mean(sample: ArrayLike) -> float:
    """
    Arithmetic mean, by Welford's single-pass update.

    Each step adds (x - m) / n to the running mean, so no large running
    sum is ever formed.

    Returns NaN for an empty sample.
    """
    return _location.sample_mean(check_sample(sample))


def harmonic_mean(sample: ArrayLike) -> float:
    """
    Harmonic mean, n / sum(1/x), in a single pass.

    A zero element propagates Inf through the reciprocal sum (the result
    becomes 0 or NaN); it does not raise.
    """
    return _location.harmonic_mean(check_sample(sample))


def geometric_mean(sample: ArrayLike) -> float:
    """
    Geometric mean of a sample containing no negative values.

    The product is formed directly, not via logarithms: long samples or
    extreme magnitudes overflow to Inf or underflow to 0. Negative
    elements are not checked and give NaN or a meaningless value.
    """
    return _location.geometric_mean(check_sample(sample))


# --- Dispersion: two-pass (numerically robust) ---

def variance(sample: ArrayLike) -> float:
    """
    Maximum likelihood estimate of the variance (divide by n).

    Two passes: Welford mean, then compensated sum of squared deviations.
    Returns 0 for samples with fewer than two elements.
    """
    return _dispersion.variance(check_sample(sample))


def variance_unbiased(sample: ArrayLike) -> float:
    """
    Unbiased estimate of the variance (divide by n - 1), two passes.

    Returns 0 for samples with fewer than two elements.
    """
    return _dispersion.variance_unbiased(check_sample(sample))


def std_dev(sample: ArrayLike) -> float:
    """Square root of variance_unbiased()."""
    return _dispersion.std_dev(check_sample(sample))


# --- Dispersion: single-pass (faster, less safe) ---

def fast_variance(sample: ArrayLike) -> float:
    """
    Maximum likelihood estimate of the variance in one pass (Knuth).

    Usually agrees with variance() to about 1e-6 relative, but when most
    values sit close to a large mean the update cancels catastrophically
    and the result can be far off. Use variance() for such data.
    Returns 0 for samples with fewer than two elements.
    """
    return _dispersion.fast_variance(check_sample(sample))


def fast_variance_unbiased(sample: ArrayLike) -> float:
    """Unbiased variance (divide by n - 1) in one pass. See fast_variance()."""
    return _dispersion.fast_variance_unbiased(check_sample(sample))


def fast_std_dev(sample: ArrayLike) -> float:
    """Square root of fast_variance_unbiased()."""
    return _dispersion.fast_std_dev(check_sample(sample))


# --- Everything at once ---

def describe(
    data: ArrayLike | SampleDesign,
    *,
    backend: BackendChoice = 'auto',
) -> SampleSolution:
    """
    Compute every sample statistic.

    Computes: mean, harmonic mean, geometric mean, and both the two-pass
    and single-pass variance, unbiased variance and standard deviation.
    Each statistic runs its own folds; nothing is cached between them.

    Parameters
    ----------
    data : array-like or SampleDesign
        1-D sample.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    SampleSolution with all statistics populated. Degenerate samples are
    flagged in .warnings rather than raising.
    """
    design = data if isinstance(data, SampleDesign) else SampleDesign.from_array(data)
    be = _get_backend(backend)

    result = be.solve(design, compute=ALL_STATISTICS)

    return SampleSolution(_result=result, _design=design)
