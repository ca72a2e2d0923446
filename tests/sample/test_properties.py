"""
Property tests: permutation invariance and scaling behaviour.

Reordering the sample changes the order of floating-point summation, so
every comparison here uses a relative tolerance.
"""

import numpy as np
import pytest

import samplestats as ss
from samplestats.core.compute import REORDERED_FP64

ORDER_INVARIANT = [
    ss.mean,
    ss.harmonic_mean,
    ss.geometric_mean,
    ss.variance,
    ss.variance_unbiased,
    ss.std_dev,
    ss.fast_variance,
    ss.fast_variance_unbiased,
    ss.fast_std_dev,
]


class TestPermutationInvariance:

    @pytest.mark.parametrize("fn", ORDER_INVARIANT, ids=lambda f: f.__name__)
    def test_permuted(self, fn, rng):
        x = rng.uniform(0.5, 2.0, size=300)
        for _ in range(3):
            np.testing.assert_allclose(
                fn(rng.permutation(x)), fn(x), rtol=REORDERED_FP64.rtol
            )

    @pytest.mark.parametrize("fn", ORDER_INVARIANT, ids=lambda f: f.__name__)
    def test_reversed(self, fn, moderate_sample):
        x = 1.0 + np.abs(moderate_sample) / 100.0
        np.testing.assert_allclose(fn(x[::-1]), fn(x), rtol=REORDERED_FP64.rtol)


class TestScaling:

    def test_shift_invariance_robust(self, moderate_sample):
        np.testing.assert_allclose(
            ss.variance(moderate_sample + 1000.0), ss.variance(moderate_sample), rtol=1e-8
        )

    def test_scale_quadratic(self, moderate_sample):
        np.testing.assert_allclose(
            ss.variance(3.0 * moderate_sample), 9.0 * ss.variance(moderate_sample), rtol=1e-12
        )

    def test_std_dev_is_sqrt_unbiased(self, moderate_sample):
        np.testing.assert_allclose(
            ss.std_dev(moderate_sample) ** 2, ss.variance_unbiased(moderate_sample), rtol=1e-12
        )
        np.testing.assert_allclose(
            ss.fast_std_dev(moderate_sample) ** 2,
            ss.fast_variance_unbiased(moderate_sample),
            rtol=1e-12,
        )

    def test_mean_inequality(self, rng):
        # harmonic <= geometric <= arithmetic for positive samples
        x = rng.uniform(0.1, 10.0, size=100)
        assert ss.harmonic_mean(x) <= ss.geometric_mean(x) <= ss.mean(x)
