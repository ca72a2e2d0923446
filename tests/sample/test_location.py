"""
Tests for mean, harmonic_mean and geometric_mean.

Reference values from scipy.stats.hmean / scipy.stats.gmean and direct
arithmetic. Degenerate inputs must propagate NaN/Inf, never raise.
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from samplestats import geometric_mean, harmonic_mean, mean
from samplestats.core.exceptions import DimensionError, ValidationError


class TestMean:
    """Welford arithmetic mean."""

    def test_textbook(self, textbook_sample):
        np.testing.assert_allclose(mean(textbook_sample), 5.0, rtol=1e-12)

    def test_matches_naive_sum(self, moderate_sample):
        naive = np.sum(moderate_sample) / len(moderate_sample)
        np.testing.assert_allclose(mean(moderate_sample), naive, rtol=1e-9)

    def test_accepts_list(self):
        np.testing.assert_allclose(mean([1, 2, 3, 4]), 2.5, rtol=1e-12)

    def test_single(self):
        assert mean([7.25]) == 7.25

    def test_empty_is_nan(self):
        assert np.isnan(mean([]))

    def test_empty_does_not_warn(self, recwarn):
        mean(np.array([]))
        assert len(recwarn) == 0

    def test_large_offset(self, offset_sample):
        x, shifted = offset_sample
        np.testing.assert_allclose(mean(x) - 1e9, np.mean(shifted), atol=1e-6)

    def test_nan_propagates(self):
        assert np.isnan(mean([1.0, np.nan, 3.0]))

    def test_inf(self):
        assert mean([1.0, np.inf]) == np.inf

    def test_opposite_infinities_nan(self):
        assert np.isnan(mean([np.inf, -np.inf]))

    def test_returns_float(self):
        assert isinstance(mean([1.0, 2.0]), float)

    def test_rejects_2d(self):
        with pytest.raises(DimensionError):
            mean([[1.0, 2.0], [3.0, 4.0]])

    def test_rejects_strings(self):
        with pytest.raises(ValidationError):
            mean(["1", "2"])


class TestHarmonicMean:

    def test_reference_value(self):
        expected = 3.0 / (1.0 + 0.5 + 0.25)
        np.testing.assert_allclose(harmonic_mean([1, 2, 4]), expected, rtol=1e-12)
        np.testing.assert_allclose(harmonic_mean([1, 2, 4]), 1.7142857142857142, rtol=1e-12)

    def test_matches_scipy(self, moderate_sample):
        x = np.abs(moderate_sample) + 1.0
        np.testing.assert_allclose(harmonic_mean(x), sp_stats.hmean(x), rtol=1e-10)

    def test_zero_element_collapses_to_zero(self, recwarn):
        # 1/0 = inf in the reciprocal sum, n/inf = 0
        assert harmonic_mean([1.0, 0.0, 2.0]) == 0.0
        assert len(recwarn) == 0

    def test_signed_zeros_nan(self):
        # +inf and -inf reciprocals meet
        assert np.isnan(harmonic_mean([0.0, -0.0]))

    def test_empty_is_nan(self):
        assert np.isnan(harmonic_mean([]))

    def test_negative_does_not_raise(self):
        # 1/1 + 1/-1 = 0, so 2/0 = inf: meaningless but IEEE-defined
        assert harmonic_mean([1.0, -1.0]) == np.inf


class TestGeometricMean:

    def test_reference_value(self):
        np.testing.assert_allclose(geometric_mean([1, 3, 9]), 3.0, rtol=1e-12)

    def test_matches_scipy(self, rng):
        x = rng.uniform(0.5, 2.0, size=200)
        np.testing.assert_allclose(geometric_mean(x), sp_stats.gmean(x), rtol=1e-10)

    def test_zero_element(self):
        assert geometric_mean([4.0, 0.0, 9.0]) == 0.0

    def test_negative_product_nan(self, recwarn):
        assert np.isnan(geometric_mean([-1.0, 2.0, 4.0]))
        assert len(recwarn) == 0

    def test_even_negatives_wrong_sign(self):
        # Product of two negatives is positive; the result has lost the sign
        np.testing.assert_allclose(geometric_mean([-2.0, -8.0]), 4.0, rtol=1e-12)

    def test_empty_is_one(self):
        # 1 ** (1/0) = 1 ** inf = 1
        assert geometric_mean([]) == 1.0

    def test_product_overflow_is_documented_limitation(self, recwarn):
        # The true answer is 1e200; the direct product overflows to inf
        assert geometric_mean([1e200, 1e200, 1e200]) == np.inf
        assert len(recwarn) == 0

    def test_product_underflow_is_documented_limitation(self):
        assert geometric_mean([1e-200, 1e-200, 1e-200]) == 0.0
