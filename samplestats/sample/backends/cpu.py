"""
CPU reference backend for sample statistics.

Runs each requested statistic as its own fold(s) over the sample; no
fold result is shared between statistics, so every two-pass statistic
traverses the sample twice.
"""

from __future__ import annotations

import math

from samplestats.core.compute.timing import Timer
from samplestats.core.compute.tolerances import FAST_VS_ROBUST
from samplestats.core.exceptions import ValidationError
from samplestats.core.result import Result
from samplestats.sample import _dispersion, _location
from samplestats.sample.design import SampleDesign
from samplestats.sample.solution import SampleParams


# name -> (fold family, function)
STATISTICS = {
    'mean': ('location', _location.sample_mean),
    'harmonic_mean': ('location', _location.harmonic_mean),
    'geometric_mean': ('location', _location.geometric_mean),
    'variance': ('robust', _dispersion.variance),
    'variance_unbiased': ('robust', _dispersion.variance_unbiased),
    'std_dev': ('robust', _dispersion.std_dev),
    'fast_variance': ('fast', _dispersion.fast_variance),
    'fast_variance_unbiased': ('fast', _dispersion.fast_variance_unbiased),
    'fast_std_dev': ('fast', _dispersion.fast_std_dev),
}

ALL_STATISTICS = frozenset(STATISTICS)


class CPUSampleBackend:
    """CPU reference backend for sample statistics."""

    @property
    def name(self) -> str:
        return 'cpu_fold'

    def solve(
        self,
        design: SampleDesign,
        *,
        compute: set[str] | frozenset[str] = ALL_STATISTICS,
    ) -> Result[SampleParams]:
        """
        Compute requested sample statistics.

        Parameters
        ----------
        design : SampleDesign
        compute : set of str
            Which statistics to compute. Valid entries are the keys of
            STATISTICS.

        Returns
        -------
        Result[SampleParams]. Degenerate inputs never raise; they are
        reported in Result.warnings.
        """
        unknown = set(compute) - ALL_STATISTICS
        if unknown:
            raise ValidationError(
                f"Unknown statistics: {sorted(unknown)}. "
                f"Valid: {sorted(ALL_STATISTICS)}"
            )

        timer = Timer()
        timer.start()

        xs = design.data
        values: dict[str, float] = {}

        # Iterate in declaration order so timing sections are stable
        for stat, (_, fn) in STATISTICS.items():
            if stat in compute:
                with timer.section(stat):
                    values[stat] = fn(xs)

        timer.stop()

        params = SampleParams(n=design.n, **values)

        return Result(
            params=params,
            info={
                'n': design.n,
                'computed': sorted(values),
                'families': sorted({STATISTICS[s][0] for s in values}),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(self._collect_warnings(design, values)),
        )

    def _collect_warnings(
        self, design: SampleDesign, values: dict[str, float]
    ) -> list[str]:
        """Non-fatal diagnostics for degenerate samples."""
        warnings_list: list[str] = []
        n = design.n

        if n == 0:
            warnings_list.append(
                "Empty sample: mean is NaN, variances are defined as 0"
            )
        elif n == 1 and any(STATISTICS[s][0] != 'location' for s in values):
            warnings_list.append(
                "Single observation: variances are defined as 0"
            )

        if design.n_nonfinite:
            warnings_list.append(
                f"Sample contains {design.n_nonfinite} non-finite values; "
                f"results propagate NaN/Inf"
            )

        if 'harmonic_mean' in values and design.has_zero:
            warnings_list.append(
                "Sample contains zero: harmonic mean is degenerate"
            )

        if design.has_negative and (
            'harmonic_mean' in values or 'geometric_mean' in values
        ):
            warnings_list.append(
                "Sample contains negative values: harmonic and geometric "
                "means are not meaningful"
            )

        gm = values.get('geometric_mean')
        if gm is not None and n > 0 and not design.has_negative and not design.n_nonfinite:
            if math.isinf(gm) or (gm == 0.0 and not design.has_zero):
                warnings_list.append(
                    "Geometric mean product overflowed or underflowed"
                )

        robust = values.get('variance')
        fast = values.get('fast_variance')
        if robust is not None and fast is not None:
            if not math.isclose(
                fast, robust, rel_tol=FAST_VS_ROBUST.rtol, abs_tol=FAST_VS_ROBUST.atol
            ) and not (math.isnan(fast) or math.isnan(robust)):
                warnings_list.append(
                    f"Fast and robust variance differ beyond "
                    f"rtol={FAST_VS_ROBUST.rtol:g} (possible cancellation); "
                    f"prefer the two-pass result"
                )

        return warnings_list
