"""
Sample statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, TYPE_CHECKING

from samplestats.core.result import Result

if TYPE_CHECKING:
    from samplestats.sample.design import SampleDesign


@dataclass(frozen=True)
class SampleParams:
    """
    Parameter payload for sample statistics.

    All statistic fields are optional (None if not computed). describe()
    populates every one of them.
    """
    n: int

    # Location
    mean: float | None = None
    harmonic_mean: float | None = None
    geometric_mean: float | None = None

    # Dispersion, two-pass
    variance: float | None = None
    variance_unbiased: float | None = None
    std_dev: float | None = None

    # Dispersion, single-pass
    fast_variance: float | None = None
    fast_variance_unbiased: float | None = None
    fast_std_dev: float | None = None

    def computed(self) -> dict[str, float]:
        """Statistics that were computed, in declaration order."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != 'n' and getattr(self, f.name) is not None
        }


@dataclass
class SampleSolution:
    """
    User-facing sample statistics results.

    Wraps Result[SampleParams] and provides convenient accessors.
    """
    _result: Result[SampleParams]
    _design: 'SampleDesign'

    # --- Location ---

    @property
    def mean(self) -> float | None:
        """Arithmetic mean (Welford). NaN for an empty sample."""
        return self._result.params.mean

    @property
    def harmonic_mean(self) -> float | None:
        return self._result.params.harmonic_mean

    @property
    def geometric_mean(self) -> float | None:
        return self._result.params.geometric_mean

    # --- Dispersion ---

    @property
    def variance(self) -> float | None:
        """Maximum likelihood variance (divide by n), two-pass."""
        return self._result.params.variance

    @property
    def variance_unbiased(self) -> float | None:
        """Bessel-corrected variance (divide by n-1), two-pass."""
        return self._result.params.variance_unbiased

    @property
    def std_dev(self) -> float | None:
        """Square root of the unbiased two-pass variance."""
        return self._result.params.std_dev

    @property
    def fast_variance(self) -> float | None:
        """Maximum likelihood variance, single-pass."""
        return self._result.params.fast_variance

    @property
    def fast_variance_unbiased(self) -> float | None:
        """Bessel-corrected variance, single-pass."""
        return self._result.params.fast_variance_unbiased

    @property
    def fast_std_dev(self) -> float | None:
        """Square root of the unbiased single-pass variance."""
        return self._result.params.fast_std_dev

    # --- Metadata ---

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def name(self) -> str | None:
        """Sample name from the design."""
        return self._design.name

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Plain-text table of every computed statistic."""
        stats = self._result.params.computed()
        title = f"Sample statistics ({self.name})" if self.name else "Sample statistics"
        lines = [title, f"  {'n':<24}{self.n}"]

        for label, value in stats.items():
            lines.append(f"  {label:<24}{value:.6g}")

        if self.warnings:
            lines.append("Warnings:")
            for w in self.warnings:
                lines.append(f"  - {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        computed = list(self._result.params.computed())
        stats_str = ", ".join(computed) if computed else "none"
        return f"SampleSolution(n={self.n}, computed=[{stats_str}])"
