"""
Accumulator value types for the sample folds.

Each accumulator is a small immutable record with an identity value
(``empty()``) and a per-element update (``push(x)``) that returns a new
record. The fold drivers in ``_location`` and ``_dispersion`` keep these
fields in local variables inside their loops and build the record once
from the terminal state, so nothing is allocated per element beyond the
floats themselves.

``merge`` combines two partial states (Chan, Golub & LeVeque 1979) so a
sample can be reduced in chunks. Merging reorders the floating-point sums,
so merged results match a sequential fold only up to rounding.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MeanAccumulator:
    """
    Welford running mean.

    Invariant: ``count >= 0`` and ``mean`` is the arithmetic mean of the
    ``count`` elements pushed so far (0.0 for the identity).
    """
    mean: float
    count: int

    @classmethod
    def empty(cls) -> MeanAccumulator:
        return cls(mean=0.0, count=0)

    def push(self, x: float) -> MeanAccumulator:
        n = self.count + 1
        return MeanAccumulator(mean=self.mean + (x - self.mean) / n, count=n)

    def merge(self, other: MeanAccumulator) -> MeanAccumulator:
        if other.count == 0:
            return self
        if self.count == 0:
            return other
        n = self.count + other.count
        delta = other.mean - self.mean
        return MeanAccumulator(mean=self.mean + delta * other.count / n, count=n)


@dataclass(frozen=True)
class RobustAccumulator:
    """
    Second pass of the two-pass variance.

    ``sum_sq_dev`` sums squared deviations from a mean computed in the
    first pass; ``compensation`` sums the signed deviations. With an exact
    mean the compensation would be zero; in floating point it measures how
    far the rounded mean is off and is used to correct ``sum_sq_dev``.
    """
    count: int
    sum_sq_dev: float
    compensation: float

    @classmethod
    def empty(cls) -> RobustAccumulator:
        return cls(count=0, sum_sq_dev=0.0, compensation=0.0)

    def push(self, x: float, mean: float) -> RobustAccumulator:
        d = x - mean
        return RobustAccumulator(
            count=self.count + 1,
            sum_sq_dev=self.sum_sq_dev + d * d,
            compensation=self.compensation + d,
        )


@dataclass(frozen=True)
class FastAccumulator:
    """
    Knuth single-pass state.

    ``scaled_sum_sq`` approximates the sum of squared deviations from the
    running mean. No separate error term is kept, which is why this path
    loses accuracy when values sit close to a large mean.
    """
    count: int
    mean: float
    scaled_sum_sq: float

    @classmethod
    def empty(cls) -> FastAccumulator:
        return cls(count=0, mean=0.0, scaled_sum_sq=0.0)

    def push(self, x: float) -> FastAccumulator:
        # d uses the old mean, the second factor the new one. Swapping
        # them changes the rounding of every step.
        d = x - self.mean
        n = self.count + 1
        m = self.mean + d / n
        return FastAccumulator(count=n, mean=m, scaled_sum_sq=self.scaled_sum_sq + d * (x - m))

    def merge(self, other: FastAccumulator) -> FastAccumulator:
        if other.count == 0:
            return self
        if self.count == 0:
            return other
        n = self.count + other.count
        delta = other.mean - self.mean
        return FastAccumulator(
            count=n,
            mean=self.mean + delta * other.count / n,
            scaled_sum_sq=(
                self.scaled_sum_sq
                + other.scaled_sum_sq
                + delta * delta * self.count * other.count / n
            ),
        )


@dataclass(frozen=True)
class RobustVariance:
    """Corrected sum of squared deviations and the sample size."""
    sum_sq_dev: float
    count: int
