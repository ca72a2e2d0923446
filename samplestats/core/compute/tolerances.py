"""
Tolerance tiers for numerical validation.

The robust and fast variance families are expected to agree only up to a
tolerance, and any reordering of a floating-point sum (chunked or tree
reduction, permuted input) changes rounding. These tiers record how close
results are expected to be; they are never used to pick an algorithm.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Two-pass results against an independent double-precision reference
ROBUST_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='robust_fp64',
    description='Two-pass compensated folds against an fp64 reference',
)

# Same statistic, different summation order (permutation, merged chunks)
REORDERED_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='reordered_fp64',
    description='Same algorithm, summation order changed',
)

# Single-pass Knuth results against the two-pass results, moderate spread
FAST_VS_ROBUST = ToleranceTier(
    rtol=1e-6,
    atol=1e-12,
    name='fast_vs_robust',
    description='Single-pass against two-pass on well-conditioned samples',
)
