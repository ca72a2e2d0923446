"""
Compute utilities: section timing and tolerance tiers.
"""

from samplestats.core.compute.timing import Timer
from samplestats.core.compute.tolerances import (
    ToleranceTier,
    ROBUST_FP64,
    REORDERED_FP64,
    FAST_VS_ROBUST,
)

__all__ = [
    "Timer",
    "ToleranceTier",
    "ROBUST_FP64",
    "REORDERED_FP64",
    "FAST_VS_ROBUST",
]
