"""
SampleDesign: data wrapper for univariate sample statistics.

Wraps a single sample and provides validation and metadata for the
describe() pipeline. The scalar functions in solvers.py do not need a
design; they validate their input directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from samplestats.core.validation import check_sample


# Ordered, finite, read-only sequence of observations.
Sample = NDArray[np.float64]

# Reserved for weighted statistics. No function consumes weights yet.
Weights = NDArray[np.float64]


@dataclass(frozen=True)
class SampleDesign:
    """
    Design for univariate sample statistics.

    Wraps a 1-D float64 sample, which may be empty and may contain NaN or
    Inf. Immutable after construction; the wrapped array is read-only.

    Construction:
        SampleDesign.from_array(data)
    """
    _data: NDArray[np.floating[Any]]
    _n: int
    _name: str | None

    @classmethod
    def from_array(cls, data) -> SampleDesign:
        """
        Build SampleDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1-D sample. Can be a numpy array, a list, or a pandas Series
            (anything with a .values attribute); a Series name is kept.
        """
        if hasattr(data, 'values'):
            name = getattr(data, 'name', None)
            name = str(name) if name is not None else None
            data_array = check_sample(data.values)
        else:
            name = None
            data_array = check_sample(data)

        return cls(_data=data_array, _n=int(data_array.shape[0]), _name=name)

    @property
    def data(self) -> Sample:
        """Sample values, shape (n,), read-only."""
        return self._data

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def name(self) -> str | None:
        """Sample name, or None if not available."""
        return self._name

    @property
    def n_nonfinite(self) -> int:
        """Number of NaN or Inf observations."""
        return int(np.sum(~np.isfinite(self._data)))

    @property
    def has_zero(self) -> bool:
        return bool(np.any(self._data == 0.0))

    @property
    def has_negative(self) -> bool:
        return bool(np.any(self._data < 0.0))

    def __repr__(self) -> str:
        nonfinite = f", nonfinite={self.n_nonfinite}" if self.n_nonfinite else ""
        return f"SampleDesign(n={self._n}{nonfinite})"
