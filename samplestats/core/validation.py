"""
Input validation utilities for samplestats.

These validators check the *shape* of the input and nothing else. They
raise immediately with clear messages when a sample is not a numeric
1-D array, but they deliberately let NaN and Inf through: non-finite
values are data, and the statistics propagate them.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from samplestats.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects inputs that result in object dtype (mixed types) or any
    non-numeric dtype (strings, bytes, datetimes). Integer and boolean
    arrays are promoted to float64; narrower floats are widened.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real-valued data"
        )

    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}",
            ndim=array.ndim,
        )


def check_sample(sample: ArrayLike, name: str = 'sample') -> NDArray[np.float64]:
    """
    Convert a sample to a read-only 1-D float64 view.

    An ndarray that is already float64 and 1-D is not copied.

    Raises:
        ValidationError: If the sample is not numeric
        DimensionError: If the sample is not 1D
    """
    arr = check_array(sample, name)
    check_1d(arr, name)
    view = arr.view()
    view.flags.writeable = False
    return view
