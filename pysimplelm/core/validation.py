"""
Input validation utilities for pysimplelm.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pysimplelm.core.exceptions import (
    ValidationError,
    DimensionError,
    DegenerateInputError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject strings, bytes, datetimes and booleans
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    A two-parameter line fit to fewer than three points leaves no residual
    degrees of freedom, so every standard error is undefined.

    Raises:
        DegenerateInputError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise DegenerateInputError(
            f"{name}: requires at least {min_samples} samples, got {n}",
            reason='too_few_samples',
            n=n,
        )


def check_not_constant(
    array: NDArray[np.floating[Any]],
    name: str,
    reason: str,
) -> None:
    """
    Verify a sample takes at least two distinct values.

    Compares the range rather than the centered sum of squares, so a
    constant sample is caught exactly even when its mean does not round
    back to the sample value.

    Raises:
        DegenerateInputError: If every element is identical
    """
    if array.shape[0] > 0 and np.ptp(array) == 0:
        raise DegenerateInputError(
            f"{name}: all {array.shape[0]} values equal {float(array[0])} (zero variance)",
            reason=reason,
            n=array.shape[0],
        )


def check_sum_of_squares(value: float, name: str, reason: str, n: int) -> None:
    """
    Verify a centered sum of squares is usable as a divisor.

    Distinct samples can still give zero here when their deviations are
    so small that squaring underflows, or Inf when squaring overflows.

    Raises:
        DegenerateInputError: If value is zero or not finite
    """
    if value == 0.0 or not np.isfinite(value):
        raise DegenerateInputError(
            f"{name}: centered sum of squares is {value} "
            f"(deviations underflow or overflow in double precision)",
            reason=reason,
            n=n,
        )
