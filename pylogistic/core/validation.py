"""
Input validation utilities for pylogistic.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylogistic.core.exceptions import (
    ConfigurationError,
    DimensionError,
    NonFiniteInputError,
    ResponseError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    The result never shares memory with the caller's array.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

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

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return np.array(result, dtype=np.float64, copy=True)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        NonFiniteInputError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise NonFiniteInputError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)",
            name=name,
            n_nan=n_nan,
            n_inf=n_inf,
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


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

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_binary(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every finite element is exactly 0.0 or 1.0.

    Non-finite entries are ignored here; check_finite reports them.

    Args:
        array: Response vector to check
        name: Parameter name for error messages

    Raises:
        ResponseError: If a finite element is neither 0 nor 1
    """
    finite = array[np.isfinite(array)]
    bad = finite[(finite != 0.0) & (finite != 1.0)]
    if bad.size > 0:
        shown = tuple(float(v) for v in np.unique(bad)[:5])
        raise ResponseError(
            f"{name}: elements must be either 0 or 1, found {bad.size} other "
            f"value(s), e.g. {list(shown)}",
            invalid_values=shown,
        )


def check_both_classes(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a binary response contains at least one 0 and one 1.

    Raises:
        ResponseError: If every label is identical
    """
    positive_rate = float(np.mean(array))
    if positive_rate == 0.0 or positive_rate == 1.0:
        raise ResponseError(
            f"{name}: all {array.shape[0]} labels equal {positive_rate:g}; "
            f"both outcomes are required to fit a logistic model"
        )


def check_positive_float(value: Any, name: str) -> float:
    """
    Verify a setting is a finite real number strictly greater than zero.

    Returns:
        The value as a Python float

    Raises:
        ConfigurationError: If value is not a positive finite real
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigurationError(
            f"{name}: expected a positive real number, got {type(value).__name__}",
            parameter=name,
            value=value,
        )
    value = float(value)
    if not math.isfinite(value) or value <= 0.0:
        raise ConfigurationError(
            f"{name}: must be finite and > 0, got {value!r}",
            parameter=name,
            value=value,
        )
    return value


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify a setting is an integer >= 1.

    Returns:
        The value as a Python int

    Raises:
        ConfigurationError: If value is not an integer >= 1
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ConfigurationError(
            f"{name}: expected an integer, got {type(value).__name__}",
            parameter=name,
            value=value,
        )
    if value < 1:
        raise ConfigurationError(
            f"{name}: must be >= 1, got {value}",
            parameter=name,
            value=value,
        )
    return int(value)
