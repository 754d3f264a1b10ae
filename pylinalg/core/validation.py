"""
Input validation utilities for PyLinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently truncating,
padding or broadcasting mismatched operands.

Design principles:
    - No silent coercion of shapes
    - Clear, actionable error messages with expected vs actual values
    - Each function validates ONE thing
    - Operation or parameter names included in all error messages
"""

from __future__ import annotations

import operator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import (
    DimensionError,
    DimensionMismatch,
    IndexOutOfRange,
    ValidationError,
)


def check_length(length: Any, name: str) -> int:
    """
    Verify a length or extent is a non-negative integer.

    Args:
        length: Value to check
        name: Parameter name for error messages

    Returns:
        The length as a plain int

    Raises:
        ValidationError: If length is not an integer or is negative
    """
    if isinstance(length, bool):
        raise ValidationError(f"{name}: expected a non-negative integer, got bool")
    try:
        value = operator.index(length)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(length).__name__}"
        ) from e
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return value


def check_index(index: Any, bound: int, axis: str) -> int:
    """
    Verify an index lies in [0, bound).

    Negative indices are not wrapped: a fixed-shape container has no
    "from the end" addressing.

    Args:
        index: Index to check
        bound: Exclusive upper bound
        axis: 'row', 'col' or 'element', used in the error message

    Returns:
        The index as a plain int

    Raises:
        TypeError: If index is not an integer
        IndexOutOfRange: If index is outside [0, bound)
    """
    if isinstance(index, bool):
        raise TypeError(f"{axis} index must be an integer, got bool")
    i = operator.index(index)
    if i < 0 or i >= bound:
        raise IndexOutOfRange(
            f"{axis} index {i} out of range for extent {bound}",
            index=i,
            bound=bound,
            axis=axis,
        )
    return i


def check_equal_length(lhs: int, rhs: int, operation: str) -> None:
    """
    Verify two vector operands have the same length.

    Args:
        lhs: Length of the left operand
        rhs: Length of the right operand
        operation: Operation name for error messages

    Raises:
        DimensionMismatch: If lengths differ
    """
    if lhs != rhs:
        raise DimensionMismatch(
            f"{operation}: operands must have the same length, "
            f"got {lhs} and {rhs}",
            operation=operation,
            lhs=lhs,
            rhs=rhs,
        )


def check_same_dimensions(lhs: Any, rhs: Any, operation: str) -> None:
    """
    Verify two matrix operands have identical Dimensions.

    Both rows and cols must agree; an equal element count is not enough.

    Args:
        lhs: Dimensions of the left operand
        rhs: Dimensions of the right operand
        operation: Operation name for error messages

    Raises:
        DimensionMismatch: If the shapes differ
    """
    if lhs.rows != rhs.rows or lhs.cols != rhs.cols:
        raise DimensionMismatch(
            f"{operation}: operands must have identical dimensions, "
            f"got {lhs.rows}x{lhs.cols} and {rhs.rows}x{rhs.cols}",
            operation=operation,
            lhs=lhs,
            rhs=rhs,
        )


def check_inner_dimensions(
    lhs_cols: int,
    rhs_rows: int,
    operation: str,
    lhs: Any = None,
    rhs: Any = None,
) -> None:
    """
    Verify the inner dimensions of a product agree.

    Args:
        lhs_cols: Column count of the left operand
        rhs_rows: Row count (or length) of the right operand
        operation: Operation name for error messages
        lhs: Full shape of the left operand, attached to the error
        rhs: Full shape of the right operand, attached to the error

    Raises:
        DimensionMismatch: If lhs_cols != rhs_rows
    """
    if lhs_cols != rhs_rows:
        raise DimensionMismatch(
            f"{operation}: left operand has {lhs_cols} columns but right "
            f"operand has {rhs_rows} rows",
            operation=operation,
            lhs=lhs if lhs is not None else lhs_cols,
            rhs=rhs if rhs is not None else rhs_rows,
        )


def check_buffer(buffer_len: int, expected: int, name: str) -> None:
    """
    Verify a flat buffer holds exactly the expected number of elements.

    Args:
        buffer_len: Actual buffer length
        expected: Required length (rows * cols)
        name: Buffer name for error messages

    Raises:
        DimensionMismatch: If the lengths differ
    """
    if buffer_len != expected:
        raise DimensionMismatch(
            f"{name}: buffer holds {buffer_len} elements, expected {expected}",
            operation=name,
            lhs=buffer_len,
            rhs=expected,
        )


def check_method(method: str, choices: tuple[str, ...], name: str) -> None:
    """
    Verify a string option is one of the supported choices.

    Raises:
        ValidationError: If method is not in choices
    """
    if method not in choices:
        raise ValidationError(
            f"{name}: unknown value {method!r}, expected one of {list(choices)}"
        )


def check_array(array: ArrayLike, name: str) -> NDArray[Any]:
    """
    Validate and convert input to a numpy array.

    Unlike a numeric-only pipeline, object dtype is accepted so that
    Fraction, Decimal and Python int matrices survive a round trip.
    Strings, bytes and datetimes are rejected.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray

    Raises:
        ValidationError: If input cannot be converted or is non-numeric
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype != object and not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[Any], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)
