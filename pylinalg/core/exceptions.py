"""
Exception hierarchy for PyLinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Container-specific failures inherit from the
appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from typing import Any


class PyLinalgError(Exception):
    """Base exception for all PyLinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided arguments fail validation checks
    (negative lengths, unknown methods, wrong container types).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an imported array has the wrong number of dimensions, and
    used as the base for all shape-related failures.
    """
    pass


class ShapeConstructionError(DimensionError):
    """
    A matrix could not be built from the given elements.

    Raised when rows have unequal lengths, or when a flat row-major buffer
    does not hold exactly rows * cols elements.

    Attributes:
        expected: Expected length (row length or element count)
        actual: Length actually supplied
        row: Index of the offending row, or None for flat-buffer construction
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
        row: int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.row = row


class DimensionMismatch(DimensionError):
    """
    Operand shapes of a binary operation disagree.

    The rule depends on the operation: equal length for vector operations,
    lhs.cols == rhs.rows for matrix multiply, lhs.cols == len(rhs) for
    matrix-vector multiply, identical Dimensions for elementwise matrix
    operations.

    Attributes:
        operation: Name of the failing operation (e.g. 'matmul', 'dot')
        lhs: Shape of the left operand (Dimensions or length)
        rhs: Shape of the right operand (Dimensions or length)
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        lhs: Any = None,
        rhs: Any = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.lhs = lhs
        self.rhs = rhs


class IndexOutOfRange(PyLinalgError, IndexError):
    """
    Row, column or element index is outside the declared bounds.

    Also an IndexError, so code relying on the sequence protocol
    keeps working.

    Attributes:
        index: The offending index
        bound: Exclusive upper bound that was violated
        axis: 'row', 'col' or 'element'
    """

    def __init__(
        self,
        message: str,
        index: Any = None,
        bound: int | None = None,
        axis: str | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis
