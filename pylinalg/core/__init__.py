"""
Core infrastructure for PyLinalg.

This module provides shared abstractions, utilities, and the operation
engine used by the dense containers (Vector, Matrix).

Key components:
    protocols: Scalar, RealScalar protocols
    scalar: Identities and scalar classification
    exceptions: Exception hierarchy
    validation: Input and shape validators
    compute: Flat-buffer engine, tolerances, timing
"""

from pylinalg.core.protocols import Scalar, RealScalar
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    ShapeConstructionError,
    DimensionMismatch,
    IndexOutOfRange,
)

__all__ = [
    # Protocols
    "Scalar",
    "RealScalar",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "ShapeConstructionError",
    "DimensionMismatch",
    "IndexOutOfRange",
]
