"""
PyLinalg: generic dense linear algebra for Python.

Fixed-shape Matrix and Vector containers over any numeric scalar type
(int, float, complex, Fraction, Decimal, numpy scalars) with shape-checked
construction, indexing, transpose, matrix products and elementwise
arithmetic.

Submodules:
    core: Protocols, exceptions, validation, flat-buffer engine
    dense: Dimensions, Vector, Matrix and function-style operations
"""

__version__ = "0.1.0"

from pylinalg.dense import (
    Dimensions,
    Vector,
    Matrix,
    RowView,
    transpose,
    dot,
    matmul,
    matvec,
    outer,
)
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    ShapeConstructionError,
    DimensionMismatch,
    IndexOutOfRange,
)

__all__ = [
    "__version__",
    # Containers
    "Dimensions",
    "Vector",
    "Matrix",
    "RowView",
    # Operations
    "transpose",
    "dot",
    "matmul",
    "matvec",
    "outer",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "ShapeConstructionError",
    "DimensionMismatch",
    "IndexOutOfRange",
]
