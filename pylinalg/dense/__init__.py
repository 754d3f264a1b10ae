"""
Dense containers.

Public API:
    Dimensions  - (rows, cols) shape value
    Vector      - 1-D dense container
    Matrix      - 2-D dense row-major container
    RowView     - non-owning view of a matrix row
    transpose, dot, matmul, matvec, outer - function-style operations
"""

from pylinalg.dense.dimensions import Dimensions
from pylinalg.dense.vector import Vector
from pylinalg.dense.matrix import Matrix
from pylinalg.dense._rows import RowView
from pylinalg.dense.operations import (
    transpose,
    dot,
    matmul,
    matvec,
    outer,
)

__all__ = [
    "Dimensions",
    "Vector",
    "Matrix",
    "RowView",
    "transpose",
    "dot",
    "matmul",
    "matvec",
    "outer",
]
