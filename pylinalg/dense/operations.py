"""
Standalone operation utilities.

Function-style entry points onto the same engine the container methods
use. Both operands must be Vector/Matrix instances; shape rules are the
methods' rules.
"""

from __future__ import annotations

from typing import Any

from pylinalg.core.exceptions import ValidationError
from pylinalg.core.protocols import Scalar
from pylinalg.dense.matrix import Matrix, MatmulMethod
from pylinalg.dense.vector import Vector


def _require(value: Any, kind: type, operation: str, name: str) -> None:
    if not isinstance(value, kind):
        raise ValidationError(
            f"{operation}: {name} must be {kind.__name__}, got {type(value).__name__}"
        )


def transpose(m: Matrix) -> Matrix:
    """Transpose of ``m``."""
    _require(m, Matrix, 'transpose', 'm')
    return m.transpose()


def dot(a: Vector, b: Vector) -> Scalar:
    """Dot product of two equal-length vectors, summed left to right."""
    _require(a, Vector, 'dot', 'a')
    _require(b, Vector, 'dot', 'b')
    return a.dot(b)


def matmul(
    a: Matrix,
    b: Matrix | Vector,
    *,
    method: MatmulMethod = 'transposed',
) -> Matrix | Vector:
    """
    Matrix product a @ b.

    A Vector right operand is dispatched to matvec().
    """
    _require(a, Matrix, 'matmul', 'a')
    if isinstance(b, Vector):
        return matvec(a, b)
    _require(b, Matrix, 'matmul', 'b')
    return a.matmul(b, method=method)


def matvec(m: Matrix, v: Vector) -> Vector:
    """Matrix-vector product; out[i] = dot(row i of m, v)."""
    _require(m, Matrix, 'matvec', 'm')
    _require(v, Vector, 'matvec', 'v')
    return m.matvec(v)


def outer(a: Vector, b: Vector) -> Matrix:
    """Outer product; result[i][j] = a[i] * b[j]. Lengths may differ."""
    _require(a, Vector, 'outer', 'a')
    _require(b, Vector, 'outer', 'b')
    return a.mul_transpose(b)
