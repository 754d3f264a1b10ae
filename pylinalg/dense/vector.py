"""
Vector: a 1-D dense container of scalars.

Owns its storage exclusively (a private list). Arithmetic comes in two
flavours, mirroring Python's operator protocol:

    v + w, v + 2, 2 + v      -> new Vector (operands untouched)
    v += w, v.add_assign(w)  -> mutates v in place

Binary operations between two vectors require equal lengths and raise
DimensionMismatch otherwise. Scalar broadcast never fails on shape.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pylinalg.core.compute import ops
from pylinalg.core.compute.tolerances import (
    EXACT,
    ToleranceTier,
    is_close,
    select_tolerance,
)
from pylinalg.core.exceptions import ValidationError
from pylinalg.core.protocols import Scalar
from pylinalg.core.scalar import is_scalar, one, zero
from pylinalg.core.validation import (
    check_1d,
    check_array,
    check_equal_length,
    check_index,
    check_length,
)
from pylinalg.dense._real import RealFunctionsMixin, RealKernel, apply_real
from pylinalg.dense._rows import RowView

if TYPE_CHECKING:
    from pylinalg.dense.matrix import Matrix


BinaryOp = Callable[[Any, Any], Any]


class Vector(RealFunctionsMixin):
    """
    Dense, fixed-length sequence of scalars.

    Construction:
        Vector([1, 2, 3])
        Vector.filled(0.5, 4)
        Vector.zeros(3), Vector.ones(3, kind=int)
        Vector.from_array(np.arange(3.0))
    """

    __slots__ = ('_elements',)

    # numpy scalars on the left defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, elements: Iterable[Any] = ()):
        self._elements: list[Any] = list(elements)

    @classmethod
    def _wrap(cls, elements: list[Any]) -> Vector:
        """Adopt ``elements`` without copying. Internal."""
        obj = cls.__new__(cls)
        obj._elements = elements
        return obj

    @classmethod
    def filled(cls, value: Scalar, length: int) -> Vector:
        """Vector of ``length`` copies of ``value``."""
        n = check_length(length, 'length')
        return cls._wrap([value] * n)

    @classmethod
    def zeros(cls, length: int, kind: type = float) -> Vector:
        """Vector of ``length`` additive identities of ``kind``."""
        return cls.filled(zero(kind), length)

    @classmethod
    def ones(cls, length: int, kind: type = float) -> Vector:
        """Vector of ``length`` multiplicative identities of ``kind``."""
        return cls.filled(one(kind), length)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Vector:
        """
        Build a Vector from a 1-D numpy array or array-like.

        NumPy scalars are converted to the equivalent Python scalars.

        Raises:
            ValidationError: If the input is not numeric
            DimensionError: If the input is not 1-D
        """
        arr = check_array(array, 'array')
        check_1d(arr, 'array')
        return cls._wrap(arr.tolist())

    # --- Query ---

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            raise TypeError("Vector does not support slicing; use to_list()")
        return self._elements[check_index(index, len(self._elements), 'element')]

    def __setitem__(self, index: Any, value: Any) -> None:
        if isinstance(index, slice):
            raise TypeError("Vector does not support slice assignment")
        self._elements[check_index(index, len(self._elements), 'element')] = value

    def to_list(self) -> list[Any]:
        return list(self._elements)

    def to_numpy(self, dtype: DTypeLike = None) -> NDArray[Any]:
        """Copy the elements into a 1-D numpy array."""
        return np.array(self._elements, dtype=dtype)

    def copy(self) -> Vector:
        return Vector._wrap(list(self._elements))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Vector, RowView)):
            return len(self) == len(other) and all(
                a == b for a, b in zip(self._elements, other)
            )
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def allclose(self, other: Vector, tier: ToleranceTier | None = None) -> bool:
        """
        True if every element is within ``tier`` of the corresponding element.

        The tier defaults to select_tolerance() on the first element's type.

        Raises:
            ValidationError: If other is not a Vector
            DimensionMismatch: If lengths differ
        """
        if not isinstance(other, Vector):
            raise ValidationError(f"allclose: expected Vector, got {type(other).__name__}")
        check_equal_length(len(self), len(other), 'allclose')
        if tier is None:
            tier = select_tolerance(type(self._elements[0])) if self._elements else EXACT
        return all(is_close(a, b, tier) for a, b in zip(self._elements, other))

    def __repr__(self) -> str:
        return f"Vector({self._elements!r})"

    def __str__(self) -> str:
        return "[" + ", ".join(str(x) for x in self._elements) + "]"

    # --- Reductions ---

    def dot(self, other: Vector) -> Scalar:
        """
        Dot product, summed left to right from zero.

        Raises:
            DimensionMismatch: If lengths differ
        """
        if not isinstance(other, Vector):
            raise ValidationError(f"dot: expected Vector, got {type(other).__name__}")
        return ops.dot(self._elements, other._elements)

    def sum(self) -> Scalar:
        """Sum of the elements, left to right from zero."""
        total: Any = 0
        for x in self._elements:
            total = total + x
        return total

    def mul_transpose(self, other: Vector) -> Matrix:
        """
        Outer product self * other^T.

        Returns a len(self) x len(other) Matrix with result[i][j] =
        self[i] * other[j]. The lengths may differ.
        """
        from pylinalg.dense.dimensions import Dimensions
        from pylinalg.dense.matrix import Matrix

        if not isinstance(other, Vector):
            raise ValidationError(
                f"mul_transpose: expected Vector, got {type(other).__name__}"
            )
        return Matrix._wrap(
            Dimensions(len(self), len(other)),
            ops.outer(self._elements, other._elements),
        )

    # --- Mapping ---

    def map(self, f: Callable[[Any], Any]) -> Vector:
        """New vector with ``f`` applied to every element."""
        return Vector._wrap([f(x) for x in self._elements])

    def map_inplace(self, f: Callable[[Any], Any]) -> Vector:
        """Apply ``f`` to every element in place; returns self."""
        self._elements[:] = [f(x) for x in self._elements]
        return self

    def _map_real(self, kernel: RealKernel) -> Vector:
        return Vector._wrap(apply_real(self._elements, kernel))

    def __neg__(self) -> Vector:
        return Vector._wrap([-x for x in self._elements])

    # --- Elementwise kernels ---

    def _combine(self, other: Any, op: BinaryOp, name: str) -> list[Any] | None:
        """Elementwise or broadcast result list, or None if unsupported."""
        if isinstance(other, Vector):
            check_equal_length(len(self), len(other), name)
            return [op(a, b) for a, b in zip(self._elements, other._elements)]
        if is_scalar(other):
            return [op(a, other) for a in self._elements]
        return None

    def _binary(self, other: Any, op: BinaryOp, name: str) -> Vector:
        out = self._combine(other, op, name)
        if out is None:
            return NotImplemented
        return Vector._wrap(out)

    def _reflected(self, other: Any, op: BinaryOp) -> Vector:
        if not is_scalar(other):
            return NotImplemented
        return Vector._wrap([op(other, a) for a in self._elements])

    def _inplace(self, other: Any, op: BinaryOp, name: str) -> Vector:
        out = self._combine(other, op, name)
        if out is None:
            return NotImplemented
        self._elements[:] = out
        return self

    def __add__(self, other: Any) -> Vector:
        return self._binary(other, operator.add, 'add')

    def __sub__(self, other: Any) -> Vector:
        return self._binary(other, operator.sub, 'sub')

    def __mul__(self, other: Any) -> Vector:
        return self._binary(other, operator.mul, 'mul')

    def __truediv__(self, other: Any) -> Vector:
        return self._binary(other, operator.truediv, 'div')

    def __radd__(self, other: Any) -> Vector:
        return self._reflected(other, operator.add)

    def __rsub__(self, other: Any) -> Vector:
        return self._reflected(other, operator.sub)

    def __rmul__(self, other: Any) -> Vector:
        return self._reflected(other, operator.mul)

    def __rtruediv__(self, other: Any) -> Vector:
        return self._reflected(other, operator.truediv)

    def __iadd__(self, other: Any) -> Vector:
        return self._inplace(other, operator.add, 'add_assign')

    def __isub__(self, other: Any) -> Vector:
        return self._inplace(other, operator.sub, 'sub_assign')

    def __imul__(self, other: Any) -> Vector:
        return self._inplace(other, operator.mul, 'mul_assign')

    def __itruediv__(self, other: Any) -> Vector:
        return self._inplace(other, operator.truediv, 'div_assign')

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, Vector):
            return self.dot(other)
        return NotImplemented

    # --- Named equivalents ---

    def _named(self, other: Any, op: BinaryOp, name: str, inplace: bool) -> Vector:
        out = self._combine(other, op, name)
        if out is None:
            raise ValidationError(
                f"{name}: expected Vector or scalar, got {type(other).__name__}"
            )
        if inplace:
            self._elements[:] = out
            return self
        return Vector._wrap(out)

    def add(self, other: Any) -> Vector:
        return self._named(other, operator.add, 'add', inplace=False)

    def sub(self, other: Any) -> Vector:
        return self._named(other, operator.sub, 'sub', inplace=False)

    def mul(self, other: Any) -> Vector:
        return self._named(other, operator.mul, 'mul', inplace=False)

    def div(self, other: Any) -> Vector:
        return self._named(other, operator.truediv, 'div', inplace=False)

    def add_assign(self, other: Any) -> Vector:
        return self._named(other, operator.add, 'add_assign', inplace=True)

    def sub_assign(self, other: Any) -> Vector:
        return self._named(other, operator.sub, 'sub_assign', inplace=True)

    def mul_assign(self, other: Any) -> Vector:
        return self._named(other, operator.mul, 'mul_assign', inplace=True)

    def div_assign(self, other: Any) -> Vector:
        return self._named(other, operator.truediv, 'div_assign', inplace=True)
