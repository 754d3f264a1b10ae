"""
Matrix: a 2-D dense container of scalars.

Storage is a flat row-major list paired with a Dimensions value, so every
row has the same length by construction. Invariant:

    len(storage) == dim.rows * dim.cols

Operations:
    m @ n       matrix multiply (lhs.cols == rhs.rows)
    m @ v       matrix-vector multiply (lhs.cols == len(v))
    m + n, ...  elementwise, identical Dimensions required
    m * 2, ...  scalar broadcast
    m.T         transpose

All shape violations raise DimensionMismatch before any output is built;
in-place operators leave the receiver untouched when they fail.
"""

from __future__ import annotations

import operator
import warnings
from typing import Any, Callable, Iterable, Iterator, Literal, Sequence

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pylinalg.core.compute import ops
from pylinalg.core.compute.tolerances import (
    EXACT,
    ToleranceTier,
    is_close,
    select_tolerance,
)
from pylinalg.core.exceptions import (
    DimensionMismatch,
    ShapeConstructionError,
    ValidationError,
)
from pylinalg.core.protocols import Scalar
from pylinalg.core.scalar import is_scalar, one, zero, zero_like
from pylinalg.core.validation import (
    check_2d,
    check_array,
    check_index,
    check_inner_dimensions,
    check_length,
    check_method,
    check_same_dimensions,
)
from pylinalg.dense._rows import RowView
from pylinalg.dense.dimensions import Dimensions
from pylinalg.dense.vector import Vector


MatmulMethod = Literal['transposed', 'naive', 'numpy']
MATMUL_METHODS: tuple[str, ...] = ('transposed', 'naive', 'numpy')

BinaryOp = Callable[[Any, Any], Any]


class Matrix:
    """
    Dense row-major matrix of scalars.

    Construction:
        Matrix([[1, 2, 3], [4, 5, 6]])
        Matrix.from_row_major(Dimensions(2, 3), [1, 2, 3, 4, 5, 6])
        Matrix.from_array(np.eye(3))
        Matrix.zeros((2, 3)), Matrix.identity(3, kind=int)
        Matrix.diagonal(3, 4)
    """

    __slots__ = ('_elements', '_dim')

    # numpy scalars on the left defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, rows: Iterable[Iterable[Any]] = ()):
        row_lists = [list(r) for r in rows]
        n_cols = len(row_lists[0]) if row_lists else 0

        for i, row in enumerate(row_lists):
            if len(row) != n_cols:
                raise ShapeConstructionError(
                    f"All rows in a matrix must have the same length: "
                    f"row {i} has {len(row)} elements, expected {n_cols}",
                    expected=n_cols,
                    actual=len(row),
                    row=i,
                )

        self._dim = Dimensions(len(row_lists), n_cols)
        self._elements: list[Any] = [x for row in row_lists for x in row]

    @classmethod
    def _wrap(cls, dim: Dimensions, elements: list[Any]) -> Matrix:
        """Adopt ``elements`` as storage without copying or checking. Internal."""
        obj = cls.__new__(cls)
        obj._dim = dim
        obj._elements = elements
        return obj

    @classmethod
    def from_row_major(cls, dim: Dimensions | tuple[int, int], elements: Iterable[Any]) -> Matrix:
        """
        Build a matrix from a flat row-major element sequence.

        Raises:
            ShapeConstructionError: If the element count != rows * cols
        """
        dim = Dimensions.of(dim)
        flat = list(elements)
        if len(flat) != dim.elements():
            raise ShapeConstructionError(
                f"Number of elements must match matrix dimensions: "
                f"got {len(flat)} elements for {dim} (expected {dim.elements()})",
                expected=dim.elements(),
                actual=len(flat),
            )
        return cls._wrap(dim, flat)

    @classmethod
    def from_rows(cls, rows: Sequence[Vector]) -> Matrix:
        """
        Build a matrix from a sequence of equal-length Vectors.

        Raises:
            ShapeConstructionError: If the vectors differ in length
        """
        return cls(rows)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a matrix from a 2-D numpy array or array-like.

        NumPy scalars are converted to the equivalent Python scalars.

        Raises:
            ValidationError: If the input is not numeric
            DimensionError: If the input is not 2-D
        """
        arr = check_array(array, 'array')
        check_2d(arr, 'array')
        rows, cols = arr.shape
        return cls._wrap(Dimensions(rows, cols), arr.reshape(-1).tolist())

    @classmethod
    def filled(cls, value: Scalar, dim: Dimensions | tuple[int, int]) -> Matrix:
        """Matrix with every element equal to ``value``."""
        dim = Dimensions.of(dim)
        return cls._wrap(dim, [value] * dim.elements())

    @classmethod
    def zeros(cls, dim: Dimensions | tuple[int, int], kind: type = float) -> Matrix:
        return cls.filled(zero(kind), dim)

    @classmethod
    def ones(cls, dim: Dimensions | tuple[int, int], kind: type = float) -> Matrix:
        return cls.filled(one(kind), dim)

    @classmethod
    def diagonal(cls, value: Scalar, size: int) -> Matrix:
        """
        Square matrix with ``value`` along the diagonal and zeros elsewhere.

        The zero has the same type as ``value``.
        """
        n = check_length(size, 'size')
        out = cls.filled(zero_like(value), Dimensions.square(n))
        for i in range(n):
            out._elements[i * n + i] = value
        return out

    @classmethod
    def identity(cls, size: int, kind: type = float) -> Matrix:
        """Square matrix with ones along the diagonal and zeros elsewhere."""
        return cls.diagonal(one(kind), size)

    # --- Query ---

    @property
    def dim(self) -> Dimensions:
        return self._dim

    @property
    def rows_len(self) -> int:
        return self._dim.rows

    @property
    def cols_len(self) -> int:
        return self._dim.cols

    @property
    def shape(self) -> tuple[int, int]:
        return self._dim.as_tuple()

    def __len__(self) -> int:
        return self._dim.rows

    def _row_view(self, row: Any, writable: bool) -> RowView:
        r = check_index(row, self._dim.rows, 'row')
        return RowView(self._elements, self._dim.row_major(r, 0), self._dim.cols, writable)

    def row(self, row: int) -> RowView:
        """Read-only view of one row."""
        return self._row_view(row, writable=False)

    def row_mut(self, row: int) -> RowView:
        """Writable view of one row; writes land in this matrix."""
        return self._row_view(row, writable=True)

    def rows(self) -> Iterator[RowView]:
        """Iterate read-only row views, top to bottom."""
        for r in range(self._dim.rows):
            yield RowView(self._elements, self._dim.row_major(r, 0), self._dim.cols, False)

    def __iter__(self) -> Iterator[RowView]:
        return self.rows()

    def _flat_index(self, key: tuple[Any, Any]) -> int:
        if len(key) != 2:
            raise TypeError(f"Matrix index must be (row, col), got {len(key)} indices")
        r = check_index(key[0], self._dim.rows, 'row')
        c = check_index(key[1], self._dim.cols, 'col')
        return self._dim.row_major(r, c)

    def __getitem__(self, key: Any) -> Any:
        """
        m[i]    -> writable RowView of row i
        m[i, j] -> element at row i, column j
        """
        if isinstance(key, tuple):
            return self._elements[self._flat_index(key)]
        if isinstance(key, slice):
            raise TypeError("Matrix does not support slicing")
        return self._row_view(key, writable=True)

    def __setitem__(self, key: Any, value: Any) -> None:
        """
        m[i, j] = x          set one element
        m[i] = [x, y, z]     replace row i (length must equal cols)
        """
        if isinstance(key, tuple):
            self._elements[self._flat_index(key)] = value
            return
        if isinstance(key, slice):
            raise TypeError("Matrix does not support slice assignment")
        r = check_index(key, self._dim.rows, 'row')
        new_row = list(value)
        if len(new_row) != self._dim.cols:
            raise DimensionMismatch(
                f"row assignment: row has {self._dim.cols} columns, "
                f"got {len(new_row)} values",
                operation='row assignment',
                lhs=self._dim.cols,
                rhs=len(new_row),
            )
        start = self._dim.row_major(r, 0)
        self._elements[start:start + self._dim.cols] = new_row

    def elements(self) -> list[Any]:
        """Copy of the flat row-major storage."""
        return list(self._elements)

    def to_lists(self) -> list[list[Any]]:
        cols = self._dim.cols
        return [self._elements[r * cols:(r + 1) * cols] for r in range(self._dim.rows)]

    def to_numpy(self, dtype: DTypeLike = None) -> NDArray[Any]:
        """Copy the elements into a 2-D numpy array of this shape."""
        return np.array(self._elements, dtype=dtype).reshape(self.shape)

    def copy(self) -> Matrix:
        return Matrix._wrap(self._dim, list(self._elements))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Matrix):
            # NaN != NaN even when both cells hold the same object
            return self._dim == other._dim and all(
                a == b for a, b in zip(self._elements, other._elements)
            )
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def allclose(self, other: Matrix, tier: ToleranceTier | None = None) -> bool:
        """
        True if every element is within ``tier`` of the corresponding element.

        Raises:
            ValidationError: If other is not a Matrix
            DimensionMismatch: If the Dimensions differ
        """
        if not isinstance(other, Matrix):
            raise ValidationError(f"allclose: expected Matrix, got {type(other).__name__}")
        check_same_dimensions(self._dim, other._dim, 'allclose')
        if tier is None:
            tier = select_tolerance(type(self._elements[0])) if self._elements else EXACT
        return all(is_close(a, b, tier) for a, b in zip(self._elements, other._elements))

    def __repr__(self) -> str:
        if self._dim.rows == 0 and self._dim.cols != 0:
            return f"Matrix.from_row_major(Dimensions(0, {self._dim.cols}), [])"
        return f"Matrix({self.to_lists()!r})"

    def __str__(self) -> str:
        lines = ["[" + ", ".join(str(x) for x in row) + "]" for row in self.to_lists()]
        return "[" + ",\n ".join(lines) + "]"

    # --- Transpose and products ---

    def transpose(self) -> Matrix:
        """New matrix with out[c][r] = self[r][c]."""
        rows, cols = self._dim.rows, self._dim.cols
        return Matrix._wrap(self._dim.transpose(), ops.transpose(self._elements, rows, cols))

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def matmul(self, other: Matrix | Vector, method: MatmulMethod = 'transposed') -> Matrix | Vector:
        """
        Matrix product self @ other.

        Parameters
        ----------
        other : Matrix or Vector
            Right operand. A Vector is treated as a column and the result
            is a Vector.
        method : str
            'transposed' (default): transpose other, then dot rows.
            'naive': textbook triple loop. Same results as 'transposed'.
            'numpy': numpy.matmul. Fast for float data, but float
            accumulation order is numpy's, not left to right. Integer
            data is multiplied as Python ints and stays exact.

        Raises
        ------
        DimensionMismatch
            If self.cols_len != other.rows_len (or len(other)).
        ValidationError
            If other is not a Matrix/Vector, or method is unknown.
        """
        check_method(method, MATMUL_METHODS, 'method')

        if isinstance(other, Vector):
            return self.matvec(other)
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"matmul: expected Matrix or Vector, got {type(other).__name__}"
            )

        check_inner_dimensions(
            self._dim.cols, other._dim.rows, 'matmul', self._dim, other._dim
        )
        out_dim = Dimensions(self._dim.rows, other._dim.cols)

        if method == 'numpy':
            return _numpy_matmul(self, other, out_dim)

        a, b = self._elements, other._elements
        m, k, n = self._dim.rows, self._dim.cols, other._dim.cols
        if method == 'naive':
            out: list[Any] = [None] * out_dim.elements()
            ops.write_mat_mul(out, a, m, k, b, k, n)
        else:
            out = ops.mat_mul(a, m, k, b, k, n)
        return Matrix._wrap(out_dim, out)

    def matvec(self, other: Vector) -> Vector:
        """
        Matrix-vector product; out[i] = dot(row i, other).

        Raises:
            DimensionMismatch: If self.cols_len != len(other)
        """
        if not isinstance(other, Vector):
            raise ValidationError(f"matvec: expected Vector, got {type(other).__name__}")
        check_inner_dimensions(self._dim.cols, len(other), 'matvec', self._dim, len(other))
        return Vector._wrap(
            ops.mat_vec_mul(self._elements, self._dim.rows, self._dim.cols, other._elements)
        )

    def __matmul__(self, other: Any) -> Matrix | Vector:
        if isinstance(other, (Matrix, Vector)):
            return self.matmul(other)
        return NotImplemented

    # --- Mapping ---

    def map(self, f: Callable[[Any], Any]) -> Matrix:
        """New matrix with ``f`` applied to every element."""
        return Matrix._wrap(self._dim, [f(x) for x in self._elements])

    def map_inplace(self, f: Callable[[Any], Any]) -> Matrix:
        """Apply ``f`` to every element in place; returns self."""
        self._elements[:] = [f(x) for x in self._elements]
        return self

    def __neg__(self) -> Matrix:
        return Matrix._wrap(self._dim, [-x for x in self._elements])

    # --- Elementwise kernels ---

    def _combine(self, other: Any, op: BinaryOp, name: str) -> list[Any] | None:
        """Elementwise or broadcast result list, or None if unsupported."""
        if isinstance(other, Matrix):
            check_same_dimensions(self._dim, other._dim, name)
            return [op(a, b) for a, b in zip(self._elements, other._elements)]
        if is_scalar(other):
            return [op(a, other) for a in self._elements]
        return None

    def _binary(self, other: Any, op: BinaryOp, name: str) -> Matrix:
        out = self._combine(other, op, name)
        if out is None:
            return NotImplemented
        return Matrix._wrap(self._dim, out)

    def _reflected(self, other: Any, op: BinaryOp) -> Matrix:
        if not is_scalar(other):
            return NotImplemented
        return Matrix._wrap(self._dim, [op(other, a) for a in self._elements])

    def _inplace(self, other: Any, op: BinaryOp, name: str) -> Matrix:
        out = self._combine(other, op, name)
        if out is None:
            return NotImplemented
        self._elements[:] = out
        return self

    def __add__(self, other: Any) -> Matrix:
        return self._binary(other, operator.add, 'add')

    def __sub__(self, other: Any) -> Matrix:
        return self._binary(other, operator.sub, 'sub')

    def __mul__(self, other: Any) -> Matrix:
        return self._binary(other, operator.mul, 'mul')

    def __truediv__(self, other: Any) -> Matrix:
        return self._binary(other, operator.truediv, 'div')

    def __radd__(self, other: Any) -> Matrix:
        return self._reflected(other, operator.add)

    def __rsub__(self, other: Any) -> Matrix:
        return self._reflected(other, operator.sub)

    def __rmul__(self, other: Any) -> Matrix:
        return self._reflected(other, operator.mul)

    def __rtruediv__(self, other: Any) -> Matrix:
        return self._reflected(other, operator.truediv)

    def __iadd__(self, other: Any) -> Matrix:
        return self._inplace(other, operator.add, 'add_assign')

    def __isub__(self, other: Any) -> Matrix:
        return self._inplace(other, operator.sub, 'sub_assign')

    def __imul__(self, other: Any) -> Matrix:
        return self._inplace(other, operator.mul, 'mul_assign')

    def __itruediv__(self, other: Any) -> Matrix:
        return self._inplace(other, operator.truediv, 'div_assign')

    # --- Named equivalents ---

    def _named(self, other: Any, op: BinaryOp, name: str, inplace: bool) -> Matrix:
        out = self._combine(other, op, name)
        if out is None:
            raise ValidationError(
                f"{name}: expected Matrix or scalar, got {type(other).__name__}"
            )
        if inplace:
            self._elements[:] = out
            return self
        return Matrix._wrap(self._dim, out)

    def add(self, other: Any) -> Matrix:
        return self._named(other, operator.add, 'add', inplace=False)

    def sub(self, other: Any) -> Matrix:
        return self._named(other, operator.sub, 'sub', inplace=False)

    def mul(self, other: Any) -> Matrix:
        """Elementwise (Hadamard) product with a Matrix, or scalar broadcast."""
        return self._named(other, operator.mul, 'mul', inplace=False)

    def div(self, other: Any) -> Matrix:
        return self._named(other, operator.truediv, 'div', inplace=False)

    def add_assign(self, other: Any) -> Matrix:
        return self._named(other, operator.add, 'add_assign', inplace=True)

    def sub_assign(self, other: Any) -> Matrix:
        return self._named(other, operator.sub, 'sub_assign', inplace=True)

    def mul_assign(self, other: Any) -> Matrix:
        return self._named(other, operator.mul, 'mul_assign', inplace=True)

    def div_assign(self, other: Any) -> Matrix:
        return self._named(other, operator.truediv, 'div_assign', inplace=True)


def _numpy_matmul(lhs: Matrix, rhs: Matrix, out_dim: Dimensions) -> Matrix:
    """
    numpy.matmul over the two operands; shapes already validated.

    Integer data is multiplied as Python ints (object dtype) so products
    never wrap at 64 bits. A zero inner dimension goes to the engine,
    which fills with the same int zero as the other methods.
    """
    if lhs._dim.cols == 0:
        return Matrix._wrap(
            out_dim,
            ops.mat_mul(lhs._elements, lhs._dim.rows, 0, rhs._elements, 0, rhs._dim.cols),
        )

    a = lhs.to_numpy()
    b = rhs.to_numpy()
    if a.dtype == object or b.dtype == object:
        warnings.warn(
            "numpy matmul on object dtype (Fraction, Decimal, big int or mixed "
            "elements) runs element by element; method='transposed' is "
            "usually as fast.",
            RuntimeWarning,
            stacklevel=3,
        )
    elif a.dtype.kind in 'iu' or b.dtype.kind in 'iu':
        a = a.astype(object)
        b = b.astype(object)
    result = np.matmul(a, b)
    return Matrix._wrap(out_dim, result.reshape(-1).tolist())
