"""
Flat-buffer operation engine.

All matrices here are plain Python sequences laid out row-major: element
(r, c) of a rows x cols matrix lives at index r * cols + c.

Key insight: matrix multiply transposes the right operand first, so every
output cell is a dot product of two contiguous rows. The result is
identical to the textbook triple loop (same accumulation order); only the
memory access pattern changes.

Every allocating function has a write_* counterpart that fills a
caller-provided output buffer. Buffer lengths are always validated;
a mismatch raises DimensionMismatch before anything is written.

Sums are folded strictly left to right starting from the additive
identity, so floating-point results are reproducible across kernels.
"""

from __future__ import annotations

from typing import Any, MutableSequence, Sequence

from pylinalg.core.validation import (
    check_buffer,
    check_equal_length,
    check_inner_dimensions,
)


def dot(a: Sequence[Any], b: Sequence[Any]) -> Any:
    """
    Dot product of two equal-length sequences.

    Computes sum(a[i] * b[i]) left to right, seeded with 0.

    Raises:
        DimensionMismatch: If len(a) != len(b).
    """
    check_equal_length(len(a), len(b), 'dot')
    return _dot_unchecked(a, b)


def _dot_unchecked(a: Sequence[Any], b: Sequence[Any]) -> Any:
    total: Any = 0
    for x, y in zip(a, b):
        total = total + x * y
    return total


def transpose(a: Sequence[Any], rows: int, cols: int) -> list[Any]:
    """
    Transpose a rows x cols matrix into a new cols x rows buffer.

    Raises:
        DimensionMismatch: If len(a) != rows * cols.
    """
    check_buffer(len(a), rows * cols, 'transpose input')
    out: list[Any] = [None] * (rows * cols)
    _write_transpose_unchecked(out, a, rows, cols)
    return out


def write_transpose(
    out: MutableSequence[Any],
    a: Sequence[Any],
    rows: int,
    cols: int,
) -> None:
    """
    Write the transpose of a rows x cols matrix into ``out``.

    ``out`` receives a cols x rows matrix: out[c * rows + r] = a[r * cols + c].

    Raises:
        DimensionMismatch: If either buffer does not hold rows * cols elements.
    """
    check_buffer(len(a), rows * cols, 'transpose input')
    check_buffer(len(out), rows * cols, 'transpose output')
    _write_transpose_unchecked(out, a, rows, cols)


def _write_transpose_unchecked(
    out: MutableSequence[Any],
    a: Sequence[Any],
    rows: int,
    cols: int,
) -> None:
    for col in range(cols):
        base = col * rows
        for row in range(rows):
            out[base + row] = a[row * cols + col]


def mat_mul(
    a: Sequence[Any],
    a_rows: int,
    a_cols: int,
    b: Sequence[Any],
    b_rows: int,
    b_cols: int,
) -> list[Any]:
    """
    Multiply an a_rows x a_cols matrix by a b_rows x b_cols matrix.

    Algorithm:
    1. bt = transpose(b)  (b_cols x b_rows)
    2. out[i, j] = dot(row i of a, row j of bt)

    Returns:
        New a_rows x b_cols buffer.

    Raises:
        DimensionMismatch: If a_cols != b_rows or a buffer length is wrong.
    """
    check_inner_dimensions(a_cols, b_rows, 'matmul', (a_rows, a_cols), (b_rows, b_cols))
    check_buffer(len(a), a_rows * a_cols, 'matmul lhs')
    check_buffer(len(b), b_rows * b_cols, 'matmul rhs')

    bt: list[Any] = [None] * (b_rows * b_cols)
    _write_transpose_unchecked(bt, b, b_rows, b_cols)

    out: list[Any] = [None] * (a_rows * b_cols)
    _write_mat_mul_transposed_unchecked(out, a, a_rows, a_cols, bt, b_cols)
    return out


def write_mat_mul(
    out: MutableSequence[Any],
    a: Sequence[Any],
    a_rows: int,
    a_cols: int,
    b: Sequence[Any],
    b_rows: int,
    b_cols: int,
) -> None:
    """
    Textbook triple-loop multiply written into ``out``.

    Walks b column-wise (strided). Produces the same values as mat_mul.

    Raises:
        DimensionMismatch: If a_cols != b_rows or a buffer length is wrong.
    """
    check_inner_dimensions(a_cols, b_rows, 'matmul', (a_rows, a_cols), (b_rows, b_cols))
    check_buffer(len(a), a_rows * a_cols, 'matmul lhs')
    check_buffer(len(b), b_rows * b_cols, 'matmul rhs')
    check_buffer(len(out), a_rows * b_cols, 'matmul output')

    for row in range(a_rows):
        a_base = row * a_cols
        out_base = row * b_cols
        for col in range(b_cols):
            total: Any = 0
            for i in range(a_cols):
                total = total + a[a_base + i] * b[i * b_cols + col]
            out[out_base + col] = total


def write_mat_mul_transposed(
    out: MutableSequence[Any],
    a: Sequence[Any],
    a_rows: int,
    a_cols: int,
    b: Sequence[Any],
    b_rows: int,
    b_cols: int,
) -> None:
    """
    Multiply a "normal" matrix ``a`` by an already-transposed matrix ``b``.

    ``b`` is the b_rows x b_cols transpose of the logical right operand,
    so b_cols must equal a_cols. ``out`` receives a_rows x b_rows values.

    Raises:
        DimensionMismatch: If a_cols != b_cols or a buffer length is wrong.
    """
    check_inner_dimensions(a_cols, b_cols, 'matmul_transposed', (a_rows, a_cols), (b_rows, b_cols))
    check_buffer(len(a), a_rows * a_cols, 'matmul lhs')
    check_buffer(len(b), b_rows * b_cols, 'matmul rhs')
    check_buffer(len(out), a_rows * b_rows, 'matmul output')
    _write_mat_mul_transposed_unchecked(out, a, a_rows, a_cols, b, b_rows)


def _write_mat_mul_transposed_unchecked(
    out: MutableSequence[Any],
    a: Sequence[Any],
    a_rows: int,
    inner: int,
    bt: Sequence[Any],
    bt_rows: int,
) -> None:
    bt_rows_slices = [bt[j * inner:(j + 1) * inner] for j in range(bt_rows)]
    for row in range(a_rows):
        a_row = a[row * inner:(row + 1) * inner]
        out_base = row * bt_rows
        for col, b_row in enumerate(bt_rows_slices):
            out[out_base + col] = _dot_unchecked(a_row, b_row)


def mat_vec_mul(
    a: Sequence[Any],
    rows: int,
    cols: int,
    x: Sequence[Any],
) -> list[Any]:
    """
    Multiply a rows x cols matrix by a vector of length cols.

    out[i] = dot(row i of a, x)

    Raises:
        DimensionMismatch: If cols != len(x) or len(a) != rows * cols.
    """
    check_inner_dimensions(cols, len(x), 'matvec', (rows, cols), len(x))
    check_buffer(len(a), rows * cols, 'matvec lhs')
    return [_dot_unchecked(a[r * cols:(r + 1) * cols], x) for r in range(rows)]


def outer(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """
    Outer product of two sequences as a flat len(a) x len(b) buffer.

    out[i * len(b) + j] = a[i] * b[j]. Lengths may differ; never fails.
    """
    return [x * y for x in a for y in b]
