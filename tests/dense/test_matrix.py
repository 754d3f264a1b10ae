"""
Tests for Matrix: construction, indexing, row views, elementwise arithmetic.
"""

from fractions import Fraction

import numpy as np
import pytest

from pylinalg import Dimensions, Matrix, RowView, Vector
from pylinalg.core.exceptions import (
    DimensionError,
    DimensionMismatch,
    IndexOutOfRange,
    ShapeConstructionError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_rows(self, rect_2x3):
        assert rect_2x3.dim == Dimensions(2, 3)
        assert rect_2x3.elements() == [1, 2, 3, 4, 5, 6]

    def test_unequal_rows_rejected(self):
        with pytest.raises(ShapeConstructionError, match="row 1 has 2 elements, expected 3") as exc_info:
            Matrix([[1, 2, 3], [4, 5]])
        assert exc_info.value.row == 1
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_empty(self):
        m = Matrix([])
        assert m.dim == Dimensions(0, 0)
        assert len(m) == 0

    def test_rows_of_length_zero(self):
        assert Matrix([[], []]).shape == (2, 0)

    def test_from_row_major(self, rect_2x3):
        m = Matrix.from_row_major(Dimensions(2, 3), [1, 2, 3, 4, 5, 6])
        assert m == rect_2x3

    def test_from_row_major_tuple_shape(self, rect_2x3):
        assert Matrix.from_row_major((2, 3), range(1, 7)) == rect_2x3

    def test_from_row_major_count_mismatch(self):
        with pytest.raises(ShapeConstructionError, match="got 5 elements for 2x3") as exc_info:
            Matrix.from_row_major(Dimensions(2, 3), [1, 2, 3, 4, 5])
        assert exc_info.value.expected == 6
        assert exc_info.value.actual == 5
        assert exc_info.value.row is None

    def test_shape_construction_error_is_dimension_error(self):
        with pytest.raises(DimensionError):
            Matrix([[1], [2, 3]])

    def test_from_vectors(self):
        m = Matrix.from_rows([Vector([1, 2]), Vector([3, 4])])
        assert m == Matrix([[1, 2], [3, 4]])

    def test_from_vectors_unequal(self):
        with pytest.raises(ShapeConstructionError):
            Matrix.from_rows([Vector([1, 2]), Vector([3])])

    def test_from_array(self):
        m = Matrix.from_array(np.arange(6).reshape(2, 3))
        assert m == Matrix([[0, 1, 2], [3, 4, 5]])
        assert type(m[0, 0]) is int

    def test_from_array_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            Matrix.from_array(np.arange(3))

    def test_from_array_object_dtype(self):
        arr = np.array([[Fraction(1, 2)]], dtype=object)
        assert Matrix.from_array(arr)[0, 0] == Fraction(1, 2)

    def test_to_numpy_round_trip(self, rng):
        arr = rng.standard_normal((3, 4))
        np.testing.assert_array_equal(Matrix.from_array(arr).to_numpy(), arr)

    def test_copies_input_rows(self):
        row = [1, 2]
        m = Matrix([row])
        row[0] = 99
        assert m[0, 0] == 1


class TestConstantConstructors:

    def test_filled(self):
        assert Matrix.filled(7, (2, 2)) == Matrix([[7, 7], [7, 7]])

    def test_zeros(self):
        m = Matrix.zeros(Dimensions(2, 3), kind=int)
        assert m == Matrix([[0, 0, 0], [0, 0, 0]])

    def test_ones_default_float(self):
        m = Matrix.ones((1, 2))
        assert m == Matrix([[1.0, 1.0]])
        assert type(m[0, 0]) is float

    def test_diagonal(self):
        assert Matrix.diagonal(3, 4) == Matrix([
            [3, 0, 0, 0],
            [0, 3, 0, 0],
            [0, 0, 3, 0],
            [0, 0, 0, 3],
        ])

    def test_diagonal_zero_matches_value_type(self):
        m = Matrix.diagonal(Fraction(1, 2), 2)
        assert type(m[0, 1]) is Fraction

    def test_diagonal_empty(self):
        assert Matrix.diagonal(1, 0).shape == (0, 0)

    def test_identity(self):
        assert Matrix.identity(3, kind=int) == Matrix([[1, 0, 0], [0, 1, 0], [0, 0, 1]])

    def test_negative_size(self):
        with pytest.raises(ValidationError):
            Matrix.identity(-1)


# ═══════════════════════════════════════════════════════════════════════
# Indexing and row views
# ═══════════════════════════════════════════════════════════════════════


class TestIndexing:

    def test_index_rect(self, rect_2x3):
        assert rect_2x3[0][0] == 1
        assert rect_2x3[0][1] == 2
        assert rect_2x3[0][2] == 3
        assert rect_2x3[1][0] == 4
        assert rect_2x3[1][1] == 5
        assert rect_2x3[1][2] == 6

    def test_tuple_index(self, rect_2x3):
        assert rect_2x3[1, 2] == 6

    def test_tuple_write(self, rect_2x3):
        rect_2x3[0, 1] = 20
        assert rect_2x3.to_lists() == [[1, 20, 3], [4, 5, 6]]

    def test_write_through_row(self, rect_2x3):
        rect_2x3[1][0] = 40
        assert rect_2x3[1, 0] == 40

    @pytest.mark.parametrize("key", [(2, 0), (0, 3), (-1, 0)])
    def test_element_out_of_range(self, rect_2x3, key):
        with pytest.raises(IndexOutOfRange):
            rect_2x3[key]

    def test_row_out_of_range(self, rect_2x3):
        with pytest.raises(IndexOutOfRange) as exc_info:
            rect_2x3.row(2)
        assert exc_info.value.axis == 'row'

    def test_col_out_of_range_through_view(self, rect_2x3):
        with pytest.raises(IndexOutOfRange) as exc_info:
            rect_2x3[0][3]
        assert exc_info.value.axis == 'col'

    def test_three_indices_rejected(self, rect_2x3):
        with pytest.raises(TypeError):
            rect_2x3[0, 0, 0]

    def test_replace_row(self, rect_2x3):
        rect_2x3[0] = [7, 8, 9]
        assert rect_2x3.to_lists() == [[7, 8, 9], [4, 5, 6]]

    def test_replace_row_wrong_length(self, rect_2x3):
        with pytest.raises(DimensionMismatch, match="row assignment"):
            rect_2x3[0] = [7, 8]
        assert rect_2x3.to_lists() == [[1, 2, 3], [4, 5, 6]]


class TestRowView:

    def test_row_contents(self, rect_2x3):
        row = rect_2x3.row(1)
        assert isinstance(row, RowView)
        assert len(row) == 3
        assert list(row) == [4, 5, 6]

    def test_row_is_read_only(self, rect_2x3):
        with pytest.raises(TypeError, match="read-only"):
            rect_2x3.row(0)[0] = 5

    def test_row_mut_writes_through(self, rect_2x3):
        rect_2x3.row_mut(0)[2] = 30
        assert rect_2x3[0, 2] == 30

    def test_view_sees_later_writes(self, rect_2x3):
        row = rect_2x3.row(0)
        rect_2x3[0, 0] = 100
        assert row[0] == 100

    def test_view_sees_in_place_arithmetic(self, rect_2x3):
        row = rect_2x3.row(1)
        rect_2x3 += 1
        assert list(row) == [5, 6, 7]

    def test_equality_with_sequences(self, rect_2x3):
        assert rect_2x3.row(0) == [1, 2, 3]
        assert rect_2x3.row(0) == (1, 2, 3)
        assert rect_2x3.row(0) == Vector([1, 2, 3])
        assert rect_2x3.row(0) != rect_2x3.row(1)

    def test_to_vector_is_owned_copy(self, rect_2x3):
        v = rect_2x3.row(0).to_vector()
        v[0] = 99
        assert rect_2x3[0, 0] == 1

    def test_sequence_protocol(self, rect_2x3):
        row = rect_2x3.row(0)
        assert 2 in row
        assert row.index(3) == 2

    def test_iterating_matrix_yields_rows(self, rect_2x3):
        assert [list(r) for r in rect_2x3] == [[1, 2, 3], [4, 5, 6]]

    def test_copy_constructor(self, rect_2x3):
        assert Matrix(rect_2x3) == rect_2x3

    def test_zero_width_rows(self):
        m = Matrix([[], []])
        assert list(m.row(1)) == []


# ═══════════════════════════════════════════════════════════════════════
# Equality and display
# ═══════════════════════════════════════════════════════════════════════


class TestEqualityAndDisplay:

    def test_same_elements_different_shape(self):
        a = Matrix.from_row_major((2, 3), range(6))
        b = Matrix.from_row_major((3, 2), range(6))
        assert a != b

    def test_order_sensitive(self):
        assert Matrix([[1, 2]]) != Matrix([[2, 1]])

    def test_nan_not_equal_to_copy(self):
        m = Matrix([[float("nan"), 1.0]])
        assert m != m.copy()
        assert m != m
        assert Vector([float("nan")]) != Vector([float("nan")])

    def test_unhashable(self, rect_2x3):
        with pytest.raises(TypeError):
            hash(rect_2x3)

    def test_repr_round_trip(self, rect_2x3):
        assert repr(rect_2x3) == "Matrix([[1, 2, 3], [4, 5, 6]])"

    def test_repr_zero_rows(self):
        m = Matrix.zeros((0, 3))
        assert repr(m) == "Matrix.from_row_major(Dimensions(0, 3), [])"

    def test_str(self, rect_2x3):
        assert str(rect_2x3) == "[[1, 2, 3],\n [4, 5, 6]]"

    def test_str_empty(self):
        assert str(Matrix([])) == "[]"


# ═══════════════════════════════════════════════════════════════════════
# Transpose
# ═══════════════════════════════════════════════════════════════════════


class TestTranspose:

    def test_square(self, square_3x3):
        assert square_3x3.transpose() == Matrix([[1, 4, 7], [2, 5, 8], [3, 6, 9]])

    def test_rect(self, rect_2x3):
        assert rect_2x3.transpose() == Matrix([[1, 4], [2, 5], [3, 6]])

    def test_T_property(self, rect_2x3):
        assert rect_2x3.T == rect_2x3.transpose()

    def test_input_untouched(self, rect_2x3):
        rect_2x3.transpose()
        assert rect_2x3 == Matrix([[1, 2, 3], [4, 5, 6]])

    def test_zero_rows(self):
        assert Matrix.zeros((0, 4)).transpose().shape == (4, 0)


# ═══════════════════════════════════════════════════════════════════════
# Elementwise arithmetic and broadcast
# ═══════════════════════════════════════════════════════════════════════


class TestElementwise:

    def test_add(self, rect_2x3):
        assert rect_2x3 + rect_2x3 == Matrix([[2, 4, 6], [8, 10, 12]])

    def test_sub(self, rect_2x3):
        assert rect_2x3 - rect_2x3 == Matrix.zeros((2, 3), kind=int)

    def test_hadamard(self):
        assert Matrix([[1, 2], [3, 4]]) * Matrix([[5, 6], [7, 8]]) == Matrix([[5, 12], [21, 32]])

    def test_div(self):
        assert Matrix([[2.0, 9.0]]) / Matrix([[4.0, 3.0]]) == Matrix([[0.5, 3.0]])

    def test_transposed_shape_rejected(self, rect_2x3):
        """Same element count, different Dimensions."""
        with pytest.raises(DimensionMismatch, match="2x3 and 3x2"):
            rect_2x3 + rect_2x3.transpose()

    def test_row_mismatch(self, rect_2x3):
        with pytest.raises(DimensionMismatch):
            rect_2x3 - Matrix([[1, 2, 3]])

    def test_neg(self):
        assert -Matrix([[1, -2]]) == Matrix([[-1, 2]])

    def test_map(self, rect_2x3):
        assert rect_2x3.map(lambda x: x * x) == Matrix([[1, 4, 9], [16, 25, 36]])

    def test_map_inplace(self, rect_2x3):
        rect_2x3.map_inplace(lambda x: -x)
        assert rect_2x3[1, 2] == -6

    def test_matrix_times_vector_is_not_elementwise(self, rect_2x3):
        with pytest.raises(TypeError):
            rect_2x3 * Vector([1, 2, 3])


class TestScalarBroadcast:

    def test_mul(self, rect_2x3):
        assert rect_2x3 * 2 == Matrix([[2, 4, 6], [8, 10, 12]])

    def test_rmul(self, rect_2x3):
        assert 2 * rect_2x3 == rect_2x3 * 2

    def test_add_sub(self):
        m = Matrix([[1, 2]])
        assert m + 1 == Matrix([[2, 3]])
        assert 1 + m == Matrix([[2, 3]])
        assert m - 1 == Matrix([[0, 1]])
        assert 1 - m == Matrix([[0, -1]])

    def test_div(self):
        m = Matrix([[2.0, 4.0]])
        assert m / 2.0 == Matrix([[1.0, 2.0]])
        assert 8.0 / m == Matrix([[4.0, 2.0]])

    def test_fraction_scalar(self):
        m = Matrix([[Fraction(1, 3)]])
        assert m * 3 == Matrix([[Fraction(1)]])

    def test_numpy_scalar_on_left(self):
        result = np.int64(3) * Matrix([[1, 2]])
        assert isinstance(result, Matrix)
        assert result == Matrix([[3, 6]])


class TestInPlace:

    def test_iadd_matrix(self, rect_2x3):
        alias = rect_2x3
        rect_2x3 += Matrix.ones((2, 3), kind=int)
        assert alias is rect_2x3
        assert rect_2x3 == Matrix([[2, 3, 4], [5, 6, 7]])

    def test_isub_scalar(self, rect_2x3):
        rect_2x3 -= 1
        assert rect_2x3 == Matrix([[0, 1, 2], [3, 4, 5]])

    def test_failed_iadd_is_atomic(self, rect_2x3):
        with pytest.raises(DimensionMismatch):
            rect_2x3 += rect_2x3.transpose()
        assert rect_2x3 == Matrix([[1, 2, 3], [4, 5, 6]])

    def test_named_assign_methods(self):
        m = Matrix([[2.0, 4.0]])
        assert m.mul_assign(2.0) is m
        m.div_assign(Matrix([[4.0, 2.0]]))
        m.add_assign(Matrix([[1.0, 1.0]]))
        m.sub_assign(0.5)
        assert m == Matrix([[1.5, 4.5]])

    def test_named_methods_return_new(self, rect_2x3):
        assert rect_2x3.add(1) == rect_2x3 + 1
        assert rect_2x3.sub(rect_2x3) == rect_2x3 - rect_2x3
        assert rect_2x3.mul(rect_2x3) == rect_2x3 * rect_2x3
        assert rect_2x3.div(2) == rect_2x3 / 2
        assert rect_2x3 == Matrix([[1, 2, 3], [4, 5, 6]])

    def test_named_rejects_vector(self, rect_2x3):
        with pytest.raises(ValidationError, match="expected Matrix or scalar"):
            rect_2x3.add(Vector([1, 2, 3]))


class TestAllClose:

    def test_float_drift(self):
        assert Matrix([[0.1 + 0.2]]).allclose(Matrix([[0.3]]))

    def test_shape_mismatch(self, rect_2x3):
        with pytest.raises(DimensionMismatch):
            rect_2x3.allclose(rect_2x3.T)

    def test_rejects_non_matrix(self, rect_2x3):
        with pytest.raises(ValidationError, match="allclose: expected Matrix, got list"):
            rect_2x3.allclose([[1, 2, 3], [4, 5, 6]])
