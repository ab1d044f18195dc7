"""
Tests for the dense Matrix type.

Validates:
    - Construction forms (zero, fill, flat literal, nested, from_array)
    - Shape-mismatch policy on literal construction
    - Bounds-checked element access
    - Snapshot semantics of data(), to_array(), row/column extraction
    - Value semantics (copy, equality)
    - Arithmetic and products with dimension checks
    - Textual rendering
"""

import copy

import numpy as np
import pytest

from pydensela.core.exceptions import DimensionError, ValidationError
from pydensela.dense import Matrix, Vector


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_zero_filled(self):
        m = Matrix(2, 3)
        assert m.shape == (2, 3)
        assert m.dtype == np.float64
        np.testing.assert_array_equal(m.data(), np.zeros(6))

    def test_fill_value(self):
        m = Matrix(3, 2, 7.5)
        np.testing.assert_array_equal(m.data(), np.full(6, 7.5))

    def test_flat_literal_is_row_major(self):
        m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
        assert m[0, 2] == 3
        assert m[1, 0] == 4

    def test_nested_rows(self):
        m = Matrix(2, 2, [[1.0, 2.0], [3.0, 4.0]])
        assert m[1, 0] == 3.0

    def test_integer_element_type(self):
        m = Matrix(2, 2, [1, 2, 3, 4])
        assert np.issubdtype(m.dtype, np.integer)

    def test_explicit_dtype(self):
        m = Matrix(2, 2, dtype=np.float32)
        assert m.dtype == np.float32

    def test_complex_element_type(self):
        m = Matrix(1, 2, [1 + 1j, 2])
        assert np.issubdtype(m.dtype, np.complexfloating)

    def test_empty_shape(self):
        m = Matrix(0, 0)
        assert m.shape == (0, 0)
        assert len(m.data()) == 0

    def test_from_array(self):
        m = Matrix.from_array(np.arange(6).reshape(3, 2))
        assert m.shape == (3, 2)
        assert m[2, 1] == 5

    def test_from_array_rejects_1d(self):
        with pytest.raises(DimensionError):
            Matrix.from_array([1.0, 2.0])

    def test_identity(self):
        np.testing.assert_array_equal(Matrix.identity(3).to_array(), np.eye(3))

    def test_negative_shape_rejected(self):
        with pytest.raises(ValidationError, match="rows"):
            Matrix(-1, 2)

    def test_boolean_elements_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            Matrix(1, 2, [True, False])

    def test_string_elements_rejected(self):
        with pytest.raises(ValidationError):
            Matrix(1, 2, ["a", "b"])

    def test_non_numeric_dtype_rejected(self):
        with pytest.raises(ValidationError):
            Matrix(2, 2, dtype=bool)

    @pytest.mark.parametrize("rows,cols", [(1, 1), (2, 3), (4, 4), (5, 1), (0, 3)])
    def test_shape_invariant(self, rows, cols):
        m = Matrix(rows, cols, 1.0)
        assert len(m.data()) == m.row_count * m.col_count


class TestLiteralMismatch:
    """A literal whose size differs from rows * cols never half-initializes."""

    def test_mismatch_raises_by_default(self):
        with pytest.raises(DimensionError, match="expected 4 elements.*got 3"):
            Matrix(2, 2, [1.0, 2.0, 3.0])

    def test_mismatch_fill_policy_zero_fills_with_warning(self):
        with pytest.warns(UserWarning, match="zero-filled"):
            m = Matrix(2, 2, [1.0, 2.0, 3.0], on_mismatch='fill')
        assert m.shape == (2, 2)
        np.testing.assert_array_equal(m.to_array(), np.zeros((2, 2)))

    def test_unknown_policy(self):
        with pytest.raises(ValueError, match="on_mismatch"):
            Matrix(2, 2, [1.0], on_mismatch='ignore')


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


class TestElementAccess:

    def test_write_then_read(self):
        m = Matrix(2, 2)
        m[1, 0] = 4.0
        assert m[1, 0] == 4.0
        assert m.data()[2] == 4.0

    def test_row_out_of_range(self):
        with pytest.raises(IndexError, match="row index 2"):
            Matrix(2, 2)[2, 0]

    def test_column_out_of_range(self):
        with pytest.raises(IndexError, match="column index 5"):
            Matrix(2, 2)[0, 5]

    def test_negative_index_rejected(self):
        with pytest.raises(IndexError):
            Matrix(2, 2)[-1, 0]

    def test_single_index_rejected(self):
        with pytest.raises(TypeError, match="pairs"):
            Matrix(2, 2)[0]

    def test_write_out_of_range(self):
        m = Matrix(2, 2)
        with pytest.raises(IndexError):
            m[0, 2] = 1.0


# ═══════════════════════════════════════════════════════════════════════
# Snapshots and value semantics
# ═══════════════════════════════════════════════════════════════════════


class TestSnapshots:

    def test_data_is_a_copy(self):
        m = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
        d = m.data()
        d[0] = 99.0
        assert m[0, 0] == 1.0

    def test_to_array_is_a_copy(self):
        m = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
        a = m.to_array()
        a[1, 1] = 99.0
        assert m[1, 1] == 4.0

    def test_construction_copies_input(self):
        source = np.array([1.0, 2.0, 3.0, 4.0])
        m = Matrix(2, 2, source)
        source[0] = 99.0
        assert m[0, 0] == 1.0

    def test_row_vectors(self):
        m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
        rows = m.row_vectors()
        assert len(rows) == 2
        assert all(isinstance(r, Vector) for r in rows)
        np.testing.assert_array_equal(rows[1].data(), [4, 5, 6])

    def test_column_vectors(self):
        m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
        cols = m.column_vectors()
        assert len(cols) == 3
        np.testing.assert_array_equal(cols[2].data(), [3, 6])

    def test_extracted_vectors_are_independent(self):
        m = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
        col = m.column_vectors()[0]
        col[0] = 99.0
        assert m[0, 0] == 1.0

    def test_row_and_column(self):
        m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
        assert isinstance(m.row(1), Vector)
        np.testing.assert_array_equal(m.row(1).data(), [4, 5, 6])
        np.testing.assert_array_equal(m.column(2).data(), [3, 6])
        assert m.column(0).size == 2

    @pytest.mark.parametrize("accessor, index", [
        ("row", 2), ("row", -1), ("column", 3), ("column", -1),
    ])
    def test_row_and_column_out_of_range(self, accessor, index):
        m = Matrix(2, 3)
        with pytest.raises(IndexError):
            getattr(m, accessor)(index)

    def test_row_index_must_be_integer(self):
        with pytest.raises(TypeError, match="row index"):
            Matrix(2, 2).row(0.5)

    def test_row_and_column_are_independent(self):
        m = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
        r = m.row(0)
        c = m.column(1)
        r[0] = 99.0
        c[1] = 99.0
        assert m[0, 0] == 1.0
        assert m[1, 1] == 4.0

    def test_copy_is_independent(self):
        m = Matrix(2, 2, 1.0)
        for c in (m.copy(), copy.copy(m), copy.deepcopy(m)):
            c[0, 0] = 5.0
            assert m[0, 0] == 1.0

    def test_equality(self):
        assert Matrix(2, 2, [1, 2, 3, 4]) == Matrix(2, 2, [1, 2, 3, 4])
        assert Matrix(2, 2, [1, 2, 3, 4]) != Matrix(2, 2, [1, 2, 3, 5])
        assert Matrix(1, 4, [1, 2, 3, 4]) != Matrix(2, 2, [1, 2, 3, 4])

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Matrix(1, 1))


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add_and_subtract(self):
        a = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
        b = Matrix(2, 2, 1.0)
        np.testing.assert_array_equal((a + b).data(), [2.0, 3.0, 4.0, 5.0])
        np.testing.assert_array_equal((a - b).data(), [0.0, 1.0, 2.0, 3.0])

    def test_shape_mismatch(self):
        with pytest.raises(DimensionError, match="equal shapes"):
            Matrix(2, 2) + Matrix(2, 3)

    def test_scalar_multiplication_both_sides(self):
        a = Matrix(1, 2, [1.0, 2.0])
        np.testing.assert_array_equal((a * 2).data(), [2.0, 4.0])
        np.testing.assert_array_equal((2 * a).data(), [2.0, 4.0])
        np.testing.assert_array_equal((np.float64(2.0) * a).data(), [2.0, 4.0])

    def test_scalar_division_and_negation(self):
        a = Matrix(1, 2, [2.0, 4.0])
        np.testing.assert_array_equal((a / 2).data(), [1.0, 2.0])
        np.testing.assert_array_equal((-a).data(), [-2.0, -4.0])

    def test_operands_not_mutated(self):
        a = Matrix(1, 2, [1.0, 2.0])
        _ = a * 3 + a
        np.testing.assert_array_equal(a.data(), [1.0, 2.0])

    def test_matrix_times_matrix_rejected_with_star(self):
        with pytest.raises(TypeError):
            Matrix(2, 2) * Matrix(2, 2)

    def test_matmul(self):
        a = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
        b = Matrix(3, 1, [1, 0, 1])
        product = a @ b
        assert isinstance(product, Matrix)
        assert product.shape == (2, 1)
        np.testing.assert_array_equal(product.data(), [4, 10])

    def test_matvec_has_row_count_entries(self):
        a = Matrix(3, 2, [1.0, 0.0, 0.0, 1.0, 1.0, 1.0])
        v = Vector(2, [2.0, 3.0])
        product = a @ v
        assert isinstance(product, Vector)
        np.testing.assert_array_equal(product.data(), [2.0, 3.0, 5.0])

    def test_matvec_dimension_mismatch(self):
        with pytest.raises(DimensionError, match="not compatible"):
            Matrix(2, 3) @ Vector(2)


# ═══════════════════════════════════════════════════════════════════════
# Rendering
# ═══════════════════════════════════════════════════════════════════════


class TestRendering:

    def test_matrix_format(self):
        m = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
        assert str(m) == "[1.0, 2.0;\n3.0, 4.0]"

    def test_single_row(self):
        assert str(Matrix(1, 3, [1, 2, 3])) == "[1, 2, 3]"

    def test_repr_mentions_shape(self):
        assert repr(Matrix(1, 2, [1, 2])).startswith("Matrix(1, 2,")
