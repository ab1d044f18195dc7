"""
Tests for Gram-Schmidt orthonormalization.

Validates:
    - Output is orthonormal under the chosen inner product
    - Span and ordering are preserved
    - Linearly dependent input raises, or is skipped with a warning
    - Modified Gram-Schmidt stays orthogonal where classical does not
"""

import warnings

import numpy as np
import pytest

from pydensela.core.exceptions import DegenerateBasisError, DimensionError, ValidationError
from pydensela.dense import Vector, from_column_vectors
from pydensela.orthogonalization import (
    check_orthonormality,
    gram_matrix,
    hermitian_product,
    orthonormalize,
)


def _columns(A):
    return [Vector.from_array(A[:, j]) for j in range(A.shape[1])]


def _assert_orthonormal(basis, func=None, atol=1e-12):
    G = gram_matrix(basis, func).to_array()
    np.testing.assert_allclose(G, np.eye(len(basis)), atol=atol)


class TestOrthonormalize:

    @pytest.mark.parametrize("method", ['modified', 'classical'])
    def test_householder_example(self, method, householder_example):
        q = orthonormalize(_columns(householder_example), method=method)
        assert len(q) == 3
        np.testing.assert_allclose(q[0].data(), [6 / 7, 3 / 7, -2 / 7], rtol=1e-12)
        _assert_orthonormal(q)

    def test_random_tall_basis(self, rng):
        q = orthonormalize(_columns(rng.standard_normal((10, 4))))
        _assert_orthonormal(q)

    def test_first_vector_only_normalized(self):
        q = orthonormalize([Vector(3, [0.0, 3.0, 4.0])])
        np.testing.assert_allclose(q[0].data(), [0.0, 0.6, 0.8])

    def test_span_preserved(self, rng):
        A = rng.standard_normal((6, 3))
        Q = from_column_vectors(orthonormalize(_columns(A))).to_array()
        # Each input column is reproduced by its projection onto span(Q)
        np.testing.assert_allclose(Q @ (Q.T @ A), A, atol=1e-12)

    def test_accepts_array_like_vectors(self):
        q = orthonormalize([[1.0, 1.0], [1.0, -1.0]])
        np.testing.assert_allclose(q[0].data(), [2 ** -0.5, 2 ** -0.5])
        np.testing.assert_allclose(q[1].data(), [2 ** -0.5, -(2 ** -0.5)])

    def test_integer_input(self):
        q = orthonormalize([Vector(2, [3, 4])])
        assert q[0].dtype == np.float64
        np.testing.assert_allclose(q[0].data(), [0.6, 0.8])

    def test_inputs_unchanged(self):
        basis = [Vector(2, [1.0, 1.0]), Vector(2, [1.0, 0.0])]
        orthonormalize(basis)
        np.testing.assert_array_equal(basis[0].data(), [1.0, 1.0])
        np.testing.assert_array_equal(basis[1].data(), [1.0, 0.0])

    def test_hermitian_basis(self):
        basis = [Vector(2, [1.0, 1j]), Vector(2, [1.0, 1.0])]
        q = orthonormalize(basis, hermitian_product)
        _assert_orthonormal(q, hermitian_product)

    def test_scaled_inner_product(self):
        scaled = lambda x, y: 4.0 * x * y
        q = orthonormalize([Vector(2, [1.0, 1.0]), Vector(2, [1.0, 0.0])], scaled)
        np.testing.assert_allclose(q[0].data(), [2 ** -1.5, 2 ** -1.5])
        _assert_orthonormal(q, scaled)


class TestDependentBasis:

    def test_dependent_vector_raises(self):
        with pytest.raises(DegenerateBasisError) as exc_info:
            orthonormalize([Vector(2, [1.0, 2.0]), Vector(2, [2.0, 4.0])])
        assert exc_info.value.index == 1

    def test_zero_vector_raises(self):
        with pytest.raises(DegenerateBasisError) as exc_info:
            orthonormalize([Vector(2, [0.0, 0.0]), Vector(2, [1.0, 0.0])])
        assert exc_info.value.index == 0

    def test_more_vectors_than_dimension(self, rng):
        with pytest.raises(DegenerateBasisError):
            orthonormalize(_columns(rng.standard_normal((2, 3))))

    def test_skip_policy_warns_and_drops(self):
        basis = [
            Vector(3, [1.0, 0.0, 0.0]),
            Vector(3, [2.0, 0.0, 0.0]),
            Vector(3, [1.0, 1.0, 0.0]),
        ]
        with pytest.warns(RuntimeWarning, match="basis\\[1\\].*skipped"):
            q = orthonormalize(basis, on_dependent='skip')
        assert len(q) == 2
        np.testing.assert_allclose(q[1].data(), [0.0, 1.0, 0.0], atol=1e-15)

    def test_skip_policy_with_nothing_left(self):
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", RuntimeWarning)
            with pytest.raises(DegenerateBasisError, match="no linearly independent"):
                orthonormalize([Vector(2)], on_dependent='skip')

    def test_tolerance_is_relative(self):
        basis = [Vector(2, [1.0, 0.0]), Vector(2, [1.0, 1e-6])]
        assert len(orthonormalize(basis)) == 2
        with pytest.raises(DegenerateBasisError):
            orthonormalize(basis, rtol=1e-3)

    def test_scale_invariant(self):
        basis = [Vector(2, [1e-20, 0.0]), Vector(2, [0.0, 1e-20])]
        assert len(orthonormalize(basis)) == 2

    @pytest.mark.parametrize("scale", [1e-200, 1e200])
    def test_extreme_magnitudes(self, scale):
        basis = [Vector(2, [scale, 0.0]), Vector(2, [scale, scale])]
        q = orthonormalize(basis)
        np.testing.assert_allclose(from_column_vectors(q).to_array(), np.eye(2), atol=1e-15)

    def test_tiny_dependent_vector_still_detected(self):
        basis = [Vector(2, [1e-200, 2e-200]), Vector(2, [2e-200, 4e-200])]
        with pytest.raises(DegenerateBasisError) as exc_info:
            orthonormalize(basis)
        assert exc_info.value.index == 1


class TestValidation:

    def test_empty_basis(self):
        with pytest.raises(ValidationError):
            orthonormalize([])

    def test_unequal_lengths(self):
        with pytest.raises(DimensionError, match="equal length"):
            orthonormalize([Vector(2, 1.0), Vector(3, 1.0)])

    def test_unknown_method(self):
        with pytest.raises(ValueError, match="method"):
            orthonormalize([Vector(2, 1.0)], method='householder')

    def test_non_numeric_rtol(self):
        with pytest.raises(ValidationError, match="rtol"):
            orthonormalize([Vector(2, 1.0)], rtol=None)

    def test_unknown_policy(self):
        with pytest.raises(ValueError, match="on_dependent"):
            orthonormalize([Vector(2, 1.0)], on_dependent='ignore')


class TestNumericalStability:

    def test_modified_beats_classical_on_lauchli_matrix(self):
        eps = 1e-8
        A = np.array([
            [1.0, 1.0, 1.0],
            [eps, 0.0, 0.0],
            [0.0, eps, 0.0],
            [0.0, 0.0, eps],
        ])
        classical = orthonormalize(_columns(A), method='classical')
        modified = orthonormalize(_columns(A), method='modified')

        def overlap(q):
            return abs(float(q[1].data() @ q[2].data()))

        assert overlap(classical) > 0.1
        assert overlap(modified) < 1e-6


class TestCheckOrthonormality:

    def test_orthonormalized_basis(self, householder_example):
        q = orthonormalize(_columns(householder_example))
        assert abs(check_orthonormality(q)) < 1e-12

    def test_non_orthogonal_basis(self):
        basis = [Vector(2, [1.0, 0.0]), Vector(2, [1.0, 1.0]), Vector(2, [2.0, 0.0])]
        assert check_orthonormality(basis) == pytest.approx(3.0)

    def test_single_vector(self):
        assert check_orthonormality([Vector(2, [1.0, 0.0])]) == 0.0
