"""
Tests for inverse().
"""

import numpy as np
import pytest

from pymatrix import Matrix, identity, inverse, multiply
from pymatrix.core.exceptions import DimensionMismatchError, SingularMatrixError


BACKENDS = ['native', 'lapack']


class TestInverse:

    @pytest.mark.parametrize("backend", BACKENDS)
    def test_both_sides_identity(self, well_conditioned, backend):
        inv = inverse(well_conditioned, backend=backend)
        n = well_conditioned.rows
        assert multiply(well_conditioned, inv).allclose(identity(n))
        assert multiply(inv, well_conditioned).allclose(identity(n))

    def test_known_2x2(self, pivot_example):
        # inv([[4, 3], [6, 3]]) = 1/-6 * [[3, -3], [-6, 4]]
        expected = np.array([[-0.5, 0.5], [1.0, -2.0 / 3.0]])
        np.testing.assert_allclose(inverse(pivot_example).to_array(), expected, atol=1e-12)

    def test_identity(self):
        assert inverse(identity(4)) == identity(4)

    def test_one_by_one(self):
        assert inverse(Matrix([[4.0]])).to_list() == [[0.25]]

    def test_double_inverse(self, well_conditioned):
        assert inverse(inverse(well_conditioned)).allclose(well_conditioned, rtol=1e-9)

    def test_matches_numpy(self, rng):
        A = rng.standard_normal((6, 6))
        np.testing.assert_allclose(inverse(Matrix(A)).to_array(), np.linalg.inv(A), rtol=1e-8, atol=1e-10)


class TestInverseFailures:

    @pytest.mark.parametrize("backend", BACKENDS)
    def test_singular(self, singular_2x2, backend):
        with pytest.raises(SingularMatrixError):
            inverse(singular_2x2, backend=backend)

    def test_non_square(self):
        with pytest.raises(DimensionMismatchError):
            inverse(Matrix(np.ones((3, 2))))
