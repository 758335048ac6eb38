"""
Tests for qr_decompose().

Validates:
    - A = Q R, Q'Q = I, R upper-triangular with non-negative diagonal
    - reduced and complete modes
    - Rank-deficient input fails
    - Wide input warns
"""

import numpy as np
import pytest

from pymatrix import Matrix, identity, multiply, qr_decompose, transposed
from pymatrix.core.exceptions import SingularMatrixError, ValidationError


BACKENDS = ['native', 'lapack']


class TestQRProperties:

    @pytest.mark.parametrize("backend", BACKENDS)
    def test_reconstruction(self, tall_full_rank, backend):
        Q, R = qr_decompose(tall_full_rank, backend=backend)
        assert multiply(Q, R).allclose(tall_full_rank)

    @pytest.mark.parametrize("backend", BACKENDS)
    def test_orthonormal_columns(self, tall_full_rank, backend):
        Q, _ = qr_decompose(tall_full_rank, backend=backend)
        assert multiply(transposed(Q), Q).allclose(identity(tall_full_rank.cols))

    def test_reduced_shapes(self, tall_full_rank):
        Q, R = qr_decompose(tall_full_rank)
        assert Q.shape == (7, 4)
        assert R.shape == (4, 4)

    @pytest.mark.parametrize("backend", BACKENDS)
    def test_complete_shapes(self, tall_full_rank, backend):
        Q, R = qr_decompose(tall_full_rank, mode='complete', backend=backend)
        assert Q.shape == (7, 7)
        assert R.shape == (7, 4)
        assert multiply(transposed(Q), Q).allclose(identity(7))
        assert multiply(Q, R).allclose(tall_full_rank)
        np.testing.assert_array_equal(R.to_array()[4:, :], 0.0)

    def test_upper_triangular_nonnegative_diagonal(self, tall_full_rank):
        _, R = qr_decompose(tall_full_rank)
        R_arr = R.to_array()
        np.testing.assert_array_equal(np.tril(R_arr, k=-1), 0.0)
        assert np.all(np.diag(R_arr) > 0.0)

    def test_backends_agree(self, tall_full_rank):
        native = qr_decompose(tall_full_rank, backend='native')
        lapack = qr_decompose(tall_full_rank, backend='lapack')
        assert native.Q.allclose(lapack.Q)
        assert native.R.allclose(lapack.R)

    def test_square(self, well_conditioned):
        Q, R = qr_decompose(well_conditioned)
        assert multiply(Q, R).allclose(well_conditioned)

    def test_known_values(self):
        A = Matrix([[3.0, 0.0], [4.0, 5.0]])
        Q, R = qr_decompose(A)
        np.testing.assert_allclose(Q.to_array(), [[0.6, -0.8], [0.8, 0.6]], atol=1e-12)
        np.testing.assert_allclose(R.to_array(), [[5.0, 4.0], [0.0, 3.0]], atol=1e-12)

    def test_single_column(self):
        Q, R = qr_decompose(Matrix([[0.0], [-3.0], [4.0]]))
        np.testing.assert_allclose(Q.to_array(), [[0.0], [-0.6], [0.8]], atol=1e-12)
        np.testing.assert_allclose(R.to_array(), [[5.0]])

    def test_input_not_mutated(self, tall_full_rank):
        before = tall_full_rank.to_array()
        qr_decompose(tall_full_rank)
        np.testing.assert_array_equal(tall_full_rank.to_array(), before)


class TestQRFailures:

    @pytest.mark.parametrize("backend", BACKENDS)
    def test_dependent_columns(self, rng, backend):
        x = rng.standard_normal(6)
        y = rng.standard_normal(6)
        A = Matrix(np.column_stack([x, y, x + y]))
        with pytest.raises(SingularMatrixError) as exc_info:
            qr_decompose(A, backend=backend)
        assert exc_info.value.rank == 2
        assert exc_info.value.expected_rank == 3

    def test_zero_column(self):
        A = Matrix([[1.0, 0.0], [2.0, 0.0], [3.0, 0.0]])
        with pytest.raises(SingularMatrixError):
            qr_decompose(A)

    def test_zero_matrix(self):
        with pytest.raises(SingularMatrixError):
            qr_decompose(Matrix(np.zeros((3, 2))))

    def test_unknown_mode(self, tall_full_rank):
        with pytest.raises(ValidationError, match="mode"):
            qr_decompose(tall_full_rank, mode='economic')


class TestQRWide:

    def test_wide_warns_and_reconstructs(self):
        A = Matrix([[1.0, 2.0, 3.0], [4.0, 5.0, 7.0]])
        with pytest.warns(UserWarning, match="wide"):
            solution = qr_decompose(A)
        Q, R = solution
        assert Q.shape == (2, 2)
        assert R.shape == (2, 3)
        assert multiply(Q, R).allclose(A)
        assert any("wide" in w for w in solution.warnings)
        assert "Warning:" in solution.summary()


class TestQRSolution:

    def test_metadata(self, tall_full_rank):
        qr = qr_decompose(tall_full_rank)
        assert qr.rank == 4
        assert qr.info['method'] == 'householder'
        assert qr.info['mode'] == 'reduced'
        assert qr.backend_name == 'native'
        assert 'householder' in qr.timing

    def test_summary(self, tall_full_rank):
        s = qr_decompose(tall_full_rank).summary()
        assert "QR Decomposition" in s
        assert "Q: 7x4" in s
        assert "Rank: 4" in s
