"""
Tests for backend selection and the Backend protocol.
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.protocols import Backend
from pymatrix.decomposition import get_backend
from pymatrix.decomposition._common import permutation_from_swaps
from pymatrix.decomposition.backends import LapackBackend, NativeBackend


class TestGetBackend:

    def test_auto_is_native(self):
        assert isinstance(get_backend('auto'), NativeBackend)

    def test_native(self):
        assert get_backend('native').name == 'native'

    def test_lapack(self):
        assert isinstance(get_backend('lapack'), LapackBackend)

    def test_unknown(self):
        with pytest.raises(ValidationError):
            get_backend('gpu')

    @pytest.mark.parametrize("backend", [NativeBackend(), LapackBackend()])
    def test_satisfies_protocol(self, backend):
        assert isinstance(backend, Backend)


class TestSubstitution:

    @pytest.mark.parametrize("backend", [NativeBackend(), LapackBackend()])
    def test_multiple_rhs(self, rng, backend):
        A = rng.standard_normal((5, 5)) + 5 * np.eye(5)
        B = rng.standard_normal((5, 3))
        params = backend.lu(A).params
        X = backend.substitute(params, B)
        np.testing.assert_allclose(A @ X, B, atol=1e-10)

    def test_native_and_lapack_agree(self, rng):
        A = rng.standard_normal((6, 6))
        native = NativeBackend().lu(A).params
        lapack = LapackBackend().lu(A).params
        assert native.permutation == lapack.permutation
        assert native.sign == lapack.sign
        np.testing.assert_allclose(native.L, lapack.L, atol=1e-12)
        np.testing.assert_allclose(native.U, lapack.U, atol=1e-12)


class TestPermutationFromSwaps:

    def test_no_swaps(self):
        assert permutation_from_swaps(np.array([0, 1, 2])) == ((0, 1, 2), 0)

    def test_sequential_swaps(self):
        # step 0 swaps rows 0,2; step 1 swaps rows 1,2
        perm, n_swaps = permutation_from_swaps(np.array([2, 2, 2]))
        assert perm == (2, 0, 1)
        assert n_swaps == 2
