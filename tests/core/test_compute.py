"""
Tests for timing and tolerance utilities.
"""

import pytest

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import (
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    EPSILON_64,
    pivot_tolerance,
    rank_tolerance,
    select_tolerance,
)


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('factorization'):
            pass
        with timer.section('factorization'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'factorization'}
        assert result['total_seconds'] >= 0.0

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()


class TestTolerances:

    def test_select_tolerance(self):
        assert select_tolerance() is CPU_FP64
        assert select_tolerance(is_ill_conditioned=True) is CPU_FP64_ILL_CONDITIONED

    def test_pivot_tolerance_scales(self):
        assert pivot_tolerance(4, 10.0) == pytest.approx(40.0 * EPSILON_64)
        assert pivot_tolerance(4, 0.0) == 0.0

    def test_rank_tolerance_uses_larger_dimension(self):
        assert rank_tolerance((3, 7), 2.0) == pytest.approx(14.0 * EPSILON_64)
