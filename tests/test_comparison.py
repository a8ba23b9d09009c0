"""对比计算测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
import pytest
from core.comparison import (
    annuity_present_value,
    compare_with_annuity,
    principal_grid,
    principal_sensitivity,
)
from core.errors import NoSolution


class TestSensitivity:
    """本金敏感度测试"""

    def test_monotonic(self):
        grid = principal_grid(0.005, 300, 40)
        table = principal_sensitivity(0.005, 300, grid)
        periods = table["number_of_payments"].to_numpy()
        assert not np.isnan(periods).any()
        assert (np.diff(periods) >= 0).all()

    def test_invalid_principal_is_nan(self):
        table = principal_sensitivity(0.01, 300, [5000, 20000, 40000])
        assert not np.isnan(table.iloc[0]["number_of_payments"])
        assert not np.isnan(table.iloc[1]["number_of_payments"])
        assert np.isnan(table.iloc[2]["number_of_payments"])

    def test_grid_bounds(self):
        grid = principal_grid(0.01, 100, 10)
        assert len(grid) == 10
        assert grid[0] == pytest.approx(100 / 1.01)
        assert grid[-1] < 100 / 0.01


class TestAnnuity:
    """年金公式对照测试"""

    def test_zero_rate(self):
        assert annuity_present_value(0, 100, 12) == 1200.0

    def test_matches_bisection_for_whole_periods(self):
        result = compare_with_annuity(0.005, 300, 36)
        assert result["relative_difference"] < 1e-5

    def test_no_solution_propagates(self):
        with pytest.raises(NoSolution):
            compare_with_annuity(0.005, 1500, 360)


class TestSensitivityInvalidPrincipal:
    def test_non_positive_principal_is_nan(self):
        """本金非正不中断整组计算"""
        table = principal_sensitivity(0.01, 300, [0, -100, 5000])
        assert np.isnan(table.iloc[0]["number_of_payments"])
        assert np.isnan(table.iloc[1]["number_of_payments"])
        assert not np.isnan(table.iloc[2]["number_of_payments"])
