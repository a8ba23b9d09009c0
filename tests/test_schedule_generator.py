"""摊还表测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from datetime import date
import pytest
from core.calculator import calc_number_of_payments
from core.errors import DidNotConverge, InvalidPayment
from core.schedule_generator import generate_amortization_schedule, summarize_schedule
from config.constants import AMORTIZATION_SCHEDULE_COLUMNS


class TestScheduleGeneration:
    """摊还表生成测试"""

    def test_matches_simulation(self):
        """期数占比之和等于模拟期数"""
        sch = generate_amortization_schedule(10000, 0.005, 300)
        assert list(sch.columns) == AMORTIZATION_SCHEDULE_COLUMNS
        assert len(sch) == 37
        n = calc_number_of_payments(10000, 0.005, 300)
        assert sch["period_fraction"].sum() == pytest.approx(n, abs=1e-9)

    def test_paid_off(self):
        sch = generate_amortization_schedule(10000, 0.005, 300)
        assert sch.iloc[-1]["remaining_principal"] == 0.0
        assert sch.iloc[-1]["cumulative_principal"] == pytest.approx(10000)
        # 除最后一期外每期还款相同
        assert (sch["payment"].iloc[:-1] == 300).all()
        assert 0 < sch.iloc[-1]["payment"] < 300

    def test_last_payment_matches_fraction(self):
        sch = generate_amortization_schedule(10000, 0.005, 300)
        last = sch.iloc[-1]
        assert last["payment"] == pytest.approx(300 * last["period_fraction"])

    def test_no_due_dates_without_start(self):
        sch = generate_amortization_schedule(1000, 0.01, 100)
        assert sch["due_date"].isna().all()

    def test_due_dates(self):
        """还款日不超过当月天数"""
        sch = generate_amortization_schedule(1000, 0.01, 100, date(2024, 1, 31), repayment_day=31)
        assert sch.iloc[0]["due_date"] == "2024-02-29"
        assert sch.iloc[1]["due_date"] == "2024-03-31"

    def test_invalid_payment(self):
        with pytest.raises(InvalidPayment):
            generate_amortization_schedule(1000, 0.01, 10)

    def test_iteration_ceiling(self):
        with pytest.raises(DidNotConverge):
            generate_amortization_schedule(1000, 0.01, 10.5, max_periods=10)


class TestSummary:
    def test_totals(self):
        sch = generate_amortization_schedule(10000, 0.005, 300)
        stats = summarize_schedule(sch)
        assert stats["total_principal"] == pytest.approx(10000, abs=0.01)
        assert stats["total_payment"] == pytest.approx(
            stats["total_principal"] + stats["total_interest"], abs=0.02
        )
        assert stats["number_of_payments"] == pytest.approx(36.556, abs=0.01)

    def test_empty(self):
        sch = generate_amortization_schedule(1000, 0.01, 100).iloc[0:0]
        assert summarize_schedule(sch)["total_payment"] == 0.0
