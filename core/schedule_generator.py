"""
还款计划生成器

按与 calc_number_of_payments 相同的逐期模拟生成摊还表，最后一期只还剩余欠款，
period_fraction 列之和即为模拟得到的（非整数）还款期数。
"""
from datetime import date
from typing import Dict, Optional

import pandas as pd

from config.constants import AMORTIZATION_SCHEDULE_COLUMNS
from config.settings import AMOUNT_PRECISION, MAX_SIMULATION_PERIODS
from core.calculator import calc_number_of_payments
from utils.date_utils import get_due_date


def generate_amortization_schedule(
    principal: float,
    interest_rate: float,
    payment: float,
    start_date: Optional[date] = None,
    repayment_day: int = 1,
    max_periods: int = MAX_SIMULATION_PERIODS,
) -> pd.DataFrame:
    """生成摊还表；start_date 为空时不填还款日"""
    # 先做完整模拟：校验参数并保证不会超过期数上限
    calc_number_of_payments(principal, interest_rate, payment, max_periods)

    records = []
    remaining = principal
    cum_principal = 0.0
    cum_interest = 0.0
    period = 0

    while remaining > 0:
        period += 1
        interest = remaining * interest_rate
        after = remaining + (remaining * interest_rate - payment)

        if after > 0:
            paid = payment
            prin = payment - interest
            fraction = 1.0
        else:
            # 最后一期：只还本息余额
            paid = payment + after
            prin = remaining
            fraction = 1 + after / payment
            after = 0.0

        remaining = after
        cum_principal += prin
        cum_interest += interest

        due = get_due_date(start_date, period, repayment_day) if start_date else None
        records.append({
            "period": period,
            "due_date": due.strftime("%Y-%m-%d") if due else None,
            "payment": paid,
            "interest": interest,
            "principal": prin,
            "remaining_principal": remaining,
            "cumulative_principal": cum_principal,
            "cumulative_interest": cum_interest,
            "period_fraction": fraction,
        })

    return pd.DataFrame(records, columns=AMORTIZATION_SCHEDULE_COLUMNS)


def summarize_schedule(schedule: pd.DataFrame) -> Dict[str, float]:
    """摊还表汇总：总还款、总利息、期数"""
    if schedule.empty:
        return {
            "total_payment": 0.0,
            "total_interest": 0.0,
            "total_principal": 0.0,
            "number_of_payments": 0.0,
            "last_payment": 0.0,
        }
    return {
        "total_payment": round(float(schedule["payment"].sum()), AMOUNT_PRECISION),
        "total_interest": round(float(schedule["interest"].sum()), AMOUNT_PRECISION),
        "total_principal": round(float(schedule["principal"].sum()), AMOUNT_PRECISION),
        "number_of_payments": float(schedule["period_fraction"].sum()),
        "last_payment": round(float(schedule.iloc[-1]["payment"]), AMOUNT_PRECISION),
    }
