"""对比计算：本金敏感度、与年金公式对照"""
from typing import Dict, Iterable

import numpy as np
import pandas as pd

from config.constants import SENSITIVITY_COLUMNS
from core.calculator import calc_number_of_payments, solve_for_principal
from core.errors import AmortizationError


def principal_sensitivity(
    interest_rate: float,
    payment: float,
    principals: Iterable[float],
) -> pd.DataFrame:
    """
    计算一组本金各自的还款期数。
    模拟失败的本金（本金非正、还款额不足、超过期数上限）记为 NaN，不中断整组计算。
    """
    values = np.asarray(list(principals), dtype=float)
    periods = np.full(values.shape, np.nan)
    for i, p in enumerate(values):
        try:
            periods[i] = calc_number_of_payments(p, interest_rate, payment)
        except AmortizationError:
            continue

    return pd.DataFrame(
        {"principal": values, "number_of_payments": periods},
        columns=SENSITIVITY_COLUMNS,
    )


def principal_grid(interest_rate: float, payment: float, points: int = 50) -> np.ndarray:
    """本金网格：从一期还清的本金到 payment / rate 渐近线之前"""
    lo = payment / (1 + interest_rate)
    hi = 0.99 * payment / interest_rate
    return np.linspace(lo, hi, points)


def annuity_present_value(interest_rate: float, payment: float, num_periods: float) -> float:
    """年金现值公式，仅用于对照：PV = PMT * (1 - (1+r)^-n) / r"""
    if interest_rate == 0:
        return float(payment * num_periods)
    return float(payment * (1 - np.power(1 + interest_rate, -num_periods)) / interest_rate)


def compare_with_annuity(
    interest_rate: float,
    payment: float,
    num_periods: float,
) -> Dict[str, float]:
    """对比二分法反推的本金与年金现值公式"""
    solved = solve_for_principal(interest_rate, payment, num_periods)
    closed_form = annuity_present_value(interest_rate, payment, num_periods)
    diff = solved - closed_form
    return {
        "bisection_principal": round(solved, 6),
        "annuity_principal": round(closed_form, 6),
        "difference": round(diff, 6),
        "relative_difference": abs(diff) / closed_form,
    }
