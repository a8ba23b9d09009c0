import math
from typing import Tuple


def _check_finite(**values: float) -> Tuple[bool, str]:
    for name, value in values.items():
        if value is None or not math.isfinite(value):
            return False, f"{name} 必须是有限数值"
    return True, ""


def validate_simulation_inputs(
    principal: float,
    interest_rate: float,
    payment: float,
) -> Tuple[bool, str]:
    """校验还款期数模拟输入，返回 (是否合法, 错误信息)"""
    ok, msg = _check_finite(principal=principal, interest_rate=interest_rate, payment=payment)
    if not ok:
        return ok, msg

    if principal <= 0:
        return False, "本金必须大于0"

    if interest_rate < 0:
        return False, "利率不能为负"

    if payment <= 0:
        return False, "每期还款额必须大于0"

    if payment <= principal * interest_rate:
        return False, f"每期还款额必须超过首期利息 {principal * interest_rate:,.2f}"

    return True, ""


def validate_solver_inputs(
    interest_rate: float,
    payment: float,
    num_periods: float,
) -> Tuple[bool, str]:
    """校验本金反推输入"""
    ok, msg = _check_finite(interest_rate=interest_rate, payment=payment, num_periods=num_periods)
    if not ok:
        return ok, msg

    if interest_rate <= 0:
        return False, "利率必须大于0"

    if payment <= 0:
        return False, "每期还款额必须大于0"

    if num_periods <= 0:
        return False, "期数必须大于0"

    return True, ""


def validate_rate_solver_inputs(
    principal: float,
    payment: float,
    num_periods: float,
) -> Tuple[bool, str]:
    """校验利率反推输入"""
    ok, msg = _check_finite(principal=principal, payment=payment, num_periods=num_periods)
    if not ok:
        return ok, msg

    if principal <= 0:
        return False, "本金必须大于0"

    if payment <= 0:
        return False, "每期还款额必须大于0"

    if num_periods <= 0:
        return False, "期数必须大于0"

    if payment * num_periods < principal:
        return False, "零利率下总还款额也不足以还清本金"

    return True, ""
