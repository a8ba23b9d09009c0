"""核心计算：还款期数模拟、本金反推（二分法）、利率反推"""
import logging
import math

from scipy import optimize

from config.settings import (
    MAX_BISECTION_ITERATIONS,
    MAX_SIMULATION_PERIODS,
    RATE_BRACKET_MARGIN,
    SOLVER_TOLERANCE,
    UPPER_BOUND_RATIO,
)
from core.errors import (
    DidNotConverge,
    InvalidLoanParameters,
    InvalidPayment,
    NoSolution,
)

logger = logging.getLogger(__name__)


def _all_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def calc_number_of_payments(
    principal: float,
    interest_rate: float,
    payment: float,
    max_periods: int = MAX_SIMULATION_PERIODS,
) -> float:
    """逐期模拟还款，返回还清本金所需的期数。

    最后一期通常不足一整期，按剩余比例折算，因此返回非整数，
    使反推本金时目标函数连续。

    Args:
        principal: 贷款本金
        interest_rate: 每期利率（0.01 = 1%）
        payment: 每期还款额
        max_periods: 模拟期数上限，超过则抛出 DidNotConverge
    """
    if not _all_finite(principal, interest_rate, payment):
        raise InvalidLoanParameters("本金、利率、还款额必须是有限数值")
    if principal <= 0:
        raise InvalidLoanParameters(f"本金必须大于0: {principal}")
    if interest_rate < 0:
        raise InvalidLoanParameters(f"利率不能为负: {interest_rate}")
    if payment <= 0 or payment <= principal * interest_rate:
        raise InvalidPayment(
            f"还款额 {payment} 必须超过首期利息 {principal * interest_rate}"
        )

    number_of_payments = 0.0
    remaining_principal = principal
    while remaining_principal > 0:
        if number_of_payments >= max_periods:
            raise DidNotConverge(f"模拟超过 {max_periods} 期仍未还清")
        remaining_principal += remaining_principal * interest_rate - payment
        number_of_payments += 1

    # 最后一期多还的部分折算为负的零头期数
    number_of_payments += remaining_principal / payment
    return number_of_payments


def _periods_for_principal(principal: float, interest_rate: float, payment: float) -> float:
    """求解器内部调用：模拟失败即终止搜索"""
    try:
        return calc_number_of_payments(principal, interest_rate, payment)
    except (InvalidLoanParameters, InvalidPayment, DidNotConverge) as exc:
        raise NoSolution(f"本金 {principal} 处模拟失败: {exc}") from exc


def solve_for_principal(
    interest_rate: float,
    payment: float,
    num_periods: float,
    tolerance: float = SOLVER_TOLERANCE,
    max_iterations: int = MAX_BISECTION_ITERATIONS,
) -> float:
    """二分法反推本金：给定每期利率、每期还款额，求恰好 num_periods 期还清的本金。

    收敛判据是期数误差 |n - num_periods| <= tolerance，不是本金误差。
    """
    if not _all_finite(interest_rate, payment, num_periods):
        raise NoSolution("利率、还款额、期数必须是有限数值")
    if interest_rate <= 0 or payment <= 0 or num_periods <= 0:
        raise NoSolution(
            f"利率、还款额、期数必须大于0: rate={interest_rate}, "
            f"payment={payment}, periods={num_periods}"
        )

    # 下界：一期恰好还清的本金；上界：不计利息的总还款额与渐近线保护取小
    lo = payment / (1 + interest_rate)
    hi = min(payment * num_periods, UPPER_BOUND_RATIO * payment / interest_rate)
    if hi < lo:
        raise NoSolution(f"搜索区间为空: lo={lo}, hi={hi}")

    n_lo = _periods_for_principal(lo, interest_rate, payment)
    n_hi = _periods_for_principal(hi, interest_rate, payment)
    if not n_lo - tolerance <= num_periods <= n_hi + tolerance:
        raise NoSolution(
            f"目标期数 {num_periods} 不在搜索区间对应的期数范围 "
            f"[{n_lo:.6f}, {n_hi:.6f}] 内"
        )

    for iteration in range(1, max_iterations + 1):
        principal = (lo + hi) / 2
        n = _periods_for_principal(principal, interest_rate, payment)
        if abs(n - num_periods) <= tolerance:
            logger.debug(
                "solve_for_principal converged after %d iterations: principal=%r n=%r",
                iteration, principal, n,
            )
            return principal
        if n < num_periods:
            # 还得太快，真实本金更大
            lo = principal
        else:
            hi = principal

    raise NoSolution(
        f"二分搜索 {max_iterations} 次后仍未满足容差 {tolerance}"
    ) from DidNotConverge(f"最后区间 [{lo!r}, {hi!r}]")


def solve_for_rate(
    principal: float,
    payment: float,
    num_periods: float,
    tolerance: float = SOLVER_TOLERANCE,
    max_periods: int = MAX_SIMULATION_PERIODS,
) -> float:
    """用 brentq 反推每期利率：使 principal 恰好在 num_periods 期内还清"""
    if not _all_finite(principal, payment, num_periods):
        raise NoSolution("本金、还款额、期数必须是有限数值")
    if principal <= 0 or payment <= 0 or num_periods <= 0:
        raise NoSolution(
            f"本金、还款额、期数必须大于0: principal={principal}, "
            f"payment={payment}, periods={num_periods}"
        )
    if num_periods >= max_periods:
        raise NoSolution(f"目标期数 {num_periods} 超过模拟上限 {max_periods}")

    # 利率不能达到 payment / principal，否则首期利息吃掉全部还款
    hi = payment / principal * (1 - RATE_BRACKET_MARGIN)

    def objective(rate: float) -> float:
        try:
            return calc_number_of_payments(principal, rate, payment, max_periods) - num_periods
        except DidNotConverge:
            # 超过模拟上限时期数必然大于目标，只保留符号
            return float(max_periods) - num_periods

    try:
        f_zero = objective(0.0)
        if abs(f_zero) <= tolerance:
            return 0.0
        if f_zero > 0:
            raise NoSolution(f"零利率下 {num_periods} 期也无法还清本金 {principal}")
        rate = optimize.brentq(objective, 0.0, hi, xtol=1e-18)
        residual = objective(rate)
    except NoSolution:
        raise
    except (ValueError, RuntimeError) as exc:
        raise NoSolution(f"利率反推失败: {exc}") from exc

    if abs(residual) > tolerance:
        raise NoSolution(f"利率反推误差 {residual} 超过容差 {tolerance}")
    logger.debug("solve_for_rate: rate=%r residual=%r", rate, residual)
    return rate
