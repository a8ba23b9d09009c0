"""摊还计算错误类型"""
from config.constants import ErrorKind


class AmortizationError(ValueError):
    """所有计算错误的基类，kind 用于区分错误类别"""

    kind = ErrorKind.INVALID_PARAMETERS

    def __str__(self) -> str:
        message = super().__str__()
        return f"[{self.kind.label}] {message}" if message else self.kind.label


class InvalidLoanParameters(AmortizationError):
    kind = ErrorKind.INVALID_PARAMETERS


class InvalidPayment(AmortizationError):
    """还款额未超过首期利息，余额不会下降"""

    kind = ErrorKind.INVALID_PAYMENT


class DidNotConverge(AmortizationError):
    """超过迭代上限"""

    kind = ErrorKind.DID_NOT_CONVERGE


class NoSolution(AmortizationError):
    """求解器找不到满足容差的解"""

    kind = ErrorKind.NO_SOLUTION
