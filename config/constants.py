from enum import Enum


class ErrorKind(str, Enum):
    INVALID_PARAMETERS = "invalid_parameters"
    INVALID_PAYMENT = "invalid_payment"
    DID_NOT_CONVERGE = "did_not_converge"
    NO_SOLUTION = "no_solution"

    @property
    def label(self) -> str:
        return {
            "invalid_parameters": "参数无效",
            "invalid_payment": "还款额不足",
            "did_not_converge": "未收敛",
            "no_solution": "无解",
        }[self.value]


class SolveTarget(str, Enum):
    PRINCIPAL = "principal"
    PERIODS = "periods"
    RATE = "rate"

    @property
    def label(self) -> str:
        return {
            "principal": "反推本金",
            "periods": "还款期数",
            "rate": "反推利率",
        }[self.value]


# 列定义
AMORTIZATION_SCHEDULE_COLUMNS = [
    "period", "due_date", "payment", "interest", "principal",
    "remaining_principal", "cumulative_principal", "cumulative_interest",
    "period_fraction",
]

SENSITIVITY_COLUMNS = ["principal", "number_of_payments"]
