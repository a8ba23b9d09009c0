import math


def fmt_amount(value: float, unit: str = "元") -> str:
    """格式化金额：1234567.89 -> 1,234,567.89 元"""
    return f"{value:,.2f} {unit}"


def fmt_rate(value: float) -> str:
    """格式化每期利率：0.005 -> 0.5000%"""
    return f"{value * 100:.4f}%"


def fmt_periods(periods: float) -> str:
    """格式化非整数期数：35.2967 -> 35.30期（约 35 个整期 + 0.30 期）"""
    if not math.isfinite(periods):
        return "—"
    whole = math.floor(periods)
    frac = periods - whole
    if frac < 1e-9:
        return f"{whole}期"
    return f"{periods:.2f}期（{whole}个整期 + {frac:.2f}期）"
