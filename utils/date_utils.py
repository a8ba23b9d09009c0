import calendar
from datetime import date

from dateutil.relativedelta import relativedelta


def get_due_date(start_date: date, period: int, repayment_day: int = 1) -> date:
    """计算第 period 期的还款日（每期按一个月计）"""
    target = start_date + relativedelta(months=period)
    # 还款日不超过当月最大天数
    max_day = calendar.monthrange(target.year, target.month)[1]
    return target.replace(day=min(repayment_day, max_day))
