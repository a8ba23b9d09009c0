"""格式化测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from utils.formatters import fmt_amount, fmt_periods, fmt_rate


def test_fmt_amount():
    assert fmt_amount(1234.5) == "1,234.50 元"


def test_fmt_rate():
    assert fmt_rate(0.005) == "0.5000%"


def test_fmt_periods_whole():
    assert fmt_periods(36.0) == "36期"


def test_fmt_periods_fractional():
    assert fmt_periods(36.556) == "36.56期（36个整期 + 0.56期）"


def test_fmt_periods_nan():
    assert fmt_periods(float("nan")) == "—"
