"""指标卡片组件"""
import streamlit as st

from utils.formatters import fmt_amount, fmt_periods, fmt_rate


def render_solution_metrics(
    principal: float,
    interest_rate: float,
    payment: float,
    schedule_stats: dict,
):
    """渲染求解结果指标卡片"""
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("本金", fmt_amount(principal))
    with c2:
        st.metric("每期利率", fmt_rate(interest_rate))
    with c3:
        st.metric("每期还款", fmt_amount(payment))
    with c4:
        st.metric("还款期数", fmt_periods(schedule_stats.get("number_of_payments", 0)))

    c5, c6, c7 = st.columns(3)
    with c5:
        st.metric("总还款额", fmt_amount(schedule_stats.get("total_payment", 0)))
    with c6:
        st.metric("总利息", fmt_amount(schedule_stats.get("total_interest", 0)))
    with c7:
        st.metric("末期还款", fmt_amount(schedule_stats.get("last_payment", 0)))
