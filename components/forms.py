"""表单组件"""
import streamlit as st

from config.constants import SolveTarget
from config.settings import DEFAULT_INTEREST_RATE, DEFAULT_NUM_PERIODS, DEFAULT_PAYMENT


def render_loan_inputs_form(target: SolveTarget, key_prefix: str = "main") -> dict | None:
    """渲染输入表单，返回表单数据 dict 或 None（未提交）

    表单只包含求解 target 所需的字段：
    反推本金需要利率/还款额/期数，还款期数需要本金/利率/还款额，反推利率需要本金/还款额/期数。
    """
    st.subheader(target.label)
    data = {}

    with st.form(f"{key_prefix}_{target.value}_form"):
        c1, c2, c3 = st.columns(3)
        if target != SolveTarget.PRINCIPAL:
            with c1:
                data["principal"] = st.number_input(
                    "本金(元)", min_value=0.01, value=10000.0, step=1000.0,
                    key=f"{key_prefix}_principal",
                )
        if target != SolveTarget.RATE:
            with c2:
                rate_pct = st.number_input(
                    "每期利率(%)", min_value=0.0001, value=DEFAULT_INTEREST_RATE * 100,
                    step=0.05, format="%.4f", key=f"{key_prefix}_rate",
                )
                data["interest_rate"] = rate_pct / 100
        with c3:
            data["payment"] = st.number_input(
                "每期还款(元)", min_value=0.01, value=DEFAULT_PAYMENT, step=50.0,
                key=f"{key_prefix}_payment",
            )
        if target != SolveTarget.PERIODS:
            data["num_periods"] = st.number_input(
                "目标期数", min_value=0.01, value=DEFAULT_NUM_PERIODS, step=1.0,
                key=f"{key_prefix}_periods",
            )
        start_date = st.date_input("首期起始日（可选）", value=None, key=f"{key_prefix}_start")
        submitted = st.form_submit_button("计算", type="primary")

    if not submitted:
        return None
    data["start_date"] = start_date
    return data
