"""反推利率"""
import streamlit as st

from components.forms import render_loan_inputs_form
from config.constants import SolveTarget
from core.calculator import solve_for_rate
from core.errors import AmortizationError
from data_manager.data_validator import validate_rate_solver_inputs
from utils.formatters import fmt_rate

st.set_page_config(page_title="反推利率", page_icon="🔍", layout="wide")
st.title("🔍 反推利率")

form = render_loan_inputs_form(SolveTarget.RATE, key_prefix="rate")
if form is None:
    st.stop()

ok, msg = validate_rate_solver_inputs(form["principal"], form["payment"], form["num_periods"])
if not ok:
    st.error(msg)
    st.stop()

try:
    rate = solve_for_rate(form["principal"], form["payment"], form["num_periods"])
except AmortizationError as exc:
    st.error(str(exc))
    st.stop()

c1, c2 = st.columns(2)
c1.metric("每期利率", fmt_rate(rate))
c2.metric("年化（按12期/年复利）", fmt_rate((1 + rate) ** 12 - 1))
