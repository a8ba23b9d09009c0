"""本金敏感度"""
import streamlit as st

from components.charts import create_sensitivity_line
from components.forms import render_loan_inputs_form
from config.constants import SolveTarget
from core.comparison import compare_with_annuity, principal_grid, principal_sensitivity
from core.errors import AmortizationError
from data_manager.data_validator import validate_solver_inputs
from utils.formatters import fmt_amount

st.set_page_config(page_title="本金敏感度", page_icon="📈", layout="wide")
st.title("📈 本金敏感度")
st.caption("固定利率和还款额时，还款期数随本金单调不减；本金接近 还款额/利率 时期数发散。")

form = render_loan_inputs_form(SolveTarget.PRINCIPAL, key_prefix="sensitivity")
if form is None:
    st.stop()

ok, msg = validate_solver_inputs(form["interest_rate"], form["payment"], form["num_periods"])
if not ok:
    st.error(msg)
    st.stop()

points = st.slider("网格点数", min_value=10, max_value=200, value=50)
grid = principal_grid(form["interest_rate"], form["payment"], points)
sensitivity = principal_sensitivity(form["interest_rate"], form["payment"], grid)

try:
    comparison = compare_with_annuity(form["interest_rate"], form["payment"], form["num_periods"])
except AmortizationError as exc:
    st.error(str(exc))
    comparison = None

if comparison:
    c1, c2, c3 = st.columns(3)
    c1.metric("二分法本金", fmt_amount(comparison["bisection_principal"]))
    c2.metric("年金公式本金", fmt_amount(comparison["annuity_principal"]))
    c3.metric("差额", fmt_amount(comparison["difference"]))

st.plotly_chart(
    create_sensitivity_line(
        sensitivity,
        comparison["bisection_principal"] if comparison else None,
    ),
    width='stretch',
)
st.dataframe(sensitivity, width='stretch')
