"""贷款本金反推 - 主入口"""
import streamlit as st

from components.charts import create_balance_line, create_payment_breakdown_bar
from components.forms import render_loan_inputs_form
from components.metrics import render_solution_metrics
from components.tables import render_schedule_table
from config.constants import SolveTarget
from config.settings import PAGE_TITLE, PAGE_ICON, LAYOUT
from core.calculator import solve_for_principal
from core.errors import AmortizationError
from core.schedule_generator import generate_amortization_schedule, summarize_schedule
from data_manager.data_validator import validate_solver_inputs

st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout=LAYOUT,
    initial_sidebar_state="expanded",
)

st.title(f"{PAGE_ICON} {PAGE_TITLE}")
st.markdown("给定每期利率、每期还款额和目标期数，用二分法反推恰好在该期数内还清的贷款本金。")

form = render_loan_inputs_form(SolveTarget.PRINCIPAL)
if form is None:
    st.stop()

ok, msg = validate_solver_inputs(form["interest_rate"], form["payment"], form["num_periods"])
if not ok:
    st.error(msg)
    st.stop()

try:
    principal = solve_for_principal(form["interest_rate"], form["payment"], form["num_periods"])
    schedule = generate_amortization_schedule(
        principal, form["interest_rate"], form["payment"], form["start_date"],
    )
except AmortizationError as exc:
    st.error(str(exc))
    st.stop()

render_solution_metrics(principal, form["interest_rate"], form["payment"], summarize_schedule(schedule))

tab1, tab2, tab3 = st.tabs(["剩余本金", "还款构成", "摊还表"])
with tab1:
    st.plotly_chart(create_balance_line(schedule), width='stretch')
with tab2:
    st.plotly_chart(create_payment_breakdown_bar(schedule), width='stretch')
with tab3:
    render_schedule_table(schedule)

with st.sidebar:
    st.markdown("### 关于")
    st.markdown("收敛判据为期数误差 ≤ 1e-5，本金精度取决于期数对本金的敏感度。")
