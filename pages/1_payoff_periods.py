"""还款期数"""
import streamlit as st

from components.charts import create_balance_line
from components.forms import render_loan_inputs_form
from components.metrics import render_solution_metrics
from components.tables import render_schedule_table
from config.constants import SolveTarget
from core.errors import AmortizationError
from core.schedule_generator import generate_amortization_schedule, summarize_schedule
from data_manager.data_validator import validate_simulation_inputs

st.set_page_config(page_title="还款期数", page_icon="📅", layout="wide")
st.title("📅 还款期数")

form = render_loan_inputs_form(SolveTarget.PERIODS, key_prefix="periods")
if form is None:
    st.stop()

ok, msg = validate_simulation_inputs(form["principal"], form["interest_rate"], form["payment"])
if not ok:
    st.error(msg)
    st.stop()

try:
    schedule = generate_amortization_schedule(
        form["principal"], form["interest_rate"], form["payment"], form["start_date"],
    )
except AmortizationError as exc:
    st.error(str(exc))
    st.stop()

render_solution_metrics(form["principal"], form["interest_rate"], form["payment"], summarize_schedule(schedule))
st.plotly_chart(create_balance_line(schedule), width='stretch')
render_schedule_table(schedule)
