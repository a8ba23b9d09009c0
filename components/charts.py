"""Plotly 图表工厂"""
from typing import Optional

import plotly.graph_objects as go
import plotly.express as px
import plotly.io as pio
import pandas as pd

from config.settings import COLORS

# 自定义 Plotly 主题
pio.templates["loan_solver_light"] = go.layout.Template(
    layout=go.Layout(
        font=dict(family="sans-serif", color="#333"),
        title_font=dict(size=20, color="#333"),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        xaxis=dict(gridcolor="#e0e0e0", linecolor="#e0e0e0", zerolinecolor="#e0e0e0"),
        yaxis=dict(gridcolor="#e0e0e0", linecolor="#e0e0e0", zerolinecolor="#e0e0e0"),
        legend=dict(bgcolor="rgba(255,255,255,0.5)", bordercolor="#e0e0e0", borderwidth=1),
        colorway=px.colors.qualitative.Plotly,
    )
)

pio.templates.default = "loan_solver_light"


def _get_x_labels(schedule: pd.DataFrame) -> list:
    """横轴标签：「第N期」，有还款日时附加 YYYY-MM"""
    labels = []
    for _, row in schedule.iterrows():
        period = int(row["period"])
        due_date = row.get("due_date")
        if isinstance(due_date, str):
            labels.append(f"第{period}期 {due_date[:7]}")
        else:
            labels.append(f"第{period}期")
    return labels


def create_balance_line(schedule: pd.DataFrame) -> go.Figure:
    """剩余本金折线图"""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=_get_x_labels(schedule),
        y=schedule["remaining_principal"],
        mode="lines",
        name="剩余本金",
        line=dict(color=COLORS["remaining"], width=2),
        fill="tozeroy",
        hovertemplate="%{x}<br>剩余本金: %{y:,.2f}元<extra></extra>",
    ))
    fig.update_layout(
        title="剩余本金",
        xaxis_title="期数",
        yaxis_title="金额(元)",
        hovermode="x unified",
        margin=dict(t=60, b=60, l=60, r=20),
        height=400,
    )
    return fig


def create_payment_breakdown_bar(schedule: pd.DataFrame) -> go.Figure:
    """每期还款的本金/利息堆叠柱状图"""
    x_labels = _get_x_labels(schedule)
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=x_labels, y=schedule["principal"], name="本金",
        marker_color=COLORS["principal"],
    ))
    fig.add_trace(go.Bar(
        x=x_labels, y=schedule["interest"], name="利息",
        marker_color=COLORS["interest"],
    ))
    fig.update_layout(
        title="每期还款构成",
        barmode="stack",
        xaxis_title="期数",
        yaxis_title="金额(元)",
        hovermode="x unified",
        margin=dict(t=60, b=60, l=60, r=20),
        height=400,
    )
    return fig


def create_sensitivity_line(
    sensitivity: pd.DataFrame,
    target_principal: Optional[float] = None,
) -> go.Figure:
    """本金-期数曲线，可标注目标本金"""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=sensitivity["principal"],
        y=sensitivity["number_of_payments"],
        mode="lines+markers",
        name="还款期数",
        line=dict(color=COLORS["primary"], width=2),
        hovertemplate="本金: %{x:,.2f}<br>期数: %{y:.2f}<extra></extra>",
    ))
    if target_principal is not None:
        fig.add_vline(x=target_principal, line_dash="dash", line_color=COLORS["danger"])
    fig.update_layout(
        title="本金与还款期数",
        xaxis_title="本金(元)",
        yaxis_title="期数",
        margin=dict(t=60, b=60, l=60, r=20),
        height=400,
    )
    return fig
