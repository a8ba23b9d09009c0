"""格式化表格组件"""
import pandas as pd
import streamlit as st


def render_schedule_table(schedule: pd.DataFrame, show_all: bool = False):
    """渲染摊还表"""
    if schedule.empty:
        st.info("暂无摊还数据")
        return

    display_df = schedule.copy()

    # 列重命名
    col_map = {
        "period": "期数",
        "due_date": "还款日",
        "payment": "还款额(元)",
        "principal": "本金(元)",
        "interest": "利息(元)",
        "remaining_principal": "剩余本金(元)",
        "cumulative_principal": "累计本金(元)",
        "cumulative_interest": "累计利息(元)",
        "period_fraction": "期数占比",
    }

    if display_df["due_date"].isna().all():
        display_df = display_df.drop(columns=["due_date"])

    display_cols = [c for c in col_map if c in display_df.columns]
    display_df = display_df[display_cols].rename(columns=col_map)

    money_cols = ["还款额(元)", "本金(元)", "利息(元)", "剩余本金(元)", "累计本金(元)", "累计利息(元)"]
    for col in money_cols:
        display_df[col] = display_df[col].apply(lambda x: f"{x:,.2f}")
    display_df["期数占比"] = display_df["期数占比"].apply(lambda x: f"{x:.4f}")

    if not show_all and len(display_df) > 24:
        st.dataframe(display_df, width='stretch', height=600)
    else:
        st.dataframe(display_df, width='stretch')
