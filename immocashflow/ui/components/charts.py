"""Chart components for visualization."""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from immocashflow.ui.components.results import format_euro


def render_projection_chart(df: pd.DataFrame, key: str = "projection") -> None:
    """Render the 20-year net worth projection.

    Args:
        df: Projection DataFrame (one row per year)
        key: Unique key for the chart element
    """
    if df is None or df.empty:
        st.warning("Pas de projection disponible.")
        return

    final = df.iloc[-1]
    st.markdown("#### 📈 Projection patrimoniale (20 ans)")
    col1, col2 = st.columns(2)
    col1.metric("Enrichissement global", format_euro(final["Patrimoine Net"]))
    col2.metric("dont cash cumulé", format_euro(final["Cashflow Cumulé"]))

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=df["Année"],
        y=df["Patrimoine Net"],
        name="Patrimoine Net Total",
        fill="tozeroy",
        line=dict(color="#4f46e5", width=2),
        mode="lines",
    ))
    fig.add_trace(go.Scatter(
        x=df["Année"],
        y=df["Cashflow Cumulé"],
        name="Cashflow Cumulé",
        line=dict(color="#22c55e", dash="dot"),
        mode="lines",
    ))
    fig.add_trace(go.Scatter(
        x=df["Année"],
        y=df["Dette Restante"],
        name="Dette Restante",
        line=dict(color="#94a3b8"),
        mode="lines",
    ))
    fig.update_layout(
        xaxis_title="Année",
        yaxis_title="Montant (€)",
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )

    st.plotly_chart(fig, use_container_width=True, key=key)
