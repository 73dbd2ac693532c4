"""Result display components."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from immocashflow.application.services.evaluator import Evaluation
from immocashflow.domain.models.results import FinancialResults, TaxRegime


def format_euro(value: float | None, decimals: int = 0) -> str:
    """Format a number as Euro currency."""
    if value is None:
        return "—"
    if decimals == 0:
        return f"{int(round(value)):,}".replace(",", " ") + " €"
    return f"{value:,.{decimals}f}".replace(",", " ") + " €"


def format_pct(value: float | None, decimals: int = 1) -> str:
    if value is None:
        return "—"
    return f"{value:.{decimals}f} %"


def render_regime_selector(current: str) -> str:
    """Radio buttons for the four regimes; returns the chosen selector."""
    regimes = list(TaxRegime)
    resolved = TaxRegime.parse(current) or TaxRegime.LMNP_MICRO
    choice = st.radio(
        "Régime fiscal",
        regimes,
        index=regimes.index(resolved),
        format_func=lambda r: r.label,
        horizontal=True,
    )
    return choice.value


def render_kpi_summary(results: FinancialResults, score: int) -> None:
    """Headline cash flow, yields and score."""
    positive = results.monthly_cash_flow_net_net > 0
    st.subheader("Résultats")
    st.markdown(
        f"**{'✅ Rentable' if positive else '⚠️ Effort d’épargne'}** · Score {score}/100"
    )

    col1, col2, col3 = st.columns(3)
    col1.metric("Cash-flow net d'impôt", format_euro(results.monthly_cash_flow_net_net) + "/mois")
    col2.metric("Rendement brut", format_pct(results.yield_brut))
    col3.metric("Rendement net", format_pct(results.yield_net))

    col4, col5, col6 = st.columns(3)
    col4.metric("Mensualité", format_euro(results.monthly_mortgage))
    col5.metric("Impôt annuel", format_euro(results.taxes))
    col6.metric("Endettement", format_pct(results.debt_ratio))


def render_evaluation_details(evaluation: Evaluation) -> None:
    """Cost, tranche and tax breakdown."""
    with st.expander("🔎 Détail du calcul", expanded=False):
        st.write(f"Coût total du projet : {format_euro(evaluation.results.total_project_cost)}")
        st.write(f"Frais de notaire : {format_euro(evaluation.notary_fees)}")
        st.write(f"Loyers annuels encaissés : {format_euro(evaluation.annual_gross_rent)}")
        st.write(f"Charges annuelles : {format_euro(evaluation.annual_charges)}")

        tranches = pd.DataFrame([
            {
                "Prêt": t.label,
                "Montant": t.amount,
                "Taux (%)": t.rate,
                "Mensualité": round(t.monthly_payment, 2),
                "Intérêts annuels": round(t.annual_interest, 2),
            }
            for t in evaluation.financing.tranches
        ])
        st.dataframe(tranches, hide_index=True, use_container_width=True)

        st.write(
            f"Base imposable : {format_euro(evaluation.tax.taxable_base)} "
            f"(TMI {evaluation.tax.marginal_rate_pct:.0f} %)"
        )


def render_regime_comparison(all_results: dict[TaxRegime, FinancialResults], current: str) -> None:
    """Side-by-side table of the four regimes."""
    selected = TaxRegime.parse(current)
    rows = [
        {
            "Régime": ("▶ " if regime is selected else "") + regime.label,
            "Impôt annuel": round(res.taxes),
            "Cash-flow net d'impôt": round(res.monthly_cash_flow_net_net),
        }
        for regime, res in all_results.items()
    ]
    st.markdown("#### Comparatif fiscal")
    st.dataframe(pd.DataFrame(rows), hide_index=True, use_container_width=True)
