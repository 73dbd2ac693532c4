"""Saved simulation comparison board."""

from __future__ import annotations

import streamlit as st

from immocashflow.application.services.store import SimulationStore
from immocashflow.domain.calculator.comparison import get_simulation_verdict, rank_simulations
from immocashflow.domain.models.investment import InvestmentData
from immocashflow.ui.components.results import format_euro, format_pct


def render_comparison_dashboard(store: SimulationStore) -> InvestmentData | None:
    """Show saved simulations with their badges.

    Returns:
        The data of a simulation the user asked to reload, if any.
    """
    sims = store.list()
    st.markdown("### 📊 Comparatif des simulations")
    if not sims:
        st.info("Aucune simulation sauvegardée. Utilisez « Sauvegarder » pour comparer des projets.")
        return None

    to_load = None
    columns = st.columns(min(3, len(sims)))
    for i, sim in enumerate(sims):
        verdict = get_simulation_verdict(sim, sims)
        with columns[i % len(columns)]:
            with st.container(border=True):
                st.markdown(f"**{sim.name}** · {sim.score}/100")
                if verdict:
                    st.markdown(f":{verdict.color}[{verdict.badge.value}]")
                    st.caption(verdict.description)
                st.write(f"Prix : {format_euro(sim.data.price)}")
                st.write(f"Cash-flow : {format_euro(sim.results.monthly_cash_flow_net_net)}/mois")
                st.write(f"Rendement brut : {format_pct(sim.results.yield_brut)}")

                col1, col2 = st.columns(2)
                if col1.button("Charger", key=f"load_{sim.id}"):
                    to_load = sim.data
                if col2.button("Supprimer", key=f"del_{sim.id}"):
                    store.remove(sim.id)
                    st.rerun()

    if len(sims) >= 2:
        st.dataframe(rank_simulations(sims).drop(columns=["ID"]), hide_index=True, use_container_width=True)

    return to_load
