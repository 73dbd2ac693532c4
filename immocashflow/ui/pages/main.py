"""Main page rendering.

Composes the calculator form, results, projection and comparison board.
"""

from __future__ import annotations

import os

import streamlit as st

from immocashflow.application.services.evaluator import evaluate_all_regimes, evaluate_detailed
from immocashflow.application.services.projection import project_wealth, schedule_to_dataframe
from immocashflow.application.services.report import build_report
from immocashflow.core.exceptions import ListingImportError
from immocashflow.core.logging import get_logger
from immocashflow.core.settings import get_settings
from immocashflow.domain.calculator.params import EngineParams
from immocashflow.domain.calculator.scoring import calculate_investment_score
from immocashflow.domain.models.investment import InvestmentData
from immocashflow.domain.models.simulation import SavedSimulation
from immocashflow.services.importer import fetch_listing
from immocashflow.services.location import InMemoryLocationLookup, LocationRecord
from immocashflow.services.market import apply_estimates, estimate_market_data
from immocashflow.ui.components.charts import render_projection_chart
from immocashflow.ui.components.comparison import render_comparison_dashboard
from immocashflow.ui.components.results import (
    format_euro,
    render_evaluation_details,
    render_kpi_summary,
    render_regime_comparison,
    render_regime_selector,
)
from immocashflow.ui.components.sidebar import render_calculator_form
from immocashflow.ui.state import SessionManager, get_state, set_state

log = get_logger(__name__)


@st.cache_resource
def load_location_lookup(path: str) -> InMemoryLocationLookup | None:
    if not os.path.exists(path):
        log.info("cities_file_missing", path=path)
        return None
    return InMemoryLocationLookup.from_json(path)


def render_header() -> None:
    st.markdown(
        """
        <h1 style="text-align: center;">🏢 ImmoCashFlow</h1>
        """,
        unsafe_allow_html=True,
    )
    st.caption("Analyse de rentabilité immobilière locative")


def render_url_importer(data: InvestmentData) -> InvestmentData:
    """Import price, surface and location from a listing URL."""
    with st.expander("🔗 Importer une annonce", expanded=False):
        url = st.text_input("URL de l'annonce")
        if st.button("Importer") and url:
            try:
                listing = fetch_listing(url)
            except ListingImportError as e:
                st.error(str(e))
                return data
            if listing.is_demo:
                st.warning("Annonce inaccessible : données de démonstration utilisées.")
            set_state("import_notice", listing.city)
            return data.with_updates(**listing.to_updates())
    return data


def render_location(data: InvestmentData) -> InvestmentData:
    """City search with market estimates."""
    lookup = load_location_lookup(get_settings().cities_file)
    if lookup is None:
        return data

    st.markdown("#### 📍 Localisation du bien")
    default_query = get_state("import_notice", None) or ""
    query = st.text_input("Commune ou code postal", value=default_query)
    matches = lookup.search(query) if query else []
    if not matches:
        return data

    city: LocationRecord = st.selectbox(
        "Résultats", matches, format_func=lambda c: f"{c.name} ({c.main_postal_code or c.code})"
    )
    set_state("selected_city", city)

    if data.surface <= 0:
        st.caption("Renseignez la surface pour voir l'analyse du marché.")
        return data

    estimate = estimate_market_data(city)
    col1, col2 = st.columns(2)
    col1.metric("Prix moyen", f"{format_euro(estimate.price_per_sqm)}/m²")
    col2.metric("Loyer moyen", f"{estimate.rent_per_sqm:.1f} €/m²")
    if st.button("Appliquer les estimations"):
        return apply_estimates(data, estimate)
    return data


def _simulation_name(data: InvestmentData, count: int) -> str:
    city: LocationRecord | None = get_state("selected_city", None)
    if city is not None:
        return f"{city.name} ({data.surface:g}m²)"
    return f"Projet {count + 1}"


def render_main_page() -> None:
    """Render the calculator page."""
    SessionManager.initialize()
    settings = get_settings()
    params = EngineParams.from_settings(settings)
    store = SessionManager.get_store()

    render_header()

    data = SessionManager.get_data()
    data = render_url_importer(data)
    data = render_location(data)
    data = render_calculator_form(data)
    SessionManager.set_data(data)

    regime = render_regime_selector(SessionManager.get_regime())
    SessionManager.set_regime(regime)

    evaluation = evaluate_detailed(data, regime, params)
    results = evaluation.results
    score = calculate_investment_score(results)

    render_kpi_summary(results, score)
    render_evaluation_details(evaluation)
    render_regime_comparison(evaluate_all_regimes(data, params), regime)

    city: LocationRecord | None = get_state("selected_city", None)
    report = build_report(data, evaluation, score, project_name=city.name if city else None)
    if st.download_button(
        "🖨️ Télécharger le dossier bancaire",
        data=report,
        file_name="dossier_bancaire.md",
        mime="text/markdown",
    ):
        log.info("report_downloaded", regime=regime, score=score)

    if st.button("💾 Sauvegarder la simulation"):
        sim = SavedSimulation.create(_simulation_name(data, len(store)), data, results)
        store.add(sim)
        st.success(f"Simulation « {sim.name} » sauvegardée.")

    st.divider()
    points = project_wealth(data, results, settings.projection_inflation_pct)
    render_projection_chart(schedule_to_dataframe(points))

    st.divider()
    loaded = render_comparison_dashboard(store)
    if loaded is not None:
        SessionManager.set_data(loaded)
        st.rerun()
