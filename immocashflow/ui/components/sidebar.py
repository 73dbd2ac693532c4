"""Calculator form rendered in the sidebar."""

from __future__ import annotations

from typing import Any

import streamlit as st

from immocashflow.domain.calculator.notary import calculate_notary_fees
from immocashflow.domain.models.investment import InvestmentData, PropertyType, Zone

PROPERTY_TYPE_LABELS = {
    PropertyType.OLD: "Ancien (8%)",
    PropertyType.NEW: "Neuf (2.5%)",
    PropertyType.HLM: "Vente HLM (3% / 8%)",
}


def _acquisition(data: InvestmentData) -> dict[str, Any]:
    col1, col2 = st.columns(2)
    price = col1.number_input("Prix d'achat (€)", 0.0, value=float(data.price), step=1000.0)
    surface = col2.number_input("Surface (m²)", 0.0, value=float(data.surface), step=1.0)
    col3, col4 = st.columns(2)
    works = col3.number_input("Travaux (€)", 0.0, value=float(data.works), step=500.0)
    furniture = col4.number_input("Meubles (€)", 0.0, value=float(data.furniture), step=500.0)

    types = list(PROPERTY_TYPE_LABELS)
    property_type = st.selectbox(
        "Type de bien (notaire)",
        types,
        index=types.index(data.property_type),
        format_func=PROPERTY_TYPE_LABELS.get,
    )
    reduced = False
    if property_type is PropertyType.HLM:
        reduced = st.checkbox("Frais réduits (3%)", value=data.reduced_notary_fees)

    manual = st.checkbox("Saisir les frais de notaire", value=data.manual_notary_fees)
    if manual:
        notary = st.number_input("Frais de notaire (€)", 0.0, value=float(data.notary_fees), step=100.0)
    else:
        notary = calculate_notary_fees(price, property_type, reduced)
        st.caption(f"Frais de notaire estimés : {notary:,.0f} €".replace(",", " "))

    return {
        "price": price,
        "surface": surface,
        "works": works,
        "furniture": furniture,
        "property_type": property_type,
        "reduced_notary_fees": reduced,
        "manual_notary_fees": manual,
        "notary_fees": notary,
    }


def _financing(data: InvestmentData) -> dict[str, Any]:
    contribution = st.number_input(
        "Apport personnel (€)", 0.0, value=float(data.personal_contribution), step=1000.0
    )
    loan = st.number_input("Montant emprunté (€)", 0.0, value=float(data.loan_amount), step=1000.0)
    col1, col2 = st.columns(2)
    rate = col1.number_input("Taux (%)", 0.0, 15.0, float(data.interest_rate), 0.05)
    duration = col2.slider("Durée (ans)", 5, 30, int(data.loan_duration or 20), 1)
    insurance = st.number_input("Assurance emprunteur (%)", 0.0, 2.0, float(data.insurance_rate), 0.01)
    return {
        "personal_contribution": contribution,
        "loan_amount": loan,
        "interest_rate": rate,
        "loan_duration": duration,
        "insurance_rate": insurance,
    }


def _operating(data: InvestmentData) -> dict[str, Any]:
    rent = st.number_input("Loyer mensuel (€)", 0.0, value=float(data.monthly_rent), step=10.0)
    col1, col2 = st.columns(2)
    property_tax = col1.number_input("Taxe foncière (€/an)", 0.0, value=float(data.property_tax), step=50.0)
    condo = col2.number_input("Copropriété (€/mois)", 0.0, value=float(data.condo_fees), step=10.0)
    col3, col4 = st.columns(2)
    pno = col3.number_input("Assurance PNO (€/an)", 0.0, value=float(data.pno_insurance), step=10.0)
    management = col4.number_input("Gestion (% loyer)", 0.0, 20.0, float(data.management_fees), 0.5)
    vacancy_default = data.vacancy_months if data.vacancy_months is not None else 1.0
    vacancy = st.slider("Vacance (mois/an)", 0.0, 6.0, float(vacancy_default), 0.5)
    return {
        "monthly_rent": rent,
        "property_tax": property_tax,
        "condo_fees": condo,
        "pno_insurance": pno,
        "management_fees": management,
        "vacancy_months": vacancy,
    }


def _household(data: InvestmentData) -> dict[str, Any]:
    salary = st.number_input(
        "Salaire annuel brut (€, 0 = non renseigné)", 0.0, value=float(data.annual_salary or 0.0), step=1000.0
    )
    include_ptz = st.checkbox("Inclure un PTZ", value=data.include_ptz)
    include_al = st.checkbox("Inclure un prêt Action Logement", value=data.include_action_logement)

    reference_income = data.reference_income
    household_size = data.household_size
    zone = data.zone
    if include_ptz or include_al:
        if data.property_type is not PropertyType.HLM:
            st.caption("Les prêts aidés ne s'appliquent qu'aux ventes HLM.")
        known = st.checkbox("Revenus du foyer connus", value=reference_income is not None)
        if known:
            reference_income = st.number_input(
                "Revenu fiscal de référence N-2 (€)", 0.0, value=float(reference_income or 0.0), step=1000.0
            )
            household_size = st.number_input("Personnes dans le foyer", 1, 10, int(household_size or 1), 1)
        else:
            reference_income = None
            household_size = None
        zones = list(Zone)
        zone = st.selectbox(
            "Zone PTZ", zones, index=zones.index(zone) if zone else 1, format_func=lambda z: z.value
        )

    return {
        "annual_salary": salary if salary > 0 else None,
        "include_ptz": include_ptz,
        "include_action_logement": include_al,
        "reference_income": reference_income,
        "household_size": household_size,
        "zone": zone,
    }


def render_calculator_form(data: InvestmentData) -> InvestmentData:
    """Render every input section and return the updated record."""
    updates: dict[str, Any] = {}
    with st.sidebar:
        st.title("⚙️ Données financières")

        with st.expander("🏠 Acquisition", expanded=True):
            updates.update(_acquisition(data))

        with st.expander("🏦 Financement", expanded=True):
            updates.update(_financing(data))

        with st.expander("📉 Exploitation", expanded=False):
            updates.update(_operating(data))

        with st.expander("👪 Foyer & prêts aidés", expanded=False):
            updates.update(_household(data))

    return data.with_updates(**updates)
