"""Session state management for the Streamlit app.

Provides a centralized interface for managing Streamlit session state,
with type-safe accessors and default values.
"""

from __future__ import annotations

from typing import Any, TypeVar

import streamlit as st

from immocashflow.application.services.store import JsonSimulationStore
from immocashflow.core.settings import get_settings
from immocashflow.domain.models.investment import InvestmentData, PropertyType

T = TypeVar("T")

DEFAULT_DATA = InvestmentData(
    price=150000,
    surface=0,
    furniture=2000,
    works=0,
    property_type=PropertyType.OLD,
    loan_amount=150000,
    personal_contribution=0,
    interest_rate=3.8,
    loan_duration=20,
    insurance_rate=0.34,
    monthly_rent=800,
    property_tax=800,
    condo_fees=100,
    pno_insurance=150,
    management_fees=0,
    vacancy_months=1,
)


def get_state(key: str, default: T) -> T:
    """Get a value from session state, storing ``default`` on first access."""
    if key not in st.session_state:
        st.session_state[key] = default
    return st.session_state[key]


def set_state(key: str, value: Any) -> None:
    st.session_state[key] = value


def init_state(defaults: dict[str, Any]) -> None:
    """Initialize multiple session state values, keeping existing ones."""
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


class SessionManager:
    """Manages all session state for the app."""

    DEFAULTS = {
        "data": DEFAULT_DATA,
        "selected_city": None,
        "import_notice": None,
    }

    @classmethod
    def initialize(cls) -> None:
        init_state(cls.DEFAULTS)
        init_state({"regime": get_settings().default_regime})

    @classmethod
    def get_data(cls) -> InvestmentData:
        return get_state("data", DEFAULT_DATA)

    @classmethod
    def set_data(cls, data: InvestmentData) -> None:
        set_state("data", data)

    @classmethod
    def get_regime(cls) -> str:
        return get_state("regime", get_settings().default_regime)

    @classmethod
    def set_regime(cls, regime: str) -> None:
        set_state("regime", regime)

    @classmethod
    def get_store(cls) -> JsonSimulationStore:
        """One store per session, backed by the configured JSON file."""
        if "store" not in st.session_state:
            st.session_state["store"] = JsonSimulationStore(get_settings().simulations_file)
        return st.session_state["store"]
