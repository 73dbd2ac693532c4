"""Pytest fixtures for immocashflow tests."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from immocashflow.domain.models import FinancialResults, InvestmentData, PropertyType, SavedSimulation


@pytest.fixture
def base_data():
    """Old 150 k€ flat fully financed at 3.8% over 20 years, rented 800 €/month."""
    return InvestmentData(
        price=150000,
        surface=40,
        furniture=2000,
        works=0,
        property_type=PropertyType.OLD,
        loan_amount=150000,
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


@pytest.fixture
def hlm_data(base_data):
    """Same property sold as HLM with both subsidized loans requested."""
    return base_data.with_updates(
        property_type=PropertyType.HLM,
        include_ptz=True,
        include_action_logement=True,
    )


def make_results(cash_flow=0.0, yield_brut=5.0, yield_net=4.0):
    return FinancialResults(
        total_project_cost=200000,
        monthly_mortgage=900,
        monthly_cash_flow_brut=800,
        monthly_cash_flow_net=cash_flow,
        monthly_cash_flow_net_net=cash_flow,
        yield_brut=yield_brut,
        yield_net=yield_net,
        taxes=0,
    )


def make_simulation(sim_id, price=150000, cash_flow=0.0, yield_brut=5.0, yield_net=4.0, score=50):
    return SavedSimulation(
        id=sim_id,
        created_at="2024-01-01T00:00:00+00:00",
        name=f"Projet {sim_id}",
        data=InvestmentData(price=price, loan_amount=price),
        results=make_results(cash_flow, yield_brut, yield_net),
        score=score,
    )


@pytest.fixture
def simulation_factory():
    """Build saved simulations with controlled price, cash flow and yields."""
    return make_simulation
