"""Tests for the pydantic domain models."""

import pytest
from pydantic import ValidationError

from immocashflow.domain.models import (
    AmortizationPoint,
    FinancialResults,
    InvestmentData,
    PropertyType,
    SavedSimulation,
    TaxRegime,
    Zone,
)


class TestInvestmentData:
    """Input record validation and copies."""

    def test_defaults(self):
        data = InvestmentData()
        assert data.price == 0
        assert data.loan_duration == 20
        assert data.property_type is PropertyType.OLD
        assert data.vacancy_months is None
        assert data.annual_salary is None

    def test_frozen(self):
        data = InvestmentData(price=100000)
        with pytest.raises(ValidationError):
            data.price = 120000

    def test_with_updates_returns_new_record(self):
        data = InvestmentData(price=100000)
        updated = data.with_updates(price=120000, zone="A")
        assert data.price == 100000
        assert updated.price == 120000
        assert updated.zone is Zone.A

    def test_with_updates_validates(self):
        with pytest.raises(ValidationError):
            InvestmentData().with_updates(price=-1)

    def test_rejects_negative_amounts(self):
        with pytest.raises(ValidationError):
            InvestmentData(monthly_rent=-10)

    def test_rejects_vacancy_above_12(self):
        with pytest.raises(ValidationError):
            InvestmentData(vacancy_months=13)

    def test_ignores_unknown_fields(self):
        data = InvestmentData.model_validate({"price": 100000, "dpe": "C"})
        assert data.price == 100000

    def test_price_per_sqm(self):
        assert InvestmentData(price=100000, surface=50).price_per_sqm == 2000
        assert InvestmentData(price=100000).price_per_sqm is None


class TestTaxRegime:
    def test_parse_enum(self):
        assert TaxRegime.parse(TaxRegime.SCI_IS) is TaxRegime.SCI_IS

    def test_parse_string(self):
        assert TaxRegime.parse(" lmnp_reel ") is TaxRegime.LMNP_REEL

    def test_parse_unknown(self):
        assert TaxRegime.parse("PINEL") is None
        assert TaxRegime.parse(None) is None

    def test_labels(self):
        assert all(regime.label for regime in TaxRegime)

    def test_string_comparison(self):
        assert TaxRegime.LMNP_MICRO == "LMNP_MICRO"


class TestFinancialResults:
    def test_empty(self):
        results = FinancialResults.empty()
        assert results.monthly_cash_flow_net_net == 0
        assert results.debt_ratio is None


class TestAmortizationPoint:
    def test_to_dict_uses_display_columns(self):
        point = AmortizationPoint(
            year=1,
            remaining_capital=95000,
            interest_paid=3500,
            principal_paid=5000,
            property_value=101000,
            equity=6000,
            cumulative_cash_flow=-1200,
            net_worth=4800,
        )
        row = point.to_dict()
        assert row["Année"] == 1
        assert row["Dette Restante"] == 95000
        assert row["Patrimoine Net"] == 4800


class TestSavedSimulation:
    def test_create_stamps_id_and_score(self):
        results = FinancialResults.empty()
        sim = SavedSimulation.create("Studio", InvestmentData(price=100000), results)
        assert sim.name == "Studio"
        assert sim.score == 30
        assert sim.created_at.tzinfo is not None
        assert len(sim.id) == 32

    def test_ids_are_unique(self):
        results = FinancialResults.empty()
        a = SavedSimulation.create("A", InvestmentData(), results)
        b = SavedSimulation.create("B", InvestmentData(), results)
        assert a.id != b.id

    def test_json_roundtrip(self):
        sim = SavedSimulation.create("A", InvestmentData(price=90000, zone="B2"), FinancialResults.empty())
        restored = SavedSimulation.model_validate(sim.model_dump(mode="json"))
        assert restored == sim
