"""Tests for PTZ, Action Logement and the financing split."""

import pytest

from immocashflow.domain.calculator.financial import calculate_monthly_payment
from immocashflow.domain.calculator.params import EngineParams
from immocashflow.domain.calculator.subsidies import (
    build_financing_plan,
    calculate_action_logement,
    calculate_ptz,
)
from immocashflow.domain.models import InvestmentData, PropertyType, Zone


def hlm(**fields):
    defaults = dict(
        price=150000,
        property_type=PropertyType.HLM,
        loan_amount=150000,
        interest_rate=3.8,
        loan_duration=20,
        include_ptz=True,
        include_action_logement=True,
    )
    defaults.update(fields)
    return InvestmentData(**defaults)


class TestPTZ:
    """Zero-interest loan eligibility."""

    def test_not_requested(self):
        result = calculate_ptz(hlm(include_ptz=False), 200000)
        assert not result.eligible
        assert result.amount == 0

    def test_only_for_hlm(self):
        data = hlm(property_type=PropertyType.OLD)
        assert calculate_ptz(data, 200000).amount == 0

    def test_unknown_household_uses_fallback(self):
        result = calculate_ptz(hlm(), 200000)
        assert result.eligible
        assert result.fallback
        assert result.amount == 30000

    def test_fallback_amount_is_configurable(self):
        params = EngineParams(subsidy_fallback_amount=15000)
        assert calculate_ptz(hlm(reference_income=30000), 200000, params).amount == 15000

    def test_eligible_amount_is_20_pct_of_cost(self):
        data = hlm(zone=Zone.A, household_size=2, reference_income=60000)
        result = calculate_ptz(data, 200000)
        assert result.eligible
        assert result.cap == 225000
        assert result.amount == pytest.approx(40000)

    def test_cost_capped(self):
        data = hlm(zone=Zone.C, household_size=1, reference_income=20000)
        result = calculate_ptz(data, 300000)
        assert result.cap == 100000
        assert result.amount == pytest.approx(20000)

    def test_income_above_ceiling(self):
        data = hlm(zone=Zone.B2, household_size=1, reference_income=31501)
        result = calculate_ptz(data, 200000)
        assert not result.eligible
        assert result.amount == 0
        assert result.cap == 110000

    def test_income_at_ceiling_is_eligible(self):
        data = hlm(zone=Zone.B2, household_size=1, reference_income=31500)
        assert calculate_ptz(data, 200000).eligible

    def test_large_household_clamped(self):
        """Households above the table size reuse the last column."""
        data = hlm(zone=Zone.A, household_size=12, reference_income=160000)
        result = calculate_ptz(data, 500000)
        assert result.eligible
        assert result.cap == 360000
        assert result.amount == pytest.approx(72000)

    def test_missing_zone_defaults_to_b1(self):
        data = hlm(household_size=1, reference_income=34000)
        result = calculate_ptz(data, 200000)
        assert result.cap == 135000
        assert result.amount == pytest.approx(27000)

    def test_default_zone_configurable(self):
        data = hlm(household_size=1, reference_income=34000)
        result = calculate_ptz(data, 200000, EngineParams(default_zone=Zone.C))
        assert not result.eligible


class TestActionLogement:
    """Employer-backed loan eligibility."""

    def test_not_requested(self):
        assert calculate_action_logement(hlm(include_action_logement=False), 200000).amount == 0

    def test_unknown_household_uses_fallback(self):
        result = calculate_action_logement(hlm(household_size=2), 200000)
        assert result.fallback
        assert result.amount == 30000

    def test_amount_capped_at_30k(self):
        data = hlm(household_size=3, reference_income=50000)
        assert calculate_action_logement(data, 200000).amount == 30000

    def test_amount_40_pct_of_small_cost(self):
        data = hlm(household_size=3, reference_income=50000)
        assert calculate_action_logement(data, 50000).amount == pytest.approx(20000)

    def test_income_above_ceiling(self):
        data = hlm(household_size=1, reference_income=32131)
        result = calculate_action_logement(data, 200000)
        assert not result.eligible
        assert result.amount == 0

    def test_same_ceiling_in_every_zone(self):
        for zone in Zone:
            data = hlm(zone=zone, household_size=2, reference_income=42907)
            assert calculate_action_logement(data, 200000).eligible

    def test_large_household_clamped(self):
        data = hlm(household_size=9, reference_income=82588)
        assert calculate_action_logement(data, 200000).eligible


class TestFinancingPlan:
    """Loan split into subsidized and conventional tranches."""

    def test_conventional_only(self):
        data = hlm(include_ptz=False, include_action_logement=False)
        plan = build_financing_plan(data, 200000)
        assert [t.label for t in plan.tranches] == ["Prêt bancaire"]
        assert plan.total_amount == 150000
        assert plan.monthly_payment == pytest.approx(calculate_monthly_payment(150000, 3.8, 20))
        assert plan.annual_interest == pytest.approx(5700)

    def test_subsidies_carved_out_of_loan(self):
        plan = build_financing_plan(hlm(), 200000)
        amounts = {t.label: t.amount for t in plan.tranches}
        assert amounts == {"PTZ": 30000, "Action Logement": 30000, "Prêt bancaire": 90000}
        assert plan.total_amount == pytest.approx(150000)

    def test_tranche_rates_and_payment(self):
        plan = build_financing_plan(hlm(), 200000)
        rates = {t.label: t.rate for t in plan.tranches}
        assert rates == {"PTZ": 0.0, "Action Logement": 1.0, "Prêt bancaire": 3.8}

        expected = (
            30000 / 240
            + calculate_monthly_payment(30000, 1.0, 20)
            + calculate_monthly_payment(90000, 3.8, 20)
        )
        assert plan.monthly_payment == pytest.approx(expected)

    def test_annual_interest_uses_nominal_rates(self):
        plan = build_financing_plan(hlm(), 200000)
        assert plan.annual_interest == pytest.approx(0 + 300 + 3420)

    def test_subsidies_never_exceed_loan(self):
        plan = build_financing_plan(hlm(loan_amount=40000), 200000)
        amounts = {t.label: t.amount for t in plan.tranches}
        assert amounts["PTZ"] == 30000
        assert amounts["Action Logement"] == 10000
        assert amounts["Prêt bancaire"] == 0
        assert plan.total_amount == pytest.approx(40000)

    def test_subsidized_plan_is_cheaper(self):
        with_aid = build_financing_plan(hlm(), 200000)
        without = build_financing_plan(hlm(include_ptz=False, include_action_logement=False), 200000)
        assert with_aid.monthly_payment < without.monthly_payment
