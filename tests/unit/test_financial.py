"""Tests for loan payment and amortization calculations."""

import pytest

from immocashflow.domain.calculator.financial import (
    PROJECTION_YEARS,
    calculate_annual_insurance,
    calculate_monthly_payment,
    generate_amortization_schedule,
)


def annuity(principal, annual_rate_pct, years):
    r = annual_rate_pct / 100 / 12
    n = years * 12
    return principal * r / (1 - (1 + r) ** -n)


def outstanding(principal, annual_rate_pct, years, months_paid):
    r = annual_rate_pct / 100 / 12
    n = years * 12
    return principal * ((1 + r) ** n - (1 + r) ** months_paid) / ((1 + r) ** n - 1)


class TestMonthlyPayment:
    """Annuity formula and degenerate inputs."""

    def test_matches_annuity_formula(self):
        result = calculate_monthly_payment(150000, 3.8, 20)
        assert result == pytest.approx(annuity(150000, 3.8, 20))

    def test_known_value(self):
        """150 k€ at 3.8% over 20 years is about 893 €/month."""
        assert calculate_monthly_payment(150000, 3.8, 20) == pytest.approx(893.2, abs=0.5)

    def test_zero_rate_divides_principal(self):
        assert calculate_monthly_payment(120000, 0, 20) == pytest.approx(500)

    def test_zero_principal(self):
        assert calculate_monthly_payment(0, 3.8, 20) == 0

    def test_zero_duration(self):
        assert calculate_monthly_payment(100000, 3.8, 0) == 0

    def test_one_year_loan(self):
        """Twelve payments repay the principal plus some interest."""
        payment = calculate_monthly_payment(12000, 12.0, 1)
        assert 12000 < payment * 12 < 12000 * 1.12

    def test_payment_increases_with_rate(self):
        low = calculate_monthly_payment(100000, 2.0, 20)
        high = calculate_monthly_payment(100000, 5.0, 20)
        assert high > low


class TestInsurance:
    def test_yearly_premium(self):
        assert calculate_annual_insurance(150000, 0.34) == pytest.approx(510)

    def test_no_loan(self):
        assert calculate_annual_insurance(0, 0.34) == 0


class TestAmortizationSchedule:
    """20-year projection."""

    def test_has_21_points(self):
        points = generate_amortization_schedule(150000, 3.8, 20, 150000, 0)
        assert len(points) == PROJECTION_YEARS + 1
        assert [p.year for p in points] == list(range(21))

    def test_year_zero_is_before_any_payment(self):
        points = generate_amortization_schedule(150000, 3.8, 20, 160000, 100)
        first = points[0]
        assert first.remaining_capital == 150000
        assert first.interest_paid == 0
        assert first.principal_paid == 0
        assert first.equity == pytest.approx(10000)
        assert first.cumulative_cash_flow == 0

    def test_twenty_year_loan_is_repaid(self):
        points = generate_amortization_schedule(150000, 3.8, 20, 150000, 0)
        assert points[-1].remaining_capital == pytest.approx(0, abs=0.01)

    def test_principal_paid_sums_to_loan(self):
        points = generate_amortization_schedule(150000, 3.8, 20, 150000, 0)
        assert sum(p.principal_paid for p in points) == pytest.approx(150000, abs=0.05)

    def test_balance_matches_closed_form(self):
        points = generate_amortization_schedule(150000, 3.8, 20, 150000, 0)
        expected = outstanding(150000, 3.8, 20, 60)
        assert points[5].remaining_capital == pytest.approx(expected, rel=1e-6)

    def test_longer_loan_still_outstanding_at_horizon(self):
        points = generate_amortization_schedule(200000, 3.5, 25, 200000, 0)
        expected = outstanding(200000, 3.5, 25, 240)
        assert points[-1].remaining_capital == pytest.approx(expected, rel=1e-6)
        assert points[-1].remaining_capital > 0

    def test_freed_payment_added_after_payoff(self):
        """Once a 10-year loan ends, its payment becomes cash flow."""
        payment = calculate_monthly_payment(100000, 3.0, 10)
        points = generate_amortization_schedule(100000, 3.0, 10, 100000, -50)

        assert points[10].remaining_capital == 0
        year_10_delta = points[10].cumulative_cash_flow - points[9].cumulative_cash_flow
        year_11_delta = points[11].cumulative_cash_flow - points[10].cumulative_cash_flow
        assert year_10_delta == pytest.approx(-600)
        assert year_11_delta == pytest.approx(-600 + 12 * payment)

    def test_property_appreciation(self):
        points = generate_amortization_schedule(100000, 3.0, 20, 100000, 0, annual_inflation_pct=2.0)
        assert points[20].property_value == pytest.approx(100000 * 1.02 ** 20)

    def test_no_appreciation(self):
        points = generate_amortization_schedule(100000, 3.0, 20, 100000, 0, annual_inflation_pct=0)
        assert all(p.property_value == 100000 for p in points)

    def test_no_loan(self):
        points = generate_amortization_schedule(0, 3.8, 20, 100000, 200)
        assert all(p.remaining_capital == 0 for p in points)
        assert points[20].cumulative_cash_flow == pytest.approx(200 * 12 * 20)
        assert points[20].net_worth == pytest.approx(points[20].property_value + 48000)

    def test_net_worth_is_equity_plus_cash(self):
        points = generate_amortization_schedule(150000, 3.8, 20, 160000, -100)
        for p in points:
            assert p.net_worth == pytest.approx(p.equity + p.cumulative_cash_flow)
            assert p.equity == pytest.approx(p.property_value - p.remaining_capital)
