"""Financial calculation functions.

Core loan and amortization calculations for real estate investments.
"""

from __future__ import annotations

import numpy_financial as npf

from immocashflow.domain.models.results import AmortizationPoint

# The projection always spans 20 years, whatever the loan term
PROJECTION_YEARS = 20

# Balances below one cent count as repaid
BALANCE_EPSILON = 0.01


def calculate_monthly_payment(
    principal: float,
    annual_rate_pct: float,
    duration_years: int,
) -> float:
    """Calculate monthly loan payment (principal + interest only).

    Args:
        principal: Loan amount in €
        annual_rate_pct: Annual interest rate as percentage (e.g., 3.5 for 3.5%)
        duration_years: Loan term in years

    Returns:
        Monthly payment amount in €
    """
    n_months = duration_years * 12
    if principal <= 0 or n_months <= 0:
        return 0.0

    monthly_rate = (annual_rate_pct / 100.0) / 12.0

    if monthly_rate == 0:
        return principal / n_months

    return float(-npf.pmt(monthly_rate, n_months, principal))


def calculate_annual_insurance(loan_amount: float, insurance_rate_pct: float) -> float:
    """Yearly borrower insurance, charged on the initial loan amount."""
    if loan_amount <= 0:
        return 0.0
    return loan_amount * insurance_rate_pct / 100.0


def generate_amortization_schedule(
    principal: float,
    annual_rate_pct: float,
    duration_years: int,
    initial_property_value: float,
    monthly_cash_flow: float,
    annual_inflation_pct: float = 1.0,
) -> list[AmortizationPoint]:
    """Project the loan and the owner's wealth over 20 years.

    Each year runs twelve monthly amortization steps. Once the loan is
    repaid, the freed monthly payment is added to the cash flow; a loan
    longer than the horizon simply ends with capital still outstanding.

    Args:
        principal: Loan amount in €
        annual_rate_pct: Annual interest rate %
        duration_years: Loan term in years
        initial_property_value: Property value at year 0 in €
        monthly_cash_flow: Steady monthly cash flow while the loan runs
        annual_inflation_pct: Yearly property appreciation %

    Returns:
        21 points, year 0 (before any payment) to year 20.
    """
    payment = calculate_monthly_payment(principal, annual_rate_pct, duration_years)
    monthly_rate = (annual_rate_pct / 100.0) / 12.0

    balance = max(0.0, principal)
    property_value = initial_property_value
    cumulative_cash = 0.0

    points = [
        AmortizationPoint(
            year=0,
            remaining_capital=balance,
            interest_paid=0.0,
            principal_paid=0.0,
            property_value=property_value,
            equity=property_value - balance,
            cumulative_cash_flow=0.0,
            net_worth=property_value - balance,
        )
    ]

    for year in range(1, PROJECTION_YEARS + 1):
        interest_year = 0.0
        principal_year = 0.0
        freed = 0.0

        for _ in range(12):
            if balance > 0 and payment > 0:
                interest = balance * monthly_rate
                principal_part = payment - interest
                if principal_part >= balance - BALANCE_EPSILON:
                    principal_part = balance
                balance -= principal_part
                interest_year += interest
                principal_year += principal_part
            else:
                freed += payment

        property_value *= 1.0 + annual_inflation_pct / 100.0
        cumulative_cash += monthly_cash_flow * 12 + freed
        equity = property_value - balance

        points.append(
            AmortizationPoint(
                year=year,
                remaining_capital=balance,
                interest_paid=interest_year,
                principal_paid=principal_year,
                property_value=property_value,
                equity=equity,
                cumulative_cash_flow=cumulative_cash,
                net_worth=equity + cumulative_cash,
            )
        )

    return points
