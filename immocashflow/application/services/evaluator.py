"""Financial results aggregator.

Orchestrates notary fees, financing plan and taxation into one
``FinancialResults`` per regime. Every call is independent and pure.
"""

from __future__ import annotations

from dataclasses import dataclass

from immocashflow.domain.calculator.financial import calculate_annual_insurance
from immocashflow.domain.calculator.fiscal import TaxInputs, calculate_tax
from immocashflow.domain.calculator.notary import resolve_notary_fees
from immocashflow.domain.calculator.params import DEFAULT_PARAMS, EngineParams
from immocashflow.domain.calculator.subsidies import build_financing_plan
from immocashflow.domain.models.investment import InvestmentData
from immocashflow.domain.models.results import (
    FinancialResults,
    FinancingPlan,
    TaxBreakdown,
    TaxRegime,
)

# Net salary approximated as 78% of gross
NET_SALARY_RATIO = 0.78
# Banks retain 70% of rental income when computing the debt ratio
RENT_RETENTION_RATIO = 0.70


@dataclass(frozen=True)
class Evaluation:
    """Results plus the intermediate figures that produced them."""

    results: FinancialResults
    notary_fees: float
    annual_gross_rent: float
    annual_charges: float
    financing: FinancingPlan
    tax: TaxBreakdown


def _safe_ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return 0.0
    return numerator / denominator


def calculate_debt_ratio(
    monthly_mortgage: float,
    annual_salary: float | None,
    monthly_rent: float,
) -> float | None:
    """Debt-service ratio in percent, None without a salary."""
    if annual_salary is None or annual_salary <= 0:
        return None
    income = annual_salary * NET_SALARY_RATIO / 12.0 + monthly_rent * RENT_RETENTION_RATIO
    if income <= 0:
        return None
    return monthly_mortgage / income * 100.0


def evaluate_detailed(
    data: InvestmentData,
    regime: TaxRegime | str,
    params: EngineParams = DEFAULT_PARAMS,
) -> Evaluation:
    """Evaluate ``data`` under ``regime`` and keep the breakdown."""
    # 1. Costs
    notary_fees = resolve_notary_fees(data)
    total_project_cost = data.price + notary_fees + data.works + data.furniture

    # 2. Revenues (annual)
    vacancy = data.vacancy_months if data.vacancy_months is not None else params.default_vacancy_months
    annual_gross_rent = data.monthly_rent * (12 - vacancy)

    # 3. Charges (annual)
    annual_management = annual_gross_rent * data.management_fees / 100.0
    annual_loan_insurance = calculate_annual_insurance(data.loan_amount, data.insurance_rate)
    annual_charges = (
        data.property_tax
        + data.condo_fees * 12
        + data.pno_insurance
        + annual_management
        + annual_loan_insurance
    )

    # 4. Mortgage across all tranches
    financing = build_financing_plan(data, total_project_cost, params)
    monthly_mortgage = financing.monthly_payment

    # 5. Tax
    tax = calculate_tax(
        regime,
        TaxInputs(
            gross_rent=annual_gross_rent,
            operating_charges=annual_charges,
            interest=financing.annual_interest,
            price=data.price,
            furniture=data.furniture,
            works=data.works,
            notary_fees=notary_fees,
            annual_salary=data.annual_salary,
        ),
        params,
    )

    # 6. Cash flows: brut after charges, net after mortgage, net-net after tax
    annual_cash_flow_brut = annual_gross_rent - annual_charges
    annual_cash_flow_net = annual_cash_flow_brut - monthly_mortgage * 12
    annual_cash_flow_net_net = annual_cash_flow_net - tax.tax

    results = FinancialResults(
        total_project_cost=total_project_cost,
        monthly_mortgage=monthly_mortgage,
        monthly_cash_flow_brut=annual_cash_flow_brut / 12,
        monthly_cash_flow_net=annual_cash_flow_net / 12,
        monthly_cash_flow_net_net=annual_cash_flow_net_net / 12,
        yield_brut=_safe_ratio(annual_gross_rent, total_project_cost) * 100,
        yield_net=_safe_ratio(annual_cash_flow_brut, total_project_cost) * 100,
        taxes=tax.tax,
        debt_ratio=calculate_debt_ratio(monthly_mortgage, data.annual_salary, data.monthly_rent),
    )

    return Evaluation(
        results=results,
        notary_fees=notary_fees,
        annual_gross_rent=annual_gross_rent,
        annual_charges=annual_charges,
        financing=financing,
        tax=tax,
    )


def evaluate(
    data: InvestmentData,
    regime: TaxRegime | str,
    params: EngineParams = DEFAULT_PARAMS,
) -> FinancialResults:
    """Evaluate one property under one taxation regime."""
    return evaluate_detailed(data, regime, params).results


def evaluate_all_regimes(
    data: InvestmentData,
    params: EngineParams = DEFAULT_PARAMS,
) -> dict[TaxRegime, FinancialResults]:
    """Evaluate ``data`` once per supported regime."""
    return {regime: evaluate(data, regime, params) for regime in TaxRegime}
