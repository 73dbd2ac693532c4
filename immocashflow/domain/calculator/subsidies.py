"""Subsidized-loan eligibility and financing split.

Two programs apply to HLM purchases only:

- PTZ (prêt à taux zéro): income ceiling and operation cost cap keyed by
  zone and household size, loan of 20% of the capped cost at 0%.
- Action Logement: income ceiling keyed by household size only, loan of
  min(30 000 €, 40% of the cost) at a 1% nominal rate.

When a program is requested but the household income or size is unknown,
the fallback amount is granted instead of failing.
"""

from __future__ import annotations

from immocashflow.core.logging import get_logger
from immocashflow.domain.calculator.financial import calculate_monthly_payment
from immocashflow.domain.calculator.params import DEFAULT_PARAMS, EngineParams
from immocashflow.domain.models.investment import InvestmentData, PropertyType, Zone
from immocashflow.domain.models.results import FinancingPlan, LoanTranche, SubsidyResult

log = get_logger(__name__)

# Revenu fiscal de référence ceilings, household sizes 1..8+
PTZ_INCOME_CEILINGS: dict[Zone, tuple[float, ...]] = {
    Zone.A: (49000, 73500, 88200, 102900, 117600, 132300, 147000, 161700),
    Zone.B1: (34500, 51750, 62100, 72450, 82800, 93150, 103500, 113850),
    Zone.B2: (31500, 47250, 56700, 66150, 75600, 85050, 94500, 103950),
    Zone.C: (28500, 42750, 51300, 59850, 68400, 76950, 85500, 94050),
}

# Operation cost caps, household sizes 1..5+
PTZ_COST_CAPS: dict[Zone, tuple[float, ...]] = {
    Zone.A: (150000, 225000, 270000, 315000, 360000),
    Zone.B1: (135000, 202500, 243000, 283500, 324000),
    Zone.B2: (110000, 165000, 198000, 231000, 264000),
    Zone.C: (100000, 150000, 180000, 210000, 240000),
}

PTZ_QUOTA = 0.20
PTZ_RATE_PCT = 0.0

# Same table for every zone
ACTION_LOGEMENT_INCOME_CEILINGS: tuple[float, ...] = (
    32130, 42907, 51600, 62293, 73280, 82588,
)
ACTION_LOGEMENT_MAX_AMOUNT = 30000.0
ACTION_LOGEMENT_QUOTA = 0.40
ACTION_LOGEMENT_RATE_PCT = 1.0


def _lookup(table: tuple[float, ...], household_size: int) -> float:
    """Clamp the household size into the table; larger households reuse the last entry."""
    index = min(max(household_size, 1), len(table)) - 1
    return table[index]


def _requested_for(data: InvestmentData, requested: bool) -> bool:
    return requested and data.property_type is PropertyType.HLM


def calculate_ptz(
    data: InvestmentData,
    total_project_cost: float,
    params: EngineParams = DEFAULT_PARAMS,
) -> SubsidyResult:
    """Compute the PTZ eligibility, amount and applicable cost cap."""
    if not _requested_for(data, data.include_ptz):
        return SubsidyResult()

    if data.reference_income is None or data.household_size is None:
        log.debug("ptz_fallback_amount", amount=params.subsidy_fallback_amount)
        return SubsidyResult(eligible=True, amount=params.subsidy_fallback_amount, fallback=True)

    zone = data.zone if data.zone is not None else params.default_zone
    ceiling = _lookup(PTZ_INCOME_CEILINGS[zone], data.household_size)
    cap = _lookup(PTZ_COST_CAPS[zone], data.household_size)

    if data.reference_income > ceiling:
        return SubsidyResult(eligible=False, amount=0.0, cap=cap)

    amount = PTZ_QUOTA * min(total_project_cost, cap)
    return SubsidyResult(eligible=True, amount=amount, cap=cap)


def calculate_action_logement(
    data: InvestmentData,
    total_project_cost: float,
    params: EngineParams = DEFAULT_PARAMS,
) -> SubsidyResult:
    """Compute the Action Logement eligibility and amount."""
    if not _requested_for(data, data.include_action_logement):
        return SubsidyResult()

    if data.reference_income is None or data.household_size is None:
        log.debug("action_logement_fallback_amount", amount=params.subsidy_fallback_amount)
        return SubsidyResult(eligible=True, amount=params.subsidy_fallback_amount, fallback=True)

    ceiling = _lookup(ACTION_LOGEMENT_INCOME_CEILINGS, data.household_size)
    if data.reference_income > ceiling:
        return SubsidyResult(eligible=False, amount=0.0)

    amount = min(ACTION_LOGEMENT_MAX_AMOUNT, total_project_cost * ACTION_LOGEMENT_QUOTA)
    return SubsidyResult(eligible=True, amount=amount)


def _tranche(label: str, amount: float, rate_pct: float, years: int) -> LoanTranche:
    return LoanTranche(
        label=label,
        amount=amount,
        rate=rate_pct,
        monthly_payment=calculate_monthly_payment(amount, rate_pct, years),
        annual_interest=amount * (rate_pct / 100.0),
    )


def build_financing_plan(
    data: InvestmentData,
    total_project_cost: float,
    params: EngineParams = DEFAULT_PARAMS,
) -> FinancingPlan:
    """Split the loan into PTZ, Action Logement and conventional tranches.

    Subsidies are carved out of ``loan_amount``, never added on top of it.
    Every tranche runs over the same duration.
    """
    years = data.loan_duration
    remaining = data.loan_amount

    ptz = calculate_ptz(data, total_project_cost, params)
    action_logement = calculate_action_logement(data, total_project_cost, params)

    ptz_amount = min(ptz.amount, remaining)
    remaining -= ptz_amount
    al_amount = min(action_logement.amount, remaining)
    remaining -= al_amount

    tranches = []
    if ptz_amount > 0:
        tranches.append(_tranche("PTZ", ptz_amount, PTZ_RATE_PCT, years))
    if al_amount > 0:
        tranches.append(_tranche("Action Logement", al_amount, ACTION_LOGEMENT_RATE_PCT, years))
    tranches.append(_tranche("Prêt bancaire", max(0.0, remaining), data.interest_rate, years))

    return FinancingPlan(tranches=tuple(tranches))
