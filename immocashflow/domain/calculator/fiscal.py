"""Rental income taxation under the four supported regimes."""

from __future__ import annotations

from dataclasses import dataclass

from immocashflow.domain.calculator.params import DEFAULT_PARAMS, EngineParams
from immocashflow.domain.models.results import TaxBreakdown, TaxRegime

# Income tax barème: (upper bound of the bracket, marginal rate %)
TMI_BRACKETS: tuple[tuple[float, float], ...] = (
    (11294.0, 0.0),
    (28797.0, 11.0),
    (82341.0, 30.0),
    (177106.0, 41.0),
    (float("inf"), 45.0),
)

# Net taxable salary approximated as 90% of gross (10% professional allowance)
TAXABLE_SALARY_RATIO = 0.9

MICRO_BIC_ABATTEMENT_PCT = 50.0
MICRO_FONCIER_ABATTEMENT_PCT = 30.0

# Straight-line depreciation
BUILDING_SHARE = 0.9
BUILDING_YEARS = 30
FURNITURE_YEARS = 10
WORKS_YEARS = 15

# Corporate tax
IS_REDUCED_RATE = 0.15
IS_NORMAL_RATE = 0.25
IS_REDUCED_CEILING = 38120.0


@dataclass(frozen=True)
class TaxInputs:
    """Annual figures a regime needs to derive its taxable base."""

    gross_rent: float
    operating_charges: float
    interest: float
    price: float
    furniture: float = 0.0
    works: float = 0.0
    notary_fees: float = 0.0
    annual_salary: float | None = None


def calculate_marginal_rate(
    annual_salary: float | None,
    params: EngineParams = DEFAULT_PARAMS,
) -> float:
    """Marginal income tax rate (TMI) in percent.

    Without a salary the configured default TMI applies.
    """
    if annual_salary is None or annual_salary <= 0:
        return params.default_tmi_pct

    taxable = annual_salary * TAXABLE_SALARY_RATIO
    for upper, rate in TMI_BRACKETS:
        if taxable <= upper:
            return rate
    return TMI_BRACKETS[-1][1]


def building_depreciation(price: float) -> float:
    return price * BUILDING_SHARE / BUILDING_YEARS


def total_depreciation(price: float, furniture: float, works: float) -> float:
    """Yearly LMNP depreciation: building, furniture and works."""
    return (
        building_depreciation(price)
        + furniture / FURNITURE_YEARS
        + works / WORKS_YEARS
    )


def corporate_tax(taxable_base: float) -> float:
    """Two-bracket corporate tax: 15% up to 38 120 €, 25% above."""
    if taxable_base <= IS_REDUCED_CEILING:
        return taxable_base * IS_REDUCED_RATE
    return (
        IS_REDUCED_CEILING * IS_REDUCED_RATE
        + (taxable_base - IS_REDUCED_CEILING) * IS_NORMAL_RATE
    )


def calculate_tax(
    regime: TaxRegime | str | None,
    inputs: TaxInputs,
    params: EngineParams = DEFAULT_PARAMS,
) -> TaxBreakdown:
    """Annual taxable base and tax due for one regime.

    Unknown regimes owe no tax.
    """
    resolved = TaxRegime.parse(regime)
    tmi = calculate_marginal_rate(inputs.annual_salary, params)
    personal_rate = (tmi + params.social_contributions_pct) / 100.0

    if resolved is TaxRegime.LMNP_MICRO:
        base = inputs.gross_rent * (1.0 - MICRO_BIC_ABATTEMENT_PCT / 100.0)
        tax = base * personal_rate

    elif resolved is TaxRegime.LMNP_REEL:
        base = max(
            0.0,
            inputs.gross_rent
            - inputs.operating_charges
            - inputs.interest
            - total_depreciation(inputs.price, inputs.furniture, inputs.works)
            - inputs.notary_fees,
        )
        tax = base * personal_rate

    elif resolved is TaxRegime.FONCIER_MICRO:
        # The 15 000 € micro-foncier ceiling is not enforced
        base = inputs.gross_rent * (1.0 - MICRO_FONCIER_ABATTEMENT_PCT / 100.0)
        tax = base * personal_rate

    elif resolved is TaxRegime.SCI_IS:
        base = max(
            0.0,
            inputs.gross_rent
            - inputs.operating_charges
            - inputs.interest
            - building_depreciation(inputs.price),
        )
        tax = corporate_tax(base)

    else:
        base = 0.0
        tax = 0.0

    return TaxBreakdown(
        regime=resolved,
        taxable_base=base,
        tax=tax,
        marginal_rate_pct=tmi,
    )
