"""Market price and rent estimates per square meter.

The estimate is a deterministic heuristic keyed on the commune code and
name; it only pre-fills the calculator form.
"""

from __future__ import annotations

from pydantic import BaseModel

from immocashflow.domain.models.investment import InvestmentData
from immocashflow.services.location import LocationRecord

BASE_PRICE_PER_SQM = 2000
CODE_FACTOR = 50
NAME_FACTOR = 50
ASSUMED_GROSS_YIELD = 0.06
# Loans within this distance of the price are treated as "loan = price"
LOAN_TRACKING_TOLERANCE = 1000.0


class MarketEstimate(BaseModel):
    price_per_sqm: float
    rent_per_sqm: float

    model_config = {"frozen": True}


def estimate_market_data(location: LocationRecord | None) -> MarketEstimate:
    """Average price and monthly rent per m² for a commune."""
    if location is None:
        return MarketEstimate(price_per_sqm=0.0, rent_per_sqm=0.0)

    digits = "".join(ch for ch in location.code if ch.isdigit())
    code_modifier = (int(digits) % 100) * CODE_FACTOR if digits else 0
    name_modifier = len(location.name) * NAME_FACTOR

    price_per_sqm = float(BASE_PRICE_PER_SQM + code_modifier + name_modifier)
    rent_per_sqm = round(price_per_sqm * ASSUMED_GROSS_YIELD / 12, 1)
    return MarketEstimate(price_per_sqm=price_per_sqm, rent_per_sqm=rent_per_sqm)


def apply_estimates(data: InvestmentData, estimate: MarketEstimate) -> InvestmentData:
    """Rescale price and rent to the surface; the loan follows the price when it tracked it."""
    if data.surface <= 0:
        return data

    new_price = estimate.price_per_sqm * data.surface
    new_rent = estimate.rent_per_sqm * data.surface
    new_loan = data.loan_amount
    if abs(data.loan_amount - data.price) < LOAN_TRACKING_TOLERANCE:
        new_loan = new_price

    return data.with_updates(
        price=round(new_price),
        monthly_rent=round(new_rent),
        loan_amount=round(new_loan),
    )
