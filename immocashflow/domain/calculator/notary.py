"""Notary fee estimation."""

from __future__ import annotations

from immocashflow.domain.models.investment import InvestmentData, PropertyType

NOTARY_RATE_OLD = 0.08
NOTARY_RATE_NEW = 0.025
NOTARY_RATE_HLM_REDUCED = 0.03


def calculate_notary_fees(
    price: float,
    property_type: PropertyType | str,
    reduced_rate: bool = False,
) -> float:
    """Estimate notary fees from the purchase price.

    Args:
        price: Purchase price in €
        property_type: OLD (8%), NEW (2.5%) or HLM
        reduced_rate: HLM sales qualifying for the reduced 3% rate

    Returns:
        Fees in €. HLM sales without the reduced rate pay the OLD rate.
    """
    kind = PropertyType(property_type)
    if kind is PropertyType.NEW:
        return price * NOTARY_RATE_NEW
    if kind is PropertyType.HLM and reduced_rate:
        return price * NOTARY_RATE_HLM_REDUCED
    return price * NOTARY_RATE_OLD


def resolve_notary_fees(data: InvestmentData) -> float:
    """Manual fees when overridden, otherwise the estimate."""
    if data.manual_notary_fees:
        return data.notary_fees
    return calculate_notary_fees(data.price, data.property_type, data.reduced_notary_fees)
