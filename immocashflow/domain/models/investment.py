"""Investment input data model.

An ``InvestmentData`` record holds everything the engine needs to evaluate
one property: acquisition, financing, operating costs and the household
information used for subsidized loans.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class PropertyType(str, Enum):
    """Property category, drives the notary fee rate."""

    OLD = "OLD"
    NEW = "NEW"
    HLM = "HLM"


class Zone(str, Enum):
    """Geographic band used by the housing subsidy programs."""

    A = "A"
    B1 = "B1"
    B2 = "B2"
    C = "C"


class HeatingType(str, Enum):
    INDIVIDUAL = "INDIVIDUAL"
    COLLECTIVE = "COLLECTIVE"


class InvestmentData(BaseModel):
    """Acquisition and financing parameters for a single property.

    Immutable: use ``with_updates`` to derive a modified copy.
    """

    # Acquisition
    price: float = Field(default=0.0, ge=0, description="Purchase price in €")
    surface: float = Field(default=0.0, ge=0, description="Surface in m²")
    furniture: float = Field(default=0.0, ge=0, description="Furniture cost in €")
    works: float = Field(default=0.0, ge=0, description="Works cost in €")

    # Notary
    notary_fees: float = Field(default=0.0, ge=0, description="Notary fees in € (used when manual)")
    manual_notary_fees: bool = Field(default=False, description="Use notary_fees as entered")
    reduced_notary_fees: bool = Field(default=False, description="HLM sale at the reduced 3% rate")
    property_type: PropertyType = Field(default=PropertyType.OLD)

    # Financing
    loan_amount: float = Field(default=0.0, ge=0, description="Total borrowed in €")
    personal_contribution: float = Field(default=0.0, ge=0, description="Down payment in €")
    interest_rate: float = Field(default=0.0, ge=0, description="Annual interest rate %")
    loan_duration: int = Field(default=20, ge=0, description="Loan term in years")
    insurance_rate: float = Field(default=0.0, ge=0, description="Annual loan insurance rate %")

    # Operating
    monthly_rent: float = Field(default=0.0, ge=0, description="Monthly rent in €")
    property_tax: float = Field(default=0.0, ge=0, description="Annual property tax in €")
    condo_fees: float = Field(default=0.0, ge=0, description="Monthly condo fees in €")
    pno_insurance: float = Field(default=0.0, ge=0, description="Annual landlord insurance in €")
    management_fees: float = Field(default=0.0, ge=0, le=100, description="Management fee % of rent")
    vacancy_months: float | None = Field(default=None, ge=0, le=12, description="Empty months per year")

    # Household
    annual_salary: float | None = Field(default=None, ge=0, description="Annual gross salary in €")
    include_ptz: bool = Field(default=False, description="Request a zero-interest PTZ loan")
    include_action_logement: bool = Field(default=False, description="Request an Action Logement loan")
    reference_income: float | None = Field(default=None, ge=0, description="Revenu fiscal de référence N-2")
    household_size: int | None = Field(default=None, ge=1, description="Number of people in the household")
    zone: Zone | None = Field(default=None)
    heating_type: HeatingType | None = Field(default=None)

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }

    def with_updates(self, **fields: Any) -> InvestmentData:
        """Return a validated copy with ``fields`` replaced."""
        return InvestmentData.model_validate({**self.model_dump(), **fields})

    @property
    def price_per_sqm(self) -> float | None:
        if self.surface <= 0:
            return None
        return self.price / self.surface
