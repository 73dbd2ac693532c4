"""Engine output models.

Every result is a frozen value object recomputed from the inputs; nothing
here carries an identity.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class TaxRegime(str, Enum):
    """Rental taxation election evaluated by the engine."""

    LMNP_MICRO = "LMNP_MICRO"
    LMNP_REEL = "LMNP_REEL"
    FONCIER_MICRO = "FONCIER_MICRO"
    SCI_IS = "SCI_IS"

    @classmethod
    def parse(cls, value: TaxRegime | str | None) -> TaxRegime | None:
        """Resolve a selector, returning None for anything unknown."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                return None
        return None

    @property
    def label(self) -> str:
        return REGIME_LABELS[self]


REGIME_LABELS = {
    TaxRegime.LMNP_MICRO: "LMNP Micro (abattement 50%)",
    TaxRegime.LMNP_REEL: "LMNP Réel (amortissement)",
    TaxRegime.FONCIER_MICRO: "Nu Micro (abattement 30%)",
    TaxRegime.SCI_IS: "SCI à l'IS",
}


class FinancialResults(BaseModel):
    """Normalized outcome of one regime evaluation."""

    total_project_cost: float = Field(..., description="Price + notary + works + furniture")
    monthly_mortgage: float = Field(..., description="Sum of tranche payments, insurance excluded")
    monthly_cash_flow_brut: float = Field(..., description="Rent after operating charges, before mortgage")
    monthly_cash_flow_net: float = Field(..., description="After charges and mortgage")
    monthly_cash_flow_net_net: float = Field(..., description="After tax")
    yield_brut: float = Field(..., description="Gross yield %")
    yield_net: float = Field(..., description="Net of charges yield %")
    taxes: float = Field(..., description="Annual estimated tax")
    debt_ratio: float | None = Field(None, description="Debt-service ratio %")

    model_config = {"frozen": True}

    @classmethod
    def empty(cls) -> FinancialResults:
        return cls(
            total_project_cost=0.0,
            monthly_mortgage=0.0,
            monthly_cash_flow_brut=0.0,
            monthly_cash_flow_net=0.0,
            monthly_cash_flow_net_net=0.0,
            yield_brut=0.0,
            yield_net=0.0,
            taxes=0.0,
        )


class AmortizationPoint(BaseModel):
    """Yearly point of the wealth projection. Year 0 is before any payment."""

    year: int
    remaining_capital: float
    interest_paid: float
    principal_paid: float
    property_value: float
    equity: float
    cumulative_cash_flow: float
    net_worth: float

    model_config = {"frozen": True}

    def to_dict(self) -> dict[str, Any]:
        return {
            "Année": self.year,
            "Dette Restante": self.remaining_capital,
            "Intérêts": self.interest_paid,
            "Capital Remboursé": self.principal_paid,
            "Valeur Bien": self.property_value,
            "Capitaux Propres": self.equity,
            "Cashflow Cumulé": self.cumulative_cash_flow,
            "Patrimoine Net": self.net_worth,
        }


class LoanTranche(BaseModel):
    """Slice of the financing with its own rate and amortization."""

    label: str
    amount: float
    rate: float = Field(..., description="Annual rate %")
    monthly_payment: float
    annual_interest: float

    model_config = {"frozen": True}


class FinancingPlan(BaseModel):
    """All active tranches for one property."""

    tranches: tuple[LoanTranche, ...] = ()

    model_config = {"frozen": True}

    @property
    def monthly_payment(self) -> float:
        return sum(t.monthly_payment for t in self.tranches)

    @property
    def annual_interest(self) -> float:
        return sum(t.annual_interest for t in self.tranches)

    @property
    def total_amount(self) -> float:
        return sum(t.amount for t in self.tranches)


class SubsidyResult(BaseModel):
    """Eligibility outcome for one subsidized-loan program."""

    eligible: bool = False
    amount: float = 0.0
    cap: float | None = None
    fallback: bool = Field(default=False, description="Default amount used for missing household data")

    model_config = {"frozen": True}


class TaxBreakdown(BaseModel):
    regime: TaxRegime | None
    taxable_base: float
    tax: float
    marginal_rate_pct: float

    model_config = {"frozen": True}
