"""Data models for immocashflow."""

from .investment import HeatingType, InvestmentData, PropertyType, Zone
from .results import (
    AmortizationPoint,
    FinancialResults,
    FinancingPlan,
    LoanTranche,
    SubsidyResult,
    TaxBreakdown,
    TaxRegime,
)
from .simulation import Badge, SavedSimulation, Verdict

__all__ = [
    "InvestmentData",
    "PropertyType",
    "Zone",
    "HeatingType",
    "TaxRegime",
    "FinancialResults",
    "AmortizationPoint",
    "LoanTranche",
    "FinancingPlan",
    "SubsidyResult",
    "TaxBreakdown",
    "SavedSimulation",
    "Badge",
    "Verdict",
]
