"""Saved simulation and comparison verdict models."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field

from .investment import InvestmentData
from .results import FinancialResults


class SavedSimulation(BaseModel):
    """Frozen snapshot of an evaluation, created on an explicit save."""

    id: str = Field(..., description="Unique identifier")
    created_at: datetime = Field(..., description="Save timestamp (UTC)")
    name: str = Field(..., description="Display name")
    data: InvestmentData
    results: FinancialResults
    score: int = Field(..., ge=0, le=100)

    model_config = {"frozen": True}

    @classmethod
    def create(
        cls,
        name: str,
        data: InvestmentData,
        results: FinancialResults,
    ) -> SavedSimulation:
        """Stamp a new simulation with an id, a timestamp and its score."""
        from immocashflow.domain.calculator.scoring import calculate_investment_score

        return cls(
            id=uuid.uuid4().hex,
            created_at=datetime.now(timezone.utc),
            name=name,
            data=data,
            results=results,
            score=calculate_investment_score(results),
        )


class Badge(str, Enum):
    """Qualitative tier given to a simulation inside a comparison."""

    CASHFLOW_KING = "🏆 Cashflow King"
    TOP_YIELD = "🚀 Top Rentabilité"
    ENTRY_TICKET = "💰 Ticket d'Entrée"
    SELF_FINANCED = "✅ Autofinancé"
    SAVING_EFFORT = "⚠️ Effort d'Épargne"


BADGE_COLORS = {
    Badge.CASHFLOW_KING: "green",
    Badge.TOP_YIELD: "violet",
    Badge.ENTRY_TICKET: "blue",
    Badge.SELF_FINANCED: "gray",
    Badge.SAVING_EFFORT: "orange",
}


class Verdict(BaseModel):
    badge: Badge
    description: str

    model_config = {"frozen": True}

    @property
    def color(self) -> str:
        return BADGE_COLORS[self.badge]
