"""20-year wealth projection for a property."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from immocashflow.core.exceptions import InvalidParameterError
from immocashflow.domain.calculator.financial import generate_amortization_schedule
from immocashflow.domain.models.investment import InvestmentData
from immocashflow.domain.models.results import AmortizationPoint, FinancialResults


def project_wealth(
    data: InvestmentData,
    results: FinancialResults,
    annual_inflation_pct: float = 1.0,
) -> list[AmortizationPoint]:
    """Project debt, equity and cumulative cash flow for ``data``.

    The property starts at price + works and the steady cash flow is the
    after-tax monthly figure of ``results``.

    Raises:
        InvalidParameterError: if the appreciation rate would make the
            property value negative.
    """
    if annual_inflation_pct <= -100.0:
        raise InvalidParameterError(
            "annual_inflation_pct", annual_inflation_pct, "must be greater than -100"
        )

    return generate_amortization_schedule(
        principal=data.loan_amount,
        annual_rate_pct=data.interest_rate,
        duration_years=data.loan_duration,
        initial_property_value=data.price + data.works,
        monthly_cash_flow=results.monthly_cash_flow_net_net,
        annual_inflation_pct=annual_inflation_pct,
    )


def schedule_to_dataframe(points: Sequence[AmortizationPoint]) -> pd.DataFrame:
    """One row per projected year, indexed like the simulation tables."""
    return pd.DataFrame([p.to_dict() for p in points])


def summarize_projection(points: Sequence[AmortizationPoint]) -> dict[str, float]:
    """Headline figures of a projection (final year)."""
    if not points:
        return {"patrimoine_net": 0.0, "cash_cumule": 0.0, "dette_restante": 0.0}
    final = points[-1]
    return {
        "patrimoine_net": final.net_worth,
        "cash_cumule": final.cumulative_cash_flow,
        "dette_restante": final.remaining_capital,
    }
