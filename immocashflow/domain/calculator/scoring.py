"""Investment suitability score.

Maps a ``FinancialResults`` record to a single 0-100 score: half of the
scale rewards the after-tax cash flow, the other half the net yield.
"""

from __future__ import annotations

import math

from immocashflow.domain.models.results import FinancialResults

CASHFLOW_BASE_POINTS = 30.0
CASHFLOW_MAX_POINTS = 20.0
CASHFLOW_EUR_PER_POINT = 10.0
YIELD_POINTS_PER_PCT = 5.0
YIELD_MAX_POINTS = 50.0


def calculate_investment_score(results: FinancialResults) -> int:
    """Score an evaluation between 0 and 100.

    A non-negative after-tax cash flow earns 30 base points plus one point
    per 10 € (max 20); a negative one loses one point per 10 € (max 20).
    Net yield adds 5 points per percent (max 50).

    Args:
        results: Evaluation to score

    Returns:
        Integer score, rounded half-up then clamped to [0, 100]
    """
    cash_flow = results.monthly_cash_flow_net_net
    score = 0.0

    if cash_flow >= 0:
        score += CASHFLOW_BASE_POINTS
        score += min(CASHFLOW_MAX_POINTS, cash_flow / CASHFLOW_EUR_PER_POINT)
    else:
        score -= min(CASHFLOW_MAX_POINTS, abs(cash_flow) / CASHFLOW_EUR_PER_POINT)

    score += min(YIELD_MAX_POINTS, results.yield_net * YIELD_POINTS_PER_PCT)

    # Half-up rounding, 42.5 scores 43
    return int(max(0, min(100, math.floor(score + 0.5))))
