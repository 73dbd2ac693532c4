"""Pure calculation engine: fees, loans, subsidies, taxes and scores."""

from .comparison import get_simulation_verdict, rank_simulations
from .financial import (
    PROJECTION_YEARS,
    calculate_annual_insurance,
    calculate_monthly_payment,
    generate_amortization_schedule,
)
from .fiscal import TaxInputs, calculate_marginal_rate, calculate_tax
from .notary import calculate_notary_fees, resolve_notary_fees
from .params import DEFAULT_PARAMS, EngineParams
from .scoring import calculate_investment_score
from .subsidies import build_financing_plan, calculate_action_logement, calculate_ptz

__all__ = [
    "calculate_notary_fees",
    "resolve_notary_fees",
    "calculate_monthly_payment",
    "calculate_annual_insurance",
    "generate_amortization_schedule",
    "PROJECTION_YEARS",
    "calculate_ptz",
    "calculate_action_logement",
    "build_financing_plan",
    "TaxInputs",
    "calculate_marginal_rate",
    "calculate_tax",
    "calculate_investment_score",
    "get_simulation_verdict",
    "rank_simulations",
    "EngineParams",
    "DEFAULT_PARAMS",
]
