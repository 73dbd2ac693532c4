"""Application services."""

from .evaluator import Evaluation, evaluate, evaluate_all_regimes, evaluate_detailed
from .projection import project_wealth, schedule_to_dataframe, summarize_projection
from .report import build_report
from .store import JsonSimulationStore, SimulationStore

__all__ = [
    "Evaluation",
    "evaluate",
    "evaluate_detailed",
    "evaluate_all_regimes",
    "project_wealth",
    "schedule_to_dataframe",
    "summarize_projection",
    "build_report",
    "SimulationStore",
    "JsonSimulationStore",
]
