"""Custom exceptions for immocashflow.

The calculation engine itself never raises: these types belong to the
adapters, the simulation store and the configuration layer around it.
"""

from __future__ import annotations

from typing import Any


class ImmoCashFlowError(Exception):
    """Base exception for all immocashflow errors."""
    pass


# --- Store Errors ---

class StoreError(ImmoCashFlowError):
    """Saved simulations could not be read from or written to disk."""
    pass


class SimulationNotFoundError(StoreError):
    """No saved simulation matches the requested identifier."""

    def __init__(self, simulation_id: str):
        self.simulation_id = simulation_id
        super().__init__(f"Simulation '{simulation_id}' not found")


# --- Adapter Errors ---

class ListingImportError(ImmoCashFlowError):
    """A listing URL could not be interpreted at all."""
    pass


class InvalidParameterError(ImmoCashFlowError):
    """Invalid parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)
