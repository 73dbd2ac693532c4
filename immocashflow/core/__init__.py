"""Settings, logging and exceptions shared by every layer."""

from .exceptions import (
    ImmoCashFlowError,
    InvalidParameterError,
    ListingImportError,
    SimulationNotFoundError,
    StoreError,
)
from .logging import configure_logging, get_logger
from .settings import AppSettings, get_settings

__all__ = [
    "AppSettings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Exceptions
    "ImmoCashFlowError",
    "InvalidParameterError",
    "ListingImportError",
    "SimulationNotFoundError",
    "StoreError",
]
