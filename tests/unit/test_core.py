"""Tests for settings, logging and exceptions."""

import logging
import logging.handlers

import pytest
import structlog

import immocashflow.core.logging as logging_module
from immocashflow.core.exceptions import (
    ImmoCashFlowError,
    InvalidParameterError,
    ListingImportError,
    SimulationNotFoundError,
    StoreError,
)
from immocashflow.core.logging import configure_logging, get_logger
from immocashflow.core.settings import AppSettings
from immocashflow.domain.calculator.params import EngineParams
from immocashflow.domain.models import Zone


class TestSettings:
    def test_defaults(self):
        settings = AppSettings()
        assert settings.default_tmi_pct == 30
        assert settings.social_contributions_pct == 17.2
        assert settings.default_zone == "B1"

    def test_only_consumed_fields(self):
        """Every field is read by the engine, the UI or the logging setup."""
        assert "debug_mode" not in AppSettings.model_fields

    def test_unknown_env_ignored(self, monkeypatch):
        monkeypatch.setenv("IMMOCF_DEBUG_MODE", "true")
        assert not hasattr(AppSettings(), "debug_mode")

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("IMMOCF_DEFAULT_TMI_PCT", "41")
        monkeypatch.setenv("IMMOCF_SUBSIDY_FALLBACK_AMOUNT", "12000")
        settings = AppSettings()
        assert settings.default_tmi_pct == 41
        assert settings.subsidy_fallback_amount == 12000

    def test_invalid_zone_falls_back_to_b1(self):
        params = EngineParams.from_settings(AppSettings(default_zone="Z"))
        assert params.default_zone is Zone.B1


class TestExceptions:
    def test_hierarchy(self):
        assert issubclass(StoreError, ImmoCashFlowError)
        assert issubclass(SimulationNotFoundError, StoreError)
        assert issubclass(ListingImportError, ImmoCashFlowError)

    def test_not_found_message(self):
        err = SimulationNotFoundError("abc")
        assert err.simulation_id == "abc"
        assert "abc" in str(err)

    def test_invalid_parameter_message(self):
        err = InvalidParameterError("rate", -5, "must be positive")
        assert str(err) == "Invalid parameter 'rate': -5 - must be positive"

    def test_catch_all(self):
        with pytest.raises(ImmoCashFlowError):
            raise ListingImportError("bad url")


class TestLogging:
    def test_logger_accepts_events(self):
        log = get_logger("tests")
        log.info("test_event", value=1)

    def test_configure_is_idempotent(self):
        get_logger()
        assert configure_logging(level="DEBUG") is not None
        assert logging_module._configured

    def test_no_file_handler_under_pytest(self):
        handlers = logging_module._handlers()
        assert len(handlers) == 1
        assert not isinstance(handlers[0], logging.handlers.RotatingFileHandler)

    def test_renderer_choice(self):
        assert isinstance(logging_module._processors(True)[-1], structlog.processors.JSONRenderer)
        assert isinstance(logging_module._processors(False)[-1], structlog.dev.ConsoleRenderer)
