"""Tests for notary fee estimation."""

import pytest

from immocashflow.domain.calculator.notary import calculate_notary_fees, resolve_notary_fees
from immocashflow.domain.models import InvestmentData, PropertyType


class TestCalculateNotaryFees:
    """Rates per property type."""

    def test_old_property_pays_8_pct(self):
        assert calculate_notary_fees(150000, PropertyType.OLD) == pytest.approx(12000)

    def test_new_property_pays_2_5_pct(self):
        assert calculate_notary_fees(200000, PropertyType.NEW) == pytest.approx(5000)

    def test_hlm_reduced_rate(self):
        assert calculate_notary_fees(100000, PropertyType.HLM, reduced_rate=True) == pytest.approx(3000)

    def test_hlm_without_reduced_rate_pays_old_rate(self):
        assert calculate_notary_fees(100000, PropertyType.HLM) == pytest.approx(8000)

    def test_reduced_flag_ignored_outside_hlm(self):
        """The reduced rate only exists for HLM sales."""
        assert calculate_notary_fees(100000, PropertyType.OLD, reduced_rate=True) == pytest.approx(8000)

    def test_accepts_plain_string(self):
        assert calculate_notary_fees(100000, "NEW") == pytest.approx(2500)

    def test_zero_price(self):
        assert calculate_notary_fees(0, PropertyType.OLD) == 0


class TestResolveNotaryFees:
    """Manual override vs. estimate."""

    def test_manual_fees_win(self):
        data = InvestmentData(price=150000, notary_fees=9000, manual_notary_fees=True)
        assert resolve_notary_fees(data) == 9000

    def test_entered_fees_ignored_without_manual_flag(self):
        data = InvestmentData(price=150000, notary_fees=9000)
        assert resolve_notary_fees(data) == pytest.approx(12000)

    def test_manual_zero_fees(self):
        data = InvestmentData(price=150000, notary_fees=0, manual_notary_fees=True)
        assert resolve_notary_fees(data) == 0
