"""Tests for premium resolution and breakdown formatting."""

from decimal import Decimal

import pytest

from first_care_quote.pricing.config import PricingConfig
from first_care_quote.pricing.quote import (
    BillingPeriod,
    PaymentFrequency,
    format_amount,
    premium_breakdown,
    resolve_premium,
)
from first_care_quote.pricing.rates import CoverageTier


class TestResolvePremium:
    """Tests for resolve_premium."""

    def test_annual_ip_age_30(self):
        result = resolve_premium(CoverageTier.INPATIENT_ONLY, 30, PaymentFrequency.ANNUAL)
        assert result.final_amount == Decimal(474)
        assert result.base_amount == Decimal(474)
        assert result.loading_amount == 0
        assert result.billing_period is BillingPeriod.YEAR
        assert result.age_band == "26-30"

    def test_semi_annual_ip_age_30(self):
        result = resolve_premium("IP", 30, "semi-annual")
        assert result.final_amount == Decimal("241.74")
        assert result.base_amount == Decimal(474)
        assert result.loading_amount == Decimal("4.74")
        assert result.billing_period is BillingPeriod.SIX_MONTHS

    def test_ip_op_infant(self):
        result = resolve_premium("IP+OP", 0, "annual")
        assert result.final_amount == Decimal(1309)
        assert result.age_band == "0-3"

    def test_age_above_100_uses_top_band(self):
        result = resolve_premium("IP", 105, "annual")
        assert result.final_amount == Decimal(6500)

    def test_no_internal_rounding(self):
        """419 * 1.02 / 2 keeps every digit until it is displayed."""
        result = resolve_premium("IP", 20, "semi-annual")
        assert result.final_amount == Decimal("213.69")
        result = resolve_premium("IP+OP", 20, "semi-annual")
        assert result.final_amount == Decimal("390.15")

    def test_resolve_is_deterministic(self):
        a = resolve_premium("IP+OP", 67, "semi-annual")
        b = resolve_premium("IP+OP", 67, "semi-annual")
        assert a == b
        assert a.to_dict() == b.to_dict()

    def test_custom_loading(self):
        cfg = PricingConfig(semi_annual_loading=Decimal("0.05"))
        result = resolve_premium("IP", 30, "semi-annual", cfg=cfg)
        assert result.final_amount == Decimal("248.85")

    def test_invalid_frequency(self):
        with pytest.raises(ValueError):
            resolve_premium("IP", 30, "monthly")

    def test_to_dict(self):
        out = resolve_premium("IP", 30, "semi-annual").to_dict()
        assert out == {
            "tier": "IP",
            "frequency": "semi-annual",
            "age_band": "26-30",
            "currency": "USD",
            "base_amount": 474.0,
            "loading_amount": 4.74,
            "final_amount": 241.74,
            "billing_period": "6 months",
        }


class TestPremiumBreakdown:
    """Tests for display strings."""

    def test_annual_breakdown(self):
        bd = premium_breakdown(resolve_premium("IP", 30, "annual"))
        assert bd.premium == "474.00"
        assert bd.base_premium == "474.00"
        assert bd.loading is None
        assert bd.period_label == "USD per year"

    def test_semi_annual_breakdown(self):
        bd = premium_breakdown(resolve_premium("IP", 30, "semi-annual"))
        assert bd.premium == "241.74"
        assert bd.base_premium == "237.00"
        assert bd.loading == "4.74"
        assert bd.period_label == "USD per 6 months"

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (Decimal("241.74"), "241.74"),
            (Decimal("0.005"), "0.01"),
            (Decimal("12.344"), "12.34"),
            (Decimal(1309), "1309.00"),
        ],
    )
    def test_format_amount(self, amount, expected):
        assert format_amount(amount) == expected
