# src/first_care_quote/pricing/quote.py
"""
Premium resolution and display formatting.

Provides:
- premium resolution (rate table lookup + payment-frequency loading)
- a premium result object (full Decimal precision)
- display breakdown (amounts fixed to 2 decimals)

Notes:
- Rounding happens only in format_amount / premium_breakdown, never on the
  values carried by PremiumResult.
- The breakdown's base premium is recovered from the final amount
  (final / 1.02 for semi-annual). It is a display value and is never fed
  back into resolve_premium.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, Dict, Optional, Union

from first_care_quote.pricing.bands import band_for
from first_care_quote.pricing.config import PricingConfig
from first_care_quote.pricing.rates import CoverageTier, base_rate

logger = logging.getLogger(__name__)

_CENTS = Decimal("0.01")


class PaymentFrequency(str, Enum):
    ANNUAL = "annual"
    SEMI_ANNUAL = "semi-annual"

    @property
    def display_name(self) -> str:
        return "Annual" if self is PaymentFrequency.ANNUAL else "Semi-Annual (+2%)"


class BillingPeriod(str, Enum):
    YEAR = "year"
    SIX_MONTHS = "6 months"


@dataclass(frozen=True)
class PremiumResult:
    tier: CoverageTier
    frequency: PaymentFrequency
    age_band: str
    currency: str
    base_amount: Decimal
    loading_amount: Decimal
    final_amount: Decimal
    billing_period: BillingPeriod

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tier": self.tier.value,
            "frequency": self.frequency.value,
            "age_band": self.age_band,
            "currency": self.currency,
            "base_amount": float(self.base_amount),
            "loading_amount": float(self.loading_amount),
            "final_amount": float(self.final_amount),
            "billing_period": self.billing_period.value,
        }


@dataclass(frozen=True)
class PremiumBreakdown:
    premium: str
    period_label: str
    base_premium: str
    loading: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "premium": self.premium,
            "period_label": self.period_label,
            "base_premium": self.base_premium,
            "loading": self.loading,
        }


def format_amount(amount: Decimal) -> str:
    return str(Decimal(amount).quantize(_CENTS, rounding=ROUND_HALF_UP))


def resolve_premium(
    tier: Union[CoverageTier, str],
    age: int,
    frequency: Union[PaymentFrequency, str],
    cfg: Optional[PricingConfig] = None,
) -> PremiumResult:
    """
    Resolve the premium payable per billing period.

    annual      : final = base
    semi-annual : final = base * (1 + loading) / divisor
    """
    cfg = cfg or PricingConfig()
    tier = CoverageTier(tier)
    frequency = PaymentFrequency(frequency)

    band = band_for(age)
    base = base_rate(tier, band)

    if frequency is PaymentFrequency.SEMI_ANNUAL:
        divisor = Decimal(cfg.semi_annual_divisor)
        final = base * cfg.loading_factor / divisor
        loading = final - base / divisor
        period = BillingPeriod.SIX_MONTHS
    else:
        final = base
        loading = Decimal(0)
        period = BillingPeriod.YEAR

    logger.debug("Resolved premium tier=%s age=%s band=%s frequency=%s final=%s", tier.value, age, band.label, frequency.value, final)

    return PremiumResult(
        tier=tier,
        frequency=frequency,
        age_band=band.label,
        currency=cfg.currency,
        base_amount=base,
        loading_amount=loading,
        final_amount=final,
        billing_period=period,
    )


def premium_breakdown(result: PremiumResult, cfg: Optional[PricingConfig] = None) -> PremiumBreakdown:
    """
    Display strings for the premium summary.

    Semi-annual results show the notional pre-loading amount (final / 1.02)
    and the loading on top of it.
    """
    cfg = cfg or PricingConfig()
    final = result.final_amount
    period_label = f"{result.currency} per {result.billing_period.value}"

    if result.frequency is PaymentFrequency.SEMI_ANNUAL:
        notional_base = final / cfg.loading_factor
        return PremiumBreakdown(
            premium=format_amount(final),
            period_label=period_label,
            base_premium=format_amount(notional_base),
            loading=format_amount(final - notional_base),
        )

    return PremiumBreakdown(
        premium=format_amount(final),
        period_label=period_label,
        base_premium=format_amount(final),
        loading=None,
    )
