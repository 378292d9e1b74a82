# src/first_care_quote/pricing/config.py
"""
Pricing configuration for the First Care 200 calculator.

- currency: all rate table amounts are USD
- semi_annual_loading: extra charged when paying twice a year (+2%)
- semi_annual_divisor: number of instalments per year for semi-annual billing
- max_enrollment_age: ages above this trigger an eligibility warning
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PricingConfig:
    product_name: str = "Pacific Cross First Care 200"
    currency: str = "USD"

    # final = base * (1 + semi_annual_loading) / semi_annual_divisor
    semi_annual_loading: Decimal = Decimal("0.02")
    semi_annual_divisor: int = 2

    # Advisory only, never blocks a quote
    max_enrollment_age: int = 55

    @property
    def loading_factor(self) -> Decimal:
        return Decimal(1) + self.semi_annual_loading
