# src/first_care_quote/service/schemas.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from first_care_quote.pricing.benefits import BenefitsSummary
from first_care_quote.pricing.quote import PaymentFrequency, PremiumBreakdown, PremiumResult
from first_care_quote.pricing.rates import CoverageTier


@dataclass(frozen=True)
class FormInput:
    age: int = 30
    nationality: str = ""
    country_of_residence: str = ""
    has_pre_existing_condition: bool = False
    coverage_tier: CoverageTier = CoverageTier.INPATIENT_ONLY
    payment_frequency: PaymentFrequency = PaymentFrequency.ANNUAL

    def __post_init__(self) -> None:
        # Frozen: enum values given as plain strings are converted in place
        object.__setattr__(self, "coverage_tier", CoverageTier(self.coverage_tier))
        object.__setattr__(self, "payment_frequency", PaymentFrequency(self.payment_frequency))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "age": self.age,
            "nationality": self.nationality,
            "country_of_residence": self.country_of_residence,
            "has_pre_existing_condition": self.has_pre_existing_condition,
            "coverage_tier": self.coverage_tier.value,
            "payment_frequency": self.payment_frequency.value,
        }


@dataclass(frozen=True)
class CalculatorView:
    form: FormInput
    premium: PremiumResult
    breakdown: PremiumBreakdown
    warnings: List[str]
    hospitals: List[str]
    co_payment_rate: float
    benefits: BenefitsSummary

    def to_dict(self) -> Dict[str, Any]:
        return {
            "form": self.form.to_dict(),
            "premium": self.premium.to_dict(),
            "breakdown": self.breakdown.to_dict(),
            "warnings": list(self.warnings),
            "hospitals": list(self.hospitals),
            "co_payment_rate": self.co_payment_rate,
            "benefits": self.benefits.to_dict(),
        }
