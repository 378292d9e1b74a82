# src/first_care_quote/pricing/benefits.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from first_care_quote.pricing.rates import CoverageTier


INPATIENT_BENEFITS = (
    "Room & Board: Private Room",
    "Surgery: Full Refund",
    "ICU: Full Refund",
    "Physician Fees: Full Refund",
)

OUTPATIENT_BENEFITS = (
    "Consultations: Full Refund",
    "Diagnostics: Full Refund",
    "Medications: Full Refund",
    "Annual Limit: $2,500",
)

ADDITIONAL_BENEFITS = (
    "Emergency Evacuation",
    "Cancer Treatment",
    "Organ Transplant: $100,000",
    "Emergency Dental",
)

KEY_INFORMATION = (
    "Maximum coverage: $200,000 USD per year",
    "Inpatient deductible: $100 USD",
    "30-day waiting period for non-emergency treatments",
    "14-day free look period",
    "24/7 emergency assistance included",
)


@dataclass(frozen=True)
class BenefitsSummary:
    inpatient: List[str]
    additional: List[str]
    key_information: List[str]
    outpatient: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "inpatient": list(self.inpatient),
            "outpatient": list(self.outpatient),
            "additional": list(self.additional),
            "key_information": list(self.key_information),
        }


def benefits_for(tier: Union[CoverageTier, str]) -> BenefitsSummary:
    """
    Outpatient benefits are only part of the IP+OP tier.
    """
    tier = CoverageTier(tier)
    outpatient = list(OUTPATIENT_BENEFITS) if tier is CoverageTier.INPATIENT_PLUS_OUTPATIENT else []
    return BenefitsSummary(
        inpatient=list(INPATIENT_BENEFITS),
        outpatient=outpatient,
        additional=list(ADDITIONAL_BENEFITS),
        key_information=list(KEY_INFORMATION),
    )
