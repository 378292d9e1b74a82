# src/first_care_quote/pricing/eligibility.py
"""
Advisory eligibility notices.

Rules are evaluated independently and in declaration order; any number may
fire. They never block a premium from being computed.
"""

from __future__ import annotations

from typing import Any, List, Optional

from first_care_quote.pricing.config import PricingConfig


PRE_EXISTING_WARNING = "Pre-existing conditions are not covered under this policy."


def age_warning(max_age: int) -> str:
    return f"Age exceeds the maximum enrollment age of {max_age} years."


def warnings_for(form: Any, cfg: Optional[PricingConfig] = None) -> List[str]:
    """
    form: anything exposing `age` and `has_pre_existing_condition`
    (normally a FormInput).
    """
    cfg = cfg or PricingConfig()
    warnings: List[str] = []

    if form.age > cfg.max_enrollment_age:
        warnings.append(age_warning(cfg.max_enrollment_age))

    if form.has_pre_existing_condition:
        warnings.append(PRE_EXISTING_WARNING)

    return warnings
