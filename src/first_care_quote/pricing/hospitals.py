# src/first_care_quote/pricing/hospitals.py
"""
Countries of residence and the premium hospital network.

A 40% co-payment applies at the hospitals listed for a country. A country
without an entry simply has no known surcharge hospitals.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Tuple


CO_PAYMENT_RATE = 0.40

SUPPORTED_COUNTRIES: Tuple[str, ...] = tuple(
    sorted(
        [
            "Thailand", "Vietnam", "Indonesia", "Malaysia", "Philippines",
            "Cambodia", "Laos", "Myanmar", "India", "Sri Lanka",
            "France", "Germany", "Italy", "Spain", "Netherlands",
        ]
    )
)

HOSPITAL_NETWORK: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "Thailand": ("Bumrungrad International Hospital", "First Western Hospital"),
        "Indonesia": ("BIMC Hospital, Kuta", "BIMC Hospital, Nusa Dua"),
        "Vietnam": ("Franco-Vietnamese Hospital",),
        "Philippines": (
            "Asian Hospital and Medical Center",
            "St Luke's Medical Center",
            "The Medical City",
            "Makati Medical Center",
        ),
        "India": ("Wockhardt Hospital",),
        "France": ("American Hospital of Paris", "Clinique Victor Hugo"),
    }
)


def hospitals_for(country: str) -> List[str]:
    # Exact key match; "thailand" or " Thailand" find nothing.
    return list(HOSPITAL_NETWORK.get(country, ()))
