# src/first_care_quote/pricing/rates.py
"""
Annual base premiums (USD) from the First Care 200 policy document.

The table is indexed by coverage tier, then by age band label, and must be
complete for every tier x band pair. A gap is a programming error: it is
checked once at import and again on every lookup.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Union

import pandas as pd

from first_care_quote.pricing.bands import AGE_BANDS, AGE_BAND_LABELS, AgeBand


class RateTableError(LookupError):
    """Raised when the rate table has no entry for a tier/band pair."""


class CoverageTier(str, Enum):
    INPATIENT_ONLY = "IP"
    INPATIENT_PLUS_OUTPATIENT = "IP+OP"

    @property
    def display_name(self) -> str:
        return _TIER_NAMES[self]


_TIER_NAMES = {
    CoverageTier.INPATIENT_ONLY: "Inpatient Only",
    CoverageTier.INPATIENT_PLUS_OUTPATIENT: "Inpatient + Outpatient",
}


def _amounts(values: Dict[str, int]) -> Mapping[str, Decimal]:
    return MappingProxyType({band: Decimal(v) for band, v in values.items()})


RATE_TABLE: Mapping[CoverageTier, Mapping[str, Decimal]] = MappingProxyType(
    {
        CoverageTier.INPATIENT_ONLY: _amounts(
            {
                "0-3": 440, "4-18": 380, "19-25": 419, "26-30": 474,
                "31-35": 566, "36-40": 656, "41-45": 768, "46-50": 901,
                "51-55": 1069, "56-60": 1275, "61-65": 1560, "66-70": 1984,
                "71-75": 2335, "76-80": 2900, "81-85": 3600, "86-90": 4200,
                "91-95": 5100, "96-100": 6500,
            }
        ),
        CoverageTier.INPATIENT_PLUS_OUTPATIENT: _amounts(
            {
                "0-3": 1309, "4-18": 818, "19-25": 765, "26-30": 893,
                "31-35": 1020, "36-40": 1148, "41-45": 1339, "46-50": 1466,
                "51-55": 1785, "56-60": 2550, "61-65": 3432, "66-70": 4365,
                "71-75": 5137, "76-80": 6380, "81-85": 7920, "86-90": 9240,
                "91-95": 11220, "96-100": 14300,
            }
        ),
    }
)


def check_rate_table(table: Mapping[CoverageTier, Mapping[str, Decimal]] = RATE_TABLE) -> None:
    """
    Every tier must price every band with a positive amount.
    """
    problems = []
    for tier in CoverageTier:
        rates = table.get(tier)
        if rates is None:
            problems.append(f"{tier.value}: tier missing")
            continue
        missing = [label for label in AGE_BAND_LABELS if label not in rates]
        if missing:
            problems.append(f"{tier.value}: missing bands {missing}")
        bad = [label for label, amount in rates.items() if amount <= 0]
        if bad:
            problems.append(f"{tier.value}: non-positive amounts for {bad}")
    if problems:
        raise RateTableError("Incomplete rate table: " + "; ".join(problems))


check_rate_table()


def base_rate(tier: Union[CoverageTier, str], band: Union[AgeBand, str]) -> Decimal:
    """
    Annual base premium for a tier and age band.
    """
    tier = CoverageTier(tier)
    label = band.label if isinstance(band, AgeBand) else str(band)
    try:
        return RATE_TABLE[tier][label]
    except KeyError as e:
        raise RateTableError(f"No rate for tier={tier.value!r} band={label!r}") from e


def rate_sheet() -> pd.DataFrame:
    """
    Rate table as a published sheet: one row per age band, one column per tier.
    """
    rows = []
    for band in AGE_BANDS:
        row: Dict[str, object] = {
            "age_band": band.label,
            "age_from": band.lower,
            "age_to": band.upper,
        }
        for tier in CoverageTier:
            row[tier.value] = float(RATE_TABLE[tier][band.label])
        rows.append(row)
    return pd.DataFrame(rows, columns=["age_band", "age_from", "age_to"] + [t.value for t in CoverageTier])
