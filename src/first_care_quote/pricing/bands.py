# src/first_care_quote/pricing/bands.py
"""
Age banding for the rate table.

Eighteen fixed, contiguous bands cover ages 0-100. A band ends at its
boundary and starts one year after the previous boundary:

    0-3, 4-18, 19-25, 26-30, ..., 91-95, 96-100

Ages above the last boundary saturate to the top band.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np


AGE_BOUNDARIES: Tuple[int, ...] = (3, 18, 25, 30, 35, 40, 45, 50, 55, 60, 65, 70, 75, 80, 85, 90, 95, 100)

_BOUNDARY_ARRAY = np.asarray(AGE_BOUNDARIES, dtype=np.int64)


@dataclass(frozen=True)
class AgeBand:
    lower: int
    upper: int

    @property
    def label(self) -> str:
        return f"{self.lower}-{self.upper}"

    def contains(self, age: int) -> bool:
        return self.lower <= age <= self.upper

    def __str__(self) -> str:
        return self.label


def _build_bands(boundaries: Tuple[int, ...]) -> Tuple[AgeBand, ...]:
    bands = []
    lower = 0
    for upper in boundaries:
        bands.append(AgeBand(lower=lower, upper=upper))
        lower = upper + 1
    return tuple(bands)


AGE_BANDS: Tuple[AgeBand, ...] = _build_bands(AGE_BOUNDARIES)
AGE_BAND_LABELS: Tuple[str, ...] = tuple(b.label for b in AGE_BANDS)


def band_for(age: int) -> AgeBand:
    """
    Return the band ending at the first boundary >= age.

    searchsorted(side="left") gives exactly that index on the ascending
    boundary array; anything past the end falls back to the last band.
    """
    idx = int(np.searchsorted(_BOUNDARY_ARRAY, int(age), side="left"))
    if idx >= len(AGE_BANDS):
        return AGE_BANDS[-1]
    return AGE_BANDS[idx]
