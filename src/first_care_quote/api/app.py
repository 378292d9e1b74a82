# src/first_care_quote/api/app.py
"""
FastAPI service for the First Care 200 premium calculator (thin API wrapper).

Endpoints:
- GET  /health
- GET  /options              -> countries, coverage tiers, payment frequencies
- POST /quote                -> premium, breakdown, warnings, hospitals, benefits
- GET  /hospitals/{country}  -> hospitals with a 40% co-payment
- GET  /benefits?tier=IP     -> benefits summary for a tier
- GET  /rates                -> full rate sheet

The API layer stays thin:
- validates input
- calls first_care_quote.service.calculator
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Query
from pydantic import BaseModel, Field, field_validator

from first_care_quote.pricing.benefits import benefits_for
from first_care_quote.pricing.config import PricingConfig
from first_care_quote.pricing.hospitals import CO_PAYMENT_RATE, SUPPORTED_COUNTRIES, hospitals_for
from first_care_quote.pricing.quote import PaymentFrequency
from first_care_quote.pricing.rates import CoverageTier, rate_sheet
from first_care_quote.service.calculator import quote_for_form
from first_care_quote.service.schemas import FormInput
from first_care_quote.utils.config import configure_logging

logger = logging.getLogger(__name__)

PRICING = PricingConfig()

app = FastAPI(title="First Care 200 Premium Calculator", version="0.1.0")


@app.on_event("startup")
def _startup() -> None:
    configure_logging()


# -----------------------------
# Schemas
# -----------------------------
class QuoteRequest(BaseModel):
    age: int = Field(30, ge=0, le=100)
    nationality: str = ""
    country_of_residence: str = ""
    has_pre_existing_condition: bool = False
    coverage_tier: CoverageTier = CoverageTier.INPATIENT_ONLY
    payment_frequency: PaymentFrequency = PaymentFrequency.ANNUAL

    @field_validator("country_of_residence")
    @classmethod
    def _known_country(cls, v: str) -> str:
        if v and v not in SUPPORTED_COUNTRIES:
            raise ValueError(f"Unsupported country of residence: {v!r}")
        return v

    def to_form(self) -> FormInput:
        return FormInput(
            age=self.age,
            nationality=self.nationality,
            country_of_residence=self.country_of_residence,
            has_pre_existing_condition=self.has_pre_existing_condition,
            coverage_tier=self.coverage_tier,
            payment_frequency=self.payment_frequency,
        )


class QuoteResponse(BaseModel):
    form: Dict[str, Any]
    premium: Dict[str, Any]
    breakdown: Dict[str, Any]
    warnings: List[str] = Field(default_factory=list)
    hospitals: List[str] = Field(default_factory=list)
    co_payment_rate: float
    benefits: Dict[str, List[str]]


class Option(BaseModel):
    value: str
    label: str


class OptionsResponse(BaseModel):
    countries: List[str]
    coverage_tiers: List[Option]
    payment_frequencies: List[Option]


class HospitalsResponse(BaseModel):
    country: str
    co_payment_rate: float
    hospitals: List[str]


# -----------------------------
# Routes
# -----------------------------
@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok", "product": PRICING.product_name}


@app.get("/options", response_model=OptionsResponse)
def options() -> OptionsResponse:
    return OptionsResponse(
        countries=list(SUPPORTED_COUNTRIES),
        coverage_tiers=[Option(value=t.value, label=t.display_name) for t in CoverageTier],
        payment_frequencies=[Option(value=f.value, label=f.display_name) for f in PaymentFrequency],
    )


@app.post("/quote", response_model=QuoteResponse)
def quote(req: QuoteRequest) -> QuoteResponse:
    view = quote_for_form(req.to_form(), cfg=PRICING)
    out = view.to_dict()
    if out["warnings"]:
        logger.info("Quote issued with %d eligibility warning(s)", len(out["warnings"]))
    return QuoteResponse(**out)


@app.get("/hospitals/{country}", response_model=HospitalsResponse)
def hospitals(country: str) -> HospitalsResponse:
    return HospitalsResponse(country=country, co_payment_rate=CO_PAYMENT_RATE, hospitals=hospitals_for(country))


@app.get("/benefits")
def benefits(tier: CoverageTier = Query(CoverageTier.INPATIENT_ONLY)) -> Dict[str, List[str]]:
    return benefits_for(tier).to_dict()


@app.get("/rates")
def rates() -> Dict[str, Any]:
    records = json.loads(rate_sheet().to_json(orient="records"))
    return {"currency": PRICING.currency, "rates": records}
