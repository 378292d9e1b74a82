# src/first_care_quote/service/calculator.py
"""
Calculator state for the First Care 200 premium widget.

Single source of truth:
- FormInput (current field values) -> PremiumResult (derived)
- FormInput -> warnings / hospitals / benefits (derived on read)

Every update replaces the FormInput wholesale and recomputes the premium
before returning, so a reader never observes a stale premium.
"""

from __future__ import annotations

import logging
from dataclasses import fields, replace
from typing import Any, Callable, Dict, List, Optional

from first_care_quote.pricing.benefits import BenefitsSummary, benefits_for
from first_care_quote.pricing.config import PricingConfig
from first_care_quote.pricing.eligibility import warnings_for
from first_care_quote.pricing.hospitals import CO_PAYMENT_RATE, hospitals_for
from first_care_quote.pricing.quote import (
    PaymentFrequency,
    PremiumBreakdown,
    PremiumResult,
    premium_breakdown,
    resolve_premium,
)
from first_care_quote.pricing.rates import CoverageTier
from first_care_quote.service.schemas import CalculatorView, FormInput

logger = logging.getLogger(__name__)

FORM_FIELDS = frozenset(f.name for f in fields(FormInput))

Listener = Callable[["CalculatorState"], None]


_BOOL_MAP = {
    "true": True,
    "false": False,
    "yes": True,
    "no": False,
    "1": True,
    "0": False,
}


def _to_bool(val: Any) -> bool:
    if isinstance(val, bool):
        return val
    if isinstance(val, str):
        key = val.strip().lower()
        if key in _BOOL_MAP:
            return _BOOL_MAP[key]
        raise ValueError(f"Cannot interpret {val!r} as a yes/no value")
    return bool(val)


def _coerce(name: str, value: Any) -> Any:
    if name == "age":
        if value is None or isinstance(value, bool):
            raise ValueError(f"age must be a whole number, got {value!r}")
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"age must be a whole number, got {value!r}")
        return int(value)
    if name == "has_pre_existing_condition":
        return _to_bool(value)
    if name == "coverage_tier":
        return CoverageTier(value)
    if name == "payment_frequency":
        return PaymentFrequency(value)
    return "" if value is None else str(value)


def _premium_for(form: FormInput, cfg: PricingConfig) -> PremiumResult:
    return resolve_premium(form.coverage_tier, form.age, form.payment_frequency, cfg=cfg)


class CalculatorState:
    """
    Holds the current form and the premium derived from it.

    The rendering layer is the only caller of update()/set_field(); it may
    subscribe() to be told when a recomputation has completed.
    """

    def __init__(self, form: Optional[FormInput] = None, cfg: Optional[PricingConfig] = None) -> None:
        self._cfg = cfg or PricingConfig()
        self._form = form or FormInput()
        self._premium = _premium_for(self._form, self._cfg)
        self._listeners: List[Listener] = []

    @property
    def config(self) -> PricingConfig:
        return self._cfg

    @property
    def form(self) -> FormInput:
        return self._form

    @property
    def premium(self) -> PremiumResult:
        return self._premium

    @property
    def breakdown(self) -> PremiumBreakdown:
        return premium_breakdown(self._premium, cfg=self._cfg)

    @property
    def warnings(self) -> List[str]:
        return warnings_for(self._form, cfg=self._cfg)

    @property
    def hospitals(self) -> List[str]:
        return hospitals_for(self._form.country_of_residence)

    @property
    def benefits(self) -> BenefitsSummary:
        return benefits_for(self._form.coverage_tier)

    def update(self, **changes: Any) -> "CalculatorState":
        """
        Apply one or more field edits, then recompute the premium.

        Unknown fields or uncoercible values raise ValueError and leave the
        state untouched.
        """
        unknown = sorted(set(changes) - FORM_FIELDS)
        if unknown:
            raise ValueError(f"Unknown form field(s): {unknown}. Expected one of {sorted(FORM_FIELDS)}")

        coerced: Dict[str, Any] = {name: _coerce(name, value) for name, value in changes.items()}
        new_form = replace(self._form, **coerced)
        new_premium = _premium_for(new_form, self._cfg)

        self._form = new_form
        self._premium = new_premium
        logger.debug("Calculator updated fields=%s premium=%s", sorted(coerced), new_premium.final_amount)

        self._notify()
        return self

    def _notify(self) -> None:
        # State is already committed; a failing listener is logged and skipped.
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Calculator listener %r failed", listener)

    def set_field(self, name: str, value: Any) -> "CalculatorState":
        return self.update(**{name: value})

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback run after every completed update.
        Returns a function that removes it again.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def view(self) -> CalculatorView:
        return CalculatorView(
            form=self._form,
            premium=self._premium,
            breakdown=self.breakdown,
            warnings=self.warnings,
            hospitals=self.hospitals,
            co_payment_rate=CO_PAYMENT_RATE,
            benefits=self.benefits,
        )


def quote_for_form(form: FormInput, cfg: Optional[PricingConfig] = None) -> CalculatorView:
    """
    Convenience: one-shot view for a complete form (used by the HTTP API).
    """
    return CalculatorState(form=form, cfg=cfg).view()


def quote_for_form_dict(form: Dict[str, Any], cfg: Optional[PricingConfig] = None) -> Dict[str, Any]:
    """
    Convenience: raw field dict in, JSON-ready dict out.
    """
    state = CalculatorState(cfg=cfg)
    state.update(**form)
    return state.view().to_dict()
