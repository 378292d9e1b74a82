"""Pytest fixtures for the First Care premium calculator tests."""

import pytest
from fastapi.testclient import TestClient

from first_care_quote.api.app import app
from first_care_quote.pricing.config import PricingConfig
from first_care_quote.service.calculator import CalculatorState
from first_care_quote.service.schemas import FormInput


@pytest.fixture
def pricing_config() -> PricingConfig:
    """Default pricing configuration."""
    return PricingConfig()


@pytest.fixture
def default_form() -> FormInput:
    """Form as first shown to the user."""
    return FormInput()


@pytest.fixture
def calculator(pricing_config: PricingConfig) -> CalculatorState:
    """Fresh calculator state with default inputs."""
    return CalculatorState(cfg=pricing_config)


@pytest.fixture
def client() -> TestClient:
    """HTTP client for the FastAPI app."""
    return TestClient(app)
