# src/first_care_quote/api/lambda_handler.py
"""
AWS Lambda handler for FastAPI using Mangum (ASGI adapter).

How it works:
- API Gateway invokes Lambda
- Mangum translates the event into an ASGI request
- FastAPI handles routing (/health, /options, /quote, ...)
- Response is returned back to API Gateway

Everything the calculator needs is static data loaded at import, so there is
nothing to warm up on cold start beyond logging.
"""

from __future__ import annotations

from mangum import Mangum

from first_care_quote.api.app import app
from first_care_quote.utils.config import configure_logging

configure_logging()

# Mangum handler
handler = Mangum(app)
