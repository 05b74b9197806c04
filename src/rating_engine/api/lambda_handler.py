# src/rating_engine/api/lambda_handler.py
"""
AWS Lambda handler for FastAPI using Mangum (ASGI adapter).

How it works:
- API Gateway invokes Lambda
- Mangum translates the event into an ASGI request
- FastAPI handles routing (/rating-engine, /rates, /health)
- Response is returned back to API Gateway

Rate table loading:
- get_service() is triggered at import time (cold start) so the table is ready.
- Set RATE_TABLE_PATH to ship a custom table with the function package.
"""

from __future__ import annotations

from mangum import Mangum

from rating_engine.api.app import app
from rating_engine.engine.service import get_service
from rating_engine.utils.config import get_settings


# Warm up / pre-load the rate table at cold start for lower first-request latency.
if get_settings().preload_rate_table:
    get_service()


# Mangum handler
handler = Mangum(app)
