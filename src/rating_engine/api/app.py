# src/rating_engine/api/app.py
"""
FastAPI service for the Rating Engine (thin API wrapper).

Endpoints:
- POST    /rating-engine -> premium + breakdown + quoteId
- OPTIONS /rating-engine -> CORS preflight
- GET     /rates         -> active rate tables
- GET     /health

The API layer stays thin:
- decodes the JSON body
- calls rating_engine.engine.service
- maps errors to {"error": ...} responses
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Dict

from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from rating_engine.engine.service import get_service
from rating_engine.pricing.errors import RatingError
from rating_engine.pricing.quote import generate_quote_id
from rating_engine.utils.config import get_settings
from rating_engine.utils.logging_utils import configure_logging

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger("rating-engine")

RATING_PATH = "/rating-engine"

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]
CORS_HEADERS = {"Access-Control-Allow-Headers": ", ".join(CORS_ALLOW_HEADERS)}
# Restricted origins are echoed back per request by CORSMiddleware
if settings.cors_origins == ["*"]:
    CORS_HEADERS["Access-Control-Allow-Origin"] = "*"


# Load rate table once at startup
@asynccontextmanager
async def lifespan(_: FastAPI):
    get_service()
    yield


app = FastAPI(title="Rating Engine", version="0.1.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=CORS_ALLOW_HEADERS,
)


# -----------------------------
# Schemas
# -----------------------------
class Breakdown(BaseModel):
    baseRate: float
    stateMultiplier: float
    businessMultiplier: float
    revenue: float


class RatingResponse(BaseModel):
    premium: float
    quoteId: str
    breakdown: Breakdown


class ErrorResponse(BaseModel):
    error: str


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=CORS_HEADERS,
    )


# -----------------------------
# Routes
# -----------------------------
@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/rates")
def rates() -> Dict[str, Dict[str, float]]:
    return get_service().table.to_dict()


@app.options(RATING_PATH)
def rating_preflight() -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)


@app.post(
    RATING_PATH,
    response_model=RatingResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def rating_engine(request: Request) -> JSONResponse:
    try:
        body = await request.json()
        result = get_service().rate(body)
    except RatingError as exc:
        logger.warning("Rating request rejected", extra={"error": exc.message, "code": exc.code})
        return _error(exc.message, exc.status_code)
    except Exception:
        logger.exception("Error processing rating request")
        return _error("Internal server error", 500)

    out = result.to_dict()
    resp = RatingResponse(premium=out["premium"], quoteId=generate_quote_id(), breakdown=out["breakdown"])
    return JSONResponse(status_code=200, content=resp.model_dump(), headers=CORS_HEADERS)


@app.exception_handler(StarletteHTTPException)
async def rating_method_not_allowed(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == 405 and request.url.path == RATING_PATH:
        return _error("Method not allowed. Use POST.", 405)
    return await http_exception_handler(request, exc)
