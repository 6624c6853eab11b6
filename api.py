"""
numbers_into_words — FastAPI Server
===================================

HTTP front end for the number-to-words converter.

Endpoints:
    GET  /words/{value}     Convert one number (?policy=none|last|below1k|all)
    POST /convert           Convert a batch of raw inputs, CLI semantics
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from numbers_into_words import __version__
from numbers_into_words.arguments import parse_number
from numbers_into_words.config import Settings
from numbers_into_words.exceptions import NumberWordsError
from numbers_into_words.models import (
    MAX_VALUE,
    ConjunctionPolicy,
    Conversion,
    InputFinding,
)
from numbers_into_words.pipeline import ConversionPipeline

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass

logger = logging.getLogger(__name__)


# ─── Application Lifespan ───────────────────────────────────────────

_pipeline: ConversionPipeline | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Read settings once and build the shared pipeline on startup."""
    global _pipeline  # noqa: PLW0603
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level)
    _pipeline = ConversionPipeline(default_policy=settings.default_policy)
    yield
    _pipeline = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="numbers_into_words API",
    description=(
        "Converts unsigned 64-bit integers to English words, with a "
        "configurable placement of the conjunction \"and\"."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    inputs: list[str] = Field(
        ...,
        min_length=1,
        description="Raw tokens, exactly as they would be passed on the command line.",
        json_schema_extra={"example": ["234", "92,582,349", "--and=last"]},
    )
    policy: Optional[str] = Field(
        default=None,
        description="Default \"and\" policy; an --and= token in inputs still wins.",
        json_schema_extra={"example": "all"},
    )


class ConvertResponse(BaseModel):
    """Batch result: conversions and rejected inputs, both in input order."""

    policy: ConjunctionPolicy
    is_valid: bool
    conversions: list[Conversion]
    errors: list[InputFinding]


class HealthResponse(BaseModel):
    status: str
    version: str
    max_value: int
    default_policy: ConjunctionPolicy


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_pipeline() -> ConversionPipeline:
    if _pipeline is None:
        raise HTTPException(status_code=503, detail="Pipeline not initialised")
    return _pipeline


def _unprocessable(exc: NumberWordsError) -> HTTPException:
    return HTTPException(
        status_code=422, detail={"code": exc.code, "message": exc.message}
    )


def _resolve_policy(token: Optional[str], fallback: ConjunctionPolicy) -> ConjunctionPolicy:
    if token is None:
        return fallback
    try:
        return ConjunctionPolicy.from_token(token)
    except NumberWordsError as exc:
        raise _unprocessable(exc) from exc


# ─── Endpoints ───────────────────────────────────────────────────────


@app.get(
    "/words/{value}",
    summary="Convert a single number to words",
    tags=["Conversion"],
    responses={
        422: {"description": "Value is not a number, too big, or policy unknown"},
        503: {"description": "Pipeline not yet initialised"},
    },
)
def convert_one(value: str, policy: Optional[str] = None) -> Conversion:
    """Convert one number. Separators are ignored, so `1,000` and `1_000` work."""
    pipeline = _get_pipeline()
    resolved = _resolve_policy(policy, pipeline.default_policy)
    try:
        number = parse_number(value)
    except NumberWordsError as exc:
        logger.info("Rejected /words value %r: %s", value, exc.code)
        raise _unprocessable(exc) from exc
    return pipeline.convert(number, resolved)


@app.post(
    "/convert",
    summary="Convert a batch of raw inputs",
    tags=["Conversion"],
    responses={
        422: {"description": "Unknown default policy or malformed body"},
        503: {"description": "Pipeline not yet initialised"},
    },
)
def convert_batch(request: ConvertRequest) -> ConvertResponse:
    """Run the command-line pipeline over `inputs`.

    Bad inputs do not fail the request; they are listed under **errors**
    and every other input is still converted.
    """
    pipeline = _get_pipeline()
    policy = _resolve_policy(request.policy, pipeline.default_policy)
    report = ConversionPipeline(default_policy=policy).run(request.inputs)
    return ConvertResponse(
        policy=report.policy,
        is_valid=report.is_valid,
        conversions=report.conversions,
        errors=report.errors,
    )


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Pipeline not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    pipeline = _get_pipeline()
    return HealthResponse(
        status="healthy",
        version=__version__,
        max_value=MAX_VALUE,
        default_policy=pipeline.default_policy,
    )
