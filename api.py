"""
to_words — FastAPI Server
=========================

HTTP API for spelling numbers and currency amounts as words.

Endpoints:
    POST /convert           Convert one number to words
    GET  /locales           List available locale codes
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional, Union

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from to_words import __version__
from to_words.config import Settings, load_settings
from to_words.converter import ToWords
from to_words.exceptions import (
    IncompleteLocaleDefinitionError,
    InvalidNumberError,
    ToWordsError,
    UnknownLocaleError,
)
from to_words.locales import available_locales, get_locale
from to_words.models import ConversionOptions

load_dotenv()

logger = logging.getLogger(__name__)


# ─── Application Lifespan (pre-load default locale) ─────────────────

_settings: Settings | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Read settings and warm the default locale on startup."""
    global _settings  # noqa: PLW0603
    _settings = load_settings()
    logging.basicConfig(level=_settings.log_level)
    get_locale(_settings.default_locale)
    yield
    _settings = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="to_words API",
    description=(
        "Spell numbers as words in a target language, "
        "optionally as a currency amount with major and minor units."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    # Strings keep every digit; JSON numbers are parsed as doubles
    value: Union[int, float, str] = Field(
        ...,
        description="The number to convert. Pass a string to keep full precision.",
        json_schema_extra={"example": "37.06"},
    )
    locale: Optional[str] = Field(
        default=None,
        description="Locale code, e.g. 'lv-LV'. Defaults to TO_WORDS_LOCALE.",
    )
    options: ConversionOptions = Field(default_factory=ConversionOptions)


class ConvertResponse(BaseModel):
    """The spelled-out number."""

    value: str
    locale: str
    words: str

    model_config = {"json_schema_extra": {"example": {
        "value": "37.06",
        "locale": "lv-LV",
        "words": "trīsdesmit septiņi eiro un seši centi",
    }}}


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: dict = Field(default_factory=dict)


class LocalesResponse(BaseModel):
    locales: list[str]


class HealthResponse(BaseModel):
    status: str
    version: str
    default_locale: str


# ─── Error Handling ──────────────────────────────────────────────────

_STATUS_BY_ERROR: dict[type[ToWordsError], int] = {
    InvalidNumberError: 422,
    UnknownLocaleError: 404,
    IncompleteLocaleDefinitionError: 500,
}


@app.exception_handler(ToWordsError)
async def _to_words_error_handler(request: Request, exc: ToWordsError) -> JSONResponse:
    status_code = _STATUS_BY_ERROR.get(type(exc), 400)
    if status_code >= 500:
        logger.error("Conversion failed: %s", exc, extra={"details": exc.details})
    body = ErrorResponse(code=exc.code, message=str(exc), details=exc.details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_settings() -> Settings:
    return _settings if _settings is not None else load_settings()


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Convert a number to words",
    tags=["Conversion"],
    responses={
        404: {"model": ErrorResponse, "description": "Unknown locale code"},
        422: {"model": ErrorResponse, "description": "Value is not a finite number"},
    },
)
def convert(request: ConvertRequest) -> ConvertResponse:
    """Spell `value` in the requested locale.

    Options (snake_case or camelCase):
    - **currency**: render as major and minor currency units
    - **ignoreDecimal**: drop the fraction without rounding
    - **ignoreZeroCurrency**: render a zero amount as an empty string
    - **doNotAddOnly**: suppress the locale's "only" word
    """
    locale_code = request.locale or _get_settings().default_locale
    words = ToWords(locale_code).convert(request.value, request.options)
    return ConvertResponse(value=str(request.value), locale=locale_code, words=words)


@app.get("/locales", summary="List available locales", tags=["System"])
def list_locales() -> LocalesResponse:
    return LocalesResponse(locales=available_locales())


@app.get("/health", summary="Health check", tags=["System"])
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        default_locale=_get_settings().default_locale,
    )
