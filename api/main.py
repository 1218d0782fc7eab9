from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Annotated, Any, Literal

from fastapi import Depends, FastAPI, HTTPException, Request, Security, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from pydantic import BaseModel, field_validator

from clinical_guard import (
    IdentifierDetectionResult,
    IdentifierReason,
    IdentifierScanner,
)
from clinical_guard.models import NAME_REASONS

logger = logging.getLogger(__name__)

# ── Configuration ────────────────────────────────────────────────────────────

_API_KEY = os.getenv("API_KEY")
_MAX_TEXT_CHARS = int(os.getenv("MAX_TEXT_CHARS", "20000"))
_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)

_NO_STORE = {"cache-control": "no-store"}


async def verify_api_key(key: Annotated[str | None, Security(_api_key_header)]) -> None:
    if not _API_KEY:
        return  # Auth disabled, no env var configured
    if key == _API_KEY:
        return
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or missing API key",
    )


# ── Pydantic models ──────────────────────────────────────────────────────────

Language = Literal["sv", "en"]


class DetectRequest(BaseModel):
    text: str
    detectors: list[IdentifierReason] | None = None


class MatchOut(BaseModel):
    reason: IdentifierReason
    match: str


class DetectResponse(BaseModel):
    has_identifiers: bool
    reasons: list[IdentifierReason]
    matches: list[MatchOut]


class GuardRequest(BaseModel):
    text: str = ""
    language: Language = "sv"

    @field_validator("text", mode="before")
    @classmethod
    def _text_or_empty(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("language", mode="before")
    @classmethod
    def _swedish_unless_english(cls, value: Any) -> Language:
        return "en" if value == "en" else "sv"


class GuardResponse(BaseModel):
    allowed: bool


# ── User-facing messages ─────────────────────────────────────────────────────

_MESSAGES: dict[str, dict[Language, str]] = {
    "text_required": {"sv": "Text krävs.", "en": "Text is required."},
    "text_too_long": {"sv": "Texten är för lång.", "en": "Text too long."},
    "precise_age": {
        "sv": (
            "Texten innehåller en exakt ålder. Byt ut exakt ålder mot ett "
            "intervall/decennium eller beskrivning och försök igen (t.ex. "
            "“i 40-årsåldern”, “20–30”, “yngre”, “medelålders”, “äldre”)."
        ),
        "en": (
            "Input contains a precise age. Replace exact age with a range/decade "
            "or a descriptor and try again (e.g. “in their 40s”, “20–30”, "
            "“young”, “middle-aged”, “older”)."
        ),
    },
    "pii_detected": {
        "sv": (
            "Texten verkar innehålla patientidentifierare. Ta bort identifierare "
            "och försök igen."
        ),
        "en": (
            "Input appears to contain patient identifiers. Remove identifiers "
            "and try again."
        ),
    },
}

_DETAIL_LABELS: dict[str, dict[Language, str]] = {
    "precise_age": {"sv": "Exakt ålder upptäckt", "en": "Precise age detected"},
    "name": {"sv": "Namn upptäckt", "en": "Name detected"},
    "date": {"sv": "Datum upptäckt", "en": "Date detected"},
    "temporal": {"sv": "Tidsreferens upptäckt", "en": "Temporal reference detected"},
    "other": {"sv": "Identifierare upptäckt", "en": "Identifier detected"},
}


def rejection_message(result: IdentifierDetectionResult, language: Language) -> str:
    """Explain a positive detection, naming the most telling match."""
    age = result.first_match(IdentifierReason.PRECISE_AGE)
    candidates = (
        ("precise_age", age),
        ("name", result.first_match(*NAME_REASONS)),
        ("date", result.first_match(IdentifierReason.DATE)),
        ("temporal", result.first_match(IdentifierReason.TEMPORAL_REFERENCE)),
        ("other", result.first_match()),
    )
    detail = next(
        (f"{_DETAIL_LABELS[kind][language]}: {m.match}" for kind, m in candidates if m),
        None,
    )
    base = _MESSAGES["precise_age" if age else "pii_detected"][language]
    return f"{base} ({detail})" if detail else base


def _error(status_code: int, error_key: str, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"errorKey": error_key, "error": message, **extra},
        headers=_NO_STORE,
    )


# ── Scanner singleton ────────────────────────────────────────────────────────

_scanner: IdentifierScanner | None = None


@asynccontextmanager
async def lifespan(_: FastAPI):
    global _scanner
    _scanner = IdentifierScanner()
    yield
    _scanner = None


def _get_scanner(detectors: list[IdentifierReason] | None) -> IdentifierScanner:
    if detectors is None:
        assert _scanner is not None
        return _scanner
    scanner = IdentifierScanner()
    for reason in set(IdentifierReason) - set(detectors):
        scanner.disable_detector(reason)
    return scanner


# ── FastAPI app ──────────────────────────────────────────────────────────────

app = FastAPI(title="clinical-guard", lifespan=lifespan)

_CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",")]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def guard_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # /guard answers every malformed body with an errorKey the web client reads.
    if request.url.path != "/guard":
        return await request_validation_exception_handler(request, exc)
    if any(err.get("type") == "json_invalid" for err in exc.errors()):
        return _error(400, "invalid_json", "Invalid JSON.")
    return _error(400, "text_required", _MESSAGES["text_required"]["sv"])


@app.get("/health")
async def health() -> dict[str, Any]:
    return {"status": "ok"}


@app.post(
    "/detect", response_model=DetectResponse, dependencies=[Depends(verify_api_key)]
)
async def detect(request: DetectRequest) -> DetectResponse:
    result = _get_scanner(request.detectors).scan(request.text)
    return DetectResponse(
        has_identifiers=result.has_identifiers,
        reasons=list(result.reasons),
        matches=[MatchOut(reason=m.reason, match=m.match) for m in result.matches],
    )


@app.post(
    "/guard", response_model=GuardResponse, dependencies=[Depends(verify_api_key)]
)
async def guard(request: GuardRequest) -> Any:
    text, language = request.text, request.language

    if not text.strip():
        return _error(400, "text_required", _MESSAGES["text_required"][language])

    if len(text) > _MAX_TEXT_CHARS:
        return _error(413, "text_too_long", _MESSAGES["text_too_long"][language])

    result = _get_scanner(None).scan(text)
    if result.has_identifiers:
        logger.info(
            "Rejected text of %d chars: %s",
            len(text),
            ", ".join(r.value for r in result.reasons),
        )
        return _error(
            400,
            "pii_detected",
            rejection_message(result, language),
            reasons=[r.value for r in result.reasons],
            detected=result.to_dict()["matches"],
        )

    return JSONResponse(content={"allowed": True}, headers=_NO_STORE)
