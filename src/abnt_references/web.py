"""FastAPI JSON interface for ABNT formatting and validation.

Run with:
    uvicorn abnt_references.web:app --reload
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .citations import CitationFormatter
from .errors import InvalidRequestError
from .formatter import ReferenceFormatter
from .library import normalize_library_entries
from .metadata import abnt_reference_from_metadata
from .models import CitationFields
from .validation import validate_reference

logger = logging.getLogger(__name__)

app = FastAPI(title="ABNT References", description="Format and validate ABNT references")

reference_formatter = ReferenceFormatter()
citation_formatter = CitationFormatter()


class FormatRequest(BaseModel):
    type: Optional[str] = None
    data: Optional[Dict[str, Any]] = None


class ValidateRequest(BaseModel):
    reference: Optional[str] = None


class SyncRequest(BaseModel):
    references: Any = None
    userId: Optional[str] = None


class CitationRequest(BaseModel):
    author: str = ""
    year: str = ""
    page: Optional[str] = None
    quote: Optional[str] = None


def _failure(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})


@app.exception_handler(InvalidRequestError)
async def invalid_request_handler(_request: Request, exc: InvalidRequestError) -> JSONResponse:
    return _failure(400, str(exc))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    return _failure(400, "Malformed request body")


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error while serving %s", request.url.path)
    return _failure(500, "Internal error while processing the request")


@app.post("/api/references/format")
async def format_reference(payload: FormatRequest) -> Dict[str, Any]:
    """Format one reference from a source type and its field bag."""

    if not payload.type or payload.data is None:
        raise InvalidRequestError("Type and data are required")
    formatted = reference_formatter.format(payload.type, payload.data)
    return {"success": True, "formattedReference": formatted, "type": payload.type}


@app.post("/api/references/validate")
async def validate(payload: ValidateRequest) -> Dict[str, Any]:
    """Run the ABNT rule battery against a reference string."""

    if not payload.reference:
        raise InvalidRequestError("Reference is required")
    report = validate_reference(payload.reference)
    return {"success": True, **report.to_dict()}


@app.post("/api/references/sync")
async def sync_references(payload: SyncRequest) -> Dict[str, Any]:
    entries = normalize_library_entries(payload.references, user_id=payload.userId)
    synced_at = datetime.now(timezone.utc).isoformat()
    logger.info("Normalized %d library entries", len(entries))
    return {
        "success": True,
        "message": "References synced",
        "references": [entry.to_dict() for entry in entries],
        "syncedAt": synced_at,
    }


@app.post("/api/references/from-metadata")
async def reference_from_metadata(record: Dict[str, Any]) -> Dict[str, Any]:
    """Build a website reference from an extractor's page-metadata record."""

    return {
        "success": True,
        "abntReference": abnt_reference_from_metadata(record, formatter=reference_formatter),
    }


@app.post("/api/citations")
async def generate_citations(payload: CitationRequest) -> Dict[str, Any]:
    fields = CitationFields(
        author=payload.author, year=payload.year, page=payload.page, quote=payload.quote
    )
    citations: List[Dict[str, Any]] = [
        {
            "type": variant.key,
            "label": variant.label,
            "description": variant.description,
            "text": variant.text,
            "example": variant.example,
            "ready": variant.ready,
        }
        for variant in citation_formatter.generate(fields)
    ]
    return {"success": True, "citations": citations}


def main(host: str | None = None, port: int | None = None) -> None:
    """Run the FastAPI app using uvicorn."""

    import uvicorn

    from .settings import get_settings

    settings = get_settings()
    uvicorn.run(
        "abnt_references.web:app",
        host=host or settings.HOST,
        port=port or settings.PORT,
        reload=False,
    )


__all__ = ["app", "main"]
