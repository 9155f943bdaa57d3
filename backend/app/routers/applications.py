"""
Talent & vendor application router.

Single public endpoint used by the site's "work with us" forms. Accepted
submissions are inserted into the Supabase applications table.

Endpoints:
  OPTIONS /  : CORS preflight, always 200 with an empty body
  POST    /  : submit an application
  anything else → 405 {"error": "Method not allowed"} (see method_not_allowed_handler)

Responses:
  200 {"ok": true}                                   saved, or honeypot hit
  400 {"error": "Missing request body"}              empty / non-JSON body
  400 {"error": "Validation failed", "details": [...]}
  500 {"error": "..."}                               config / upstream / unexpected
"""

import logging
from typing import Dict, Optional

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.db import is_supabase_configured
from app.models.application import ApplicationSubmission
from app.services.application_shaper import build_application_record
from app.services.application_store import insert_application
from app.services.application_validator import (
    is_honeypot_triggered,
    validate_application,
)
from app.services.cors import cors_headers
from app.services.sanitizer import sanitize_submission

logger = logging.getLogger(__name__)

router = APIRouter()

APPLY_PREFIX = "/api/apply"

# Common methods land on the handler; anything else (TRACE, custom verbs)
# is routed to method_not_allowed_handler by Starlette's 405
_ROUTE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _json(status_code: int, content: dict, headers: Dict[str, str]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def _parse_submission(raw: bytes) -> Optional[ApplicationSubmission]:
    """
    Parse the request body into an ApplicationSubmission.

    Returns None for an empty body, invalid JSON, or JSON that is not an
    object; the caller answers all three with "Missing request body".
    """
    if not raw or not raw.strip():
        return None
    try:
        return ApplicationSubmission.model_validate_json(raw)
    except ValidationError:
        return None


def _client_ip(request: Request) -> Optional[str]:
    """Left-most X-Forwarded-For entry (the original client), else X-Real-IP."""
    xff = request.headers.get("x-forwarded-for")
    if xff:
        return xff.split(",")[0].strip() or None
    xrip = request.headers.get("x-real-ip")
    if xrip:
        return xrip.strip() or None
    return None


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

@router.api_route("", methods=_ROUTE_METHODS)
async def submit_application(request: Request) -> Response:
    """
    Handle one application submission end to end.

    Order matters: CORS headers are computed first so they ride on every
    response, the config check runs before the body is touched, and the
    honeypot check runs before validation so bots get a plain 200.
    """
    headers = cors_headers(request.headers.get("origin", ""))

    if request.method == "OPTIONS":
        return Response(status_code=200, headers=headers)
    if request.method != "POST":
        return _json(405, {"error": "Method not allowed"}, headers)

    if not is_supabase_configured():
        logger.error("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
        return _json(500, {"error": "Server configuration error"}, headers)

    try:
        submission = _parse_submission(await request.body())
        if submission is None:
            return _json(400, {"error": "Missing request body"}, headers)

        application = sanitize_submission(submission)

        # Honeypot: accept silently, no validation and no write
        if is_honeypot_triggered(application):
            logger.info(f"Honeypot triggered from {_client_ip(request)!r}; submission discarded")
            return _json(200, {"ok": True}, headers)

        result = validate_application(application)
        if not result.is_valid:
            logger.info(f"Application rejected: {result.errors}")
            return _json(
                400,
                {"error": "Validation failed", "details": result.errors},
                headers,
            )

        record = build_application_record(
            application,
            ip_address=_client_ip(request),
            user_agent=request.headers.get("user-agent"),
        )

        # supabase-py is synchronous; keep the insert off the event loop
        saved = await run_in_threadpool(insert_application, record)
        if not saved.ok:
            return _json(500, {"error": "Failed to save application"}, headers)

        return _json(200, {"ok": True}, headers)

    except Exception:
        logger.exception("Application handler error")
        return _json(500, {"error": "Internal server error"}, headers)


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """
    App-level handler for Starlette HTTP errors.

    A 405 on the apply endpoint (methods the route does not list) gets the
    same JSON body and CORS headers as the in-handler 405. Every other error
    falls through to FastAPI's default {"detail": ...} response.
    """
    if exc.status_code == 405 and request.url.path.rstrip("/") == APPLY_PREFIX:
        headers = cors_headers(request.headers.get("origin", ""))
        return _json(405, {"error": "Method not allowed"}, headers)
    return await http_exception_handler(request, exc)
