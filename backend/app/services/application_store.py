"""
Persists accepted applications to the Supabase applications table.

A single best-effort insert per request: no retries. Failures are logged
with the upstream detail and reported back as an InsertResult so the
router can answer with a generic 500 without leaking that detail.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx
from postgrest.exceptions import APIError
from postgrest.types import ReturnMethod

from app.db import APPLICATIONS_TABLE, get_supabase_admin
from app.models.application import ApplicationRecord

logger = logging.getLogger(__name__)


@dataclass
class InsertResult:
    ok: bool
    code: Optional[str] = None
    detail: Optional[str] = None


def insert_application(record: ApplicationRecord) -> InsertResult:
    """
    Insert one application row with ``Prefer: return=minimal``.

    The service-role client sends the key as both the ``apikey`` header and
    the ``Authorization: Bearer`` token.
    """
    client = get_supabase_admin()
    if client is None:
        logger.error("Supabase client unavailable: SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY not set")
        return InsertResult(ok=False, detail="not_configured")

    row = record.to_row()

    try:
        client.table(APPLICATIONS_TABLE).insert(
            row, returning=ReturnMethod.minimal
        ).execute()
    except APIError as exc:
        logger.error(
            f"Supabase insert error: code={exc.code!r} message={exc.message!r} "
            f"details={exc.details!r} hint={exc.hint!r}"
        )
        return InsertResult(ok=False, code=str(exc.code), detail=exc.message)
    except httpx.HTTPError as exc:
        logger.error(f"Supabase insert request failed: {exc!r}")
        return InsertResult(ok=False, detail=str(exc))

    logger.info(f"Saved {record.type.value} application")
    return InsertResult(ok=True)
