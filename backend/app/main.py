"""
Thirty3 Labs Applications API
FastAPI application for talent and vendor applications.
"""

import logging

from fastapi import FastAPI, HTTPException
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.routers import applications
from app.db import APPLICATIONS_TABLE, get_supabase_admin, is_supabase_configured
from app.services.cors import LOCAL_DEV_PREFIX, get_allowed_origins

# Configure logging to output to console
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Thirty3 Labs Applications API",
    description="Talent and vendor application intake",
    version="0.1.0",
)

# CORS is negotiated inside the applications router rather than with
# CORSMiddleware: preflights must answer 200 for any origin and the allowed
# origin is echoed back verbatim.
app.include_router(applications.router, prefix=applications.APPLY_PREFIX, tags=["applications"])
app.add_exception_handler(StarletteHTTPException, applications.method_not_allowed_handler)


@app.on_event("startup")
async def log_startup_config() -> None:
    """Log the CORS origins in effect and whether Supabase is configured."""
    logger.info(
        "Applications API ready. Allowed origins: %s (+ %s*). Supabase configured: %s",
        ", ".join(get_allowed_origins()),
        LOCAL_DEV_PREFIX,
        is_supabase_configured(),
    )


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/health/db")
async def health_db():
    """
    Test the Supabase database connection.

    Executes a lightweight query (SELECT 1 row from applications) to verify
    that the service-role client can reach the database. Returns 503 on failure.
    """
    supabase_admin = get_supabase_admin()
    if supabase_admin is None:
        raise HTTPException(
            status_code=503,
            detail="Database client unavailable: SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY not configured",
        )

    try:
        supabase_admin.table(APPLICATIONS_TABLE).select("id").limit(1).execute()
        return {"status": "ok", "database": "reachable"}
    except Exception as exc:
        logger.error(f"Database health check failed: {exc}")
        raise HTTPException(
            status_code=503,
            detail="Database connection failed",
        )
