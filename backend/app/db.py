"""
Database client configuration.
Uses Supabase (PostgREST) as the store for submitted applications.

Environment variables
---------------------
SUPABASE_URL                 Base URL of the Supabase project.
SUPABASE_SERVICE_ROLE_KEY    Service-role key. SUPABASE_SERVICE_KEY is
                             accepted as a fallback name.

Configuration is read at call time rather than at import so that a missing
value fails each request cleanly instead of preventing the app from starting.
"""

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from supabase import Client, create_client

load_dotenv()

APPLICATIONS_TABLE = "applications"


def get_supabase_url() -> str:
    return (os.getenv("SUPABASE_URL") or "").strip()


def get_supabase_service_key() -> str:
    """Return the service-role key, checking the legacy variable name second."""
    return (
        os.getenv("SUPABASE_SERVICE_ROLE_KEY")
        or os.getenv("SUPABASE_SERVICE_KEY")
        or ""
    ).strip()


def is_supabase_configured() -> bool:
    return bool(get_supabase_url() and get_supabase_service_key())


@lru_cache(maxsize=4)
def _create_admin_client(url: str, key: str) -> Client:
    return create_client(url, key)


def get_supabase_admin() -> Optional[Client]:
    """
    Return the service-role client (bypasses RLS), or None when unconfigured.

    Clients are cached per (url, key) pair so repeated requests reuse the
    same underlying HTTP session.
    """
    if not is_supabase_configured():
        return None
    return _create_admin_client(get_supabase_url(), get_supabase_service_key())
