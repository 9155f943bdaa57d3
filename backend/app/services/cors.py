"""
CORS negotiation for the public application endpoint.

The endpoint is called from the marketing site, so the allow-origin header
echoes the exact request origin (never "*") when the origin is approved:

- https://thirty3labs.com / https://www.thirty3labs.com  (production)
- anything starting with http://localhost                (local dev)
- extra origins from the CORS_ORIGINS environment variable, as a
  comma-separated list, e.g.:
      CORS_ORIGINS=https://preview.thirty3labs.com,https://staging.thirty3labs.com

Methods and headers are always advertised, approved origin or not. POST
requests from other origins are still processed; the browser simply won't
expose the response to the caller.
"""

import os
from typing import Dict, List

PRODUCTION_ORIGINS = (
    "https://thirty3labs.com",
    "https://www.thirty3labs.com",
)

LOCAL_DEV_PREFIX = "http://localhost"

ALLOW_METHODS = "POST, OPTIONS"
ALLOW_HEADERS = "Content-Type"


def get_allowed_origins() -> List[str]:
    """Production origins plus CORS_ORIGINS extras, deduplicated in order."""
    extra_origins: List[str] = []
    cors_env = os.getenv("CORS_ORIGINS", "").strip()
    if cors_env:
        extra_origins = [o.strip() for o in cors_env.split(",") if o.strip()]

    seen: set = set()
    origins: List[str] = []
    for origin in list(PRODUCTION_ORIGINS) + extra_origins:
        if origin not in seen:
            seen.add(origin)
            origins.append(origin)

    return origins


def is_origin_allowed(origin: str) -> bool:
    if not origin:
        return False
    return origin in get_allowed_origins() or origin.startswith(LOCAL_DEV_PREFIX)


def cors_headers(origin: str) -> Dict[str, str]:
    headers = {
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
    }
    if is_origin_allowed(origin):
        headers["Access-Control-Allow-Origin"] = origin
    return headers
