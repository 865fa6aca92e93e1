"""Cross-origin response headers for the HTTP API."""

from __future__ import annotations

ALLOWED_ORIGINS = frozenset(
    {
        "http://localhost:3000",
        "http://localhost:8080",
        "http://localhost:5173",
    }
)

ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS, PATCH"
ALLOW_HEADERS = (
    "Content-Type, Authorization, X-Requested-With, X-CSRF-Token, X-API-Key, "
    "Cache-Control, Pragma, Referer, User-Agent, Accept-Language, token"
)
MAX_AGE_SECONDS = 43200


def cors_headers(origin: str | None) -> dict[str, str]:
    """CORS headers for a request from ``origin``.

    A known origin is echoed back; any other origin, or none, gets ``*``.
    """
    allow_origin = origin if origin in ALLOWED_ORIGINS else "*"
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Max-Age": str(MAX_AGE_SECONDS),
    }


def is_preflight(method: str) -> bool:
    """Whether a request with ``method`` is a preflight to answer with 200 at once."""
    return method == "OPTIONS"