"""API-key authentication for the calculator routes.

The calculator is embedded by one or more client platforms (payroll
systems, law-firm portals). Each platform gets its own key, configured as
CALCULATOR_API_KEYS="platform:key,other:key2". Callers send the key in the
X-API-Key header and the matching platform name is what the routes log.
"""

from __future__ import annotations

import secrets

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from rescisao.config import settings

API_KEY_HEADER = "X-API-Key"

api_key_header = APIKeyHeader(name=API_KEY_HEADER, auto_error=False)


def _match_platform(presented: str, keys: dict[str, str]) -> str | None:
    """Platform whose key equals the presented one, compared in constant time."""
    matched = None
    for platform, key in keys.items():
        if secrets.compare_digest(presented.encode("utf-8"), key.encode("utf-8")):
            matched = platform
    return matched


async def verify_caller(api_key: str | None = Security(api_key_header)) -> str:  # noqa: B008
    """FastAPI dependency: resolve the X-API-Key header to a platform name.

    Raises 503 when no keys are configured and 401 when the header is
    missing or matches no platform.
    """
    keys = settings.security.api_keys
    if not keys:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="CALCULATOR_API_KEYS not configured",
        )

    platform = _match_platform(api_key, keys) if api_key else None
    if platform is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing API key",
            headers={"WWW-Authenticate": API_KEY_HEADER},
        )

    return platform
