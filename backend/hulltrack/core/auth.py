"""Session checks for API routes.

The identity provider sits in front of this service; all the service observes
is whether a request carries a valid key. Two keys exist: the employee key
(tasks, boat orders, schedule views) and the admin key, which also unlocks
the catalog and import endpoints. The admin key is accepted wherever the
employee key is.

When a key is not configured (empty string) its check is skipped, which
keeps local development credential-free.
"""

import secrets
from typing import Annotated

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import APIKeyHeader

from hulltrack.core.config import settings

_api_key_header = APIKeyHeader(
    name=settings.API_KEY_HEADER,
    auto_error=False,
)


def _matches(candidate: str, expected: str) -> bool:
    return bool(expected) and secrets.compare_digest(candidate, expected)


async def require_session(
    api_key: Annotated[str | None, Security(_api_key_header)] = None,
) -> str:
    """Require a valid employee or admin key.

    Raises HTTP 401 if the key is missing and HTTP 403 if it matches neither
    configured key.
    """
    if not settings.API_KEY and not settings.ADMIN_API_KEY:
        return "dev-no-auth"

    if api_key is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API key",
        )

    if _matches(api_key, settings.API_KEY) or _matches(api_key, settings.ADMIN_API_KEY):
        return api_key

    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="Invalid API key",
    )


async def require_admin(
    api_key: Annotated[str | None, Security(_api_key_header)] = None,
) -> str:
    """Require the admin key. Skipped when ADMIN_API_KEY is empty."""
    if not settings.ADMIN_API_KEY:
        return "dev-no-auth"

    if api_key is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API key",
        )

    if not _matches(api_key, settings.ADMIN_API_KEY):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )

    return api_key


RequireSession = Depends(require_session)
RequireAdmin = Depends(require_admin)
