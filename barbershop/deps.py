# barbershop/deps.py
from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import Depends, HTTPException, Request, status

from barbershop.core.config import Settings
from barbershop.services.auth import decode_access_token

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _extract_bearer_token(request: Request) -> str | None:
    header = request.headers.get("Authorization") or ""
    if not header.lower().startswith(BEARER_PREFIX):
        return None
    token = header[len(BEARER_PREFIX):].strip()
    return token or None


def require_auth(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Valida o bearer token e deixa as claims em `request.state.user`."""
    token = _extract_bearer_token(request)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="missing_token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        claims = decode_access_token(token, settings.jwt_secret)
    except ValueError:
        logger.info("rejected bearer token path=%s", request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="invalid_token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    request.state.user = claims
    return claims


def require_admin(
    request: Request,
    claims: Dict[str, Any] = Depends(require_auth),
) -> Dict[str, Any]:
    if claims.get("role") != "admin":
        logger.warning(
            "Access denied (role_denied): user_id=%s user_role=%s endpoint=%s %s",
            claims.get("sub"),
            claims.get("role"),
            request.method,
            request.url.path,
        )
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="forbidden")
    return claims
