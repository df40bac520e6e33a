from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import JWTError, jwt

from barbershop.core.config import JWT_ALGORITHM, JWT_EXPIRE_HOURS


# =========================
# JWT HELPERS
# =========================
def create_access_token(
    user_id: int | str,
    secret: str,
    extra: Dict[str, Any] | None = None,
    expires_hours: int = JWT_EXPIRE_HOURS,
) -> str:
    """
    "sub" precisa ser STRING (senão o jose recusa no decode com
    'Subject must be a string').
    """
    if not secret:
        raise RuntimeError("JWT_SECRET não configurado.")

    now = datetime.now(timezone.utc)
    exp = now + timedelta(hours=expires_hours)

    payload: Dict[str, Any] = {
        "sub": str(user_id),
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
    }
    if extra:
        payload.update(extra)

    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def sign_token(user, secret: str, expires_hours: int = JWT_EXPIRE_HOURS) -> str:
    return create_access_token(
        user.id,
        secret,
        extra={"role": user.role, "email": user.email},
        expires_hours=expires_hours,
    )


def decode_access_token(token: str, secret: str) -> Dict[str, Any]:
    """
    Retorna o payload do JWT ou levanta ValueError se inválido/expirado.
    """
    if not secret:
        raise ValueError("JWT_SECRET não configurado.")
    try:
        return jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        raise ValueError("Token inválido ou expirado") from e
