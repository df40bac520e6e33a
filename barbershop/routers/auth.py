# barbershop/routers/auth.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from barbershop.core.config import Settings
from barbershop.core.database import get_db
from barbershop.deps import get_settings
from barbershop.models.user import User
from barbershop.schemas.auth import LoginPayload, TokenResponse
from barbershop.services.auth import sign_token
from barbershop.services.passwords import verify_password

router = APIRouter(prefix="/auth", tags=["auth"])

logger = logging.getLogger(__name__)


@router.post("/login", response_model=TokenResponse)
def login(
    payload: LoginPayload,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = db.query(User).filter(User.email == payload.email).first()
    if not user or not verify_password(payload.password, user.password_hash):
        logger.info("login rejected email=%s", payload.email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="invalid_credentials")

    token = sign_token(user, settings.jwt_secret, expires_hours=settings.jwt_expire_hours)
    logger.info("login ok user_id=%s", user.id)
    return {"token": token}
