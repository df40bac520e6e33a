from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from barbershop.models.user import User
from barbershop.services.passwords import hash_password

logger = logging.getLogger(__name__)
BOOTSTRAP_PREFIX = "[ADMIN_BOOTSTRAP]"
ADMIN_ROLE = "admin"


@dataclass(frozen=True)
class AdminBootstrapConfig:
    email: str
    password: str


class BootstrapResult(str, enum.Enum):
    CREATED = "created"
    EXISTS = "exists"
    SKIPPED = "skipped"


def ensure_admin_user(db: Session, config: AdminBootstrapConfig) -> BootstrapResult:
    """Cria o único admin a partir da configuração, se ainda não existir.

    Não altera um usuário existente: para trocar a senha é preciso apagar a
    linha e rodar o bootstrap de novo.
    """
    email = (config.email or "").strip()
    if not email or not config.password:
        logger.warning("%s skipped: configure ADMIN_EMAIL and ADMIN_PASSWORD.", BOOTSTRAP_PREFIX)
        return BootstrapResult.SKIPPED

    existing = db.query(User.id).filter(User.email == email).first()
    if existing:
        logger.info("%s exists id=%s email=%s", BOOTSTRAP_PREFIX, existing.id, email)
        return BootstrapResult.EXISTS

    admin = User(
        email=email,
        password_hash=hash_password(config.password),
        role=ADMIN_ROLE,
    )
    db.add(admin)
    db.commit()
    logger.info("%s created id=%s email=%s", BOOTSTRAP_PREFIX, admin.id, email)
    return BootstrapResult.CREATED
