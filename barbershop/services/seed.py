from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from barbershop.models._base import now_ms
from barbershop.models.service import Service

logger = logging.getLogger(__name__)
SEED_PREFIX = "[SEED]"

DEFAULT_SERVICES = (
    ("Corte Clássico", "Tesoura e máquina, finalização.", 4000),
    ("Barba Modelada", "Desenho e hidratação.", 3000),
    ("Corte + Barba", "Combo especial.", 7000),
)


def seed_services_if_empty(db: Session) -> int:
    """Insere o catálogo inicial apenas quando a tabela está vazia."""
    if db.query(Service.id).first() is not None:
        logger.info("%s services already present; skipping", SEED_PREFIX)
        return 0

    now = now_ms()
    for title, description, price_cents in DEFAULT_SERVICES:
        db.add(
            Service(
                title=title,
                description=description,
                price_cents=price_cents,
                active=True,
                created_at=now,
            )
        )
    db.commit()
    logger.info("%s inserted %s services", SEED_PREFIX, len(DEFAULT_SERVICES))
    return len(DEFAULT_SERVICES)
