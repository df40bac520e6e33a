"""Pedidos de agendamento e mensagens de contato.

As rotas públicas só inserem; leitura, mudança de status e remoção ficam
sob `/admin`.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from barbershop.core.database import get_db
from barbershop.deps import require_admin
from barbershop.models import Appointment, Contact
from barbershop.schemas._types import RowId
from barbershop.schemas.inbox import AppointmentPayload, AppointmentStatusPayload, ContactPayload
from barbershop.services.records import (
    delete_row,
    insert_row,
    list_newest_first,
    payload_values,
    replace_row,
)

router = APIRouter(tags=["inbox"])
admin_router = APIRouter(prefix="/admin", tags=["admin-inbox"], dependencies=[Depends(require_admin)])

logger = logging.getLogger(__name__)


@router.post("/appointments", status_code=status.HTTP_201_CREATED)
def create_appointment(payload: AppointmentPayload, db: Session = Depends(get_db)):
    values = {**payload_values(payload), "status": "pending"}
    appointment_id = insert_row(db, Appointment, values)
    logger.info("appointment requested id=%s", appointment_id)
    return {"id": appointment_id, "status": "pending"}


@router.post("/contact", status_code=status.HTTP_201_CREATED)
def create_contact(payload: ContactPayload, db: Session = Depends(get_db)):
    contact_id = insert_row(db, Contact, payload_values(payload))
    logger.info("contact message received id=%s", contact_id)
    return {"id": contact_id}


@admin_router.get("/appointments")
def list_appointments(db: Session = Depends(get_db)):
    return list_newest_first(db, Appointment)


@admin_router.put("/appointments/{appointment_id}/status")
def update_appointment_status(
    appointment_id: RowId,
    payload: AppointmentStatusPayload,
    db: Session = Depends(get_db),
):
    # qualquer status pode ir para qualquer outro; não há grafo de transição
    updated = replace_row(db, Appointment, appointment_id, {"status": payload.status})
    logger.info("appointment status id=%s status=%s updated=%s", appointment_id, payload.status, updated)
    return {"updated": updated}


@admin_router.delete("/appointments/{appointment_id}")
def delete_appointment(appointment_id: RowId, db: Session = Depends(get_db)):
    return {"deleted": delete_row(db, Appointment, appointment_id)}


@admin_router.get("/contacts")
def list_contacts(db: Session = Depends(get_db)):
    return list_newest_first(db, Contact)


@admin_router.delete("/contacts/{contact_id}")
def delete_contact(contact_id: RowId, db: Session = Depends(get_db)):
    return {"deleted": delete_row(db, Contact, contact_id)}
