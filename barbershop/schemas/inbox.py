from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from barbershop.schemas._types import EmailText, OptionalText, RequiredText

AppointmentStatus = Literal["pending", "confirmed", "canceled"]


class AppointmentPayload(BaseModel):
    name: RequiredText
    phone: str = Field(..., min_length=6)
    email: EmailText
    service: OptionalText = None
    datetime: OptionalText = None
    notes: OptionalText = None


class AppointmentStatusPayload(BaseModel):
    status: AppointmentStatus


class ContactPayload(BaseModel):
    name: RequiredText
    email: EmailText
    message: RequiredText
