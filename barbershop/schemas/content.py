"""Payloads das entidades do site gerenciadas pelo admin.

PUT usa o mesmo schema do POST: a atualização substitui a linha inteira,
então campos opcionais omitidos voltam a `null` e as flags ao default.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, StrictBool, StrictInt

from barbershop.schemas._types import SQLITE_INT_MAX, OptionalText, RequiredText, UrlStr


class ServicePayload(BaseModel):
    title: RequiredText
    description: OptionalText = None
    price_cents: StrictInt = Field(..., ge=0, le=SQLITE_INT_MAX)
    active: StrictBool = True


class TeamMemberPayload(BaseModel):
    name: RequiredText
    role: OptionalText = None
    photo_url: Optional[UrlStr] = None
    active: StrictBool = True


class TestimonialPayload(BaseModel):
    author: RequiredText
    content: RequiredText
    rating: StrictInt = Field(..., ge=1, le=5)
    active: StrictBool = True


class GalleryItemPayload(BaseModel):
    image_url: UrlStr
    caption: OptionalText = None
    active: StrictBool = True


class PostPayload(BaseModel):
    title: RequiredText
    excerpt: OptionalText = None
    content: OptionalText = None
    cover_url: Optional[UrlStr] = None
    published: StrictBool = False
