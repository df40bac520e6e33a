from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from barbershop.core.database import get_db
from barbershop.deps import require_admin
from barbershop.models import GalleryItem, Post, Service, TeamMember, Testimonial
from barbershop.schemas._types import RowId
from barbershop.schemas.content import (
    GalleryItemPayload,
    PostPayload,
    ServicePayload,
    TeamMemberPayload,
    TestimonialPayload,
)
from barbershop.services.records import (
    delete_row,
    insert_row,
    list_newest_first,
    payload_values,
    replace_row,
)

router = APIRouter(prefix="/admin", tags=["admin-content"], dependencies=[Depends(require_admin)])


# Serviços
@router.get("/services")
def list_services(db: Session = Depends(get_db)):
    return list_newest_first(db, Service)


@router.post("/services", status_code=status.HTTP_201_CREATED)
def create_service(payload: ServicePayload, db: Session = Depends(get_db)):
    return {"id": insert_row(db, Service, payload_values(payload))}


@router.put("/services/{service_id}")
def update_service(service_id: RowId, payload: ServicePayload, db: Session = Depends(get_db)):
    return {"updated": replace_row(db, Service, service_id, payload_values(payload))}


@router.delete("/services/{service_id}")
def delete_service(service_id: RowId, db: Session = Depends(get_db)):
    return {"deleted": delete_row(db, Service, service_id)}


# Equipe
@router.get("/team")
def list_team(db: Session = Depends(get_db)):
    return list_newest_first(db, TeamMember)


@router.post("/team", status_code=status.HTTP_201_CREATED)
def create_team_member(payload: TeamMemberPayload, db: Session = Depends(get_db)):
    return {"id": insert_row(db, TeamMember, payload_values(payload))}


@router.put("/team/{member_id}")
def update_team_member(member_id: RowId, payload: TeamMemberPayload, db: Session = Depends(get_db)):
    return {"updated": replace_row(db, TeamMember, member_id, payload_values(payload))}


@router.delete("/team/{member_id}")
def delete_team_member(member_id: RowId, db: Session = Depends(get_db)):
    return {"deleted": delete_row(db, TeamMember, member_id)}


# Depoimentos
@router.get("/testimonials")
def list_testimonials(db: Session = Depends(get_db)):
    return list_newest_first(db, Testimonial)


@router.post("/testimonials", status_code=status.HTTP_201_CREATED)
def create_testimonial(payload: TestimonialPayload, db: Session = Depends(get_db)):
    return {"id": insert_row(db, Testimonial, payload_values(payload))}


@router.put("/testimonials/{testimonial_id}")
def update_testimonial(testimonial_id: RowId, payload: TestimonialPayload, db: Session = Depends(get_db)):
    return {"updated": replace_row(db, Testimonial, testimonial_id, payload_values(payload))}


@router.delete("/testimonials/{testimonial_id}")
def delete_testimonial(testimonial_id: RowId, db: Session = Depends(get_db)):
    return {"deleted": delete_row(db, Testimonial, testimonial_id)}


# Galeria
@router.get("/gallery")
def list_gallery(db: Session = Depends(get_db)):
    return list_newest_first(db, GalleryItem)


@router.post("/gallery", status_code=status.HTTP_201_CREATED)
def create_gallery_item(payload: GalleryItemPayload, db: Session = Depends(get_db)):
    return {"id": insert_row(db, GalleryItem, payload_values(payload))}


@router.put("/gallery/{item_id}")
def update_gallery_item(item_id: RowId, payload: GalleryItemPayload, db: Session = Depends(get_db)):
    return {"updated": replace_row(db, GalleryItem, item_id, payload_values(payload))}


@router.delete("/gallery/{item_id}")
def delete_gallery_item(item_id: RowId, db: Session = Depends(get_db)):
    return {"deleted": delete_row(db, GalleryItem, item_id)}


# Posts
@router.get("/posts")
def list_posts(db: Session = Depends(get_db)):
    return list_newest_first(db, Post)


@router.post("/posts", status_code=status.HTTP_201_CREATED)
def create_post(payload: PostPayload, db: Session = Depends(get_db)):
    return {"id": insert_row(db, Post, payload_values(payload))}


@router.put("/posts/{post_id}")
def update_post(post_id: RowId, payload: PostPayload, db: Session = Depends(get_db)):
    return {"updated": replace_row(db, Post, post_id, payload_values(payload))}


@router.delete("/posts/{post_id}")
def delete_post(post_id: RowId, db: Session = Depends(get_db)):
    return {"deleted": delete_row(db, Post, post_id)}
