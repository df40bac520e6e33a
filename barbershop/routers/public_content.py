from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from barbershop.core.database import get_db
from barbershop.models import GalleryItem, Post, Service, TeamMember, Testimonial
from barbershop.schemas._types import RowId

router = APIRouter(tags=["public"])

TESTIMONIALS_LIMIT = 12
GALLERY_LIMIT = 24
POSTS_LIMIT = 20


def _rows(query) -> list[dict]:
    return [dict(row._mapping) for row in query.all()]


@router.get("/services")
def list_services(db: Session = Depends(get_db)):
    query = (
        db.query(Service.id, Service.title, Service.description, Service.price_cents)
        .filter(Service.active.is_(True))
        .order_by(Service.id.asc())
    )
    return _rows(query)


@router.get("/team")
def list_team(db: Session = Depends(get_db)):
    query = (
        db.query(TeamMember.id, TeamMember.name, TeamMember.role, TeamMember.photo_url)
        .filter(TeamMember.active.is_(True))
        .order_by(TeamMember.id.asc())
    )
    return _rows(query)


@router.get("/testimonials")
def list_testimonials(db: Session = Depends(get_db)):
    query = (
        db.query(Testimonial.id, Testimonial.author, Testimonial.content, Testimonial.rating)
        .filter(Testimonial.active.is_(True))
        .order_by(Testimonial.id.desc())
        .limit(TESTIMONIALS_LIMIT)
    )
    return _rows(query)


@router.get("/gallery")
def list_gallery(db: Session = Depends(get_db)):
    query = (
        db.query(GalleryItem.id, GalleryItem.image_url, GalleryItem.caption)
        .filter(GalleryItem.active.is_(True))
        .order_by(GalleryItem.id.desc())
        .limit(GALLERY_LIMIT)
    )
    return _rows(query)


@router.get("/posts")
def list_posts(db: Session = Depends(get_db)):
    query = (
        db.query(Post.id, Post.title, Post.excerpt, Post.cover_url, Post.created_at)
        .filter(Post.published.is_(True))
        .order_by(Post.id.desc())
        .limit(POSTS_LIMIT)
    )
    return _rows(query)


@router.get("/posts/{post_id}")
def get_post(post_id: RowId, db: Session = Depends(get_db)):
    row = (
        db.query(Post.id, Post.title, Post.excerpt, Post.content, Post.cover_url, Post.created_at)
        .filter(Post.id == post_id, Post.published.is_(True))
        .first()
    )
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="not_found")
    return dict(row._mapping)
