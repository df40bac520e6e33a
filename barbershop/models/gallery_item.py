from sqlalchemy import Boolean, Column, Integer, String, true

from barbershop.core.database import Base
from barbershop.models._base import CreatedAtMixin


class GalleryItem(CreatedAtMixin, Base):
    __tablename__ = "gallery"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    image_url = Column(String, nullable=False)
    caption = Column(String)
    active = Column(Boolean, nullable=False, default=True, server_default=true())
