from sqlalchemy import Boolean, Column, Integer, String, Text, true

from barbershop.core.database import Base
from barbershop.models._base import CreatedAtMixin


class Testimonial(CreatedAtMixin, Base):
    __tablename__ = "testimonials"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    author = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False, default=5, server_default="5")
    active = Column(Boolean, nullable=False, default=True, server_default=true())
