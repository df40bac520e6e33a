from sqlalchemy import Boolean, Column, Integer, String, Text, false

from barbershop.core.database import Base
from barbershop.models._base import CreatedAtMixin


class Post(CreatedAtMixin, Base):
    __tablename__ = "posts"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    excerpt = Column(Text)
    content = Column(Text)
    cover_url = Column(String)
    published = Column(Boolean, nullable=False, default=False, server_default=false())
