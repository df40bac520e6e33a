from sqlalchemy import Boolean, Column, Integer, String, true

from barbershop.core.database import Base
from barbershop.models._base import CreatedAtMixin


class TeamMember(CreatedAtMixin, Base):
    __tablename__ = "team"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    role = Column(String)
    photo_url = Column(String)
    active = Column(Boolean, nullable=False, default=True, server_default=true())
