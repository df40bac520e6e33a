from sqlalchemy import Boolean, Column, Integer, String, Text, true

from barbershop.core.database import Base
from barbershop.models._base import CreatedAtMixin


class Service(CreatedAtMixin, Base):
    __tablename__ = "services"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    description = Column(Text)
    price_cents = Column(Integer, nullable=False, default=0, server_default="0")
    active = Column(Boolean, nullable=False, default=True, server_default=true())
