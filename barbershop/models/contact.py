from sqlalchemy import Column, Integer, String, Text

from barbershop.core.database import Base
from barbershop.models._base import CreatedAtMixin


class Contact(CreatedAtMixin, Base):
    __tablename__ = "contacts"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    message = Column(Text, nullable=False)
