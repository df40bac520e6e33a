from sqlalchemy import Column, Integer, String, Text

from barbershop.core.database import Base
from barbershop.models._base import CreatedAtMixin

APPOINTMENT_STATUSES = ("pending", "confirmed", "canceled")


class Appointment(CreatedAtMixin, Base):
    __tablename__ = "appointments"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    email = Column(String, nullable=False)
    service = Column(String)  # rótulo livre, sem FK para services
    datetime = Column(String)
    notes = Column(Text)
    status = Column(String, nullable=False, default="pending", server_default="pending")
