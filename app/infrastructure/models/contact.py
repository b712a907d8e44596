"""SQLAlchemy model for owner contacts."""

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import local_now


class ContactModel(Base):
    """Database representation of a client or lead."""

    __tablename__ = "contact"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    phone = Column(String(50), nullable=True)
    company = Column(String(255), nullable=True)
    position = Column(String(255), nullable=True)
    type = Column(String(20), nullable=False, default="LEAD")
    notes = Column(Text, nullable=True)
    created_at = Column(
        DateTime, nullable=False, default=local_now
    )
    updated_at = Column(
        DateTime,
        nullable=False,
        default=local_now,
        onupdate=local_now,
    )
    deleted_at = Column(DateTime, nullable=True)

    interactions = relationship(
        "InteractionModel", back_populates="contact", passive_deletes=True
    )


__all__ = ["ContactModel"]
