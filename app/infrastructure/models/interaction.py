"""SQLAlchemy model for interactions logged against contacts."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import local_now


class InteractionModel(Base):
    """Database representation of an email, call or meeting with a contact."""

    __tablename__ = "interaction"

    id = Column(Integer, primary_key=True, index=True)
    contact_id = Column(
        Integer,
        ForeignKey("contact.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type = Column(String(20), nullable=False)
    date = Column(DateTime, nullable=False)
    subject = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
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

    contact = relationship(
        "ContactModel", back_populates="interactions", lazy="joined"
    )


__all__ = ["InteractionModel"]
