"""SQLAlchemy model for client projects."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import local_now


class ProjectModel(Base):
    """Database representation of a project delivered for a contact."""

    __tablename__ = "project"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="IN_PROGRESS")
    client_id = Column(
        Integer,
        ForeignKey("contact.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
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

    client = relationship("ContactModel", lazy="joined")


__all__ = ["ProjectModel"]
